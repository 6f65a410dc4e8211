"""
Console utilities for the lantana CLI.
"""

from __future__ import annotations

from rich.console import Console
from rich.theme import Theme


LANTANA_THEME = Theme({
    "info": "dim cyan",
    "error": "bold red",
    "success": "bold green",
    "workspace": "bold cyan",
    "key": "bold magenta",
})

# Global console instance
console = Console(theme=LANTANA_THEME)


def print_error(message: str, prefix: str = "Error") -> None:
    """Print an error message."""
    console.print(f"[error]{prefix}:[/] {message}")


def print_success(message: str, prefix: str = "Success") -> None:
    """Print a success message."""
    console.print(f"[success]{prefix}:[/] {message}")


def format_descriptor_value(value: str | list[str] | None) -> str:
    """Render a descriptor value for a table cell."""
    if value is None:
        return "[dim]-[/]"
    if isinstance(value, list):
        return ", ".join(value) if value else "[dim](empty)[/]"
    return value
