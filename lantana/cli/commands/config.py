"""
Configuration commands for the lantana CLI.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.panel import Panel

from lantana.cli.ui.console import console, print_error, print_success
from lantana.models.config import LantanaConfig

app = typer.Typer(help="Configuration management")


@app.command("show")
def config_show(
    config_file: Optional[str] = typer.Option(None, "--config", "-c", help="Configuration file"),
):
    """Show current configuration."""
    try:
        config = LantanaConfig.load(config_file)
    except Exception as e:
        print_error(f"Error loading config: {e}")
        raise typer.Exit(1)

    console.print(
        Panel.fit(
            f"[bold]Transport:[/]\n"
            f"  Server: {config.transport.server_url}\n"
            f"  Timeout: {config.transport.timeout}s\n"
            f"  Retries: {config.transport.max_retries}\n"
            f"\n[bold]Repository:[/]\n"
            f"  Transactions: {config.repository.transactions}\n"
            f"  Stream Wrapper: {config.repository.stream_wrapper}\n"
            f"\n[bold]Credentials:[/]\n"
            f"  User: {config.credentials.user_id or '[dim]anonymous[/]'}\n"
            f"  Password: {'Set' if config.credentials.password else '[red]Not Set[/]'}\n"
            f"  Workspace: {config.credentials.workspace or 'default'}\n"
            f"\n[bold]Logging:[/]\n"
            f"  Level: {config.logging.level}",
            title="[bold blue]lantana Configuration[/]",
        )
    )


def init_config(config_file: str, force: bool = False) -> None:
    """Write a configuration file with default values."""
    config_path = Path(config_file)

    if config_path.exists() and not force:
        overwrite = typer.confirm(f"{config_file} already exists. Overwrite?")
        if not overwrite:
            console.print("[yellow]Cancelled[/]")
            return

    LantanaConfig().save(config_path)

    print_success(f"Configuration saved to {config_file}")
    console.print("\n[bold]Next steps:[/]")
    console.print("1. Point transport.server_url at your repository server")
    console.print("2. Check the connection:")
    console.print("   [dim]lantana login --user admin[/]")


@app.command("init")
def config_init(
    config_file: str = typer.Option("lantana.yaml", "--config", "-c", help="Configuration file path"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite without asking"),
):
    """Create a default configuration file."""
    init_config(config_file, force=force)
