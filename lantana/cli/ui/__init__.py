"""
CLI UI components for lantana.
"""

from lantana.cli.ui.console import (
    console,
    print_error,
    print_success,
    format_descriptor_value,
)

__all__ = [
    "console",
    "print_error",
    "print_success",
    "format_descriptor_value",
]
