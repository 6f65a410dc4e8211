"""
CLI package for lantana.

Provides a rich command-line interface using Typer.
"""

from lantana.cli.app import app, main

__all__ = ["app", "main"]
