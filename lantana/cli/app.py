"""
Main CLI application.

This module defines the main Typer application and entry point.
"""

from __future__ import annotations

import os
from typing import Optional

import typer

from lantana import __version__
from lantana.cli.commands import config, repository
from lantana.cli.ui.console import console
from lantana.models.config import LantanaConfig
from lantana.utils.logger import setup_logging

app = typer.Typer(
    name="lantana",
    help="Content repository client",
    add_completion=True,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

app.add_typer(config.app, name="config", help="Configuration management")
app.command("login")(repository.login)
app.command("descriptors")(repository.descriptors)


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]lantana[/] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    config_file: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file holding the logging settings",
    ),
):
    """
    lantana - content repository client

    Log into repository workspaces and inspect repository descriptors.
    """
    if no_color:
        os.environ["NO_COLOR"] = "1"

    logging_config = LantanaConfig.load(config_file).logging
    level = logging_config.level
    if debug:
        level = "debug"
    elif quiet:
        level = "error"

    setup_logging(level, logging_config.file, logging_config.json_format)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
