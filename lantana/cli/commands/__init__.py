"""CLI commands package."""

from lantana.cli.commands import config, repository

__all__ = ["config", "repository"]
