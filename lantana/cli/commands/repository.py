"""
Repository commands for the lantana CLI.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.panel import Panel
from rich.table import Table

from lantana.cli.ui.console import console, format_descriptor_value, print_error
from lantana.core.repository import Repository
from lantana.exceptions import RepositoryError
from lantana.models.config import LantanaConfig
from lantana.models.credentials import GuestCredentials, SimpleCredentials
from lantana.transport.davex import HttpTransport


def load_config(
    config_file: str | None,
    server_url: str | None = None,
    user_id: str | None = None,
    password: str | None = None,
    workspace: str | None = None,
) -> LantanaConfig:
    """Load configuration and apply command line overrides."""
    config = LantanaConfig.load(config_file)
    if server_url:
        config.transport.server_url = server_url.rstrip("/")
    if user_id:
        config.credentials.user_id = user_id
    if password:
        config.credentials.password = password
    if workspace:
        config.credentials.workspace = workspace
    return config


def build_repository(config: LantanaConfig) -> Repository:
    """Create a repository talking HTTP to the configured server."""
    transport = HttpTransport(config.transport)
    return Repository(transport=transport, options=config.repository)


def build_credentials(config: LantanaConfig) -> SimpleCredentials | GuestCredentials:
    if not config.credentials.user_id:
        return GuestCredentials()
    password = config.credentials.password
    if password is None:
        password = typer.prompt("Password", hide_input=True)
    return SimpleCredentials(user_id=config.credentials.user_id, password=password)


def login(
    config_file: Optional[str] = typer.Option(None, "--config", "-c", help="Configuration file"),
    server_url: Optional[str] = typer.Option(None, "--server", "-s", help="Repository server URL"),
    user_id: Optional[str] = typer.Option(None, "--user", "-u", help="User id"),
    password: Optional[str] = typer.Option(None, "--password", "-p", help="Password"),
    workspace: Optional[str] = typer.Option(None, "--workspace", "-w", help="Workspace name"),
):
    """Log into a workspace and show the resulting session."""
    config = load_config(config_file, server_url, user_id, password, workspace)
    repository = build_repository(config)

    with repository.transport:
        _show_login(repository, config)


def _show_login(repository: Repository, config: LantanaConfig) -> None:
    try:
        session = repository.login(build_credentials(config), config.credentials.workspace)
    except RepositoryError as e:
        print_error(e.message, prefix=type(e).__name__)
        raise typer.Exit(1)

    workspace_obj = session.get_workspace()
    console.print(
        Panel.fit(
            f"[bold]Workspace:[/] [workspace]{workspace_obj.name}[/]\n"
            f"[bold]User:[/] {session.get_user_id() or 'anonymous'}\n"
            f"[bold]Session:[/] {session.session_id}\n"
            f"[bold]Transactions:[/] "
            f"{'enabled' if workspace_obj.has_transaction_manager else 'disabled'}",
            title="[bold green]Logged in[/]",
        )
    )
    session.logout()


def descriptors(
    key: Optional[str] = typer.Argument(None, help="Show only this descriptor"),
    config_file: Optional[str] = typer.Option(None, "--config", "-c", help="Configuration file"),
    server_url: Optional[str] = typer.Option(None, "--server", "-s", help="Repository server URL"),
    standard_only: bool = typer.Option(
        False, "--standard", help="Only list standard descriptors"
    ),
):
    """List the repository descriptors."""
    config = load_config(config_file, server_url)
    repository = build_repository(config)

    with repository.transport:
        _show_descriptors(repository, key, standard_only)


def _show_descriptors(repository: Repository, key: str | None, standard_only: bool) -> None:
    try:
        if key is not None:
            value = repository.get_descriptor(key)
            if value is None:
                print_error(f"descriptor '{key}' is not reported by the repository")
                raise typer.Exit(1)
            console.print(format_descriptor_value(value))
            return

        keys = repository.get_descriptor_keys()
    except RepositoryError as e:
        print_error(e.message, prefix=type(e).__name__)
        raise typer.Exit(1)

    table = Table(title="Repository Descriptors", show_header=True)
    table.add_column("Key", style="key")
    table.add_column("Value")
    table.add_column("Standard", justify="center")

    for descriptor_key in keys:
        standard = repository.is_standard_descriptor(descriptor_key)
        if standard_only and not standard:
            continue
        table.add_row(
            descriptor_key,
            format_descriptor_value(repository.get_descriptor(descriptor_key)),
            "[green]yes[/]" if standard else "[dim]no[/]",
        )

    console.print(table)
