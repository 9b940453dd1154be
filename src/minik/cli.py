"""Command line entry point for Minik."""

from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import replace
from functools import wraps
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

import click

from minik.auth import get_token
from minik.config import ConfigError, Settings, load_settings
from minik.github import BoardClient, GitHubError
from minik.logging import setup_logging
from minik.state_store import PreferenceStore, StateStoreError

if TYPE_CHECKING:
    from minik.github import BoardData, Item

F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(func: F) -> F:
    """Print core errors verbatim and exit 1."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (GitHubError, StateStoreError, ConfigError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

    return wrapper  # type: ignore[return-value]


def _board_client(settings: Settings) -> BoardClient:
    return BoardClient.from_settings(settings, get_token())


def _format_item(item: Item) -> str:
    line = f"  - {item.title} [{item.id}]"
    if item.assignees:
        line += " @" + ", @".join(item.assignees)
    if item.labels:
        line += " (" + ", ".join(item.labels) + ")"
    return line


def _print_board(data: BoardData, only_user: str | None) -> None:
    click.echo(f"{data.board.title} (#{data.board.number}) {data.board.url}")
    if not data.columns:
        click.echo("  This board has no status field.")

    if only_user is not None:
        data = replace(data, items=data.items_assigned_to(only_user))

    for column in data.visible_columns():
        items = data.items_in(column.id)
        click.echo(f"\n{column.name} ({len(items)})")
        for item in items:
            click.echo(_format_item(item))

    unclassified = data.items_in("")
    if unclassified:
        click.echo(f"\nNo status ({len(unclassified)})")
        for item in unclassified:
            click.echo(_format_item(item))


@click.group()
@click.version_option(package_name="minik")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="Path to minik.yaml (auto-detected if not specified)",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """Minik - kanban view over GitHub Projects v2 boards."""
    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    setup_logging(
        log_dir=settings.log_dir,
        level="DEBUG" if verbose else settings.log_level,
        console=verbose,
    )
    ctx.obj = settings


@main.command()
@click.pass_obj
@handle_errors
def orgs(settings: Settings) -> None:
    """List your organizations."""
    with _board_client(settings) as client:
        for org in client.list_organizations():
            click.echo(f"{org.login}\t{org.name or ''}")


@main.command()
@click.option("--org", "login", help="Only list boards of this organization")
@click.pass_obj
@handle_errors
def boards(settings: Settings, login: str | None) -> None:
    """List boards, grouped by organization."""
    with _board_client(settings) as client:
        if login:
            grouped = {login: client.list_boards_for_organization(login)}
        else:
            grouped = client.list_all_boards()

    for org_login, org_boards in grouped.items():
        if not org_boards:
            continue
        click.echo(org_login)
        for board in org_boards:
            click.echo(f"  #{board.number}\t{board.title}\t{board.id}")


@main.command()
@click.argument("board_id")
@click.pass_obj
@handle_errors
def select(settings: Settings, board_id: str) -> None:
    """Select the board shown by default."""
    store = PreferenceStore(settings.db_path)
    try:
        hidden = store.select_board(board_id)
    finally:
        store.close()
    click.echo(f"Selected {board_id} ({len(hidden)} hidden columns)")


@main.command()
@click.argument("board_id", required=False)
@click.option("--mine", is_flag=True, help="Only show items assigned to you")
@click.pass_obj
@handle_errors
def board(settings: Settings, board_id: str | None, mine: bool) -> None:
    """Show a board (the selected one by default)."""
    store = PreferenceStore(settings.db_path)
    try:
        board_id = board_id or store.require_selected_board()
        with _board_client(settings) as client:
            data = client.fetch_board(board_id)
            user = client.current_user() if mine else None
        data = data.with_hidden_columns(store.hidden_columns(board_id))
        store.remember_status_field(board_id, data.status_field_id)
    finally:
        store.close()
    _print_board(data, user)


@main.command()
@click.argument("board_id")
@click.argument("item_id")
@click.argument("column_id")
@click.option("--field-id", help="Status field ID (defaults to the one from the last fetch)")
@click.pass_obj
@handle_errors
def move(
    settings: Settings, board_id: str, item_id: str, column_id: str, field_id: str | None
) -> None:
    """Move an item to another column."""
    store = PreferenceStore(settings.db_path)
    try:
        with _board_client(settings) as client:
            field_id = field_id or store.status_field(board_id)
            if not field_id:
                # Never fetched here before: learn the status field first
                field_id = client.fetch_board(board_id).status_field_id
                store.remember_status_field(board_id, field_id)
            client.move_item(board_id, item_id, field_id, column_id)
    finally:
        store.close()
    click.echo(f"Moved {item_id} to {column_id}")


@main.command()
@click.argument("board_id")
@click.argument("column_id")
@click.pass_obj
@handle_errors
def hide(settings: Settings, board_id: str, column_id: str) -> None:
    """Hide a column on a board."""
    store = PreferenceStore(settings.db_path)
    try:
        hidden = store.hide_column(board_id, column_id)
    finally:
        store.close()
    click.echo(f"Hidden columns: {', '.join(hidden)}")


@main.command()
@click.argument("board_id")
@click.argument("column_id")
@click.pass_obj
@handle_errors
def show(settings: Settings, board_id: str, column_id: str) -> None:
    """Show a hidden column again."""
    store = PreferenceStore(settings.db_path)
    try:
        hidden = store.show_column(board_id, column_id)
    finally:
        store.close()
    click.echo(f"Hidden columns: {', '.join(hidden) if hidden else '(none)'}")


@main.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
@click.pass_obj
def serve(settings: Settings, host: str, port: int) -> None:
    """Run the REST API."""
    import uvicorn  # noqa: PLC0415

    from minik.api import create_app  # noqa: PLC0415

    uvicorn.run(create_app(settings), host=host, port=port)


if __name__ == "__main__":
    main()
