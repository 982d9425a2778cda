# src/todo_cli/cli/commands.py

"""The todo commands: init, new, complete, list."""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator
from pathlib import Path

import typer

from .. import __version__
from ..config import Settings
from ..tasks.errors import InvalidArgument, TodoError
from .bootstrap import AppState, create_initial_state

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="todo",
    help="Keep a simple numbered todo list in a local file.",
    add_completion=False,
    no_args_is_help=True,
)


@contextlib.contextmanager
def _terminal_errors() -> Iterator[None]:
    """Report any failure as 'Error: ...' on stderr and exit with code 1."""
    try:
        yield
    except TodoError as exc:
        logger.debug("Command failed: %r", exc)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc
    except OSError as exc:
        logger.debug("Filesystem error", exc_info=True)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc


def _parse_id(raw: str) -> int:
    try:
        item_id = int(raw.strip())
    except ValueError as exc:
        raise InvalidArgument(f"item id must be a whole number, got {raw!r}") from exc
    if item_id < 1:
        raise InvalidArgument(f"item id must be 1 or greater, got {item_id}")
    return item_id


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"todo {__version__}")
        raise typer.Exit()


def _state(ctx: typer.Context) -> AppState:
    return ctx.find_root().obj


@app.callback()
def root(
    ctx: typer.Context,
    data_dir: Path | None = typer.Option(
        None,
        "--data-dir",
        help="Directory holding todo.json (default: $TODO_DATA_DIR or ~/.todo).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """Keep a simple numbered todo list in a local file."""
    settings = ctx.obj if isinstance(ctx.obj, Settings) else None
    ctx.obj = create_initial_state(settings=settings, data_dir=data_dir)


@app.command("init")
def init_storage(ctx: typer.Context):
    """Initialise storage for the todo list."""
    store = _state(ctx).task_store
    with _terminal_errors():
        store.initialize()
    typer.echo(f"Initialised todo storage at {store.path}")


@app.command("new")
def new_item(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="What needs doing."),
):
    """Add a new item to the todo list."""
    store = _state(ctx).task_store
    with _terminal_errors():
        todo_list = store.load()
        item_id = todo_list.add(text)
        store.save(todo_list)
    typer.echo(f"New item ({item_id}) added to todo list.")


@app.command("complete")
def complete_item(
    ctx: typer.Context,
    item_id: str = typer.Argument(..., metavar="ID", help="Id of the item to mark as done."),
):
    """Mark item ID as done."""
    store = _state(ctx).task_store
    with _terminal_errors():
        tid = _parse_id(item_id)
        todo_list = store.load()
        changed = todo_list.complete(tid)
        if changed:
            store.save(todo_list)
        task = todo_list.get(tid)

    if changed:
        typer.echo(f"Item {task.id} ({task.label}) completed.")
    else:
        typer.echo(f"Item {task.id} ({task.label}) is already completed.")


@app.command("list")
def list_items(
    ctx: typer.Context,
    all_items: bool = typer.Option(False, "--all", "-a", help="Include completed items."),
):
    """Print the todo list."""
    store = _state(ctx).task_store
    with _terminal_errors():
        tasks = store.load().list(all=all_items)

    typer.echo("TODO List")
    typer.echo("")
    if not tasks:
        typer.echo("Nothing to do.")
        return
    for task in tasks:
        typer.echo(task.render())
