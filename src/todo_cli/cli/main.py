"""
CLI commands for todo-cli.

Each invocation loads the store, runs one command and saves the list again
if the command changed it.
"""

import logging
from typing import NoReturn, Optional, Union

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..config import get_settings
from ..errors import StoreError, TodoError
from ..models import TaskList
from ..task_store import TaskStore
from ..utils.daily_logger import get_daily_logger, setup_daily_logger

app = typer.Typer(name="todo-cli", help="A simple task manager.", no_args_is_help=True)
console = Console(highlight=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)

logger = get_daily_logger("cli")


def _fail(error: Union[Exception, str]) -> NoReturn:
    err_console.print(f"[red]❌ {escape(str(error))}[/red]")
    raise typer.Exit(1)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"todo-cli {__version__}")
        raise typer.Exit()


def _load(store: TaskStore) -> TaskList:
    try:
        store.initialize()
        return store.load()
    except StoreError as e:
        _fail(e)


def _save(store: TaskStore, tasks: TaskList) -> None:
    if not tasks.changed:
        logger.debug("Task list unchanged; not saving %s", store.path)
        return
    try:
        store.save(tasks)
    except StoreError as e:
        _fail(e)


def _open_store(ctx: typer.Context) -> TaskStore:
    """Read settings, start logging and return the store for this invocation."""
    try:
        settings = get_settings()
    except ValidationError as e:
        _fail(f"Invalid configuration: {e}")

    try:
        setup_daily_logger(
            "cli",
            log_dir=settings.log_dir,
            level=getattr(logging, settings.log_level),
            to_file=settings.log_to_file,
        )
    except OSError as e:
        _fail(f"Cannot set up logging in {settings.log_dir}: {e}")

    logger.debug("Running %s with store %s", ctx.info_name, settings.store_path)
    return TaskStore(settings.store_path)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
):
    """A simple task manager."""


@app.command()
def add(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Task text"),
):
    """Add a new task."""
    store = _open_store(ctx)
    tasks = _load(store)
    tasks.add(title)
    _save(store, tasks)
    console.print(f"✅ Task '{escape(title)}' added.")


@app.command("list")
def list_tasks(ctx: typer.Context):
    """Show all tasks."""
    store = _open_store(ctx)
    tasks = _load(store)

    if len(tasks) == 0:
        console.print("📝 The task list is empty.")
    else:
        console.print("📋 Tasks:")
        for task in tasks.list():
            console.print(escape(task.format()))

    _save(store, tasks)


@app.command()
def done(
    ctx: typer.Context,
    index: int = typer.Argument(..., help="Task index"),
):
    """Mark a task as done."""
    store = _open_store(ctx)
    tasks = _load(store)
    try:
        task = tasks.mark_done(index)
    except TodoError as e:
        _fail(e)
    _save(store, tasks)
    console.print(f"🎉 Task '{escape(task.title)}' completed.")


@app.command()
def remove(
    ctx: typer.Context,
    index: int = typer.Argument(..., help="Task index"),
):
    """Remove a task and renumber the rest."""
    store = _open_store(ctx)
    tasks = _load(store)
    try:
        tasks.remove(index)
    except TodoError as e:
        _fail(e)
    _save(store, tasks)

    console.print(f"🗑️ Task with index {index} removed.")
    if len(tasks):
        console.print(f"🔄 Indices recalculated: tasks are now numbered 1 to {len(tasks)}.")


@app.command()
def clear(ctx: typer.Context):
    """Delete all tasks."""
    store = _open_store(ctx)
    tasks = _load(store)
    tasks.clear()
    _save(store, tasks)
    console.print("🗑️ Task list cleared.")


if __name__ == "__main__":
    app()
