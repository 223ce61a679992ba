"""
obsidian-tasks CLI - Task views.

Each view command scans the vault, applies one filter and prints a JSON
array. ``count`` prints a bare number for status bars such as waybar.
"""

import logging
import os
from datetime import date
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from obsidian_tasks.cli.errors import (
    ExitCode,
    print_error,
    print_incompatible_flags_error,
    print_invalid_config_error,
    print_path_not_found_error,
)
from obsidian_tasks.core.config import VaultConfig, load_config, load_layered_env
from obsidian_tasks.core.tasks import (
    PathNotFound,
    Task,
    TaskFilter,
    apply_filter,
    collect_tasks,
    render_count,
    render_tasks,
)

console = Console()
logger = logging.getLogger(__name__)


def get_today() -> date:
    """Local calendar date used by the date-based views."""
    return date.today()


def _require_path(ctx: typer.Context) -> Path:
    path: Path | None = ctx.obj.get("path") if ctx.obj else None
    if path is None and os.environ.get("OBSIDIAN_TASKS_PATH"):
        # Set by a .env file after option parsing
        path = Path(os.environ["OBSIDIAN_TASKS_PATH"])
    if path is None:
        ctx.fail("Missing option '--path' / '-p'.")
    return path


def _load_config() -> VaultConfig:
    try:
        return load_config()
    except ValidationError as e:
        print_invalid_config_error(e)
        raise typer.Exit(ExitCode.USER_ERROR)


def _load_tasks(ctx: typer.Context) -> list[Task]:
    """
    Collect tasks for the vault given on the command line.

    Raises:
        typer.Exit: If the vault root is missing or unreadable
    """
    load_layered_env()
    path = _require_path(ctx)
    config = _load_config()

    try:
        result = collect_tasks(path, config)
    except PathNotFound as e:
        print_path_not_found_error(e.path, e.reason)
        raise typer.Exit(ExitCode.USER_ERROR)
    except KeyboardInterrupt:
        raise typer.Exit(ExitCode.SIGINT)
    except OSError as e:
        print_error(f"Failed to scan {escape(str(path))}", reason=escape(str(e)))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    if result.skipped:
        logger.info(f"Skipped {result.skipped} notes that could not be parsed")
    return result.tasks


def _show(ctx: typer.Context, task_filter: TaskFilter) -> None:
    tasks = apply_filter(_load_tasks(ctx), task_filter, get_today())
    console.out(render_tasks(tasks), highlight=False)


def all_tasks(ctx: typer.Context) -> None:
    """
    Show all tasks, done or not.

    Examples:
        obsidian-tasks --path ~/vault/TaskNotes all
    """
    _show(ctx, TaskFilter.ALL)


def today(ctx: typer.Context) -> None:
    """
    Show open tasks due today.

    Examples:
        obsidian-tasks --path ~/vault/TaskNotes today
    """
    _show(ctx, TaskFilter.TODAY)


def overdue(ctx: typer.Context) -> None:
    """Show open tasks whose due date has passed."""
    _show(ctx, TaskFilter.OVERDUE)


def pending(ctx: typer.Context) -> None:
    """Show every task that is not done."""
    _show(ctx, TaskFilter.PENDING)


def completed_today(ctx: typer.Context) -> None:
    """Show tasks with today's completedDate."""
    _show(ctx, TaskFilter.COMPLETED_TODAY)


def count(
    ctx: typer.Context,
    due_today: bool = typer.Option(
        False,
        "--today",
        help="Count open tasks due today",
    ),
    is_overdue: bool = typer.Option(
        False,
        "--overdue",
        help="Count open overdue tasks",
    ),
    done_today: bool = typer.Option(
        False,
        "--completed-today",
        help="Count tasks completed today",
    ),
) -> None:
    """
    Print a task count (for waybar and other status bars).

    Without a flag, counts pending tasks.

    Examples:
        obsidian-tasks --path ~/vault/TaskNotes count
        obsidian-tasks --path ~/vault/TaskNotes count --overdue
    """
    selected = {
        "--today": (due_today, TaskFilter.TODAY),
        "--overdue": (is_overdue, TaskFilter.OVERDUE),
        "--completed-today": (done_today, TaskFilter.COMPLETED_TODAY),
    }
    flags = [flag for flag, (enabled, _) in selected.items() if enabled]
    if len(flags) > 1:
        print_incompatible_flags_error(flags)
        raise typer.Exit(ExitCode.USER_ERROR)

    task_filter = selected[flags[0]][1] if flags else TaskFilter.PENDING
    tasks = apply_filter(_load_tasks(ctx), task_filter, get_today())
    console.out(render_count(len(tasks)), highlight=False)
