"""
obsidian-tasks CLI - Main application entry point.

This module sets up the Typer CLI application with all subcommands.
"""

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console

from obsidian_tasks import __version__
from obsidian_tasks.cli import tasks
from obsidian_tasks.cli.argv import preprocess_argv
from obsidian_tasks.cli.errors import ExitCode

# Help panel names for command grouping
PANEL_VIEWS = "Task Views"
PANEL_STATUS = "Status Bar"

app = typer.Typer(
    name="obsidian-tasks",
    help="Parse and filter tasks from Obsidian TaskNotes",
    no_args_is_help=False,
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for all commands.

    Diagnostics always go to stderr so stdout stays machine-readable.

    Args:
        debug: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


@app.callback()
def main(
    ctx: typer.Context,
    path: Path | None = typer.Option(
        None,
        "--path",
        "-p",
        envvar="OBSIDIAN_TASKS_PATH",
        help="Path to your Obsidian vault's TaskNotes folder",
        show_default=False,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
) -> None:
    """
    obsidian-tasks - task views over an Obsidian vault.

    Reads the YAML frontmatter of every note under --path and prints the
    matching tasks as JSON, or a bare count for status bars.

    Examples:
        obsidian-tasks --path ~/vault/TaskNotes today
        obsidian-tasks --path ~/vault/TaskNotes count --overdue
    """
    setup_logging(debug)

    # Store options in context for subcommands
    ctx.obj = {"path": path, "debug": debug}


# =============================================================================
# Task Views
# =============================================================================

app.command(name="all", rich_help_panel=PANEL_VIEWS)(tasks.all_tasks)
app.command(name="today", rich_help_panel=PANEL_VIEWS)(tasks.today)
app.command(name="overdue", rich_help_panel=PANEL_VIEWS)(tasks.overdue)
app.command(name="pending", rich_help_panel=PANEL_VIEWS)(tasks.pending)
app.command(name="completed-today", rich_help_panel=PANEL_VIEWS)(tasks.completed_today)


# =============================================================================
# Status Bar
# =============================================================================

app.command(name="count", rich_help_panel=PANEL_STATUS)(tasks.count)


@app.command()
def version() -> None:
    """Show obsidian-tasks version and exit."""
    console.print(f"obsidian-tasks version {__version__}")
    raise typer.Exit(ExitCode.SUCCESS)


def cli_main() -> None:
    """
    Main CLI entry point.

    Normalizes argv, then runs the Typer app. .env files are read by the
    commands themselves, once the command line has been validated.
    """
    sys.argv[1:] = preprocess_argv(sys.argv[1:])
    app()


__all__ = ["app", "cli_main"]
