"""
Standardized error handling and exit codes for the obsidian-tasks CLI.

Errors are printed to stderr so that stdout only ever carries the JSON
array or the count a status bar reads.
"""

from enum import IntEnum
from pathlib import Path

from rich.console import Console
from rich.markup import escape

err_console = Console(stderr=True)


class ExitCode(IntEnum):
    """Standard exit codes for obsidian-tasks."""

    SUCCESS = 0
    """Operation completed successfully."""

    GENERAL_ERROR = 1
    """Unexpected error."""

    USER_ERROR = 2
    """Bad arguments, bad configuration or a missing vault (actionable by user)."""

    SIGINT = 130
    """Terminated by SIGINT (Ctrl+C) - Unix standard."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Vault path not found: ~/notes/Tasks",
        ...     reason="The --path directory must exist",
        ...     solution="obsidian-tasks --path ~/vault/TaskNotes pending",
        ... )
    """
    err_console.print(f"[red]Error:[/red] {problem}", highlight=False)

    if reason:
        err_console.print(f"[dim]{reason}[/dim]", highlight=False)

    if solution:
        err_console.print(f"[cyan]→ Try:[/cyan] {solution}", highlight=False)


def print_path_not_found_error(path: Path, reason: str) -> None:
    """Print error when the vault root cannot be scanned."""
    print_error(
        f"Vault path {reason}: {escape(str(path))}",
        reason="--path must point to an existing, readable directory of task notes",
        solution="obsidian-tasks --path /path/to/vault/TaskNotes pending",
    )


def print_incompatible_flags_error(flags: list[str]) -> None:
    """Print error when mutually exclusive CLI flags are used together."""
    print_error(
        f"Cannot use {' with '.join(flags)}",
        solution=f"Pass only one of: {', '.join(flags)}",
    )


def print_invalid_config_error(error: Exception) -> None:
    """Print error when the merged configuration fails validation."""
    print_error(
        "Invalid obsidian-tasks configuration",
        reason=escape(str(error)),
        solution="Check ~/.config/obsidian-tasks/config.json and OBSIDIAN_TASKS_* variables",
    )


__all__ = [
    "ExitCode",
    "err_console",
    "print_error",
    "print_incompatible_flags_error",
    "print_invalid_config_error",
    "print_path_not_found_error",
]
