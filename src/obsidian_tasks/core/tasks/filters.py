"""
Task filters.

Each view is a pure predicate over a task and the current date. Done tasks
only show up in the ``all`` and ``completed-today`` views.
"""

from collections.abc import Callable, Iterable
from datetime import date
from enum import Enum

from obsidian_tasks.core.tasks.models import Task


class TaskFilter(str, Enum):
    """Named task views."""

    ALL = "all"
    PENDING = "pending"
    TODAY = "today"
    OVERDUE = "overdue"
    COMPLETED_TODAY = "completed-today"


def is_pending(task: Task, today: date) -> bool:
    return not task.is_done


def is_due_today(task: Task, today: date) -> bool:
    return not task.is_done and task.is_due_on(today)


def is_overdue(task: Task, today: date) -> bool:
    return not task.is_done and task.is_due_before(today)


def is_completed_today(task: Task, today: date) -> bool:
    # completedDate is informational, status is not checked
    return task.is_completed_on(today)


PREDICATES: dict[TaskFilter, Callable[[Task, date], bool]] = {
    TaskFilter.ALL: lambda task, today: True,
    TaskFilter.PENDING: is_pending,
    TaskFilter.TODAY: is_due_today,
    TaskFilter.OVERDUE: is_overdue,
    TaskFilter.COMPLETED_TODAY: is_completed_today,
}


def matches(task: Task, task_filter: TaskFilter, today: date) -> bool:
    """Check whether a task belongs to the given view."""
    return PREDICATES[task_filter](task, today)


def apply_filter(tasks: Iterable[Task], task_filter: TaskFilter, today: date) -> list[Task]:
    """
    Select the tasks in a view, keeping their original order.

    Args:
        tasks: Tasks collected from the vault
        task_filter: View to apply
        today: Local calendar date to compare due dates against

    Returns:
        Matching tasks
    """
    predicate = PREDICATES[task_filter]
    return [task for task in tasks if predicate(task, today)]
