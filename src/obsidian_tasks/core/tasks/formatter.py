"""
Output rendering for task views.

List views are a JSON array with one object per task; unset optional
fields are written as null. Counts are a bare integer for status bars.
"""

import json
from collections.abc import Iterable

from obsidian_tasks.core.tasks.models import Task


def render_tasks(tasks: Iterable[Task]) -> str:
    """Render tasks as a pretty-printed JSON array."""
    return json.dumps([task.to_output_dict() for task in tasks], indent=2, ensure_ascii=False)


def render_count(count: int) -> str:
    """Render a task count as plain text."""
    return str(count)
