"""
Task reading and filtering for Obsidian vaults.

Pipeline: walk_vault -> extract_frontmatter -> parse_task -> apply_filter
-> render_tasks / render_count. collect_tasks runs the first three steps.
"""

from obsidian_tasks.core.tasks.collector import CollectResult, collect_tasks
from obsidian_tasks.core.tasks.filters import TaskFilter, apply_filter, matches
from obsidian_tasks.core.tasks.formatter import render_count, render_tasks
from obsidian_tasks.core.tasks.frontmatter import MalformedFrontmatterError, extract_frontmatter
from obsidian_tasks.core.tasks.models import DONE_STATUS, Task
from obsidian_tasks.core.tasks.parser import TaskParseError, parse_task, read_task
from obsidian_tasks.core.tasks.walker import PathNotFound, vault_roots, walk_vault

__all__ = [
    "CollectResult",
    "DONE_STATUS",
    "MalformedFrontmatterError",
    "PathNotFound",
    "Task",
    "TaskFilter",
    "TaskParseError",
    "apply_filter",
    "collect_tasks",
    "extract_frontmatter",
    "matches",
    "parse_task",
    "read_task",
    "render_count",
    "render_tasks",
    "vault_roots",
    "walk_vault",
]
