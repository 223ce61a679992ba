"""
Task record parser.

Turns a note's frontmatter block into a Task. Handles edge cases:
- Missing frontmatter: the note is not a task (read_task returns None)
- Unclosed frontmatter, invalid YAML, non-mapping YAML: TaskParseError
- Missing status, invalid dates, wrong types: TaskParseError

Uses python-frontmatter's YAML handler (PyYAML safe loader) for the block
and Pydantic for validation.
"""

import logging
from pathlib import Path
from typing import Any

import frontmatter  # type: ignore[import-untyped]
import yaml
from pydantic import ValidationError

from obsidian_tasks.core.tasks.frontmatter import MalformedFrontmatterError, extract_frontmatter
from obsidian_tasks.core.tasks.models import Task

logger = logging.getLogger(__name__)

_yaml_handler = frontmatter.YAMLHandler()


class TaskParseError(Exception):
    """A single note could not be turned into a task."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


def _describe_validation_error(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        field = ".".join(str(loc) for loc in err["loc"]) or "frontmatter"
        parts.append(f"{field}: {err['msg']}")
    return "; ".join(parts)


def parse_task(block: str, source_path: Path) -> Task:
    """
    Parse a YAML frontmatter block into a Task.

    Unknown keys are ignored and missing optional fields are left unset.

    Args:
        block: YAML text from extract_frontmatter()
        source_path: Note file the block came from

    Returns:
        Validated Task

    Raises:
        TaskParseError: If the YAML is invalid or does not describe a task
    """
    try:
        data: Any = _yaml_handler.load(block)
    except (yaml.YAMLError, ValueError) as e:
        # PyYAML raises ValueError for impossible timestamps such as 2026-02-30
        raise TaskParseError(source_path, f"invalid YAML frontmatter: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise TaskParseError(
            source_path, f"frontmatter must be a mapping, got {type(data).__name__}"
        )

    # sourcePath always comes from the file, never from the note itself
    fields = {str(k): v for k, v in data.items() if str(k) not in ("sourcePath", "source_path")}
    fields["sourcePath"] = source_path

    try:
        return Task.model_validate(fields)
    except ValidationError as e:
        raise TaskParseError(source_path, _describe_validation_error(e)) from e


def read_task(path: Path) -> Task | None:
    """
    Read a note file and parse its frontmatter into a Task.

    Args:
        path: Note file to read

    Returns:
        Task, or None if the note has no frontmatter block

    Raises:
        TaskParseError: If the file is unreadable or its frontmatter is bad
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TaskParseError(path, f"failed to read file: {e}") from e

    try:
        block = extract_frontmatter(text)
    except MalformedFrontmatterError as e:
        raise TaskParseError(path, str(e)) from e

    if block is None:
        logger.debug(f"No frontmatter in {path}, skipping")
        return None

    return parse_task(block, path)
