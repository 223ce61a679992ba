"""
Task data models for obsidian-tasks.

Defines the Task model built from a note's YAML frontmatter. Field names
follow the TaskNotes plugin (``dateCreated``, ``completedDate``,
``taskSourceType``) through aliases, while Python code uses snake_case.
"""

from datetime import date, datetime, time
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# The only status with special meaning. Everything else is an open label.
DONE_STATUS = "done"


def _coerce_date(v: Any) -> Any:
    """Reduce datetimes and ISO date strings to their calendar date."""
    if v is None:
        return None
    if isinstance(v, (bool, int, float)):
        raise ValueError(f"expected a date, got {v!r}")
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, str):
        v = v.strip()
        if not v:
            return None
        # Only ISO forms; pydantic would read "86400" as a Unix timestamp
        try:
            if len(v) == 10:
                return datetime.strptime(v, "%Y-%m-%d").date()
            # "2026-01-30T09:00:00+01:00" or "2026-01-30 09:00"
            if len(v) > 10 and v[10] in ("T", " "):
                return datetime.fromisoformat(v.replace("Z", "+00:00")).date()
        except ValueError as e:
            raise ValueError(f"invalid date value '{v}'") from e
        raise ValueError(f"invalid date value '{v}'")
    return v


def _coerce_timestamp(v: Any) -> Any:
    """Parse an ISO timestamp, accepting a bare date as midnight."""
    if v is None:
        return None
    if isinstance(v, (bool, int, float)):
        raise ValueError(f"expected a timestamp, got {v!r}")
    if isinstance(v, datetime):
        return v
    if isinstance(v, date):
        return datetime.combine(v, time.min)
    if isinstance(v, str):
        v = v.strip()
        if not v:
            return None
        if len(v) < 10 or v[4] != "-":
            raise ValueError(f"invalid timestamp '{v}'")
        try:
            return datetime.fromisoformat(v.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"invalid timestamp '{v}'") from e
    return v


class Task(BaseModel):
    """
    A task read from one note in the vault.

    Example:
        >>> task = Task(status="todo", due=date(2026, 1, 30), source_path=Path("a.md"))
        >>> task.is_due_on(date(2026, 1, 30))
        True
        >>> task.is_done
        False
    """

    status: str = Field(..., description="Task status (open vocabulary, 'done' is special)")
    priority: str | None = Field(default=None, description="Free-form priority label")
    date_created: datetime | None = Field(
        default=None, alias="dateCreated", description="When the task note was created"
    )
    due: date | None = Field(default=None, description="Due date (calendar date only)")
    completed_date: date | None = Field(
        default=None, alias="completedDate", description="When the task was completed"
    )
    tags: list[str] = Field(default_factory=list, description="Task tags")
    projects: list[str] = Field(
        default_factory=list,
        description="Project references, wiki-links kept verbatim",
    )
    task_source_type: str | None = Field(
        default=None, alias="taskSourceType", description="Origin of the task note"
    )
    source_path: Path = Field(
        ..., alias="sourcePath", description="Note file the task was read from"
    )

    model_config = ConfigDict(
        populate_by_name=True,  # Allow both 'completed_date' and 'completedDate'
        coerce_numbers_to_str=True,  # priority: 1
        frozen=True,
    )

    @field_validator("due", "completed_date", mode="before")
    @classmethod
    def validate_date(cls, v: Any) -> Any:
        """Drop any time-of-day or offset and treat blanks as unset."""
        return _coerce_date(v)

    @field_validator("date_created", mode="before")
    @classmethod
    def validate_date_created(cls, v: Any) -> Any:
        """Accept a bare date as midnight, treat blanks as unset."""
        return _coerce_timestamp(v)

    @field_validator("tags", "projects", mode="before")
    @classmethod
    def validate_string_list(cls, v: Any) -> Any:
        """Allow a single scalar or an empty key where a list is expected."""
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v

    @property
    def is_done(self) -> bool:
        """True only for the exact status 'done'."""
        return self.status == DONE_STATUS

    def is_due_on(self, day: date) -> bool:
        """Check if the task is due on ``day``."""
        return self.due is not None and self.due == day

    def is_due_before(self, day: date) -> bool:
        """Check if the task's due date is strictly before ``day``."""
        return self.due is not None and self.due < day

    def is_completed_on(self, day: date) -> bool:
        """Check if the task records completion on ``day``."""
        return self.completed_date is not None and self.completed_date == day

    def to_output_dict(self) -> dict[str, Any]:
        """
        Convert the task to a JSON-ready dictionary.

        Keys use the frontmatter names (``dateCreated``, ``sourcePath``...),
        and unset optional fields are kept as ``None``.
        """
        return self.model_dump(mode="json", by_alias=True)
