"""
Pytest configuration and shared fixtures.

Provides temporary vaults with task notes and isolates tests from the
user's config files and OBSIDIAN_TASKS_* environment.
"""

from collections.abc import Callable
from pathlib import Path

import pytest

NoteWriter = Callable[..., Path]


def task_note(body: str = "# Task\n", **fields: str) -> str:
    """Build note text with a frontmatter block from raw YAML values."""
    lines = ["---", *(f"{key}: {value}" for key, value in fields.items()), "---"]
    return "\n".join(lines) + "\n" + body


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real config files and env vars out of every test."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg-config"))
    for var in (
        "OBSIDIAN_TASKS_PATH",
        "OBSIDIAN_TASKS_EXTENSIONS",
        "OBSIDIAN_TASKS_INCLUDE_ARCHIVE",
        "OBSIDIAN_TASKS_ARCHIVE_DIR",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    """Provide an empty vault directory."""
    vault_dir = tmp_path / "TaskNotes"
    vault_dir.mkdir()
    return vault_dir


@pytest.fixture
def write_note(vault: Path) -> NoteWriter:
    """Return a helper that writes a note into the vault."""

    def _write(
        name: str, text: str | None = None, root: Path | None = None, **fields: str
    ) -> Path:
        """Write raw text, or build the frontmatter from keyword fields."""
        if text is None:
            text = task_note(**fields)
        path = (root or vault) / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_vault(vault: Path, write_note: NoteWriter) -> Path:
    """
    Vault from the reference example.

    Creates:
    - a.md: todo, due 2026-01-30
    - b.md: done, due 2026-01-29
    """
    write_note("a.md", task_note(status="todo", due="2026-01-30", priority="medium"))
    write_note("b.md", task_note(status="done", due="2026-01-29", completedDate="2026-01-30"))
    return vault


@pytest.fixture
def mixed_vault(vault: Path, write_note: NoteWriter) -> Path:
    """
    Vault with one note per interesting case.

    Creates:
    - due-today.md, overdue.md, future.md, no-due.md: open tasks
    - done-today.md: done task due today
    - plain.md: note without frontmatter
    - bad-date.md: task with an invalid due date
    """
    write_note("due-today.md", task_note(status="todo", due="2026-01-30"))
    write_note("overdue.md", task_note(status="in-progress", due="2026-01-15"))
    write_note("future.md", task_note(status="todo", due="2026-02-10"))
    write_note("no-due.md", task_note(status="todo"))
    write_note("done-today.md", task_note(status="done", due="2026-01-30"))
    write_note("plain.md", "# Just a note\n\nNo metadata here.\n")
    write_note("bad-date.md", task_note(status="todo", due="next tuesday"))
    return vault
