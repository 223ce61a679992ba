"""
Tests for task filters.

Tests each view against today's date, done-task exclusion and the
reference example.
"""

from datetime import date
from pathlib import Path

import pytest

from obsidian_tasks.core.tasks.filters import TaskFilter, apply_filter, matches
from obsidian_tasks.core.tasks.models import Task

TODAY = date(2026, 1, 30)
YESTERDAY = date(2026, 1, 29)
TOMORROW = date(2026, 1, 31)


def make_task(name: str, status: str = "todo", **fields: object) -> Task:
    return Task(status=status, source_path=Path(f"{name}.md"), **fields)


class TestPendingFilter:
    """Test the pending view."""

    def test_open_statuses_are_pending(self) -> None:
        for status in ("todo", "open", "in-progress", "someday"):
            assert matches(make_task("t", status), TaskFilter.PENDING, TODAY)

    def test_done_is_not_pending(self) -> None:
        assert not matches(make_task("t", "done"), TaskFilter.PENDING, TODAY)

    def test_done_match_is_case_sensitive(self) -> None:
        """Only the exact status 'done' closes a task."""
        assert matches(make_task("t", "Done"), TaskFilter.PENDING, TODAY)
        assert matches(make_task("t", "completed"), TaskFilter.PENDING, TODAY)


class TestTodayFilter:
    """Test the today view."""

    def test_due_today(self) -> None:
        assert matches(make_task("t", due=TODAY), TaskFilter.TODAY, TODAY)

    def test_due_other_days(self) -> None:
        assert not matches(make_task("t", due=YESTERDAY), TaskFilter.TODAY, TODAY)
        assert not matches(make_task("t", due=TOMORROW), TaskFilter.TODAY, TODAY)

    def test_no_due_date(self) -> None:
        assert not matches(make_task("t"), TaskFilter.TODAY, TODAY)

    def test_done_task_due_today_is_excluded(self) -> None:
        assert not matches(make_task("t", "done", due=TODAY), TaskFilter.TODAY, TODAY)


class TestOverdueFilter:
    """Test the overdue view."""

    def test_due_before_today(self) -> None:
        assert matches(make_task("t", due=YESTERDAY), TaskFilter.OVERDUE, TODAY)
        assert matches(make_task("t", due=date(2025, 6, 1)), TaskFilter.OVERDUE, TODAY)

    def test_due_today_is_not_overdue(self) -> None:
        assert not matches(make_task("t", due=TODAY), TaskFilter.OVERDUE, TODAY)

    def test_no_due_date(self) -> None:
        assert not matches(make_task("t"), TaskFilter.OVERDUE, TODAY)

    def test_done_task_is_not_overdue(self) -> None:
        assert not matches(make_task("t", "done", due=YESTERDAY), TaskFilter.OVERDUE, TODAY)


class TestCompletedTodayFilter:
    """Test the completed-today view."""

    def test_completed_today(self) -> None:
        task = make_task("t", "done", completed_date=TODAY)
        assert matches(task, TaskFilter.COMPLETED_TODAY, TODAY)

    def test_completed_other_day(self) -> None:
        task = make_task("t", "done", completed_date=YESTERDAY)
        assert not matches(task, TaskFilter.COMPLETED_TODAY, TODAY)

    def test_no_completed_date(self) -> None:
        assert not matches(make_task("t", "done"), TaskFilter.COMPLETED_TODAY, TODAY)


class TestApplyFilter:
    """Test apply_filter() over task lists."""

    @pytest.fixture
    def tasks(self) -> list[Task]:
        return [
            make_task("a", "todo", due=TODAY),
            make_task("b", "done", due=YESTERDAY),
            make_task("c", "todo", due=YESTERDAY),
            make_task("d", "waiting"),
            make_task("e", "done", due=TODAY, completed_date=TODAY),
        ]

    def _names(self, tasks: list[Task]) -> list[str]:
        return [t.source_path.stem for t in tasks]

    def test_all_is_pass_through(self, tasks: list[Task]) -> None:
        assert apply_filter(tasks, TaskFilter.ALL, TODAY) == tasks

    def test_views(self, tasks: list[Task]) -> None:
        assert self._names(apply_filter(tasks, TaskFilter.PENDING, TODAY)) == ["a", "c", "d"]
        assert self._names(apply_filter(tasks, TaskFilter.TODAY, TODAY)) == ["a"]
        assert self._names(apply_filter(tasks, TaskFilter.OVERDUE, TODAY)) == ["c"]
        assert self._names(apply_filter(tasks, TaskFilter.COMPLETED_TODAY, TODAY)) == ["e"]

    def test_done_tasks_only_in_all(self, tasks: list[Task]) -> None:
        done = {t.source_path for t in tasks if t.is_done}
        for view in (TaskFilter.PENDING, TaskFilter.TODAY, TaskFilter.OVERDUE):
            assert not done & {t.source_path for t in apply_filter(tasks, view, TODAY)}

    def test_today_and_overdue_are_disjoint(self, tasks: list[Task]) -> None:
        due_today = apply_filter(tasks, TaskFilter.TODAY, TODAY)
        overdue = apply_filter(tasks, TaskFilter.OVERDUE, TODAY)
        assert not {t.source_path for t in due_today} & {t.source_path for t in overdue}

    def test_reference_example(self) -> None:
        a = make_task("a", "todo", due=TODAY)
        b = make_task("b", "done", due=YESTERDAY)

        assert apply_filter([a, b], TaskFilter.TODAY, TODAY) == [a]
        assert apply_filter([a, b], TaskFilter.OVERDUE, TODAY) == []
        assert apply_filter([a, b], TaskFilter.ALL, TODAY) == [a, b]
        assert len(apply_filter([a, b], TaskFilter.PENDING, TODAY)) == 1

    def test_empty_input(self) -> None:
        assert apply_filter([], TaskFilter.PENDING, TODAY) == []
