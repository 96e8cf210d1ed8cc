"""Ordering and list mutation for the displayed task list.

These functions never touch storage. The displayed list is always a sorted
projection of the persisted collection:

* incomplete tasks come before completed ones;
* incomplete tasks are ordered by creation time, oldest first;
* completed tasks are ordered by completion time, oldest first, with a
  missing completion time treated as the earliest possible value.

Ties keep their input order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime

from tasklist.models import Task

DISTANT_PAST = datetime.min.replace(tzinfo=UTC)


def sort_key(task: Task) -> tuple[bool, datetime]:
    """Key equivalent to :func:`compare_tasks` for use with ``sorted``."""
    if task.is_complete:
        return (True, task.completed_date or DISTANT_PAST)
    return (False, task.created_date)


def compare_tasks(lhs: Task, rhs: Task) -> int:
    """Three-way comparison: negative if ``lhs`` displays before ``rhs``."""
    if lhs.is_complete and rhs.is_complete:
        left = lhs.completed_date or DISTANT_PAST
        right = rhs.completed_date or DISTANT_PAST
    elif not lhs.is_complete and not rhs.is_complete:
        left, right = lhs.created_date, rhs.created_date
    else:
        return -1 if not lhs.is_complete else 1
    return (left > right) - (left < right)


def sort_tasks(tasks: list[Task]) -> list[Task]:
    """Return a new list in display order (stable)."""
    return sorted(tasks, key=sort_key)


def remove_at(tasks: list[Task], index: int) -> tuple[list[Task], Task]:
    """Return ``tasks`` without the item at ``index`` and the removed task.

    Raises:
        IndexError: If ``index`` is outside the list
    """
    if index < 0 or index >= len(tasks):
        raise IndexError(f"No task at position {index}")
    remaining = tasks[:index] + tasks[index + 1 :]
    return remaining, tasks[index]


@dataclass
class TaskListState:
    """Snapshot of the displayed list after a refresh or mutation."""

    tasks: list[Task] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Whether the empty-state indicator should be shown."""
        return not self.tasks

    @property
    def incomplete_count(self) -> int:
        return sum(1 for task in self.tasks if not task.is_complete)

    @property
    def completed_count(self) -> int:
        return sum(1 for task in self.tasks if task.is_complete)
