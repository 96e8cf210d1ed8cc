"""Helpers shared by the task screen and the CLI commands."""

from __future__ import annotations

from datetime import UTC, datetime

from tasklist.models import Task

DUE_DATE_FORMAT = "%Y-%m-%d"

COMPLETE_GLYPH = "✓"
INCOMPLETE_GLYPH = "○"


def parse_due_date(value: str | None) -> datetime | None:
    """Parse a ``YYYY-MM-DD`` due date; blank input means no due date.

    Raises:
        ValueError: If the value is not a valid date
    """
    if value is None or not value.strip():
        return None
    try:
        parsed = datetime.strptime(value.strip(), DUE_DATE_FORMAT)
    except ValueError as e:
        raise ValueError(f"Invalid due date '{value}', expected YYYY-MM-DD") from e
    return parsed.replace(tzinfo=UTC)


def format_date(
    value: datetime | None,
    date_format: str = DUE_DATE_FORMAT,
    *,
    local: bool = True,
) -> str:
    """Format an optional timestamp; ``-`` when absent.

    Timestamps are shown in local time. Due dates are calendar dates and are
    passed with ``local=False`` so they never shift across a day boundary.
    """
    if value is None:
        return "-"
    if local:
        value = value.astimezone()
    return value.strftime(date_format)


def format_due_input(value: datetime | None) -> str:
    """Due date as the compose screen expects it back."""
    return value.strftime(DUE_DATE_FORMAT) if value else ""


def status_glyph(task: Task) -> str:
    return COMPLETE_GLYPH if task.is_complete else INCOMPLETE_GLYPH


def is_overdue(task: Task, now: datetime | None = None) -> bool:
    """Check if an incomplete task is past its due date."""
    if task.is_complete or task.due_date is None:
        return False
    now = now or datetime.now(UTC)
    return task.due_date.date() < now.date()


def task_row(task: Task, date_format: str = DUE_DATE_FORMAT) -> tuple[str, str, str, str]:
    """Cells for one list row: status, title, due date, created/completed date."""
    stamp = task.completed_date if task.is_complete else task.created_date
    return (
        status_glyph(task),
        task.title,
        format_date(task.due_date, date_format, local=False),
        format_date(stamp, date_format),
    )


def position_to_index(position: int, count: int) -> int:
    """Convert a 1-based list position into a 0-based index.

    Raises:
        IndexError: If the position is outside ``1..count``
    """
    if position < 1 or position > count:
        if count == 0:
            raise IndexError("The task list is empty")
        raise IndexError(f"No task #{position}; positions run from 1 to {count}")
    return position - 1
