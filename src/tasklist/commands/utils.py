"""Shared helpers for task commands."""

from __future__ import annotations

from datetime import datetime

from tasklist.models import Task
from tasklist.services.task_service import TaskService
from tasklist.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from tasklist.utils.task_helpers import parse_due_date, position_to_index

from .decorators import AppError


async def task_at_position(service: TaskService, position: int) -> tuple[int, Task]:
    """Refresh and resolve a 1-based list position to ``(index, task)``."""
    state = await service.refresh()
    try:
        index = position_to_index(position, len(state.tasks))
    except IndexError as e:
        raise AppError(str(e), ERROR_NOT_FOUND) from e
    return index, state.tasks[index]


def due_option(value: str | None) -> datetime | None:
    """Parse a ``--due`` option value, reporting bad input as invalid args."""
    try:
        return parse_due_date(value)
    except ValueError as e:
        raise AppError(str(e), ERROR_INVALID_ARGS) from e


def short_title(task: Task, limit: int = 60) -> str:
    title = task.title
    if len(title) > limit:
        title = title[: limit - 3] + "..."
    return title
