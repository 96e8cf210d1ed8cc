"""Command 'add' of tasklist."""

from typing import Annotated

import typer

from tasklist.services.context_manager import get_task_service
from tasklist.utils.exit_codes import ERROR_INVALID_ARGS
from tasklist.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper
from .utils import due_option, short_title


@command_wrapper
async def add_task(
    title: Annotated[str, typer.Argument(help="Task title")],
    note: Annotated[
        str | None, typer.Option("--note", "-n", help="Optional note")
    ] = None,
    due: Annotated[
        str | None, typer.Option("--due", "-d", help="Due date (YYYY-MM-DD)")
    ] = None,
) -> None:
    """Add a new task."""
    due_date = due_option(due)
    service = get_task_service()
    try:
        task = await service.add_task(title, note=note, due_date=due_date)
    except ValueError as e:
        raise AppError(f"Invalid task: {e}", ERROR_INVALID_ARGS) from e

    position = next(i for i, t in enumerate(service.tasks, start=1) if t.id == task.id)
    format_success(f"Added #{position}: {short_title(task)}")
