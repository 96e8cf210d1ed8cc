"""Command 'edit' of tasklist."""

from typing import Annotated

import typer

from tasklist.services.context_manager import get_task_service
from tasklist.utils.exit_codes import ERROR_INVALID_ARGS
from tasklist.utils.ui.formatters import format_success

from .decorators import AppError, command_wrapper
from .utils import due_option, short_title, task_at_position


@command_wrapper
async def edit_task(
    position: Annotated[int, typer.Argument(help="Task position as shown by 'list'")],
    title: Annotated[str | None, typer.Option("--title", "-t", help="New title")] = None,
    note: Annotated[str | None, typer.Option("--note", "-n", help="New note")] = None,
    due: Annotated[
        str | None, typer.Option("--due", "-d", help="New due date (YYYY-MM-DD)")
    ] = None,
    clear_due: Annotated[
        bool, typer.Option("--clear-due", help="Remove the due date")
    ] = False,
) -> None:
    """Edit the title, note or due date of a task."""
    if title is None and note is None and due is None and not clear_due:
        raise AppError(
            "Nothing to change; pass --title, --note, --due or --clear-due",
            ERROR_INVALID_ARGS,
        )
    if due is not None and clear_due:
        raise AppError("--due and --clear-due cannot be combined", ERROR_INVALID_ARGS)

    service = get_task_service()
    _, task = await task_at_position(service, position)

    if clear_due:
        due_date = None
    elif due is not None:
        due_date = due_option(due)
    else:
        due_date = task.due_date

    try:
        edited = await service.edit_task(
            task,
            title=title if title is not None else task.title,
            note=note if note is not None else task.note,
            due_date=due_date,
        )
    except ValueError as e:
        raise AppError(f"Invalid task: {e}", ERROR_INVALID_ARGS) from e

    format_success(f"Updated: {short_title(edited)}")
