"""Command 'delete' of tasklist."""

from typing import Annotated

import typer

from tasklist.services.config_service import get_config_service
from tasklist.services.context_manager import get_task_service
from tasklist.utils.ui.formatters import format_info, format_success

from .decorators import command_wrapper
from .utils import short_title, task_at_position


@command_wrapper
async def delete_task(
    position: Annotated[int, typer.Argument(help="Task position as shown by 'list'")],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Skip confirmation")
    ] = False,
) -> None:
    """Delete a task."""
    service = get_task_service()
    index, task = await task_at_position(service, position)

    if get_config_service().config.ui.confirm_delete and not yes:
        if not typer.confirm(f"Delete task '{task.title}'?"):
            format_info("Cancelled")
            raise typer.Exit(0)

    removed = await service.delete_at(index)
    format_success(f"Deleted: {short_title(removed)}")
