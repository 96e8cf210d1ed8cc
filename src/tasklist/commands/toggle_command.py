"""Command 'toggle' of tasklist."""

from typing import Annotated

import typer

from tasklist.services.context_manager import get_task_service
from tasklist.utils.ui.console import get_console
from tasklist.utils.ui.formatters import format_success

from .decorators import command_wrapper
from .utils import short_title, task_at_position

console = get_console()


@command_wrapper
async def toggle_task(
    position: Annotated[int, typer.Argument(help="Task position as shown by 'list'")],
) -> None:
    """Mark a task complete, or reopen it if it is already complete."""
    service = get_task_service()
    _, task = await task_at_position(service, position)
    await service.toggle_complete(task)

    if task.is_complete:
        format_success(f"↩ Reopened: {short_title(task)}")
    else:
        format_success(f"✓ Completed: {short_title(task)}")
    console.print("[dim]Positions may have changed; run 'tasklist list' to see them.[/dim]")
