"""Command 'list' of tasklist."""

from typing import Annotated

import typer

from tasklist.services.config_service import get_config_service
from tasklist.services.context_manager import get_task_service
from tasklist.utils.exit_codes import ERROR_INVALID_ARGS
from tasklist.utils.ui.console import get_console
from tasklist.utils.ui.formatters import format_tasks

from .decorators import AppError, command_wrapper

console = get_console()

OUTPUT_FORMATS = ("table", "json", "yaml")


@command_wrapper
async def list_tasks(
    output: Annotated[
        str | None,
        typer.Option("--output", "-o", help="Output format: table, json or yaml"),
    ] = None,
    hide_completed: Annotated[
        bool, typer.Option("--hide-completed", help="Only show open tasks")
    ] = False,
) -> None:
    """List tasks: open ones oldest first, then completed ones in completion order."""
    config = get_config_service().config
    output = output or config.output.format
    if output not in OUTPUT_FORMATS:
        raise AppError(
            f"Unknown output format '{output}' (use {', '.join(OUTPUT_FORMATS)})",
            ERROR_INVALID_ARGS,
        )

    service = get_task_service()
    state = await service.refresh()

    # Open tasks always come first, so dropping completed ones keeps positions.
    tasks = [t for t in state.tasks if not t.is_complete] if hide_completed else state.tasks
    format_tasks(tasks, output, config.ui.date_format)

    if output == "table" and not state.is_empty:
        console.print(
            f"[dim]{state.incomplete_count} open, {state.completed_count} done[/dim]"
        )
