"""Command 'ui' of tasklist - the interactive task screen."""

from tasklist.services.config_service import get_config_service
from tasklist.services.context_manager import get_task_service
from tasklist.ui.app import TaskListApp

from .decorators import command_wrapper


@command_wrapper
def run_ui() -> None:
    """Open the interactive task list."""
    config = get_config_service().config
    app = TaskListApp(get_task_service(), date_format=config.ui.date_format)
    app.run()
