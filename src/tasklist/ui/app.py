"""Textual application hosting the task list screen."""

from __future__ import annotations

from textual.app import App
from textual.binding import Binding

from tasklist.services.task_service import TaskService
from tasklist.ui.task_list_screen import TaskListScreen
from tasklist.utils.task_helpers import DUE_DATE_FORMAT


class TaskListApp(App):
    """Interactive task list."""

    TITLE = "Tasks"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, service: TaskService, date_format: str = DUE_DATE_FORMAT):
        super().__init__()
        self.service = service
        self.date_format = date_format

    def on_mount(self) -> None:
        self.push_screen(TaskListScreen(self.service, self.date_format))
