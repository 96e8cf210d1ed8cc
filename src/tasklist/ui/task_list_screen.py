"""Textual screen listing tasks in display order."""

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import DataTable, Footer, Header, Static

from tasklist.models import Task
from tasklist.repositories import StorageError
from tasklist.services.task_list import TaskListState
from tasklist.services.task_service import TaskService
from tasklist.ui.compose_screen import ComposeScreen
from tasklist.utils.logger import get_logger
from tasklist.utils.task_helpers import DUE_DATE_FORMAT, task_row

EMPTY_STATE_TEXT = "No tasks yet. Press [b]n[/b] to add one."


class TaskListScreen(Screen):
    """The task list.

    Every appearance of the screen reloads the list from storage. Composing
    and toggling save and then reload; deleting removes the one row and
    writes the remaining list back.
    """

    DEFAULT_CSS = """
    #task-table {
        height: 1fr;
    }

    #empty-state {
        width: 100%;
        height: 1fr;
        content-align: center middle;
        color: $text-muted;
    }
    """

    BINDINGS = [
        Binding("n", "new_task", "New"),
        Binding("space", "toggle_complete", "Done/Undo"),
        Binding("d", "delete_task", "Delete"),
        Binding("r", "refresh_tasks", "Refresh"),
    ]

    def __init__(self, service: TaskService, date_format: str = DUE_DATE_FORMAT):
        super().__init__()
        self.service = service
        self.date_format = date_format
        self.logger = get_logger()

    def compose(self) -> ComposeResult:
        yield Header()
        table: DataTable = DataTable(id="task-table", cursor_type="row")
        table.add_columns("", "Title", "Due", "Created / Done")
        yield table
        yield Static(EMPTY_STATE_TEXT, id="empty-state")
        yield Footer()

    @property
    def table(self) -> DataTable:
        return self.query_one("#task-table", DataTable)

    @property
    def empty_state(self) -> Static:
        return self.query_one("#empty-state", Static)

    async def on_screen_resume(self) -> None:
        await self.action_refresh_tasks()

    async def action_refresh_tasks(self) -> None:
        try:
            state = await self.service.refresh()
        except StorageError as e:
            self._report(e)
            return
        self.show_state(state)

    def show_state(self, state: TaskListState, *, focus_id: str | None = None) -> None:
        """Redraw every row from ``state``."""
        table = self.table
        table.clear()
        for task in state.tasks:
            table.add_row(*task_row(task, self.date_format), key=task.id)
        self._update_empty_state(state.is_empty)
        if focus_id is not None:
            for index, task in enumerate(state.tasks):
                if task.id == focus_id:
                    table.move_cursor(row=index)
                    break

    def _update_empty_state(self, is_empty: bool) -> None:
        self.empty_state.display = is_empty
        self.table.display = not is_empty

    def _selected_task(self) -> Task | None:
        if not self.service.tasks:
            return None
        return self.service.task_at(self.table.cursor_row)

    def open_compose(self, task: Task | None = None) -> None:
        """Show the compose screen, for a new task or to edit ``task``."""
        self.app.push_screen(ComposeScreen(task), self._on_compose_task)

    async def _on_compose_task(self, task: Task | None) -> None:
        if task is None:
            return
        try:
            state = await self.service.save_task(task)
        except StorageError as e:
            self._report(e)
            return
        self.show_state(state, focus_id=task.id)

    def action_new_task(self) -> None:
        self.open_compose()

    @on(DataTable.RowSelected, "#task-table")
    def _row_selected(self, event: DataTable.RowSelected) -> None:
        self.open_compose(self.service.task_at(event.cursor_row))

    async def action_toggle_complete(self) -> None:
        task = self._selected_task()
        if task is None:
            return
        try:
            state = await self.service.toggle_complete(task)
        except StorageError as e:
            self._report(e)
            return
        self.show_state(state, focus_id=task.id)

    async def action_delete_task(self) -> None:
        if self._selected_task() is None:
            return
        try:
            removed = await self.service.delete_at(self.table.cursor_row)
        except StorageError as e:
            self._report(e)
            return
        self.table.remove_row(removed.id)
        self._update_empty_state(not self.service.tasks)
        self.notify(f"Deleted: {removed.title}")

    def _report(self, error: StorageError) -> None:
        self.logger.error("task storage error: %s", error)
        self.notify(str(error), title="Storage error", severity="error")
