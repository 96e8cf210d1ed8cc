"""Modal screen for creating or editing a single task."""

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static

from tasklist.models import Task
from tasklist.utils.task_helpers import format_due_input, parse_due_date


class ComposeScreen(ModalScreen[Task | None]):
    """Collects a title, note and due date.

    Dismisses with the finalized task, or ``None`` when cancelled. When
    ``task_to_edit`` is given the result keeps its id, creation time and
    completion state.
    """

    DEFAULT_CSS = """
    ComposeScreen {
        align: center middle;
    }

    #compose-dialog {
        width: 60;
        height: auto;
        padding: 1 2;
        border: thick $primary;
        background: $surface;
    }

    #compose-dialog Input {
        margin-bottom: 1;
    }

    #compose-error {
        color: $error;
        height: auto;
    }

    #compose-buttons {
        height: auto;
        align-horizontal: right;
    }

    #compose-buttons Button {
        margin-left: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, task_to_edit: Task | None = None) -> None:
        super().__init__()
        self.task_to_edit = task_to_edit

    def compose(self) -> ComposeResult:
        editing = self.task_to_edit
        with Vertical(id="compose-dialog"):
            yield Label("Edit Task" if editing else "New Task", id="compose-title")
            yield Input(
                value=editing.title if editing else "",
                placeholder="Title",
                id="title-input",
            )
            yield Input(
                value=(editing.note or "") if editing else "",
                placeholder="Note (optional)",
                id="note-input",
            )
            yield Input(
                value=format_due_input(editing.due_date) if editing else "",
                placeholder="Due date YYYY-MM-DD (optional)",
                id="due-input",
            )
            yield Static("", id="compose-error")
            with Horizontal(id="compose-buttons"):
                yield Button("Cancel", id="cancel")
                yield Button("Save", variant="primary", id="save")

    def build_task(self) -> Task:
        """Build the finalized task from the form.

        Raises:
            ValueError: If the title is blank or the due date is malformed
        """
        title = self.query_one("#title-input", Input).value.strip()
        note = self.query_one("#note-input", Input).value.strip() or None
        due_date = parse_due_date(self.query_one("#due-input", Input).value)

        if not title:
            raise ValueError("Title is required")

        if self.task_to_edit is not None:
            return self.task_to_edit.edited(title=title, note=note, due_date=due_date)
        return Task.new(title, note=note, due_date=due_date)

    def action_save(self) -> None:
        try:
            task = self.build_task()
        except ValueError as e:
            self.query_one("#compose-error", Static).update(str(e))
            return
        self.dismiss(task)

    def action_cancel(self) -> None:
        self.dismiss(None)

    @on(Button.Pressed, "#save")
    def _save_pressed(self) -> None:
        self.action_save()

    @on(Button.Pressed, "#cancel")
    def _cancel_pressed(self) -> None:
        self.action_cancel()

    @on(Input.Submitted)
    def _input_submitted(self) -> None:
        self.action_save()
