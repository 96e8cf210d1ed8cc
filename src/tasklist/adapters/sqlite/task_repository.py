"""SQLite implementation of TaskRepository."""

from __future__ import annotations

import sqlite3

from tasklist.adapters.sqlite.connection import get_connection
from tasklist.adapters.sqlite.utils import row_to_dict, to_iso
from tasklist.models import Task
from tasklist.repositories import StorageError, TaskRepository
from tasklist.utils.logger import get_logger

_INSERT_TASK = """
    INSERT INTO tasks (
        id, title, note, due_date, is_complete,
        created_date, completed_date, position
    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
"""


class SqliteTaskRepository(TaskRepository):
    """SQLite implementation of task repository."""

    def __init__(self, db_path: str | None = None):
        """Initialize SQLite task repository.

        Args:
            db_path: Optional database file path. If None, uses default location.
        """
        self.db_path = db_path
        self.logger = get_logger()

    @property
    def connection(self) -> sqlite3.Connection:
        """Get the shared database connection for this repository's path."""
        return get_connection(self.db_path)

    async def get_tasks(self) -> list[Task]:
        """Return every stored task ordered by position."""
        try:
            cursor = self.connection.execute("SELECT * FROM tasks ORDER BY position ASC")
            rows = cursor.fetchall()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to load tasks: {e}") from e

        tasks = []
        for row in rows:
            task_dict = row_to_dict(row)
            task_dict.pop("position", None)
            tasks.append(Task(**task_dict))
        return tasks

    async def save(self, task: Task) -> Task:
        """Update the task in place, or append it when the id is new."""
        try:
            conn = self.connection
            with conn:
                cursor = conn.execute(
                    """UPDATE tasks SET
                        title = ?, note = ?, due_date = ?, is_complete = ?,
                        created_date = ?, completed_date = ?
                    WHERE id = ?""",
                    (
                        task.title,
                        task.note,
                        to_iso(task.due_date),
                        task.is_complete,
                        to_iso(task.created_date),
                        to_iso(task.completed_date),
                        task.id,
                    ),
                )
                inserted = cursor.rowcount == 0
                if inserted:
                    next_position = conn.execute(
                        "SELECT COALESCE(MAX(position) + 1, 0) FROM tasks"
                    ).fetchone()[0]
                    conn.execute(
                        _INSERT_TASK, self._task_params(task, next_position)
                    )
        except sqlite3.Error as e:
            raise StorageError(f"Failed to save task {task.id}: {e}") from e

        self.logger.debug("%s task %s", "inserted" if inserted else "updated", task.id)
        return task

    async def save_all(self, tasks: list[Task]) -> None:
        """Replace the stored collection with ``tasks`` in one transaction."""
        try:
            conn = self.connection
            with conn:
                conn.execute("DELETE FROM tasks")
                conn.executemany(
                    _INSERT_TASK,
                    [self._task_params(task, index) for index, task in enumerate(tasks)],
                )
        except sqlite3.Error as e:
            raise StorageError(f"Failed to save tasks: {e}") from e
        self.logger.debug("replaced task collection (%d tasks)", len(tasks))

    @staticmethod
    def _task_params(task: Task, position: int) -> tuple:
        return (
            task.id,
            task.title,
            task.note,
            to_iso(task.due_date),
            task.is_complete,
            to_iso(task.created_date),
            to_iso(task.completed_date),
            position,
        )
