"""JSON document implementation of TaskRepository.

The whole collection lives in one JSON array. Every write rewrites the file
through a temporary sibling and an atomic replace, so a crash mid-write leaves
the previous collection intact.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path

from platformdirs import user_data_dir
from pydantic import TypeAdapter, ValidationError

from tasklist.models import Task
from tasklist.repositories import StorageError, TaskRepository
from tasklist.utils.logger import get_logger

DEFAULT_JSON_NAME = "tasks.json"

_task_list_adapter = TypeAdapter(list[Task])


def default_json_path() -> Path:
    """Location of the task document when none is configured."""
    return Path(user_data_dir("tasklist")) / DEFAULT_JSON_NAME


class JsonTaskRepository(TaskRepository):
    """Task repository backed by a single JSON file."""

    def __init__(self, path: str | Path | None = None):
        self.path = default_json_path() if path is None else Path(path).expanduser()
        self.logger = get_logger()

    async def get_tasks(self) -> list[Task]:
        """Load the collection; a missing or undecodable document yields an empty list."""
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StorageError(f"Failed to read {self.path}: {e}") from e

        try:
            return _task_list_adapter.validate_json(raw)
        except ValidationError as e:
            self.logger.error("could not decode tasks from %s: %s", self.path, e)
            return []

    async def save(self, task: Task) -> Task:
        tasks = await self.get_tasks()
        for index, existing in enumerate(tasks):
            if existing.id == task.id:
                tasks[index] = task
                break
        else:
            tasks.append(task)
        self._write(tasks)
        return task

    async def save_all(self, tasks: list[Task]) -> None:
        self._write(tasks)

    def _write(self, tasks: list[Task]) -> None:
        payload = [task.model_dump(mode="json") for task in tasks]

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
        except OSError as e:
            raise StorageError(f"Failed to write {self.path}: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2)
            os.replace(tmp_name, self.path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise StorageError(f"Failed to write {self.path}: {e}") from e
        self.logger.debug("wrote %d tasks to %s", len(tasks), self.path)
