"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state.
"""

from __future__ import annotations

from datetime import UTC, datetime
from unittest.mock import MagicMock, patch

import pytest

from tasklist.models import AppConfig, Task
from tasklist.repositories import TaskRepository
from tasklist.services.task_service import TaskService


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True, scope="session")
def isolated_log_dir(tmp_path_factory):
    """Keep the application log out of the real user log directory."""
    log_dir = tmp_path_factory.mktemp("logs")
    with patch("tasklist.utils.logger.user_log_dir", return_value=str(log_dir)):
        yield log_dir


@pytest.fixture(autouse=True)
def close_database():
    """Drop the shared SQLite connection after each test."""
    yield
    from tasklist.adapters.sqlite.connection import DatabaseConnection

    DatabaseConnection.close_connection()


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Patches platform dirs so config/data files land in *tmp_path* only.
    Also clears the lru_cache so each test gets a fresh service instance.
    """
    from tasklist.services.config_service import get_config_service

    tmpdir = str(tmp_path)
    get_config_service.cache_clear()
    with patch("tasklist.services.config_service.user_config_dir", return_value=tmpdir):
        with patch("tasklist.services.config_service.user_data_dir", return_value=tmpdir):
            from tasklist.services.config_service import ConfigService

            svc = ConfigService()
            yield svc
    get_config_service.cache_clear()


@pytest.fixture()
def mock_config_service():
    """A stand-in for get_config_service() holding a default AppConfig."""
    svc = MagicMock()
    svc.config = AppConfig()
    return svc


# ---------------------------------------------------------------------------
# Tasks and repositories
# ---------------------------------------------------------------------------


def _at(hour: int, minute: int = 0) -> datetime:
    return datetime(2024, 1, 1, hour, minute, tzinfo=UTC)


def _make_task(
    title: str,
    *,
    created: datetime | None = None,
    completed: datetime | None = None,
    is_complete: bool | None = None,
    **kwargs,
) -> Task:
    if is_complete is None:
        is_complete = completed is not None
    return Task(
        title=title,
        created_date=created or _at(0),
        is_complete=is_complete,
        completed_date=completed,
        **kwargs,
    )


class InMemoryTaskRepository(TaskRepository):
    """List-backed repository recording every write."""

    def __init__(self, tasks: list[Task] | None = None):
        self.tasks: list[Task] = list(tasks or [])
        self.save_calls: list[Task] = []
        self.save_all_calls: list[list[Task]] = []

    async def get_tasks(self) -> list[Task]:
        return list(self.tasks)

    async def save(self, task: Task) -> Task:
        self.save_calls.append(task)
        for index, existing in enumerate(self.tasks):
            if existing.id == task.id:
                self.tasks[index] = task
                break
        else:
            self.tasks.append(task)
        return task

    async def save_all(self, tasks: list[Task]) -> None:
        self.save_all_calls.append(list(tasks))
        self.tasks = list(tasks)


@pytest.fixture()
def at():
    """Fixed UTC timestamps on 2024-01-01: ``at(hour, minute=0)``."""
    return _at


@pytest.fixture()
def make_task():
    """Build a task with explicit timestamps.

    ``completed`` implies ``is_complete`` unless it is passed explicitly.
    """
    return _make_task


@pytest.fixture()
def make_repo():
    """Build an in-memory repository pre-loaded with tasks."""
    return InMemoryTaskRepository


@pytest.fixture()
def memory_repo():
    return InMemoryTaskRepository()


@pytest.fixture()
def task_service(memory_repo):
    return TaskService(memory_repo)
