"""
Strategy Pattern: Storage Strategy Container

This module implements the Strategy Pattern for repository selection.
Instead of using if/else at runtime, the StorageStrategyContext holds the strategy
chosen from the configuration and injects its repository into services.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from tasklist.models.config_models import StorageConfig
from tasklist.repositories import TaskRepository


class StorageStrategy(ABC):
    """
    Abstract base class for storage strategies.

    A strategy owns the task repository implementation for one storage backend.
    Services never know which strategy they're using.
    """

    @abstractmethod
    def get_task_repository(self) -> TaskRepository:
        """Get task repository implementation for this strategy."""


class SqliteStorageStrategy(StorageStrategy):
    """SQLite file storage strategy."""

    def __init__(self, db_path: str | None = None):
        """
        Initialize SQLite strategy.

        Args:
            db_path: Path to SQLite database file (None for the default location)
        """
        self.db_path = db_path

        # Import here to avoid circular dependencies
        from tasklist.adapters.sqlite.task_repository import SqliteTaskRepository

        self._task_repo = SqliteTaskRepository(db_path=db_path)

    def get_task_repository(self) -> TaskRepository:
        return self._task_repo


class JsonStorageStrategy(StorageStrategy):
    """JSON document storage strategy."""

    def __init__(self, path: str | None = None):
        self.path = path

        from tasklist.adapters.json_store import JsonTaskRepository

        self._task_repo = JsonTaskRepository(path=path)

    def get_task_repository(self) -> TaskRepository:
        return self._task_repo


class StorageStrategyContext:
    """
    Strategy context that provides access to the task repository.

    Usage:
        strategy = SqliteStorageStrategy(db_path="/path/to/db")
        context = StorageStrategyContext(strategy)

        task_repo = context.task_repository
        await task_repo.save(task)  # Works regardless of strategy
    """

    def __init__(self, strategy: StorageStrategy):
        """
        Initialize strategy context.

        Args:
            strategy: Storage strategy (SQLite or JSON)
        """
        self._strategy = strategy

    @classmethod
    def from_config(cls, storage: StorageConfig) -> StorageStrategyContext:
        """Build the context for the configured backend."""
        if storage.backend == "json":
            return cls(JsonStorageStrategy(path=storage.path))
        return cls(SqliteStorageStrategy(db_path=storage.path))

    @property
    def task_repository(self) -> TaskRepository:
        """Get task repository from current strategy."""
        return self._strategy.get_task_repository()
