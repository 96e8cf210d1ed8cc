"""Repository abstraction layer for Tasklist.

This module defines the abstract base class (interface) for task persistence,
following the hexagonal architecture (Ports & Adapters) pattern.

The persisted collection is the source of truth for the task list. The task
screen never edits it piecemeal: it either upserts one task or replaces the
whole collection.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from tasklist.models import Task


class StorageError(Exception):
    """Raised when the task collection cannot be read or written."""


class TaskRepository(ABC):
    """Abstract base class for task persistence operations.

    Implementations keep the collection in a stable storage order: a new task
    is appended, an existing task keeps its slot when saved again, and
    ``save_all`` stores the given list in the given order.
    """

    @abstractmethod
    async def get_tasks(self) -> list[Task]:
        """Return the whole persisted collection in storage order.

        Returns:
            List of Task objects (empty when nothing is stored yet)

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError(
            "TaskRepository.get_tasks() must be implemented by adapter"
        )

    @abstractmethod
    async def save(self, task: Task) -> Task:
        """Insert or update a single task, matched by id.

        Args:
            task: Task to store

        Returns:
            The stored Task

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            StorageError: If the collection cannot be written
        """
        raise NotImplementedError("TaskRepository.save() must be implemented by adapter")

    @abstractmethod
    async def save_all(self, tasks: list[Task]) -> None:
        """Replace the entire persisted collection with ``tasks``.

        Args:
            tasks: The complete new collection, in storage order

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError(
            "TaskRepository.save_all() must be implemented by adapter"
        )
