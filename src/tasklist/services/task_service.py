"""Task service - Business logic for the task list.

This service layer sits between the task screen / commands and the repository.
It owns the displayed projection of the persisted collection and applies every
user intent (compose, toggle, delete) against storage.
"""

from __future__ import annotations

from datetime import datetime

from tasklist.models import Task
from tasklist.repositories import TaskRepository
from tasklist.services.task_list import TaskListState, remove_at, sort_tasks
from tasklist.utils.logger import get_logger


class TaskService:
    """Service for task list business logic.

    The persisted collection is the source of truth. ``tasks`` is only the
    sorted projection from the last refresh (or delete), and is replaced,
    never merged.
    """

    def __init__(self, task_repository: TaskRepository):
        """Initialize the task service.

        Args:
            task_repository: TaskRepository implementation for data access
        """
        self.repository = task_repository
        self.tasks: list[Task] = []
        self.logger = get_logger()

    @property
    def state(self) -> TaskListState:
        """Current projection as a TaskListState."""
        return TaskListState(tasks=list(self.tasks))

    async def refresh(self) -> TaskListState:
        """Reload every task from storage and sort it into display order.

        Returns:
            The new TaskListState
        """
        tasks = await self.repository.get_tasks()
        self.tasks = sort_tasks(tasks)
        return self.state

    def task_at(self, index: int) -> Task:
        """Get the displayed task at ``index`` (0-based).

        Raises:
            IndexError: If there is no task at that position
        """
        if index < 0 or index >= len(self.tasks):
            raise IndexError(f"No task at position {index}")
        return self.tasks[index]

    async def save_task(self, task: Task) -> TaskListState:
        """Persist a composed task (insert or update by id) and refresh.

        Args:
            task: Task returned by the compose step

        Returns:
            The refreshed TaskListState
        """
        await self.repository.save(task)
        self.logger.info("saved task %s", task.id)
        return await self.refresh()

    async def add_task(
        self,
        title: str,
        *,
        note: str | None = None,
        due_date: datetime | None = None,
    ) -> Task:
        """Create a new task, persist it and refresh.

        Returns:
            The created Task
        """
        task = Task.new(title, note=note, due_date=due_date)
        await self.save_task(task)
        return task

    async def edit_task(
        self,
        task: Task,
        *,
        title: str | None = None,
        note: str | None = None,
        due_date: datetime | None = None,
    ) -> Task:
        """Replace a task's content, persist it and refresh.

        Returns:
            The edited Task (same id as ``task``)
        """
        edited = task.edited(title=title, note=note, due_date=due_date)
        await self.save_task(edited)
        return edited

    async def toggle_complete(self, task: Task) -> TaskListState:
        """Flip completion, stamping or clearing the completion time.

        Returns:
            The refreshed TaskListState
        """
        toggled = task.toggled()
        await self.repository.save(toggled)
        self.logger.info(
            "marked task %s %s",
            task.id,
            "complete" if toggled.is_complete else "incomplete",
        )
        return await self.refresh()

    async def delete_at(self, index: int) -> Task:
        """Delete the displayed task at ``index`` without a refresh.

        The remaining projection is written back as the whole collection.

        Returns:
            The removed Task

        Raises:
            IndexError: If there is no task at that position
        """
        remaining, removed = remove_at(self.tasks, index)
        await self.repository.save_all(remaining)
        self.tasks = remaining
        self.logger.info("deleted task %s", removed.id)
        return removed
