"""Services module for Tasklist - Business logic layer."""

from .task_list import TaskListState, compare_tasks, remove_at, sort_tasks
from .task_service import TaskService

__all__ = [
    "TaskService",
    "TaskListState",
    "compare_tasks",
    "remove_at",
    "sort_tasks",
]
