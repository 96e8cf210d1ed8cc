"""Bootstrap helpers for repository and service access.

Usage Pattern:
    from tasklist.services.context_manager import get_task_service

    service = get_task_service()
    state = await service.refresh()
"""

from __future__ import annotations

from functools import lru_cache

from tasklist.models.storage_strategy import StorageStrategyContext
from tasklist.services.config_service import get_config_service
from tasklist.services.task_service import TaskService


@lru_cache(maxsize=1)
def get_strategy_context() -> StorageStrategyContext:
    """Get a cached StorageStrategyContext for the configured backend."""
    return get_config_service().get_storage_context()


def get_task_service() -> TaskService:
    """Build a TaskService over the configured task repository."""
    return TaskService(get_strategy_context().task_repository)
