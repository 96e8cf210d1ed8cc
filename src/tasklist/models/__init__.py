"""Tasklist domain models.

This package contains Pydantic models that represent the core domain entities
of the Tasklist application: the task itself and the application configuration.
"""

from .config_models import AppConfig, OutputConfig, StorageConfig, UIConfig
from .core import Task

__all__ = [
    "Task",
    "AppConfig",
    "StorageConfig",
    "UIConfig",
    "OutputConfig",
]
