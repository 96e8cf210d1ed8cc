"""Repository interfaces for Tasklist.

This package contains abstract base classes (ABCs) that define the contracts
for data persistence operations. These are the "Ports" in the Hexagonal Architecture.

Implementations (Adapters) are in:
- tasklist.adapters.sqlite (SQLite database file)
- tasklist.adapters.json_store (single JSON document)
"""

from .repository import StorageError, TaskRepository

__all__ = [
    "StorageError",
    "TaskRepository",
]
