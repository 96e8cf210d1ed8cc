"""Adapters module - Repository implementations for different storage backends.

This package contains concrete implementations (adapters) for the repository interfaces:
- sqlite: SQLite database file
- json_store: a single JSON document holding the whole collection
"""

from .json_store import JsonTaskRepository
from .sqlite import SqliteTaskRepository

__all__ = [
    "SqliteTaskRepository",
    "JsonTaskRepository",
]
