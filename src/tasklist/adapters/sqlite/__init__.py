"""SQLite adapter module - Local database storage implementation."""

from tasklist.adapters.sqlite.connection import DatabaseConnection, get_connection
from tasklist.adapters.sqlite.task_repository import SqliteTaskRepository

__all__ = [
    "DatabaseConnection",
    "SqliteTaskRepository",
    "get_connection",
]
