"""Shared SQLite connection for the task store."""

from __future__ import annotations

import atexit
import os
import sqlite3
from pathlib import Path

from platformdirs import user_data_dir

from tasklist.adapters.sqlite.migrations import ALL_MIGRATIONS, run_migrations
from tasklist.utils.logger import get_logger

DEFAULT_DB_NAME = "tasks.db"


def resolve_db_path(db_path: str | Path | None = None) -> Path:
    """Configured path with ``~`` expanded, or the platform data location."""
    if db_path is None:
        return Path(user_data_dir("tasklist")) / DEFAULT_DB_NAME
    return Path(db_path).expanduser()


def _open(path: Path) -> sqlite3.Connection:
    path.parent.mkdir(parents=True, exist_ok=True)
    created = not path.exists()

    connection = sqlite3.connect(str(path), timeout=30.0)
    connection.row_factory = sqlite3.Row
    connection.execute("PRAGMA journal_mode = WAL")
    if created:
        os.chmod(path, 0o600)
        get_logger().info("created task database at %s", path)

    run_migrations(connection, ALL_MIGRATIONS)
    return connection


class DatabaseConnection:
    """One open connection per process, reopened when the path changes."""

    _connection: sqlite3.Connection | None = None
    _path: Path | None = None
    _atexit_registered = False

    @classmethod
    def get_connection(cls, db_path: str | Path | None = None) -> sqlite3.Connection:
        path = resolve_db_path(db_path)
        if cls._connection is not None and cls._path == path:
            return cls._connection

        cls.close_connection()
        cls._connection = _open(path)
        cls._path = path

        if not cls._atexit_registered:
            atexit.register(cls.close_connection)
            cls._atexit_registered = True
        return cls._connection

    @classmethod
    def close_connection(cls) -> None:
        connection, cls._connection, cls._path = cls._connection, None, None
        if connection is None:
            return
        try:
            connection.commit()
            connection.close()
        except sqlite3.Error as e:
            get_logger().warning("error while closing task database: %s", e)


def get_connection(db_path: str | Path | None = None) -> sqlite3.Connection:
    return DatabaseConnection.get_connection(db_path)
