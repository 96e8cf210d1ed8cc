"""Forward-only schema migrations for the task database.

The applied version lives in SQLite's ``user_version`` pragma, so a fresh
file starts at 0 and every migration above that runs once, in order.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass

from tasklist.utils.logger import get_logger


@dataclass(frozen=True)
class Migration:
    """One schema step: a version number and the statements that reach it."""

    version: int
    description: str
    statements: tuple[str, ...]


def schema_version(connection: sqlite3.Connection) -> int:
    return connection.execute("PRAGMA user_version").fetchone()[0]


def run_migrations(connection: sqlite3.Connection, migrations: list[Migration]) -> int:
    """Apply every migration newer than the stored version.

    Each migration and its version bump commit in one transaction.

    Returns:
        Number of migrations applied

    Raises:
        RuntimeError: If a migration fails; the database keeps the last good version
    """
    current = schema_version(connection)
    pending = sorted(
        (m for m in migrations if m.version > current), key=lambda m: m.version
    )

    for migration in pending:
        try:
            with connection:
                connection.execute("BEGIN")
                for statement in migration.statements:
                    connection.execute(statement)
                # pragmas cannot take parameters
                connection.execute(f"PRAGMA user_version = {int(migration.version)}")
        except sqlite3.Error as e:
            raise RuntimeError(f"Migration {migration.version} failed: {e}") from e
        get_logger().info(
            "applied migration %d: %s", migration.version, migration.description
        )

    return len(pending)
