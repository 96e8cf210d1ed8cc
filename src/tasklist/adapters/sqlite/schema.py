"""Database schema definitions for the SQLite task store."""

from __future__ import annotations

# Tasks table - one row per task, ``position`` holds the storage order
CREATE_TASKS_TABLE = """
CREATE TABLE IF NOT EXISTS tasks (
    id TEXT PRIMARY KEY,
    title TEXT NOT NULL,
    note TEXT,
    due_date DATETIME,
    is_complete BOOLEAN NOT NULL DEFAULT 0,
    created_date DATETIME NOT NULL,
    completed_date DATETIME,
    position INTEGER NOT NULL
)
"""

CREATE_TASKS_POSITION_INDEX = (
    "CREATE INDEX IF NOT EXISTS idx_tasks_position ON tasks(position)"
)

# All table creation statements in order
ALL_TABLES = [
    CREATE_TASKS_TABLE,
]

# All index creation statements
ALL_INDEXES = [
    CREATE_TASKS_POSITION_INDEX,
]
