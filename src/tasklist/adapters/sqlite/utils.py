"""Utility functions for SQLite adapter."""

from __future__ import annotations

from datetime import datetime
from typing import Any


def row_to_dict(row: Any) -> dict[str, Any]:
    """Convert sqlite3.Row to dictionary.

    Args:
        row: sqlite3.Row object

    Returns:
        Dictionary with column names as keys
    """
    if row is None:
        return {}
    return dict(row)


def to_iso(value: datetime | None) -> str | None:
    """Serialize an optional datetime for storage."""
    if value is None:
        return None
    return value.isoformat()
