"""Migration 001: the tasks table and its position index."""

from tasklist.adapters.sqlite import schema

from .runner import Migration

initial_migration = Migration(
    version=1,
    description="Initial database schema",
    statements=(*schema.ALL_TABLES, *schema.ALL_INDEXES),
)
