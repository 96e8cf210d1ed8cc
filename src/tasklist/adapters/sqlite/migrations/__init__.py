"""Schema migrations for the SQLite task store."""

from .m001_initial_schema import initial_migration
from .runner import Migration, run_migrations, schema_version

ALL_MIGRATIONS: list[Migration] = [
    initial_migration,
]

__all__ = ["ALL_MIGRATIONS", "Migration", "run_migrations", "schema_version"]
