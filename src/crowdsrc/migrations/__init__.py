"""SQL schema migrations for crowdsrc."""

from .runner import Migration, MigrationRunner, discover_migrations

__all__ = [
    "Migration",
    "MigrationRunner",
    "discover_migrations",
]
