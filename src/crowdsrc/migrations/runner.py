"""
Startup migrations: create the target database if needed and apply the SQL
files shipped in ``crowdsrc/migrations/sql`` in timestamp order.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Set

import asyncpg

from ..config.settings import DatabaseSettings
from ..core.exceptions import MigrationFailedError
from ..database.connection import open_connection

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "sql"
MIGRATION_SUFFIX = ".up.sql"

# Serializes concurrent runners (several app instances starting at once)
MIGRATION_LOCK_ID = 7_310_211

CREATE_HISTORY_TABLE = """
    CREATE TABLE IF NOT EXISTS schema_migrations (
        version TEXT NOT NULL PRIMARY KEY,
        applied_at timestamptz NOT NULL DEFAULT now()
    )
"""


@dataclass(frozen=True)
class Migration:
    """A single SQL migration file."""
    
    version: str
    name: str
    path: Path
    
    @classmethod
    def from_path(cls, path: Path) -> "Migration":
        stem = path.name[: -len(MIGRATION_SUFFIX)]
        version, _, name = stem.partition("_")
        return cls(version=version, name=name or stem, path=path)
    
    def read_sql(self) -> str:
        return self.path.read_text(encoding="utf-8")


def discover_migrations(directory: Path = MIGRATIONS_DIR) -> List[Migration]:
    """List migrations in ``directory`` ordered by version."""
    migrations = [
        Migration.from_path(path)
        for path in directory.iterdir()
        if path.is_file() and path.name.endswith(MIGRATION_SUFFIX)
    ]
    return sorted(migrations, key=lambda m: m.version)


def quote_identifier(name: str) -> str:
    """Quote a PostgreSQL identifier."""
    return '"' + name.replace('"', '""') + '"'


class MigrationRunner:
    """Applies the packaged SQL migrations to a PostgreSQL database."""
    
    def __init__(
        self,
        settings: DatabaseSettings,
        migrations_dir: Optional[Path] = None,
    ):
        self._settings = settings
        self._migrations_dir = migrations_dir or MIGRATIONS_DIR
    
    async def ensure_database(self) -> bool:
        """Create the target database if it does not exist.
        
        Returns:
            True if the database was created, False if it already existed
        """
        conn = await open_connection(self._settings.maintenance())
        try:
            exists = await conn.fetchval(
                "SELECT EXISTS(SELECT 1 FROM pg_database WHERE datname = $1)",
                self._settings.database_name,
            )
            if exists:
                return False
            
            logger.info(f"Creating database: {self._settings.database_name}")
            try:
                await conn.execute(f"CREATE DATABASE {quote_identifier(self._settings.database_name)}")
            except asyncpg.DuplicateDatabaseError:
                # Another instance created it between the check and the CREATE
                logger.info(f"Database {self._settings.database_name} was created concurrently")
                return False
            return True
        finally:
            await conn.close()
    
    async def drop_database(self) -> None:
        """Drop the target database. Used to tear down throwaway databases."""
        conn = await open_connection(self._settings.maintenance())
        try:
            await conn.execute(
                f"DROP DATABASE IF EXISTS {quote_identifier(self._settings.database_name)}"
            )
        finally:
            await conn.close()
    
    async def apply(self) -> List[str]:
        """Apply pending migrations in version order.
        
        Returns:
            Versions applied by this call (empty when already up to date)
            
        Raises:
            MigrationFailedError: If a migration fails; that file is rolled back
        """
        migrations = discover_migrations(self._migrations_dir)
        conn = await open_connection(self._settings)
        try:
            await conn.execute("SELECT pg_advisory_lock($1)", MIGRATION_LOCK_ID)
            try:
                await conn.execute(CREATE_HISTORY_TABLE)
                applied = await self._applied_versions(conn)
                
                newly_applied = []
                for migration in migrations:
                    if migration.version in applied:
                        continue
                    await self._apply_one(conn, migration)
                    newly_applied.append(migration.version)
            finally:
                await conn.execute("SELECT pg_advisory_unlock($1)", MIGRATION_LOCK_ID)
        finally:
            await conn.close()
        
        if newly_applied:
            logger.info(f"Applied {len(newly_applied)} migration(s): {', '.join(newly_applied)}")
        else:
            logger.info("Database schema is up to date")
        return newly_applied
    
    async def run(self) -> List[str]:
        """Ensure the database exists, then apply pending migrations."""
        await self.ensure_database()
        return await self.apply()
    
    async def _applied_versions(self, conn: asyncpg.Connection) -> Set[str]:
        rows = await conn.fetch("SELECT version FROM schema_migrations")
        return {row["version"] for row in rows}
    
    async def _apply_one(self, conn: asyncpg.Connection, migration: Migration) -> None:
        logger.debug(f"Applying migration {migration.version} ({migration.name})")
        try:
            async with conn.transaction():
                await conn.execute(migration.read_sql())
                await conn.execute(
                    "INSERT INTO schema_migrations (version) VALUES ($1)",
                    migration.version,
                )
        except Exception as e:
            logger.error(f"Migration {migration.version} failed: {e}")
            raise MigrationFailedError(migration.version, str(e)) from e
