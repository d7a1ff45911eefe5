"""Database-related exceptions for crowdsrc.

These cover infrastructure failures outside the create-user path (pool
creation, schema migrations). Failures while creating a user are reported
through ``CreateUserError`` instead.
"""

from .base import CrowdSrcError


class DatabaseError(CrowdSrcError):
    """Base class for database-related errors."""
    pass


class ConnectionPoolError(DatabaseError):
    """Raised when there's an error with the connection pool."""
    pass


class MigrationError(DatabaseError):
    """Base class for database migration errors."""
    pass


class MigrationFailedError(MigrationError):
    """Raised when a migration fails to execute."""
    
    def __init__(self, migration_id: str, error: str):
        self.migration_id = migration_id
        self.migration_error = error
        super().__init__(
            f"Migration '{migration_id}' failed: {error}",
            details={"migration_id": migration_id},
        )
