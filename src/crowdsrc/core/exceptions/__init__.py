"""Exceptions module for crowdsrc.

Provides the shared exception hierarchy. Feature-specific exceptions live
next to their feature (see ``crowdsrc.platform.users.core.exceptions``).
"""

from .base import (
    CrowdSrcError,
    ValidationError,
    ConfigurationError,
)
from .database import (
    DatabaseError,
    ConnectionPoolError,
    MigrationError,
    MigrationFailedError,
)

__all__ = [
    "CrowdSrcError",
    "ValidationError",
    "ConfigurationError",
    "DatabaseError",
    "ConnectionPoolError",
    "MigrationError",
    "MigrationFailedError",
]
