"""Core module for crowdsrc.

Clean Core - only exports the shared exception hierarchy.
"""

from .exceptions import *

__all__ = [
    "CrowdSrcError",
    "ValidationError",
    "ConfigurationError",
    "DatabaseError",
    "ConnectionPoolError",
    "MigrationError",
    "MigrationFailedError",
]
