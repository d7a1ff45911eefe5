"""User repository implementations."""

from .asyncpg_user_repository import AsyncPGUserRepository, classify_unique_violation
from .in_memory_user_repository import InMemoryUserRepository

__all__ = [
    "AsyncPGUserRepository",
    "InMemoryUserRepository",
    "classify_unique_violation",
]
