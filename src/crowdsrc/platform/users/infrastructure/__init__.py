"""Infrastructure adapters for the users feature."""

from .repositories import AsyncPGUserRepository, InMemoryUserRepository
from .notifiers import NotificationLog, EmailUserNotifier, CollectingUserNotifier

__all__ = [
    "AsyncPGUserRepository",
    "InMemoryUserRepository",
    "NotificationLog",
    "EmailUserNotifier",
    "CollectingUserNotifier",
]
