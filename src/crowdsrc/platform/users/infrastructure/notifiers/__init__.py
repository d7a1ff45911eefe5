"""User notifier implementations."""

from .notification_log import NotificationLog
from .email_user_notifier import EmailUserNotifier
from .collecting_user_notifier import CollectingUserNotifier
from .messages import welcome_message

__all__ = [
    "NotificationLog",
    "EmailUserNotifier",
    "CollectingUserNotifier",
    "welcome_message",
]
