"""Collecting user notifier.

Records a welcome payload per created user in a ``NotificationLog`` so
callers (mostly tests) can check whether a notification happened.
"""

import logging

from ...core.entities import User
from .messages import welcome_message
from .notification_log import NotificationLog

logger = logging.getLogger(__name__)


class CollectingUserNotifier:
    """UserNotifier that stores ``email -> payload`` in a NotificationLog."""
    
    def __init__(self, notification_log: NotificationLog):
        self._notification_log = notification_log
    
    @property
    def notification_log(self) -> NotificationLog:
        return self._notification_log
    
    async def user_created(self, user: User) -> None:
        try:
            await self._notification_log.record(user.email, welcome_message(user))
            logger.debug(f"Recorded welcome notification for user {user.id}")
        except Exception as e:
            # Best effort: never propagate into the service
            logger.error(f"Failed to record notification for user {user.id}: {e}")
