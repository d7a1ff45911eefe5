"""Email user notifier.

Production default. It composes the welcome email but does not hand it to
a mail transport; the dispatch is only logged.
"""

import logging
from email.message import EmailMessage

from ...core.entities import User
from .messages import WELCOME_SUBJECT, welcome_message

logger = logging.getLogger(__name__)


class EmailUserNotifier:
    """Pass-through UserNotifier that never raises."""
    
    def __init__(self, sender: str = "no-reply@crowdsrc.io"):
        self._sender = sender
    
    def compose(self, user: User) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self._sender
        message["To"] = user.email.value
        message["Subject"] = WELCOME_SUBJECT
        message.set_content(welcome_message(user))
        return message
    
    async def user_created(self, user: User) -> None:
        try:
            message = self.compose(user)
            logger.debug(f"Welcome email for user {user.id} dispatched to {message['To']}")
        except Exception as e:
            logger.error(f"Failed to notify user {user.id}: {e}")
