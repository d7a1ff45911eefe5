"""Notification texts."""

from ...core.entities import User

WELCOME_SUBJECT = "Welcome to crowdsrc"


def welcome_message(user: User) -> str:
    """Welcome payload for ``user``."""
    return f"Welcome to crowdsrc, {user.username}!"
