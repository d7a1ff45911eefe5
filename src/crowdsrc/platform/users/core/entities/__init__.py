"""User entities."""

from .user import User
from .create_user_request import CreateUserRequest

__all__ = [
    "User",
    "CreateUserRequest",
]
