"""User value objects.

Immutable, self-validating wrappers around primitives.
"""

from .user_id import UserId
from .user_name import UserName
from .email_address import EmailAddress

__all__ = [
    "UserId",
    "UserName",
    "EmailAddress",
]
