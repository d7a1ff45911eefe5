"""Username validation error.

Raised by ``UserName.new`` when raw input cannot become a username.
"""

from enum import Enum
from typing import Optional

from .....core.exceptions import ValidationError


class UserNameErrorKind(str, Enum):
    """Why a username was rejected."""
    EMPTY = "empty"
    WITH_WHITESPACE = "with_whitespace"


class UserNameError(ValidationError):
    """Raised when a raw string is not a valid username.
    
    ``invalid_username`` holds the original, untrimmed input for
    ``WITH_WHITESPACE`` and is ``None`` for ``EMPTY``.
    """
    
    def __init__(self, kind: UserNameErrorKind, invalid_username: Optional[str] = None):
        if kind is UserNameErrorKind.EMPTY:
            message = "username can't be empty"
        elif kind is UserNameErrorKind.WITH_WHITESPACE:
            message = f"username '{invalid_username}' is not valid"
        else:
            raise ValueError(f"Unhandled username error kind: {kind}")
        
        super().__init__(
            message=message,
            error_code=f"USERNAME_{kind.name}",
            details={"invalid_username": invalid_username} if invalid_username is not None else {},
        )
        self.kind = kind
        self.invalid_username = invalid_username
    
    @classmethod
    def empty(cls) -> "UserNameError":
        return cls(UserNameErrorKind.EMPTY)
    
    @classmethod
    def with_whitespace(cls, invalid_username: str) -> "UserNameError":
        return cls(UserNameErrorKind.WITH_WHITESPACE, invalid_username)
