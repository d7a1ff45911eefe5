"""Create-user failure.

One exception type with a closed set of kinds. Callers branch on ``kind``
and must fail loudly for a kind they do not handle.
"""

from enum import Enum
from typing import Optional

from .....core.exceptions import CrowdSrcError


class CreateUserErrorKind(str, Enum):
    """Why a user could not be created."""
    DUPLICATE_USERNAME = "duplicate_username"
    DUPLICATE_EMAIL = "duplicate_email"
    UNKNOWN = "unknown"


class CreateUserError(CrowdSrcError):
    """Raised by repositories (and passed through by the service) when
    user creation fails.
    
    Use the constructors rather than ``__init__``:
    
    - ``duplicate_username(username)``
    - ``duplicate_email(email)``
    - ``unknown(context, cause)``: raise it ``from cause`` so the chain is kept
    """
    
    def __init__(
        self,
        kind: CreateUserErrorKind,
        message: str,
        username: Optional[str] = None,
        email: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ):
        details = {}
        if username is not None:
            details["username"] = username
        if email is not None:
            details["email"] = email
        if cause is not None:
            details["original_error"] = str(cause)
            details["original_error_type"] = type(cause).__name__
        
        super().__init__(
            message=message,
            error_code=f"CREATE_USER_{kind.name}",
            details=details,
        )
        self.kind = kind
        self.username = username
        self.email = email
        self.cause = cause
    
    @classmethod
    def duplicate_username(cls, username: str) -> "CreateUserError":
        return cls(
            CreateUserErrorKind.DUPLICATE_USERNAME,
            f"user with username {username} already exists",
            username=username,
        )
    
    @classmethod
    def duplicate_email(cls, email: str) -> "CreateUserError":
        return cls(
            CreateUserErrorKind.DUPLICATE_EMAIL,
            f"user with email '{email}' already exists",
            email=email,
        )
    
    @classmethod
    def unknown(cls, context: str, cause: BaseException) -> "CreateUserError":
        return cls(CreateUserErrorKind.UNKNOWN, context, cause=cause)
