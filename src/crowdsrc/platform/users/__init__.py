"""Users feature: registration of users with unique username and email."""

from .core import (
    CreateUserError,
    CreateUserErrorKind,
    CreateUserRequest,
    CrowdSrcService,
    EmailAddress,
    EmailAddressError,
    User,
    UserId,
    UserName,
    UserNameError,
    UserNameErrorKind,
    UserNotifier,
    UserRepository,
)
from .application import DefaultCrowdSrcService

__all__ = [
    "CreateUserError",
    "CreateUserErrorKind",
    "CreateUserRequest",
    "CrowdSrcService",
    "EmailAddress",
    "EmailAddressError",
    "User",
    "UserId",
    "UserName",
    "UserNameError",
    "UserNameErrorKind",
    "UserNotifier",
    "UserRepository",
    "DefaultCrowdSrcService",
]
