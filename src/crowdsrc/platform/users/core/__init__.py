"""Core domain for the users feature: value objects, entities, exceptions and ports."""

from .value_objects import UserId, UserName, EmailAddress
from .entities import User, CreateUserRequest
from .exceptions import (
    UserNameError,
    UserNameErrorKind,
    EmailAddressError,
    CreateUserError,
    CreateUserErrorKind,
)
from .protocols import UserRepository, UserNotifier, CrowdSrcService

__all__ = [
    "UserId",
    "UserName",
    "EmailAddress",
    "User",
    "CreateUserRequest",
    "UserNameError",
    "UserNameErrorKind",
    "EmailAddressError",
    "CreateUserError",
    "CreateUserErrorKind",
    "UserRepository",
    "UserNotifier",
    "CrowdSrcService",
]
