"""User exceptions.

Following maximum separation architecture - one exception per file.
"""

from .user_name_error import UserNameError, UserNameErrorKind
from .email_address_error import EmailAddressError
from .create_user_error import CreateUserError, CreateUserErrorKind

__all__ = [
    "UserNameError",
    "UserNameErrorKind",
    "EmailAddressError",
    "CreateUserError",
    "CreateUserErrorKind",
]
