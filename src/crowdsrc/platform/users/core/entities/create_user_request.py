"""Validated intent to create a user."""

from dataclasses import dataclass

from ..value_objects import EmailAddress, UserName


@dataclass(frozen=True)
class CreateUserRequest:
    """Username and email that passed validation but are not yet persisted.
    
    Has no identifier or timestamp; the repository assigns both.
    """
    
    username: UserName
    email: EmailAddress
