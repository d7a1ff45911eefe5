"""User entity.

ONLY the User entity. Users are created exclusively as the result of a
successful repository write and never mutated afterwards.
"""

from dataclasses import dataclass
from datetime import datetime

from ..value_objects import EmailAddress, UserId, UserName


@dataclass(frozen=True)
class User:
    """A registered user.
    
    Built only from already-validated value objects, so a ``User`` is never
    observed half-constructed.
    """
    
    id: UserId
    username: UserName
    email: EmailAddress
    created_at: datetime
    
    def __post_init__(self):
        if not isinstance(self.id, UserId):
            raise TypeError(f"id must be a UserId, got {type(self.id).__name__}")
        if not isinstance(self.username, UserName):
            raise TypeError(f"username must be a UserName, got {type(self.username).__name__}")
        if not isinstance(self.email, EmailAddress):
            raise TypeError(f"email must be an EmailAddress, got {type(self.email).__name__}")
        if self.created_at.tzinfo is None:
            raise ValueError("created_at must be timezone-aware")
