"""User identifier value object.

ONLY user identifier - represents unique user ID using UUIDv7 for time-ordered
performance benefits in database indexes.
"""

from dataclasses import dataclass
from uuid import UUID

from .....utils import generate_uuid_v7


@dataclass(frozen=True)
class UserId:
    """User identifier value object.
    
    Generated by the persistence layer at write time, never supplied by
    clients. Immutable and hashable.
    """
    
    value: UUID
    
    def __post_init__(self):
        """Validate user ID type."""
        if not isinstance(self.value, UUID):
            raise ValueError(f"UserId must be a UUID, got {type(self.value).__name__}")
    
    @classmethod
    def generate(cls) -> 'UserId':
        """Generate a new time-ordered user ID using UUIDv7."""
        return cls(generate_uuid_v7())
    
    def __str__(self) -> str:
        """Canonical hyphenated lowercase form, as used on the wire."""
        return str(self.value)
    
    def __repr__(self) -> str:
        return f"UserId('{self.value}')"
