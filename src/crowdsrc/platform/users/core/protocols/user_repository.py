"""User repository protocol contract."""

from typing import Protocol, runtime_checkable

from ..entities import CreateUserRequest, User


@runtime_checkable
class UserRepository(Protocol):
    """Protocol for durable, uniqueness-enforcing user persistence.
    
    Implementations must:
    
    - check and insert atomically, so two concurrent calls with the same
      username or email never both succeed;
    - generate the identifier and creation timestamp at write time;
    - report which field collided;
    - wrap every other failure as ``CreateUserErrorKind.UNKNOWN`` with the
      original exception chained.
    """
    
    async def create_user(self, request: CreateUserRequest) -> User:
        """Persist a new user.
        
        Args:
            request: Validated username and email
            
        Returns:
            The persisted user
            
        Raises:
            CreateUserError: ``DUPLICATE_USERNAME``, ``DUPLICATE_EMAIL`` or ``UNKNOWN``
        """
        ...
