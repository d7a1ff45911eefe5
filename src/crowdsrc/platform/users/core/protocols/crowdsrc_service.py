"""Domain service protocol contract."""

from typing import Protocol, runtime_checkable

from ..entities import CreateUserRequest, User


@runtime_checkable
class CrowdSrcService(Protocol):
    """Protocol for the operations the transport layer can invoke."""
    
    async def create_user(self, request: CreateUserRequest) -> User:
        """Create a user and notify collaborators.
        
        Raises:
            CreateUserError: Propagated unchanged from the repository
        """
        ...
