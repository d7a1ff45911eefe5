"""User notifier protocol contract."""

from typing import Protocol, runtime_checkable

from ..entities import User


@runtime_checkable
class UserNotifier(Protocol):
    """Protocol for side effects after a user was created.
    
    Called at most once per successful creation, after the write committed.
    Delivery is best effort: implementations must not raise.
    """
    
    async def user_created(self, user: User) -> None:
        """Handle a newly created user."""
        ...
