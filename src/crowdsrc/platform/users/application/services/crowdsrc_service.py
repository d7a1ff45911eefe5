"""Create-user orchestration.

Pure application service: persists through the repository port and, only
after a successful write, notifies through the notifier port. Repository
errors pass through untouched.
"""

import logging

from ...core.entities import CreateUserRequest, User
from ...core.protocols import UserNotifier, UserRepository

logger = logging.getLogger(__name__)


class DefaultCrowdSrcService:
    """Default implementation of the ``CrowdSrcService`` protocol."""
    
    def __init__(self, repository: UserRepository, notifier: UserNotifier):
        self._repository = repository
        self._notifier = notifier
    
    @property
    def repository(self) -> UserRepository:
        return self._repository
    
    @property
    def notifier(self) -> UserNotifier:
        return self._notifier
    
    async def create_user(self, request: CreateUserRequest) -> User:
        """Create a user, then notify collaborators.
        
        Args:
            request: Validated username and email
            
        Returns:
            The created user
            
        Raises:
            CreateUserError: Unchanged from the repository; the notifier is
                not called in that case
        """
        user = await self._repository.create_user(request)
        logger.info(f"Created user {user.id}")
        
        try:
            await self._notifier.user_created(user)
        except Exception as e:
            # Notifiers should swallow their own failures; this guards the result
            logger.error(f"Notifier failed for user {user.id}: {e}", exc_info=True)
        
        return user
