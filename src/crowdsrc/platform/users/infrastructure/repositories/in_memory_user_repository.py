"""In-memory user repository.

ONLY in-memory implementation - stores users in process memory for local
runs and tests. Enforces the same uniqueness rules as the ``users`` table.
"""

import asyncio
from datetime import datetime, timezone
from typing import Dict, Optional

from ...core.entities import CreateUserRequest, User
from ...core.exceptions import CreateUserError
from ...core.value_objects import EmailAddress, UserId, UserName


class InMemoryUserRepository:
    """UserRepository backed by two dictionaries behind one lock.
    
    The duplicate check and the insert happen in the same critical section,
    so concurrent creations of the same identity cannot both succeed. When
    both fields collide the email wins, matching PostgreSQL's index order
    for the ``users`` table.
    """
    
    def __init__(self):
        self._by_username: Dict[UserName, User] = {}
        self._by_email: Dict[EmailAddress, User] = {}
        self._lock = asyncio.Lock()
    
    async def create_user(self, request: CreateUserRequest) -> User:
        async with self._lock:
            if request.email in self._by_email:
                raise CreateUserError.duplicate_email(request.email.value)
            if request.username in self._by_username:
                raise CreateUserError.duplicate_username(request.username.value)
            
            user = User(
                id=UserId.generate(),
                username=request.username,
                email=request.email,
                created_at=datetime.now(timezone.utc),
            )
            self._by_email[user.email] = user
            self._by_username[user.username] = user
            return user
    
    async def count(self) -> int:
        async with self._lock:
            return len(self._by_username)
    
    async def get_by_username(self, username: UserName) -> Optional[User]:
        async with self._lock:
            return self._by_username.get(username)
    
    async def get_by_email(self, email: EmailAddress) -> Optional[User]:
        async with self._lock:
            return self._by_email.get(email)
    