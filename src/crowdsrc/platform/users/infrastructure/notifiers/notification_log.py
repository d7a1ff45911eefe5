"""Owned, lock-guarded record of notifications sent per email address."""

from typing import Dict, Optional

from .....utils import ReadWriteLock
from ...core.value_objects import EmailAddress


class NotificationLog:
    """Mapping of ``EmailAddress -> payload`` shared by concurrent requests.
    
    Create one per notifier (or per test) and pass it in; there is no
    module-level instance.
    """
    
    def __init__(self):
        self._entries: Dict[EmailAddress, str] = {}
        self._lock = ReadWriteLock()
    
    async def record(self, email: EmailAddress, payload: str) -> None:
        """Store ``payload`` for ``email``, replacing any earlier entry."""
        async with self._lock.writing():
            self._entries[email] = payload
    
    async def get(self, email: EmailAddress) -> Optional[str]:
        async with self._lock.reading():
            return self._entries.get(email)
    
    async def contains(self, email: EmailAddress) -> bool:
        async with self._lock.reading():
            return email in self._entries
    
    async def count(self) -> int:
        async with self._lock.reading():
            return len(self._entries)
    
    async def snapshot(self) -> Dict[EmailAddress, str]:
        """Copy of all entries at this moment."""
        async with self._lock.reading():
            return dict(self._entries)
