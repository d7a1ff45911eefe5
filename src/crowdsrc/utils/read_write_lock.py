"""Reader/writer lock for asyncio.

Many readers may hold the lock at once; a writer holds it alone. Waiting
writers block new readers so a steady stream of reads cannot starve them.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator


class ReadWriteLock:
    """Writer-preferring reader/writer lock built on ``asyncio.Condition``."""
    
    def __init__(self):
        self._condition = asyncio.Condition()
        self._readers = 0
        self._writer_active = False
        self._writers_waiting = 0
    
    @property
    def readers(self) -> int:
        return self._readers
    
    @property
    def writer_active(self) -> bool:
        return self._writer_active
    
    @asynccontextmanager
    async def reading(self) -> AsyncIterator[None]:
        """Hold the lock for reading."""
        async with self._condition:
            await self._condition.wait_for(
                lambda: not self._writer_active and self._writers_waiting == 0
            )
            self._readers += 1
        try:
            yield
        finally:
            async with self._condition:
                self._readers -= 1
                if self._readers == 0:
                    self._condition.notify_all()
    
    @asynccontextmanager
    async def writing(self) -> AsyncIterator[None]:
        """Hold the lock exclusively."""
        async with self._condition:
            self._writers_waiting += 1
            try:
                await self._condition.wait_for(
                    lambda: not self._writer_active and self._readers == 0
                )
            finally:
                self._writers_waiting -= 1
                # A cancelled writer may have been the one blocking readers
                self._condition.notify_all()
            self._writer_active = True
        try:
            yield
        finally:
            async with self._condition:
                self._writer_active = False
                self._condition.notify_all()
