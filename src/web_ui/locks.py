"""Readers-writer lock for asyncio.

Many readers may hold the lock at once; a writer holds it alone. Waiting
writers block new readers so a steady stream of lookups cannot starve a
registration.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class ReadWriteLock:
    """Asyncio readers-writer lock with writer preference.

    Usage:
        lock = ReadWriteLock()

        async with lock.read():
            value = table.get(key)

        async with lock.write():
            table[key] = value
    """

    def __init__(self) -> None:
        self._cond = asyncio.Condition()
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    @property
    def locked(self) -> bool:
        """True while any reader or a writer holds the lock."""
        return self._writer or self._readers > 0

    @property
    def readers(self) -> int:
        """Number of readers currently holding the lock."""
        return self._readers

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        """Hold the lock for reading."""
        async with self._cond:
            await self._cond.wait_for(lambda: not self._writer and not self._waiting_writers)
            self._readers += 1
        try:
            yield
        finally:
            async with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        """Hold the lock exclusively."""
        async with self._cond:
            self._waiting_writers += 1
            try:
                await self._cond.wait_for(lambda: not self._writer and self._readers == 0)
            except BaseException:
                # Readers parked behind this writer must re-check
                self._waiting_writers -= 1
                self._cond.notify_all()
                raise
            self._waiting_writers -= 1
            self._writer = True
        try:
            yield
        finally:
            async with self._cond:
                self._writer = False
                self._cond.notify_all()
