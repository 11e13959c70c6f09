"""In-process keyed locks."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict


class KeyedLock:
    """
    One ``asyncio.Lock`` per key, created on demand.

    Entries are dropped once no task holds or waits on them, so the
    registry does not grow with the number of customers ever seen.
    Waiters are woken in FIFO order.
    """

    def __init__(self):
        self._locks: Dict[str, asyncio.Lock] = {}
        self._users: Dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, key: str) -> AsyncGenerator[None, None]:
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        self._users[key] = self._users.get(key, 0) + 1

        try:
            async with lock:
                yield
        finally:
            self._users[key] -= 1
            if self._users[key] == 0:
                del self._users[key]
                del self._locks[key]

    def locked(self, key: str) -> bool:
        lock = self._locks.get(key)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        return len(self._locks)


customer_locks = KeyedLock()
