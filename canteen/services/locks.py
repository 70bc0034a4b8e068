"""
Per-key asyncio locks used to serialize read-modify-write sequences
"""
import asyncio
from collections import defaultdict
from contextlib import asynccontextmanager


class KeyedLocks:
    """One lock per key, discarded once nobody holds or waits on it"""

    def __init__(self):
        self._locks = {}
        self._waiters = defaultdict(int)

    @asynccontextmanager
    async def hold(self, key: str):
        lock = self._locks.setdefault(key, asyncio.Lock())
        self._waiters[key] += 1
        try:
            async with lock:
                yield
        finally:
            self._waiters[key] -= 1
            if not self._waiters[key]:
                del self._waiters[key]
                del self._locks[key]
