"""Per-tenant mutual exclusion for replace-syncs within one process."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager


class TenantLockRegistry:
    """Hands out one ``asyncio.Lock`` per client id.

    A lock lives only while some task holds or awaits it, so the registry
    does not grow with the number of tenants ever seen.
    """

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, client_id: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(client_id, asyncio.Lock())
        self._users[client_id] = self._users.get(client_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[client_id] -= 1
            if not self._users[client_id]:
                del self._users[client_id]
                del self._locks[client_id]

    def is_locked(self, client_id: str) -> bool:
        lock = self._locks.get(client_id)
        return lock is not None and lock.locked()

    def __len__(self) -> int:
        return len(self._locks)
