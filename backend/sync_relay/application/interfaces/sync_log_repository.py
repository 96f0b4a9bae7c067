"""Abstract repository interface (port) for the sync audit log."""

from abc import ABC, abstractmethod

from sync_relay.domain.entities import SyncLogEntry


class SyncLogRepository(ABC):
    """Append-only port — entries are never updated or deleted."""

    @abstractmethod
    async def append(self, entry: SyncLogEntry) -> SyncLogEntry:
        """Persist a new entry and return it with its id assigned."""
        ...

    @abstractmethod
    async def list_for_client(self, client_id: str, limit: int = 100) -> list[SyncLogEntry]:
        """Most recent entries first."""
        ...
