"""Abstract repository interface (port) for a tenant's client partition."""

from abc import ABC, abstractmethod

from sync_relay.domain.entities import ClientRecord


class ClientRecordRepository(ABC):
    """Port for client record persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def list_for_client(self, client_id: str) -> list[ClientRecord]:
        """Return the current partition of ``client_id``."""
        ...

    @abstractmethod
    async def delete_for_client(self, client_id: str) -> int:
        """Delete the whole partition. Returns the number of rows removed."""
        ...

    @abstractmethod
    async def create_many(self, records: list[ClientRecord]) -> int:
        """Insert the given rows. Returns the number of rows inserted."""
        ...
