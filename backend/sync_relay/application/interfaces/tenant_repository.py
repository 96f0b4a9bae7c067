"""Abstract repository interface (port) for tenant lookups."""

from abc import ABC, abstractmethod

from sync_relay.domain.entities import Tenant


class TenantRepository(ABC):
    """Read-only port over provisioned tenants."""

    @abstractmethod
    async def find_by_credentials(
        self, client_id: str, access_token: str, *, for_update: bool = False
    ) -> list[Tenant]:
        """Return every tenant row matching both the client id and the token.

        With ``for_update`` the matched rows stay locked until the surrounding
        transaction ends.
        """
        ...
