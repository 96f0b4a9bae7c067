"""Tenant authentication — gates every relay operation on a client id + token pair."""

import logging

from sync_relay.application.interfaces import StoreSession
from sync_relay.domain.entities import Tenant
from sync_relay.domain.exceptions import InvalidCredentialsError, InvalidRequestError

logger = logging.getLogger(__name__)


class TenantAuthenticator:
    """Verifies that a claimed client id and access token belong to one tenant."""

    @staticmethod
    def require_credentials(
        client_id: str | None,
        access_token: str | None,
        message: str = "Missing required fields",
    ) -> None:
        """Reject absent or empty credentials before any store access."""
        if not client_id or not access_token:
            raise InvalidRequestError(message)

    async def authenticate(
        self,
        store: StoreSession,
        client_id: str,
        access_token: str,
        *,
        lock: bool = False,
    ) -> Tenant:
        """Return the tenant iff exactly one row matches both fields.

        Raises:
            InvalidCredentialsError: no match (unknown client or wrong token)
                or an ambiguous match.
            StoreError: the lookup itself failed.
        """
        matches = await store.tenants.find_by_credentials(
            client_id, access_token, for_update=lock
        )
        if len(matches) != 1:
            if len(matches) > 1:
                logger.error(
                    "Client '%s' has %d tenant rows; refusing to authenticate",
                    client_id,
                    len(matches),
                )
            else:
                logger.warning("Rejected credentials for client '%s'", client_id)
            raise InvalidCredentialsError(client_id)
        return matches[0]
