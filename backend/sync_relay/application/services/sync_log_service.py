"""Application service (use case) for client-reported sync log entries."""

import logging

from sync_relay.application.interfaces import StoreGateway
from sync_relay.domain.entities import SyncLogEntry
from sync_relay.domain.exceptions import InvalidRequestError

from .tenant_authenticator import TenantAuthenticator
from .timeouts import with_timeout

logger = logging.getLogger(__name__)


class SyncLogService:
    """Appends one audit entry on behalf of an authenticated tenant."""

    def __init__(
        self,
        gateway: StoreGateway,
        authenticator: TenantAuthenticator,
        timeout: float | None = None,
    ):
        self._gateway = gateway
        self._authenticator = authenticator
        self._timeout = timeout

    async def record(
        self,
        client_id: str | None,
        access_token: str | None,
        status: str | None,
        record_count: int | None = None,
        message: str | None = None,
    ) -> SyncLogEntry:
        """Store ``status``/``record_count``/``message`` verbatim.

        ``status`` is not checked against :class:`SyncStatus`; clients may
        report their own statuses.
        """
        self._authenticator.require_credentials(client_id, access_token)
        if not status:
            raise InvalidRequestError()
        if record_count is not None and record_count < 0:
            raise InvalidRequestError("recordCount must not be negative")

        entry = SyncLogEntry(
            client_id=client_id,
            status=status,
            records_synced=record_count or 0,
            message=message or "",
        )
        return await with_timeout(
            self._append(access_token, entry), self._timeout, "sync log write"
        )

    async def _append(self, access_token: str, entry: SyncLogEntry) -> SyncLogEntry:
        async with self._gateway.connect() as store:
            await self._authenticator.authenticate(store, entry.client_id, access_token)
            saved = await store.sync_logs.append(entry)
        logger.info(
            "Recorded %s log entry for client '%s' (%d records)",
            saved.status,
            saved.client_id,
            saved.records_synced,
        )
        return saved
