"""Application service (use case) for the replace-sync transaction.

A replace-sync swaps a tenant's whole ``rrc_clients`` partition for a new
batch and records the outcome in ``sync_logs``:

1. authenticate (the tenant row is locked for the rest of the transaction)
2. delete the existing partition
3. insert the new batch, tagged with the tenant's client id
4. append a SUCCESS entry with the inserted count

Steps 1-4 share one store transaction and, inside this process, run under a
per-tenant lock, so readers only ever see the old or the new partition.
When anything after authentication fails the transaction is rolled back and
a FAILED entry is written over a fresh connection.
"""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from sync_relay.application.interfaces import StoreGateway
from sync_relay.domain.entities import ClientRecord, SyncLogEntry, SyncStatus
from sync_relay.domain.exceptions import (
    InvalidCredentialsError,
    InvalidRequestError,
    SyncFailedError,
)

from .record_normalizer import normalize_record
from .tenant_authenticator import TenantAuthenticator
from .tenant_locks import TenantLockRegistry
from .timeouts import with_timeout

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Sync completed successfully"


@dataclass
class _Attempt:
    authenticated: bool = False


class ReplaceSyncService:
    """Orchestrates the replace-sync. Depends on the store gateway port (DI)."""

    def __init__(
        self,
        gateway: StoreGateway,
        authenticator: TenantAuthenticator,
        locks: TenantLockRegistry,
        timeout: float | None = None,
    ):
        self._gateway = gateway
        self._authenticator = authenticator
        self._locks = locks
        self._timeout = timeout

    async def replace_sync(
        self,
        client_id: str | None,
        access_token: str | None,
        records: Sequence[Mapping[str, Any]] | None,
    ) -> int:
        """Replace the partition of ``client_id`` and return the number of rows synced.

        Raises:
            InvalidRequestError: missing credentials or ``records`` is None.
            InvalidCredentialsError: the pair matches no tenant.
            StoreError: the store failed before the tenant was authenticated.
            SyncFailedError: the store failed afterwards; nothing was changed.
        """
        self._authenticator.require_credentials(client_id, access_token)
        if records is None:
            raise InvalidRequestError()
        rows = [normalize_record(raw, client_id) for raw in records]

        attempt = _Attempt()
        try:
            count = await with_timeout(
                self._replace(attempt, client_id, access_token, rows),
                self._timeout,
                "replace-sync",
            )
        except InvalidCredentialsError:
            raise
        except Exception as exc:
            if not attempt.authenticated:
                raise
            reason = str(exc) or type(exc).__name__
            logger.error("Error syncing data for client '%s': %s", client_id, reason)
            await self._record_failure(client_id, reason)
            raise SyncFailedError(client_id, reason) from exc

        logger.info("Synced %d records for client '%s'", count, client_id)
        return count

    async def _replace(
        self,
        attempt: _Attempt,
        client_id: str,
        access_token: str,
        rows: list[ClientRecord],
    ) -> int:
        async with self._locks.hold(client_id):
            async with self._gateway.connect() as store:
                await self._authenticator.authenticate(
                    store, client_id, access_token, lock=True
                )
                attempt.authenticated = True

                removed = await store.client_records.delete_for_client(client_id)
                count = await store.client_records.create_many(rows)
                await store.sync_logs.append(
                    SyncLogEntry(
                        client_id=client_id,
                        status=SyncStatus.SUCCESS.value,
                        records_synced=count,
                        message=SUCCESS_MESSAGE,
                    )
                )
                logger.debug(
                    "Client '%s': replaced %d rows with %d", client_id, removed, count
                )
        return count

    async def _record_failure(self, client_id: str, reason: str) -> None:
        """Best effort: a failure here is logged and never reaches the caller."""
        try:
            await with_timeout(
                self._append_failure(client_id, reason), self._timeout, "failure log"
            )
        except Exception:
            logger.exception("Failed to log sync error for client '%s'", client_id)

    async def _append_failure(self, client_id: str, reason: str) -> None:
        async with self._gateway.connect() as store:
            await store.sync_logs.append(
                SyncLogEntry(
                    client_id=client_id,
                    status=SyncStatus.FAILED.value,
                    records_synced=0,
                    message=reason,
                )
            )
