"""Store gateway port — connection lifecycle over the relational store."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager

from .client_record_repository import ClientRecordRepository
from .sync_log_repository import SyncLogRepository
from .tenant_repository import TenantRepository


class StoreSession(ABC):
    """One open connection and its transaction, exposing the repositories.

    Everything done through a session commits together when the
    ``connect()`` block exits normally and rolls back when it raises.
    """

    tenants: TenantRepository
    client_records: ClientRecordRepository
    sync_logs: SyncLogRepository


class StoreGateway(ABC):
    """Hands out a fresh :class:`StoreSession` per unit of work.

    Nothing is shared between sessions; the connection is released on every
    exit path. Store failures surface as
    :class:`~sync_relay.domain.exceptions.StoreError`.
    """

    @abstractmethod
    def connect(self) -> AbstractAsyncContextManager[StoreSession]:
        ...
