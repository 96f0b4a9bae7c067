from .client_record import ClientRecord
from .sync_log import SyncLogEntry, SyncStatus
from .tenant import DatabaseCredentials, Tenant

__all__ = [
    "ClientRecord",
    "DatabaseCredentials",
    "SyncLogEntry",
    "SyncStatus",
    "Tenant",
]
