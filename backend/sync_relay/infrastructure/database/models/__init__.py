from .client_record import ClientRecordModel
from .sync_log import SyncLogModel
from .tenant import SyncUserModel

__all__ = [
    "ClientRecordModel",
    "SyncLogModel",
    "SyncUserModel",
]
