from .client_record_repository import ClientRecordRepository
from .store_gateway import StoreGateway, StoreSession
from .sync_log_repository import SyncLogRepository
from .tenant_repository import TenantRepository

__all__ = [
    "ClientRecordRepository",
    "StoreGateway",
    "StoreSession",
    "SyncLogRepository",
    "TenantRepository",
]
