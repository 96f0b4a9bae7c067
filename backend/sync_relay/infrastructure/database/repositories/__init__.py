from .client_record_repository import SQLAlchemyClientRecordRepository
from .sync_log_repository import SQLAlchemySyncLogRepository
from .tenant_repository import SQLAlchemyTenantRepository

__all__ = [
    "SQLAlchemyClientRecordRepository",
    "SQLAlchemySyncLogRepository",
    "SQLAlchemyTenantRepository",
]
