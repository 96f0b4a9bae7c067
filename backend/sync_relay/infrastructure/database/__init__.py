from .base import Base
from .gateway import SQLAlchemyStoreGateway
from .models import ClientRecordModel, SyncLogModel, SyncUserModel
from .session import engine, async_session_factory

__all__ = [
    "Base",
    "SQLAlchemyStoreGateway",
    "ClientRecordModel",
    "SyncLogModel",
    "SyncUserModel",
    "engine",
    "async_session_factory",
]
