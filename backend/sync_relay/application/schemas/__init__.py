from .sync import (
    CredentialsRequest,
    CredentialsResponse,
    ErrorResponse,
    SyncDataRequest,
    SyncDataResponse,
    SyncLogRequest,
    SyncLogResponse,
)

__all__ = [
    "CredentialsRequest",
    "CredentialsResponse",
    "ErrorResponse",
    "SyncDataRequest",
    "SyncDataResponse",
    "SyncLogRequest",
    "SyncLogResponse",
]
