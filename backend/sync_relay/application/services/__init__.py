from .credential_service import CredentialService
from .record_normalizer import normalize_record
from .replace_sync_service import ReplaceSyncService
from .sync_log_service import SyncLogService
from .tenant_authenticator import TenantAuthenticator
from .tenant_locks import TenantLockRegistry

__all__ = [
    "CredentialService",
    "ReplaceSyncService",
    "SyncLogService",
    "TenantAuthenticator",
    "TenantLockRegistry",
    "normalize_record",
]
