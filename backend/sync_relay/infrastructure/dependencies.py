"""FastAPI dependency injection — wires infrastructure to application layer.

No provider here opens a connection: services acquire one through the
gateway only after the request body has passed their input checks.
"""

from collections.abc import AsyncGenerator

from fastapi import Depends

from sync_relay.config import get_settings
from sync_relay.application.interfaces import StoreGateway
from sync_relay.application.services import (
    CredentialService,
    ReplaceSyncService,
    SyncLogService,
    TenantAuthenticator,
    TenantLockRegistry,
)
from sync_relay.infrastructure.database.gateway import SQLAlchemyStoreGateway
from sync_relay.infrastructure.database.session import async_session_factory

# Process-wide: replace-syncs for one tenant must share the same lock.
_tenant_locks = TenantLockRegistry()


def get_store_gateway() -> StoreGateway:
    """Provides the gateway over the configured database."""
    return SQLAlchemyStoreGateway(async_session_factory)


def get_tenant_locks() -> TenantLockRegistry:
    return _tenant_locks


async def get_credential_service(
    gateway: StoreGateway = Depends(get_store_gateway),
) -> AsyncGenerator[CredentialService, None]:
    """Provides a CredentialService bound to the store gateway."""
    settings = get_settings()
    yield CredentialService(
        gateway,
        TenantAuthenticator(),
        timeout=settings.request_timeout_seconds,
    )


async def get_replace_sync_service(
    gateway: StoreGateway = Depends(get_store_gateway),
    locks: TenantLockRegistry = Depends(get_tenant_locks),
) -> AsyncGenerator[ReplaceSyncService, None]:
    """Provides a ReplaceSyncService sharing the process-wide tenant locks."""
    settings = get_settings()
    yield ReplaceSyncService(
        gateway,
        TenantAuthenticator(),
        locks,
        timeout=settings.request_timeout_seconds,
    )


async def get_sync_log_service(
    gateway: StoreGateway = Depends(get_store_gateway),
) -> AsyncGenerator[SyncLogService, None]:
    """Provides a SyncLogService bound to the store gateway."""
    settings = get_settings()
    yield SyncLogService(
        gateway,
        TenantAuthenticator(),
        timeout=settings.request_timeout_seconds,
    )
