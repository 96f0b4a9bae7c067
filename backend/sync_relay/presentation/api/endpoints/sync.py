"""Replace-sync and sync log endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from sync_relay.application.schemas import (
    SyncDataRequest,
    SyncDataResponse,
    SyncLogRequest,
    SyncLogResponse,
)
from sync_relay.application.services import ReplaceSyncService, SyncLogService
from sync_relay.domain.exceptions import (
    InvalidCredentialsError,
    InvalidRequestError,
    StoreError,
    SyncFailedError,
)
from sync_relay.infrastructure.dependencies import (
    get_replace_sync_service,
    get_sync_log_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sync", tags=["Sync"])


@router.post("/data", response_model=SyncDataResponse)
async def sync_data(
    body: SyncDataRequest,
    service: ReplaceSyncService = Depends(get_replace_sync_service),
) -> SyncDataResponse:
    """Replace the tenant's client records with the supplied batch."""
    try:
        count = await service.replace_sync(body.client_id, body.access_token, body.data)
    except InvalidRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    except (StoreError, SyncFailedError) as e:
        logger.error("Error syncing data: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        )
    return SyncDataResponse(
        message=f"Successfully synced {count} records", record_count=count
    )


@router.post("/log", response_model=SyncLogResponse)
async def sync_log(
    body: SyncLogRequest,
    service: SyncLogService = Depends(get_sync_log_service),
) -> SyncLogResponse:
    """Append a client-reported sync log entry."""
    try:
        await service.record(
            body.client_id,
            body.access_token,
            body.status,
            record_count=body.record_count,
            message=body.message,
        )
    except InvalidRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    except StoreError as e:
        logger.error("Error logging sync: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        )
    return SyncLogResponse()
