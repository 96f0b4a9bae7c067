"""Credential disclosure endpoint."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from sync_relay.application.schemas import CredentialsRequest, CredentialsResponse
from sync_relay.application.services import CredentialService
from sync_relay.domain.exceptions import (
    InvalidCredentialsError,
    InvalidRequestError,
    StoreError,
)
from sync_relay.infrastructure.dependencies import get_credential_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/credentials", response_model=CredentialsResponse)
async def get_credentials(
    body: CredentialsRequest,
    service: CredentialService = Depends(get_credential_service),
) -> CredentialsResponse:
    """Return the tenant's delegated database user and password.

    Server details of the delegation target are never part of the response.
    """
    try:
        credentials = await service.disclose(body.client_id, body.access_token)
    except InvalidRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message)
    except StoreError as e:
        logger.error("Error retrieving credentials: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Server error"
        )
    return CredentialsResponse(
        db_user=credentials.db_user, db_password=credentials.db_password
    )
