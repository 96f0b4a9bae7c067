"""Top-level API router — the relay is served from the root path."""

from fastapi import APIRouter

from sync_relay.presentation.api.endpoints.auth import router as auth_router
from sync_relay.presentation.api.endpoints.health import router as health_router
from sync_relay.presentation.api.endpoints.sync import router as sync_router

router = APIRouter()
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(sync_router)
