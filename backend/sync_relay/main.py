"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI

from sync_relay.config import get_settings
from sync_relay.infrastructure.database import Base, engine
from sync_relay.infrastructure.logging.log_config import setup_logging
from sync_relay.presentation.api.errors import register_exception_handlers
from sync_relay.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, make sure the tables exist."""
    settings = get_settings()
    setup_logging()

    if settings.create_tables_on_startup:
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except Exception:
            # Requests will fail with 500 until the store is reachable.
            logger.exception("Could not create relay tables — continuing without them")

    logger.info("Sync relay ready (env=%s)", settings.app_env)
    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "sync_relay.main:app",
        host=_settings.host,
        port=_settings.port,
    )
