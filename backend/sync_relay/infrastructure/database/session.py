"""SQLAlchemy database engine and session factory configuration."""

from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool

from sync_relay.config import Settings, get_settings


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def build_engine(settings: Settings) -> AsyncEngine:
    """Create an engine that opens a new connection per session.

    ``NullPool`` closes the connection when the session ends, so no
    connection outlives the request that opened it.
    """
    url = _get_async_url(settings.resolved_database_url)
    connect_args: dict[str, Any] = {}
    if settings.pg_ssl and url.startswith("postgresql+asyncpg://"):
        connect_args["ssl"] = True
    return create_async_engine(
        url,
        echo=settings.database_echo,
        poolclass=NullPool,
        connect_args=connect_args,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


engine = build_engine(get_settings())
async_session_factory = build_session_factory(engine)
