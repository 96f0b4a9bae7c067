"""SQLAlchemy adapter for the StoreGateway port."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from sync_relay.application.interfaces import StoreGateway, StoreSession
from sync_relay.domain.exceptions import StoreError
from sync_relay.infrastructure.database.repositories import (
    SQLAlchemyClientRecordRepository,
    SQLAlchemySyncLogRepository,
    SQLAlchemyTenantRepository,
)

logger = logging.getLogger(__name__)


class SQLAlchemyStoreSession(StoreSession):
    """Repositories bound to one AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.tenants = SQLAlchemyTenantRepository(session)
        self.client_records = SQLAlchemyClientRecordRepository(session)
        self.sync_logs = SQLAlchemySyncLogRepository(session)


class SQLAlchemyStoreGateway(StoreGateway):
    """Opens one session and one transaction per ``connect()`` block."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[StoreSession]:
        """Yield a session inside a transaction.

        Commits when the block exits normally, rolls back when it raises.
        SQLAlchemy and socket errors are re-raised as StoreError; other
        exceptions propagate unchanged after the rollback.
        """
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    yield SQLAlchemyStoreSession(session)
        except (SQLAlchemyError, OSError) as exc:
            logger.error("Store operation failed: %s", exc)
            raise StoreError(str(exc)) from exc
