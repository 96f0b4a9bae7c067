"""Concrete repository for sync audit entries backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sync_relay.application.interfaces import SyncLogRepository
from sync_relay.domain.entities import SyncLogEntry
from sync_relay.infrastructure.database.models import SyncLogModel


class SQLAlchemySyncLogRepository(SyncLogRepository):
    """Implements the SyncLogRepository port using SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: SyncLogModel) -> SyncLogEntry:
        """Map ORM model → domain entity."""
        return SyncLogEntry(
            id=model.id,
            client_id=model.client_id,
            status=model.status,
            records_synced=model.records_synced,
            message=model.message,
            created_at=model.created_at,
        )

    async def append(self, entry: SyncLogEntry) -> SyncLogEntry:
        model = SyncLogModel(
            client_id=entry.client_id,
            records_synced=entry.records_synced,
            status=entry.status,
            message=entry.message,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def list_for_client(self, client_id: str, limit: int = 100) -> list[SyncLogEntry]:
        stmt = (
            select(SyncLogModel)
            .where(SyncLogModel.client_id == client_id)
            .order_by(SyncLogModel.id.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]
