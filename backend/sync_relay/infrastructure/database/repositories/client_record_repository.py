"""Concrete repository implementation for ClientRecord backed by SQLAlchemy."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from sync_relay.application.interfaces import ClientRecordRepository
from sync_relay.domain.entities import ClientRecord
from sync_relay.infrastructure.database.models import ClientRecordModel


class SQLAlchemyClientRecordRepository(ClientRecordRepository):
    """Implements the ClientRecordRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ClientRecordModel) -> ClientRecord:
        """Map ORM model → domain entity."""
        return ClientRecord(
            id=model.id,
            client_id=model.client_id,
            code=model.code,
            name=model.name,
            address=model.address,
            branch=model.branch,
        )

    def _to_model(self, entity: ClientRecord) -> ClientRecordModel:
        """Map domain entity → ORM model (for creation)."""
        return ClientRecordModel(
            client_id=entity.client_id,
            code=entity.code,
            name=entity.name,
            address=entity.address,
            branch=entity.branch,
        )

    async def list_for_client(self, client_id: str) -> list[ClientRecord]:
        stmt = (
            select(ClientRecordModel)
            .where(ClientRecordModel.client_id == client_id)
            .order_by(ClientRecordModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def delete_for_client(self, client_id: str) -> int:
        result = await self._session.execute(
            delete(ClientRecordModel).where(ClientRecordModel.client_id == client_id)
        )
        return result.rowcount or 0

    async def create_many(self, records: list[ClientRecord]) -> int:
        if not records:
            return 0
        self._session.add_all([self._to_model(r) for r in records])
        await self._session.flush()
        return len(records)
