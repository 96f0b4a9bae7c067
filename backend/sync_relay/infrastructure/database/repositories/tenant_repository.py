"""Concrete repository for tenants backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from sync_relay.application.interfaces import TenantRepository
from sync_relay.domain.entities import Tenant
from sync_relay.infrastructure.database.models import SyncUserModel


class SQLAlchemyTenantRepository(TenantRepository):
    """Implements the TenantRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: SyncUserModel) -> Tenant:
        """Map ORM model → domain entity."""
        return Tenant(
            client_id=model.client_id,
            access_token=model.access_token,
            db_user=model.db_user,
            db_password=model.db_password,
        )

    async def find_by_credentials(
        self, client_id: str, access_token: str, *, for_update: bool = False
    ) -> list[Tenant]:
        stmt = select(SyncUserModel).where(
            SyncUserModel.client_id == client_id,
            SyncUserModel.access_token == access_token,
        )
        if for_update:
            # Ignored by SQLite; row lock on PostgreSQL.
            stmt = stmt.with_for_update()
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]
