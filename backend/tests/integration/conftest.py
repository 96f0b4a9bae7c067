"""Fixtures running the relay API against a throwaway SQLite database."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from sync_relay.application.interfaces import StoreGateway, StoreSession
from sync_relay.application.services import TenantLockRegistry
from sync_relay.config import Settings
from sync_relay.infrastructure.database import Base, SQLAlchemyStoreGateway, SyncUserModel
from sync_relay.infrastructure.database.session import build_engine, build_session_factory
from sync_relay.infrastructure.dependencies import get_store_gateway, get_tenant_locks
from sync_relay.main import app


class CountingGateway(StoreGateway):
    """Delegating gateway that counts how many connections were requested."""

    def __init__(self, inner: StoreGateway):
        self._inner = inner
        self.connections = 0

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[StoreSession]:
        self.connections += 1
        async with self._inner.connect() as session:
            yield session


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    settings = Settings(database_url=f"sqlite:///{tmp_path / 'relay.db'}")
    engine = build_engine(settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = build_session_factory(engine)
    async with factory() as session:
        session.add_all(
            [
                SyncUserModel(
                    client_id="branch-01",
                    access_token="tok-01",
                    db_user="relay_branch01",
                    db_password="s3cret",
                ),
                SyncUserModel(
                    client_id="branch-02",
                    access_token="tok-02",
                    db_user="relay_branch02",
                    db_password="other",
                ),
            ]
        )
        await session.commit()

    yield factory
    await engine.dispose()


@pytest.fixture
def gateway(session_factory) -> CountingGateway:
    return CountingGateway(SQLAlchemyStoreGateway(session_factory))


@pytest_asyncio.fixture
async def client(gateway) -> AsyncIterator[AsyncClient]:
    locks = TenantLockRegistry()
    app.dependency_overrides[get_store_gateway] = lambda: gateway
    app.dependency_overrides[get_tenant_locks] = lambda: locks
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as http:
            yield http
    finally:
        app.dependency_overrides.clear()
