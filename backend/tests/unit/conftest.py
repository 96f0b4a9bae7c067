"""In-memory fakes of the store ports shared by the unit tests."""

import asyncio
import copy
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import pytest

from sync_relay.application.interfaces import (
    ClientRecordRepository,
    StoreGateway,
    StoreSession,
    SyncLogRepository,
    TenantRepository,
)
from sync_relay.domain.entities import ClientRecord, SyncLogEntry, Tenant
from sync_relay.domain.exceptions import StoreError


class FakeStore:
    """Committed state plus knobs for injecting faults."""

    def __init__(self):
        self.tenants: list[Tenant] = []
        self.records: list[ClientRecord] = []
        self.logs: list[SyncLogEntry] = []
        self.connections_opened = 0
        self.unreachable = False
        self.fail_on: set[str] = set()
        self.delay = 0.0
        # client_id -> writers currently inside a replace, and the peak seen
        self.writers: dict[str, int] = {}
        self.peak_writers: dict[str, int] = {}

    def add_tenant(self, client_id: str, token: str, **kwargs) -> Tenant:
        tenant = Tenant(client_id=client_id, access_token=token, **kwargs)
        self.tenants.append(tenant)
        return tenant

    def records_for(self, client_id: str) -> list[ClientRecord]:
        return [r for r in self.records if r.client_id == client_id]

    def logs_for(self, client_id: str) -> list[SyncLogEntry]:
        return [e for e in self.logs if e.client_id == client_id]

    async def step(self, operation: str) -> None:
        await asyncio.sleep(self.delay)
        if operation in self.fail_on:
            raise StoreError(f"simulated {operation} failure")


class FakeTenantRepository(TenantRepository):
    def __init__(self, store: FakeStore):
        self._store = store

    async def find_by_credentials(self, client_id, access_token, *, for_update=False):
        await self._store.step("authenticate")
        return [
            t
            for t in self._store.tenants
            if t.client_id == client_id and t.access_token == access_token
        ]


class FakeClientRecordRepository(ClientRecordRepository):
    """Buffers deletes and inserts until the session commits."""

    def __init__(self, store: FakeStore):
        self._store = store
        self.cleared: set[str] = set()
        self.pending: list[ClientRecord] = []

    async def list_for_client(self, client_id):
        committed = [] if client_id in self.cleared else self._store.records_for(client_id)
        return committed + [r for r in self.pending if r.client_id == client_id]

    async def delete_for_client(self, client_id):
        if client_id not in self.cleared:
            self.cleared.add(client_id)
            store = self._store
            store.writers[client_id] = store.writers.get(client_id, 0) + 1
            store.peak_writers[client_id] = max(
                store.peak_writers.get(client_id, 0), store.writers[client_id]
            )
        await self._store.step("delete")
        return len(self._store.records_for(client_id))

    async def create_many(self, records):
        await self._store.step("insert")
        self.pending.extend(copy.deepcopy(records))
        return len(records)

    def apply(self) -> None:
        store = self._store
        store.records = [r for r in store.records if r.client_id not in self.cleared]
        store.records.extend(self.pending)

    def release(self) -> None:
        for client_id in self.cleared:
            self._store.writers[client_id] -= 1


class FakeSyncLogRepository(SyncLogRepository):
    def __init__(self, store: FakeStore):
        self._store = store
        self.pending: list[SyncLogEntry] = []

    async def append(self, entry):
        await self._store.step("log")
        entry.id = len(self._store.logs) + len(self.pending) + 1
        self.pending.append(entry)
        return entry

    async def list_for_client(self, client_id, limit=100):
        entries = self._store.logs + self.pending
        return [e for e in reversed(entries) if e.client_id == client_id][:limit]


class FakeStoreSession(StoreSession):
    def __init__(self, store: FakeStore):
        self.tenants = FakeTenantRepository(store)
        self.client_records = FakeClientRecordRepository(store)
        self.sync_logs = FakeSyncLogRepository(store)


class FakeStoreGateway(StoreGateway):
    """Publishes a session's writes only when its block exits cleanly."""

    def __init__(self, store: FakeStore):
        self.store = store

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[StoreSession]:
        self.store.connections_opened += 1
        if self.store.unreachable:
            raise StoreError("connection refused")

        session = FakeStoreSession(self.store)
        try:
            yield session
            await self.store.step("commit")
            session.client_records.apply()
            self.store.logs.extend(session.sync_logs.pending)
        finally:
            session.client_records.release()


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def gateway(store: FakeStore) -> FakeStoreGateway:
    return FakeStoreGateway(store)
