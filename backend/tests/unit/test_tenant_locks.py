"""Unit tests for the per-tenant lock registry."""

import asyncio

import pytest

from sync_relay.application.services import TenantLockRegistry


@pytest.mark.asyncio
async def test_same_tenant_is_serialized():
    locks = TenantLockRegistry()
    events: list[str] = []

    async def worker(name: str):
        async with locks.hold("c1"):
            events.append(f"{name}-in")
            await asyncio.sleep(0.01)
            events.append(f"{name}-out")

    await asyncio.gather(worker("a"), worker("b"))
    assert events in (
        ["a-in", "a-out", "b-in", "b-out"],
        ["b-in", "b-out", "a-in", "a-out"],
    )


@pytest.mark.asyncio
async def test_different_tenants_run_concurrently():
    locks = TenantLockRegistry()
    inside = asyncio.Event()

    async def first():
        async with locks.hold("c1"):
            await asyncio.wait_for(inside.wait(), timeout=1)

    async def second():
        async with locks.hold("c2"):
            inside.set()

    await asyncio.gather(first(), second())


@pytest.mark.asyncio
async def test_released_locks_are_dropped():
    locks = TenantLockRegistry()
    async with locks.hold("c1"):
        assert locks.is_locked("c1")
        assert len(locks) == 1
    assert not locks.is_locked("c1")
    assert len(locks) == 0


@pytest.mark.asyncio
async def test_lock_is_released_on_error():
    locks = TenantLockRegistry()
    with pytest.raises(RuntimeError):
        async with locks.hold("c1"):
            raise RuntimeError("boom")
    assert len(locks) == 0
