"""Deadline helper shared by the relay services."""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from sync_relay.domain.exceptions import StoreError

T = TypeVar("T")


async def with_timeout(awaitable: Awaitable[T], seconds: float | None, operation: str) -> T:
    """Await ``awaitable`` for at most ``seconds``; a timeout becomes a StoreError."""
    try:
        return await asyncio.wait_for(awaitable, timeout=seconds)
    except asyncio.TimeoutError as exc:
        raise StoreError(f"{operation} timed out after {seconds:g}s") from exc
