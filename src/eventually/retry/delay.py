"""Retry – the Delay collaborator."""
from __future__ import annotations

import asyncio
from typing import Protocol


class Delay(Protocol):
    """Port: suspend the calling coroutine for roughly *ms* milliseconds."""

    async def __call__(self, ms: float) -> None: ...


async def sleep(ms: float) -> None:
    """Default :class:`Delay` built on :func:`asyncio.sleep`.

    Best effort: may resume late under load, never early.
    """
    await asyncio.sleep(ms / 1000.0)


__all__ = ["Delay", "sleep"]
