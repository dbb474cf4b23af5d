"""Retry – RetryEngine port and the native sequential engine."""
from __future__ import annotations

import logging
from typing import Awaitable, Callable, Protocol, Sequence, TypeVar

from eventually.retry.backoff import BackoffSchedule
from eventually.retry.delay import Delay, sleep

T = TypeVar("T")
logger = logging.getLogger(__name__)


class RetryEngine(Protocol):
    """Port: run an operation up to ``retries + 1`` times.

    Implementations return the first successful result or re-raise the last
    failure unchanged.
    """

    async def run(
        self,
        operation: Callable[[], Awaitable[T]],
        retries: int,
        backoff: Sequence[float] | float | None,
    ) -> T: ...


class SequentialRetryEngine:
    """Strictly sequential attempts, waiting on a :class:`Delay` between them."""

    def __init__(self, delay: Delay | None = None) -> None:
        self._delay: Delay = delay or sleep

    async def run(
        self,
        operation: Callable[[], Awaitable[T]],
        retries: int,
        backoff: Sequence[float] | float | None,
    ) -> T:
        delays = iter(BackoffSchedule(backoff))
        attempts = 0
        last_exc: Exception | None = None
        while True:
            if attempts > 0:
                await self._delay(next(delays))
            try:
                return await operation()
            except Exception as exc:
                last_exc = exc
            attempts += 1
            if attempts > retries:
                break
            logger.debug("retry attempt=%d of=%d exc=%r", attempts, retries, last_exc)
        raise last_exc  # type: ignore[misc]


async def try_do(
    operation: Callable[[], Awaitable[T]],
    retries: int,
    backoff: Sequence[float] | float | None = None,
    delay: Delay | None = None,
) -> T:
    """Functional shorthand for :meth:`SequentialRetryEngine.run`."""
    return await SequentialRetryEngine(delay).run(operation, retries, backoff)


__all__ = ["RetryEngine", "SequentialRetryEngine", "try_do"]
