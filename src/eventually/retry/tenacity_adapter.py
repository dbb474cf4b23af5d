"""Retry – TenacityRetryEngine adapter.

Runs the :class:`~eventually.retry.engine.RetryEngine` contract on top of
``tenacity.AsyncRetrying``: same attempt count, same backoff schedule, same
:class:`~eventually.retry.delay.Delay` collaborator, and the last failure is
re-raised unchanged.

Example
-------
::

    from eventually import Eventually
    from eventually.retry import TenacityRetryEngine

    runner = Eventually(engine=TenacityRetryEngine())
    result = await runner(fetch, EventuallyOptions(retries=3, backoff=[100, 500]))
"""
from __future__ import annotations

from typing import Any, Awaitable, Callable, Sequence, TypeVar

import tenacity

from eventually.retry.backoff import BackoffSchedule
from eventually.retry.delay import Delay, sleep

T = TypeVar("T")


class TenacityRetryEngine:
    """Retry engine backed by the ``tenacity`` library.

    Parameters
    ----------
    delay:
        Millisecond :class:`Delay` used between attempts. Defaults to
        :func:`~eventually.retry.delay.sleep`.
    kwargs:
        Additional keyword arguments forwarded to :class:`tenacity.AsyncRetrying`
        (``before_sleep``, ``after`` and friends). ``stop``, ``wait``,
        ``sleep``, ``retry`` and ``reraise`` are owned by the engine.
    """

    def __init__(self, delay: Delay | None = None, **kwargs: Any) -> None:
        self._delay: Delay = delay or sleep
        self._extra_kwargs = kwargs

    def _build_async_retrying(self, retries: int, schedule: BackoffSchedule) -> tenacity.AsyncRetrying:
        def wait(retry_state: tenacity.RetryCallState) -> float:
            return schedule.delay_for(retry_state.attempt_number - 1) / 1000.0

        async def pause(seconds: float) -> None:
            await self._delay(round(seconds * 1000, 6))

        return tenacity.AsyncRetrying(
            stop=tenacity.stop_after_attempt(max(retries, 0) + 1),
            wait=wait,
            sleep=pause,
            retry=tenacity.retry_if_exception_type(Exception),
            reraise=True,
            **self._extra_kwargs,
        )

    async def run(
        self,
        operation: Callable[[], Awaitable[T]],
        retries: int,
        backoff: Sequence[float] | float | None,
    ) -> T:
        async for attempt in self._build_async_retrying(retries, BackoffSchedule(backoff)):
            with attempt:
                result = await operation()
        return result  # type: ignore[return-value]


__all__ = ["TenacityRetryEngine"]
