"""Orchestrator – the ``eventually`` entry point.

Each round resolves its options, runs the retry engine and, once retries are
exhausted, asks the failure-policy resolver what to do next. A ``Rerun``
resolution starts a new, independent round; rounds are chained in a loop so
an endless ``RETRY`` policy never deepens the call stack.
"""
from __future__ import annotations

import asyncio
import functools
import logging
from typing import Any, Awaitable, Callable, NoReturn, TypeVar

from eventually.config.defaults import DefaultsProvider, default_provider
from eventually.policy.decision import Halt, Rerun, Suppress
from eventually.policy.options import EventuallyOptions, resolve_options
from eventually.policy.resolver import FailurePolicyResolver
from eventually.retry.delay import Delay
from eventually.retry.engine import RetryEngine, SequentialRetryEngine

T = TypeVar("T")
logger = logging.getLogger(__name__)


async def _never() -> NoReturn:
    # Deliberately leaks a pending future; callers bound it with
    # asyncio.wait_for() or by cancelling their task.
    await asyncio.get_running_loop().create_future()
    raise RuntimeError("halted future was completed")


class Eventually:
    """Retry runner with injectable defaults, delay and engine.

    Parameters
    ----------
    defaults:
        Provider read at the start of every round. Defaults to the
        process-wide provider shared with :func:`configure_defaults`.
    delay:
        Millisecond delay used by the default engine.
    engine:
        Retry engine; overrides *delay* when given.
    """

    def __init__(
        self,
        defaults: DefaultsProvider | None = None,
        delay: Delay | None = None,
        engine: RetryEngine | None = None,
    ) -> None:
        self._defaults = defaults or default_provider
        self._engine: RetryEngine = engine or SequentialRetryEngine(delay)
        self._resolver = FailurePolicyResolver()

    async def run(
        self,
        operation: Callable[[], Awaitable[T]],
        options: EventuallyOptions | None = None,
    ) -> T | None:
        rounds = 0
        while True:
            rounds += 1
            effective = resolve_options(options, self._defaults)
            try:
                return await self._engine.run(
                    operation, effective.retries or 0, effective.backoff
                )
            except Exception as exc:
                last_exc = exc

            resolution = await self._resolver.resolve(last_exc, effective, operation)
            if isinstance(resolution, Rerun):
                logger.debug("eventually round=%d rerun", rounds)
                operation, options = resolution.operation, resolution.options
                continue
            if isinstance(resolution, Suppress):
                logger.debug("eventually round=%d suppressed exc=%r", rounds, last_exc)
                return None
            if isinstance(resolution, Halt):
                logger.debug("eventually round=%d halted exc=%r", rounds, last_exc)
                await _never()
            raise resolution.error

    __call__ = run


_runner = Eventually()


async def eventually(
    operation: Callable[[], Awaitable[T]],
    options: EventuallyOptions | None = None,
) -> T | None:
    """Run *operation* with retries, backoff and a failure policy.

    Unspecified option fields come from the process-wide defaults as they are
    at the moment of the call.
    """
    return await _runner.run(operation, options)


def eventual(
    options: EventuallyOptions | None = None,
    *,
    runner: Eventually | None = None,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T | None]]]:
    """Decorator wrapping every call of an async function in ``eventually``."""

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T | None]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T | None:
            run = runner.run if runner is not None else _runner.run
            return await run(lambda: func(*args, **kwargs), options)

        return wrapper

    return decorator


__all__ = ["Eventually", "eventual", "eventually"]
