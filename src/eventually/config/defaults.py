"""Config – process-wide defaults provider."""
from __future__ import annotations

import dataclasses
from typing import Sequence

from eventually.policy.options import EventuallyOptions, FailureHandler
from eventually.policy.strategy import ErrorHandlingStrategy
from eventually.retry.backoff import ensure_sequence


async def fail_always(error: Exception) -> ErrorHandlingStrategy:  # noqa: ARG001
    """Default failure handler: pass the failure on."""
    return ErrorHandlingStrategy.FAIL


def _initial() -> EventuallyOptions:
    return EventuallyOptions(retries=0, backoff=(), fail=fail_always)


class DefaultsProvider:
    """Holds the defaults that fill in unspecified option fields.

    The record is read on every call, so a later :meth:`configure` affects
    every subsequent ``eventually`` round. Not thread-safe; configure once at
    startup.
    """

    def __init__(self, initial: EventuallyOptions | None = None) -> None:
        self._current = initial or _initial()

    def get(self) -> EventuallyOptions:
        return self._current

    def configure(
        self,
        *,
        retries: int | None = None,
        fail: FailureHandler | None = None,
        backoff: Sequence[float] | float | None = None,
    ) -> EventuallyOptions:
        """Overwrite only the fields that are given."""
        changes: dict[str, object] = {}
        if retries is not None:
            changes["retries"] = retries
        if fail is not None:
            changes["fail"] = fail
        if backoff is not None:
            changes["backoff"] = ensure_sequence(backoff)
        if changes:
            self._current = dataclasses.replace(self._current, **changes)
        return self._current

    def reset(self) -> None:
        self._current = _initial()


default_provider = DefaultsProvider()


def configure_defaults(
    *,
    retries: int | None = None,
    fail: FailureHandler | None = None,
    backoff: Sequence[float] | float | None = None,
) -> EventuallyOptions:
    """Overwrite the process-wide defaults field by field."""
    return default_provider.configure(retries=retries, fail=fail, backoff=backoff)


def get_defaults() -> EventuallyOptions:
    return default_provider.get()


def reset_defaults() -> None:
    default_provider.reset()


__all__ = [
    "DefaultsProvider",
    "configure_defaults",
    "default_provider",
    "fail_always",
    "get_defaults",
    "reset_defaults",
]
