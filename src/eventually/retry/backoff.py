"""Retry – millisecond backoff schedules."""
from __future__ import annotations

import numbers
from collections import deque
from typing import Iterator, Sequence


def ensure_sequence(backoff: Sequence[float] | float | None) -> tuple[float, ...]:
    """Normalise a scalar or sequence backoff to a tuple of milliseconds.

    Any real number counts as a scalar, so ``1.5`` becomes ``(1.5,)``.
    """
    if backoff is None:
        return ()
    if isinstance(backoff, numbers.Real):
        return (backoff,)
    return tuple(backoff)


class BackoffSchedule:
    """Ordered delays between attempts; the last one repeats once exhausted.

    An empty schedule means no waiting (every delay is ``0``).
    """

    def __init__(self, backoff: Sequence[float] | float | None = None) -> None:
        self._delays = ensure_sequence(backoff)
        self.fallback = self._delays[-1] if self._delays else 0

    @property
    def delays(self) -> tuple[float, ...]:
        return self._delays

    def delay_for(self, retry: int) -> float:
        """Delay (ms) before the *retry*-th retry, counting from ``0``."""
        if 0 <= retry < len(self._delays):
            return self._delays[retry]
        return self.fallback

    def __iter__(self) -> Iterator[float]:
        """Yield delays forever, consuming a private working copy front first."""
        pending = deque(self._delays)
        while True:
            yield pending.popleft() if pending else self.fallback

    def __repr__(self) -> str:
        return f"BackoffSchedule(delays={list(self._delays)!r})"


__all__ = ["BackoffSchedule", "ensure_sequence"]
