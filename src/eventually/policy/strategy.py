"""Policy – ErrorHandlingStrategy enum."""
from __future__ import annotations

from enum import Enum


class ErrorHandlingStrategy(str, Enum):
    """What to do once retries are exhausted."""

    FAIL = "fail"  # pass on the failure
    HALT = "halt"  # never settle
    SUPPRESS = "suppress"  # settle with None
    RETRY = "retry"  # run again under the same options


__all__ = ["ErrorHandlingStrategy"]
