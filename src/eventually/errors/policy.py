"""Failure-policy errors – raised when a failure handler breaks its contract."""

from __future__ import annotations

import traceback
from typing import Any

from eventually.errors.base import EventuallyError


def _describe(error: BaseException) -> str:
    trace = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    return f"{error}\n{trace}"


class UnhandledStrategyError(EventuallyError):
    """A failure handler returned a value outside :class:`ErrorHandlingStrategy`.

    Signals a caller bug rather than an operational failure. The message embeds
    the text and traceback of the error that was being handled.
    """

    default_code = "unhandled_strategy"

    def __init__(self, strategy: Any, original: BaseException) -> None:
        super().__init__(
            f'Unhandled failure strategy "{strategy}"\n'
            f"original error follows:\n{_describe(original)}",
            detail={"strategy": repr(strategy)},
            cause=original,
        )
        self.strategy = strategy
        self.original = original


__all__ = ["UnhandledStrategyError"]
