"""Policy – tagged unions for handler decisions and failure resolutions.

A failure handler answers with either a strategy or a whole new options
record. ``classify_handler_result`` tags that answer once, at the boundary;
everything downstream branches on the tag.

The resolver then answers the orchestrator with one of four resolutions:
``Propagate``, ``Halt``, ``Suppress`` or ``Rerun``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Union

from eventually.policy.options import EventuallyOptions


@dataclass(frozen=True)
class UseStrategy:
    strategy: Any


@dataclass(frozen=True)
class UseOptions:
    options: EventuallyOptions


HandlerDecision = Union[UseStrategy, UseOptions]


def classify_handler_result(result: Any) -> HandlerDecision:
    """Tag a raw failure-handler result.

    Already-tagged decisions pass through untouched. An options record becomes
    ``UseOptions``; any other value is treated as a strategy and validated
    later by the resolver.
    """
    if isinstance(result, (UseStrategy, UseOptions)):
        return result
    if isinstance(result, EventuallyOptions):
        return UseOptions(result)
    return UseStrategy(result)


@dataclass(frozen=True)
class Propagate:
    """Raise *error* to the caller."""

    error: Exception


@dataclass(frozen=True)
class Halt:
    """Never settle."""


@dataclass(frozen=True)
class Suppress:
    """Settle with ``None``."""


@dataclass(frozen=True)
class Rerun:
    """Start a fresh round with *operation* under *options*."""

    operation: Callable[[], Awaitable[Any]]
    options: EventuallyOptions | None


Resolution = Union[Propagate, Halt, Suppress, Rerun]


__all__ = [
    "Halt",
    "HandlerDecision",
    "Propagate",
    "Rerun",
    "Resolution",
    "Suppress",
    "UseOptions",
    "UseStrategy",
    "classify_handler_result",
]
