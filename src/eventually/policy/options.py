"""Policy – EventuallyOptions record and the options resolver."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Sequence, Union

if TYPE_CHECKING:
    from eventually.config.defaults import DefaultsProvider
    from eventually.policy.decision import HandlerDecision
    from eventually.policy.strategy import ErrorHandlingStrategy

FailureHandler = Callable[
    [Exception],
    Awaitable[Union["ErrorHandlingStrategy", "EventuallyOptions", "HandlerDecision"]],
]
RedirectHandler = Callable[[Exception], Awaitable[Any]]
Backoff = Union[Sequence[float], float]

# Fields filled from the process-wide defaults when left as ``None``.
DEFAULTED_FIELDS = ("retries", "fail", "backoff")


@dataclass(frozen=True)
class EventuallyOptions:
    """Retry and failure-handling options for one ``eventually`` round.

    Every field is optional; ``None`` means "use the configured default".

    Attributes:
        retries: Additional attempts after the first one.
        backoff: Millisecond delays between attempts. A single ``int`` is
            applied before every retry; when a sequence runs out its last
            value keeps being used.
        fail: Async handler consulted once retries are exhausted. Returns an
            :class:`ErrorHandlingStrategy` or a new ``EventuallyOptions`` to
            start over with.
        redirect: Async function producing a substitute result from the last
            error. Takes precedence over ``fail``.
    """

    retries: int | None = None
    backoff: Backoff | None = None
    fail: FailureHandler | None = None
    redirect: RedirectHandler | None = None


def without_redirect(options: EventuallyOptions) -> EventuallyOptions:
    """Return a copy of *options* with ``redirect`` cleared, everything else kept."""
    return dataclasses.replace(options, redirect=None)


def resolve_options(
    options: EventuallyOptions | None,
    defaults: DefaultsProvider,
) -> EventuallyOptions:
    """Fill unspecified fields of *options* from the current defaults.

    With no options at all the current defaults record itself is returned.
    """
    current = defaults.get()
    if options is None:
        return current
    missing = {
        name: getattr(current, name)
        for name in DEFAULTED_FIELDS
        if getattr(options, name) is None
    }
    if not missing:
        return options
    return dataclasses.replace(options, **missing)


__all__ = [
    "Backoff",
    "DEFAULTED_FIELDS",
    "EventuallyOptions",
    "FailureHandler",
    "RedirectHandler",
    "resolve_options",
    "without_redirect",
]
