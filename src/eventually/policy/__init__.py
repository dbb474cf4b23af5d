"""Policy – failure strategies, options and the failure-policy resolver."""
from eventually.policy.decision import (
    Halt,
    HandlerDecision,
    Propagate,
    Rerun,
    Resolution,
    Suppress,
    UseOptions,
    UseStrategy,
    classify_handler_result,
)
from eventually.policy.options import (
    EventuallyOptions,
    FailureHandler,
    RedirectHandler,
    resolve_options,
    without_redirect,
)
from eventually.policy.resolver import FailurePolicyResolver
from eventually.policy.strategy import ErrorHandlingStrategy

__all__ = [
    "ErrorHandlingStrategy",
    "EventuallyOptions",
    "FailureHandler",
    "FailurePolicyResolver",
    "Halt",
    "HandlerDecision",
    "Propagate",
    "RedirectHandler",
    "Rerun",
    "Resolution",
    "Suppress",
    "UseOptions",
    "UseStrategy",
    "classify_handler_result",
    "resolve_options",
    "without_redirect",
]
