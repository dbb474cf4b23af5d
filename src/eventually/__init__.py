"""
eventually – retry async operations with back-off; on exhaustion fail, halt,
suppress, retry or redirect according to a pluggable failure policy.

Import path convention::

    from eventually import EventuallyOptions, ErrorHandlingStrategy, eventually
    from eventually.config import configure_defaults
    from eventually.retry import TenacityRetryEngine
"""

from eventually.config import configure_defaults, get_defaults, reset_defaults
from eventually.errors import EventuallyError, UnhandledStrategyError
from eventually.orchestrator import Eventually, eventual, eventually
from eventually.policy import ErrorHandlingStrategy, EventuallyOptions
from eventually.retry import sleep

__version__ = "1.2.0"
__all__ = [
    "ErrorHandlingStrategy",
    "Eventually",
    "EventuallyError",
    "EventuallyOptions",
    "UnhandledStrategyError",
    "__version__",
    "configure_defaults",
    "eventual",
    "eventually",
    "get_defaults",
    "reset_defaults",
    "sleep",
]
