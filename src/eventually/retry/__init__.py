"""Retry – bounded sequential retries with a millisecond backoff schedule."""
from eventually.retry.backoff import BackoffSchedule, ensure_sequence
from eventually.retry.delay import Delay, sleep
from eventually.retry.engine import RetryEngine, SequentialRetryEngine, try_do
from eventually.retry.tenacity_adapter import TenacityRetryEngine

__all__ = [
    "BackoffSchedule",
    "Delay",
    "RetryEngine",
    "SequentialRetryEngine",
    "TenacityRetryEngine",
    "ensure_sequence",
    "sleep",
    "try_do",
]
