"""
Task Retry - Core Engine.

Run a task repeatedly until it succeeds, fails, or a try count or time
limit is reached, with linear, exponential or custom pauses.
"""

from .config import RetryConfig, RetryStrategy
from .backoff import RetryPolicy, calculate_pause
from .outcome import AttemptKind, AttemptResult, Exhausted, Failure, Outcome, Success
from .timing import blocking_sleep_ms, monotonic_ms, sleep_ms
from .engine import (
    retry,
    retry_blocking,
    retry_with_callback,
    run,
    run_blocking,
    run_with_callback,
)
from .decorators import async_with_retry, with_retry

__all__ = [
    "RetryConfig",
    "RetryStrategy",
    "RetryPolicy",
    "calculate_pause",
    "AttemptKind",
    "AttemptResult",
    "Success",
    "Failure",
    "Exhausted",
    "Outcome",
    "monotonic_ms",
    "sleep_ms",
    "blocking_sleep_ms",
    "run",
    "retry",
    "run_with_callback",
    "retry_with_callback",
    "run_blocking",
    "retry_blocking",
    "with_retry",
    "async_with_retry",
]
