"""
Task Retry - Retry asynchronous tasks until success, failure or a limit.

A single control-flow primitive: `await retry(task, pause_ms=50, max_tries=5)`.
"""

from .exceptions import (
    RetryError,
    RetrySignal,
    LimitReached,
    InvalidTaskError,
    InvalidConfigError,
    RETRY,
    LIMIT_REACHED,
)
from .core import (
    RetryConfig,
    RetryStrategy,
    Success,
    Failure,
    Exhausted,
    Outcome,
    run,
    retry,
    run_with_callback,
    retry_with_callback,
    run_blocking,
    retry_blocking,
    with_retry,
    async_with_retry,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Engine
    "run",
    "retry",
    "run_with_callback",
    "retry_with_callback",
    "run_blocking",
    "retry_blocking",
    "with_retry",
    "async_with_retry",
    # Configuration
    "RetryConfig",
    "RetryStrategy",
    # Outcomes
    "Success",
    "Failure",
    "Exhausted",
    "Outcome",
    # Markers and exceptions
    "RETRY",
    "LIMIT_REACHED",
    "RetryError",
    "RetrySignal",
    "LimitReached",
    "InvalidTaskError",
    "InvalidConfigError",
]
