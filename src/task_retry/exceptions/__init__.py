"""
Task Retry - Exception Hierarchy.

Reserved retry markers and configuration errors.
"""

from .base import (
    RetryError,
    RetrySignal,
    LimitReached,
    InvalidTaskError,
    InvalidConfigError,
    RETRY,
    LIMIT_REACHED,
    is_retry_signal,
)

__all__ = [
    "RetryError",
    "RetrySignal",
    "LimitReached",
    "InvalidTaskError",
    "InvalidConfigError",
    "RETRY",
    "LIMIT_REACHED",
    "is_retry_signal",
]
