"""
Retry decorators for sync and async functions.
"""

import functools
import inspect
from typing import Awaitable, Callable, ParamSpec, TypeVar

from .config import RetryConfig
from .engine import retry, retry_blocking
from ..exceptions import InvalidTaskError

P = ParamSpec("P")
T = TypeVar("T")


def with_retry(
    config: RetryConfig | None = None,
    **overrides,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """
    Decorator for synchronous functions with retry logic.

    Args:
        config: Retry configuration (default: RetryConfig())
        **overrides: RetryConfig fields overriding `config`

    Returns:
        Decorated function; each call is retried as by `retry_blocking`

    Raises:
        InvalidTaskError: when applied to a coroutine function
    """
    config = RetryConfig.resolve(config, **overrides)

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        if inspect.iscoroutinefunction(func):
            raise InvalidTaskError(
                func,
                "with_retry cannot wrap a coroutine function, use async_with_retry",
            )

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return retry_blocking(lambda: func(*args, **kwargs), config)

        return wrapper

    return decorator


def async_with_retry(
    config: RetryConfig | None = None,
    **overrides,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Decorator for async functions with retry logic.

    Args:
        config: Retry configuration (default: RetryConfig())
        **overrides: RetryConfig fields overriding `config`

    Returns:
        Decorated async function; each call is retried as by `retry`
    """
    config = RetryConfig.resolve(config, **overrides)

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return await retry(lambda: func(*args, **kwargs), config)

        return wrapper

    return decorator
