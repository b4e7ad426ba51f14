"""
Retry engine: repeatedly run a task until it succeeds, fails terminally or a
limit is reached.

Two signaling conventions are supported on top of one loop:

- raise-based: the task raises `RETRY` (or any error accepted by `retry_on`)
  to ask for another attempt;
- callback-based: the task receives a `please_retry` callable and calls it
  before settling.

Each adapter turns one invocation into an `AttemptResult`; the loop itself
only looks at that tagged result.
"""

import inspect
import logging
from typing import Any, Awaitable, Callable

from .backoff import RetryPolicy
from .config import RetryConfig
from .outcome import AttemptKind, AttemptResult, Exhausted, Failure, Outcome, Success
from .timing import blocking_sleep_ms, monotonic_ms, sleep_ms
from ..exceptions import LIMIT_REACHED, InvalidTaskError, RetrySignal

logger = logging.getLogger(__name__)

Clock = Callable[[], float]
AsyncSleep = Callable[[float], Awaitable[None]]
BlockingSleep = Callable[[float], None]


_ASYNC_TASK_MESSAGE = (
    "Blocking retry needs a synchronous task, use run()/retry() instead"
)


def _check_task(task: Any) -> None:
    if not callable(task):
        raise InvalidTaskError(task)


def _check_blocking_task(task: Any) -> None:
    _check_task(task)
    if inspect.iscoroutinefunction(task):
        raise InvalidTaskError(task, _ASYNC_TASK_MESSAGE)


def _classify(error: Exception, config: RetryConfig) -> AttemptResult:
    if config.retry_on(error):
        if isinstance(error, RetrySignal):
            error.detached()
        return AttemptResult.retry(error)
    return AttemptResult.terminal(error)


def _limit_reached(config: RetryConfig, tries: int) -> Exhausted:
    error = config.limit_error if config.limit_error is not None else LIMIT_REACHED
    return Exhausted(error, tries=tries)


def _announce_retry(
    config: RetryConfig,
    try_idx: int,
    error: BaseException | None,
    pause: float,
) -> None:
    if config.on_retry:
        config.on_retry(try_idx, error, pause)
    else:
        limit = f"/{config.max_tries}" if config.limits_tries else ""
        logger.debug(f"Try {try_idx + 1}{limit} asked for retry, waiting {pause:.0f}ms")


async def _attempt(task: Callable[[], Any], config: RetryConfig) -> AttemptResult:
    try:
        result = task()
        if inspect.isawaitable(result):
            result = await result
    except Exception as e:
        return _classify(e, config)
    return AttemptResult.success(result)


async def _attempt_with_callback(
    task: Callable[[Callable[[], None]], Any],
    config: RetryConfig,
) -> AttemptResult:
    requested = False

    def please_retry() -> None:
        nonlocal requested
        requested = True

    try:
        result = task(please_retry)
        if inspect.isawaitable(result):
            result = await result
    except Exception as e:
        if requested:
            return AttemptResult.retry(e)
        return _classify(e, config)
    if requested:
        return AttemptResult.retry()
    return AttemptResult.success(result)


async def _run_loop(
    attempt: Callable[[], Awaitable[AttemptResult]],
    config: RetryConfig,
    clock: Clock,
    sleep: AsyncSleep,
) -> Outcome:
    policy = RetryPolicy(config, clock())
    try_idx = 0
    while True:
        result = await attempt()
        if result.kind == AttemptKind.SUCCESS:
            return Success(result.value, tries=try_idx + 1)
        if result.kind == AttemptKind.TERMINAL:
            return Failure(result.error, tries=try_idx + 1)

        if policy.tries_exhausted(try_idx + 1):
            return _limit_reached(config, try_idx + 1)
        pause = policy.next_pause(try_idx, clock())
        if pause is None:
            return _limit_reached(config, try_idx + 1)
        _announce_retry(config, try_idx, result.error, pause)
        await sleep(pause)
        try_idx += 1


async def run(
    task: Callable[[], Any],
    config: RetryConfig | None = None,
    *,
    clock: Clock = monotonic_ms,
    sleep: AsyncSleep = sleep_ms,
    **overrides,
) -> Outcome:
    """
    Run `task` until it succeeds, fails terminally, or a limit is reached.

    Args:
        task: Callable taking no arguments; may return a value or an awaitable
        config: Retry configuration (default: RetryConfig())
        clock: Millisecond monotonic clock
        sleep: Coroutine function pausing for the given milliseconds
        **overrides: RetryConfig fields overriding `config`

    Returns:
        Success, Failure (task error, unchanged) or Exhausted (limit signal)
    """
    _check_task(task)
    config = RetryConfig.resolve(config, **overrides)
    return await _run_loop(lambda: _attempt(task, config), config, clock, sleep)


async def retry(
    task: Callable[[], Any],
    config: RetryConfig | None = None,
    **kwargs,
) -> Any:
    """
    Run `task` with retries and return its value.

    Raises:
        The task's own terminal error, unchanged, or LIMIT_REACHED
        (or `config.limit_error`) when a limit was hit.
    """
    outcome = await run(task, config, **kwargs)
    return outcome.unwrap()


async def run_with_callback(
    task: Callable[[Callable[[], None]], Any],
    config: RetryConfig | None = None,
    *,
    clock: Clock = monotonic_ms,
    sleep: AsyncSleep = sleep_ms,
    **overrides,
) -> Outcome:
    """
    Like `run`, but the task receives a `please_retry` callable.

    Calling `please_retry()` before the attempt settles marks the attempt as
    a retry request, whatever the task then returns or raises.
    """
    _check_task(task)
    config = RetryConfig.resolve(config, **overrides)
    return await _run_loop(
        lambda: _attempt_with_callback(task, config), config, clock, sleep
    )


async def retry_with_callback(
    task: Callable[[Callable[[], None]], Any],
    config: RetryConfig | None = None,
    **kwargs,
) -> Any:
    """Callback-convention counterpart of `retry`."""
    outcome = await run_with_callback(task, config, **kwargs)
    return outcome.unwrap()


def run_blocking(
    task: Callable[[], Any],
    config: RetryConfig | None = None,
    *,
    clock: Clock = monotonic_ms,
    sleep: BlockingSleep = blocking_sleep_ms,
    **overrides,
) -> Outcome:
    """
    Synchronous counterpart of `run` for plain blocking callables.

    Raises:
        InvalidTaskError: if `task` is not callable, is a coroutine function,
            or returns an awaitable; use `run` for async tasks.
    """
    _check_blocking_task(task)
    config = RetryConfig.resolve(config, **overrides)
    policy = RetryPolicy(config, clock())
    try_idx = 0
    while True:
        try:
            value = task()
        except Exception as e:
            result = _classify(e, config)
        else:
            if inspect.isawaitable(value):
                if inspect.iscoroutine(value):
                    value.close()
                raise InvalidTaskError(task, _ASYNC_TASK_MESSAGE)
            return Success(value, tries=try_idx + 1)
        if result.kind == AttemptKind.TERMINAL:
            return Failure(result.error, tries=try_idx + 1)

        if policy.tries_exhausted(try_idx + 1):
            return _limit_reached(config, try_idx + 1)
        pause = policy.next_pause(try_idx, clock())
        if pause is None:
            return _limit_reached(config, try_idx + 1)
        _announce_retry(config, try_idx, result.error, pause)
        sleep(pause)
        try_idx += 1


def retry_blocking(
    task: Callable[[], Any],
    config: RetryConfig | None = None,
    **kwargs,
) -> Any:
    """Synchronous counterpart of `retry`."""
    return run_blocking(task, config, **kwargs).unwrap()
