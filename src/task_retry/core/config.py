"""
Retry configuration and strategy definitions.
"""

import dataclasses
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Union

from ..exceptions import InvalidConfigError, is_retry_signal

StrategyFunc = Callable[[int], float]
OnRetry = Callable[[int, BaseException, float], None]


class RetryStrategy(str, Enum):
    """Available retry strategies."""

    LINEAR = "linear"  # pause = base
    EXPONENTIAL = "exponential"  # pause = base * (2 ** try_idx)


def clamp_ms(value: float | None) -> float:
    """
    Coerce a millisecond or count value to a non-negative number.

    Absent, NaN and infinite values become 0, which means "no limit" for
    the limit fields.
    """
    if value is None:
        return 0
    if isinstance(value, float) and not math.isfinite(value):
        return 0
    return max(0, value)


@dataclass(frozen=True)
class RetryConfig:
    """
    Configuration for retry behavior.

    Attributes:
        pause_ms: Base pause between tries in milliseconds (default: 0)
        max_tries: Maximum number of tries, 0 means unlimited (default: 0)
        max_total_time_ms: Time budget since the first try started,
            0 means unlimited (default: 0)
        retry_on: Predicate over the raised error, True means retry
            (default: error is RETRY)
        strategy: "linear", "exponential" or a function of the number of
            tries so far returning the pause in milliseconds (default: linear)
        limit_error: Exception raised instead of LIMIT_REACHED when a limit
            is hit (default: None)
        on_retry: Optional callback(try_idx, error, pause_ms) called before
            each pause
    """

    pause_ms: float = 0
    max_tries: int = 0
    max_total_time_ms: float = 0
    retry_on: Callable[[BaseException], bool] = is_retry_signal
    strategy: Union[RetryStrategy, StrategyFunc] = RetryStrategy.LINEAR
    limit_error: BaseException | None = None
    on_retry: OnRetry | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "pause_ms", clamp_ms(self.pause_ms))
        object.__setattr__(self, "max_tries", int(clamp_ms(self.max_tries)))
        object.__setattr__(self, "max_total_time_ms", clamp_ms(self.max_total_time_ms))
        if self.retry_on is None:
            object.__setattr__(self, "retry_on", is_retry_signal)
        object.__setattr__(self, "strategy", self._resolve_strategy(self.strategy))

    @staticmethod
    def _resolve_strategy(strategy) -> Union[RetryStrategy, StrategyFunc]:
        if strategy is None:
            return RetryStrategy.LINEAR
        if isinstance(strategy, RetryStrategy):
            return strategy
        if isinstance(strategy, str):
            try:
                return RetryStrategy(strategy)
            except ValueError:
                raise InvalidConfigError(
                    f"Unknown retry strategy {strategy!r}", field="strategy"
                ) from None
        if callable(strategy):
            return strategy
        raise InvalidConfigError(
            "Retry strategy must be a string or callable, "
            f"got {type(strategy).__name__}",
            field="strategy",
        )

    @property
    def limits_tries(self) -> bool:
        return self.max_tries > 0

    @property
    def limits_time(self) -> bool:
        return self.max_total_time_ms > 0

    def replace(self, **changes) -> "RetryConfig":
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def resolve(cls, config: "RetryConfig | None" = None, **overrides) -> "RetryConfig":
        """Combine an optional config with keyword overrides."""
        if config is None:
            return cls(**overrides)
        if overrides:
            return config.replace(**overrides)
        return config

    @classmethod
    def no_retry(cls) -> "RetryConfig":
        """Preset for a single try, any retry request hits the limit."""
        return cls(max_tries=1)

    @classmethod
    def fixed(cls, pause_ms: float, max_tries: int = 0) -> "RetryConfig":
        """Preset for a constant pause between tries."""
        return cls(pause_ms=pause_ms, max_tries=max_tries)

    @classmethod
    def exponential(
        cls,
        pause_ms: float,
        max_tries: int = 0,
        max_total_time_ms: float = 0,
    ) -> "RetryConfig":
        """Preset for doubling pauses, starting at pause_ms."""
        return cls(
            pause_ms=pause_ms,
            max_tries=max_tries,
            max_total_time_ms=max_total_time_ms,
            strategy=RetryStrategy.EXPONENTIAL,
        )
