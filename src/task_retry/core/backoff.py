"""
Pause calculation and the per-call retry decision procedure.
"""

import math

from .config import RetryConfig, RetryStrategy


def calculate_pause(try_idx: int, config: RetryConfig) -> float:
    """
    Calculate the pause before the next try.

    Args:
        try_idx: Zero-based index of the try that just asked for a retry
        config: Retry configuration

    Returns:
        Pause in milliseconds, never negative
    """
    if config.strategy == RetryStrategy.LINEAR:
        return config.pause_ms
    if config.strategy == RetryStrategy.EXPONENTIAL:
        return config.pause_ms * (2**try_idx)

    # Custom strategies get the number of tries so far.
    pause = config.strategy(try_idx + 1)
    if pause is None or (isinstance(pause, float) and math.isnan(pause)):
        return 0
    return max(0, pause)


class RetryPolicy:
    """
    Decides, after each retry request, whether the loop may go on.

    One instance serves one engine call; it only holds the config and the
    start timestamp.
    """

    def __init__(self, config: RetryConfig, started_ms: float):
        self.config = config
        self.started_ms = started_ms

    def tries_exhausted(self, try_idx: int) -> bool:
        """True when `try_idx` tries have already been used up."""
        return self.config.limits_tries and try_idx >= self.config.max_tries

    def next_pause(self, try_idx: int, now_ms: float) -> float | None:
        """
        Pause to take before the next try, or None if the time budget forbids it.

        The budget is checked before pausing: a pause that would end past
        `max_total_time_ms` is never started.
        """
        pause = calculate_pause(try_idx, self.config)
        if self.config.limits_time:
            elapsed = now_ms - self.started_ms
            if elapsed + pause > self.config.max_total_time_ms:
                return None
        return pause
