"""
Clock and delay primitives used by the retry engine.
"""

import asyncio
import time


def monotonic_ms() -> float:
    """Current time in milliseconds from a monotonic clock."""
    return time.monotonic() * 1000.0


async def sleep_ms(duration_ms: float) -> None:
    """Suspend the current coroutine for at least `duration_ms` milliseconds."""
    await asyncio.sleep(max(0.0, duration_ms) / 1000.0)


def blocking_sleep_ms(duration_ms: float) -> None:
    """Block the current thread for at least `duration_ms` milliseconds."""
    time.sleep(max(0.0, duration_ms) / 1000.0)
