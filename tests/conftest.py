"""Shared fixtures: a fake clock and a task factory."""

import pytest

from task_retry import RETRY


class FakeClock:
    """Millisecond clock that only moves when told to, or when slept on."""

    def __init__(self):
        self.now = 0.0
        self.pauses: list[float] = []

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms

    async def sleep(self, ms: float) -> None:
        self.pauses.append(ms)
        self.now += ms

    def blocking_sleep(self, ms: float) -> None:
        self.pauses.append(ms)
        self.now += ms


class ScriptedTask:
    """
    Task that asks for a retry `num_fails` times, then returns `value`
    or raises `error`.
    """

    def __init__(
        self,
        num_fails: int,
        value=None,
        error: BaseException | None = None,
        clock=None,
        duration_ms=0,
    ):
        self.num_fails = num_fails
        self.value = value
        self.error = error
        self.clock = clock
        self.duration_ms = duration_ms
        self.num_tries = 0

    def _settle(self):
        self.num_tries += 1
        if self.clock is not None:
            self.clock.advance(self.duration_ms)
        if self.num_fails > 0:
            self.num_fails -= 1
            raise RETRY
        if self.error is not None:
            raise self.error
        return self.value

    async def __call__(self):
        return self._settle()

    def blocking(self):
        return self._settle()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_task():
    return ScriptedTask
