"""Tests for retry decorators."""

import pytest
from task_retry import (
    RETRY,
    InvalidTaskError,
    LimitReached,
    RetryConfig,
    async_with_retry,
    with_retry,
)


class TestAsyncWithRetry:
    """Decorated coroutine functions are retried per call."""

    @pytest.mark.asyncio
    async def test_retries_decorated_coroutine(self):
        calls = []

        @async_with_retry(max_tries=5)
        async def fetch(key, *, suffix=""):
            calls.append(key)
            if len(calls) < 3:
                raise RETRY
            return key + suffix

        assert await fetch("a", suffix="!") == "a!"
        assert calls == ["a", "a", "a"]

    @pytest.mark.asyncio
    async def test_limit_reached(self):
        @async_with_retry(RetryConfig(max_tries=2))
        async def always_retry():
            raise RETRY

        with pytest.raises(LimitReached):
            await always_retry()

    @pytest.mark.asyncio
    async def test_each_call_gets_a_fresh_budget(self):
        calls = []

        @async_with_retry(max_tries=2)
        async def flaky():
            calls.append(1)
            if len(calls) % 2:
                raise RETRY
            return len(calls)

        assert await flaky() == 2
        assert await flaky() == 4

    def test_preserves_metadata(self):
        @async_with_retry()
        async def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."


class TestWithRetry:
    """Decorated plain functions are retried per call."""

    def test_retries_decorated_function(self):
        calls = []

        @with_retry(retry_on=lambda e: isinstance(e, ConnectionError))
        def connect(host):
            calls.append(host)
            if len(calls) < 2:
                raise ConnectionError(host)
            return f"connected to {host}"

        assert connect("db") == "connected to db"
        assert len(calls) == 2

    def test_terminal_error_propagates(self):
        @with_retry(max_tries=3)
        def broken():
            raise ValueError("bad input")

        with pytest.raises(ValueError, match="bad input"):
            broken()

    def test_rejects_coroutine_function(self):
        """with_retry on an async def fails at decoration time."""
        with pytest.raises(InvalidTaskError):

            @with_retry(max_tries=3)
            async def fetch():
                raise RETRY
