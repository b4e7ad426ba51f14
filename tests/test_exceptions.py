"""Tests for exceptions module - behavior focused."""

import copy
import pickle

import pytest
from task_retry.exceptions import (
    RetryError,
    RetrySignal,
    LimitReached,
    InvalidTaskError,
    InvalidConfigError,
    RETRY,
    LIMIT_REACHED,
    is_retry_signal,
)


class TestSingletonMarkers:
    """Test that reserved markers keep their identity."""

    def test_retry_signal_constructor_returns_marker(self):
        """Constructing RetrySignal again should give back RETRY."""
        assert RetrySignal() is RETRY

    def test_limit_reached_constructor_returns_marker(self):
        """Constructing LimitReached again should give back LIMIT_REACHED."""
        assert LimitReached() is LIMIT_REACHED

    def test_markers_are_distinct(self):
        """The two markers must never be confused with each other."""
        assert RETRY is not LIMIT_REACHED
        assert not isinstance(RETRY, LimitReached)
        assert not isinstance(LIMIT_REACHED, RetrySignal)

    def test_raising_class_raises_marker(self):
        """`raise RetrySignal` should raise the reserved instance."""
        with pytest.raises(RetrySignal) as exc_info:
            raise RetrySignal
        assert exc_info.value is RETRY

    def test_copy_preserves_identity(self):
        """Copies and pickles should resolve to the same marker."""
        assert copy.copy(RETRY) is RETRY
        assert copy.deepcopy(LIMIT_REACHED) is LIMIT_REACHED
        assert pickle.loads(pickle.dumps(LIMIT_REACHED)) is LIMIT_REACHED

    def test_detached_clears_traceback(self):
        """detached() should drop traceback and context left by earlier raises."""
        try:
            raise RETRY
        except RetrySignal:
            pass
        assert RETRY.__traceback__ is not None

        assert RETRY.detached() is RETRY
        assert RETRY.__traceback__ is None
        assert RETRY.__context__ is None

    def test_repr_is_readable(self):
        """repr should name the marker class."""
        assert repr(LIMIT_REACHED) == "LimitReached()"


class TestDefaultRetryPredicate:
    """Test the default retry_on predicate."""

    def test_accepts_retry_marker(self):
        assert is_retry_signal(RETRY) is True

    def test_rejects_other_errors(self):
        """Errors that only look like the marker should not be retried."""
        assert is_retry_signal(ValueError("Retry requested")) is False
        assert is_retry_signal(LIMIT_REACHED) is False


class TestConfigurationErrors:
    """Test configuration error types."""

    def test_invalid_task_is_type_error(self):
        """InvalidTaskError should be catchable as TypeError."""
        error = InvalidTaskError(42)
        assert isinstance(error, TypeError)
        assert error.task == 42
        assert "int" in str(error)

    def test_invalid_config_includes_field(self):
        """String representation should include the offending field."""
        error = InvalidConfigError("Unknown retry strategy", field="strategy")
        assert isinstance(error, ValueError)
        assert "strategy" in str(error)

    def test_invalid_config_without_field(self):
        error = InvalidConfigError("bad")
        assert str(error) == "bad"


class TestExceptionInheritance:
    """Test that all exceptions inherit from RetryError."""

    @pytest.mark.parametrize(
        "error",
        [RETRY, LIMIT_REACHED, InvalidTaskError(None), InvalidConfigError("bad")],
    )
    def test_inherits_from_base(self, error):
        """All package errors should be catchable as RetryError."""
        assert isinstance(error, RetryError)
