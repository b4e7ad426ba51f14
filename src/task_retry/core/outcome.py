"""
Tagged results of single attempts and of whole engine calls.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class AttemptKind(str, Enum):
    """How one invocation of the task settled."""

    SUCCESS = "success"
    RETRY = "retry"
    TERMINAL = "terminal"


@dataclass(frozen=True)
class AttemptResult:
    """Settlement of a single attempt, independent of how the task signalled it."""

    kind: AttemptKind
    value: Any = None
    error: BaseException | None = None

    @classmethod
    def success(cls, value: Any) -> "AttemptResult":
        return cls(AttemptKind.SUCCESS, value=value)

    @classmethod
    def retry(cls, signal: BaseException | None = None) -> "AttemptResult":
        return cls(AttemptKind.RETRY, error=signal)

    @classmethod
    def terminal(cls, error: BaseException) -> "AttemptResult":
        return cls(AttemptKind.TERMINAL, error=error)


@dataclass(frozen=True)
class Success(Generic[T]):
    """The task succeeded with `value`."""

    value: T
    tries: int = 1

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """The task failed with an error that is not retried."""

    error: BaseException
    tries: int = 1

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        raise self.error


@dataclass(frozen=True)
class Exhausted:
    """A try count or time limit was reached before success or terminal failure."""

    error: BaseException
    tries: int = 0

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        # The same limit error is raised by every exhausted call.
        error = self.error
        if isinstance(error, BaseException):
            error.__context__ = None
            error = error.with_traceback(None)
        raise error


Outcome = Union[Success[Any], Failure, Exhausted]
