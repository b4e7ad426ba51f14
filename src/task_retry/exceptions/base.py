"""
Base exception classes for the retry engine.

Two of them are reserved markers: `RetrySignal` (a task asks for another
attempt) and `LimitReached` (a retry budget ran out). Both are singletons,
so callers can compare them by identity.
"""


class RetryError(Exception):
    """Base exception for all errors raised by this package."""


class _SingletonError(RetryError):
    """Exception class with exactly one instance per concrete subclass."""

    _instance: "_SingletonError | None" = None
    _default_message = ""

    def __new__(cls, *args, **kwargs):
        instance = cls.__dict__.get("_instance")
        if instance is None:
            instance = super().__new__(cls)
            BaseException.__init__(instance, cls._default_message)
            cls._instance = instance
        return instance

    def __init__(self, *args, **kwargs):
        # Args are fixed at creation time.
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __reduce__(self):
        return (type(self), ())

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def detached(self) -> "_SingletonError":
        """Return the marker with traceback and context cleared, ready to raise."""
        self.__traceback__ = None
        self.__context__ = None
        self.__cause__ = None
        return self


class RetrySignal(_SingletonError):
    """Raised by a task to request another attempt. Never reaches the caller."""

    _default_message = "Retry requested"


class LimitReached(_SingletonError):
    """Raised by the engine when the try count or time budget is exhausted."""

    _default_message = "Retry limit reached"


class InvalidTaskError(RetryError, TypeError):
    """Raised when the task given to the engine cannot be run by it."""

    def __init__(self, task: object, message: str | None = None):
        if message is None:
            message = f'Parameter "task" must be callable, got {type(task).__name__}'
        super().__init__(message)
        self.task = task


class InvalidConfigError(RetryError, ValueError):
    """Raised when a configuration value cannot be interpreted."""

    def __init__(self, message: str, *, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def __str__(self) -> str:
        if self.field:
            return f"{self.message} (field: {self.field})"
        return self.message


RETRY = RetrySignal()
LIMIT_REACHED = LimitReached()


def is_retry_signal(error: BaseException) -> bool:
    """Default `retry_on` predicate: retry only on the reserved marker."""
    return error is RETRY
