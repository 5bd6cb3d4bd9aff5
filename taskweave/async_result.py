"""A slot that eventually holds either a value or an exception."""

import enum


class AsyncState(enum.Enum):
    """Lifecycle of an asynchronous result."""

    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAULTED = "faulted"


class ResultStateError(RuntimeError):
    """Raised on an operation not allowed in the result's current state."""


class AsyncResult:
    """Holds the outcome of an asynchronous operation, set exactly once."""

    def __init__(self):
        self._state = AsyncState.IN_PROGRESS
        self._value = None
        self._exception = None
        self._traceback = None

    def state(self):
        """Return the current :class:`AsyncState`."""
        return self._state

    def assign(self, other):
        """Copy the outcome of ``other`` into this still empty result."""
        self._assert_empty()
        self._value = other._value
        self._exception = other._exception
        self._traceback = other._traceback
        self._state = other._state

    def set(self, value=None):
        """Complete the result with ``value``."""
        self._assert_empty()
        self._value = value
        self._state = AsyncState.COMPLETED

    def fail(self, exception):
        """Fault the result with ``exception``, raised later by :meth:`get`."""
        if not isinstance(exception, BaseException):
            raise TypeError("an exception instance is required")
        self._assert_empty()
        self._exception = exception
        self._traceback = exception.__traceback__
        self._state = AsyncState.FAULTED

    def get(self):
        """Return the value, or raise the stored exception."""
        if self._state is AsyncState.IN_PROGRESS:
            raise ResultStateError("cannot dereference as no value has been set")
        if self._state is AsyncState.FAULTED:
            raise self._exception.with_traceback(self._traceback)
        return self._value

    def _assert_empty(self):
        if self._state is not AsyncState.IN_PROGRESS:
            raise ResultStateError("a value/exception has already been set")