"""A result holder that notifies registered continuations once it is settled."""

import abc
import threading

from .async_result import AsyncResult, AsyncState


class Continuation(abc.ABC):
    """Something to start once an antecedent's result is available."""

    @abc.abstractmethod
    def begin(self, antecedent):
        """Start with the antecedent's settled :class:`AsyncResult`."""


class TaskNode:
    """Holds one result and the continuations waiting for it."""

    def __init__(self):
        self._lock = threading.Lock()
        self._result = AsyncResult()
        self._continuations = []

    def then(self, continuation):
        """Register ``continuation``; begin it at once if already settled."""
        with self._lock:
            if self._result.state() is AsyncState.IN_PROGRESS:
                self._continuations.append(continuation)
                return
        continuation.begin(self._result)

    def fail(self, exception):
        """Settle the node with ``exception``."""
        self._set_result(lambda result: result.fail(exception))

    def set(self, value=None):
        """Settle the node with ``value``."""
        self._set_result(lambda result: result.set(value))

    def _set_result(self, setter):
        with self._lock:
            setter(self._result)
            continuations, self._continuations = self._continuations, []
        for continuation in continuations:
            continuation.begin(self._result)