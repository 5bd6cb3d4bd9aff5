"""The queue interface that tasks are scheduled on.

Durations and deadlines throughout the package are plain numbers of
milliseconds; a clock is any callable returning the current time in them.
"""

import abc
from typing import Callable

Clock = Callable[[], int]


class Queue(abc.ABC):
    """Something that runs callables, possibly after a delay."""

    @abc.abstractmethod
    def schedule(self, task, defer_by=0):
        """Run ``task`` no earlier than ``defer_by`` milliseconds from now."""
        raise NotImplementedError