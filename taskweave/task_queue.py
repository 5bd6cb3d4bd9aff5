"""A deadline-ordered queue of tasks, executed by whoever pumps it."""

import heapq
import threading
from typing import NamedTuple

from .event import Event


class WakeUp(NamedTuple):
    """A request for the queue's owner to pump it again.

    ``delay`` is how many milliseconds from now that should happen; the
    request only matters when ``valid`` is true.
    """

    delay: int
    valid: bool


class TaskQueue:
    """Holds tasks ordered by deadline, then by the order they were scheduled.

    ``clock`` returns the current time in milliseconds.
    """

    def __init__(self, clock):
        self._clock = clock
        self._tasks = []
        self._ready = Event()
        self._lock = threading.Lock()
        self._order = 0
        self._omit_notify = False
        self._stopped = False

    def schedule(self, task, defer_by=0):
        """Add ``task`` to run ``defer_by`` milliseconds from now.

        Returns a :class:`WakeUp` that is valid when the new task became the
        earliest one and the owner must be woken for it.
        """
        with self._lock:
            if self._stopped:
                return WakeUp(0, False)
            deadline = self._clock() + defer_by
            notify = not self._omit_notify and (
                not self._tasks or deadline < self._tasks[0][0]
            )
            heapq.heappush(self._tasks, (deadline, self._order, task))
            self._order += 1
            if notify:
                self._ready.set()
                return WakeUp(defer_by, True)
            return WakeUp(0, False)

    def execute_ready(self, max_duration):
        """Run due tasks for at most ``max_duration`` milliseconds.

        Returns when the next call is needed. An exception raised by a task
        propagates; the tasks not yet run stay queued.
        """
        now = self._clock()
        self._lock.acquire()
        locked = True
        self._omit_notify = True
        try:
            limit = now + max_duration
            while now < limit and self._tasks and self._tasks[0][0] <= now:
                task = heapq.heappop(self._tasks)[2]
                self._lock.release()
                locked = False
                task()
                del task
                now = self._clock()
                self._lock.acquire()
                locked = True
            if not self._tasks:
                return WakeUp(0, False)
            closest = self._tasks[0][0]
            return WakeUp(closest - now if closest > now else 0, True)
        finally:
            self._omit_notify = False
            if locked:
                self._lock.release()

    def wait(self):
        """Block until the earliest task is due."""
        while True:
            with self._lock:
                if self._tasks:
                    now = self._clock()
                    closest = self._tasks[0][0]
                else:
                    closest = None
            if closest is None:
                self._ready.wait()
            elif now >= closest or not self._ready.wait(closest - now):
                break

    def stop(self):
        """Drop all pending tasks and refuse any scheduled later."""
        with self._lock:
            self._tasks = []
            self._stopped = True