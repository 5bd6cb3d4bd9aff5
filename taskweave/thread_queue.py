"""A queue served by its own worker thread."""

import threading

from .scheduler import Queue
from .task_queue import TaskQueue


class ThreadQueue(Queue):
    """Runs scheduled tasks on a dedicated thread until closed."""

    def __init__(self, clock):
        self._underlying = TaskQueue(clock)
        self._stop_requested = False
        self._closed = False
        self._thread = threading.Thread(
            target=self._run, name="taskweave-thread-queue", daemon=True
        )
        self._thread.start()

    def schedule(self, task, defer_by=0):
        """Run ``task`` on the worker thread ``defer_by`` milliseconds from now."""
        self._underlying.schedule(task, defer_by)

    def close(self):
        """Let the tasks already due run, then stop and join the worker."""
        if self._closed:
            return
        self._closed = True
        self._underlying.schedule(self._request_stop)
        self._thread.join()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _request_stop(self):
        self._stop_requested = True

    def _run(self):
        while not self._stop_requested:
            self._underlying.wait()
            self._underlying.execute_ready(10)