"""Queues whose pending work is dropped once their owner closes them."""

import threading


class _ControlBlock:
    __slots__ = ("lock", "alive")

    def __init__(self, lock):
        self.lock = lock
        self.alive = True


class PrivateQueue:
    """Schedules onto an apartment queue; tasks still pending after
    :meth:`close` are skipped."""

    def __init__(self, apartment_queue):
        self._apartment_queue = apartment_queue
        self._control = _ControlBlock(threading.RLock())

    def schedule(self, task, defer_by=0):
        """Schedule ``task`` on the apartment queue after ``defer_by`` ms."""
        control = self._control

        def guarded():
            with control.lock:
                if control.alive:
                    task()

        self._apartment_queue.schedule(guarded, defer_by)

    def close(self):
        """Stop running tasks scheduled through this queue."""
        with self._control.lock:
            self._control.alive = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class Completion:
    """Handed to a worker task to deliver progress to the apartment queue."""

    def __init__(self, owner):
        self._owner = owner

    def deliver(self, progress):
        """Run ``progress`` on the apartment queue unless the owner is closed."""
        self._owner._deliver(progress)


class PrivateWorkerQueue:
    """Runs tasks on a worker queue, delivering their results to an apartment
    queue; nothing pending runs after :meth:`close`."""

    def __init__(self, worker_queue, apartment_queue):
        self._worker_queue = worker_queue
        self._apartment_queue = apartment_queue
        self._control = _ControlBlock(threading.Lock())

    def schedule(self, task):
        """Run ``task(completion)`` on the worker queue."""
        control = self._control

        def guarded():
            with control.lock:
                if control.alive:
                    task(Completion(self))

        self._worker_queue.schedule(guarded, 0)

    def _deliver(self, progress):
        control = self._control

        def guarded():
            if control.alive:
                progress()

        self._apartment_queue.schedule(guarded, 0)

    def close(self):
        """Stop running pending tasks and deliveries."""
        with self._control.lock:
            self._control.alive = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()