import threading

import pytest

from taskweave.event import Event
from taskweave.thread_queue import ThreadQueue


class SharedClock:
    def __init__(self):
        self._lock = threading.Lock()
        self._value = 0

    def set(self, value):
        with self._lock:
            self._value = value

    def __call__(self):
        with self._lock:
            return self._value


@pytest.fixture
def clock():
    return SharedClock()


def run_and_wait(queue, action):
    """Schedule ``action`` followed by a signal and wait until both ran."""
    ready = Event()

    def wrapped():
        action()
        ready.set()

    queue.schedule(wrapped)
    assert ready.wait(5000) is True


def test_tasks_posted_are_executed_in_a_separate_thread(clock):
    ids = []

    with ThreadQueue(clock) as queue:
        run_and_wait(queue, lambda: ids.append(threading.get_ident()))
        assert ids[0] != threading.get_ident()
        run_and_wait(queue, lambda: ids.append(threading.get_ident()))

    assert ids[0] == ids[1]


def test_worker_thread_is_stopped_at_destruction(clock):
    queue = ThreadQueue(clock)
    workers = []

    run_and_wait(queue, lambda: workers.append(threading.current_thread()))
    queue.close()

    assert workers[0].is_alive() is False


def test_deferred_tasks_are_executed_on_expiration(clock):
    invoked = {"first": 0, "second": 0}

    def bump(name):
        invoked[name] += 1

    with ThreadQueue(clock) as queue:
        queue.schedule(lambda: bump("first"), 100)
        queue.schedule(lambda: bump("second"), 1000)

        for now, first, second in [(99, 0, 0), (100, 1, 0), (999, 1, 0), (1000, 1, 1)]:
            clock.set(now)
            run_and_wait(queue, lambda: None)
            assert invoked == {"first": first, "second": second}


def test_closing_twice_is_harmless(clock):
    queue = ThreadQueue(clock)
    done = []

    run_and_wait(queue, lambda: done.append(1))
    queue.close()
    queue.close()

    assert done == [1]