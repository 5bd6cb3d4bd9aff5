from dataclasses import dataclass, field

import pytest

from taskweave.private_queue import PrivateQueue, PrivateWorkerQueue
from taskweave.scheduler import Queue


@dataclass
class LedgerQueue(Queue):
    """Records each scheduled callable together with its deferral."""

    entries: list = field(default_factory=list)

    def schedule(self, task, defer_by=0):
        self.entries.append((task, defer_by))

    def pump(self, everything=False):
        while self.entries:
            task, _ = self.entries.pop(0)
            task()
            if not everything:
                break


def setter(target, key, value):
    return lambda *_: target.__setitem__(key, value)


def test_scheduling_is_delegated_to_underlying_queue():
    u = LedgerQueue()
    flags = {"a": False, "b": False}
    pq = PrivateQueue(u)

    pq.schedule(setter(flags, "a", True))
    pq.schedule(setter(flags, "b", True), 121)

    assert [defer for _, defer in u.entries] == [0, 121]

    u.entries[0][0]()
    assert flags == {"a": True, "b": False}

    u.entries[1][0]()
    assert flags == {"a": True, "b": True}


def test_scheduled_task_is_not_executed_after_private_queue_is_closed():
    u = LedgerQueue()
    called = {}
    pq = PrivateQueue(u)

    pq.schedule(setter(called, "hit", True), 10)
    pq.close()
    assert len(u.entries) == 1

    u.pump(everything=True)
    assert called == {}


def test_scheduled_task_is_not_executed_after_private_queue_context_exits():
    u = LedgerQueue()
    called = {}

    with PrivateQueue(u) as pq:
        pq.schedule(setter(called, "hit", True))
    assert len(u.entries) == 1

    u.pump(everything=True)
    assert called == {}


@pytest.fixture
def queues():
    return LedgerQueue(), LedgerQueue()


def sizes(worker, apartment):
    return len(worker.entries), len(apartment.entries)


def test_task_is_scheduled_into_worker_queue(queues):
    q = PrivateWorkerQueue(*queues)

    q.schedule(lambda completion: None)

    assert sizes(*queues) == (1, 0)


def test_executing_the_worker_tasks_calls_callback_passed(queues):
    worker, _ = queues
    q = PrivateWorkerQueue(*queues)
    x = [0]

    def add(amount):
        def task(completion):
            x[0] += amount

        return task

    q.schedule(add(1))
    worker.pump()
    assert (x[0], sizes(*queues)) == (1, (0, 0))

    q.schedule(add(3))
    q.schedule(add(11))
    worker.pump(everything=True)
    assert (x[0], sizes(*queues)) == (15, (0, 0))


def test_completions_provided_are_invoked_in_apartment_queue(queues):
    worker, apartment = queues
    x = [0]
    q = PrivateWorkerQueue(*queues)

    def task(completion):
        completion.deliver(setter(x, 0, 191919193))
        completion.deliver(setter(x, 0, 19))

    q.schedule(task)
    worker.pump()
    assert (x[0], sizes(*queues)) == (0, (0, 2))

    apartment.pump()
    assert (x[0], sizes(*queues)) == (191919193, (0, 1))

    apartment.pump()
    assert (x[0], sizes(*queues)) == (19, (0, 0))


def test_task_is_not_called_for_a_closed_private_worker_queue(queues):
    worker, _ = queues
    x = [0]
    q = PrivateWorkerQueue(*queues)

    q.schedule(setter(x, 0, 17))
    q.close()
    worker.pump()

    assert x[0] == 0


def test_completions_are_not_delivered_for_a_closed_private_worker_queue(queues):
    worker, apartment = queues
    x = [0]
    q = PrivateWorkerQueue(*queues)

    q.schedule(lambda completion: completion.deliver(setter(x, 0, 17)))
    worker.pump()
    q.close()

    assert (x[0], sizes(*queues)) == (0, (0, 1))

    apartment.pump(everything=True)
    assert x[0] == 0