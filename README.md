# taskweave

taskweave gives threaded Python programs a small set of scheduling tools:

- **Queues.** `taskweave.task_queue.TaskQueue` orders callables by deadline, then by
  the order in which they were scheduled. `taskweave.thread_queue.ThreadQueue` runs
  such a queue on its own worker thread. Both follow the `taskweave.scheduler.Queue`
  interface, a single `schedule(task, defer_by=0)` method.
- **Tasks with continuations.** `taskweave.task.schedule_task` runs a callable on a
  queue and returns a `Task`. `Task.then` chains follow-up work onto any queue you
  choose. `Task.unwrap` flattens a task that produces a task.
  `taskweave.task_algorithm.loop` repeats an asynchronous body until it reports `False`.
- **Results that hold a value or an error.** `taskweave.async_result.AsyncResult`
  holds either a value or an exception and can be settled only once. `get()` returns
  the value or raises the stored exception.
- **Settle-once nodes.** `taskweave.task_node.TaskNode` holds an `AsyncResult` and
  calls the `begin` method of each registered `Continuation` once it is settled.
- **Lifetime-guarded queues.** `taskweave.private_queue.PrivateQueue` and
  `PrivateWorkerQueue` skip any work still pending once they have been closed.
- **Threading helpers.** `taskweave.event.Event` is an auto- or manual-reset event.
  `taskweave.thread_callbacks.get_thread_callbacks()` registers handlers that run when
  the current thread exits.

The package uses only the standard library.

## Installing

```
pip install .
```

To install it together with the test tools:

```
pip install .[test]
```

## Times and clocks

Every time is a number of milliseconds. A queue reads "now" from a clock, which is
any callable with no arguments that returns milliseconds. The `defer_by` argument of
`schedule` is an offset from the clock's current value. It defaults to `0`.

```python
import time

def clock():
    return int(time.monotonic() * 1000)
```

## Events

`Event(initial=False, auto_reset=True)` is a flag that threads can wait on.
`wait(timeout=None)` returns whether the event was signalled; `timeout` is in
milliseconds and `None` waits indefinitely. With `auto_reset` a successful wait
consumes the signal. `set()` signals the event and `reset()` clears it.

## Running work on a background thread

```python
from taskweave.event import Event
from taskweave.thread_queue import ThreadQueue

done = Event()
worker = ThreadQueue(clock)

worker.schedule(lambda: print("runs on the worker thread"))
worker.schedule(done.set, 250)  # runs about 250 ms from now
done.wait()

worker.close()  # stops the worker thread and joins it
```

`ThreadQueue` is also a context manager that closes itself on exit. Closing queues a
stop request behind the tasks already scheduled and waits for the worker to finish.

## Tasks and continuations

A continuation receives the `AsyncResult` of the step before it. Calling `get()` on it
returns the value, or raises the exception that the earlier step raised. Whatever the
continuation returns or raises settles the task that `then` returns.

```python
from taskweave.task import schedule_task
from taskweave.thread_queue import ThreadQueue

with ThreadQueue(clock) as worker, ThreadQueue(clock) as other:
    t = schedule_task(lambda: 6 * 7, worker)
    t.then(lambda result: print("answer:", result.get()), other)
```

Any `Queue` can run tasks and continuations: a `ThreadQueue`, a `PrivateQueue`, or a
class of your own that implements `schedule(task, defer_by=0)`.

`Task.unwrap()` applies to a task whose result is another `Task`; the returned task is
settled with the inner task's result. If the outer result is not a `Task`, the
unwrapped task fails with `TypeError`.

The `Cancelled` exception in `taskweave.task` is available for callbacks that want to
signal cancellation; nothing in the package raises it.

## Loops

`loop(body, queue)` calls `body` on `queue`. `body` must return a `Task` whose result
is a bool. The loop repeats while that result is true.

`loop` returns a `Task` that completes when an iteration yields `False`. If an
iteration fails, that task fails with the same exception.

```python
from taskweave.task_algorithm import loop

loop(step, worker).then(lambda r: r.get(), worker)
```

## Driving a queue yourself

A `TaskQueue` lets you decide when tasks run:

```python
from taskweave.task_queue import TaskQueue

q = TaskQueue(clock)
wake = q.schedule(lambda: print("hello"), 100)
q.wait()                 # blocks until the earliest task is due
q.execute_ready(10)      # runs due tasks for at most 10 ms
q.stop()                 # drops pending tasks and refuses new ones
```

`schedule` and `execute_ready` both return a `WakeUp(delay, valid)`. When `valid` is
true, the owner should pump the queue again after `delay` milliseconds. `schedule`
asks for a wake-up only when the new task became the earliest one, and never while
`execute_ready` is running. An exception raised by a task propagates out of
`execute_ready`; the tasks not yet run stay queued. After `stop()`, `schedule` returns
`WakeUp(0, False)` and discards the task.

## Guarding work with an owner's lifetime

A `PrivateQueue` passes its tasks to another queue. Once `close()` has been called,
those tasks are skipped when their turn comes.

A `PrivateWorkerQueue(worker_queue, apartment_queue)` works with two queues:

- Its tasks run on the worker queue.
- Each task receives a `Completion`.
- `Completion.deliver(progress)` sends a callback to the apartment queue.

After `close()`, neither the pending tasks nor the delivered callbacks run. Both
classes are context managers that close themselves on exit.

## Thread exit handlers

```python
from taskweave.thread_callbacks import get_thread_callbacks

get_thread_callbacks().at_thread_exit(lambda: print("thread done"))
```

Handlers run in the exiting thread, the most recently registered first.

## Benchmark

```
taskweave-benchmark --count 100000 --no-wait
```

The benchmark bounces small tasks between two `ThreadQueue`s and prints the average
processor time spent scheduling each item and executing each item. `--count` sets the
number of items (default 1000000). Without `--no-wait` it first waits for a line of
input. The same run is available as `taskweave.benchmark.run_exchange(count)`.

## What it does not do

There is no queue bound to a GUI or platform event loop: the queues here are either
pumped by your own code (`TaskQueue`) or by a dedicated thread (`ThreadQueue`).