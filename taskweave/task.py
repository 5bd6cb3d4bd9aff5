"""Tasks that run on queues and chain continuations on their results."""

from .task_node import Continuation, TaskNode


class Cancelled(Exception):
    """Signals that a task was cancelled."""


def _settle(node, produce):
    try:
        value = produce()
    except Exception as exc:
        node.fail(exc)
    else:
        node.set(value)


class Task:
    """A handle to a :class:`TaskNode` whose result arrives later."""

    def __init__(self, node):
        self.node = node

    def then(self, callback, continue_on):
        """Call ``callback`` with this task's result on ``continue_on``.

        Returns a task settled with what the callback returns or raises.
        """
        continuation = _TaskContinuation(callback, continue_on)
        self.node.then(continuation)
        return Task(continuation)

    def unwrap(self):
        """For a task producing a task, return a task settled by the inner one."""
        unwrapped = TaskNode()
        self.node.then(_UnwrapOuter(unwrapped))
        return Task(unwrapped)


class _TaskContinuation(TaskNode, Continuation):
    def __init__(self, callback, continue_on):
        TaskNode.__init__(self)
        self._callback = callback
        self._continue_on = continue_on

    def begin(self, antecedent):
        self._continue_on.schedule(
            lambda: _settle(self, lambda: self._callback(antecedent)), 0
        )


class _UnwrapOuter(Continuation):
    def __init__(self, target):
        self._target = target

    def begin(self, antecedent):
        try:
            inner = antecedent.get()
        except Exception as exc:
            self._target.fail(exc)
            return
        if not isinstance(inner, Task):
            self._target.fail(TypeError("unwrap requires a task that produces a task"))
            return
        inner.node.then(_UnwrapInner(self._target))


class _UnwrapInner(Continuation):
    def __init__(self, target):
        self._target = target

    def begin(self, antecedent):
        _settle(self._target, antecedent.get)


def schedule_task(callback, run_on):
    """Run ``callback`` on ``run_on`` and return a task for its result."""
    node = TaskNode()
    run_on.schedule(lambda: _settle(node, callback), 0)
    return Task(node)