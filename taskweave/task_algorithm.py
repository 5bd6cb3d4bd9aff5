"""Algorithms composed from tasks."""

from .task import Task, schedule_task
from .task_node import TaskNode


def loop(body, queue):
    """Run ``body`` on ``queue`` repeatedly while the task it returns yields true.

    ``body`` returns a :class:`Task` producing a bool. The returned task
    completes when an iteration yields false, or faults with the first error.
    """
    completion = TaskNode()
    _iterate(completion, body, queue)
    return Task(completion)


def _iterate(completion, body, queue):
    def on_result(result):
        try:
            if result.get():
                _iterate(completion, body, queue)
            else:
                completion.set()
        except Exception as exc:
            completion.fail(exc)

    schedule_task(body, queue).unwrap().then(on_result, queue)