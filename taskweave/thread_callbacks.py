"""Per-thread exit handlers."""

import threading


class _ExitHandlers:
    """Holds one thread's exit handlers and runs them when it is released."""

    __slots__ = ("handlers",)

    def __init__(self):
        self.handlers = []

    def __del__(self):
        handlers = self.handlers
        while handlers:
            handler = handlers.pop()
            handler()


class ThreadCallbacks:
    """Registers callables to run when the calling thread exits.

    Handlers run in the exiting thread, most recently registered first.
    """

    def __init__(self):
        self._local = threading.local()

    def at_thread_exit(self, handler):
        """Run ``handler`` when the current thread exits."""
        holder = getattr(self._local, "exit_handlers", None)
        if holder is None:
            holder = _ExitHandlers()
            self._local.exit_handlers = holder
        holder.handlers.append(handler)


_CALLBACKS = ThreadCallbacks()


def get_thread_callbacks():
    """Return the process-wide thread callbacks registry."""
    return _CALLBACKS