"""A waitable flag that threads can signal and wait on."""

import threading


class Event:
    """A signalled/unsignalled flag.

    With ``auto_reset`` (the default) a successful wait consumes the signal,
    so only one waiter is released per ``set``. Timeouts are in milliseconds.
    """

    def __init__(self, initial=False, auto_reset=True):
        self._cond = threading.Condition()
        self._state = bool(initial)
        self._auto_reset = bool(auto_reset)

    def wait(self, timeout=None):
        """Wait for the signal; return whether it was received.

        ``timeout`` is in milliseconds; ``None`` waits indefinitely.
        """
        with self._cond:
            if timeout is None:
                self._cond.wait_for(lambda: self._state)
                state = True
            else:
                seconds = max(timeout, 0) / 1000.0
                state = self._cond.wait_for(lambda: self._state, seconds)
            if self._auto_reset and state:
                self._state = False
            return state

    def set(self):
        """Signal the event and wake the waiters."""
        with self._cond:
            self._state = True
            self._cond.notify_all()

    def reset(self):
        """Return the event to the unsignalled state."""
        with self._cond:
            self._state = False