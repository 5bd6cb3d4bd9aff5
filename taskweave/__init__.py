"""Task queues, deferred scheduling and chainable continuations for threaded programs."""

__version__ = "0.1.0"