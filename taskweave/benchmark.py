"""Measures the cost of bouncing work between two thread queues."""

import argparse
import time

from .event import Event
from .thread_queue import ThreadQueue

_DIVIDEND = 1031294
_DIVISOR = 1322


def _zero_clock():
    return 0


def run_exchange(count):
    """Bounce ``count`` divisions between two thread queues.

    Returns ``(results, scheduling_per_item, execution_per_item)`` with the
    timings in seconds of processor time.
    """
    if count < 1:
        raise ValueError("count must be positive")

    results = [0] * count
    position = 0
    acknowledged = 0
    complete = Event()

    with ThreadQueue(_zero_clock) as first, ThreadQueue(_zero_clock) as second:

        def acknowledge():
            nonlocal acknowledged
            acknowledged += 1

        def store(quotient):
            nonlocal position
            results[position] = quotient
            position += 1
            second.schedule(acknowledge, 0)
            if position == count:
                complete.set()

        def divide(dividend, divisor):
            quotient = dividend // divisor
            first.schedule(lambda: store(quotient), 0)

        def start():
            second.schedule(lambda: divide(_DIVIDEND, _DIVISOR), 0)

        started = time.process_time()
        for _ in range(count):
            first.schedule(start, 0)
        scheduled_at = time.process_time()
        complete.wait()
        completed_at = time.process_time()

    return (
        results,
        (scheduled_at - started) / count,
        (completed_at - scheduled_at) / count,
    )


def main(argv=None):
    """Run the exchange benchmark and print per-item timings."""
    parser = argparse.ArgumentParser(
        description="Bounce work items between two thread queues."
    )
    parser.add_argument("--count", type=int, default=1000000, help="number of items")
    parser.add_argument(
        "--no-wait", action="store_true", help="start without waiting for input"
    )
    args = parser.parse_args(argv)
    if args.count < 1:
        parser.error("--count must be positive")

    if not args.no_wait:
        print("Press any key to start!", flush=True)
        try:
            input()
        except EOFError:
            pass

    _, scheduling, execution = run_exchange(args.count)
    print(f"Scheduling per item: {scheduling}")
    print(f"Execution per item: {execution}")
    return 0