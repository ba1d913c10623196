"""Equation Engine timers.

Cancellable delayed actions for a single-threaded, event-driven
session. Nothing runs in the background: the owner calls
``run_due()`` whenever it handles an event, and every handle whose
deadline has passed fires then, in deadline order.
"""

from __future__ import annotations
import time
from typing import Callable, List


class TimerHandle:
    def __init__(self, when: float, callback: Callable[[], None]):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class Scheduler:
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._handles: List[TimerHandle] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Schedule ``callback`` to fire ``delay`` clock units from now."""
        if delay < 0:
            raise ValueError("delay must be non-negative")
        handle = TimerHandle(self.clock() + delay, callback)
        self._handles.append(handle)
        return handle

    def run_due(self) -> int:
        """Fire every due, non-cancelled handle; return how many fired."""
        now = self.clock()
        fired = 0
        while True:
            due = [h for h in self._handles if h.when <= now]
            if not due:
                break
            # one at a time: a raising callback leaves later handles scheduled
            handle = min(due, key=lambda h: h.when)
            self._handles.remove(handle)
            if handle.cancelled:
                continue
            handle.callback()
            fired += 1

        self._handles = [h for h in self._handles if not h.cancelled]
        return fired

    def pending(self) -> int:
        return sum(1 for h in self._handles if not h.cancelled)
