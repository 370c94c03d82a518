"""
Timing primitives: a cooperative one-shot scheduler contract, a virtual-time
implementation for headless runs and tests, and the simulation clock.
"""

import heapq
import itertools
from typing import Callable, List, Optional, Protocol, Tuple


class Scheduler(Protocol):
    """Single-threaded cooperative scheduler"""

    def now(self) -> float:
        """Current time in seconds"""
        ...

    def schedule_once(self, delay: float, fn: Callable[[], None]) -> object:
        """Run ``fn`` once after ``delay`` seconds and return a cancellable handle"""
        ...

    def cancel(self, handle: object) -> None:
        ...


class _Pending:
    __slots__ = ("fn", "cancelled")

    def __init__(self, fn: Callable[[], None]):
        self.fn = fn
        self.cancelled = False


class ManualScheduler:
    """
    Virtual-time scheduler. Nothing happens until ``advance`` is called;
    due callbacks then run in (due time, scheduling order) order with
    ``now()`` set to their due time.
    """

    def __init__(self, start: float = 0.0):
        self._now = start
        self._queue: List[Tuple[float, int, _Pending]] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self._now

    def schedule_once(self, delay: float, fn: Callable[[], None]) -> _Pending:
        handle = _Pending(fn)
        heapq.heappush(self._queue, (self._now + max(0.0, delay), next(self._seq), handle))
        return handle

    def cancel(self, handle: Optional[_Pending]) -> None:
        if handle is not None:
            handle.cancelled = True

    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)

    def advance(self, seconds: float) -> int:
        """Move virtual time forward, returning how many callbacks fired"""
        target = self._now + seconds
        fired = 0
        while self._queue and self._queue[0][0] <= target + 1e-9:
            due, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._now = max(self._now, due)
            handle.cancelled = True
            handle.fn()
            fired += 1
        self._now = max(self._now, target)
        return fired


class SimulationClock:
    """Accumulates elapsed wall time (milliseconds) between ticks"""

    def __init__(self):
        self.timer = 0.0
        self._last: Optional[float] = None

    def restart(self, now: float):
        """Take ``now`` (seconds) as the reference for the next delta"""
        self._last = now

    def tick(self, now: float) -> float:
        if self._last is None:
            self._last = now
        delta = max(0.0, (now - self._last) * 1000.0)
        self.timer += delta
        self._last = now
        return delta

    def reset_timer(self):
        self.timer = 0.0
