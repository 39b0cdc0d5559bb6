"""
scheduler.py: Wall-clock deadlines for side effects that must not wait on frames.
"""

import heapq
import itertools
import time
from typing import Callable, List, Optional, Tuple


class Scheduler:
    """
    A queue of callbacks keyed by deadline.
    The frame loop never blocks on it; the host polls it once per iteration.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._queue: List[Tuple[float, int, Callable[[], None]]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> float:
        """Schedules callback to run `delay` seconds from now. Returns the deadline."""
        deadline = self.clock() + delay
        heapq.heappush(self._queue, (deadline, next(self._counter), callback))
        return deadline

    def poll(self, now: Optional[float] = None) -> int:
        """Runs every callback whose deadline has passed, oldest first."""
        if now is None:
            now = self.clock()
        ran = 0
        while self._queue and self._queue[0][0] <= now:
            _, _, callback = heapq.heappop(self._queue)
            callback()
            ran += 1
        return ran

    @property
    def pending(self) -> int:
        return len(self._queue)

    def clear(self):
        self._queue.clear()
