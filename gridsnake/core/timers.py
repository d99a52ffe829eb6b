"""
Deferred callbacks for the simulation core.

A TimerQueue never spawns threads: due callbacks only run when the owner
calls run_due(), which keeps every mutation on the caller's thread.
"""

import heapq
import itertools
import time
from typing import Any, Callable, List, Optional, Tuple

Clock = Callable[[], float]


def monotonic_ms() -> float:
    """Monotonic clock in milliseconds."""
    return time.monotonic() * 1000.0


class TimerHandle:
    """A scheduled callback that can be cancelled until it fires."""

    def __init__(self, when: float, callback: Callable[..., Any], args: Tuple, queue: "TimerQueue"):
        self.when = when
        self._callback = callback
        self._args = args
        self._queue = queue
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call more than once."""
        if not self.cancelled and not self.fired:
            self.cancelled = True
            self._queue._pending -= 1

    def remaining(self) -> float:
        """Milliseconds until the callback is due (0 once due, fired or cancelled)."""
        if self.cancelled or self.fired:
            return 0.0
        return max(0.0, self.when - self._queue.now())

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def _run(self) -> None:
        self.fired = True
        self._callback(*self._args)

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "fired" if self.fired else "pending"
        return f"<TimerHandle when={self.when:.1f} {state}>"


class TimerQueue:
    """
    Min-heap of TimerHandles ordered by deadline.

    Handles with equal deadlines fire in scheduling order.
    """

    def __init__(self, clock: Optional[Clock] = None):
        """
        Initialize the queue.

        Args:
            clock: Zero-argument callable returning the current time in
                milliseconds (defaults to a monotonic clock)
        """
        self._clock = clock or monotonic_ms
        self._heap: List[Tuple[float, int, TimerHandle]] = []
        self._counter = itertools.count()
        self._pending = 0

    def now(self) -> float:
        """Current time in milliseconds according to this queue's clock."""
        return self._clock()

    def call_later(self, delay_ms: float, callback: Callable[..., Any], *args) -> TimerHandle:
        """
        Schedule a callback to run once after a delay.

        Args:
            delay_ms: Delay in milliseconds (negative values are treated as 0)
            callback: Function to call
            *args: Arguments for the callback

        Returns:
            Handle that can cancel the callback
        """
        handle = TimerHandle(self.now() + max(0.0, delay_ms), callback, args, self)
        heapq.heappush(self._heap, (handle.when, next(self._counter), handle))
        self._pending += 1
        return handle

    def run_due(self) -> int:
        """
        Run every pending callback whose deadline has passed.

        Returns:
            Number of callbacks run
        """
        fired = 0
        now = self.now()

        while self._heap and self._heap[0][0] <= now:
            _, _, handle = heapq.heappop(self._heap)
            if handle.cancelled:
                continue
            self._pending -= 1
            handle._run()
            fired += 1

        return fired

    def cancel_all(self) -> None:
        """Cancel every pending callback."""
        for _, _, handle in self._heap:
            handle.cancel()
        self._heap.clear()
        self._pending = 0

    def __len__(self) -> int:
        return self._pending
