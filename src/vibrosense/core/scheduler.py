"""Timer abstraction for periodic and deferred callbacks.

The GUI drives callbacks from the Qt event loop (see
:mod:`vibrosense.gui.qt_scheduler`); tests use :class:`ManualScheduler`, whose
clock only moves when :meth:`ManualScheduler.advance` is called.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable, Protocol

logger = logging.getLogger(__name__)

NS_PER_SECOND = 1_000_000_000

Callback = Callable[[], None]


def seconds_to_ns(seconds: float) -> int:
    """Convert seconds into integer nanoseconds (rounded)."""
    return int(round(float(seconds) * NS_PER_SECOND))


class CancelHandle(Protocol):
    def cancel(self) -> None: ...

    @property
    def active(self) -> bool: ...


class Scheduler(Protocol):
    """Anything that can run callbacks periodically or once after a delay."""

    def schedule_every(self, period_s: float, callback: Callback) -> CancelHandle: ...

    def schedule_after(self, delay_s: float, callback: Callback) -> CancelHandle: ...


@dataclass(eq=False)
class _ManualTask:
    deadline_ns: int
    period_ns: int | None
    callback: Callback
    cancelled: bool = False
    fired: bool = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not self.cancelled and not (self.period_ns is None and self.fired)


@dataclass
class ManualScheduler:
    """
    Deterministic scheduler backed by a simulated clock.

    Time is held in integer nanoseconds so that ``advance(1.999)`` followed by
    ``advance(0.001)`` lands exactly on a 2 s deadline.
    """

    now_ns: int = 0
    _queue: list[tuple[int, int, _ManualTask]] = field(default_factory=list, repr=False)
    _seq: itertools.count = field(default_factory=itertools.count, repr=False)

    @property
    def now(self) -> float:
        return self.now_ns / NS_PER_SECOND

    def schedule_every(self, period_s: float, callback: Callback) -> _ManualTask:
        period_ns = seconds_to_ns(period_s)
        if period_ns <= 0:
            raise ValueError(f"period must be positive, got {period_s!r}")
        task = _ManualTask(self.now_ns + period_ns, period_ns, callback)
        self._push(task)
        return task

    def schedule_after(self, delay_s: float, callback: Callback) -> _ManualTask:
        delay_ns = seconds_to_ns(delay_s)
        if delay_ns < 0:
            raise ValueError(f"delay must be non-negative, got {delay_s!r}")
        task = _ManualTask(self.now_ns + delay_ns, None, callback)
        self._push(task)
        return task

    def pending(self) -> int:
        """Return how many scheduled tasks are still active."""
        return sum(1 for _, _, task in self._queue if task.active)

    def advance(self, seconds: float) -> int:
        """
        Move the clock forward by ``seconds`` and run every due callback.

        Callbacks run in deadline order; each one observes ``now`` equal to its
        own deadline. Returns the number of callbacks fired.
        """
        target_ns = self.now_ns + seconds_to_ns(seconds)
        fired = 0
        while self._queue and self._queue[0][0] <= target_ns:
            deadline_ns, _, task = heapq.heappop(self._queue)
            if task.cancelled:
                continue
            self.now_ns = deadline_ns
            if task.period_ns is not None:
                task.deadline_ns = deadline_ns + task.period_ns
                self._push(task)
            else:
                task.fired = True
            task.callback()
            fired += 1
        self.now_ns = target_ns
        return fired

    def _push(self, task: _ManualTask) -> None:
        heapq.heappush(self._queue, (task.deadline_ns, next(self._seq), task))
