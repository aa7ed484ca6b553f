"""Deterministic virtual-time scheduler.

Drives tiles without a GUI event loop: time only moves when the caller
advances it, and due callbacks run one at a time in due order.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable

from tapout.game.interfaces import IScheduler, ITimerHandle


class VirtualTimer(ITimerHandle):
    """Handle returned by :meth:`VirtualScheduler.call_later`."""

    __slots__ = ("_scheduler", "due", "delay", "callback", "_pending")

    def __init__(
        self,
        scheduler: VirtualScheduler,
        due: float,
        delay: float,
        callback: Callable[[], None],
    ) -> None:
        self._scheduler = scheduler
        self.due = due
        self.delay = delay
        self.callback = callback
        self._pending = True

    @property
    def is_pending(self) -> bool:
        return self._pending

    def cancel(self) -> None:
        if not self._pending:
            return
        self._pending = False
        self._scheduler._on_cancel(self)

    def __repr__(self) -> str:
        state = "pending" if self._pending else "done"
        return f"VirtualTimer(due={self.due:g}, delay={self.delay:g}, {state})"


class VirtualScheduler(IScheduler):
    """Cooperative timer queue with a manually advanced clock.

    Also counts scheduling activity so tests can check the
    one-timer-per-tile invariant.
    """

    __slots__ = (
        "_now",
        "_queue",
        "_seq",
        "_live",
        "scheduled_count",
        "cancelled_count",
        "fired_count",
    )

    def __init__(self) -> None:
        self._now = 0.0
        self._queue: list[tuple[float, int, VirtualTimer]] = []
        self._seq = itertools.count()
        self._live: set[VirtualTimer] = set()
        self.scheduled_count = 0
        self.cancelled_count = 0
        self.fired_count = 0

    # ── IScheduler implementation ────────────────────────────────────────

    def call_later(self, delay: float, callback: Callable[[], None]) -> VirtualTimer:
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay}")
        timer = VirtualTimer(self, self._now + delay, delay, callback)
        heapq.heappush(self._queue, (timer.due, next(self._seq), timer))
        self._live.add(timer)
        self.scheduled_count += 1
        return timer

    # ── Driving the clock ────────────────────────────────────────────────

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending_count(self) -> int:
        return len(self._live)

    @property
    def pending(self) -> list[VirtualTimer]:
        """Live timers in firing order."""
        return sorted(self._live, key=lambda t: t.due)

    def next_due(self) -> float | None:
        self._drop_dead()
        return self._queue[0][0] if self._queue else None

    def run_next(self) -> bool:
        """Jump to the earliest pending timer and fire it."""
        due = self.next_due()
        if due is None:
            return False
        self._fire_head()
        return True

    def advance(self, seconds: float) -> int:
        """Move time forward, firing everything that falls due. Returns count."""
        if seconds < 0:
            raise ValueError(f"cannot go back in time ({seconds})")
        deadline = self._now + seconds
        fired = 0
        while True:
            due = self.next_due()
            if due is None or due > deadline:
                break
            self._fire_head()
            fired += 1
        self._now = deadline
        return fired

    # ── Internal ─────────────────────────────────────────────────────────

    def _fire_head(self) -> None:
        due, _, timer = heapq.heappop(self._queue)
        self._now = max(self._now, due)
        timer._pending = False
        self._live.discard(timer)
        self.fired_count += 1
        timer.callback()

    def _drop_dead(self) -> None:
        while self._queue and not self._queue[0][2].is_pending:
            heapq.heappop(self._queue)

    def _on_cancel(self, timer: VirtualTimer) -> None:
        self._live.discard(timer)
        self.cancelled_count += 1
