"""TileController — one grid cell's active/inactive state machine."""

from __future__ import annotations

import logging
import random
import weakref
from collections.abc import Callable
from dataclasses import dataclass, field

from tapout.game.interfaces import (
    IGameDelegate,
    IScheduler,
    IStopListener,
    ITimerHandle,
    TilePhase,
    TileTiming,
)

_LOGGER = logging.getLogger(__name__)

StateCallback = Callable[["TileController"], None]


@dataclass
class TileEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_state_changed: list[StateCallback] = field(default_factory=list)


class TileController(IStopListener):
    """Owns one tile's state and its single pending re-arm timer.

    The tile starts active but unarmed; :meth:`activate` arms it. Every
    (re)arm cancels the previous timer first, so at most one timer is
    pending at any time. Once stopped, the tile ignores everything.

    Args:
        delegate: Game to report hits and misses to. Held weakly.
        scheduler: Timer queue the tile arms itself on.
        timing: Active duration and re-arm range.
        rng: Source for re-arm delays.
        index: Grid position, for logs and views.
    """

    __slots__ = (
        "_delegate_ref",
        "_scheduler",
        "_timing",
        "_rng",
        "_index",
        "_is_active",
        "_is_stopped",
        "_pending_timer",
        "events",
    )

    def __init__(
        self,
        delegate: IGameDelegate,
        scheduler: IScheduler,
        *,
        timing: TileTiming | None = None,
        rng: random.Random | None = None,
        index: int = 0,
    ) -> None:
        self._delegate_ref = weakref.ref(delegate)
        self._scheduler = scheduler
        self._timing = timing or TileTiming.classic()
        self._rng = rng or random.Random()
        self._index = index
        self._is_active = True
        self._is_stopped = False
        self._pending_timer: ITimerHandle | None = None
        self.events = TileEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def index(self) -> int:
        return self._index

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def is_stopped(self) -> bool:
        return self._is_stopped

    @property
    def phase(self) -> TilePhase:
        if self._is_stopped:
            return TilePhase.STOPPED
        return TilePhase.ACTIVE if self._is_active else TilePhase.INACTIVE

    @property
    def pending_timer(self) -> ITimerHandle | None:
        if self._pending_timer is not None and not self._pending_timer.is_pending:
            return None
        return self._pending_timer

    @property
    def timing(self) -> TileTiming:
        return self._timing

    # ── Transitions ──────────────────────────────────────────────────────

    def activate(self) -> None:
        """Become active and schedule the flip back to inactive."""
        if self._is_stopped:
            return
        _LOGGER.debug("tile %d active", self._index)
        self._is_active = True
        self._arm(self._timing.active_seconds, self._on_active_elapsed)
        self._emit_state_changed()

    def deactivate(self) -> None:
        """Become inactive and schedule reactivation after a random delay."""
        if self._is_stopped:
            return
        delay = self._rng.randint(self._timing.rearm_min, self._timing.rearm_max)
        _LOGGER.debug("tile %d inactive for %ds", self._index, delay)
        self._is_active = False
        self._arm(delay, self._on_inactive_elapsed)
        self._emit_state_changed()

    def on_tap(self) -> None:
        """Score if active, otherwise end the game."""
        if self._is_stopped:
            return
        if self._is_active:
            self.deactivate()
            self._delegate().increment_score()
        else:
            self._delegate().end_game()

    def on_stop_signal(self) -> None:
        if self._is_stopped:
            return
        self._is_stopped = True
        self._cancel_pending()
        self._is_active = False
        self._emit_state_changed()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _arm(self, delay: float, callback: Callable[[], None]) -> None:
        self._cancel_pending()
        self._pending_timer = self._scheduler.call_later(delay, callback)

    def _cancel_pending(self) -> None:
        if self._pending_timer is not None:
            self._pending_timer.cancel()
            self._pending_timer = None

    def _on_active_elapsed(self) -> None:
        self._pending_timer = None
        self.deactivate()

    def _on_inactive_elapsed(self) -> None:
        self._pending_timer = None
        self.activate()

    def _delegate(self) -> IGameDelegate:
        delegate = self._delegate_ref()
        if delegate is None:
            raise ReferenceError(f"tile {self._index} outlived its game")
        return delegate

    def _emit_state_changed(self) -> None:
        for cb in self.events.on_state_changed:
            cb(self)

    def __repr__(self) -> str:
        return f"TileController(index={self._index}, phase={self.phase.name})"
