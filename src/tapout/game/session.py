"""GameSession — score keeping, game over and restart.

Creates the tile grid, receives hits and misses from tiles through
:class:`IGameDelegate`, and stops every tile at once via
:class:`StopBroadcast` when the game ends. Emits events via simple
callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass, field

from tapout.game.broadcast import StopBroadcast
from tapout.game.interfaces import IGameDelegate, IScheduler, TileTiming
from tapout.game.tile import TileController

_LOGGER = logging.getLogger(__name__)

DEFAULT_TILE_COUNT = 20

# ── Event definitions ────────────────────────────────────────────────────────

ScoreCallback = Callable[[int], None]
GameOverCallback = Callable[[int], None]  # final score
GridCallback = Callable[[tuple[TileController, ...]], None]
ResetCallback = Callable[[], None]


@dataclass
class SessionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_score_changed: list[ScoreCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_grid_created: list[GridCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession(IGameDelegate):
    """Aggregates score, detects game over, supports restart.

    Thread-safety: every method must run on the scheduler's dispatch
    thread. Tile callbacks arrive there too, so no locking is done.
    """

    __slots__ = (
        "_scheduler",
        "_timing",
        "_rng",
        "_tile_count",
        "_score",
        "_is_over",
        "_tiles",
        "_broadcast",
        "events",
    )

    def __init__(
        self,
        scheduler: IScheduler,
        *,
        tile_count: int = DEFAULT_TILE_COUNT,
        timing: TileTiming | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if tile_count < 0:
            raise ValueError(f"tile_count must be non-negative, got {tile_count}")
        self._scheduler = scheduler
        self._timing = timing or TileTiming.classic()
        self._rng = rng or random.Random()
        self._tile_count = tile_count
        self._score = 0
        self._is_over = False
        self._tiles: tuple[TileController, ...] = ()
        self._broadcast = StopBroadcast()
        self.events = SessionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def score(self) -> int:
        return self._score

    @property
    def is_over(self) -> bool:
        return self._is_over

    @property
    def tiles(self) -> tuple[TileController, ...]:
        return self._tiles

    @property
    def tile_count(self) -> int:
        return self._tile_count

    @property
    def timing(self) -> TileTiming:
        return self._timing

    @property
    def broadcast(self) -> StopBroadcast:
        return self._broadcast

    # ── Lifecycle ────────────────────────────────────────────────────────

    def start(self) -> None:
        """Populate a fresh grid; every tile starts active and armed."""
        self._stop_tiles()
        self._broadcast = StopBroadcast()
        self._tiles = tuple(
            TileController(
                self,
                self._scheduler,
                timing=self._timing,
                rng=self._rng,
                index=i,
            )
            for i in range(self._tile_count)
        )
        for tile in self._tiles:
            self._broadcast.subscribe(tile)
        self._emit_grid_created()
        for tile in self._tiles:
            tile.activate()

    def reset(self) -> None:
        """Start over with score 0 and brand-new tiles."""
        _LOGGER.info("new game")
        self._stop_tiles()
        self._score = 0
        self._is_over = False
        self._emit_score_changed()
        for cb in self.events.on_reset:
            cb()
        self.start()

    def shutdown(self) -> None:
        """Cancel all tile timers without declaring a game over."""
        self._stop_tiles()

    # ── IGameDelegate impl ───────────────────────────────────────────────

    def increment_score(self) -> None:
        if self._is_over:
            _LOGGER.warning("hit reported after game over, ignored")
            return
        self._score += 1
        _LOGGER.info("score is %d", self._score)
        self._emit_score_changed()

    def end_game(self) -> None:
        if self._is_over:
            return
        self._is_over = True
        _LOGGER.info("game over, final score %d", self._score)
        self._broadcast.publish()
        for cb in self.events.on_game_over:
            cb(self._score)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _stop_tiles(self) -> None:
        if any(not tile.is_stopped for tile in self._tiles):
            self._broadcast.publish()

    def _emit_score_changed(self) -> None:
        for cb in self.events.on_score_changed:
            cb(self._score)

    def _emit_grid_created(self) -> None:
        for cb in self.events.on_grid_created:
            cb(self._tiles)
