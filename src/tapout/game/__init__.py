"""Game layer — tiles, session, stop broadcast, timer scheduling.

Quick start::

    from tapout.game import GameSession, VirtualScheduler

    scheduler = VirtualScheduler()
    session = GameSession(scheduler, tile_count=20)
    session.start()
    session.tiles[0].on_tap()      # active tile: score 1
    scheduler.advance(1.5)         # untouched tiles flip to inactive
"""

from tapout.game.broadcast import StopBroadcast
from tapout.game.interfaces import (
    IGameDelegate,
    IScheduler,
    IStopListener,
    ITimerHandle,
    TilePhase,
    TileTiming,
)
from tapout.game.scheduler import VirtualScheduler, VirtualTimer
from tapout.game.session import DEFAULT_TILE_COUNT, GameSession, SessionEvents
from tapout.game.tile import TileController, TileEvents

__all__ = [
    # Interfaces
    "IGameDelegate",
    "IScheduler",
    "IStopListener",
    "ITimerHandle",
    "TilePhase",
    "TileTiming",
    # Concrete
    "DEFAULT_TILE_COUNT",
    "GameSession",
    "SessionEvents",
    "StopBroadcast",
    "TileController",
    "TileEvents",
    "VirtualScheduler",
    "VirtualTimer",
]
