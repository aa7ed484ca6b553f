"""Abstract interfaces for the game layer.

Tiles depend on these ABCs, not on the concrete session or on a particular
event loop, so the same tile logic runs under Qt and in headless tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import IntEnum, auto

# ── Tile FSM states ──────────────────────────────────────────────────────────


class TilePhase(IntEnum):
    """Finite-state-machine states for a single tile."""

    ACTIVE = auto()
    INACTIVE = auto()
    STOPPED = auto()  # terminal


# ── Timing presets ───────────────────────────────────────────────────────────


class TileTiming:
    """Immutable tile timing definition.

    Args:
        active_seconds: How long a tile stays active before flipping back.
        rearm_min: Shortest inactive period, whole seconds.
        rearm_max: Longest inactive period, whole seconds (inclusive).
    """

    __slots__ = ("active_seconds", "rearm_min", "rearm_max")

    def __init__(
        self,
        active_seconds: float = 1.5,
        rearm_min: int = 3,
        rearm_max: int = 14,
    ) -> None:
        if active_seconds <= 0:
            raise ValueError(f"active_seconds must be positive, got {active_seconds}")
        if rearm_min < 0 or rearm_max < rearm_min:
            raise ValueError(f"invalid re-arm range [{rearm_min}, {rearm_max}]")
        self.active_seconds = active_seconds
        self.rearm_min = rearm_min
        self.rearm_max = rearm_max

    @classmethod
    def classic(cls) -> TileTiming:
        return cls(1.5, 3, 14)

    @classmethod
    def relaxed(cls) -> TileTiming:
        return cls(2.5, 3, 14)

    @classmethod
    def frantic(cls) -> TileTiming:
        return cls(0.9, 2, 8)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TileTiming):
            return NotImplemented
        return (
            self.active_seconds == other.active_seconds
            and self.rearm_min == other.rearm_min
            and self.rearm_max == other.rearm_max
        )

    def __hash__(self) -> int:
        return hash((self.active_seconds, self.rearm_min, self.rearm_max))

    def __repr__(self) -> str:
        return (
            f"TileTiming({self.active_seconds:g}s active, "
            f"{self.rearm_min}-{self.rearm_max}s re-arm)"
        )


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameDelegate(ABC):
    """What a tile may ask of the game it belongs to."""

    @abstractmethod
    def increment_score(self) -> None:
        """A tile was hit while active."""

    @abstractmethod
    def end_game(self) -> None:
        """A tile was hit while inactive."""


class IStopListener(ABC):
    """Receiver of the end-of-game stop signal."""

    @abstractmethod
    def on_stop_signal(self) -> None:
        """Halt all pending work. Must be idempotent."""


class ITimerHandle(ABC):
    """A cancellable deferred call."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call repeatedly."""

    @property
    @abstractmethod
    def is_pending(self) -> bool:
        """Still waiting to fire (not fired, not cancelled)?"""


class IScheduler(ABC):
    """Single-threaded cooperative timer queue."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[[], None]) -> ITimerHandle:
        """Run *callback* once after *delay* seconds on the dispatch thread."""
