"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass, field

from tapout.game.interfaces import TileTiming
from tapout.game.session import DEFAULT_TILE_COUNT


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Grid
    tile_count: int = DEFAULT_TILE_COUNT
    columns: int = 4
    tile_theme: str = "Classic"

    # Timing
    timing: TileTiming = field(default_factory=TileTiming.classic)

    def __post_init__(self) -> None:
        if self.tile_count < 0:
            raise ValueError(f"tile_count must be non-negative, got {self.tile_count}")
        if self.columns < 1:
            raise ValueError(f"columns must be at least 1, got {self.columns}")
