"""Visual theme constants and QSS styles for Tap-Out."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TileTheme:
    """Colour scheme for the tile grid."""

    active: str  # tap me
    inactive: str  # don't
    stopped: str  # game over
    border: str

    @classmethod
    def default(cls) -> TileTheme:
        return cls(
            active="#800080",  # purple
            inactive="#ffffff",
            stopped="#d0d0d0",
            border="#3c3c3c",
        )

    @classmethod
    def night(cls) -> TileTheme:
        return cls(
            active="#3a7d44",
            inactive="#2b2b2b",
            stopped="#1a1a1a",
            border="#555555",
        )

    @classmethod
    def contrast(cls) -> TileTheme:
        return cls(
            active="#ffd400",
            inactive="#000000",
            stopped="#444444",
            border="#ffffff",
        )

    def tile_style(self, *, active: bool, stopped: bool = False) -> str:
        if stopped:
            color = self.stopped
        else:
            color = self.active if active else self.inactive
        return (
            f"QPushButton {{ background-color: {color}; "
            f"border: 1px solid {self.border}; border-radius: 6px; }}"
        )


THEMES: dict[str, TileTheme] = {
    "Classic": TileTheme.default(),
    "Night": TileTheme.night(),
    "Contrast": TileTheme.contrast(),
}


def theme_by_name(name: str) -> TileTheme:
    return THEMES.get(name, TileTheme.default())


APP_STYLE = """
QMainWindow {
    background-color: #f4f4f4;
}
QLabel#scoreLabel {
    font-size: 28px;
    font-weight: bold;
    color: #303030;
    padding: 6px;
}
QStatusBar {
    color: #606060;
}
"""
