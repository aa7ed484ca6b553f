"""TileGrid — buttons that mirror tile state and forward clicks."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from tapout.game.tile import TileController
from tapout.ui.styles.theme import TileTheme


class TileButton(QPushButton):
    """Display for one tile. Repaints whenever the tile changes state."""

    def __init__(
        self,
        tile: TileController,
        theme: TileTheme | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._tile = tile
        self._theme = theme or TileTheme.default()

        self.setMinimumSize(64, 64)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.clicked.connect(self._on_clicked)
        tile.events.on_state_changed.append(self._on_tile_changed)
        self._apply_style()

    @property
    def tile(self) -> TileController:
        return self._tile

    def set_theme(self, theme: TileTheme) -> None:
        self._theme = theme
        self._apply_style()

    def detach(self) -> None:
        """Stop listening to the tile (the grid is being torn down)."""
        callbacks = self._tile.events.on_state_changed
        callbacks[:] = [cb for cb in callbacks if cb != self._on_tile_changed]

    def _on_clicked(self) -> None:
        self._tile.on_tap()

    def _on_tile_changed(self, _tile: TileController) -> None:
        self._apply_style()

    def _apply_style(self) -> None:
        self.setStyleSheet(
            self._theme.tile_style(
                active=self._tile.is_active,
                stopped=self._tile.is_stopped,
            )
        )


class TileGrid(QWidget):
    """Lays tile buttons out in rows of *columns*."""

    def __init__(self, columns: int = 4, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._columns = max(1, columns)
        self._theme = TileTheme.default()
        self._buttons: list[TileButton] = []

        self._layout = QGridLayout(self)
        self._layout.setContentsMargins(8, 8, 8, 8)
        self._layout.setSpacing(8)

    @property
    def buttons(self) -> list[TileButton]:
        return list(self._buttons)

    def set_theme(self, theme: TileTheme) -> None:
        self._theme = theme
        for button in self._buttons:
            button.set_theme(theme)

    def set_tiles(self, tiles: Sequence[TileController]) -> None:
        """Replace all buttons with one per tile, in grid order."""
        self.clear()
        for i, tile in enumerate(tiles):
            button = TileButton(tile, self._theme, self)
            row, col = divmod(i, self._columns)
            self._layout.addWidget(button, row, col)
            self._buttons.append(button)

    def clear(self) -> None:
        for button in self._buttons:
            button.detach()
            self._layout.removeWidget(button)
            button.deleteLater()
        self._buttons.clear()
