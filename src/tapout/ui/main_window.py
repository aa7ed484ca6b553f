"""MainWindow — score label, tile grid and the game-over dialog."""

from __future__ import annotations

import logging
import random

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import (
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from tapout.game.session import GameSession
from tapout.game.tile import TileController
from tapout.ui.i18n import set_language, t
from tapout.ui.scheduler import QtScheduler
from tapout.ui.settings import AppSettings
from tapout.ui.styles.theme import theme_by_name
from tapout.ui.tile_grid import TileGrid

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Tap-Out."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings or AppSettings()
        set_language(self._settings.language)
        self.setMinimumSize(320, 420)
        self.resize(420, 560)

        self._scheduler = QtScheduler(self)
        self._session = GameSession(
            self._scheduler,
            tile_count=self._settings.tile_count,
            timing=self._settings.timing,
            rng=rng,
        )
        self._game_over_box: QMessageBox | None = None

        self._setup_ui()
        self._setup_menu()
        self._connect_session_events()
        self.retranslate_ui()

        self._session.start()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        self._score_label = QLabel("0")
        self._score_label.setObjectName("scoreLabel")
        self._score_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._score_label)

        self._grid = TileGrid(self._settings.columns)
        self._grid.set_theme(theme_by_name(self._settings.tile_theme))
        root.addWidget(self._grid, stretch=1)

        self._status_label = QLabel()
        status_bar = QStatusBar()
        status_bar.addWidget(self._status_label, 1)
        self.setStatusBar(status_bar)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None
        self._game_menu = menu_bar.addMenu("")
        assert self._game_menu is not None

        self._act_new = QAction(self)
        self._act_new.setShortcut("Ctrl+N")
        self._act_new.triggered.connect(self._on_try_again)
        self._game_menu.addAction(self._act_new)

        self._game_menu.addSeparator()

        self._act_quit = QAction(self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._game_menu.addAction(self._act_quit)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        self._game_menu.setTitle(s.menu_game)
        self._act_new.setText(s.menu_new_game)
        self._act_quit.setText(s.menu_quit)
        if self._session.is_over:
            self._status_label.setText(s.status_game_over.format(score=self._session.score))
        else:
            self._status_label.setText(s.status_ready)

    def _connect_session_events(self) -> None:
        events = self._session.events
        events.on_score_changed.append(self._on_score_changed)
        events.on_game_over.append(self._on_game_over)
        events.on_grid_created.append(self._on_grid_created)

    def _disconnect_session_events(self) -> None:
        events = self._session.events
        events.on_score_changed[:] = [
            cb for cb in events.on_score_changed if cb != self._on_score_changed
        ]
        events.on_game_over[:] = [cb for cb in events.on_game_over if cb != self._on_game_over]
        events.on_grid_created[:] = [
            cb for cb in events.on_grid_created if cb != self._on_grid_created
        ]

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def grid(self) -> TileGrid:
        return self._grid

    @property
    def score_text(self) -> str:
        return self._score_label.text()

    # ── Session callbacks ────────────────────────────────────────────────

    def _on_score_changed(self, score: int) -> None:
        self._score_label.setText(str(score))

    def _on_grid_created(self, tiles: tuple[TileController, ...]) -> None:
        self._grid.set_tiles(tiles)
        self._status_label.setText(t().status_ready)

    def _on_game_over(self, score: int) -> None:
        self._status_label.setText(t().status_game_over.format(score=score))
        self._show_game_over_dialog(score)

    def _show_game_over_dialog(self, score: int) -> None:
        """Window-modal box; does not block the tap handler that ended the game."""
        self._close_game_over_dialog()
        box = QMessageBox(self)
        box.setIcon(QMessageBox.Icon.Information)
        box.setWindowTitle(t().game_over_title)
        box.setText(t().game_over_title)
        box.setInformativeText(t().final_score.format(score=score))
        retry: QPushButton | None = box.addButton(
            t().btn_try_again, QMessageBox.ButtonRole.AcceptRole
        )
        assert retry is not None
        retry.clicked.connect(self._on_try_again)
        self._game_over_box = box
        box.open()

    def _close_game_over_dialog(self) -> None:
        box, self._game_over_box = self._game_over_box, None
        if box is not None:
            box.close()
            box.deleteLater()

    def _on_try_again(self) -> None:
        self._close_game_over_dialog()
        self._session.reset()

    def closeEvent(self, event: QCloseEvent | None) -> None:
        _LOGGER.debug("closing, stopping %d tile(s)", len(self._session.tiles))
        self._close_game_over_dialog()
        self._session.shutdown()
        self._scheduler.cancel_all()
        self._disconnect_session_events()
        self._grid.clear()
        super().closeEvent(event)
