"""Tests for TileButton / TileGrid rendering and click wiring."""

from __future__ import annotations

import random

from tapout.game.scheduler import VirtualScheduler
from tapout.game.session import GameSession
from tapout.ui.styles.theme import TileTheme, theme_by_name
from tapout.ui.tile_grid import TileButton, TileGrid


def _session(tile_count: int = 4) -> tuple[GameSession, VirtualScheduler]:
    scheduler = VirtualScheduler()
    session = GameSession(scheduler, tile_count=tile_count, rng=random.Random(5))
    session.start()
    return session, scheduler


class TestTileButton:
    def test_style_follows_tile_state(self, qapp) -> None:
        session, scheduler = _session(1)
        button = TileButton(session.tiles[0])
        theme = TileTheme.default()
        assert theme.active in button.styleSheet()

        scheduler.run_next()
        assert theme.inactive in button.styleSheet()

        session.end_game()
        assert theme.stopped in button.styleSheet()

    def test_click_taps_tile(self, qapp) -> None:
        session, _ = _session(1)
        button = TileButton(session.tiles[0])
        button.click()
        assert session.score == 1
        button.click()
        assert session.is_over

    def test_detach_stops_repainting(self, qapp) -> None:
        session, scheduler = _session(1)
        button = TileButton(session.tiles[0])
        button.detach()
        scheduler.run_next()
        assert TileTheme.default().active in button.styleSheet()
        assert session.tiles[0].events.on_state_changed == []

    def test_set_theme(self, qapp) -> None:
        session, _ = _session(1)
        button = TileButton(session.tiles[0])
        button.set_theme(TileTheme.night())
        assert TileTheme.night().active in button.styleSheet()


class TestTileGrid:
    def test_one_button_per_tile(self, qapp) -> None:
        session, _ = _session(6)
        grid = TileGrid(columns=4)
        grid.set_tiles(session.tiles)
        assert [b.tile for b in grid.buttons] == list(session.tiles)

    def test_set_tiles_replaces_buttons(self, qapp) -> None:
        session, _ = _session(3)
        grid = TileGrid()
        grid.set_tiles(session.tiles)
        old_tiles = session.tiles
        session.reset()
        grid.set_tiles(session.tiles)
        assert len(grid.buttons) == 3
        assert all(b.tile not in old_tiles for b in grid.buttons)
        assert all(t.events.on_state_changed == [] for t in old_tiles)

    def test_empty_grid(self, qapp) -> None:
        grid = TileGrid()
        grid.set_tiles(())
        assert grid.buttons == []


class TestTheme:
    def test_unknown_theme_falls_back(self) -> None:
        assert theme_by_name("Nope") == TileTheme.default()
        assert theme_by_name("Night") == TileTheme.night()
