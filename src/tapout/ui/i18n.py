"""Internationalisation strings for the Tap-Out UI.

Usage::

    from tapout.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_try_again)          # "Ещё раз"
    print(t().final_score.format(score=7))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_new_game: str
    menu_quit: str

    status_ready: str
    status_game_over: str  # e.g. "Game over - score {score}"

    # ── Game over dialog ─────────────────────────────────────────────────
    game_over_title: str
    final_score: str  # "Your Final Score: {score}"
    btn_try_again: str


_EN = Strings(
    window_title="Tap-Out",
    menu_game="&Game",
    menu_new_game="&New Game",
    menu_quit="&Quit",
    status_ready="Tap the purple tiles!",
    status_game_over="Game over - score {score}",
    game_over_title="You Missed!",
    final_score="Your Final Score: {score}",
    btn_try_again="Try Again",
)

_RU = Strings(
    window_title="Tap-Out",
    menu_game="&Игра",
    menu_new_game="&Новая игра",
    menu_quit="&Выход",
    status_ready="Нажимайте на фиолетовые плитки!",
    status_game_over="Игра окончена - счёт {score}",
    game_over_title="Промах!",
    final_score="Ваш итоговый счёт: {score}",
    btn_try_again="Ещё раз",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
