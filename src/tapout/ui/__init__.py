"""PyQt6 front end: tile grid, score label, game-over dialog."""
