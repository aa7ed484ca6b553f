"""Tap-Out — tap the lit tiles, miss one and the game is over."""

__version__ = "0.1.0"
