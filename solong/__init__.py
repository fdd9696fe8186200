"""Tile-map puzzle game for the terminal: map validation, game state, XPM images and colours."""

__version__ = "0.1.0"