"""Tetris game engine with a pygame front-end and a gymnasium environment."""

__version__ = "0.1.0"
