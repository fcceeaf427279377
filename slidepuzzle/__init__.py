"""A pygame sliding tile puzzle with 3x3, 4x4 and 5x5 boards."""

__version__ = "0.1.0"
__all__ = ["board", "defs", "game", "graphics"]