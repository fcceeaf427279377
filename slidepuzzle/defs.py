"""Screen geometry and the states the game moves between."""

from enum import Enum, auto

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
TILE_SIZE = 100


class GameState(Enum):
    """Which screen the game is currently showing."""

    START = auto()
    PLAYING = auto()
    SETTINGS = auto()
    RULES = auto()
    OVER = auto()
    LEVEL = auto()