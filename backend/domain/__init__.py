"""
Domain entities for the snake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (timers, rendering, HTTP, files).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITE_DIRECTIONS, DIRECTION_OFFSETS,
    UNKNOWN, EMPTY, HEAD, BODY, GEM, CELL_STATES,
    DEFAULT_SPEED, PLAYER_SNAKE_ID,
)
from .coordinate import Coordinate
from .grid_map import GridMap
from .snake import Snake
from .gem_placer import GemPlacer, BoardFullError
from .saved_game import SavedGame
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITE_DIRECTIONS', 'DIRECTION_OFFSETS',
    'UNKNOWN', 'EMPTY', 'HEAD', 'BODY', 'GEM', 'CELL_STATES',
    'DEFAULT_SPEED', 'PLAYER_SNAKE_ID',
    'Coordinate',
    'GridMap',
    'Snake',
    'GemPlacer',
    'BoardFullError',
    'SavedGame',
    'GameState',
]
