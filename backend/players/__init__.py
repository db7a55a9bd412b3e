"""
Player implementations for the snake engine.

A player looks at a GameState and picks the direction its snake should
take next. Keyboard and browser input reach the engine directly; players
drive headless runs.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
