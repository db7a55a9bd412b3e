"""
Render/UI collaborators for the game engine.

The engine pushes cell updates, scores and state changes through a GameView
and asks it for the board size, the selected speed and pending input.
"""

from .base import GameView
from .headless_view import HeadlessView

__all__ = [
    'GameView',
    'HeadlessView',
]
