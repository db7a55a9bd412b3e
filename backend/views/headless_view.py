"""
Headless view - keeps everything the engine shows in memory.

Used by the HTTP API, the CLI runner and the tests.
"""

from typing import Dict, List, Optional, Tuple

from domain.constants import DEFAULT_SPEED, VALID_MOVES
from domain.coordinate import Coordinate
from .base import GameView


class HeadlessView(GameView):
    """
    A view with no screen.

    Attributes:
        cells: last state painted per coordinate
        score: last score displayed
        final_scores: score of every finished game, oldest first
        paused: whether the pause overlay is showing
        controls_enabled: whether the speed controls are enabled
    """

    def __init__(self, width: int = 20, height: int = 20, speed: int = DEFAULT_SPEED):
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport dimensions must be positive, got {width}x{height}.")
        if speed <= 0:
            raise ValueError(f"Speed must be positive, got {speed}.")
        self.width = width
        self.height = height
        self.speed = speed

        self.cells: Dict[Coordinate, str] = {}
        self.score = 0
        self.final_scores: List[int] = []
        self.game_over_shown = False
        self.paused = False
        self.controls_enabled = True
        self._pending_direction: Optional[str] = None

    def render_cell(self, coordinates: Coordinate, cell_state: str):
        self.cells[coordinates] = cell_state

    def display_score(self, score: int):
        self.score = score
        self.game_over_shown = False

    def display_game_over(self, score: int):
        self.score = score
        self.game_over_shown = True
        self.final_scores.append(score)

    def display_paused(self, paused: bool):
        self.paused = paused

    def set_controls_enabled(self, enabled: bool):
        self.controls_enabled = enabled

    def set_selected_speed(self, speed: int):
        self.speed = speed

    def resize(self, width: int, height: int):
        """Change the viewport; takes effect on the next start or load."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport dimensions must be positive, got {width}x{height}.")
        self.width = width
        self.height = height
        self.cells.clear()

    def queue_direction(self, direction: str):
        """Queue a direction request; the latest one wins."""
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction {direction!r}.")
        self._pending_direction = direction

    def get_viewport_cell_dimensions(self) -> Tuple[int, int]:
        return self.width, self.height

    def get_selected_speed(self) -> int:
        return self.speed

    def get_direction_input(self) -> Optional[str]:
        direction, self._pending_direction = self._pending_direction, None
        return direction
