"""
Base view interface for the game engine.
"""

from typing import Optional, Tuple

from domain.coordinate import Coordinate


class GameView:
    """
    Base class/interface for whatever presents the game to the player.

    Display hooks default to doing nothing; a view overrides the ones it
    can show. The query methods must be implemented.
    """

    def render_cell(self, coordinates: Coordinate, cell_state: str):
        """Paint one cell after it changed on the board."""

    def display_score(self, score: int):
        pass

    def display_game_over(self, score: int):
        pass

    def display_paused(self, paused: bool):
        pass

    def set_controls_enabled(self, enabled: bool):
        pass

    def set_selected_speed(self, speed: int):
        pass

    def get_viewport_cell_dimensions(self) -> Tuple[int, int]:
        """
        Return the board size in cells.

        Returns:
            (width, height)
        """
        raise NotImplementedError

    def get_selected_speed(self) -> int:
        """Return the selected speed in ticks per second."""
        raise NotImplementedError

    def get_direction_input(self) -> Optional[str]:
        """Return a pending direction request, or None."""
        raise NotImplementedError
