"""
Gem placement policy.
"""

import random
from typing import Optional

from .constants import EMPTY, GEM
from .coordinate import Coordinate
from .grid_map import GridMap


class BoardFullError(RuntimeError):
    """Raised when a gem is needed but the board has no empty cell left."""


class GemPlacer:
    """
    Chooses where the next gem goes and writes it onto the map.

    Random placement re-rolls row and column independently until the drawn
    cell is EMPTY. Pass a seeded random.Random for reproducible games.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def place_gem(self, grid_map: GridMap, requested: Optional[Coordinate] = None) -> Coordinate:
        """
        Place a gem and return its coordinates.

        A requested coordinate (used when restoring a saved game) is written
        as-is without checking the cell. Raises BoardFullError when a random
        placement is needed and no EMPTY cell remains.
        """
        if requested is not None:
            gem = requested.clone()
        else:
            if grid_map.count(EMPTY) == 0:
                raise BoardFullError(
                    f"No empty cell left on the {grid_map.width}x{grid_map.height} board."
                )
            gem = self._random_coordinates(grid_map)
            while grid_map.get_cell(gem) != EMPTY:
                gem = self._random_coordinates(grid_map)

        grid_map.set_cell(GEM, gem)
        return gem

    def _random_coordinates(self, grid_map: GridMap) -> Coordinate:
        return Coordinate(
            self.rng.randrange(grid_map.height),
            self.rng.randrange(grid_map.width),
        )
