"""
GridMap entity - the board of cell states.
"""

from typing import Callable, List, Optional

from .constants import UNKNOWN, EMPTY, HEAD, BODY, CELL_STATES
from .coordinate import Coordinate

RenderCallback = Callable[[Coordinate, str], None]


class GridMap:
    """
    The game board, indexed by [row][column].

    The number of rows is the height of the map and the number of columns
    is the width. Every in-bounds cell holds exactly one state (EMPTY when
    nothing was ever written); out-of-bounds coordinates classify as UNKNOWN
    and are never mutated.

    Attributes:
        width, height: board dimensions, fixed at construction
        render_cell: optional callback invoked with (coordinate, new_state)
            after every cell mutation
    """

    def __init__(self, width: int, height: int, render_cell: Optional[RenderCallback] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}.")
        self.width = width
        self.height = height
        self.render_cell = render_cell
        self._cells: List[List[str]] = [[EMPTY] * width for _ in range(height)]
        self._head: Optional[Coordinate] = None

    @property
    def head(self) -> Optional[Coordinate]:
        """Coordinate of the cell most recently written as HEAD, if any."""
        return self._head

    def in_bounds(self, coordinates: Coordinate) -> bool:
        return (0 <= coordinates.row < self.height and
                0 <= coordinates.column < self.width)

    def get_cell(self, coordinates: Coordinate) -> str:
        """Return the state at the coordinates, or UNKNOWN if outside the board."""
        if not self.in_bounds(coordinates):
            return UNKNOWN
        return self._cells[coordinates.row][coordinates.column]

    def set_cell(self, cell_type: str, coordinates: Coordinate) -> str:
        """
        Write a cell state and return the state that was there before.

        Writing HEAD demotes the previous head to BODY, provided that cell
        still holds HEAD, so at most one HEAD exists on the board.
        Out-of-bounds writes are ignored and return UNKNOWN.

        Raises:
            ValueError: if cell_type is not a state a cell can hold
        """
        if cell_type not in CELL_STATES or cell_type == UNKNOWN:
            raise ValueError(f"Cannot store cell state {cell_type!r}.")

        old_type = self.get_cell(coordinates)
        if old_type == UNKNOWN:
            return UNKNOWN

        coordinates = coordinates.clone()
        self._write(coordinates, cell_type)

        if cell_type == HEAD:
            previous = self._head
            if (previous is not None and previous != coordinates and
                    self.get_cell(previous) == HEAD):
                self._write(previous, BODY)
            self._head = coordinates

        return old_type

    def clear(self, coordinates: Coordinate):
        """Set the cell to EMPTY; no-op outside the board."""
        if self.in_bounds(coordinates):
            self._write(coordinates, EMPTY)

    def count(self, cell_type: str) -> int:
        return sum(row.count(cell_type) for row in self._cells)

    def rows(self) -> List[List[str]]:
        """Copy of the board as a list of rows (row 0 first)."""
        return [list(row) for row in self._cells]

    def _write(self, coordinates: Coordinate, cell_type: str):
        self._cells[coordinates.row][coordinates.column] = cell_type
        if self.render_cell is not None:
            self.render_cell(coordinates, cell_type)

    def __repr__(self):
        return f"<GridMap {self.width}x{self.height}, head={self._head}>"
