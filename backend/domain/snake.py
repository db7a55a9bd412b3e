"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Any, Dict, List, Optional

from .constants import RIGHT, VALID_MOVES, OPPOSITE_DIRECTIONS, DIRECTION_OFFSETS
from .coordinate import Coordinate


class Snake:
    """
    Represents a snake on the board.

    The snake does not know about the board: moving is pure arithmetic on the
    head coordinate, and classifying the new head is the engine's job.

    Attributes:
        id: identity of the snake (the engine keys snakes by this)
        positions: deque of coordinates from the tail (oldest) to the head (newest)
        current_direction: direction of the next move
        previous_direction: direction of the last committed move
        alive: whether this snake is still alive
        death_reason: e.g., 'wall', 'collision', 'board_full'
        death_tick: the tick number when the snake died
    """

    def __init__(self, snake_id: int, head: Coordinate, direction: str = RIGHT):
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction {direction!r}.")
        self.id = snake_id
        self.head = head.clone()
        self.positions = deque([self.head])
        self.current_direction = direction
        self.previous_direction = direction
        self.alive = True
        self.death_reason: Optional[str] = None
        self.death_tick: Optional[int] = None

    def move(self) -> Coordinate:
        """Append a new head one step along the current direction and return it."""
        row_delta, column_delta = DIRECTION_OFFSETS[self.current_direction]
        new_head = self.head.offset(row_delta, column_delta)
        self.head = new_head
        self.positions.append(new_head)
        self.previous_direction = self.current_direction
        return new_head

    def change_direction(self, direction: str):
        """
        Request a new direction for the next move.

        A request for the exact opposite of the last committed direction is
        ignored, so the snake can never reverse into its own neck.
        """
        if direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction {direction!r}.")
        if OPPOSITE_DIRECTIONS[direction] != self.previous_direction:
            self.current_direction = direction

    def append(self, coordinates: Coordinate) -> Coordinate:
        """Add a new head and return the old one."""
        old_head = self.head
        self.head = coordinates.clone()
        self.positions.append(self.head)
        return old_head

    def remove_tail(self) -> Coordinate:
        """Remove and return the oldest body segment."""
        return self.positions.popleft()

    def get_score(self) -> int:
        return len(self.positions) - 1

    def get_length(self) -> int:
        return len(self.positions)

    def get_values(self) -> List[Coordinate]:
        """Body coordinates, tail first."""
        return list(self.positions)

    def is_head(self, coordinates: Coordinate) -> bool:
        return self.head.equals(coordinates)

    def clone(self) -> "Snake":
        """Deep copy: later changes to either snake do not affect the other."""
        clone = Snake(self.id, self.head, self.current_direction)
        clone.previous_direction = self.previous_direction
        clone.positions = deque(c.clone() for c in self.positions)
        clone.head = clone.positions[-1]
        clone.alive = self.alive
        clone.death_reason = self.death_reason
        clone.death_tick = self.death_tick
        return clone

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "positions": [c.to_list() for c in self.positions],
            "current_direction": self.current_direction,
            "previous_direction": self.previous_direction,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Snake":
        positions = [Coordinate.from_list(p) for p in data.get("positions") or []]
        if not positions:
            raise ValueError("Snake record has no positions.")

        previous_direction = data.get("previous_direction", data.get("current_direction", RIGHT))
        if previous_direction not in VALID_MOVES:
            raise ValueError(f"Unknown direction {previous_direction!r}.")

        snake = cls(data.get("id", 1), positions[-1], data.get("current_direction", RIGHT))
        snake.previous_direction = previous_direction
        snake.positions = deque(positions)
        snake.head = snake.positions[-1]
        return snake

    def __repr__(self):
        return (
            f"<Snake id={self.id}, head={self.head}, length={len(self.positions)}, "
            f"direction={self.current_direction}>"
        )
