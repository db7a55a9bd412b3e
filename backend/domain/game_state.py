"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Any, Dict, List, Optional


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick_number: how many ticks have been committed
        status: engine status ('not_started', 'playing', 'paused', 'game_over')
        snake_positions: dict of snake_id -> list of [row, column], tail first
        scores: dict of snake_id -> int
        directions: dict of snake_id -> current (requested) direction
        committed_directions: dict of snake_id -> direction of the last move;
            a turn opposite to it is ignored
        width, height: board dimensions
        gem: [row, column] of the live gem, if any
        speed: ticks per second
        game_id: identifier of the running game
    """

    def __init__(
        self,
        tick_number: int,
        status: str,
        snake_positions: Dict[str, List[List[int]]],
        scores: Dict[str, int],
        directions: Dict[str, str],
        width: int,
        height: int,
        gem: Optional[List[int]],
        speed: int,
        game_id: Optional[str] = None,
        committed_directions: Optional[Dict[str, str]] = None
    ):
        self.tick_number = tick_number
        self.status = status
        self.snake_positions = snake_positions
        self.scores = scores
        self.directions = directions
        if committed_directions is None:
            committed_directions = dict(directions)
        self.committed_directions = committed_directions
        self.width = width
        self.height = height
        self.gem = gem
        self.speed = speed
        self.game_id = game_id

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        G = gem
        B = snake body
        H = snake head
        Row 0 is printed at the top, with column labels underneath.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.gem is not None:
            gem_row, gem_column = self.gem
            if 0 <= gem_row < self.height and 0 <= gem_column < self.width:
                board[gem_row][gem_column] = 'G'

        for positions in self.snake_positions.values():
            last = len(positions) - 1
            for idx, (row, column) in enumerate(positions):
                # The body can hold a head that left the board on the final tick
                if not (0 <= row < self.height and 0 <= column < self.width):
                    continue
                board[row][column] = 'H' if idx == last else 'B'

        result = [f"{row:2d} {' '.join(board[row])}" for row in range(self.height)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "game_id": self.game_id,
            "tick_number": self.tick_number,
            "status": self.status,
            "snake_positions": self.snake_positions,
            "scores": self.scores,
            "directions": self.directions,
            "committed_directions": self.committed_directions,
            "width": self.width,
            "height": self.height,
            "gem": self.gem,
            "speed": self.speed,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, status={self.status}, gem={self.gem}, "
            f"scores={self.scores}>"
        )
