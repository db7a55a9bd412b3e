"""
Move sources that steer a snake from outside the engine.
"""

from typing import List, Optional, Tuple

from domain.constants import VALID_MOVES, OPPOSITE_DIRECTIONS, DIRECTION_OFFSETS
from domain.game_state import GameState


class Player:
    """
    Base class for anything that picks directions for one snake.

    Subclasses implement get_move; the helpers read the player's own snake
    out of a GameState (positions are tail first, head last).
    """

    def __init__(self, snake_id: str):
        self.snake_id = snake_id

    def get_move(self, game_state: GameState) -> str:
        """
        Return the direction to queue before the next tick.

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError

    def head(self, game_state: GameState) -> Tuple[int, int]:
        row, column = game_state.snake_positions[self.snake_id][-1]
        return row, column

    def current_direction(self, game_state: GameState) -> Optional[str]:
        return game_state.directions.get(self.snake_id)

    def committed_direction(self, game_state: GameState) -> Optional[str]:
        """Direction of the last move, which the snake refuses to reverse."""
        return game_state.committed_directions.get(self.snake_id)

    def safe_moves(self, game_state: GameState) -> List[str]:
        """
        Directions the snake can take next tick without dying.

        The tail cell counts as free since it moves away on a tick without
        a gem.
        """
        body = {tuple(p) for p in game_state.snake_positions[self.snake_id][1:]}
        head_row, head_column = self.head(game_state)
        committed = self.committed_direction(game_state)

        moves = []
        for move in sorted(VALID_MOVES):
            if committed is not None and OPPOSITE_DIRECTIONS[move] == committed:
                continue
            row_delta, column_delta = DIRECTION_OFFSETS[move]
            row, column = head_row + row_delta, head_column + column_delta
            if not (0 <= row < game_state.height and 0 <= column < game_state.width):
                continue
            if (row, column) in body:
                continue
            moves.append(move)
        return moves
