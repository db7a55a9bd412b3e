"""
Random autopilot - picks a random safe move, preferring ones that close in on the gem.
"""

import random
from typing import Optional, Tuple

from domain.constants import VALID_MOVES, DIRECTION_OFFSETS
from domain.game_state import GameState
from .base import Player


def manhattan(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class RandomPlayer(Player):
    """
    Chooses uniformly among safe moves.

    With greedy=True (the default) the choice is narrowed to the safe moves
    that bring the head closer to the gem, when there are any.
    """

    def __init__(self, snake_id: str, rng: Optional[random.Random] = None, greedy: bool = True):
        super().__init__(snake_id)
        self.rng = rng or random.Random()
        self.greedy = greedy

    def get_move(self, game_state: GameState) -> str:
        moves = self.safe_moves(game_state)
        if not moves:
            # Boxed in; keep going
            return self.current_direction(game_state) or self.rng.choice(sorted(VALID_MOVES))

        if self.greedy and game_state.gem is not None:
            head = self.head(game_state)
            gem = tuple(game_state.gem)
            distance = manhattan(head, gem)
            closer = []
            for move in moves:
                row_delta, column_delta = DIRECTION_OFFSETS[move]
                if manhattan((head[0] + row_delta, head[1] + column_delta), gem) < distance:
                    closer.append(move)
            if closer:
                return self.rng.choice(closer)

        return self.rng.choice(moves)
