"""
Tests for the autopilot players.
"""

import random
import sys
import os

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import GameState, UP, DOWN, LEFT, RIGHT, VALID_MOVES
from players import Player, RandomPlayer


def make_state(positions, direction=RIGHT, gem=None, width=10, height=10):
    return GameState(
        tick_number=0,
        status="playing",
        snake_positions={"1": positions},
        scores={"1": len(positions) - 1},
        directions={"1": direction},
        width=width,
        height=height,
        gem=gem,
        speed=10,
    )


class TestPlayer:
    """Tests for the Player base class."""

    def test_get_move_not_implemented(self):
        """The base class leaves move selection to subclasses."""
        with pytest.raises(NotImplementedError):
            Player("1").get_move(make_state([[5, 5]]))

    def test_head_and_direction(self):
        """The head is the last position of the player's snake."""
        state = make_state([[5, 3], [5, 4], [5, 5]], direction=RIGHT)
        player = Player("1")
        assert player.head(state) == (5, 5)
        assert player.current_direction(state) == RIGHT

    def test_safe_moves_allow_tail(self):
        """The tail cell is free because it moves away on the next tick."""
        # Head (4,4) heading LEFT with the tail right below it at (5,4)
        state = make_state([[5, 4], [5, 5], [4, 5], [4, 4]], direction=LEFT)
        assert Player("1").safe_moves(state) == [DOWN, LEFT, UP]

    def test_reversal_is_judged_against_committed_direction(self):
        """A pending turn does not change which move counts as reversing."""
        state = GameState(
            tick_number=3,
            status="playing",
            snake_positions={"1": [[5, 4], [5, 5]]},
            scores={"1": 1},
            directions={"1": UP},
            committed_directions={"1": RIGHT},
            width=10,
            height=10,
            gem=None,
            speed=10,
        )
        assert Player("1").committed_direction(state) == RIGHT
        assert Player("1").safe_moves(state) == [DOWN, RIGHT, UP]


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_random_player_initialization(self):
        """RandomPlayer initializes with a snake_id."""
        player = RandomPlayer("1")
        assert player.snake_id == "1"

    def test_returns_valid_move(self):
        """RandomPlayer.get_move() returns a valid direction."""
        player = RandomPlayer("1", rng=random.Random(0))
        assert player.get_move(make_state([[5, 5]])) in VALID_MOVES

    def test_avoids_walls_in_corner(self):
        """In the top-left corner heading LEFT, only DOWN is safe."""
        player = RandomPlayer("1", rng=random.Random(1), greedy=False)
        state = make_state([[0, 1], [0, 0]], direction=LEFT)
        for _ in range(20):
            assert player.get_move(state) == DOWN

    def test_never_reverses(self):
        """The move opposite the current direction is never picked."""
        player = RandomPlayer("1", rng=random.Random(2), greedy=False)
        state = make_state([[5, 4], [5, 5]], direction=RIGHT)
        for _ in range(50):
            assert player.get_move(state) != LEFT

    def test_avoids_own_body(self):
        """Cells occupied by the body (other than the tail) are avoided."""
        player = RandomPlayer("1", rng=random.Random(3), greedy=False)
        # Head at (5,5) heading LEFT with body above it
        state = make_state([[3, 5], [4, 5], [4, 6], [5, 6], [5, 5]], direction=LEFT)
        for _ in range(50):
            assert player.get_move(state) != UP

    def test_greedy_moves_toward_gem(self):
        """With a gem straight ahead, the greedy player goes for it."""
        player = RandomPlayer("1", rng=random.Random(4))
        state = make_state([[5, 5]], direction=RIGHT, gem=[5, 8])
        assert player.get_move(state) == RIGHT

    def test_trapped_keeps_direction(self):
        """With no safe move left, the player keeps its heading."""
        player = RandomPlayer("1", rng=random.Random(5))
        state = make_state([[0, 0]], direction=RIGHT, width=1, height=1)
        assert player.get_move(state) == RIGHT
