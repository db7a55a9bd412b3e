"""
Tests for the replay-to-video command-line tool.
"""

import sys
import os
from unittest.mock import patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cli.generate_video import default_video_path, render_replay
from domain import GameState
from services.game_files import save_replay_to_json


def make_history():
    return [
        GameState(
            tick_number=tick,
            status="playing",
            snake_positions={"1": [[2, tick]]},
            scores={"1": 0},
            directions={"1": "RIGHT"},
            width=6,
            height=4,
            gem=[0, 5],
            speed=10,
            game_id="game-9",
        )
        for tick in range(3)
    ]


class TestRenderReplay:
    """Tests for render_replay."""

    def test_default_video_path(self):
        """The video lands next to the replay with an .mp4 extension."""
        path = os.path.join("replays", "snake_game_game-9.json")
        assert default_video_path(path) == os.path.join("replays", "snake_game_game-9.mp4")

    @patch("cli.generate_video.SnakeVideoGenerator.generate_video")
    def test_renders_every_round(self, mock_generate, tmp_path):
        """Each recorded round of a replay file becomes a frame."""
        replay_path = save_replay_to_json("game-9", make_history(), str(tmp_path))
        mock_generate.side_effect = lambda game_id, states, output: output

        video_path = render_replay(replay_path, fps=4)

        game_id, states, output = mock_generate.call_args.args
        assert game_id == "game-9"
        assert [s["tick_number"] for s in states] == [0, 1, 2]
        assert output == default_video_path(replay_path)
        assert video_path == output

    @patch("cli.generate_video.SnakeVideoGenerator.generate_video", return_value="out.mp4")
    def test_custom_output(self, mock_generate, tmp_path):
        replay_path = save_replay_to_json("game-9", make_history(), str(tmp_path))
        render_replay(replay_path, output_path="out.mp4")
        assert mock_generate.call_args.args[2] == "out.mp4"

    def test_missing_replay(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            render_replay(str(tmp_path / "snake_game_missing.json"))
