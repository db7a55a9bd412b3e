"""
Tests for the headless command-line runner.
"""

import argparse
import json
import sys
import os
from unittest.mock import patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cli.play_game import build_parser, run_game
from config import Settings


def make_args(**overrides):
    args = {
        "width": 20,
        "height": 20,
        "speed": 10,
        "max_ticks": 50,
        "seed": 7,
        "realtime": False,
        "replay_dir": None,
        "video": None,
        "fps": 10,
        "save_file": None,
        "load_file": None,
        "verbose": False,
    }
    args.update(overrides)
    return argparse.Namespace(**args)


class TestBuildParser:
    """Tests for the argument parser."""

    def test_defaults_come_from_settings(self):
        parser = build_parser(Settings(board_width=12, board_height=8, speed=3))
        args = parser.parse_args([])
        assert (args.width, args.height, args.speed) == (12, 8, 3)
        assert args.max_ticks == 1000
        assert args.seed is None
        assert args.realtime is False

    def test_flags(self):
        parser = build_parser(Settings())
        args = parser.parse_args([
            "--width", "5", "--max-ticks", "10", "--seed", "1",
            "--replay-dir", "out", "--save-file", "save.json", "--verbose",
        ])
        assert args.width == 5
        assert args.max_ticks == 10
        assert args.seed == 1
        assert args.replay_dir == "out"
        assert args.save_file == "save.json"
        assert args.verbose is True


class TestRunGame:
    """Tests for run_game."""

    def test_summary(self):
        """A game runs to completion or the tick limit and reports its outcome."""
        summary = run_game(make_args(width=8, height=8))

        assert summary["game_id"]
        assert summary["score"] >= 0
        # The first tick happens on start, before the runner takes over
        assert 1 <= summary["ticks"] <= 51
        assert summary["status"] in ("playing", "game_over")
        if summary["status"] == "game_over":
            assert summary["death_reason"] in ("wall", "collision", "board_full")

    def test_seed_is_reproducible(self):
        """The same seed plays the same game."""
        first = run_game(make_args(width=8, height=8))
        second = run_game(make_args(width=8, height=8))
        assert (first["score"], first["ticks"], first["death_reason"]) == \
            (second["score"], second["ticks"], second["death_reason"])

    def test_writes_replay(self, tmp_path):
        """--replay-dir writes the recorded rounds to a replay file."""
        summary = run_game(make_args(max_ticks=20, replay_dir=str(tmp_path)))

        with open(summary["replay_path"]) as f:
            data = json.load(f)
        assert data["metadata"]["game_id"] == summary["game_id"]
        assert data["rounds"][-1]["tick_number"] == summary["ticks"]
        assert data["rounds"][0]["tick_number"] == 0

    def test_video_uses_recorded_history(self, tmp_path):
        """--video hands the recorded states to the video generator."""
        output = str(tmp_path / "game.mp4")
        with patch("cli.play_game.SnakeVideoGenerator.generate_video", return_value=output) as mock_generate:
            summary = run_game(make_args(max_ticks=5, video=output))

        assert summary["video_path"] == output
        game_id, states, path = mock_generate.call_args.args
        assert game_id == summary["game_id"]
        assert path == output
        assert len(states) >= 2

    def test_save_then_resume(self, tmp_path):
        """A game saved halfway can be resumed from its file."""
        save_file = str(tmp_path / "saves" / "game.json")
        run_game(make_args(max_ticks=10, save_file=save_file))
        assert os.path.exists(save_file)

        with open(save_file) as f:
            saved = json.load(f)
        saved_score = len(saved["snake"]["positions"]) - 1

        summary = run_game(make_args(max_ticks=5, load_file=save_file))
        assert summary["score"] >= saved_score
        assert summary["ticks"] <= 5

    def test_missing_load_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            run_game(make_args(load_file=str(tmp_path / "missing.json")))
