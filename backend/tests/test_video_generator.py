"""
Tests for board rendering and video generation.
"""

import json
import sys
import os
from unittest.mock import MagicMock, patch

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services.video_generator import (
    SnakeVideoGenerator,
    ColorScheme,
    hex_to_rgb,
    darken_color,
    load_replay_states,
)


def make_state_dict(**overrides):
    state = {
        "game_id": "game-123",
        "tick_number": 4,
        "status": "playing",
        "snake_positions": {"1": [[2, 1], [2, 2], [2, 3]]},
        "scores": {"1": 2},
        "directions": {"1": "RIGHT"},
        "width": 6,
        "height": 5,
        "gem": [0, 5],
        "speed": 10,
    }
    state.update(overrides)
    return state


class TestColorHelpers:
    """Tests for the color helpers."""

    def test_hex_to_rgb(self):
        """Hex strings convert to RGB tuples."""
        assert hex_to_rgb("#FF8000") == (255, 128, 0)

    def test_darken_color(self):
        """Darkening scales every channel down."""
        assert darken_color("#646464", 0.5) == (50, 50, 50)


class TestRenderFrame:
    """Tests for SnakeVideoGenerator.render_frame."""

    def cell_center(self, generator, row, column):
        size = generator.cell_size
        return column * size + size // 2, row * size + size // 2

    def test_frame_size_is_even(self):
        """Frames have even dimensions so H.264 can encode them."""
        generator = SnakeVideoGenerator(cell_size=7)
        width, height = generator.frame_size(5, 5)
        assert width % 2 == 0 and height % 2 == 0

    def test_render_frame_size(self):
        """The frame covers the board plus the status strip."""
        generator = SnakeVideoGenerator(cell_size=20)
        image = generator.render_frame(make_state_dict())
        assert image.size == generator.frame_size(6, 5)

    def test_gem_and_body_colors(self):
        """The gem and body cells are painted in their colors."""
        generator = SnakeVideoGenerator(cell_size=20)
        image = generator.render_frame(make_state_dict())

        assert image.getpixel(self.cell_center(generator, 0, 5)) == hex_to_rgb(ColorScheme.GEM)
        assert image.getpixel(self.cell_center(generator, 2, 1)) == hex_to_rgb(ColorScheme.SNAKE)
        assert image.getpixel(self.cell_center(generator, 4, 4)) == hex_to_rgb(ColorScheme.BACKGROUND)

    def test_head_is_darker(self):
        """The head (last position) is drawn darker than the body."""
        generator = SnakeVideoGenerator(cell_size=20)
        image = generator.render_frame(make_state_dict())
        x = 3 * 20 + 2
        y = 2 * 20 + 18
        assert image.getpixel((x, y)) == darken_color(ColorScheme.SNAKE, 0.3)

    def test_accepts_game_state_objects(self):
        """GameState objects render the same as their dicts."""
        from domain import GameState

        data = make_state_dict()
        state = GameState(**data)
        generator = SnakeVideoGenerator(cell_size=10)
        assert generator.render_frame(state).tobytes() == generator.render_frame(data).tobytes()

    def test_off_board_head_is_skipped(self):
        """A head that left the board on the final tick does not break rendering."""
        generator = SnakeVideoGenerator(cell_size=10)
        state = make_state_dict(snake_positions={"1": [[2, 0], [2, -1]]}, status="game_over")
        image = generator.render_frame(state)
        assert image.getpixel(self.cell_center(generator, 2, 0)) == hex_to_rgb(ColorScheme.SNAKE)

    def test_rejects_bad_settings(self):
        """Cell size and FPS must be positive."""
        with pytest.raises(ValueError):
            SnakeVideoGenerator(cell_size=0)
        with pytest.raises(ValueError):
            SnakeVideoGenerator(fps=0)


class TestGenerateVideo:
    """Tests for SnakeVideoGenerator.generate_video."""

    def test_requires_states(self):
        """A video needs at least one frame."""
        with pytest.raises(ValueError):
            SnakeVideoGenerator().generate_video("game-123", [])

    @patch("moviepy.ImageSequenceClip")
    def test_encodes_one_frame_per_state(self, mock_clip_cls, tmp_path):
        """Every state becomes a frame handed to MoviePy."""
        clip = MagicMock()
        mock_clip_cls.return_value = clip
        output = str(tmp_path / "out.mp4")

        path = SnakeVideoGenerator(fps=4).generate_video(
            "game-123", [make_state_dict(), make_state_dict(tick_number=5)], output
        )

        assert path == output
        frames = mock_clip_cls.call_args.args[0]
        assert len(frames) == 2
        assert mock_clip_cls.call_args.kwargs["fps"] == 4
        clip.write_videofile.assert_called_once()
        assert clip.write_videofile.call_args.args[0] == output


class TestLoadReplayStates:
    """Tests for reading replay files."""

    def test_load_replay_states(self, tmp_path):
        """The game id and rounds are read from a replay file."""
        path = tmp_path / "snake_game_game-123.json"
        path.write_text(json.dumps({
            "metadata": {"game_id": "game-123"},
            "rounds": [make_state_dict()],
        }))

        game_id, states = load_replay_states(str(path))

        assert game_id == "game-123"
        assert states[0]["tick_number"] == 4

    def test_missing_replay(self, tmp_path):
        """A missing replay raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_replay_states(str(tmp_path / "missing.json"))
