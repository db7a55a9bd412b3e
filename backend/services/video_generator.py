"""
Board rendering and video generation for snake games.

This service turns recorded game states into images and videos by:
1. Rendering each frame using PIL (Pillow)
2. Encoding frames to video using MoviePy/FFmpeg

Each frame shows:
- The board with grid lines
- The gem
- Snake body, and the head with eyes
- A status strip with the score and the game status
"""

import os
import json
import logging
import tempfile
from typing import Dict, Any, List, Tuple, Optional, Union

from PIL import Image, ImageDraw, ImageFont
import numpy as np

from domain.game_state import GameState

logger = logging.getLogger(__name__)

# Video settings
DEFAULT_FPS = 10
CELL_SIZE = 20  # Size of each grid cell in pixels
STATUS_HEIGHT = 32


class ColorScheme:
    """Board colors"""

    SNAKE = "#4F7022"
    GEM = "#EA2014"

    BACKGROUND = "#FFFFFF"
    GRID_LINE = "#E5E7EB"
    BORDER = "#646464"

    STATUS_BG = "#1a1f2e"
    STATUS_TEXT = "#FFFFFF"
    GAME_OVER_TEXT = "#F87171"
    PAUSED_TEXT = "#FBBF24"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def darken_color(hex_color: str, amount: float = 0.3) -> Tuple[int, int, int]:
    """Darken a hex color by a given amount"""
    r, g, b = hex_to_rgb(hex_color)
    r = max(0, int(r * (1 - amount)))
    g = max(0, int(g * (1 - amount)))
    b = max(0, int(b * (1 - amount)))
    return (r, g, b)


class SnakeVideoGenerator:
    """Render game states to images and MP4 videos"""

    def __init__(self, cell_size: int = CELL_SIZE, fps: int = DEFAULT_FPS):
        if cell_size <= 0:
            raise ValueError(f"Cell size must be positive, got {cell_size}.")
        if fps <= 0:
            raise ValueError(f"FPS must be positive, got {fps}.")
        self.cell_size = cell_size
        self.fps = fps
        self.font = ImageFont.load_default()

    def frame_size(self, board_width: int, board_height: int) -> Tuple[int, int]:
        """Pixel size (width, height) of a frame for a board, rounded up to even for H.264."""
        width = board_width * self.cell_size + 1
        height = board_height * self.cell_size + 1 + STATUS_HEIGHT
        return width + width % 2, height + height % 2

    def render_frame(self, state: Union[GameState, Dict[str, Any]]) -> Image.Image:
        """Render a single frame of the game"""
        if isinstance(state, GameState):
            state = state.to_dict()

        board_width = state['width']
        board_height = state['height']
        img = Image.new('RGB', self.frame_size(board_width, board_height),
                        hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        self._draw_grid(draw, board_width, board_height)

        gem = state.get('gem')
        if gem is not None:
            self._draw_cell(draw, gem[0], gem[1], hex_to_rgb(ColorScheme.GEM), padding=2)

        for positions in state.get('snake_positions', {}).values():
            self._draw_snake(draw, positions, board_width, board_height)

        self._draw_status(draw, state, board_width, board_height)
        return img

    def _draw_grid(self, draw: ImageDraw.Draw, board_width: int, board_height: int):
        size = self.cell_size
        for i in range(board_width + 1):
            draw.line([i * size, 0, i * size, board_height * size],
                      fill=hex_to_rgb(ColorScheme.GRID_LINE), width=1)
        for i in range(board_height + 1):
            draw.line([0, i * size, board_width * size, i * size],
                      fill=hex_to_rgb(ColorScheme.GRID_LINE), width=1)
        draw.rectangle([0, 0, board_width * size, board_height * size],
                       outline=hex_to_rgb(ColorScheme.BORDER), width=1)

    def _draw_snake(
        self,
        draw: ImageDraw.Draw,
        positions: List[List[int]],
        board_width: int,
        board_height: int
    ):
        """Draw body segments, then the head (last position) with eyes"""
        visible = [(r, c) for r, c in positions if 0 <= r < board_height and 0 <= c < board_width]
        if not visible:
            return

        head = tuple(positions[-1])
        color = hex_to_rgb(ColorScheme.SNAKE)
        for row, column in visible:
            if (row, column) != head:
                self._draw_cell(draw, row, column, color, padding=1)

        if head not in visible:
            # Head left the board on the final tick
            return

        head_row, head_column = head
        self._draw_cell(draw, head_row, head_column, darken_color(ColorScheme.SNAKE, 0.3), padding=0)

        size = self.cell_size
        eye_size = max(2, size // 5)
        x = head_column * size
        eye_y = head_row * size + size // 3
        draw.ellipse([x + size // 4, eye_y, x + size // 4 + eye_size, eye_y + eye_size],
                     fill=(255, 255, 255))
        draw.ellipse([x + 3 * size // 4 - eye_size, eye_y, x + 3 * size // 4, eye_y + eye_size],
                     fill=(255, 255, 255))

    def _draw_status(self, draw: ImageDraw.Draw, state: Dict[str, Any], board_width: int,
                     board_height: int):
        width, height = self.frame_size(board_width, board_height)
        top = board_height * self.cell_size + 1
        draw.rectangle([0, top, width, height], fill=hex_to_rgb(ColorScheme.STATUS_BG))

        score = sum(state.get('scores', {}).values())
        draw.text((8, top + 10), f"Score: {score}", fill=hex_to_rgb(ColorScheme.STATUS_TEXT),
                  font=self.font)

        status = state.get('status')
        if status == 'game_over':
            label, color = "GAME OVER", ColorScheme.GAME_OVER_TEXT
        elif status == 'paused':
            label, color = "PAUSED", ColorScheme.PAUSED_TEXT
        else:
            return
        bbox = draw.textbbox((0, 0), label, font=self.font)
        draw.text((width - (bbox[2] - bbox[0]) - 8, top + 10), label, fill=hex_to_rgb(color),
                  font=self.font)

    def _draw_cell(
        self,
        draw: ImageDraw.Draw,
        row: int,
        column: int,
        color: Tuple[int, int, int],
        padding: int = 1
    ):
        """Draw a single cell (for snake body or gem)"""
        size = self.cell_size
        x, y = column * size, row * size
        draw.rectangle(
            [x + padding, y + padding, x + size - padding, y + size - padding],
            fill=color
        )

    def generate_video(
        self,
        game_id: str,
        states: List[Union[GameState, Dict[str, Any]]],
        output_path: Optional[str] = None
    ) -> str:
        """
        Generate a video from recorded game states

        Args:
            game_id: The game ID to generate video for
            states: Recorded states, oldest first
            output_path: Optional output path (if None, uses temp file)

        Returns:
            Path to the generated video file
        """
        if not states:
            raise ValueError(f"No recorded states for game {game_id}")

        # Imported here so rendering single frames does not need FFmpeg
        from moviepy import ImageSequenceClip

        logger.info(f"Rendering {len(states)} frames for game {game_id}")
        frames = []
        for i, state in enumerate(states):
            if i % 100 == 0:
                logger.debug(f"Rendering frame {i + 1}/{len(states)}")
            frames.append(np.array(self.render_frame(state)))

        if output_path is None:
            output_path = os.path.join(tempfile.gettempdir(), f"{game_id}_replay.mp4")

        clip = ImageSequenceClip(frames, fps=self.fps)
        clip.write_videofile(
            output_path,
            codec='libx264',
            audio=False,
            logger=None
        )

        logger.info(f"Video created successfully at {output_path}")
        return output_path


def load_replay_states(replay_path: str) -> Tuple[str, List[Dict[str, Any]]]:
    """
    Read a replay file written by save_replay_to_json.

    Returns:
        (game_id, list of state dicts)
    """
    if not os.path.exists(replay_path):
        raise FileNotFoundError(f"Replay file not found: {replay_path}")
    with open(replay_path, 'r') as f:
        replay_data = json.load(f)
    metadata = replay_data.get('metadata', {})
    return metadata.get('game_id', 'unknown'), replay_data.get('rounds', [])
