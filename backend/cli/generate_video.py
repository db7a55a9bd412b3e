#!/usr/bin/env python3
"""
CLI tool to generate videos from snake game replays

Usage:
    python generate_video.py <path_to_replay.json> [options]

Examples:
    # Writes ../completed_games/snake_game_abc123.mp4 next to the replay
    python generate_video.py ../completed_games/snake_game_abc123.json

    # Custom output path
    python generate_video.py ../completed_games/snake_game_abc123.json --output ./my_video.mp4

    # Custom video settings
    python generate_video.py ../completed_games/snake_game_abc123.json --fps 4 --cell-size 32
"""

import os
import sys
import argparse
import logging
from typing import Optional

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import load_settings
from services.video_generator import SnakeVideoGenerator, load_replay_states, DEFAULT_FPS, CELL_SIZE

logger = logging.getLogger(__name__)


def default_video_path(replay_path: str) -> str:
    """snake_game_<id>.json -> snake_game_<id>.mp4 in the same directory"""
    return os.path.splitext(replay_path)[0] + '.mp4'


def render_replay(
    replay_path: str,
    output_path: Optional[str] = None,
    fps: int = DEFAULT_FPS,
    cell_size: int = CELL_SIZE
) -> str:
    """
    Turn a replay file written by save_replay_to_json into an MP4.

    Returns:
        Path to the generated video file
    """
    game_id, states = load_replay_states(replay_path)
    logger.info(f"Loaded replay for game {game_id} with {len(states)} rounds")

    generator = SnakeVideoGenerator(cell_size=cell_size, fps=fps)
    return generator.generate_video(game_id, states, output_path or default_video_path(replay_path))


def main():
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    parser = argparse.ArgumentParser(
        description='Generate MP4 videos from snake game replays',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('replay', help='Path to a snake_game_<id>.json replay file')
    parser.add_argument('--output', '-o', type=str, default=None,
                        help='Output video file path (default: next to the replay)')
    parser.add_argument('--fps', type=int, default=DEFAULT_FPS,
                        help=f'Frames per second (default: {DEFAULT_FPS})')
    parser.add_argument('--cell-size', type=int, default=CELL_SIZE,
                        help=f'Pixels per board cell (default: {CELL_SIZE})')
    args = parser.parse_args()

    try:
        video_path = render_replay(args.replay, args.output, args.fps, args.cell_size)
        logger.info(f"[OK] Video generated successfully: {video_path}")
    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
