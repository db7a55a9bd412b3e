#!/usr/bin/env python3
"""
CLI tool to play a headless snake game with the random autopilot

Usage:
    python play_game.py [options]

Examples:
    # Quick game on the configured board
    python play_game.py

    # Reproducible game on a small board, written out as a replay and a video
    python play_game.py --width 10 --height 10 --seed 7 --replay-dir ./completed_games --video game.mp4

    # Play at real speed, saving the game halfway through
    python play_game.py --realtime --speed 5 --save-file ./saves/game.json

    # Resume a saved game
    python play_game.py --load-file ./saves/game.json
"""

import os
import sys
import json
import time
import random
import argparse
import logging

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import load_settings
from domain.gem_placer import GemPlacer
from engine import GameEngine
from players.random_player import RandomPlayer
from services.game_files import save_replay_to_json, save_snapshot_to_json, load_snapshot_from_json
from services.scheduler import ManualScheduler
from services.video_generator import SnakeVideoGenerator
from views.headless_view import HeadlessView

logger = logging.getLogger(__name__)


def build_parser(settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Play a headless snake game driven by the random autopilot',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--width', type=int, default=settings.board_width,
                        help=f'Board width in cells (default: {settings.board_width})')
    parser.add_argument('--height', type=int, default=settings.board_height,
                        help=f'Board height in cells (default: {settings.board_height})')
    parser.add_argument('--speed', type=int, default=settings.speed,
                        help=f'Ticks per second (default: {settings.speed})')
    parser.add_argument('--max-ticks', type=int, default=1000,
                        help='Stop after this many ticks (default: 1000)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for gems and autopilot')
    parser.add_argument('--realtime', action='store_true',
                        help='Wait 1000/speed ms between ticks')
    parser.add_argument('--replay-dir', type=str, default=None,
                        help='Write a replay JSON file to this directory')
    parser.add_argument('--video', type=str, default=None,
                        help='Write an MP4 video of the game to this path')
    parser.add_argument('--fps', type=int, default=10,
                        help='Video frames per second (default: 10)')
    parser.add_argument('--save-file', type=str, default=None,
                        help='Save the game to this JSON file halfway through --max-ticks')
    parser.add_argument('--load-file', type=str, default=None,
                        help='Resume the saved game in this JSON file instead of starting fresh')
    parser.add_argument('--verbose', action='store_true',
                        help='Log the board after every tick')
    return parser


def run_game(args) -> dict:
    """
    Run one game to completion (or to --max-ticks) and return a summary.
    """
    rng = random.Random(args.seed)
    view = HeadlessView(args.width, args.height, args.speed)
    scheduler = ManualScheduler()
    engine = GameEngine(
        view,
        scheduler,
        gem_placer=GemPlacer(random.Random(rng.random())),
        record_history=bool(args.replay_dir or args.video)
    )
    player = RandomPlayer("1", rng=random.Random(rng.random()))

    if args.load_file:
        engine.saved_game = load_snapshot_from_json(args.load_file)
        engine.load_game()
        # Loading leaves the game paused
        engine.pause_game()
    else:
        engine.start_game()

    save_at = args.max_ticks // 2 if args.save_file else None

    def before_tick():
        state = engine.get_current_state()
        if args.verbose:
            logger.info(f"Tick {state.tick_number}\n{state.print_board()}")
        if save_at is not None and state.tick_number == save_at:
            engine.save_game()
            save_snapshot_to_json(engine.saved_game, args.save_file)
        view.queue_direction(player.get_move(state))

    scheduler.run_until_idle(
        sleep=time.sleep if args.realtime else None,
        max_ticks=args.max_ticks,
        before_tick=before_tick
    )

    final_state = engine.get_current_state()
    snake = engine.snake
    summary = {
        "game_id": engine.game_id,
        "score": snake.get_score() if snake else 0,
        "ticks": final_state.tick_number,
        "status": final_state.status,
        "death_reason": snake.death_reason if snake else None,
    }

    if args.replay_dir:
        summary["replay_path"] = save_replay_to_json(
            engine.game_id, engine.history, args.replay_dir,
            metadata={"speed": engine.speed, "death_reason": summary["death_reason"]}
        )
    if args.video:
        generator = SnakeVideoGenerator(fps=args.fps)
        summary["video_path"] = generator.generate_video(engine.game_id, engine.history, args.video)

    return summary


def main():
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    args = build_parser(settings).parse_args()

    try:
        summary = run_game(args)
    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)

    print(json.dumps(summary, indent=2))


if __name__ == '__main__':
    main()
