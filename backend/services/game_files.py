"""
Plain-record persistence for saved games and replays.

Saved games are written as {"snake": {...}, "speed": int, "gem": [row, col]}.
Replays follow the {"metadata": {...}, "rounds": [...]} layout, one round per
recorded GameState.
"""

import os
import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from domain.game_state import GameState
from domain.saved_game import SavedGame

logger = logging.getLogger(__name__)


def save_snapshot_to_json(saved_game: SavedGame, path: str) -> str:
    """
    Write a saved game to a JSON file.

    Args:
        saved_game: The snapshot to write
        path: Destination file; parent directories are created

    Returns:
        The path written
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(path, "w") as f:
        json.dump(saved_game.to_dict(), f, indent=2)

    logger.info(f"Saved game written to {path}")
    return path


def load_snapshot_from_json(path: str) -> SavedGame:
    """
    Read a saved game from a JSON file.

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: if the file is not a valid saved game record
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Saved game file not found: {path}")

    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Saved game file {path} is not valid JSON: {e}") from e

    saved_game = SavedGame.from_dict(data)
    logger.info(f"Loaded saved game from {path}: {saved_game}")
    return saved_game


def serialize_history(history: List[GameState]) -> List[Dict[str, Any]]:
    """
    Convert the list of GameState objects to a JSON-serializable list of dicts.
    """
    return [state.to_dict() for state in history]


def save_replay_to_json(
    game_id: str,
    history: List[GameState],
    directory: str = "completed_games",
    metadata: Optional[Dict[str, Any]] = None
) -> str:
    """
    Write a replay file named snake_game_<game_id>.json.

    Args:
        game_id: Identifier of the game
        history: Recorded states, oldest first
        directory: Output directory (created if missing)
        metadata: Extra metadata merged into the header

    Returns:
        Path to the replay file
    """
    final_state = history[-1] if history else None
    header = {
        "game_id": game_id,
        "written_at": datetime.now(timezone.utc).isoformat(),
        "actual_ticks": final_state.tick_number if final_state else 0,
        "final_scores": final_state.scores if final_state else {},
        "final_status": final_state.status if final_state else None,
    }
    if metadata:
        header.update(metadata)

    data = {
        "metadata": header,
        "rounds": serialize_history(history),
    }

    os.makedirs(directory, exist_ok=True)
    path = os.path.join(directory, f"snake_game_{game_id}.json")
    with open(path, "w") as f:
        json.dump(data, f, indent=2)

    logger.info(f"Replay with {len(history)} rounds written to {path}")
    return path
