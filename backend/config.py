"""
Runtime settings read from the environment (and a .env file, if present).
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from domain.constants import DEFAULT_SPEED

DEFAULT_ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


@dataclass
class Settings:
    board_width: int = 20
    board_height: int = 20
    speed: int = DEFAULT_SPEED
    replay_dir: str = "completed_games"
    log_level: str = "INFO"
    allowed_origins: List[str] = field(default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS))


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build Settings from environment variables.

    Variables: SNAKE_BOARD_WIDTH, SNAKE_BOARD_HEIGHT, SNAKE_SPEED,
    SNAKE_REPLAY_DIR, LOG_LEVEL, CORS_ALLOWED_ORIGINS (comma-separated).
    """
    load_dotenv(env_file)

    allowed_origins_env = os.getenv("CORS_ALLOWED_ORIGINS")
    if allowed_origins_env:
        allowed_origins = [o.strip() for o in allowed_origins_env.split(",") if o.strip()]
    else:
        allowed_origins = list(DEFAULT_ALLOWED_ORIGINS)

    return Settings(
        board_width=_positive_int("SNAKE_BOARD_WIDTH", 20),
        board_height=_positive_int("SNAKE_BOARD_HEIGHT", 20),
        speed=_positive_int("SNAKE_SPEED", DEFAULT_SPEED),
        replay_dir=os.getenv("SNAKE_REPLAY_DIR", "completed_games"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        allowed_origins=allowed_origins,
    )
