"""
Game engine - owns the board, the snake and the gem, and advances the game
one tick at a time.
"""

import logging
import uuid
from typing import Dict, List, Optional

from domain.constants import UNKNOWN, GEM, HEAD, BODY, DEFAULT_SPEED, PLAYER_SNAKE_ID
from domain.coordinate import Coordinate
from domain.game_state import GameState
from domain.gem_placer import GemPlacer, BoardFullError
from domain.grid_map import GridMap
from domain.saved_game import SavedGame
from domain.snake import Snake
from services.scheduler import TickScheduler
from views.base import GameView

logger = logging.getLogger(__name__)

# Engine statuses
NOT_STARTED = "not_started"
PLAYING = "playing"
PAUSED = "paused"
GAME_OVER = "game_over"


class GameEngine:
    """
    Manages:
      - Board (GridMap sized from the view)
      - Snakes, keyed by id (a single player snake today)
      - The live gem
      - Pause / game over / saved game state
      - Finished-game scores

    Every entry point runs to completion without yielding; the only
    suspension point is the one-shot timer re-armed after each tick.
    """

    def __init__(
        self,
        view: GameView,
        scheduler: TickScheduler,
        gem_placer: Optional[GemPlacer] = None,
        record_history: bool = False
    ):
        self.view = view
        self.scheduler = scheduler
        self.gem_placer = gem_placer or GemPlacer()

        self.status = NOT_STARTED
        self.game_id: Optional[str] = None
        self.speed = DEFAULT_SPEED
        self.width: Optional[int] = None
        self.height: Optional[int] = None
        self.map: Optional[GridMap] = None
        self.snakes: Dict[int, Snake] = {}
        self.gem: Optional[Coordinate] = None
        self.tick_number = 0

        self.saved_game: Optional[SavedGame] = None
        self.score_history: List[int] = []

        self.record_history = record_history
        self.history: List[GameState] = []

    @property
    def snake(self) -> Optional[Snake]:
        """The player's snake."""
        return self.snakes.get(PLAYER_SNAKE_ID)

    @property
    def game_over(self) -> bool:
        """True before the first game and after a game ended."""
        return self.status in (NOT_STARTED, GAME_OVER)

    @property
    def paused(self) -> bool:
        return self.status == PAUSED

    @property
    def has_saved_game(self) -> bool:
        return self.saved_game is not None

    def start_game(self):
        """Start a fresh game and perform its first tick."""
        if not self.game_over:
            logger.debug("start_game ignored: a game is in progress")
            return

        speed = self._read_speed()
        width, height = self.view.get_viewport_cell_dimensions()
        self._reset(uuid.uuid4().hex, width, height)
        self.speed = speed

        self.view.set_controls_enabled(False)
        self.view.display_paused(False)
        self.view.display_score(0)

        head = Coordinate(self.height // 2, self.width // 2)
        self.map.set_cell(HEAD, head)
        self.snakes[PLAYER_SNAKE_ID] = Snake(PLAYER_SNAKE_ID, head)
        logger.info(
            f"Started game {self.game_id} on a {self.width}x{self.height} board "
            f"at speed {self.speed}"
        )

        try:
            self.gem = self.gem_placer.place_gem(self.map)
        except BoardFullError as e:
            logger.warning(f"Game {self.game_id}: {e}")
            self._notify_game_over("board_full")
            return

        self.record_state()
        self.tick()

    def tick(self):
        """Move the snake one cell and resolve what it ran into."""
        if self.status != PLAYING:
            return

        requested = self.view.get_direction_input()
        if requested is not None:
            self.change_direction(requested)

        snake = self.snake
        new_head = snake.move()
        board_full = False

        cell = self.map.get_cell(new_head)
        if cell == UNKNOWN:
            # Out of bounds. Only drop the tail from the body; the board keeps
            # its cells so other snakes' view of it stays stable.
            snake.remove_tail()
            self._notify_game_over("wall")
            return
        elif cell == GEM:
            self.view.display_score(snake.get_score())
            try:
                self.gem = self.gem_placer.place_gem(self.map)
            except BoardFullError as e:
                logger.warning(f"Game {self.game_id}: {e}")
                self.gem = None
                board_full = True
        else:
            self.map.clear(snake.remove_tail())

        old_cell = self.map.set_cell(HEAD, new_head)
        self.tick_number += 1
        logger.debug(f"Tick {self.tick_number}: head {new_head} over {old_cell}")

        if old_cell in (BODY, HEAD):
            self._notify_game_over("collision")
        elif board_full:
            self._notify_game_over("board_full")
        else:
            self.record_state()
            self.scheduler.schedule(1000 / self.speed, self.tick)

    def change_direction(self, direction: str):
        """Steer the snake; ignored unless a game is being played."""
        if self.status != PLAYING:
            return
        self.snake.change_direction(direction)

    def pause_game(self):
        """Toggle between playing and paused."""
        if self.game_over:
            return

        self.status = PLAYING if self.paused else PAUSED
        self.view.display_paused(self.paused)
        logger.info(f"Game {self.game_id} {'paused' if self.paused else 'resumed'}")

        if not self.paused:
            self.scheduler.schedule(1000 / self.speed, self.tick)

    def save_game(self):
        """Snapshot the running game. Ignored when no game is active."""
        if self.game_over:
            return
        self.saved_game = SavedGame(self.snake, self.speed, self.gem)
        logger.info(f"Saved game {self.game_id} with score {self.snake.get_score()}")

    def load_game(self):
        """
        Restore the saved game onto a fresh board and leave it paused.

        Only allowed when no game is active. The snapshot is kept, so the same
        save can be loaded again after this game ends.
        """
        if not self.game_over or self.saved_game is None:
            return

        saved = self.saved_game
        width, height = self.width, self.height
        if width is None or height is None:
            width, height = self.view.get_viewport_cell_dimensions()
        self._reset(uuid.uuid4().hex, width, height)

        snake = saved.snake.clone()
        self.snakes[PLAYER_SNAKE_ID] = snake
        self.speed = saved.speed

        self.view.set_selected_speed(self.speed)
        self.view.set_controls_enabled(False)
        self.view.display_score(snake.get_score())

        self.gem = self.gem_placer.place_gem(self.map, saved.gem)
        for coordinates in snake.get_values():
            self.map.set_cell(HEAD if snake.is_head(coordinates) else BODY, coordinates)

        # Re-save so the snapshot survives this game and stays independent of it
        self.save_game()

        logger.info(f"Loaded saved game with score {snake.get_score()} at speed {self.speed}")
        self.record_state()
        self.pause_game()

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current game as a GameState.
        """
        snake_positions = {}
        scores = {}
        directions = {}
        committed_directions = {}
        for sid, snake in self.snakes.items():
            snake_positions[str(sid)] = [c.to_list() for c in snake.get_values()]
            scores[str(sid)] = snake.get_score()
            directions[str(sid)] = snake.current_direction
            committed_directions[str(sid)] = snake.previous_direction

        return GameState(
            tick_number=self.tick_number,
            status=self.status,
            snake_positions=snake_positions,
            scores=scores,
            directions=directions,
            width=self.width or 0,
            height=self.height or 0,
            gem=self.gem.to_list() if self.gem is not None else None,
            speed=self.speed,
            game_id=self.game_id,
            committed_directions=committed_directions
        )

    def record_state(self):
        if self.record_history:
            self.history.append(self.get_current_state())

    def _reset(self, game_id: str, width: int, height: int):
        # Build the board first so a bad size leaves the engine untouched
        grid_map = GridMap(width, height, render_cell=self.view.render_cell)

        self.scheduler.cancel()
        self.width = width
        self.height = height
        self.map = grid_map
        self.game_id = game_id
        self.status = PLAYING
        self.tick_number = 0
        self.snakes = {}
        self.gem = None
        self.history = []

    def _read_speed(self) -> int:
        speed = int(self.view.get_selected_speed())
        if speed <= 0:
            raise ValueError(f"Speed must be positive, got {speed}.")
        return speed

    def _notify_game_over(self, reason: str):
        self.status = GAME_OVER
        snake = self.snake
        score = snake.get_score() if snake is not None else 0
        if snake is not None:
            snake.alive = False
            snake.death_reason = reason
            snake.death_tick = self.tick_number

        self.score_history.append(score)
        self.record_state()
        self.view.display_game_over(score)
        self.view.set_controls_enabled(True)
        logger.info(f"Game {self.game_id} over ({reason}) with score {score}")
