"""
SavedGame entity - a detached snapshot used for save/load.
"""

from typing import Any, Dict

from .coordinate import Coordinate
from .snake import Snake


class SavedGame:
    """
    Deep copy of the state needed to resume a game.

    The snapshot owns its own snake and gem copies, so mutating the live game
    never changes it, and restoring from it hands out fresh copies.

    Attributes:
        snake: clone of the snake at save time
        speed: ticks per second
        gem: coordinates of the live gem
    """

    def __init__(self, snake: Snake, speed: int, gem: Coordinate):
        self.snake = snake.clone()
        self.speed = speed
        self.gem = gem.clone()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "snake": self.snake.to_dict(),
            "speed": self.speed,
            "gem": self.gem.to_list(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SavedGame":
        try:
            snake = Snake.from_dict(data["snake"])
            gem = Coordinate.from_list(data["gem"])
            speed = int(data["speed"])
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed saved game record: {e}") from e
        if speed <= 0:
            raise ValueError(f"Saved game speed must be positive, got {speed}.")
        return cls(snake, speed, gem)

    def __repr__(self):
        return f"<SavedGame score={self.snake.get_score()}, speed={self.speed}, gem={self.gem}>"
