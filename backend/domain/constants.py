"""
Game constants for the snake engine.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITE_DIRECTIONS = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# (row delta, column delta); row 0 is the top of the board
DIRECTION_OFFSETS = {
    UP: (-1, 0),
    DOWN: (1, 0),
    LEFT: (0, -1),
    RIGHT: (0, 1),
}

# Cell states. UNKNOWN is only ever returned for out-of-bounds queries.
UNKNOWN = "UNKNOWN"
EMPTY = "EMPTY"
HEAD = "HEAD"
BODY = "BODY"
GEM = "GEM"
CELL_STATES = {UNKNOWN, EMPTY, HEAD, BODY, GEM}

# Game settings
DEFAULT_SPEED = 10  # ticks per second
PLAYER_SNAKE_ID = 1
