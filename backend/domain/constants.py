"""
Game constants for the Battlesnake agent.
"""

from typing import Dict, Tuple

# Movement directions, as sent on the wire
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"

# Canonical order, used wherever a reproducible sequence of moves matters
ALL_MOVES: Tuple[str, ...] = (UP, DOWN, LEFT, RIGHT)
VALID_MOVES = frozenset(ALL_MOVES)

# y grows downward: the top row of the board is y = 0
MOVE_OFFSETS: Dict[str, Tuple[int, int]] = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

API_VERSION = "1"
