"""
Immediate-safety rules for a candidate head position.

Only the current turn is considered: a cell is safe when it lies on the board
and no snake occupies it right now.
"""

from typing import Set

from .board import Board
from .constants import ALL_MOVES
from .coord import Coord


def is_edge(pos: Coord, board: Board, strict_bounds: bool = False) -> bool:
    """
    Return True when `pos` is off the board.

    The default rule lets y run up to height + 1 before it counts as off the
    board, while x is bounded by width - 1. `strict_bounds` bounds y by
    height - 1 as well.
    """
    max_y = board.height - 1 if strict_bounds else board.height + 1
    return pos.x > board.width - 1 or pos.y > max_y or pos.x < 0 or pos.y < 0


def is_snake(pos: Coord, board: Board) -> bool:
    """Return True when any snake body segment or head sits on `pos`."""
    for snake in board.snakes:
        if pos in snake.body or pos == snake.head:
            return True
    return False


def is_food(pos: Coord, board: Board) -> bool:
    # Informational only, never part of the safety decision
    return pos in board.food


def is_valid(pos: Coord, board: Board, strict_bounds: bool = False) -> bool:
    return not is_edge(pos, board, strict_bounds) and not is_snake(pos, board)


def compute_safe_moves(head: Coord, board: Board, strict_bounds: bool = False) -> Set[str]:
    """
    Return the moves from `head` that do not end the snake this turn.

    Args:
        head: current head position of the moving snake
        board: board snapshot; our own body counts as an obstacle like any other
        strict_bounds: use the corrected bottom-edge check (see is_edge)

    Returns:
        Subset of {"up", "down", "left", "right"}, possibly empty.
    """
    return {
        move for move in ALL_MOVES
        if is_valid(head.step(move), board, strict_bounds)
    }
