"""
Domain entities for the Battlesnake agent.

This module contains the game entities and move-safety rules, independent
of the HTTP transport.
"""

from .constants import UP, DOWN, LEFT, RIGHT, ALL_MOVES, VALID_MOVES, MOVE_OFFSETS, API_VERSION
from .errors import RequestDecodeError
from .coord import Coord
from .snake import Snake
from .board import Board
from .game_state import Game, GameRequest
from .rules import compute_safe_moves, is_edge, is_food, is_snake, is_valid

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'ALL_MOVES', 'VALID_MOVES', 'MOVE_OFFSETS', 'API_VERSION',
    'RequestDecodeError',
    'Coord',
    'Snake',
    'Board',
    'Game',
    'GameRequest',
    'compute_safe_moves', 'is_edge', 'is_food', 'is_snake', 'is_valid',
]
