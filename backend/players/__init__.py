"""
Player implementations for the move service.

This module contains the player abstraction and the implementations
that decide the next move of our snake.
"""

from .base import Player
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'RandomPlayer',
]
