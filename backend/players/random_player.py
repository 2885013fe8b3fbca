"""
Random player implementation - picks random safe moves.
"""

import logging
import random
import threading
from typing import Iterable, List, Optional

from domain.constants import ALL_MOVES
from domain.game_state import GameRequest
from domain.rules import compute_safe_moves
from .base import Player


logger = logging.getLogger(__name__)


class RandomPlayer(Player):
    """
    Picks uniformly among the moves that avoid walls and every snake on the board.

    Args:
        rng: source of randomness; a freshly seeded random.Random when omitted
        strict_bounds: use the corrected bottom-edge check
    """

    def __init__(self, rng: Optional[random.Random] = None, strict_bounds: bool = False):
        self.rng = rng if rng is not None else random.Random()
        self.strict_bounds = strict_bounds
        # random.Random is shared by concurrent requests
        self._rng_lock = threading.Lock()

    def select_move(self, safe_moves: Iterable[str]) -> str:
        """
        Choose one of `safe_moves`, or any direction when there is none.

        With no safe move left the snake dies whatever it does, so the
        fallback is a plain random direction rather than an error.
        """
        safe = set(safe_moves)
        candidates: List[str] = [move for move in ALL_MOVES if move in safe]
        if not candidates:
            candidates = list(ALL_MOVES)

        with self._rng_lock:
            return self.rng.choice(candidates)

    def get_move(self, game_request: GameRequest) -> str:
        head = game_request.you.head
        board = game_request.board
        safe_moves = compute_safe_moves(head, board, self.strict_bounds)

        logger.debug(f"Turn {game_request.turn}: safe moves from {tuple(head)}: {sorted(safe_moves)}")
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("\n" + board.render())
        if not safe_moves:
            logger.warning(
                f"Game {game_request.game.id} turn {game_request.turn}: "
                f"no safe move from {tuple(head)}, picking at random"
            )

        return self.select_move(safe_moves)
