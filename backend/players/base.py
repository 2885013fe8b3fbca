"""
Base player interface for the move service.
"""

from domain.game_state import GameRequest


class Player:
    """
    Base class/interface for player logic.

    A player is shared by every game the service takes part in, so it must
    not keep per-game state.
    """

    def get_move(self, game_request: GameRequest) -> str:
        """
        Return a move direction for `game_request.you`.

        Args:
            game_request: Current state of the game

        Returns:
            One of: "up", "down", "left", "right"
        """
        raise NotImplementedError
