"""
GameRequest - the payload the game server posts on every call.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .board import Board
from .errors import RequestDecodeError
from .snake import Snake


@dataclass(frozen=True)
class Game:
    id: str
    timeout: int = 500


@dataclass(frozen=True)
class GameRequest:
    """
    A per-turn request from the game server.

    Attributes:
        game: game metadata (id and per-move timeout in milliseconds)
        turn: current turn number (0-based)
        board: the board snapshot
        you: our own snake, also present in board.snakes
    """

    game: Game
    turn: int
    board: Board
    you: Snake

    @classmethod
    def from_json(cls, data: Optional[Any]) -> "GameRequest":
        """
        Decode a request body.

        Raises:
            RequestDecodeError: if the payload is not a complete game state.
        """
        if not isinstance(data, dict):
            raise RequestDecodeError("request body must be a JSON object")

        for key in ("board", "you"):
            if key not in data:
                raise RequestDecodeError(f"request is missing {key!r}")

        raw_game = data.get("game") or {}
        if not isinstance(raw_game, dict):
            raise RequestDecodeError("game must be an object")
        timeout = raw_game.get("timeout", 500)
        turn = data.get("turn", 0)
        for key, value in (("timeout", timeout), ("turn", turn)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise RequestDecodeError(f"{key} must be an integer, got {value!r}")

        return cls(
            game=Game(id=str(raw_game.get("id", "")), timeout=timeout),
            turn=turn,
            board=Board.from_json(data["board"]),
            you=Snake.from_json(data["you"]),
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "game": {"id": self.game.id, "timeout": self.game.timeout},
            "turn": self.turn,
            "board": self.board.to_json(),
            "you": self.you.to_json(),
        }

    def __repr__(self):
        return (
            f"<GameRequest game={self.game.id} turn={self.turn}, "
            f"snakes={len(self.board.snakes)}, food={len(self.board.food)}>"
        )
