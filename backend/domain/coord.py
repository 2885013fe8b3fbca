"""
Coord value type - a cell on the board.
"""

from typing import Any, NamedTuple

from .constants import MOVE_OFFSETS
from .errors import RequestDecodeError


class Coord(NamedTuple):
    x: int
    y: int

    def step(self, move: str) -> "Coord":
        """Return the neighbouring cell one unit away in the direction of `move`."""
        dx, dy = MOVE_OFFSETS[move]
        return Coord(self.x + dx, self.y + dy)

    @classmethod
    def from_json(cls, data: Any) -> "Coord":
        if not isinstance(data, dict):
            raise RequestDecodeError(f"coordinate must be an object, got {data!r}")
        try:
            x, y = data["x"], data["y"]
        except KeyError as e:
            raise RequestDecodeError(f"coordinate is missing {e.args[0]!r}") from e
        # bool is an int subclass but never a valid coordinate
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (x, y)):
            raise RequestDecodeError(f"coordinate values must be integers, got {data!r}")
        return cls(x, y)

    def to_json(self) -> dict:
        return {"x": self.x, "y": self.y}
