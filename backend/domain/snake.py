"""
Snake entity as reported by the game server.
"""

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .coord import Coord
from .errors import RequestDecodeError


@dataclass(frozen=True)
class Snake:
    """
    A snake on the board.

    Attributes:
        id: game-unique snake identifier
        name: display name
        health: remaining health (the game decrements it every turn)
        body: tuple of Coord from head at index 0 to tail at the end
        length: number of body segments as reported by the server
        shout: last shout sent by the snake, may be empty
    """

    id: str
    name: str
    health: int
    body: Tuple[Coord, ...]
    length: int
    shout: str = ""

    @property
    def head(self) -> Coord:
        """Return the head position (first body segment)."""
        return self.body[0]

    @classmethod
    def from_json(cls, data: Any) -> "Snake":
        """
        Build a Snake from the wire format.

        The wire format carries `head` next to `body`; it is checked against
        body[0] rather than stored.

        Raises:
            RequestDecodeError: if a required field is missing or malformed.
        """
        if not isinstance(data, dict):
            raise RequestDecodeError("snake must be an object")

        raw_body = data.get("body")
        if not isinstance(raw_body, list) or not raw_body:
            raise RequestDecodeError(f"snake {data.get('id')!r} has no body segments")
        body = tuple(Coord.from_json(segment) for segment in raw_body)

        if "head" in data and Coord.from_json(data["head"]) != body[0]:
            raise RequestDecodeError(
                f"snake {data.get('id')!r} head does not match its first body segment"
            )

        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            health=_int_field(data, "health", 0),
            body=body,
            length=_int_field(data, "length", len(body)),
            shout=str(data.get("shout") or ""),
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "health": self.health,
            "body": [segment.to_json() for segment in self.body],
            "head": self.head.to_json(),
            "length": self.length,
            "shout": self.shout,
        }


def _int_field(data: Dict[str, Any], key: str, default: int) -> int:
    value = data.get(key, default)
    if not isinstance(value, int) or isinstance(value, bool):
        raise RequestDecodeError(f"{key} must be an integer, got {value!r}")
    return value
