"""
Board entity - the per-turn snapshot of the arena.
"""

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Tuple

from .coord import Coord
from .errors import RequestDecodeError
from .snake import Snake


@dataclass(frozen=True)
class Board:
    """
    The board as seen on a single turn.

    Attributes:
        width, height: board dimensions, both >= 1
        food: set of cells holding food
        snakes: every snake still on the board, including our own
    """

    width: int
    height: int
    food: FrozenSet[Coord] = frozenset()
    snakes: Tuple[Snake, ...] = ()

    @classmethod
    def from_json(cls, data: Any) -> "Board":
        if not isinstance(data, dict):
            raise RequestDecodeError("board must be an object")

        dimensions = {}
        for key in ("width", "height"):
            value = data.get(key)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise RequestDecodeError(f"board {key} must be a positive integer, got {value!r}")
            dimensions[key] = value

        food = data.get("food") or []
        snakes = data.get("snakes") or []
        if not isinstance(food, list) or not isinstance(snakes, list):
            raise RequestDecodeError("board food and snakes must be lists")

        return cls(
            width=dimensions["width"],
            height=dimensions["height"],
            food=frozenset(Coord.from_json(item) for item in food),
            snakes=tuple(Snake.from_json(item) for item in snakes),
        )

    def to_json(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "food": [cell.to_json() for cell in sorted(self.food)],
            "snakes": [snake.to_json() for snake in self.snakes],
        }

    def render(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        T = snake body
        0,1,2... = snake head (index of the snake on the board)
        Row y = 0 is printed first, matching the downward y axis.
        Cells outside the board are skipped.
        """
        grid = [['.' for _ in range(self.width)] for _ in range(self.height)]

        for cell in self.food:
            if self._contains(cell):
                grid[cell.y][cell.x] = 'F'

        for i, snake in enumerate(self.snakes):
            # Draw tail first so the head wins on stacked segments
            for segment in reversed(snake.body[1:]):
                if self._contains(segment):
                    grid[segment.y][segment.x] = 'T'
            if self._contains(snake.head):
                grid[snake.head.y][snake.head.x] = str(i % 10)

        rows = [f"{y:2d} {' '.join(grid[y])}" for y in range(self.height)]
        rows.append("   " + " ".join(str(x % 10) for x in range(self.width)))
        return "\n".join(rows)

    def _contains(self, cell: Coord) -> bool:
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height
