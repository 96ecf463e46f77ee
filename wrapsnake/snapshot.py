import enum
from dataclasses import dataclass
from typing import FrozenSet, Tuple

from wrapsnake.direction import Direction
from wrapsnake.grid import Cell


class CellType(enum.Enum):
    EMPTY = "empty"
    SNAKE = "snake"
    FOOD = "food"


@dataclass(frozen=True)
class BoardSnapshot:
    """Read-only view of one observable engine state, for drawing."""

    width: int
    height: int
    snake: Tuple[Cell, ...]
    foods: FrozenSet[Cell]
    score: int
    heading: Direction
    rounds_played: int = 0
    last_round_score: int = 0

    @property
    def head(self):
        return self.snake[0]

    def classify(self, cell):
        # Food wins over snake, matching the order cells are drawn in.
        if cell in self.foods:
            return CellType.FOOD
        if cell in self.snake:
            return CellType.SNAKE
        return CellType.EMPTY
