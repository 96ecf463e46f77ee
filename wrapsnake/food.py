import logging
import random
import time
from typing import NamedTuple

from wrapsnake.errors import NoSpaceAvailable
from wrapsnake.grid import Cell

logger = logging.getLogger(__name__)

# Above this share of blocked cells, enumerate the free ones instead of sampling.
DENSE_OCCUPANCY = 0.8


def monotonic_ms():
    return int(time.monotonic() * 1000)


class Food(NamedTuple):
    cell: Cell
    spawned_at: int

    def age(self, now):
        return now - self.spawned_at


class FoodManager:
    """Active food items, oldest first.

    Spawns land on a random free cell, expiry only ever looks at the oldest
    item, and consumption removes whichever item sits under the snake's head.
    """

    def __init__(self, grid, rng=None, clock=None):
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock if clock is not None else monotonic_ms
        self._foods = []

    def __len__(self):
        return len(self._foods)

    def __iter__(self):
        return iter(list(self._foods))

    @property
    def oldest(self):
        return self._foods[0] if self._foods else None

    def cells(self):
        return frozenset(food.cell for food in self._foods)

    def is_food(self, cell):
        return any(food.cell == cell for food in self._foods)

    def clear(self):
        self._foods.clear()

    def spawn(self, occupied):
        """Place one food on a cell that is neither occupied nor already food.

        Raises NoSpaceAvailable when the grid has no such cell left.
        """
        blocked = set(occupied) | self.cells()
        cell = self._pick_free_cell(blocked)
        food = Food(cell, self.clock())
        self._foods.append(food)
        logger.debug("Spawned food at %s (active=%d)", tuple(cell), len(self._foods))
        return food

    def _pick_free_cell(self, blocked):
        if len(blocked) < self.grid.size * DENSE_OCCUPANCY:
            for _ in range(self.grid.size):
                cell = Cell(
                    self.rng.randint(0, self.grid.width - 1),
                    self.rng.randint(0, self.grid.height - 1),
                )
                if cell not in blocked:
                    return cell

        free = [cell for cell in self.grid.cells() if cell not in blocked]
        if not free:
            raise NoSpaceAvailable(
                f"no free cell on a {self.grid.width}x{self.grid.height} grid"
            )
        return self.rng.choice(free)

    def consume(self, cell):
        """Remove the first food at cell. Returns whether one was eaten."""
        for index, food in enumerate(self._foods):
            if food.cell == cell:
                del self._foods[index]
                return True
        return False

    def expire_oldest(self, now, ttl):
        """Drop the oldest food once it has lived for ttl or longer.

        Only the head of the queue is checked. Foods are appended in spawn
        order, so nothing behind it can be older.
        """
        oldest = self.oldest
        if oldest is None or oldest.age(now) < ttl:
            return None
        self._foods.pop(0)
        logger.debug("Expired food at %s after %d ms", tuple(oldest.cell), oldest.age(now))
        return oldest
