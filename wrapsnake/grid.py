from typing import NamedTuple


class Cell(NamedTuple):
    x: int
    y: int


class Grid:
    """Fixed-size coordinate space whose edges wrap around."""

    def __init__(self, width, height):
        self.width = width
        self.height = height

    @property
    def size(self):
        return self.width * self.height

    def wrap(self, cell, delta):
        """Step one cell by delta, wrapping past any edge to the opposite side."""
        dx, dy = delta
        return Cell(
            (cell[0] + dx + self.width) % self.width,
            (cell[1] + dy + self.height) % self.height,
        )

    def contains(self, cell):
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def cells(self):
        """Yield every cell, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield Cell(x, y)

    def __repr__(self):
        return f"<Grid {self.width}x{self.height}>"
