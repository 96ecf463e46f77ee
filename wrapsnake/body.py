from wrapsnake.grid import Cell

START_LENGTH = 3


def default_body(grid, length=START_LENGTH):
    """Horizontal starting snake, head a third of the way across, facing right."""
    if length < 1 or length > grid.width:
        raise ValueError("start length does not fit within the grid width.")

    head = Cell(grid.width // 3, grid.height // 2)
    cells = [head]
    for _ in range(length - 1):
        cells.append(grid.wrap(cells[-1], (-1, 0)))
    return SnakeBody(cells)


class SnakeBody:
    """Immutable snake: cells[0] is the head, cells[-1] the tail."""

    def __init__(self, cells):
        cells = tuple(Cell(*cell) for cell in cells)
        if not cells:
            raise ValueError("a snake needs at least one cell.")
        if len(set(cells)) != len(cells):
            raise ValueError("snake cells must be distinct.")
        self.cells = cells
        self._occupied = frozenset(cells)

    @property
    def head(self):
        return self.cells[0]

    def __len__(self):
        return len(self.cells)

    def __contains__(self, cell):
        return cell in self._occupied

    def __iter__(self):
        return iter(self.cells)

    def occupied(self):
        return self._occupied

    def advanced(self, new_head, grow=False):
        """Return the body after moving into new_head.

        The tail is kept only when growing, so the length stays the same
        on a plain move and goes up by one after eating.
        """
        cells = (Cell(*new_head),) + self.cells
        if not grow:
            cells = cells[:-1]
        return SnakeBody(cells)

    def __repr__(self):
        return f"<SnakeBody length={len(self)} head={tuple(self.head)}>"
