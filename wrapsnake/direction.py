import enum
import logging

logger = logging.getLogger(__name__)


class Direction(tuple, enum.Enum):
    """Unit step vectors; y grows downward, as on screen."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    def __new__(cls, vector):
        dx, dy = vector
        member = tuple.__new__(cls, (dx, dy))
        member._value_ = (dx, dy)
        return member

    @property
    def dx(self):
        return self[0]

    @property
    def dy(self):
        return self[1]

    @property
    def opposite(self):
        return Direction((-self.dx, -self.dy))

    def label(self):
        return self.name.lower()


class DirectionController:
    """Holds the live heading and rejects 180 degree turns.

    ``current`` follows key presses as they arrive; ``committed`` is the
    heading the last tick actually moved with. A press that reverses
    ``current`` is dropped. A press that only reverses ``committed`` (UP then
    LEFT while moving RIGHT) is queued and becomes the heading right after
    the next tick, so two quick turns still both happen without the snake
    ever reversing into its neck.
    """

    def __init__(self, heading=Direction.RIGHT):
        self.current = heading
        self.committed = heading
        self.queued = None

    def request_change(self, proposed):
        """Switch to proposed, or queue it for after the next tick.

        Returns False when the press is a reversal and was dropped.
        """
        if proposed == self.current.opposite:
            logger.debug(
                "Ignoring reversal to %s (current=%s)",
                proposed.label(),
                self.current.label(),
            )
            return False
        if proposed == self.committed.opposite:
            logger.debug("Queueing %s until after the next tick", proposed.label())
            self.queued = proposed
            return True
        self.current = proposed
        self.queued = None
        return True

    def snapshot(self):
        """Read the heading for this tick and commit it.

        A queued turn becomes the live heading for the following tick.
        """
        heading = self.current
        self.committed = heading
        if self.queued is not None and self.queued != heading.opposite:
            self.current = self.queued
        self.queued = None
        return heading

    def reset(self, heading=Direction.RIGHT):
        self.current = heading
        self.committed = heading
        self.queued = None
