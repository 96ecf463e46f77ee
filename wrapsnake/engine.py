import enum
import logging
import random
from dataclasses import dataclass
from typing import Tuple

from wrapsnake.body import SnakeBody, default_body
from wrapsnake.config import GameConfig
from wrapsnake.direction import Direction, DirectionController
from wrapsnake.errors import NoSpaceAvailable
from wrapsnake.food import Food, FoodManager, monotonic_ms
from wrapsnake.grid import Cell, Grid
from wrapsnake.score import ScoreTracker
from wrapsnake.snapshot import BoardSnapshot

logger = logging.getLogger(__name__)

START_HEADING = Direction.RIGHT


class TickOutcome(enum.Enum):
    MOVED = "moved"
    ATE = "ate"
    RESET = "reset"


@dataclass(frozen=True)
class RoundState:
    snake: Tuple[Cell, ...]
    heading: Direction
    foods: Tuple[Food, ...]
    score: int
    is_over: bool = False


class GameEngine:
    """
    Owns one round of the game and every piece of state in it:
      - the wrapping grid
      - the snake body and its heading
      - the active foods
      - the score

    Timers and input never touch those pieces directly; they call
    apply_tick, tick_spawn, tick_expire and request_turn, each of which
    runs to completion before the next one starts.
    """

    def __init__(self, config=None, rng=None, clock=None, body=None, heading=None):
        self.config = config if config is not None else GameConfig()
        self.grid = Grid(self.config.width, self.config.height)
        if rng is None:
            rng = random.Random(self.config.seed)
        self.clock = clock if clock is not None else monotonic_ms

        self.directions = DirectionController(heading or START_HEADING)
        self.foods = FoodManager(self.grid, rng=rng, clock=self.clock)
        self.score = ScoreTracker()
        self.body = SnakeBody(body) if body is not None else default_body(self.grid)
        for cell in self.body:
            if not self.grid.contains(cell):
                raise ValueError(f"snake cell {tuple(cell)} is outside {self.grid!r}")

        self.rounds_played = 0
        self.last_round_score = 0
        self._spawn_or_skip()
        logger.info(
            "Round started on %dx%d grid, head at %s",
            self.grid.width,
            self.grid.height,
            tuple(self.body.head),
        )

    @property
    def state(self):
        return RoundState(
            snake=self.body.cells,
            heading=self.directions.current,
            foods=tuple(self.foods),
            score=self.score.value,
        )

    def snapshot(self):
        return BoardSnapshot(
            width=self.grid.width,
            height=self.grid.height,
            snake=self.body.cells,
            foods=self.foods.cells(),
            score=self.score.value,
            heading=self.directions.current,
            rounds_played=self.rounds_played,
            last_round_score=self.last_round_score,
        )

    def request_turn(self, direction):
        return self.directions.request_change(direction)

    def apply_tick(self):
        """Advance the snake one cell.

        Movement, the collision check and feeding happen here as one step.
        A collision resets the round before returning, so callers never see
        a finished round.
        """
        heading = self.directions.snapshot()
        new_head = self.grid.wrap(self.body.head, heading)

        # The tail has not moved yet, so running into it counts as a collision.
        if new_head in self.body:
            logger.debug("Head ran into body at %s", tuple(new_head))
            self.reset()
            return TickOutcome.RESET

        ate = self.foods.is_food(new_head)
        self.body = self.body.advanced(new_head, grow=ate)

        if ate:
            self.score.increment()
            self.foods.consume(new_head)
            logger.debug("Ate food at %s, score=%d", tuple(new_head), self.score.value)
            return TickOutcome.ATE
        return TickOutcome.MOVED

    def tick_spawn(self):
        """Add one food on a free cell, or skip this cycle if there is none."""
        return self._spawn_or_skip()

    def tick_expire(self):
        return self.foods.expire_oldest(self.clock(), self.config.food_ttl_ms)

    def reset(self):
        """Start a fresh round with the default snake, heading and one food."""
        finished = self.score.value
        self.rounds_played += 1
        self.last_round_score = finished
        logger.info(
            "Round %d over with score %d (length %d)",
            self.rounds_played,
            finished,
            len(self.body),
        )

        self.body = default_body(self.grid)
        self.directions.reset(START_HEADING)
        self.score.reset()
        self.foods.clear()
        self._spawn_or_skip()

    def _spawn_or_skip(self):
        try:
            return self.foods.spawn(self.body.occupied())
        except NoSpaceAvailable as e:
            logger.warning("Skipping food spawn: %s", e)
            return None

    def __repr__(self):
        return (
            f"<GameEngine round={self.rounds_played}, score={self.score.value}, "
            f"length={len(self.body)}, foods={len(self.foods)}>"
        )
