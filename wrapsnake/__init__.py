"""Snake on a wrap-around grid: the game engine and its pygame front end."""

from wrapsnake.config import GameConfig
from wrapsnake.direction import Direction, DirectionController
from wrapsnake.engine import GameEngine, RoundState, TickOutcome
from wrapsnake.errors import InvalidConfiguration, NoSpaceAvailable, WrapsnakeError
from wrapsnake.food import Food, FoodManager
from wrapsnake.grid import Cell, Grid
from wrapsnake.snapshot import BoardSnapshot, CellType

__version__ = "0.1.0"

__all__ = [
    "BoardSnapshot",
    "Cell",
    "CellType",
    "Direction",
    "DirectionController",
    "Food",
    "FoodManager",
    "GameConfig",
    "GameEngine",
    "Grid",
    "InvalidConfiguration",
    "NoSpaceAvailable",
    "RoundState",
    "TickOutcome",
    "WrapsnakeError",
]
