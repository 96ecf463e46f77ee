import enum

import pygame

from wrapsnake.direction import Direction


class Turn(enum.Enum):
    UP = Direction.UP
    DOWN = Direction.DOWN
    LEFT = Direction.LEFT
    RIGHT = Direction.RIGHT

    @property
    def direction(self):
        return self.value


KEY_TO_TURN = {
    pygame.K_UP: Turn.UP,
    pygame.K_DOWN: Turn.DOWN,
    pygame.K_LEFT: Turn.LEFT,
    pygame.K_RIGHT: Turn.RIGHT,
    pygame.K_w: Turn.UP,
    pygame.K_s: Turn.DOWN,
    pygame.K_a: Turn.LEFT,
    pygame.K_d: Turn.RIGHT,
}

QUIT_KEYS = (pygame.K_ESCAPE,)


def turn_for_key(key):
    """Map a raw pygame key code to a turn, or None for any other key."""
    return KEY_TO_TURN.get(key)


def dispatch_key(engine, key):
    """Forward one key press to the engine. Returns whether the heading changed."""
    turn = turn_for_key(key)
    if turn is None:
        return False
    return engine.request_turn(turn.direction)
