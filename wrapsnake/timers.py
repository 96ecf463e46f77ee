import logging

import pygame

from wrapsnake.controls import dispatch_key

logger = logging.getLogger(__name__)

MOVE_EVENT = pygame.USEREVENT + 1
SPAWN_EVENT = pygame.USEREVENT + 2
EXPIRE_EVENT = pygame.USEREVENT + 3


class EngineSubscriptions:
    """The three periodic timers and the key listener driving one engine.

    All four are attached by open() and released together by close(). Once
    closed, any timer or key event still sitting in the pygame queue is
    ignored.
    """

    def __init__(self, engine, config, set_timer=None):
        self.engine = engine
        self.config = config
        self.set_timer = set_timer if set_timer is not None else pygame.time.set_timer
        self.listening = False
        self._handlers = {
            MOVE_EVENT: self._on_move,
            SPAWN_EVENT: self._on_spawn,
            EXPIRE_EVENT: self._on_expire,
        }

    @property
    def intervals(self):
        return {
            MOVE_EVENT: self.config.tick_interval_ms,
            SPAWN_EVENT: self.config.food_spawn_interval_ms,
            EXPIRE_EVENT: self.config.food_expiry_check_ms,
        }

    def open(self):
        if self.listening:
            return self
        for event_type, interval_ms in self.intervals.items():
            self.set_timer(event_type, interval_ms)
        self.listening = True
        logger.debug("Timers started: %s", self.intervals)
        return self

    def close(self):
        if not self.listening:
            return
        for event_type in self.intervals:
            self.set_timer(event_type, 0)
        self.listening = False
        logger.debug("Timers cancelled and key listener detached")

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def handle(self, event):
        """Route one pygame event. Returns whether the game state changed."""
        if not self.listening:
            return False
        if event.type == pygame.KEYDOWN:
            return dispatch_key(self.engine, event.key)
        handler = self._handlers.get(event.type)
        if handler is None:
            return False
        return handler()

    def _on_move(self):
        self.engine.apply_tick()
        return True

    def _on_spawn(self):
        return self.engine.tick_spawn() is not None

    def _on_expire(self):
        return self.engine.tick_expire() is not None
