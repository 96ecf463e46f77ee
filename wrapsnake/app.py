import argparse
import logging
import sys

import pygame

from wrapsnake.config import GameConfig
from wrapsnake.controls import QUIT_KEYS
from wrapsnake.engine import GameEngine
from wrapsnake.errors import InvalidConfiguration
from wrapsnake.render import Renderer, window_size
from wrapsnake.timers import EngineSubscriptions

logger = logging.getLogger(__name__)

FRAME_RATE = 30


def build_parser():
    parser = argparse.ArgumentParser(
        prog="wrapsnake",
        description="Snake on a wrap-around grid. Arrow keys or WASD to steer, Esc to quit.",
    )
    parser.add_argument("--width", type=int, help="Grid width in cells (default: 25)")
    parser.add_argument("--height", type=int, help="Grid height in cells (default: 25)")
    parser.add_argument("--tick-ms", dest="tick_interval_ms", type=int, help="Movement interval in ms (default: 500)")
    parser.add_argument("--spawn-ms", dest="food_spawn_interval_ms", type=int, help="Food spawn interval in ms (default: 3000)")
    parser.add_argument("--food-ttl-ms", dest="food_ttl_ms", type=int, help="Food lifetime in ms (default: 10000)")
    parser.add_argument("--seed", type=int, help="Random seed for food placement")
    parser.add_argument("--log-level", dest="log_level", type=str.upper, help="Logging level (default: INFO)")
    return parser


def load_config(argv=None):
    """Read WRAPSNAKE_* settings from the environment, then apply CLI flags."""
    args = build_parser().parse_args(argv)
    return GameConfig.from_env(**vars(args))


def should_quit(event):
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key in QUIT_KEYS


def run(config):
    """Open the window and play until the window is closed or Esc is pressed."""
    pygame.init()
    try:
        pygame.display.set_caption("Wrap Snake")
        screen = pygame.display.set_mode(window_size(config.width, config.height))
        frame_clock = pygame.time.Clock()
        renderer = Renderer(screen)

        engine = GameEngine(config, clock=pygame.time.get_ticks)
        snapshot = engine.snapshot()
        dirty = True

        with EngineSubscriptions(engine, config) as subscriptions:
            running = True
            while running:
                for event in pygame.event.get():
                    if should_quit(event):
                        running = False
                        break
                    if subscriptions.handle(event):
                        dirty = True

                if dirty:
                    snapshot = engine.snapshot()
                    renderer.draw(snapshot)
                    pygame.display.flip()
                    dirty = False

                frame_clock.tick(FRAME_RATE)

        logger.info(
            "Stopped after %d finished rounds, current score %d",
            engine.rounds_played,
            snapshot.score,
        )
    finally:
        pygame.quit()


def main(argv=None):
    try:
        config = load_config(argv)
    except InvalidConfiguration as e:
        logging.basicConfig(level=logging.ERROR, format="%(levelname)s %(name)s: %(message)s")
        logger.error("Invalid configuration: %s", e)
        return 2

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(
        "Starting %dx%d grid, tick=%dms spawn=%dms ttl=%dms",
        config.width,
        config.height,
        config.tick_interval_ms,
        config.food_spawn_interval_ms,
        config.food_ttl_ms,
    )
    run(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
