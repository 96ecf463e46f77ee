import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Optional

from dotenv import load_dotenv

from wrapsnake.body import START_LENGTH
from wrapsnake.errors import InvalidConfiguration

logger = logging.getLogger(__name__)

ENV_PREFIX = "WRAPSNAKE_"

# Field name -> environment variable (without prefix).
ENV_VARS = {
    "width": "WIDTH",
    "height": "HEIGHT",
    "tick_interval_ms": "TICK_MS",
    "food_spawn_interval_ms": "SPAWN_MS",
    "food_ttl_ms": "FOOD_TTL_MS",
    "food_expiry_check_ms": "EXPIRY_CHECK_MS",
    "seed": "SEED",
    "log_level": "LOG_LEVEL",
}

POSITIVE_INT_FIELDS = (
    "width",
    "height",
    "tick_interval_ms",
    "food_spawn_interval_ms",
    "food_ttl_ms",
    "food_expiry_check_ms",
)


@dataclass(frozen=True)
class GameConfig:
    """Grid size and timer cadences. Validated on construction."""

    width: int = 25
    height: int = 25
    tick_interval_ms: int = 500
    food_spawn_interval_ms: int = 3000
    food_ttl_ms: int = 10000
    food_expiry_check_ms: int = 1000
    seed: Optional[int] = None
    log_level: str = "INFO"

    def __post_init__(self):
        self.validate()

    def validate(self):
        for name in POSITIVE_INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise InvalidConfiguration(f"{name} must be positive, got {value}")

        if self.width < START_LENGTH:
            raise InvalidConfiguration(
                f"width must be at least {START_LENGTH} to fit the starting snake, got {self.width}"
            )
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise InvalidConfiguration(f"seed must be an integer, got {self.seed!r}")
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise InvalidConfiguration(f"unknown log level {self.log_level!r}")

    def with_overrides(self, **overrides):
        """Copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)

    @classmethod
    def from_env(cls, env_file=None, **overrides):
        """Build a config from WRAPSNAKE_* variables, then apply overrides.

        A .env file is loaded first if present; variables already set in the
        process environment win over it.
        """
        load_dotenv(env_file)

        values = {}
        for field in fields(cls):
            raw = os.getenv(ENV_PREFIX + ENV_VARS[field.name])
            if raw is None or raw.strip() == "":
                continue
            if field.name == "log_level":
                values[field.name] = raw.strip().upper()
            else:
                values[field.name] = _parse_int(ENV_PREFIX + ENV_VARS[field.name], raw)

        config = cls(**values).with_overrides(**overrides)
        logger.debug("Loaded config: %s", config)
        return config


def _parse_int(name, raw):
    try:
        return int(raw.strip())
    except ValueError:
        raise InvalidConfiguration(f"{name} must be an integer, got {raw!r}") from None
