class WrapsnakeError(Exception):
    """Base class for errors raised by the game engine."""


class InvalidConfiguration(WrapsnakeError, ValueError):
    """A configuration value is missing, malformed or out of range."""


class NoSpaceAvailable(WrapsnakeError):
    """Every grid cell is blocked, so no food can be placed."""
