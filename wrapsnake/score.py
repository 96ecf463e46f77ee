class ScoreTracker:
    """Points for the current round. Only ever goes up by one, or back to zero."""

    def __init__(self):
        self._value = 0

    @property
    def value(self):
        return self._value

    def increment(self):
        self._value += 1
        return self._value

    def reset(self):
        self._value = 0
