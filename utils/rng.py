"""Uniform random integer providers."""

import random
import threading


class SystemRandomSource:
    """Draws from os.urandom via random.SystemRandom. Holds no state between calls."""

    def __init__(self):
        self._rng = random.SystemRandom()

    def uniform(self, low, high):
        """Random integer in [low, high], both inclusive."""
        return self._rng.randint(low, high)

    def __repr__(self):
        return "SystemRandomSource()"


class SeededRandomSource:
    """Reproducible source for tests and replays."""

    def __init__(self, seed=None):
        self.seed = seed
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def uniform(self, low, high):
        # random.Random is not safe to advance from several threads at once
        with self._lock:
            return self._rng.randint(low, high)

    def __repr__(self):
        return f"SeededRandomSource(seed={self.seed!r})"


SYSTEM_RANDOM = SystemRandomSource()
