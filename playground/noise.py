import math

import numpy as np


class SeededNoise:
    """
    Reproducible pseudo-random samples in [0, 1) from an integer seed.

    Each draw takes the fractional part of ``sin(seed) * 10000`` and then
    advances the seed by one. This is a chaotic map good enough for visual
    jitter; it makes no uniformity guarantees beyond that.
    """

    def __init__(self, seed=0):
        self.start = int(seed)
        self.seed = self.start

    def __iter__(self):
        return self

    def __next__(self):
        value = math.sin(self.seed) * 10000
        self.seed += 1
        return value - math.floor(value)

    def draw(self, n):
        """Return the next ``n`` samples as a float array."""
        return np.array([next(self) for _ in range(n)], dtype=float)

    def reset(self):
        self.seed = self.start
