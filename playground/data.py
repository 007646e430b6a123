from dataclasses import dataclass
from typing import Callable, NamedTuple, Tuple

import numpy as np

from .exceptions import InvalidInputError
from .noise import SeededNoise

DOMAIN = (-2.0, 2.0)


class DataPoint(NamedTuple):
    x: float
    y: float


def _frozen(values):
    arr = np.array(values, dtype=float)
    arr.setflags(write=False)
    return arr


class _PointSequence:
    """Shared sequence protocol for paired x/y arrays."""

    def __len__(self):
        return len(self.x)

    def __iter__(self):
        for x, y in zip(self.x, self.y):
            yield DataPoint(float(x), float(y))

    def __getitem__(self, idx):
        return DataPoint(float(self.x[idx]), float(self.y[idx]))

    @property
    def points(self):
        return list(self)

    def __setstate__(self, state):
        # unpickling skips __post_init__, so freeze the arrays again
        for name, value in state.items():
            if name in ("x", "y"):
                value = _frozen(value)
            object.__setattr__(self, name, value)


@dataclass(frozen=True, eq=False)
class TrainingSet(_PointSequence):
    """Noisy samples of the ground truth, fixed once generated."""

    x: np.ndarray
    y: np.ndarray
    noise_level: float
    seed: int

    def __post_init__(self):
        object.__setattr__(self, "x", _frozen(self.x))
        object.__setattr__(self, "y", _frozen(self.y))
        if self.x.shape != self.y.shape:
            raise InvalidInputError(
                f"x and y lengths differ: {self.x.shape} vs {self.y.shape}"
            )

    def __eq__(self, other):
        if not isinstance(other, TrainingSet):
            return NotImplemented
        return (
            np.array_equal(self.x, other.x)
            and np.array_equal(self.y, other.y)
            and self.noise_level == other.noise_level
            and self.seed == other.seed
        )


@dataclass(frozen=True, eq=False)
class PlotLine(_PointSequence):
    """A function sampled at uniform steps, ready to draw."""

    x: np.ndarray
    y: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, "x", _frozen(self.x))
        object.__setattr__(self, "y", _frozen(self.y))


def true_function(x):
    return np.sin(np.asarray(x, dtype=float) * np.pi * 0.5)


def generate_training_set(num_points=30, noise_level=0.5, seed=1):
    """
    Sample the ground truth on an even grid over [-2, 2] and add seeded noise.

    Parameters:
    -----------
    num_points : int
        Number of samples, at least 2 so the grid has a step.
    noise_level : float
        Half-width of the uniform noise band around the true curve.
    seed : int
        Starting seed for :class:`SeededNoise`; the same seed always gives
        the same set.

    Returns:
    --------
    TrainingSet
    """
    num_points = int(num_points)
    if num_points < 2:
        raise InvalidInputError(f"need at least 2 points, got {num_points}")
    if noise_level < 0:
        raise InvalidInputError(f"noise level must be >= 0, got {noise_level}")

    lo, hi = DOMAIN
    x = lo + (hi - lo) * np.arange(num_points) / (num_points - 1)
    noise = (SeededNoise(seed).draw(num_points) - 0.5) * noise_level * 2
    y = true_function(x) + noise
    return TrainingSet(x=x, y=y, noise_level=float(noise_level), seed=int(seed))


def sample_curve(fn: Callable, domain: Tuple[float, float] = DOMAIN, steps: int = 100) -> PlotLine:
    """Evaluate ``fn`` at ``steps + 1`` evenly spaced points spanning ``domain``."""
    lo, hi = domain
    if steps < 1:
        raise InvalidInputError(f"steps must be >= 1, got {steps}")
    if not hi > lo:
        raise InvalidInputError(f"empty domain [{lo}, {hi}]")

    step_size = (hi - lo) / steps
    x = lo + np.arange(steps + 1) * step_size
    # Pin the right edge so rounding never leaves it short of hi.
    x[-1] = hi
    try:
        y = np.asarray(fn(x), dtype=float)
    except (TypeError, ValueError):
        # scalar-only callables such as math.sin or ones that branch on x
        y = np.vectorize(fn, otypes=[float])(x)
    if y.shape != x.shape:
        y = np.broadcast_to(y, x.shape)
    return PlotLine(x=x, y=y)
