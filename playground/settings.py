"""
Control ranges and defaults for the playground.

The sliders in ``app.py`` are built from these ranges, and
:meth:`ModelParameters.from_controls` clamps incoming values into them so the
fit engine only ever sees in-contract input.
"""

from dataclasses import dataclass
from typing import NamedTuple

from .data import DOMAIN
from .regularization import RegularizationKind, make_penalty


class SliderRange(NamedTuple):
    min: float
    max: float
    step: float
    default: float

    def clamp(self, value):
        return min(max(value, self.min), self.max)


COMPLEXITY = SliderRange(1, 20, 1, 10)
NOISE = SliderRange(0.0, 1.0, 0.05, 0.5)
STRENGTH = SliderRange(0.0, 10.0, 0.1, 0.0)

DEFAULT_KIND = RegularizationKind.NONE
DEFAULT_SEED = 1
N_TRAINING_POINTS = 30
CURVE_STEPS = 100
PLOT_DOMAIN = DOMAIN


@dataclass(frozen=True)
class ModelParameters:
    complexity: int = COMPLEXITY.default
    kind: RegularizationKind = DEFAULT_KIND
    strength: float = STRENGTH.default
    noise_level: float = NOISE.default

    @classmethod
    def from_controls(cls, complexity, kind, strength, noise_level):
        """Normalize raw control values, clamping each into its slider range."""
        return cls(
            complexity=int(COMPLEXITY.clamp(round(complexity))),
            kind=RegularizationKind.parse(kind),
            strength=float(STRENGTH.clamp(strength)),
            noise_level=float(NOISE.clamp(noise_level)),
        )

    @property
    def penalty(self):
        return make_penalty(self.kind, self.strength)
