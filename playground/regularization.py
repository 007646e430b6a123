"""
Regularization penalties as a tagged variant.

``NoPenalty`` carries no strength at all, so a strength paired with "no
regularization" cannot be expressed. ``L1Penalty`` and ``L2Penalty`` only
act on the synthetic wiggle term of the fitted curve.
"""

from dataclasses import dataclass
from enum import Enum

import numpy as np

from .exceptions import InvalidInputError

L1_THRESHOLD_SCALE = 0.05
L2_SHRINK_SCALE = 0.5


class RegularizationKind(str, Enum):
    NONE = "none"
    L1 = "l1"
    L2 = "l2"

    @property
    def label(self):
        return _LABELS[self]

    @classmethod
    def parse(cls, value):
        """Accept a member or a case-insensitive name; reject anything else."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key in _ALIASES:
                return _ALIASES[key]
        raise InvalidInputError(
            f"unknown regularization kind {value!r}; expected one of "
            + ", ".join(kind.value for kind in cls)
        )


_LABELS = {
    RegularizationKind.NONE: "None",
    RegularizationKind.L1: "L1 (Lasso)",
    RegularizationKind.L2: "L2 (Ridge)",
}

_ALIASES = {
    "none": RegularizationKind.NONE,
    "l1": RegularizationKind.L1,
    "lasso": RegularizationKind.L1,
    "l2": RegularizationKind.L2,
    "ridge": RegularizationKind.L2,
}


@dataclass(frozen=True)
class NoPenalty:
    kind = RegularizationKind.NONE
    strength = 0.0

    @property
    def is_active(self):
        return False

    def shrink(self, wiggle):
        return wiggle


@dataclass(frozen=True)
class _StrengthPenalty:
    strength: float

    def __post_init__(self):
        if self.strength < 0:
            raise InvalidInputError(
                f"regularization strength must be >= 0, got {self.strength}"
            )
        object.__setattr__(self, "strength", float(self.strength))

    @property
    def is_active(self):
        return self.strength > 0


@dataclass(frozen=True)
class L1Penalty(_StrengthPenalty):
    """Soft thresholding: small wiggles are zeroed out exactly."""

    kind = RegularizationKind.L1

    @property
    def threshold(self):
        return self.strength * L1_THRESHOLD_SCALE

    def shrink(self, wiggle):
        return np.sign(wiggle) * np.maximum(0.0, np.abs(wiggle) - self.threshold)


@dataclass(frozen=True)
class L2Penalty(_StrengthPenalty):
    """Proportional shrinkage toward zero, never exactly zero."""

    kind = RegularizationKind.L2

    @property
    def factor(self):
        return 1.0 / (1.0 + self.strength * L2_SHRINK_SCALE)

    def shrink(self, wiggle):
        return wiggle * self.factor


def make_penalty(kind, strength=0.0):
    """Build the penalty variant from a loose kind + strength pair."""
    kind = RegularizationKind.parse(kind)
    if kind is RegularizationKind.L1:
        return L1Penalty(strength)
    if kind is RegularizationKind.L2:
        return L2Penalty(strength)
    return NoPenalty()
