import warnings
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict

import numpy as np
from sklearn.linear_model import LinearRegression

from .data import true_function
from .exceptions import DegenerateFitWarning
from .regularization import NoPenalty, RegularizationKind

OVERFIT_COMPLEXITY = 5
WIGGLE_AMPLITUDE_SCALE = 0.7


class Regime(str, Enum):
    UNDERFIT = "underfit"
    GOOD_FIT = "good_fit"
    OVERFIT = "overfit"
    L1 = "l1"
    L2 = "l2"


DESCRIPTIONS = {
    Regime.UNDERFIT: (
        "Underfitting: The model is too simple (a straight line) and cannot capture "
        "the underlying curved trend in the data, resulting in high error on both "
        "training and new data."
    ),
    Regime.GOOD_FIT: (
        "Good Fit: The model complexity is appropriate for the data. It captures the "
        "underlying trend without fitting the noise, achieving good generalization."
    ),
    Regime.OVERFIT: (
        "Overfitting: The model is overly complex. It learns the noise in the training "
        "data, not just the signal. This model will perform poorly on new, unseen data "
        "because it has memorized the training set's quirks."
    ),
    Regime.L1: (
        "L1 Regularization (Lasso) is applied. It penalizes the absolute size of "
        "coefficients. Notice how it can shrink the 'wiggles' (analogous to "
        "coefficients) to exactly zero, simplifying the model and performing feature "
        "selection."
    ),
    Regime.L2: (
        "L2 Regularization (Ridge) is applied. It penalizes the squared size of "
        "coefficients. It shrinks the 'wiggles' towards zero but rarely makes them "
        "exactly zero, preventing any single feature from dominating."
    ),
}

LOW_COMPLEXITY_NOTE = (
    " With a low-complexity model, regularization has a smaller effect but still "
    "helps prevent overfitting."
)
HIGH_COMPLEXITY_NOTE = (
    " The regularization penalty effectively smooths the overfitted curve, leading "
    "to better generalization on unseen data."
)


@dataclass(frozen=True)
class FittedModel:
    name: str
    evaluate: Callable[[Any], Any]
    description: str
    regime: Regime
    complexity: int
    penalty: Any = field(default_factory=NoPenalty)
    params: Dict[str, Any] = field(default_factory=dict)

    def __call__(self, x):
        return self.evaluate(x)


def classify(complexity, penalty):
    """
    Decision table for the fit regime.

    A penalty with zero strength reports OVERFIT for every complexity above 1,
    even where the unpenalized model at the same complexity would be a good fit.
    """
    if complexity <= 1:
        return Regime.UNDERFIT
    if penalty.kind is RegularizationKind.NONE:
        return Regime.OVERFIT if complexity > OVERFIT_COMPLEXITY else Regime.GOOD_FIT
    if not penalty.is_active:
        return Regime.OVERFIT
    return Regime.L1 if penalty.kind is RegularizationKind.L1 else Regime.L2


def describe(complexity, penalty):
    regime = classify(complexity, penalty)
    text = DESCRIPTIONS[regime]
    if regime in (Regime.L1, Regime.L2):
        text += LOW_COMPLEXITY_NOTE if complexity <= OVERFIT_COMPLEXITY else HIGH_COMPLEXITY_NOTE
    return regime, text


def fit_line(training_set):
    """
    Ordinary least-squares line through the training set.

    Returns (slope, intercept). When every x is identical the slope is
    undefined, so the flat line through mean(y) is returned with a
    DegenerateFitWarning.
    """
    x = np.asarray(training_set.x, dtype=float)
    y = np.asarray(training_set.y, dtype=float)
    if len(x) == 0 or np.ptp(x) == 0:
        warnings.warn(
            "least-squares slope is undefined for coincident x-values; using a flat line",
            DegenerateFitWarning,
            stacklevel=2,
        )
        return 0.0, float(np.mean(y)) if len(y) else 0.0

    reg = LinearRegression()
    reg.fit(x.reshape(-1, 1), y)
    return float(reg.coef_[0]), float(reg.intercept_)


def _line_model(slope, intercept):
    def evaluate(x):
        return slope * np.asarray(x, dtype=float) + intercept
    return evaluate


def _wiggle_model(amplitude, complexity, penalty):
    def evaluate(x):
        x = np.asarray(x, dtype=float)
        # High-frequency term standing in for the coefficients of a high-degree fit
        wiggle = amplitude * np.sin(x * np.pi * complexity / 2)
        return true_function(x) + penalty.shrink(wiggle)
    return evaluate


def fit_model(training_set, complexity, penalty=None, noise_level=None):
    """
    Build the fitted curve and its explanation for the current controls.

    Parameters:
    -----------
    training_set : TrainingSet
        Data the underfit line is fitted to.
    complexity : int
        1 gives the straight line; anything higher gives the wiggly model.
    penalty : NoPenalty | L1Penalty | L2Penalty
        Regularization applied to the wiggle term. Defaults to no penalty.
    noise_level : float
        Scales the wiggle amplitude. Defaults to the level the training set
        was generated with.

    Returns:
    --------
    FittedModel
    """
    if penalty is None:
        penalty = NoPenalty()
    if noise_level is None:
        noise_level = training_set.noise_level

    regime, description = describe(complexity, penalty)

    if complexity <= 1:
        slope, intercept = fit_line(training_set)
        return FittedModel(
            name="Linear (least squares)",
            evaluate=_line_model(slope, intercept),
            description=description,
            regime=regime,
            complexity=int(complexity),
            penalty=penalty,
            params={"slope": slope, "intercept": intercept},
        )

    amplitude = noise_level * WIGGLE_AMPLITUDE_SCALE
    name = f"Complexity {int(complexity)}"
    if penalty.kind is not RegularizationKind.NONE:
        name += f" + {penalty.kind.label}"
    return FittedModel(
        name=name,
        evaluate=_wiggle_model(amplitude, complexity, penalty),
        description=description,
        regime=regime,
        complexity=int(complexity),
        penalty=penalty,
        params={
            "amplitude": amplitude,
            "frequency": complexity / 4,
            "strength": penalty.strength,
        },
    )
