from dataclasses import dataclass

import numpy as np
from sklearn.metrics import mean_squared_error

from .data import DOMAIN, sample_curve, true_function

_N_POINTS_DENSE = 400


@dataclass(frozen=True)
class FitReport:
    training_error: float
    generalization_error: float
    irreducible_error: float
    max_deviation: float

    @property
    def generalization_gap(self):
        return self.generalization_error - self.training_error


def residuals(model, training_set):
    return np.asarray(training_set.y) - np.asarray(model(training_set.x), dtype=float)


def training_error(model, training_set):
    """MSE of the model on the points it was shown."""
    return float(mean_squared_error(training_set.y, model(training_set.x)))


def generalization_error(model, domain=DOMAIN, steps=_N_POINTS_DENSE):
    """MSE against the noise-free ground truth on a dense grid."""
    line = sample_curve(model, domain, steps)
    return float(mean_squared_error(true_function(line.x), line.y))


def irreducible_error(noise_level):
    # variance of uniform noise on [-a, a]
    return noise_level ** 2 / 3.0


def max_deviation(model, domain=DOMAIN, steps=_N_POINTS_DENSE):
    line = sample_curve(model, domain, steps)
    return float(np.max(np.abs(line.y - true_function(line.x))))


def evaluate_fit(model, training_set, domain=DOMAIN, steps=_N_POINTS_DENSE):
    return FitReport(
        training_error=training_error(model, training_set),
        generalization_error=generalization_error(model, domain, steps),
        irreducible_error=irreducible_error(training_set.noise_level),
        max_deviation=max_deviation(model, domain, steps),
    )
