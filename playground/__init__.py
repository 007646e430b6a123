from .data import (
    DOMAIN,
    DataPoint,
    PlotLine,
    TrainingSet,
    generate_training_set,
    sample_curve,
    true_function,
)
from .exceptions import DegenerateFitWarning, InvalidInputError, PlaygroundError
from .metrics import FitReport, evaluate_fit
from .models import FittedModel, Regime, fit_model
from .noise import SeededNoise
from .regularization import (
    L1Penalty,
    L2Penalty,
    NoPenalty,
    RegularizationKind,
    make_penalty,
)
from .settings import ModelParameters

__version__ = "0.1.0"
