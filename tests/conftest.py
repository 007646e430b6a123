import matplotlib

matplotlib.use("Agg")

import pytest

from playground import generate_training_set


@pytest.fixture
def training_set():
    return generate_training_set(30, 0.5, 1)


@pytest.fixture
def clean_set():
    return generate_training_set(30, 0.0, 1)
