import math
import pickle

import numpy as np
import pytest

from playground import (
    DataPoint,
    InvalidInputError,
    SeededNoise,
    generate_training_set,
    sample_curve,
    true_function,
)


def test_generation_is_deterministic():
    a = generate_training_set(30, 0.5, 1)
    b = generate_training_set(30, 0.5, 1)
    assert a == b
    assert np.array_equal(a.y, b.y)


def test_x_grid_is_even_partition():
    ts = generate_training_set(30, 0.5, 1)
    assert len(ts) == 30
    assert ts.x[0] == -2.0
    assert ts.x[-1] == 2.0
    expected = np.array([-2 + 4 * i / 29 for i in range(30)])
    np.testing.assert_allclose(ts.x, expected, rtol=0, atol=1e-15)


def test_new_seed_keeps_x_changes_y():
    a = generate_training_set(30, 0.5, 1)
    b = generate_training_set(30, 0.5, 2)
    assert np.array_equal(a.x, b.x)
    assert not np.array_equal(a.y, b.y)


def test_noise_is_bounded_by_level():
    ts = generate_training_set(30, 0.3, 9)
    deviation = np.abs(ts.y - true_function(ts.x))
    assert np.all(deviation <= 0.3 + 1e-12)


def test_noise_matches_generator():
    ts = generate_training_set(5, 0.4, 3)
    r = SeededNoise(3).draw(5)
    expected = true_function(ts.x) + (r - 0.5) * 0.4 * 2
    np.testing.assert_allclose(ts.y, expected)


def test_zero_noise_gives_exact_ground_truth():
    ts = generate_training_set(30, 0.0, 1)
    assert np.array_equal(ts.y, true_function(ts.x))


def test_true_function_values():
    assert true_function(1.0) == pytest.approx(1.0)
    assert true_function(0.0) == 0.0
    assert true_function(-1.0) == pytest.approx(-1.0)


def test_training_set_is_read_only():
    ts = generate_training_set(10, 0.1, 1)
    with pytest.raises(ValueError):
        ts.x[0] = 5.0


def test_training_set_iterates_points():
    ts = generate_training_set(4, 0.0, 1)
    points = ts.points
    assert len(points) == 4
    assert all(isinstance(p, DataPoint) for p in points)
    assert points[0] == DataPoint(-2.0, float(ts.y[0]))
    assert ts[-1].x == 2.0


@pytest.mark.parametrize("num_points", [0, 1, -3])
def test_too_few_points_rejected(num_points):
    with pytest.raises(InvalidInputError):
        generate_training_set(num_points, 0.5, 1)


def test_negative_noise_rejected():
    with pytest.raises(InvalidInputError):
        generate_training_set(30, -0.1, 1)


def test_sample_curve_spans_domain():
    line = sample_curve(true_function, (-2, 2), 100)
    assert len(line) == 101
    assert line.x[0] == -2.0
    assert line.x[-1] == 2.0
    assert np.all(np.diff(line.x) > 0)
    np.testing.assert_allclose(line.y, true_function(line.x))


def test_sample_curve_single_step():
    line = sample_curve(lambda x: 2 * x, (0, 1), 1)
    assert [tuple(p) for p in line] == [(0.0, 0.0), (1.0, 2.0)]


def test_sample_curve_accepts_scalar_callables():
    line = sample_curve(math.sin, (0, math.pi), 4)
    np.testing.assert_allclose(line.y, np.sin(line.x))


def test_sample_curve_broadcasts_constants():
    line = sample_curve(lambda x: 3.0, (-1, 1), 10)
    assert np.all(line.y == 3.0)
    assert len(line.y) == 11


@pytest.mark.parametrize("domain, steps", [((-2, 2), 0), ((1, 1), 10), ((2, -2), 10)])
def test_sample_curve_rejects_bad_input(domain, steps):
    with pytest.raises(InvalidInputError):
        sample_curve(true_function, domain, steps)


def test_sample_curve_accepts_branching_scalar_callables():
    line = sample_curve(lambda x: 1.0 if x > 0 else 0.0, (-2, 2), 4)
    assert list(line.y) == [0.0, 0.0, 0.0, 1.0, 1.0]
    relu = sample_curve(lambda x: max(x, 0.0), (-1, 1), 2)
    assert list(relu.y) == [0.0, 0.0, 1.0]


def test_unpickled_training_set_stays_read_only():
    ts = pickle.loads(pickle.dumps(generate_training_set(30, 0.5, 1)))
    assert not ts.x.flags.writeable
    assert not ts.y.flags.writeable
    assert ts == generate_training_set(30, 0.5, 1)
    with pytest.raises(ValueError):
        ts.y[0] = 0.0


def test_unpickled_plot_line_stays_read_only():
    line = pickle.loads(pickle.dumps(sample_curve(true_function)))
    assert not line.x.flags.writeable
    assert len(line) == 101
