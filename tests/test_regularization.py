import numpy as np
import pytest

from playground import (
    InvalidInputError,
    L1Penalty,
    L2Penalty,
    NoPenalty,
    RegularizationKind,
    make_penalty,
)


@pytest.mark.parametrize("value, expected", [
    ("none", RegularizationKind.NONE),
    ("L1", RegularizationKind.L1),
    (" l2 ", RegularizationKind.L2),
    ("Lasso", RegularizationKind.L1),
    ("ridge", RegularizationKind.L2),
    (RegularizationKind.L2, RegularizationKind.L2),
])
def test_parse_kind(value, expected):
    assert RegularizationKind.parse(value) is expected


@pytest.mark.parametrize("value", ["elastic", "", None, 2])
def test_parse_rejects_unknown(value):
    with pytest.raises(InvalidInputError):
        RegularizationKind.parse(value)


def test_make_penalty_builds_variants():
    assert make_penalty("none", 5.0) == NoPenalty()
    assert make_penalty("l1", 2.0) == L1Penalty(2.0)
    assert make_penalty(RegularizationKind.L2, 0.5) == L2Penalty(0.5)


def test_no_penalty_has_no_strength():
    penalty = NoPenalty()
    assert penalty.strength == 0.0
    assert not penalty.is_active
    wiggle = np.array([-0.3, 0.0, 0.2])
    assert np.array_equal(penalty.shrink(wiggle), wiggle)


def test_negative_strength_rejected():
    with pytest.raises(InvalidInputError):
        L1Penalty(-1.0)
    with pytest.raises(InvalidInputError):
        make_penalty("l2", -0.1)


def test_zero_strength_is_inactive():
    assert not L1Penalty(0.0).is_active
    assert not L2Penalty(0).is_active
    assert L2Penalty(0.1).is_active


def test_l1_soft_threshold():
    penalty = L1Penalty(2.0)  # threshold 0.1
    out = penalty.shrink(np.array([0.35, -0.35, 0.05, -0.1, 0.0]))
    np.testing.assert_allclose(out, [0.25, -0.25, 0.0, 0.0, 0.0], atol=1e-12)


def test_l1_zeroes_everything_past_max():
    penalty = L1Penalty(10.0)  # threshold 0.5
    wiggle = 0.35 * np.sin(np.linspace(-5, 5, 50))
    assert np.all(penalty.shrink(wiggle) == 0.0)


def test_l2_proportional_shrink():
    penalty = L2Penalty(10.0)
    wiggle = np.array([0.35, -0.2, 0.0])
    np.testing.assert_allclose(penalty.shrink(wiggle), wiggle / 6.0)
    assert penalty.factor == pytest.approx(1 / 6.0)


def test_l2_never_zeroes_nonzero_wiggle():
    out = L2Penalty(10.0).shrink(np.array([1e-3, -1e-3]))
    assert np.all(out != 0.0)


def test_kind_labels():
    assert RegularizationKind.L1.label == "L1 (Lasso)"
    assert NoPenalty().kind is RegularizationKind.NONE
    assert L2Penalty(1.0).kind is RegularizationKind.L2


def test_l2_shrink_applies_factor():
    penalty = L2Penalty(3.0)
    wiggle = np.array([0.4, -0.25])
    assert np.array_equal(penalty.shrink(wiggle), wiggle * penalty.factor)
    assert L2Penalty(0.0).factor == 1.0
