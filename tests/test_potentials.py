import numpy as np
import pytest

from qqevol import envelopes
from qqevol.potentials import PotentialStep, update_potential, update_potential2

WL = [0.0, 1.0e-3, 2.5e-3]
WR = [[1.0, 0.5, 0.2], [0.5, -1.0, 0.3], [0.2, 0.3, 0.4]]
ZERO = (0.0, 0.0, 0.0)


def test_off_envelope_gives_zero_matrices():
    step = update_potential({"w1": 1.0}, 3, 0.0, 1e-9, WL, WR, envelopes.off, ZERO)
    assert isinstance(step, PotentialStep)
    assert step.matrices.shape == (3, 3, 3)
    assert np.all(step.matrices == 0)
    assert step.env == ZERO


def test_matrices_are_anti_hermitian():
    params = {"w1": 3.0e9, "F1": 2.0}
    step = update_potential(params, 3, 1.0e-9, 2.0e-10, WL, WR, envelopes.constant, ZERO)
    for matrix in step.matrices:
        assert np.allclose(matrix + matrix.conj().T, 0.0)


def test_diagonal_at_time_zero():
    params = {"w1": 5.0, "F1": 2.0}
    step = update_potential(params, 3, 0.0, 0.0, WL, WR, envelopes.constant, ZERO)
    assert step.matrices[0, 0, 0] == pytest.approx(-2j)
    assert step.matrices[0, 1, 1] == pytest.approx(2j)


def test_envelope_evaluated_at_three_instants():
    params = {"w1": 0.0, "F1": 1.0, "t1": 0.4, "t2": 0.6}
    step = update_potential(params, 3, 0.0, 1.0, WL, WR, envelopes.impulse, ZERO)
    assert step.env == (0.0, 1.0, 0.0)
    assert np.all(step.matrices[0] == 0)
    assert np.all(step.matrices[2] == 0)
    assert np.any(step.matrices[1] != 0)


def test_dimension_truncates_levels():
    params = {"w1": 0.0, "F1": 1.0}
    step = update_potential(params, 2, 0.0, 1e-9, WL, WR, envelopes.constant, ZERO)
    assert step.matrices.shape == (3, 2, 2)


def test_missing_frequency_raises():
    with pytest.raises(KeyError):
        update_potential({"F1": 1.0}, 3, 0.0, 1e-9, WL, WR, envelopes.constant, ZERO)


def test_potential2_is_sum_of_two_drives():
    params = {
        "w1": 2.0e9, "w2": 2.0e9,
        "F1": 1.5, "t1": 1.0e-9, "sigma1": 1.0e-3,
        "F2": 0.5, "t2": 2.0e-9, "sigma2": 2.0e-3,
    }
    t, dt = 1.0e-9, 5.0e-10
    step = update_potential2(params, 3, t, dt, WL, WR, envelopes.double_gauss, ZERO)
    first = update_potential(
        {"w1": 2.0e9, "F1": 1.5, "t1": 1.0e-9, "sigma1": 1.0e-3}, 3, t, dt, WL, WR, envelopes.gauss, ZERO
    )
    second = update_potential(
        {"w1": 2.0e9, "F1": 0.5, "t1": 2.0e-9, "sigma1": 2.0e-3}, 3, t, dt, WL, WR, envelopes.gauss, ZERO
    )
    assert np.allclose(step.matrices, first.matrices + second.matrices)
    assert step.env[:2] == pytest.approx(first.env[:2])
    assert step.env[2] == pytest.approx(first.env[2] + second.env[2])
    assert step.env2 == pytest.approx(second.env)


def test_potential2_needs_second_frequency():
    params = {"w1": 1.0, "F1": 1.0, "t1": 0.0, "sigma1": 1.0, "F2": 1.0, "t2": 0.0, "sigma2": 1.0}
    with pytest.raises(KeyError):
        update_potential2(params, 3, 0.0, 1.0, WL, WR, envelopes.double_gauss, ZERO)