import casadi as ca
import numpy as np
import pytest
from hypothesis import given, settings

from pyrot import Rotation2, Rotation3, UnitComplex
from pyrot.testing.strategies import real_numbers, rotation2s

tol = 1e-10  # tolerance


def check_rotation(R):
    M = R.matrix.full()
    assert np.allclose(M @ M.T, np.eye(2), atol=1e-6)
    assert abs(np.linalg.det(M) - 1) < 1e-6


def test_new():
    R = Rotation2.new(0.3)
    check_rotation(R)
    c = np.cos(0.3)
    s = np.sin(0.3)
    assert ca.norm_fro(R.matrix - ca.DM([[c, -s], [s, c]])) < tol


@pytest.mark.parametrize('theta', [-3.0, -1.2, 0.0, 0.5, 2.0, np.pi])
def test_angle_round_trip(theta):
    assert abs(Rotation2.new(theta).angle() - theta) < tol


def test_angle_wraps():
    assert abs(Rotation2.new(2 * np.pi + 0.1).angle() - 0.1) < tol


def test_scaled_axis():
    R = Rotation2.from_scaled_axis([0.7])
    assert abs(R.angle() - 0.7) < tol
    assert R.scaled_axis().shape == (1, 1)
    assert abs(float(R.scaled_axis()[0]) - 0.7) < tol


def test_rotation_between():
    R = Rotation2.rotation_between([2, 0], [0, 3])
    check_rotation(R)
    assert abs(R.angle() - np.pi / 2) < tol
    v = R * [1, 1]
    assert ca.norm_2(v - ca.DM([-1, 1])) < tol


def test_scaled_rotation_between():
    R = Rotation2.scaled_rotation_between([1, 0], [0, 1], 0.5)
    assert abs(R.angle() - np.pi / 4) < tol


def test_rotation_between_zero_length():
    R = Rotation2.rotation_between([0, 0], [0, 1])
    assert np.array_equal(R.matrix.full(), np.eye(2))


def test_rotation_to():
    R1 = Rotation2.new(0.4)
    R2 = Rotation2.new(-1.3)
    assert ca.norm_fro((R1.rotation_to(R2) * R1).matrix - R2.matrix) < tol
    assert abs(R1.angle_to(R2) - (-1.7)) < tol


def test_inverse():
    R = Rotation2.new(1.1)
    assert ca.norm_fro((R * R.inverse()).matrix - ca.DM.eye(2)) < tol
    assert ca.norm_fro(R.inverse().matrix - R.matrix.T) < tol


def test_powf():
    R = Rotation2.new(0.9)
    assert abs(R.powf(0.5).angle() - 0.45) < tol
    assert abs(R.powf(-2).angle() - (-1.8)) < tol
    assert ca.norm_fro(R.powf(0.5).powf(3).matrix - R.powf(1.5).matrix) < tol


def test_unit_complex():
    R = Rotation2.new(0.25)
    c = R.to_unit_complex()
    assert isinstance(c, UnitComplex)
    assert abs(c.angle() - 0.25) < tol
    assert ca.norm_fro(Rotation2.from_unit_complex(c).matrix - R.matrix) < tol


def test_rand():
    rng = np.random.default_rng(0)
    for i in range(10):
        R = Rotation2.rand(rng)
        check_rotation(R)
        assert 0 <= R.angle() < 1


def test_transform_vector():
    R = Rotation2.new(np.pi / 2)
    assert ca.norm_2(R.transform_vector([1, 0]) - ca.DM([0, 1])) < tol
    assert ca.norm_2(R.inverse_transform_vector([0, 1]) - ca.DM([1, 0])) < tol


def test_mixed_dimensions():
    with pytest.raises(AssertionError):
        Rotation2.new(0.1) * Rotation3.identity()
    with pytest.raises(AssertionError):
        Rotation2.new(0.1) * [1, 2, 3]


@settings(deadline=None)
@given(rotation2s())
def test_orthogonal_arbitrary(R):
    check_rotation(R)


@settings(deadline=None)
@given(real_numbers(-np.pi, np.pi, exclude_min=True))
def test_angle_round_trip_arbitrary(theta):
    assert abs(Rotation2.new(theta).angle() - theta) < 1e-9


@settings(deadline=None)
@given(real_numbers(-np.pi, np.pi), real_numbers(-1, 1), real_numbers(-1, 1))
def test_powf_composition_arbitrary(theta, a, b):
    # |theta * a| stays in [-pi, pi] so the angle does not wrap
    R = Rotation2.new(theta)
    assert ca.norm_fro(R.powf(a).powf(b).matrix - R.powf(a * b).matrix) < 1e-9


@settings(deadline=None)
@given(rotation2s(), rotation2s())
def test_rotation_to_arbitrary(R1, R2):
    assert ca.norm_fro((R1.rotation_to(R2) * R1).matrix - R2.matrix) < 1e-9
