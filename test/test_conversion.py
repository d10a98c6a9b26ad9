import itertools

import numpy as np
import pytest

from pyso3.so3 import axis_angle
from pyso3.so3 import operations as ops
from pyso3.so3.rep import (
    REPRESENTATIONS,
    AngleAxis,
    AxisAngle,
    Dcm,
    Euler,
    Quat,
    RotationVector,
)

tol = 1e-9

Rz90 = np.array([[0, -1, 0], [1, 0, 0], [0, 0, 1]], dtype=float)

pairs = list(itertools.product(REPRESENTATIONS, REPRESENTATIONS))


def pair_id(p):
    return p.__name__


@pytest.mark.parametrize("rep_from, rep_to", pairs, ids=pair_id)
def test_round_trip(rep_from, rep_to):
    for seed in range(10):
        x = ops.random(rep_from, random_state=seed)
        y = ops.convert(rep_to, rep_from, ops.convert(rep_from, rep_to, x))
        assert ops.is_approx(rep_from, x, rep_from, y, tol)


@pytest.mark.parametrize("rep_from, rep_to", pairs, ids=pair_id)
def test_same_canonical_value(rep_from, rep_to):
    x = ops.random(rep_from, random_state=3)
    y = ops.convert(rep_from, rep_to, x)
    assert np.linalg.norm(ops.to_canonical(rep_from, x) - ops.to_canonical(rep_to, y)) < tol


@pytest.mark.parametrize("rep_from, rep_to", pairs, ids=pair_id)
def test_dtype_preserved(rep_from, rep_to):
    x = ops.random(rep_from, np.float32, random_state=5)
    assert x.dtype == np.float32
    assert ops.convert(rep_from, rep_to, x).dtype == np.float32


def test_passthrough():
    for rep in REPRESENTATIONS:
        x = ops.random(rep, random_state=1)
        assert ops.convert(rep, rep, x) is x
    R = ops.random(Dcm, random_state=1)
    assert ops.to_canonical(Dcm, R) is R
    assert ops.from_canonical(Dcm, R) is R


def test_conversion_table():
    table = {
        Dcm: [0, 1, 1, 1],
        RotationVector: [1, 0, 1, 2],
        AxisAngle: [1, 1, 0, 1],
        Quat: [1, 2, 1, 0],
    }
    order = [Dcm, RotationVector, AxisAngle, Quat]
    for rep_from, row in table.items():
        assert [ops.conversion_path(rep_from, rep_to) for rep_to in order] == row


def test_euler_unregistered():
    with pytest.raises(KeyError):
        ops.convert(Euler, Dcm, np.zeros(3))
    with pytest.raises(KeyError):
        ops.convert(Dcm, Euler, np.eye(3))
    with pytest.raises(KeyError):
        ops.conversion_path(Euler, Quat)


def test_register_shortcut_checks():
    with pytest.raises(AssertionError):
        ops.register_shortcut(Quat, Quat, lambda q: q)
    with pytest.raises(AssertionError):
        ops.register_shortcut(Dcm, Quat, lambda R: R)


def test_z90():
    aa = ops.convert(Dcm, AxisAngle, Rz90)
    assert np.linalg.norm(aa.axis - [0, 0, 1]) < tol
    assert abs(aa.angle - np.pi / 2) < tol
    R = ops.convert(RotationVector, Dcm, np.array([0, 0, np.pi / 2]))
    assert np.linalg.norm(R - Rz90) < tol


def test_zero_axis_angle():
    aa = AngleAxis(np.array([1.0, 0, 0]), np.float64(0))
    v = ops.convert(AxisAngle, RotationVector, aa)
    assert np.array_equal(v, np.zeros(3))
    back = ops.convert(RotationVector, AxisAngle, v)
    assert back.angle == 0
    assert np.array_equal(back.axis, [1, 0, 0])


def test_zero_rotation_vector_default_axis():
    aa = axis_angle.from_rotation_vector(np.zeros(3, dtype=np.float32))
    assert aa.angle == 0
    assert np.array_equal(aa.axis, [1, 0, 0])
    assert aa.dtype == np.float32


def test_rotation_vector_to_quat():
    assert ops.conversion_path(RotationVector, Quat) == 2
    q = ops.convert(RotationVector, Quat, np.array([0, 0, np.pi / 2]))
    assert np.linalg.norm(q - [np.cos(np.pi / 4), 0, 0, np.sin(np.pi / 4)]) < tol
    v = ops.convert(Quat, RotationVector, q)
    assert np.linalg.norm(v - [0, 0, np.pi / 2]) < tol


def test_axis_angle_quat_shortcut():
    axis = np.array([2.0, -1.0, 2.0]) / 3
    aa = AngleAxis(axis, np.float64(0.8))
    q = ops.convert(AxisAngle, Quat, aa)
    assert np.linalg.norm(q - np.hstack([np.cos(0.4), np.sin(0.4) * axis])) < tol

    # the negated quaternion is the same rotation, the angle stays in [0, pi]
    back = ops.convert(Quat, AxisAngle, -q)
    assert np.linalg.norm(back.axis - axis) < tol
    assert abs(back.angle - 0.8) < tol


def test_axis_angle_negative_angle():
    aa = AngleAxis(np.array([0, 1.0, 0]), np.float64(-0.5))
    R = ops.convert(AxisAngle, Dcm, aa)
    v = ops.convert(AxisAngle, RotationVector, aa)
    assert np.linalg.norm(v - [0, -0.5, 0]) < tol
    assert np.linalg.norm(ops.convert(RotationVector, Dcm, v) - R) < tol
