import numpy as np
import pytest

from pyso3.so3 import rep
from pyso3.so3.rep import AngleAxis, AxisAngle, Dcm, Euler, Quat, RotationVector


def test_traits():
    t = rep.traits(Dcm)
    assert t.data_type is np.ndarray
    assert t.group_shape == (3, 3)
    assert t.dtype == np.float64
    assert not t.is_coordinates

    assert rep.traits(AxisAngle, np.float32).data_type is AngleAxis
    assert rep.traits(AxisAngle, np.float32).dtype == np.float32
    assert rep.traits(Quat).group_params == 4
    assert rep.traits(RotationVector).is_coordinates


def test_coordinates_flag():
    assert [rep.is_coordinates(r) for r in rep.REPRESENTATIONS] == [False, False, False, True]


def test_canonical():
    assert rep.CANONICAL is Dcm


def test_euler_slot():
    with pytest.raises(KeyError):
        rep.traits(Euler)


def test_tags_are_not_instantiated():
    with pytest.raises(TypeError):
        Quat()


def test_scalar_type():
    assert rep.scalar_type(None) == np.float64
    assert rep.scalar_type(np.float32) == np.float32
    with pytest.raises(AssertionError):
        rep.scalar_type(np.int64)


def test_dummy_precision():
    assert rep.dummy_precision(np.float64) == 1e-12
    assert rep.dummy_precision(np.float32) == 1e-5
