"""
Conversions and group operations dispatched on representation tags.

Every representation converts to and from the canonical one (the DCM). A
conversion between two other representations is the composition of the
two, unless a direct shortcut is registered for that exact pair:

    +-------+-------+-------+-------+-------+-------+
    |from\\to|  Dcm  |  Vec  |  Aa   | Quat  | Euler |
    +-------+-------+-------+-------+-------+-------+
    |  Dcm  |   0   |   1   |   1   |   1   |       |
    |  Vec  |   1   |   0   |   1   |   2   |       |
    |  Aa   |   1   |   1   |   0   |   1   |       |
    | Quat  |   1   |   2   |   1   |   0   |       |
    | Euler |       |       |       |       |       |
    +-------+-------+-------+-------+-------+-------+

    0: no conversion, the input is returned
    1: single conversion, to or from canonical, or a shortcut
    2: double conversion, from -> canonical -> to
"""
import logging

import numpy as np
from scipy.spatial.transform import Rotation

from . import axis_angle, dcm, quat, rotation_vector
from .rep import (
    CANONICAL,
    AngleAxis,
    AxisAngle,
    Dcm,
    Quat,
    RotationVector,
    data_dtype,
    dummy_precision,
    is_coordinates,
    scalar_type,
)

logger = logging.getLogger(__name__)

_modules = {
    Dcm: dcm,
    AxisAngle: axis_angle,
    Quat: quat,
    RotationVector: rotation_vector,
}

# conversions to the canonical dcm
_to_canonical = {
    AxisAngle: axis_angle.to_dcm,
    Quat: quat.to_dcm,
    RotationVector: rotation_vector.to_dcm,
}

# conversions from the canonical dcm
_from_canonical = {
    AxisAngle: axis_angle.from_dcm,
    Quat: quat.from_dcm,
    RotationVector: rotation_vector.from_dcm,
}

# (rep_from, rep_to): direct conversion
_shortcuts = {}


def module(rep):
    """
    The module holding the data operations of a representation.
    """
    return _modules[rep]


def check(rep, data):
    module(rep).check(data)


def astype(rep, data, dtype):
    """
    A copy of the data with the given scalar type.
    """
    dtype = scalar_type(dtype)
    if rep is AxisAngle:
        return AngleAxis(data.axis.astype(dtype), dtype.type(data.angle))
    module(rep)
    return np.array(data, dtype=dtype)


def register_shortcut(rep_from, rep_to, func):
    """
    Register a direct conversion replacing the path through canonical.
    """
    module(rep_from)
    module(rep_to)
    assert rep_from is not rep_to
    assert CANONICAL not in (rep_from, rep_to)
    logger.debug("conversion shortcut %s -> %s: %s", rep_from.name, rep_to.name, func.__name__)
    _shortcuts[(rep_from, rep_to)] = func


def to_canonical(rep, data):
    if rep is CANONICAL:
        return data
    return _to_canonical[rep](data)


def from_canonical(rep, data):
    if rep is CANONICAL:
        return data
    return _from_canonical[rep](data)


def convert(rep_from, rep_to, data):
    """
    Convert raw data between two representations.
    :param rep_from: tag of the data
    :param rep_to: tag of the result
    :param data: raw data
    :return: raw data in rep_to, the input itself when the tags are the same
    """
    module(rep_from)
    module(rep_to)
    if rep_from is rep_to:
        return data
    shortcut = _shortcuts.get((rep_from, rep_to))
    if shortcut is not None:
        return shortcut(data)
    return from_canonical(rep_to, to_canonical(rep_from, data))


def conversion_path(rep_from, rep_to):
    """
    The number of conversions convert performs for a pair, see the table above.
    """
    module(rep_from)
    module(rep_to)
    if rep_from is rep_to:
        return 0
    if (rep_from, rep_to) in _shortcuts or CANONICAL in (rep_from, rep_to):
        return 1
    return 2


def identity(rep, dtype=None):
    return module(rep).identity(scalar_type(dtype))


def is_identity(rep, data):
    return module(rep).is_identity(data)


def inverse(rep, data):
    return module(rep).inv(data)


def normalized(rep, data):
    """
    Project drifted data back onto the representation's constraint
    (orthonormal dcm, unit quaternion, unit axis).
    """
    return module(rep).normalized(data)


def multiply(rep_a, a, rep_b, b):
    """
    Composition a*b, b is applied first. The result is in rep_a.

    Two group representations of the same kind use their own product,
    anything else, including rotation vector times rotation vector, is
    multiplied as dcms and converted back.
    """
    if rep_a is rep_b and not is_coordinates(rep_a):
        return module(rep_a).product(a, b)
    res = module(CANONICAL).product(to_canonical(rep_a, a), to_canonical(rep_b, b))
    return from_canonical(rep_a, res)


def is_approx(rep_a, a, rep_b, b, tol=None):
    """
    Approximate equality, in the shared representation when the tags are
    the same, in the canonical one otherwise.
    """
    if tol is None:
        tol = dummy_precision(data_dtype(a))
    if rep_a is rep_b:
        return module(rep_a).is_approx(a, b, tol)
    return module(CANONICAL).is_approx(to_canonical(rep_a, a), to_canonical(rep_b, b), tol)


def random(rep, dtype=None, random_state=None):
    """
    Raw data of a rotation drawn uniformly from SO(3).
    :param random_state: seed or numpy Generator, see scipy Rotation.random
    """
    R = Rotation.random(None, random_state).as_matrix()
    return from_canonical(rep, R.astype(scalar_type(dtype)))


register_shortcut(AxisAngle, RotationVector, axis_angle.to_rotation_vector)
register_shortcut(RotationVector, AxisAngle, axis_angle.from_rotation_vector)
register_shortcut(AxisAngle, Quat, axis_angle.to_quat)
register_shortcut(Quat, AxisAngle, axis_angle.from_quat)
