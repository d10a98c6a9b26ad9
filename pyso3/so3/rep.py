"""
Representation tags and traits for SO(3).

A tag is a marker class naming an encoding of a rotation. Tags carry no
state and are never instantiated, they are only used as dispatch keys.
The traits of a tag describe the raw data it stores for a given scalar type.
"""
from collections import namedtuple

import numpy as np


class SO3Representation:
    """
    Base of all representation tags.
    """

    name = None

    def __new__(cls, *args, **kwargs):
        raise TypeError("{:s} is a representation tag".format(cls.__name__))


class Dcm(SO3Representation):
    """Direction cosine matrix, 9 parameters, no singularities."""

    name = "dcm"


class AxisAngle(SO3Representation):
    """Unit axis and angle, 4 parameters, axis undefined at zero angle."""

    name = "axis_angle"


class Quat(SO3Representation):
    """Hamilton quaternion [w, x, y, z], 4 parameters, double cover."""

    name = "quat"


class RotationVector(SO3Representation):
    """Axis scaled by angle, 3 parameters, the exponential coordinates."""

    name = "rotation_vector"


class Euler(SO3Representation):
    """Reserved slot, no traits and no conversions are registered."""

    name = "euler"


# the representation all unoptimized conversions are routed through
CANONICAL = Dcm

DEFAULT_DTYPE = np.dtype(np.float64)

REPRESENTATIONS = (Dcm, AxisAngle, Quat, RotationVector)


class AngleAxis(namedtuple("AngleAxis", ["axis", "angle"])):
    """
    Raw data of the axis-angle representation.

    axis: unit 3 vector, ignored when the angle is zero
    angle: rotation angle in radians
    """

    __slots__ = ()

    @property
    def dtype(self):
        return self.axis.dtype


RepTraits = namedtuple(
    "RepTraits",
    ["rep", "dtype", "data_type", "group_params", "group_shape", "is_coordinates"],
)

# rep: (data_type, group_params, group_shape, is_coordinates)
_traits = {
    Dcm: (np.ndarray, 9, (3, 3), False),
    AxisAngle: (AngleAxis, 4, None, False),
    Quat: (np.ndarray, 4, (4,), False),
    RotationVector: (np.ndarray, 3, (3,), True),
}


def scalar_type(dtype=None):
    """
    Validate and return the numpy scalar type used for raw data.

    :param dtype: float32 or float64, None for the default
    :return: numpy dtype
    """
    if dtype is None:
        return DEFAULT_DTYPE
    dtype = np.dtype(dtype)
    assert dtype in (np.dtype(np.float32), np.dtype(np.float64))
    return dtype


def traits(rep, dtype=None):
    """
    Static description of the raw data stored by a representation.

    Raises KeyError for a tag without traits (e.g. Euler).
    """
    data_type, group_params, group_shape, is_coordinates = _traits[rep]
    return RepTraits(
        rep=rep,
        dtype=scalar_type(dtype),
        data_type=data_type,
        group_params=group_params,
        group_shape=group_shape,
        is_coordinates=is_coordinates,
    )


def is_coordinates(rep):
    return _traits[rep][3]


def dummy_precision(dtype=None):
    """
    Default tolerance for approximate comparisons.
    """
    if scalar_type(dtype) == np.dtype(np.float32):
        return 1e-5
    return 1e-12


def data_dtype(data):
    """
    The scalar type of raw representation data.
    """
    return scalar_type(data.dtype)
