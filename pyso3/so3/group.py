"""
The SO3 value type: an orientation stored in one representation.
"""
import numpy as np

from . import operations as ops
from .rep import (
    CANONICAL,
    AngleAxis,
    AxisAngle,
    Dcm,
    Quat,
    RotationVector,
    is_coordinates,
    scalar_type,
)


def _infer_dtype(rep, data):
    if rep is AxisAngle:
        data = data[0]
    dtype = np.asarray(data).dtype
    if dtype in (np.dtype(np.float32), np.dtype(np.float64)):
        return dtype
    return scalar_type(None)


def _raw(rep, data, dtype):
    if rep is AxisAngle and not isinstance(data, AngleAxis):
        axis, angle = data
        data = AngleAxis(np.asarray(axis), angle)
    data = ops.astype(rep, data, dtype)
    ops.check(rep, data)
    return data


class SO3:
    """
    An element of SO(3).

    The element owns its raw data, stored in the representation given by
    the rep tag with the scalar type dtype. Products are compositions,
    (a*b).to_matrix() == a.to_matrix() @ b.to_matrix(), so b is applied first.

    :param rep: representation tag, Dcm, AxisAngle, Quat or RotationVector
    :param data: None for the identity, another SO3 to convert, or raw data
        for rep (3x3 matrix, (axis, angle), [w, x, y, z], 3 vector)
    :param dtype: float32 or float64, inferred from data when None
    """

    __slots__ = ("_rep", "_dtype", "_data")

    def __init__(self, rep=CANONICAL, data=None, dtype=None):
        ops.module(rep)
        self._rep = rep
        if isinstance(data, SO3):
            self._dtype = scalar_type(data.dtype if dtype is None else dtype)
            self._data = ops.astype(rep, ops.convert(data.rep, rep, data._data), self._dtype)
        elif data is None:
            self._dtype = scalar_type(dtype)
            self._data = ops.identity(rep, self._dtype)
        else:
            self._dtype = _infer_dtype(rep, data) if dtype is None else scalar_type(dtype)
            self._data = _raw(rep, data, self._dtype)

    # constructors

    @classmethod
    def identity(cls, rep=CANONICAL, dtype=None):
        return cls(rep, dtype=dtype)

    @classmethod
    def from_matrix(cls, R, dtype=None):
        return cls(Dcm, R, dtype=dtype)

    @classmethod
    def from_axis_angle(cls, axis, angle, dtype=None):
        return cls(AxisAngle, (axis, angle), dtype=dtype)

    @classmethod
    def from_quat(cls, q, dtype=None):
        """
        :param q: [w, x, y, z]
        """
        return cls(Quat, q, dtype=dtype)

    @classmethod
    def from_rotation_vector(cls, v, dtype=None):
        return cls(RotationVector, v, dtype=dtype)

    @classmethod
    def exp(cls, w, rep=CANONICAL, dtype=None):
        """
        The exponential map from the Lie algebra element components to the Lie group.
        :param w: The Lie algebra, represented by components of an angular velocity vector.
        :param rep: representation of the result
        """
        res = cls(RotationVector, w, dtype=dtype)
        if rep is RotationVector:
            return res
        return cls(rep, res)

    @classmethod
    def random(cls, rep=CANONICAL, random_state=None, dtype=None):
        """
        A rotation drawn uniformly from SO(3).
        """
        dtype = scalar_type(dtype)
        return cls(rep, ops.random(rep, dtype, random_state), dtype=dtype)

    def _wrap(self, data):
        # computed data, not validated so products may drift until orthonormalize
        res = SO3.__new__(SO3)
        res._rep = self._rep
        res._dtype = self._dtype
        res._data = ops.astype(self._rep, data, self._dtype)
        return res

    # representation

    @property
    def rep(self):
        return self._rep

    @property
    def dtype(self):
        return self._dtype

    def get_rep_data(self):
        return ops.astype(self._rep, self._data, self._dtype)

    def set_rep_data(self, data):
        self._data = _raw(self._rep, data, self._dtype)

    def to(self, rep):
        """
        The raw data of this rotation in another representation.
        """
        return ops.astype(rep, ops.convert(self._rep, rep, self._data), self._dtype)

    def to_matrix(self):
        return self.to(Dcm)

    def to_axis_angle(self):
        return self.to(AxisAngle)

    def to_quat(self):
        return self.to(Quat)

    def to_rotation_vector(self):
        return self.to(RotationVector)

    def as_rep(self, rep):
        """
        A new element holding this rotation in another representation.
        """
        return SO3(rep, self)

    def assign(self, other):
        """
        Set this rotation from an element in any representation, keeping
        this element's representation and dtype.
        """
        self._data = ops.astype(self._rep, ops.convert(other.rep, self._rep, other._data), self._dtype)
        return self

    def copy(self):
        return SO3(self._rep, self)

    __copy__ = copy

    def log(self):
        """
        The inverse exponential map from the Lie group to the Lie algebra element components.
        :return: The Lie algebra, represented by an angular velocity vector.
        """
        return self.to(RotationVector)

    def set_exp(self, w):
        self.assign(SO3(RotationVector, w, dtype=self._dtype))

    def coordinates(self):
        assert is_coordinates(self._rep)
        return self.get_rep_data()

    def set_matrix(self, R):
        assert self._rep is Dcm
        self.set_rep_data(R)

    def set_axis_angle(self, axis, angle):
        assert self._rep is AxisAngle
        self.set_rep_data((axis, angle))

    def set_axis(self, axis):
        assert self._rep is AxisAngle
        self.set_rep_data((axis, self._data.angle))

    def set_angle(self, angle):
        assert self._rep is AxisAngle
        self.set_rep_data((self._data.axis, angle))

    @property
    def axis(self):
        assert self._rep is AxisAngle
        return self._data.axis.copy()

    @property
    def angle(self):
        assert self._rep is AxisAngle
        return self._data.angle

    def set_quat(self, q):
        assert self._rep is Quat
        self.set_rep_data(q)

    def set_rotation_vector(self, v):
        assert self._rep is RotationVector
        self.set_rep_data(v)

    def set_random(self, random_state=None):
        self._data = ops.astype(self._rep, ops.random(self._rep, self._dtype, random_state), self._dtype)

    def orthonormalize(self):
        """
        Remove numerical drift in place, e.g. after many products.
        """
        self._data = ops.astype(self._rep, ops.normalized(self._rep, self._data), self._dtype)
        return self

    # group operations

    def __mul__(self, other):
        if not isinstance(other, SO3):
            return NotImplemented
        return self._wrap(ops.multiply(self._rep, self._data, other.rep, other._data))

    def __imul__(self, other):
        if not isinstance(other, SO3):
            return NotImplemented
        self._data = ops.astype(self._rep, ops.multiply(self._rep, self._data, other.rep, other._data), self._dtype)
        return self

    def inverse(self):
        return self._wrap(ops.inverse(self._rep, self._data))

    __invert__ = inverse

    def invert(self):
        self._data = ops.astype(self._rep, ops.inverse(self._rep, self._data), self._dtype)
        return self

    def is_identity(self):
        """
        True only for the exact identity encoding of the representation.
        """
        return ops.is_identity(self._rep, self._data)

    def set_identity(self):
        self._data = ops.identity(self._rep, self._dtype)
        return self

    def is_approx(self, other, tol=None):
        """
        Approximate equality, compared in the canonical representation when
        the representations differ.
        :param tol: defaults to rep.dummy_precision of this element's dtype
        """
        return ops.is_approx(self._rep, self._data, other.rep, other._data, tol)

    def __eq__(self, other):
        """
        Exact equality of the raw data, only between the same representation.
        """
        if not isinstance(other, SO3):
            return NotImplemented
        if self._rep is not other.rep:
            return False
        if self._rep is AxisAngle:
            if self._data.angle == 0 and other._data.angle == 0:
                return True
            return bool(
                self._data.angle == other._data.angle
                and np.array_equal(self._data.axis, other._data.axis)
            )
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def apply(self, points):
        """
        Rotate points.
        :param points: (3,) or (N, 3)
        :return: rotated points, same shape
        """
        points = np.asarray(points)
        assert points.shape[-1] == 3
        return points @ self.to_matrix().T

    def __repr__(self):
        return "SO3({:s}, {!r})".format(self._rep.__name__, self._data)
