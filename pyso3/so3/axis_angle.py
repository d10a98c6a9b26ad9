"""
A module for the axis-angle representation.

The data is an AngleAxis(axis, angle) pair. 4 parameters, the axis is
undefined at a zero angle, in which case it is left unconstrained.
"""
import numpy as np

from .rep import AngleAxis, data_dtype
from . import quat

unit_tol = 1e-5  # assertion tolerance on the axis norm


def make(axis, angle, dtype):
    dtype = np.dtype(dtype)
    axis = np.array(axis, dtype=dtype)
    assert axis.shape == (3,)
    return AngleAxis(axis, dtype.type(angle))


def check(aa):
    assert isinstance(aa, AngleAxis)
    assert aa.axis.shape == (3,)
    assert aa.angle == 0 or abs(np.linalg.norm(aa.axis) - 1) < unit_tol


def identity(dtype):
    return make([1, 0, 0], 0, dtype)


def is_identity(aa):
    return bool(aa.angle == 0)


def inv(aa):
    check(aa)
    return AngleAxis(aa.axis.copy(), -aa.angle)


def product(a, b):
    """
    Compose through the quaternion product, the result is an axis-angle.
    """
    return from_quat(quat.product(to_quat(a), to_quat(b)))


def is_approx(a, b, tol):
    """
    Compares the quaternions up to sign, so (axis, angle), (-axis, -angle),
    (axis, angle + 2 pi) and (-axis, pi) for angle pi are all equal.
    """
    return quat.is_approx(to_quat(a), to_quat(b), tol)


def to_rotation_vector(aa):
    return (aa.angle * aa.axis).astype(aa.dtype)


def from_rotation_vector(v):
    """
    Split a rotation vector into its norm and direction.

    A zero vector has no direction, the x axis is used with a zero angle.
    """
    assert v.shape == (3,)
    dtype = data_dtype(v)
    norm = np.linalg.norm(v)
    if norm > 0:
        return AngleAxis((v / norm).astype(dtype), dtype.type(norm))
    return identity(dtype)


def to_quat(aa):
    """
    Half angle formula.
    """
    check(aa)
    half = 0.5 * aa.angle
    q = np.empty(4, dtype=aa.dtype)
    q[0] = np.cos(half)
    q[1:] = np.sin(half) * aa.axis
    return q


def from_quat(q):
    """
    The angle is in [0, pi], the axis flips with the sign of the scalar part.
    A quaternion without vector part gives the identity with the x axis.
    """
    quat.check_shape(q)
    dtype = data_dtype(q)
    v = q[1:]
    n = np.linalg.norm(v)
    if n > 0:
        angle = 2 * np.arctan2(n, abs(q[0]))
        axis = v / n if q[0] >= 0 else -v / n
        return AngleAxis(axis.astype(dtype), dtype.type(angle))
    return identity(dtype)


def to_dcm(aa):
    """
    R = cos(t) I + sin(t) [k]x + (1 - cos(t)) k k^T
    """
    check(aa)
    k = aa.axis
    c = np.cos(aa.angle)
    s = np.sin(aa.angle)
    K = np.array([[0, -k[2], k[1]], [k[2], 0, -k[0]], [-k[1], k[0], 0]], dtype=aa.dtype)
    R = c * np.eye(3, dtype=aa.dtype) + s * K + (1 - c) * np.outer(k, k)
    return R.astype(aa.dtype)


def from_dcm(R):
    return from_quat(quat.from_dcm(R))


def normalized(aa):
    if aa.angle == 0:
        return AngleAxis(aa.axis.copy(), aa.angle)
    return AngleAxis((aa.axis / np.linalg.norm(aa.axis)).astype(aa.dtype), aa.angle)
