"""
A module for rotation vectors (exponential coordinates).

The data is the rotation axis scaled by the angle. 3 parameters, the zero
vector is the identity. This is a coordinate representation, it has no
product of its own, so compositions go through the canonical representation.
"""
import numpy as np

from ..lie import so3 as lie_so3


def check(v):
    assert isinstance(v, np.ndarray)
    assert v.shape == (3,)


def identity(dtype):
    return np.zeros(3, dtype=dtype)


def is_identity(v):
    return bool(not v.any())


def inv(v):
    check(v)
    return -v


def is_approx(a, b, tol):
    check(a)
    check(b)
    return bool(np.linalg.norm(a - b) <= tol)


def normalized(v):
    return v.copy()


def to_dcm(v):
    check(v)
    return lie_so3.exp(v)


def from_dcm(R):
    return lie_so3.log(R)
