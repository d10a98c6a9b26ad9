"""
A module for quaternions (Euler parameters)

Hamilton convention, scalar first: q = [w, x, y, z]. The product is defined
so that to_dcm(a*b) = to_dcm(a) @ to_dcm(b).
"""
import numpy as np

from .rep import data_dtype

unit_tol = 1e-5  # assertion tolerance on the norm of input quaternions


def check_shape(q):
    assert isinstance(q, np.ndarray)
    assert q.shape == (4,)


def check(q):
    """
    Validate a quaternion given as input, products may drift off the unit
    sphere and are only shape checked.
    """
    check_shape(q)
    assert abs(np.linalg.norm(q) - 1) < unit_tol


def identity(dtype):
    return np.array([1, 0, 0, 0], dtype=dtype)


def is_identity(q):
    return bool(q[0] == 1 and q[1] == 0 and q[2] == 0 and q[3] == 0)


def product(a, b):
    """
    The product of two quaternions using the hamilton
    convention, so that Dcm(A)*Dcm(B) = Dcm(A*B).
    :param a: The first quaternion.
    :param b: The second quaternion.
    :return: The quaternion product.
    """
    check_shape(a)
    check_shape(b)
    r1 = a[0]
    v1 = a[1:]
    r2 = b[0]
    v2 = b[1:]
    res = np.empty(4, dtype=a.dtype)
    res[0] = r1 * r2 - np.dot(v1, v2)
    res[1:] = r1 * v2 + r2 * v1 + np.cross(v1, v2)
    return res


def inv(q):
    """
    The conjugate, which is the inverse of a unit quaternion.
    """
    check_shape(q)
    return np.array([q[0], -q[1], -q[2], -q[3]], dtype=q.dtype)


def normalized(q):
    return q / np.linalg.norm(q)


def is_approx(a, b, tol):
    """
    Component-wise comparison that treats q and -q as the same rotation.
    """
    check_shape(a)
    check_shape(b)
    return bool(min(np.linalg.norm(a - b), np.linalg.norm(a + b)) <= tol)


def from_dcm(R):
    """
    Converts a direction cosine matrix to a quaternion.
    :param R: A direction cosine matrix.
    :return: The quaternion, with a non-negative scalar part.
    """
    assert R.shape == (3, 3)
    dtype = data_dtype(R)
    t = R[0, 0] + R[1, 1] + R[2, 2]
    q = np.empty(4, dtype=dtype)
    if t > 0:
        b1 = 0.5 * np.sqrt(1 + t)
        q[0] = b1
        q[1] = (R[2, 1] - R[1, 2]) / (4 * b1)
        q[2] = (R[0, 2] - R[2, 0]) / (4 * b1)
        q[3] = (R[1, 0] - R[0, 1]) / (4 * b1)
    elif R[0, 0] > R[1, 1] and R[0, 0] > R[2, 2]:
        b2 = 0.5 * np.sqrt(1 + R[0, 0] - R[1, 1] - R[2, 2])
        q[0] = (R[2, 1] - R[1, 2]) / (4 * b2)
        q[1] = b2
        q[2] = (R[0, 1] + R[1, 0]) / (4 * b2)
        q[3] = (R[0, 2] + R[2, 0]) / (4 * b2)
    elif R[1, 1] > R[2, 2]:
        b3 = 0.5 * np.sqrt(1 - R[0, 0] + R[1, 1] - R[2, 2])
        q[0] = (R[0, 2] - R[2, 0]) / (4 * b3)
        q[1] = (R[0, 1] + R[1, 0]) / (4 * b3)
        q[2] = b3
        q[3] = (R[1, 2] + R[2, 1]) / (4 * b3)
    else:
        b4 = 0.5 * np.sqrt(1 - R[0, 0] - R[1, 1] + R[2, 2])
        q[0] = (R[1, 0] - R[0, 1]) / (4 * b4)
        q[1] = (R[0, 2] + R[2, 0]) / (4 * b4)
        q[2] = (R[1, 2] + R[2, 1]) / (4 * b4)
        q[3] = b4
    if q[0] < 0:
        q = -q
    return q


def to_dcm(q):
    """
    Converts a quaternion to a DCM.
    :param q: The quaternion.
    :return: The DCM.
    """
    check_shape(q)
    R = np.empty((3, 3), dtype=q.dtype)
    a = q[0]
    b = q[1]
    c = q[2]
    d = q[3]
    aa = a * a
    ab = a * b
    ac = a * c
    ad = a * d
    bb = b * b
    bc = b * c
    bd = b * d
    cc = c * c
    cd = c * d
    dd = d * d
    R[0, 0] = aa + bb - cc - dd
    R[0, 1] = 2 * (bc - ad)
    R[0, 2] = 2 * (bd + ac)
    R[1, 0] = 2 * (bc + ad)
    R[1, 1] = aa + cc - bb - dd
    R[1, 2] = 2 * (cd - ab)
    R[2, 0] = 2 * (bd - ac)
    R[2, 1] = 2 * (cd + ab)
    R[2, 2] = aa + dd - bb - cc
    return R
