"""
Exponential and logarithm maps between the Lie algebra so(3) and the
rotation matrix representation of SO(3).

see: https://ethaneade.com/lie.pdf
"""
import numpy as np

from .util import series
from ..so3 import axis_angle, quat
from ..so3.rep import DEFAULT_DTYPE

EPS = 1e-7


def _as_float(v):
    v = np.asarray(v)
    if not np.issubdtype(v.dtype, np.floating):
        v = v.astype(DEFAULT_DTYPE)
    return v


def wedge(v):
    """
    Take Lie algebra components and builds a Lie algebra element.
    :param v: 3 vector
    :return: 3x3 skew symmetric matrix
    """
    v = _as_float(v)
    assert v.shape == (3,)
    X = np.zeros((3, 3), dtype=v.dtype)
    X[0, 1] = -v[2]
    X[0, 2] = v[1]
    X[1, 0] = v[2]
    X[1, 2] = -v[0]
    X[2, 0] = -v[1]
    X[2, 1] = v[0]
    return X


def vee(X):
    """
    Takes a Lie algebra element and extracts components
    :param X: 3x3 skew symmetric matrix
    :return: 3 vector
    """
    X = _as_float(X)
    assert X.shape == (3, 3)
    return np.array([X[2, 1], X[0, 2], X[1, 0]], dtype=X.dtype)


def exp(w):
    """
    The exponential map from the Lie algebra element components to the Lie group.

    Rodrigues' formula, the coefficients switch to their taylor series when
    the angle is below EPS.

    :param w: The Lie algebra, represented by components of an angular velocity vector.
    :return: The Lie group, represented by a rotation matrix.
    """
    w = _as_float(w)
    assert w.shape == (3,)
    s2 = (w[0] * w[0], w[1] * w[1], w[2] * w[2])
    s3 = (w[0] * w[1], w[1] * w[2], w[2] * w[0])
    theta = np.sqrt(s2[0] + s2[1] + s2[2])
    cos_t = np.cos(theta)
    alpha = series("sin(x)/x", theta, EPS)
    beta = series("(1 - cos(x))/x^2", theta, EPS)

    R = np.empty((3, 3), dtype=w.dtype)
    R[0, 0] = beta * s2[0] + cos_t
    R[1, 0] = beta * s3[0] + alpha * w[2]
    R[2, 0] = beta * s3[2] - alpha * w[1]
    R[0, 1] = beta * s3[0] - alpha * w[2]
    R[1, 1] = beta * s2[1] + cos_t
    R[2, 1] = beta * s3[1] + alpha * w[0]
    R[0, 2] = beta * s3[2] + alpha * w[1]
    R[1, 2] = beta * s3[1] - alpha * w[0]
    R[2, 2] = beta * s2[2] + cos_t
    return R


def log(R):
    """
    The inverse exponential map from the Lie group to the Lie algebra element components.

    The angle is in [0, pi]. R must be a rotation matrix, the result is
    meaningless otherwise.

    :param R: The Lie group, represented by a rotation matrix.
    :return: The Lie algebra, represented by an angular velocity vector.
    """
    R = _as_float(R)
    assert R.shape == (3, 3)
    aa = axis_angle.from_quat(quat.from_dcm(R))
    return axis_angle.to_rotation_vector(aa)
