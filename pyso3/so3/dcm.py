"""
A module for Direction Cosine Matrices (DCMs).

This is the standard representation of SO(3) and the canonical one. There
are 9 parameters and no singularities.
"""
import logging

import numpy as np
import scipy.linalg

logger = logging.getLogger(__name__)


def check(R):
    assert isinstance(R, np.ndarray)
    assert R.shape == (3, 3)


def identity(dtype):
    return np.eye(3, dtype=dtype)


def is_identity(R):
    return bool(np.array_equal(R, np.eye(3)))


def product(a, b):
    check(a)
    check(b)
    return a @ b


def inv(R):
    check(R)
    return R.T.copy()


def is_approx(a, b, tol):
    """
    Frobenius norm of the difference.
    """
    check(a)
    check(b)
    return bool(np.linalg.norm(a - b) <= tol)


def normalized(R):
    """
    The closest rotation matrix in the Frobenius sense, the orthogonal
    factor of the polar decomposition. R must be near a rotation (det > 0).
    """
    check(R)
    U, _ = scipy.linalg.polar(R)
    logger.debug("orthonormalized dcm, correction %g", np.linalg.norm(U - R))
    return U.astype(R.dtype)
