import numpy as np
import pytest

from pyso3.so3 import quat

tol = 1e-4  # tolerance, reference values are given to 6 digits

# Analytical Mechanics of Space Systems, Shaub pg. 97
dcm_check = np.array([
    [0.892539, 0.157379, -0.422618],
    [-0.275451, 0.932257, -0.234570],
    [0.357073, 0.325773, 0.875426]
]).T  # transpose from Schaub dcm convention
# direction of transform is reversed
q_check = np.array([0.961798, -0.14565, 0.202665, 0.112505])
a = np.array([1.0, 0, 0, 0])
b = np.array([0.0, 1, 0, 0])


def test_to_from_dcm():
    assert np.linalg.norm(quat.from_dcm(dcm_check) - q_check) < tol
    assert np.linalg.norm(quat.to_dcm(q_check) - dcm_check) < tol


def test_product():
    c = np.array([np.cos(0.2), 0, np.sin(0.2), 0])
    d = np.array([np.cos(0.4), np.sin(0.4) * 0.6, 0, np.sin(0.4) * 0.8])
    for p, q in [(a, b), (b, c), (c, d), (d, c)]:
        assert np.linalg.norm(quat.to_dcm(quat.product(p, q)) - quat.to_dcm(p) @ quat.to_dcm(q)) < 1e-12


def test_inv():
    c = np.array([np.cos(0.4), np.sin(0.4) * 0.6, 0, np.sin(0.4) * 0.8])
    assert np.linalg.norm(quat.product(c, quat.inv(c)) - a) < 1e-12


def test_from_dcm_branches():
    # trace > 0 and each of the three largest diagonal cases
    for R in [np.eye(3), np.diag([1.0, -1, -1]), np.diag([-1.0, 1, -1]), np.diag([-1.0, -1, 1])]:
        q = quat.from_dcm(R)
        assert abs(np.linalg.norm(q) - 1) < 1e-12
        assert q[0] >= 0
        assert np.linalg.norm(quat.to_dcm(q) - R) < 1e-12


def test_is_approx_double_cover():
    assert quat.is_approx(q_check, -q_check, 1e-12)
    assert not quat.is_approx(a, b, 1e-6)


def test_check():
    with pytest.raises(AssertionError):
        quat.check(np.array([1.0, 2, 3]))
    with pytest.raises(AssertionError):
        quat.check(np.array([2.0, 0, 0, 0]))
    quat.check(q_check)
    # computed data is only shape checked
    quat.check_shape(np.array([2.0, 0, 0, 0]))
