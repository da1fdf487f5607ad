import casadi as ca
import numpy as np

# tolerance for near zero comparisons, machine epsilon of float64
DEFAULT_EPSILON = float(np.finfo(float).eps)

# tolerance on cos(pitch) for detecting euler angle gimbal lock
EULER_EPSILON = 1e-8


def column(v, n: int) -> ca.DM:
    """
    Coerce an array-like into a dense (n, 1) column vector.
    :param v: list, tuple, numpy array or DM
    :param n: expected number of elements
    :return: The column vector.
    """
    if not isinstance(v, ca.DM):
        v = np.atleast_1d(np.asarray(v, dtype=float))
    v = ca.densify(ca.DM(v))
    if v.shape == (1, n):
        v = v.T
    assert v.shape == (n, 1)
    return v


def norm(v: ca.DM) -> float:
    return float(ca.norm_2(v))


def dot(a: ca.DM, b: ca.DM) -> float:
    return float(ca.dot(a, b))


def try_normalize(v: ca.DM, eps: float):
    """
    Normalize a vector, unless its norm is not larger than eps.
    :param v: The vector.
    :param eps: The minimum norm.
    :return: The unit vector, or None.
    """
    n = norm(v)
    if n <= eps:
        return None
    return v / n


def clamp_cos(c: float) -> float:
    """
    Round off can push a cosine derived from the trace outside [-1, 1]
    """
    return float(np.clip(c, -1.0, 1.0))
