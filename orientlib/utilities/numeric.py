"""
Scalar helpers used throughout orientlib.
"""

import numpy as np

from orientlib._typing import ARRAY_LIKE, SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY


__all__ = ['clamp', 'rand_int', 'rand_float', 'ellipse_angle']


def clamp(value: SCALAR_OR_ARRAY, minimum: float, maximum: float) -> F_SCALAR_OR_ARRAY:
    """
    Limit `value` to the closed interval [`minimum`, `maximum`].

    Arrays are clamped element-wise.

    :param value: The value(s) to clamp
    :param minimum: the lower bound
    :param maximum: the upper bound
    :return: the clamped value(s)
    """

    clamped = np.clip(value, minimum, maximum)

    if np.ndim(clamped) == 0:
        return float(clamped)

    return clamped


def rand_int(low: int, high: int, rng: np.random.Generator | None = None) -> int:
    """
    Draw a uniformly distributed integer from [`low`, `high`], both ends included.

    :param low: The smallest value that can be returned
    :param high: The largest value that can be returned
    :param rng: The random number generator to draw from.  A fresh :func:`numpy.random.default_rng` if ``None``
    :return: The random integer
    """

    if rng is None:
        rng = np.random.default_rng()

    return int(rng.integers(low, high, endpoint=True))


def rand_float(low: float, high: float, rng: np.random.Generator | None = None) -> float:
    """
    Draw a uniformly distributed float from [`low`, `high`).

    :param low: The lower bound
    :param high: The upper bound
    :param rng: The random number generator to draw from.  A fresh :func:`numpy.random.default_rng` if ``None``
    :return: The random float
    """

    if rng is None:
        rng = np.random.default_rng()

    return float(rng.uniform(low, high))


def ellipse_angle(u: ARRAY_LIKE, v: ARRAY_LIKE, w: ARRAY_LIKE, two_pi: bool = False,
                  a: float = 1, b: float = 1) -> float:
    r"""
    Compute the signed angle from `u` to `v` measured on an ellipse with radius `a` along x and `b` along y.

    With :math:`\mathbf{c}=\mathbf{u}\times\mathbf{v}` the angle is

    .. math::
        \theta = \text{tan}^{-1}\left(\frac{a\|\mathbf{c}\|}{b\,\mathbf{u}^T\mathbf{v}}\right)

    which reduces to the ordinary angle between the vectors for a circle (``a == b``).  Angles smaller than 1e-15 in
    magnitude are snapped to 0.

    The vector `w` should be orthogonal to both `u` and `v` and picks the positive direction: when
    :math:`\mathbf{w}^T\mathbf{c}<0` the angle is negative, or is reported as :math:`2\pi-\theta` if `two_pi` is
    ``True`` so that the result lies in :math:`[0, 2\pi)`.

    :param u: The first 3 vector
    :param v: The second 3 vector
    :param w: The reference normal giving the sign of the angle
    :param two_pi: Report the angle in :math:`[0, 2\pi)` instead of :math:`[-\pi, \pi]`
    :param a: The x radius of the ellipse
    :param b: The y radius of the ellipse
    :return: The angle in radians
    """

    u = np.asarray(u, dtype=np.float64)
    v = np.asarray(v, dtype=np.float64)
    w = np.asarray(w, dtype=np.float64)

    norm = np.linalg.norm(u) * np.linalg.norm(v)
    cross = np.cross(u, v)

    sin = np.linalg.norm(cross) / norm
    cos = (u @ v) / norm

    angle = float(np.arctan2(a * sin, b * cos))

    if abs(angle) < 1e-15:
        angle = 0.0

    if w @ cross < 0:
        return 2 * np.pi - angle if two_pi else -angle

    return angle
