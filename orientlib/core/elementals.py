"""
Elementary rotation matrices and the skew symmetric cross product matrix.

These are the building blocks the closed form Euler formulas in :mod:`.conversions` are equivalent to.
"""

from typing import Literal

import numpy as np

from orientlib._typing import SCALAR_OR_ARRAY, ARRAY_LIKE, DOUBLE_ARRAY
from orientlib.core._helpers import _check_vector_array_and_shape


__all__ = ["rot_x", "rot_y", "rot_z", "rot_axis", "skew"]


def _elementary(theta: SCALAR_OR_ARRAY, axis: int) -> DOUBLE_ARRAY:
    """
    Build the right handed rotation matrix(ces) about the unit axis with index `axis` (0, 1, or 2).

    :param theta: The angle(s) in radians
    :param axis: The index of the axis to rotate about
    :return: A 3x3 matrix for a scalar angle or an nx3x3 stack for n angles
    """

    theta = np.atleast_1d(np.asarray(theta, dtype=np.float64)).ravel()

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    out = np.zeros((theta.size, 3, 3))

    # the two axes that are mixed by the rotation, in right handed order
    first, second = (axis + 1) % 3, (axis + 2) % 3

    out[:, axis, axis] = 1
    out[:, first, first] = ctheta
    out[:, first, second] = -stheta
    out[:, second, first] = stheta
    out[:, second, second] = ctheta

    return out.squeeze(axis=0) if theta.size == 1 else out


def rot_x(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    Return the right handed rotation about the x axis by `theta`.

    .. math::
        \mathbf{R}_x(\theta)=\left[\begin{array}{ccc} 1 & 0 & 0 \\
        0 & \text{cos}(\theta) & -\text{sin}(\theta) \\
        0 & \text{sin}(\theta) & \text{cos}(\theta) \end{array}\right]

    `theta` is in radians.  When several angles are given the matrices are stacked down the first axis::

        >>> from orientlib.core import rot_x
        >>> rot_x([0, np.pi/2]).shape
        (2, 3, 3)

    :param theta: The angle(s) to form the rotation matrix(ces) for
    :return: The rotation matrix(ces)
    """

    return _elementary(theta, 0)


def rot_y(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    Return the right handed rotation about the y axis by `theta`.

    .. math::
        \mathbf{R}_y(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & 0 & \text{sin}(\theta) \\
        0 & 1 & 0 \\
        -\text{sin}(\theta) & 0 & \text{cos}(\theta) \end{array}\right]

    :param theta: The angle(s) to form the rotation matrix(ces) for
    :return: The rotation matrix(ces)
    """

    return _elementary(theta, 1)


def rot_z(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    Return the right handed rotation about the z axis by `theta`.

    .. math::
        \mathbf{R}_z(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & -\text{sin}(\theta) & 0 \\
        \text{sin}(\theta) & \text{cos}(\theta) & 0 \\
        0 & 0 & 1 \end{array}\right]

    :param theta: The angle(s) to form the rotation matrix(ces) for
    :return: The rotation matrix(ces)
    """

    return _elementary(theta, 2)


def rot_axis(axis: Literal['x', 'y', 'z'], theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    """
    Return the elementary rotation about the named axis.

    :param axis: One of ``'x'``, ``'y'``, ``'z'`` (case-insensitive)
    :param theta: The angle(s) in radians
    :return: The rotation matrix(ces)
    :raises ValueError: When `axis` is not x, y, or z
    """

    index = 'xyz'.find(axis.lower()) if len(axis) == 1 else -1

    if index < 0:
        raise ValueError(f'axis must be one of x, y, or z.  You entered {axis!r}')

    return _elementary(theta, index)


def skew(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Return the skew symmetric cross product matrix of `vector`.

    .. math::
        \mathbf{a}\times\mathbf{b}=\left[\mathbf{a}\times\right]\mathbf{b} \\
        \left[\mathbf{a}\times\right] = \left[\begin{array}{ccc} 0 & -a_3 & a_2 \\
        a_3 & 0 & -a_1 \\
        -a_2 & a_1 & 0 \end{array}\right]

    Multiple vectors may be given as the columns of a 3xn array, in which case an nx3x3 stack is returned.

    :param vector: The vector(s) to compute the cross product matrix for
    :return: The skew symmetric matrix(ces)
    """

    vector = _check_vector_array_and_shape(vector)

    zeros = np.zeros(vector.shape[1:])

    return np.moveaxis(np.array([[zeros, -vector[2], vector[1]],
                                 [vector[2], zeros, -vector[0]],
                                 [-vector[1], vector[0], zeros]]), (0, 1), (-2, -1))
