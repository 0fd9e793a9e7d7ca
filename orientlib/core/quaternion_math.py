"""
Quaternion algebra used by the conversion routines and the :class:`.Quat` value type.

Quaternions are length 4 arrays ordered ``[x, y, z, w]`` with the scalar part last.  Where noted, the routines are
vectorized over columns (a 4xn array holds n quaternions).
"""

import logging

import numpy as np

from orientlib._typing import ARRAY_LIKE, DOUBLE_ARRAY, DatetimeLike, F_SCALAR_OR_ARRAY
from orientlib.constants import EPSILON, MACHINE_EPSILON

from orientlib.core._helpers import _check_quaternion_array_and_shape, _check_vector_array_and_shape


__all__ = ["quaternion_normalize", "quaternion_conjugate", "quaternion_dot", "quaternion_multiplication",
           "rotate_vector", "nlerp", "slerp", "quaternion_from_two_vectors"]


_LOGGER: logging.Logger = logging.getLogger(__name__)


def quaternion_normalize(quaternion: ARRAY_LIKE, precision: float = EPSILON) -> DOUBLE_ARRAY:
    """
    Scale the quaternion(s) to unit length.

    Any quaternion whose length is below `precision` is replaced with the identity quaternion ``[0, 0, 0, 1]``
    instead of being divided by a near zero value.  The sign of the quaternion is left untouched.

    :param quaternion: the quaternion(s) to normalize, as columns if there are several
    :param precision: the length below which a quaternion is considered degenerate
    :returns: The normalized quaternion(s) as a new array
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    length = np.linalg.norm(work_quaternion, axis=0)

    degenerate = length < precision

    if np.any(degenerate):
        _LOGGER.debug('quaternion length below %g, replacing with the identity', precision)

    if work_quaternion.ndim == 1:
        if degenerate:
            return np.array([0, 0, 0, 1.0])

        return work_quaternion / length

    work_quaternion[:, ~degenerate] /= length[~degenerate]
    work_quaternion[:, degenerate] = np.array([[0], [0], [0], [1.0]])

    return work_quaternion


def quaternion_conjugate(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Return the conjugate of the quaternion(s), which is the reverse rotation for unit quaternions.

    .. math::
        \mathbf{q}^*=\left[\begin{array}{c}-\mathbf{q}_v\\ q_s\end{array}\right]

    :param quaternion: The quaternion(s) to conjugate
    :return: The conjugated quaternion(s) as a new array
    """

    quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    quaternion[:3] *= -1

    return quaternion


def quaternion_dot(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    """
    The 4 dimensional inner product of two quaternions (column-wise when vectorized).

    :param quaternion_1: The first quaternion(s)
    :param quaternion_2: The second quaternion(s)
    :return: The inner product(s)
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2)

    return (quaternion_1 * quaternion_2).sum(axis=0)


def quaternion_multiplication(quaternion_1_in: ARRAY_LIKE,
                              quaternion_2_in: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function performs the Hamilton quaternion product :math:`\mathbf{q}_1\otimes\mathbf{q}_2`.

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}q_{s1}\mathbf{q}_{v2} + q_{s2}\mathbf{q}_{v1} +
        \mathbf{q}_{v1}\times\mathbf{q}_{v2}\\
        q_{s1}q_{s2}-\mathbf{q}_{v1}^T\mathbf{q}_{v2}\end{array}\right]

    Composing rotations reads right to left: rotating a vector by the product applies `quaternion_2_in` first.

    This function is vectorized, therefore you can input multiple quaternions as a 4xn array where each column is an
    independent quaternion.

    :param quaternion_1_in: The first (left) quaternion
    :param quaternion_2_in: The second (right) quaternion
    :return: The Hamilton product
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1_in)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2_in)

    qs1 = quaternion_1[-1]
    qv1 = quaternion_1[0:3]

    qs2 = quaternion_2[-1]
    qv2 = quaternion_2[0:3]

    return np.concatenate([qs1 * qv2 + qs2 * qv1 + np.cross(qv1, qv2, axis=0),
                           [qs1 * qs2 - (qv1 * qv2).sum(axis=0)]], axis=0)


def rotate_vector(quaternion: ARRAY_LIKE, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    Rotate `vector` by the unit `quaternion`.

    This evaluates :math:`\mathbf{q}\otimes\mathbf{v}\otimes\mathbf{q}^*` in closed form, without building the
    intermediate quaternions.  The quaternion is assumed to be normalized; this is not checked.

    `vector` may be a 3xn array of column vectors which are all rotated by the same quaternion.

    :param quaternion: The rotation quaternion
    :param vector: The vector(s) to rotate
    :return: The rotated vector(s)
    """

    qx, qy, qz, qw = _check_quaternion_array_and_shape(quaternion)
    vx, vy, vz = _check_vector_array_and_shape(vector)

    # q * v
    ix = qw * vx + qy * vz - qz * vy
    iy = qw * vy + qz * vx - qx * vz
    iz = qw * vz + qx * vy - qy * vx
    iw = qx * vx + qy * vy + qz * vz

    # (q * v) * q'
    return np.array([ix * qw + iw * qx - iy * qz + iz * qy,
                     iy * qw + iw * qy - iz * qx + ix * qz,
                     iz * qw + iw * qz - ix * qy + iy * qx])


def _fractional_time(time: float | DatetimeLike, time0: float | DatetimeLike, time1: float | DatetimeLike) -> float:
    try:
        return float((time - time0) / (time1 - time0))  # type: ignore
    except TypeError as err:
        raise TypeError('time, time0, and time1 must support subtraction resulting in a type that supports true '
                        'division.  Typically this means they should all be floats or all be DatetimeLike '
                        'objects') from err


def nlerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
          time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> DOUBLE_ARRAY:
    r"""
    This function performs normalized linear interpolation of rotation quaternions.

    .. math::
        \mathbf{q}=\frac{\mathbf{q}_0(1-p)+\mathbf{q}_1p}
        {\left\|\mathbf{q}_0(1-p)+\mathbf{q}_1p\right\|}

    `time` is either the fractional percent :math:`p` itself (leave `time0` and `time1` at their defaults) or an
    actual time between `time0` and `time1`, in which case :math:`p` is computed.  Datetimes are accepted.

    No shortest path correction is applied.  If the interpolated quaternion collapses to zero length the identity is
    returned (see :func:`quaternion_normalize`).

    :param quaternion0: The starting quaternion(s)
    :param quaternion1: The ending quaternion(s)
    :param time: The time to interpolate at
    :param time0: the time corresponding to the first quaternion
    :param time1: the time corresponding to the second quaternion
    :return: The interpolated quaternion(s)
    """

    dt = _fractional_time(time, time0, time1)

    q0 = _check_quaternion_array_and_shape(quaternion0)
    q1 = _check_quaternion_array_and_shape(quaternion1)

    return quaternion_normalize(q0 * (1 - dt) + q1 * dt)


def slerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
          time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> DOUBLE_ARRAY:
    r"""
    This function performs spherical linear interpolation between two unit quaternions.

    With :math:`\cos\frac{\theta}{2}=\mathbf{q}_0^T\mathbf{q}_1` the interpolated quaternion is

    .. math::
        \mathbf{q}=\frac{\text{sin}((1-p)\frac{\theta}{2})}{\text{sin}\frac{\theta}{2}}\mathbf{q}_0+
        \frac{\text{sin}(p\frac{\theta}{2})}{\text{sin}\frac{\theta}{2}}\mathbf{q}_1

    The special cases are handled as follows:

    * :math:`p=0` returns a copy of `quaternion0` and :math:`p=1` returns a copy of `quaternion1`, exactly.
    * If the inner product is negative `quaternion1` is negated first so that the shorter arc is followed.
    * If the (possibly negated) inner product is at least 1 the quaternions are identical and `quaternion0` is
      returned unchanged.
    * If :math:`\text{sin}^2\frac{\theta}{2}` is no larger than machine epsilon the quaternions are (anti)parallel
      and a normalized linear interpolation is used instead to avoid a 0/0 division.

    `time` is either the fractional percent :math:`p` or an actual time between `time0` and `time1` (floats or
    datetimes) from which :math:`p` is computed.

    :param quaternion0: The starting quaternion
    :param quaternion1: The ending quaternion
    :param time: The time to interpolate at
    :param time0: the time corresponding to the first quaternion
    :param time1: the time corresponding to the second quaternion
    :return: The interpolated quaternion
    """

    dt = _fractional_time(time, time0, time1)

    q0 = _check_quaternion_array_and_shape(quaternion0, return_copy=True)
    q1 = _check_quaternion_array_and_shape(quaternion1, return_copy=True)

    if dt == 0:
        return q0
    if dt == 1:
        return q1

    cos_half_theta = float(q0 @ q1)

    if cos_half_theta < 0:
        # q and -q are the same rotation, take the short way around
        q1 = -q1
        cos_half_theta = -cos_half_theta

    if cos_half_theta >= 1.0:
        return q0

    sqr_sin_half_theta = 1.0 - cos_half_theta * cos_half_theta

    if sqr_sin_half_theta <= MACHINE_EPSILON:
        _LOGGER.debug('slerp between nearly parallel quaternions, falling back to nlerp')
        return quaternion_normalize((1 - dt) * q0 + dt * q1)

    sin_half_theta = np.sqrt(sqr_sin_half_theta)
    half_theta = np.arctan2(sin_half_theta, cos_half_theta)

    ratio_0 = np.sin((1 - dt) * half_theta) / sin_half_theta
    ratio_1 = np.sin(dt * half_theta) / sin_half_theta

    return q0 * ratio_0 + q1 * ratio_1


def quaternion_from_two_vectors(u: ARRAY_LIKE, v: ARRAY_LIKE, precision: float = EPSILON) -> DOUBLE_ARRAY:
    """
    Build the minimal rotation quaternion that takes the unit vector `u` onto the unit vector `v`.

    The unnormalized quaternion is :math:`[\\mathbf{u}\\times\\mathbf{v}, 1 + \\mathbf{u}^T\\mathbf{v}]`.  When the
    scalar part falls below `precision` the vectors are (nearly) opposite and their cross product vanishes, so an
    arbitrary axis orthogonal to `u` is used instead, picked from whichever of the x or z components of `u` is larger
    in magnitude.  Note that `precision` is compared with :math:`1 + \\mathbf{u}^T\\mathbf{v}` directly, not with an
    angle.

    Both vectors are assumed to be normalized.

    :param u: The starting direction
    :param v: The destination direction
    :param precision: The threshold on :math:`1 + \\mathbf{u}^T\\mathbf{v}` for the opposite vector case
    :return: The normalized rotation quaternion
    """

    u = _check_vector_array_and_shape(u)
    v = _check_vector_array_and_shape(v)

    w = float(u @ v) + 1

    if w < precision:
        _LOGGER.debug('vectors are nearly opposite, rotating about an arbitrary orthogonal axis')

        w = 0.0
        if abs(u[0]) > abs(u[2]):
            axis = np.array([-u[1], u[0], 0.0])
        else:
            axis = np.array([0.0, -u[2], u[1]])
    else:
        axis = np.cross(u, v)

    return quaternion_normalize(np.hstack([axis, w]))
