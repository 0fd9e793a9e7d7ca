"""
Core conversion routines for rotation representations

This module contains the closed form conversions between rotation quaternions, rotation matrices, Euler angles, and
axis-angle pairs (plus rotation vectors).  All routines are implemented purely on numpy arrays (or array like objects).

Euler angles are always handled as an ``(x, y, z)`` triple of angles about the respective axes together with an
:class:`.EulerOrder` which fixes the order the elementary rotations are composed in.
"""

import logging

from typing import Sequence

import numpy as np

from orientlib._typing import ARRAY_LIKE, F_SCALAR_OR_ARRAY, DOUBLE_ARRAY, EULER_ORDER_STRINGS, SCALAR_OR_ARRAY
from orientlib.constants import EPSILON, POLE_PRECISION

from orientlib.core._helpers import (_check_matrix_array_and_shape, _check_quaternion_array_and_shape,
                                     _check_vector_array_and_shape)
from orientlib.core.elementals import skew
from orientlib.core.euler_orders import EulerOrder, coerce_euler_order
from orientlib.core.quaternion_math import quaternion_normalize


__all__ = ['quaternion_to_rotmat', 'quaternion_to_euler', 'quaternion_to_axis_angle', 'quaternion_to_rotvec',
           'rotmat_to_quaternion', 'rotmat_to_euler',
           'euler_to_rotmat', 'euler_to_quaternion',
           'axis_angle_to_quaternion', 'axis_angle_to_rotmat', 'axis_angle_to_euler',
           'rotvec_to_quaternion']


_LOGGER: logging.Logger = logging.getLogger(__name__)


EULER_ANGLES = tuple[F_SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY]
"""
Euler angles about the x, y, and z axes, as floats or as arrays when several rotations were converted.
"""


def quaternion_to_rotmat(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a unit rotation quaternion into its equivalent rotation matrix.

    The matrix is formed from the doubled products of the quaternion components:

    .. math::
        \mathbf{T} = \left[\begin{array}{ccc}
        1-2(q_y^2+q_z^2) & 2(q_xq_y-q_sq_z) & 2(q_xq_z+q_sq_y)\\
        2(q_xq_y+q_sq_z) & 1-2(q_x^2+q_z^2) & 2(q_yq_z-q_sq_x)\\
        2(q_xq_z-q_sq_y) & 2(q_yq_z+q_sq_x) & 1-2(q_x^2+q_y^2)\end{array}\right]

    There are no singularities.  The quaternion is assumed to be normalized; this is not checked.

    This function is vectorized, meaning that you can specify multiple rotation quaternions as the columns of a 4xn
    array, in which case the matrices are stacked down the first axis of the nx3x3 output::

        >>> from orientlib.core import quaternion_to_rotmat
        >>> quaternion_to_rotmat([0, 0, 0, 1])
        array([[1., 0., 0.],
               [0., 1., 0.],
               [0., 0., 1.]])

    :param quaternion: The rotation quaternion(s) to be converted to the rotation matrix(ces)
    :return: a numpy array containing the rotation matrix(ces) corresponding to the input quaternion(s)
    """

    x, y, z, w = _check_quaternion_array_and_shape(quaternion)

    x2 = x + x
    y2 = y + y
    z2 = z + z

    xx, xy, xz = x * x2, x * y2, x * z2
    yy, yz, zz = y * y2, y * z2, z * z2
    wx, wy, wz = w * x2, w * y2, w * z2

    rotation = np.array([[1 - (yy + zz), xy - wz, xz + wy],
                         [xy + wz, 1 - (xx + zz), yz - wx],
                         [xz - wy, yz + wx, 1 - (xx + yy)]])

    return np.moveaxis(rotation, (0, 1), (-2, -1))


def _rotmat_to_quaternion_single(matrix: DOUBLE_ARRAY) -> DOUBLE_ARRAY:

    (m11, m12, m13), (m21, m22, m23), (m31, m32, m33) = matrix

    trace = m11 + m22 + m33

    if trace > 0:
        s = 0.5 / np.sqrt(trace + 1)

        return np.array([(m32 - m23) * s,
                         (m13 - m31) * s,
                         (m21 - m12) * s,
                         0.25 / s])

    # otherwise divide by the largest diagonal term to stay away from small denominators
    if m11 > m22 and m11 > m33:
        s = 2 * np.sqrt(1 + m11 - m22 - m33)

        return np.array([0.25 * s,
                         (m12 + m21) / s,
                         (m13 + m31) / s,
                         (m32 - m23) / s])

    if m22 > m33:
        s = 2 * np.sqrt(1 + m22 - m11 - m33)

        return np.array([(m12 + m21) / s,
                         0.25 * s,
                         (m23 + m32) / s,
                         (m13 - m31) / s])

    s = 2 * np.sqrt(1 + m33 - m11 - m22)

    return np.array([(m13 + m31) / s,
                     (m23 + m32) / s,
                     0.25 * s,
                     (m21 - m12) / s])


def rotmat_to_quaternion(rotation_matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts an orthonormal rotation matrix into a unit rotation quaternion using the trace method.

    When the trace :math:`t=t_{11}+t_{22}+t_{33}` is positive

    .. math::
        s = \frac{1}{2\sqrt{t+1}}\qquad
        \mathbf{q} = \left[\begin{array}{c}(t_{32}-t_{23})s\\(t_{13}-t_{31})s\\(t_{21}-t_{12})s\\
        \frac{1}{4s}\end{array}\right]

    otherwise the largest diagonal element :math:`t_{ii}` is used and the remaining components come from sums and
    differences of the off diagonal elements divided by :math:`2\sqrt{1+t_{ii}-t_{jj}-t_{kk}}`.  The branching keeps
    every denominator away from zero.

    Either quaternion of the pair :math:`\pm\mathbf{q}` may be returned.

    This function is vectorized over a stack of matrices down the first axis (nx3x3), in which case the quaternions
    are returned as the columns of a 4xn array.

    :param rotation_matrix: The rotation matrix(ces) to convert
    :return: the rotation quaternion(s)
    """

    rotation_matrix = _check_matrix_array_and_shape(rotation_matrix)

    if rotation_matrix.ndim == 2:
        return _rotmat_to_quaternion_single(rotation_matrix)

    return np.array([_rotmat_to_quaternion_single(matrix) for matrix in rotation_matrix.reshape(-1, 3, 3)]).T


def _off_pole(element: DOUBLE_ARRAY, precision: float) -> DOUBLE_ARRAY:
    # the middle angle's sine is within precision of +/-1 on the pole
    off = np.abs(element) + precision < 1

    if not np.all(off):
        _LOGGER.debug('Euler extraction at a pole, the third angle is set to 0')

    return off


def rotmat_to_euler(matrix: ARRAY_LIKE,
                    order: EulerOrder | EULER_ORDER_STRINGS = EulerOrder.XYZ,
                    precision: float = POLE_PRECISION) -> EULER_ANGLES:
    r"""
    This function extracts the Euler angles about x, y, and z from a rotation matrix for the given axis order.

    The middle axis of the order is found first from the matrix element that holds its sine alone, as
    :math:`\text{sin}^{-1}` of that element clamped to :math:`[-1, 1]` (rounding can push it just outside).  The two
    outer angles are then recovered from :math:`\text{tan}^{-1}` of off diagonal pairs.

    When the clamped element is within `precision` of :math:`\pm 1` the matrix is at a pole (gimbal lock) and only the
    sum or difference of the outer angles is observable.  In that case the last angle of the order is set to 0 and the
    first one is recovered from a different element pair, so the returned angles still rebuild the same matrix.

    For instance for the XYZ order (:math:`\mathbf{R}_x\mathbf{R}_y\mathbf{R}_z`)

    .. math::
        y = \text{sin}^{-1}(t_{13})\\
        x = \text{tan}^{-1}\left(\frac{-t_{23}}{t_{33}}\right)\qquad
        z = \text{tan}^{-1}\left(\frac{-t_{12}}{t_{11}}\right)

    and at the pole :math:`x = \text{tan}^{-1}(t_{32}/t_{22})`, :math:`z = 0`.

    This function is vectorized, therefore you can input matrix as a nx3x3 stack of rotation matrices down the first
    axis and each angle will be returned as an array.

    :param matrix: The rotation matrix(ces) to convert to euler angles.  They are assumed to be unscaled rotations.
    :param order: The order the elementary rotations are composed in
    :param precision: How close to :math:`\pm 1` the middle element has to be to be treated as a pole
    :return: The angles about x, y, and z, in that order, in radians
    :raises ValueError: If `order` is not one of the six supported orders
    """

    order = coerce_euler_order(order)

    matrix = _check_matrix_array_and_shape(matrix)

    m11, m12, m13 = matrix[..., 0, 0], matrix[..., 0, 1], matrix[..., 0, 2]
    m21, m22, m23 = matrix[..., 1, 0], matrix[..., 1, 1], matrix[..., 1, 2]
    m31, m32, m33 = matrix[..., 2, 0], matrix[..., 2, 1], matrix[..., 2, 2]

    if order is EulerOrder.XYZ:
        y = np.arcsin(np.clip(m13, -1, 1))
        regular = _off_pole(m13, precision)
        x = np.where(regular, np.arctan2(-m23, m33), np.arctan2(m32, m22))
        z = np.where(regular, np.arctan2(-m12, m11), 0.0)

    elif order is EulerOrder.YXZ:
        x = np.arcsin(-np.clip(m23, -1, 1))
        regular = _off_pole(m23, precision)
        y = np.where(regular, np.arctan2(m13, m33), np.arctan2(-m31, m11))
        z = np.where(regular, np.arctan2(m21, m22), 0.0)

    elif order is EulerOrder.ZXY:
        x = np.arcsin(np.clip(m32, -1, 1))
        regular = _off_pole(m32, precision)
        y = np.where(regular, np.arctan2(-m31, m33), 0.0)
        z = np.where(regular, np.arctan2(-m12, m22), np.arctan2(m21, m11))

    elif order is EulerOrder.ZYX:
        y = np.arcsin(-np.clip(m31, -1, 1))
        regular = _off_pole(m31, precision)
        x = np.where(regular, np.arctan2(m32, m33), 0.0)
        z = np.where(regular, np.arctan2(m21, m11), np.arctan2(-m12, m22))

    elif order is EulerOrder.YZX:
        z = np.arcsin(np.clip(m21, -1, 1))
        regular = _off_pole(m21, precision)
        x = np.where(regular, np.arctan2(-m23, m22), 0.0)
        y = np.where(regular, np.arctan2(-m31, m11), np.arctan2(m13, m33))

    elif order is EulerOrder.XZY:
        z = np.arcsin(-np.clip(m12, -1, 1))
        regular = _off_pole(m12, precision)
        x = np.where(regular, np.arctan2(m32, m22), np.arctan2(-m23, m33))
        y = np.where(regular, np.arctan2(m13, m11), 0.0)

    else:
        raise ValueError(f'Unknown Euler order {order!r}')

    if matrix.ndim == 2:
        return float(x), float(y), float(z)

    return x, y, z


def euler_to_rotmat(angles: Sequence[SCALAR_OR_ARRAY] | DOUBLE_ARRAY,
                    order: EulerOrder | EULER_ORDER_STRINGS = EulerOrder.XYZ) -> DOUBLE_ARRAY:
    r"""
    This function builds the rotation matrix for Euler angles about x, y, and z composed in the given order.

    The product of the three elementary rotations is written out in closed form for each order rather than formed by
    matrix multiplication.  For an order ``ABC`` the result equals
    :math:`\mathbf{R}_A(a)\mathbf{R}_B(b)\mathbf{R}_C(c)`, so for instance::

        >>> from orientlib.core import euler_to_rotmat, rot_x, rot_y, rot_z
        >>> np.allclose(euler_to_rotmat([0.1, 0.2, 0.3], 'zyx'), rot_z(0.3) @ rot_y(0.2) @ rot_x(0.1))
        True

    Each angle may be an array, in which case the matrices are stacked down the first axis.

    :param angles: The angles about x, y, and z in radians (always in that order, independent of `order`)
    :param order: The order to compose the rotations in
    :return: The rotation matrix(ces)
    :raises ValueError: When ``order`` is not one of the six supported orders
    """

    order = coerce_euler_order(order)

    x, y, z = _check_vector_array_and_shape(angles)

    cx, sx = np.cos(x), np.sin(x)
    cy, sy = np.cos(y), np.sin(y)
    cz, sz = np.cos(z), np.sin(z)

    if order is EulerOrder.XYZ:
        cxcz, cxsz, sxcz, sxsz = cx * cz, cx * sz, sx * cz, sx * sz

        rotation = [[cy * cz, -cy * sz, sy],
                    [cxsz + sxcz * sy, cxcz - sxsz * sy, -sx * cy],
                    [sxsz - cxcz * sy, sxcz + cxsz * sy, cx * cy]]

    elif order is EulerOrder.YXZ:
        cycz, cysz, sycz, sysz = cy * cz, cy * sz, sy * cz, sy * sz

        rotation = [[cycz + sysz * sx, sycz * sx - cysz, cx * sy],
                    [cx * sz, cx * cz, -sx],
                    [cysz * sx - sycz, sysz + cycz * sx, cx * cy]]

    elif order is EulerOrder.ZXY:
        cycz, cysz, sycz, sysz = cy * cz, cy * sz, sy * cz, sy * sz

        rotation = [[cycz - sysz * sx, -cx * sz, sycz + cysz * sx],
                    [cysz + sycz * sx, cx * cz, sysz - cycz * sx],
                    [-cx * sy, sx, cx * cy]]

    elif order is EulerOrder.ZYX:
        cxcz, cxsz, sxcz, sxsz = cx * cz, cx * sz, sx * cz, sx * sz

        rotation = [[cy * cz, sxcz * sy - cxsz, cxcz * sy + sxsz],
                    [cy * sz, sxsz * sy + cxcz, cxsz * sy - sxcz],
                    [-sy, sx * cy, cx * cy]]

    elif order is EulerOrder.YZX:
        cxcy, cxsy, sxcy, sxsy = cx * cy, cx * sy, sx * cy, sx * sy

        rotation = [[cy * cz, sxsy - cxcy * sz, sxcy * sz + cxsy],
                    [sz, cx * cz, -sx * cz],
                    [-sy * cz, cxsy * sz + sxcy, cxcy - sxsy * sz]]

    elif order is EulerOrder.XZY:
        cxcy, cxsy, sxcy, sxsy = cx * cy, cx * sy, sx * cy, sx * sy

        rotation = [[cy * cz, -sz, sy * cz],
                    [cxcy * sz + sxsy, cx * cz, cxsy * sz - sxcy],
                    [sxcy * sz - cxsy, sx * cz, sxsy * sz + cxcy]]

    else:
        raise ValueError(f'Unknown Euler order {order!r}')

    # broadcast so that scalar entries line up with any array valued angles
    rotation = np.array(np.broadcast_arrays(*(element for row in rotation for element in row)))

    return np.moveaxis(rotation.reshape((3, 3) + rotation.shape[1:]), (0, 1), (-2, -1))


def euler_to_quaternion(angles: Sequence[SCALAR_OR_ARRAY] | DOUBLE_ARRAY,
                        order: EulerOrder | EULER_ORDER_STRINGS = EulerOrder.XYZ) -> DOUBLE_ARRAY:
    r"""
    This function converts Euler angles about x, y, and z into a unit rotation quaternion.

    The quaternion is built directly from the half angle sines and cosines
    (:math:`c_x=\text{cos}\frac{x}{2}`, :math:`s_x=\text{sin}\frac{x}{2}`, ...) with one sign pattern per order,
    which is the closed form of the product of the three elementary quaternions.  For XYZ

    .. math::
        \mathbf{q}=\left[\begin{array}{c}
        s_xc_yc_z+c_xs_ys_z\\ c_xs_yc_z-s_xc_ys_z\\ c_xc_ys_z+s_xs_yc_z\\ c_xc_yc_z-s_xs_ys_z
        \end{array}\right]

    Each angle may be an array, in which case the quaternions are returned as columns.

    :param angles: The angles about x, y, and z in radians
    :param order: the order the rotations are composed in
    :returns: The rotation quaternion(s)
    :raises ValueError: When ``order`` is not one of the six supported orders
    """

    order = coerce_euler_order(order)

    x, y, z = _check_vector_array_and_shape(angles)

    cx, cy, cz = np.cos(x / 2), np.cos(y / 2), np.cos(z / 2)
    sx, sy, sz = np.sin(x / 2), np.sin(y / 2), np.sin(z / 2)

    if order is EulerOrder.XYZ:
        quaternion = [sx * cy * cz + cx * sy * sz,
                      cx * sy * cz - sx * cy * sz,
                      cx * cy * sz + sx * sy * cz,
                      cx * cy * cz - sx * sy * sz]

    elif order is EulerOrder.YXZ:
        quaternion = [sx * cy * cz + cx * sy * sz,
                      cx * sy * cz - sx * cy * sz,
                      cx * cy * sz - sx * sy * cz,
                      cx * cy * cz + sx * sy * sz]

    elif order is EulerOrder.ZXY:
        quaternion = [sx * cy * cz - cx * sy * sz,
                      cx * sy * cz + sx * cy * sz,
                      cx * cy * sz + sx * sy * cz,
                      cx * cy * cz - sx * sy * sz]

    elif order is EulerOrder.ZYX:
        quaternion = [sx * cy * cz - cx * sy * sz,
                      cx * sy * cz + sx * cy * sz,
                      cx * cy * sz - sx * sy * cz,
                      cx * cy * cz + sx * sy * sz]

    elif order is EulerOrder.YZX:
        quaternion = [sx * cy * cz + cx * sy * sz,
                      cx * sy * cz + sx * cy * sz,
                      cx * cy * sz - sx * sy * cz,
                      cx * cy * cz - sx * sy * sz]

    elif order is EulerOrder.XZY:
        quaternion = [sx * cy * cz - cx * sy * sz,
                      cx * sy * cz - sx * cy * sz,
                      cx * cy * sz + sx * sy * cz,
                      cx * cy * cz + sx * sy * sz]

    else:
        raise ValueError(f'Unknown Euler order {order!r}')

    return np.array(quaternion)


def quaternion_to_euler(quaternion: ARRAY_LIKE) -> EULER_ANGLES:
    """
    This function converts a unit rotation quaternion to XYZ Euler angles.

    The quaternion is converted to a matrix with :func:`quaternion_to_rotmat` and the angles are extracted with
    :func:`rotmat_to_euler`.  Other orders have to be extracted from the matrix directly.

    :param quaternion: The quaternion(s) to be converted to euler angles
    :return: The angles about x, y, and z for the XYZ order
    """

    return rotmat_to_euler(quaternion_to_rotmat(quaternion), EulerOrder.XYZ)


def quaternion_to_axis_angle(quaternion: ARRAY_LIKE, precision: float = EPSILON) -> tuple[DOUBLE_ARRAY, float]:
    r"""
    This function converts a unit rotation quaternion into a rotation axis and angle.

    .. math::
        \theta = 2\text{cos}^{-1}(q_s)\qquad
        \hat{\mathbf{x}} = \frac{\mathbf{q}_v}{\sqrt{1-q_s^2}}

    If the magnitude of the scalar part exceeds 1 (only possible through rounding on a quaternion that should be
    normalized) the quaternion is normalized first.  When :math:`\sqrt{1-q_s^2}` is not larger than `precision` the
    angle is (nearly) 0 or :math:`2\pi`, the axis is meaningless, and ``[1, 0, 0]`` is returned as the axis.

    Only a single quaternion can be converted at a time.

    :param quaternion: The quaternion to convert
    :param precision: The threshold below which the axis is considered indeterminate
    :return: The unit rotation axis and the rotation angle in radians
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    if quaternion.ndim != 1:
        raise ValueError('Only a single quaternion can be converted at a time')

    if abs(quaternion[-1]) > 1:
        quaternion = quaternion_normalize(quaternion)

    scalar = np.clip(quaternion[-1], -1, 1)

    angle = 2 * np.arccos(scalar)

    s = np.sqrt(1 - scalar * scalar)

    if s > precision:
        axis = quaternion[:3] / s
    else:
        _LOGGER.debug('rotation angle is nearly 0, using [1, 0, 0] as the axis')
        axis = np.array([1.0, 0.0, 0.0])

    return axis, float(angle)


def quaternion_to_rotvec(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a unit rotation quaternion into a rotation vector :math:`\theta\hat{\mathbf{x}}`.

    The identity quaternion gives the zero vector.

    :param quaternion: the rotation quaternion to be converted
    :return: The rotation vector
    """

    axis, angle = quaternion_to_axis_angle(quaternion)

    return angle * axis


def axis_angle_to_quaternion(axis: ARRAY_LIKE, angle: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation axis and angle into a rotation quaternion.

    .. math::
        \mathbf{q} = \left[\begin{array}{c} \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    The axis is expected to be of unit length; it is used as given.  Several axes can be converted at once by giving
    them as the columns of a 3xn array with n angles.

    :param axis: The rotation axis(es)
    :param angle: The rotation angle(s) in radians
    :return: the rotation quaternion(s)
    """

    axis = _check_vector_array_and_shape(axis)

    half_angle = np.asarray(angle, dtype=np.float64) / 2

    return np.concatenate([axis * np.sin(half_angle), [np.cos(half_angle)]], axis=0)


def axis_angle_to_rotmat(axis: ARRAY_LIKE, angle: float) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation axis and angle into a rotation matrix using the Rodrigues formula

    .. math::
        \mathbf{T} = \text{cos}(\theta)\mathbf{I}_{3\times 3}+\text{sin}(\theta)\left[\hat{\mathbf{x}}\times\right]+
        (1-\text{cos}(\theta))\hat{\mathbf{x}}\hat{\mathbf{x}}^T

    where :math:`\left[\bullet\times\right]` is the skew symmetric cross product matrix (see :func:`.skew`).

    Unlike :func:`axis_angle_to_quaternion` the axis is normalized first.  A zero axis is left as is.

    :param axis: The rotation axis
    :param angle: The rotation angle in radians
    :return: The rotation matrix
    """

    axis = _check_vector_array_and_shape(axis, return_copy=True)

    length = np.linalg.norm(axis)

    if length > 0:
        axis /= length

    ctheta = np.cos(angle)

    return ctheta * np.eye(3) + np.sin(angle) * skew(axis) + (1 - ctheta) * np.outer(axis, axis)


def axis_angle_to_euler(axis: ARRAY_LIKE, angle: float,
                        order: EulerOrder | EULER_ORDER_STRINGS = EulerOrder.XYZ,
                        precision: float = POLE_PRECISION) -> EULER_ANGLES:
    """
    This function converts a rotation axis and angle into Euler angles about x, y, and z for the given order.

    This is done through :func:`axis_angle_to_rotmat` followed by :func:`rotmat_to_euler`.

    :param axis: The rotation axis
    :param angle: The rotation angle in radians
    :param order: the order of the Euler angles
    :param precision: the pole detection precision passed to :func:`rotmat_to_euler`
    :returns: The angles about x, y, and z
    """

    return rotmat_to_euler(axis_angle_to_rotmat(axis, angle), order=order, precision=precision)


def rotvec_to_quaternion(rot_vec: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts rotation vector(s) :math:`\mathbf{v}=\theta\hat{\mathbf{x}}` into rotation quaternion(s).

    The rotation angle is the length of the vector and the axis its direction.  Vectors shorter than 1e-15 give the
    identity quaternion.  Several vectors can be converted at once as the columns of a 3xn array.

    :param rot_vec: The rotation vector(s)
    :return: the rotation quaternion(s)
    """

    rot_vec = _check_vector_array_and_shape(rot_vec)

    theta = np.linalg.norm(rot_vec, axis=0)

    # tiny angles keep their (vanishing) direction rather than dividing by ~0
    safe_theta = np.where(theta < 1e-15, 1.0, theta)

    return axis_angle_to_quaternion(rot_vec / safe_theta, theta)
