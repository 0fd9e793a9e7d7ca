r"""
This module provides the immutable :class:`Quat` rotation quaternion value type.

Quaternions are stored as :math:`[x, y, z, w]` with the scalar part :math:`w` last.  The ``*`` operator is the Hamilton
product, so that ``(q1 * q2).rotate_vec3(v) == q1.rotate_vec3(q2.rotate_vec3(v))`` (up to rounding).
"""

from typing import TYPE_CHECKING, Any

import numpy as np

from orientlib.constants import EPSILON
from orientlib.core import (axis_angle_to_quaternion, euler_to_quaternion, nlerp, quaternion_conjugate,
                            quaternion_from_two_vectors, quaternion_multiplication, quaternion_normalize, rotate_vector,
                            rotmat_to_quaternion, slerp)
from orientlib.matrices import Mat3
from orientlib.utilities.mixin_classes import ArrayBacked
from orientlib.vectors import Vec3

if TYPE_CHECKING:
    from orientlib.axis_angle import AxisAngle
    from orientlib.euler import Euler


__all__ = ['Quat']


class Quat(ArrayBacked):
    """
    An immutable quaternion, normally a unit quaternion representing a rotation.

    The default constructor gives the identity rotation.  Note that the quaternions :math:`\\mathbf{q}` and
    :math:`-\\mathbf{q}` represent the same rotation but are not equal under ``==`` or :meth:`equals`.

    Conversions to and from the other rotation representations are available through the ``to_*`` and ``from_*``
    methods::

        >>> import numpy as np
        >>> from orientlib import Quat, AxisAngle, Vec3
        >>> q = Quat.from_axis_angle(AxisAngle(Vec3(0, 0, 1), np.pi / 2))
        >>> q.rotate_vec3(Vec3(1, 0, 0)).equals(Vec3(0, 1, 0))
        True
    """

    _shape = (4,)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 1.0):
        super().__init__((x, y, z, w))

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    @property
    def w(self) -> float:
        return float(self._data[3])

    @property
    def length(self) -> float:
        return float(np.sqrt(self.length_sq))

    @property
    def length_sq(self) -> float:
        return float(self._data @ self._data)

    def conj(self) -> 'Quat':
        """
        The conjugate, which is the inverse rotation for a unit quaternion.
        """

        return Quat._from_array(quaternion_conjugate(self._data))

    def dot(self, other: 'Quat') -> float:
        return float(self._data @ other._data)

    def mul(self, other: 'Quat') -> 'Quat':
        """
        The Hamilton product ``self * other``.
        """

        return Quat._from_array(quaternion_multiplication(self._data, other._data))

    def permul(self, other: 'Quat') -> 'Quat':
        """
        The Hamilton product ``other * self``.
        """

        return Quat._from_array(quaternion_multiplication(other._data, self._data))

    def normalize(self, precision: float = EPSILON) -> 'Quat':
        """
        Scale to unit length.  A quaternion shorter than `precision` becomes the identity instead.
        """

        return Quat._from_array(quaternion_normalize(self._data, precision))

    def scale(self, scalar: float) -> 'Quat':
        return Quat._from_array(self._data * scalar)

    def slerp(self, other: 'Quat', t: float) -> 'Quat':
        """
        Spherical linear interpolation from this quaternion (`t` = 0) to `other` (`t` = 1) along the shorter arc.

        See :func:`.slerp` for the handling of the special cases.
        """

        return Quat._from_array(slerp(self._data, other._data, t))

    def nlerp(self, other: 'Quat', t: float) -> 'Quat':
        """
        Normalized linear interpolation from this quaternion (`t` = 0) to `other` (`t` = 1).
        """

        return Quat._from_array(nlerp(self._data, other._data, t))

    def rotate_vec3(self, vector: Vec3) -> Vec3:
        """
        Rotate `vector` by this (unit) quaternion.
        """

        return Vec3._from_array(rotate_vector(self._data, vector._data))

    def equals(self, other: 'Quat', precision: float = EPSILON) -> bool:
        """
        Approximate equality: ``True`` when every component differs from the one of `other` by less than `precision`.
        """

        return bool((np.abs(self._data - other._data) < precision).all())

    def __mul__(self, other: Any) -> 'Quat':
        if isinstance(other, Quat):
            return self.mul(other)
        return NotImplemented

    def to_vec3(self) -> Vec3:
        """
        The vector part ``(x, y, z)``.
        """

        return Vec3(self.x, self.y, self.z)

    def to_mat3(self) -> Mat3:
        return Mat3.from_quat(self)

    def to_euler(self) -> 'Euler':
        """
        The XYZ Euler angles of this rotation.
        """

        from orientlib.euler import Euler

        return Euler.from_quat(self)

    def to_axis_angle(self, precision: float = EPSILON) -> 'AxisAngle':
        from orientlib.axis_angle import AxisAngle

        return AxisAngle.from_quat(self, precision)

    @classmethod
    def identity(cls) -> 'Quat':
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_euler(cls, euler: 'Euler') -> 'Quat':
        return cls._from_array(euler_to_quaternion((euler.x, euler.y, euler.z), euler.order))

    @classmethod
    def from_axis_angle(cls, axis_angle: 'AxisAngle') -> 'Quat':
        """
        The quaternion of an axis-angle pair.  The axis is used as given, so it should be of unit length.
        """

        return cls._from_array(axis_angle_to_quaternion(axis_angle.axis._data, axis_angle.angle))

    @classmethod
    def from_mat3(cls, matrix: Mat3) -> 'Quat':
        """
        The quaternion of an orthonormal rotation matrix, by the trace method.
        """

        return cls._from_array(rotmat_to_quaternion(matrix._data))

    @classmethod
    def from_two_vectors(cls, u: Vec3, v: Vec3, precision: float = EPSILON) -> 'Quat':
        """
        The shortest arc rotation taking the unit vector `u` onto the unit vector `v`.

        See :func:`.quaternion_from_two_vectors` for the handling of opposite vectors.
        """

        return cls._from_array(quaternion_from_two_vectors(u._data, v._data, precision))
