"""
This module provides the immutable :class:`AxisAngle` rotation value type, a rotation axis paired with the angle to
rotate about it.
"""

from typing import Sequence

from orientlib._typing import EULER_ORDER_STRINGS
from orientlib.constants import EPSILON
from orientlib.core import EulerOrder, quaternion_to_axis_angle, rotvec_to_quaternion
from orientlib.euler import Euler
from orientlib.matrices import Mat3
from orientlib.quaternion import Quat
from orientlib.utilities.mixin_classes import AttributePrinting
from orientlib.vectors import Vec3


__all__ = ['AxisAngle']


class AxisAngle(AttributePrinting):
    """
    An immutable rotation of :attr:`angle` radians (right handed) about :attr:`axis`.

    The axis is stored as given and is not normalized, so callers should supply a unit vector where a unit axis is
    expected (:meth:`to_quat` in particular uses it as is).
    """

    def __init__(self, axis: Vec3 | Sequence[float], angle: float):
        """
        :param axis: The rotation axis, as a :class:`.Vec3` or a sequence of 3 numbers
        :param angle: The rotation angle in radians
        """

        self._axis = axis if isinstance(axis, Vec3) else Vec3(*axis)
        self._angle = float(angle)

    @property
    def axis(self) -> Vec3:
        return self._axis

    @property
    def angle(self) -> float:
        return self._angle

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AxisAngle):
            return NotImplemented

        return self._axis == other.axis and self._angle == other.angle

    def __hash__(self) -> int:
        return hash((self._axis, self._angle))

    def equals(self, other: 'AxisAngle', precision: float = EPSILON) -> bool:
        """
        ``True`` when the axes are within `precision` of each other (euclidean distance) and so are the angles.

        The same rotation can be described by different pairs (for instance a negated axis and angle), which do not
        compare equal here; compare the quaternions or matrices to test for the same rotation.
        """

        return self._axis.equals(other.axis, precision) and abs(self._angle - other.angle) < precision

    def to_quat(self) -> Quat:
        return Quat.from_axis_angle(self)

    def to_mat3(self) -> Mat3:
        return Mat3.from_axis_angle(self)

    def to_euler(self, order: EulerOrder | EULER_ORDER_STRINGS = EulerOrder.XYZ) -> Euler:
        return Euler.from_mat3(self.to_mat3(), order)

    def to_rotation_vector(self) -> Vec3:
        """
        The rotation vector, the axis scaled by the angle.
        """

        return self._axis.scale(self._angle)

    @classmethod
    def from_quat(cls, quat: Quat, precision: float = EPSILON) -> 'AxisAngle':
        """
        The axis and angle of a unit quaternion.

        If the rotation angle is so small that the axis is undefined (the sine of the half angle is not larger than
        `precision`) the axis ``(1, 0, 0)`` is used.  A quaternion with a scalar part above 1 is normalized first.

        :param quat: The rotation quaternion
        :param precision: The threshold for an undefined axis
        :return: The axis-angle pair with the angle in [0, 2 pi]
        """

        axis, angle = quaternion_to_axis_angle(quat._data, precision)

        return cls(Vec3._from_array(axis), angle)

    @classmethod
    def from_mat3(cls, matrix: Mat3, precision: float = EPSILON) -> 'AxisAngle':
        """
        The axis and angle of an orthonormal rotation matrix, going through the quaternion.
        """

        return cls.from_quat(Quat.from_mat3(matrix), precision)

    @classmethod
    def from_euler(cls, euler: Euler, precision: float = EPSILON) -> 'AxisAngle':
        return cls.from_quat(Quat.from_euler(euler), precision)

    @classmethod
    def from_rotation_vector(cls, vector: Vec3 | Sequence[float]) -> 'AxisAngle':
        """
        The axis and angle of a rotation vector (axis scaled by the angle).  The zero vector gives a zero angle about
        ``(1, 0, 0)``.
        """

        if not isinstance(vector, Vec3):
            vector = Vec3(*vector)

        return cls.from_quat(Quat._from_array(rotvec_to_quaternion(vector._data)))
