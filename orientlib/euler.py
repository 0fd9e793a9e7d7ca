r"""
This module provides the immutable :class:`Euler` angle value type.

An :class:`Euler` holds the angles about the x, y, and z axes together with an :class:`.EulerOrder`.  The angles are
always stored per axis; the order only changes how they are composed.  For instance ``Euler(a, b, c, 'ZYX')`` is the
rotation :math:`\mathbf{R}_z(c)\mathbf{R}_y(b)\mathbf{R}_x(a)`.
"""

from typing import TYPE_CHECKING

import numpy as np

from orientlib._typing import DOUBLE_ARRAY, EULER_ORDER_STRINGS
from orientlib.constants import EPSILON, POLE_PRECISION
from orientlib.core import EulerOrder, coerce_euler_order, rotmat_to_euler
from orientlib.matrices import Mat3
from orientlib.quaternion import Quat
from orientlib.utilities.mixin_classes import AttributePrinting
from orientlib.vectors import Vec3

if TYPE_CHECKING:
    from orientlib.axis_angle import AxisAngle


__all__ = ['Euler']


class Euler(AttributePrinting):
    """
    Immutable Euler angles in radians with their composition order.

    Two instances compare equal under ``==`` when their angles and order match exactly; :meth:`equals` allows a
    tolerance on the angles (the order must still match).
    """

    Orders = EulerOrder
    """
    Alias of :class:`.EulerOrder` for convenient access
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0,
                 order: EulerOrder | EULER_ORDER_STRINGS = EulerOrder.XYZ):
        """
        :param x: The angle about the x axis in radians
        :param y: The angle about the y axis in radians
        :param z: The angle about the z axis in radians
        :param order: The order the elementary rotations are composed in
        :raises ValueError: If `order` is not a valid Euler order
        """

        self._x = float(x)
        self._y = float(y)
        self._z = float(z)
        self._order = coerce_euler_order(order)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    @property
    def order(self) -> EulerOrder:
        return self._order

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Euler):
            return NotImplemented

        return (self._x, self._y, self._z, self._order) == (other.x, other.y, other.z, other.order)

    def __hash__(self) -> int:
        return hash((self._x, self._y, self._z, self._order))

    def equals(self, other: 'Euler', precision: float = EPSILON) -> bool:
        """
        ``True`` when each angle differs from the one of `other` by less than `precision` and the orders match.

        Angles are compared directly, so angles differing by a full turn are not equal.
        """

        return (abs(self._x - other.x) < precision and
                abs(self._y - other.y) < precision and
                abs(self._z - other.z) < precision and
                self._order is other.order)

    def with_order(self, order: EulerOrder | EULER_ORDER_STRINGS) -> 'Euler':
        """
        The same angles with a different order.  This is generally a different rotation.
        """

        return Euler(self._x, self._y, self._z, order)

    def to_array(self) -> DOUBLE_ARRAY:
        """
        The angles as a numpy array ``[x, y, z]``.
        """

        return np.array([self._x, self._y, self._z])

    def to_list(self) -> list[float]:
        return [self._x, self._y, self._z]

    def to_vec3(self) -> Vec3:
        return Vec3(self._x, self._y, self._z)

    def to_mat3(self) -> Mat3:
        return Mat3.from_euler(self)

    def to_quat(self) -> Quat:
        return Quat.from_euler(self)

    @classmethod
    def from_mat3(cls, matrix: Mat3, order: EulerOrder | EULER_ORDER_STRINGS = EulerOrder.XYZ,
                  precision: float = POLE_PRECISION) -> 'Euler':
        """
        Extract the Euler angles of the orthonormal rotation matrix `matrix` for `order`.

        When the middle angle is within `precision` of a pole (gimbal lock) only one combination of the outer angles is
        observable; the last angle of the order is then set to 0.  See :func:`.rotmat_to_euler`.

        :param matrix: The rotation matrix
        :param order: The order to extract the angles for
        :param precision: The pole detection threshold
        :return: The Euler angles
        :raises ValueError: If `order` is not a valid Euler order
        """

        order = coerce_euler_order(order)

        return cls(*rotmat_to_euler(matrix._data, order, precision), order=order)

    @classmethod
    def from_quat(cls, quat: Quat) -> 'Euler':
        """
        The XYZ Euler angles of a unit quaternion.
        """

        return cls.from_mat3(Mat3.from_quat(quat))

    @classmethod
    def from_axis_angle(cls, axis_angle: 'AxisAngle') -> 'Euler':
        """
        The XYZ Euler angles of an axis-angle pair.
        """

        return cls.from_mat3(Mat3.from_axis_angle(axis_angle))

    @classmethod
    def from_vec3(cls, vector: Vec3, order: EulerOrder | EULER_ORDER_STRINGS = EulerOrder.XYZ) -> 'Euler':
        """
        Angles taken from the components of `vector`.
        """

        return cls(vector.x, vector.y, vector.z, order)
