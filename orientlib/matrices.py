r"""
This module provides the immutable 2x2, 3x3, and 4x4 matrix value types.

Matrices are constructed from their elements in row-major order, or from a single nested sequence (or array)::

    >>> from orientlib import Mat2
    >>> Mat2(1, 2, 3, 4) == Mat2([[1, 2], [3, 4]])
    True

With no arguments the zero matrix is built; use :meth:`identity` for the identity.  Element :math:`m_{ij}` (row
:math:`i`, column :math:`j`, both starting from 1) is available as the ``mij`` property, while :meth:`row` and
:meth:`col` take 0 based indices.

For products, :meth:`mul` (and the ``@`` operator) compute :math:`\mathbf{A}\mathbf{B}` for ``A.mul(B)`` and
:meth:`permul` computes :math:`\mathbf{B}\mathbf{A}`.  ``mul_vec*`` multiplies a column vector on the right
(:math:`\mathbf{M}\mathbf{v}`) and ``permul_vec*`` a row vector on the left (:math:`\mathbf{v}^T\mathbf{M}`).

The 3x3 matrix doubles as the rotation matrix type and converts to and from the other rotation representations.  The
4x4 matrix is used as an affine transform with the translation in the last column.
"""

from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING, Any, Self

import numpy as np

from orientlib._typing import EULER_ORDER_STRINGS
from orientlib.constants import EPSILON
from orientlib.core import (EulerOrder, axis_angle_to_rotmat, euler_to_rotmat, quaternion_to_rotmat, rot_x, rot_y,
                            rot_z)
from orientlib.utilities.mixin_classes import ArrayBacked
from orientlib.vectors import Vec2, Vec3, Vec4

if TYPE_CHECKING:
    from orientlib.axis_angle import AxisAngle
    from orientlib.euler import Euler
    from orientlib.quaternion import Quat


__all__ = ['Mat2', 'Mat3', 'Mat4']


def _element(row: int, column: int) -> property:

    def getter(self: '_Matrix') -> float:
        return float(self._data[row, column])

    getter.__doc__ = f'The element in row {row + 1}, column {column + 1}.'

    return property(getter)


class _Matrix(ArrayBacked, metaclass=ABCMeta):
    """
    Operations shared by all matrix sizes.
    """

    _shape = (0, 0)

    _vector_type: type = Vec2
    """
    The vector type rows and columns are returned as
    """

    def __init__(self, *elements: Any):
        if not elements:
            components: Any = np.zeros(self._shape)
        elif len(elements) == 1:
            components = elements[0]
        else:
            components = elements

        super().__init__(components)

    @property
    def size(self) -> int:
        """
        The number of rows (and columns).
        """

        return self._shape[0]

    @abstractmethod
    def det(self) -> float:
        """
        The determinant of the matrix.
        """

    @abstractmethod
    def inv(self) -> Self | None:
        """
        The inverse of the matrix, or ``None`` when the matrix is singular.
        """

    def transpose(self) -> Self:
        return self._from_array(self._data.T)

    def trace(self) -> float:
        return float(np.trace(self._data))

    def mul(self, other: Self) -> Self:
        """
        The matrix product with `other` on the right.
        """

        return self._from_array(self._data @ other._data)

    def permul(self, other: Self) -> Self:
        """
        The matrix product with `other` on the left.
        """

        return self._from_array(other._data @ self._data)

    def scale(self, scalar: float) -> Self:
        return self._from_array(self._data * scalar)

    def _check_index(self, index: int, kind: str) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f'Expecting 0 <= {kind} <= {self.size - 1}, got {index}')

    def col(self, index: int) -> Any:
        """
        The column with 0 based `index` as a vector.

        :raises IndexError: when `index` is out of range
        """

        self._check_index(index, 'column')

        return self._vector_type._from_array(self._data[:, index])

    def row(self, index: int) -> Any:
        """
        The row with 0 based `index` as a vector.

        :raises IndexError: when `index` is out of range
        """

        self._check_index(index, 'row')

        return self._vector_type._from_array(self._data[index])

    def with_col(self, index: int, vector: Any) -> Self:
        """
        A copy of this matrix with column `index` replaced by `vector`.

        :raises IndexError: when `index` is out of range
        """

        self._check_index(index, 'column')

        data = self.to_array()
        data[:, index] = np.asarray(vector, dtype=np.float64)

        return self._from_array(data)

    def with_row(self, index: int, vector: Any) -> Self:
        """
        A copy of this matrix with row `index` replaced by `vector`.

        :raises IndexError: when `index` is out of range
        """

        self._check_index(index, 'row')

        data = self.to_array()
        data[index] = np.asarray(vector, dtype=np.float64)

        return self._from_array(data)

    def equals(self, other: Self, precision: float = EPSILON) -> bool:
        """
        Approximate equality: ``True`` when every element differs from the corresponding element of `other` by less
        than `precision`.
        """

        return bool((np.abs(self._data - other._data) < precision).all())

    def __matmul__(self, other: Any) -> Self:
        if isinstance(other, type(self)):
            return self.mul(other)
        return NotImplemented

    @classmethod
    def identity(cls) -> Self:
        return cls._from_array(np.eye(cls._shape[0]))


class Mat2(_Matrix):
    """
    An immutable 2x2 matrix.
    """

    _shape = (2, 2)
    _vector_type = Vec2

    m11 = _element(0, 0)
    m12 = _element(0, 1)
    m21 = _element(1, 0)
    m22 = _element(1, 1)

    def det(self) -> float:
        return self.m11 * self.m22 - self.m21 * self.m12

    def inv(self) -> 'Mat2 | None':
        """
        The inverse matrix, or ``None`` if the determinant is exactly 0.
        """

        det = self.det()

        if det == 0:
            return None

        det_inv = 1 / det

        return Mat2(det_inv * self.m22, -det_inv * self.m12,
                    -det_inv * self.m21, det_inv * self.m11)

    def mul_vec2(self, vector: Vec2) -> Vec2:
        return Vec2._from_array(self._data @ vector._data)

    def permul_vec2(self, vector: Vec2) -> Vec2:
        return Vec2._from_array(vector._data @ self._data)


class Mat3(_Matrix):
    """
    An immutable 3x3 matrix, also used to represent rotations.

    As a rotation, :meth:`mul_vec3` rotates a vector and the product ``A @ B`` applies ``B`` first.
    """

    _shape = (3, 3)
    _vector_type = Vec3

    m11 = _element(0, 0)
    m12 = _element(0, 1)
    m13 = _element(0, 2)
    m21 = _element(1, 0)
    m22 = _element(1, 1)
    m23 = _element(1, 2)
    m31 = _element(2, 0)
    m32 = _element(2, 1)
    m33 = _element(2, 2)

    def det(self) -> float:
        return (self.m11 * self.m22 * self.m33 +
                self.m12 * self.m23 * self.m31 +
                self.m13 * self.m21 * self.m32 -
                self.m11 * self.m23 * self.m32 -
                self.m12 * self.m21 * self.m33 -
                self.m13 * self.m22 * self.m31)

    def inv(self) -> 'Mat3 | None':
        """
        The inverse matrix from the adjugate, or ``None`` if the determinant is exactly 0.
        """

        det = self.det()

        if det == 0:
            return None

        m11, m12, m13 = self.m11, self.m12, self.m13
        m21, m22, m23 = self.m21, self.m22, self.m23
        m31, m32, m33 = self.m31, self.m32, self.m33

        adjugate = [m22 * m33 - m23 * m32, m13 * m32 - m12 * m33, m12 * m23 - m13 * m22,
                    m23 * m31 - m21 * m33, m11 * m33 - m13 * m31, m13 * m21 - m11 * m23,
                    m21 * m32 - m22 * m31, m12 * m31 - m11 * m32, m11 * m22 - m12 * m21]

        return Mat3._from_array(np.array(adjugate) / det)

    def mul_vec3(self, vector: Vec3) -> Vec3:
        return Vec3._from_array(self._data @ vector._data)

    def permul_vec3(self, vector: Vec3) -> Vec3:
        return Vec3._from_array(vector._data @ self._data)

    def to_euler(self, order: EulerOrder | EULER_ORDER_STRINGS = EulerOrder.XYZ,
                 precision: float = EPSILON) -> 'Euler':
        """
        Extract the Euler angles of this rotation matrix.

        Note that the default `precision` here is the general :data:`.EPSILON`, looser than the default of
        :meth:`.Euler.from_mat3`, so matrices very close to a pole take the pole branch.

        :param order: The order to extract the angles for
        :param precision: The pole detection threshold
        :return: The Euler angles
        """

        from orientlib.euler import Euler

        return Euler.from_mat3(self, order=order, precision=precision)

    def to_quat(self) -> 'Quat':
        from orientlib.quaternion import Quat

        return Quat.from_mat3(self)

    @classmethod
    def from_quat(cls, quat: 'Quat') -> 'Mat3':
        """
        The rotation matrix of a unit quaternion.  The identity quaternion gives exactly the identity matrix.
        """

        return cls._from_array(quaternion_to_rotmat(quat._data))

    @classmethod
    def from_euler(cls, euler: 'Euler') -> 'Mat3':
        """
        The rotation matrix of Euler angles, using the closed form for the angles' order.
        """

        return cls._from_array(euler_to_rotmat((euler.x, euler.y, euler.z), euler.order))

    @classmethod
    def from_axis_angle(cls, axis_angle: 'AxisAngle') -> 'Mat3':
        """
        The rotation matrix of an axis-angle pair, normalizing the axis first.
        """

        return cls._from_array(axis_angle_to_rotmat(axis_angle.axis._data, axis_angle.angle))

    @classmethod
    def rotation_x(cls, angle: float) -> 'Mat3':
        return cls._from_array(rot_x(angle))

    @classmethod
    def rotation_y(cls, angle: float) -> 'Mat3':
        return cls._from_array(rot_y(angle))

    @classmethod
    def rotation_z(cls, angle: float) -> 'Mat3':
        return cls._from_array(rot_z(angle))


class Mat4(_Matrix):
    """
    An immutable 4x4 matrix, used as an affine transform.

    The upper left 3x3 block holds the rotation (and scale) and the last column the translation.
    """

    _shape = (4, 4)
    _vector_type = Vec4

    m11 = _element(0, 0)
    m12 = _element(0, 1)
    m13 = _element(0, 2)
    m14 = _element(0, 3)
    m21 = _element(1, 0)
    m22 = _element(1, 1)
    m23 = _element(1, 2)
    m24 = _element(1, 3)
    m31 = _element(2, 0)
    m32 = _element(2, 1)
    m33 = _element(2, 2)
    m34 = _element(2, 3)
    m41 = _element(3, 0)
    m42 = _element(3, 1)
    m43 = _element(3, 2)
    m44 = _element(3, 3)

    def _minors(self) -> dict[str, float]:
        # 2x2 minors keyed by 0 based column pair: a from rows 3 and 4, b from rows 2 and 4, c from rows 2 and 3
        d = self._data

        def minor(r1: int, r2: int, c1: int, c2: int) -> float:
            return float(d[r1, c1] * d[r2, c2] - d[r1, c2] * d[r2, c1])

        return {'a23': minor(2, 3, 2, 3), 'a13': minor(2, 3, 1, 3), 'a12': minor(2, 3, 1, 2),
                'a03': minor(2, 3, 0, 3), 'a02': minor(2, 3, 0, 2), 'a01': minor(2, 3, 0, 1),
                'b23': minor(1, 3, 2, 3), 'b13': minor(1, 3, 1, 3), 'b12': minor(1, 3, 1, 2),
                'b03': minor(1, 3, 0, 3), 'b02': minor(1, 3, 0, 2), 'b01': minor(1, 3, 0, 1),
                'c23': minor(1, 2, 2, 3), 'c13': minor(1, 2, 1, 3), 'c12': minor(1, 2, 1, 2),
                'c03': minor(1, 2, 0, 3), 'c02': minor(1, 2, 0, 2), 'c01': minor(1, 2, 0, 1)}

    def det(self) -> float:
        """
        The determinant by cofactor expansion along the first row, using 2x2 minors of the last two rows.
        """

        a = self._minors()

        return (self.m11 * (self.m22 * a['a23'] - self.m23 * a['a13'] + self.m24 * a['a12']) -
                self.m12 * (self.m21 * a['a23'] - self.m23 * a['a03'] + self.m24 * a['a02']) +
                self.m13 * (self.m21 * a['a13'] - self.m22 * a['a03'] + self.m24 * a['a01']) -
                self.m14 * (self.m21 * a['a12'] - self.m22 * a['a02'] + self.m23 * a['a01']))

    def inv(self) -> 'Mat4 | None':
        """
        The inverse matrix from the cofactors, or ``None`` if the determinant is exactly 0.
        """

        det = self.det()

        if det == 0:
            return None

        m = self._minors()

        m11, m12, m13, m14 = self.m11, self.m12, self.m13, self.m14
        m21, m22, m23, m24 = self.m21, self.m22, self.m23, self.m24

        adjugate = [
            m22 * m['a23'] - m23 * m['a13'] + m24 * m['a12'],
            -(m12 * m['a23'] - m13 * m['a13'] + m14 * m['a12']),
            m12 * m['b23'] - m13 * m['b13'] + m14 * m['b12'],
            -(m12 * m['c23'] - m13 * m['c13'] + m14 * m['c12']),

            -(m21 * m['a23'] - m23 * m['a03'] + m24 * m['a02']),
            m11 * m['a23'] - m13 * m['a03'] + m14 * m['a02'],
            -(m11 * m['b23'] - m13 * m['b03'] + m14 * m['b02']),
            m11 * m['c23'] - m13 * m['c03'] + m14 * m['c02'],

            m21 * m['a13'] - m22 * m['a03'] + m24 * m['a01'],
            -(m11 * m['a13'] - m12 * m['a03'] + m14 * m['a01']),
            m11 * m['b13'] - m12 * m['b03'] + m14 * m['b01'],
            -(m11 * m['c13'] - m12 * m['c03'] + m14 * m['c01']),

            -(m21 * m['a12'] - m22 * m['a02'] + m23 * m['a01']),
            m11 * m['a12'] - m12 * m['a02'] + m13 * m['a01'],
            -(m11 * m['b12'] - m12 * m['b02'] + m13 * m['b01']),
            m11 * m['c12'] - m12 * m['c02'] + m13 * m['c01'],
        ]

        return Mat4._from_array(np.array(adjugate) / det)

    def mul_vec4(self, vector: Vec4) -> Vec4:
        return Vec4._from_array(self._data @ vector._data)

    def permul_vec4(self, vector: Vec4) -> Vec4:
        return Vec4._from_array(vector._data @ self._data)

    def transform_vec3(self, vector: Vec3) -> Vec3:
        """
        Apply this transform to the point `vector`, treating it as ``(x, y, z, 1)`` and dividing by the resulting w.
        """

        return vector.permul_mat4(self)

    def rotation_part(self) -> Mat3:
        """
        The upper left 3x3 block.
        """

        return Mat3._from_array(self._data[:3, :3])

    def with_rotation(self, rotation: Mat3) -> 'Mat4':
        """
        A copy of this matrix with the upper left 3x3 block replaced by `rotation`.
        """

        data = self.to_array()
        data[:3, :3] = rotation._data

        return Mat4._from_array(data)

    def with_scale(self, scale: Vec3) -> 'Mat4':
        """
        A copy of this matrix with the first three diagonal elements replaced by `scale`.
        """

        data = self.to_array()
        data[[0, 1, 2], [0, 1, 2]] = scale._data

        return Mat4._from_array(data)

    def with_translation(self, translation: Vec3) -> 'Mat4':
        """
        A copy of this matrix with the first three elements of the last column replaced by `translation`.
        """

        data = self.to_array()
        data[:3, 3] = translation._data

        return Mat4._from_array(data)

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float) -> 'Mat4':
        """
        The rigid transform rotating by `angle` radians about `axis` with no translation.
        """

        return cls.identity().with_rotation(Mat3._from_array(axis_angle_to_rotmat(axis._data, angle)))

    @classmethod
    def from_euler(cls, euler: 'Euler') -> 'Mat4':
        """
        The rigid transform rotating by `euler` with no translation.
        """

        return cls.identity().with_rotation(Mat3.from_euler(euler))

    @classmethod
    def from_axes(cls, direction_x: Vec3, direction_y: Vec3, direction_z: Vec3, position: Vec3) -> 'Mat4':
        """
        The transform whose first three columns are the given axis directions and whose last column is `position`.

        This maps coordinates expressed in the frame spanned by the axes and centered at `position` into the frame the
        axes and position are expressed in.
        """

        data = np.eye(4)
        data[:3, 0] = direction_x._data
        data[:3, 1] = direction_y._data
        data[:3, 2] = direction_z._data
        data[:3, 3] = position._data

        return cls._from_array(data)
