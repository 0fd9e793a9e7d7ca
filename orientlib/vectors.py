"""
This module provides the immutable 2, 3, and 4 dimensional vector value types.

Every operation returns a new vector; the components of an existing vector never change.  Vectors interoperate with
the matrices in :mod:`orientlib.matrices` through the ``mul_mat*`` (row vector times matrix, :math:`\\mathbf{v}^T
\\mathbf{M}`) and ``permul_mat*`` (matrix times column vector, :math:`\\mathbf{M}\\mathbf{v}`) methods.

Example::

    >>> from orientlib import Vec3
    >>> Vec3(1, 0, 0).cross(Vec3(0, 1, 0))
    Vec3(0.0, 0.0, 1.0)
"""

import logging
import numbers

from typing import TYPE_CHECKING, Any, Self, Sequence

import numpy as np

from orientlib.constants import EPSILON
from orientlib.utilities.mixin_classes import ArrayBacked
from orientlib.utilities.numeric import clamp

if TYPE_CHECKING:
    from orientlib.matrices import Mat2, Mat3, Mat4
    from orientlib.quaternion import Quat


__all__ = ['Vec2', 'Vec3', 'Vec4']


_LOGGER: logging.Logger = logging.getLogger(__name__)


class _Vector(ArrayBacked):
    """
    Operations shared by all vector sizes.
    """

    _shape = (0,)

    @property
    def length(self) -> float:
        """
        The euclidean length of the vector.
        """

        return float(np.sqrt(self.length_sq))

    @property
    def length_sq(self) -> float:
        """
        The squared euclidean length of the vector.
        """

        return float(self._data @ self._data)

    def add(self, other: Self) -> Self:
        return self._from_array(self._data + other._data)

    def sub(self, other: Self) -> Self:
        return self._from_array(self._data - other._data)

    def add_scalar(self, scalar: float) -> Self:
        return self._from_array(self._data + scalar)

    def sub_scalar(self, scalar: float) -> Self:
        return self._from_array(self._data - scalar)

    def mul(self, other: Self) -> Self:
        """
        The component-wise (Hadamard) product.
        """

        return self._from_array(self._data * other._data)

    def scale(self, scalar: float) -> Self:
        return self._from_array(self._data * scalar)

    def negate(self) -> Self:
        return self._from_array(-self._data)

    def dot(self, other: Self) -> float:
        return float(self._data @ other._data)

    def distance_to(self, other: Self) -> float:
        return self.sub(other).length

    def distance_sq_to(self, other: Self) -> float:
        return self.sub(other).length_sq

    def angle_to(self, other: Self) -> float:
        """
        The unsigned angle between this vector and `other` in radians.

        If either vector has zero length the angle is undefined and :math:`\\pi/2` is returned.  The cosine is clamped
        to [-1, 1] before the arccosine to absorb rounding.

        :param other: The other vector
        :return: The angle in [0, pi]
        """

        denominator = self.length_sq * other.length_sq

        if denominator == 0:
            return np.pi / 2

        return float(np.arccos(clamp(self.dot(other) / np.sqrt(denominator), -1, 1)))

    def lerp(self, other: Self, scalar: float) -> Self:
        """
        Linearly interpolate from this vector (`scalar` = 0) to `other` (`scalar` = 1).
        """

        return self._from_array(self._data + (other._data - self._data) * scalar)

    def normalize(self) -> Self:
        """
        Scale the vector to unit length.  The zero vector is returned unchanged.
        """

        length = self.length

        if length == 0:
            return self

        return self._from_array(self._data / length)

    def equals(self, other: Self, precision: float = EPSILON) -> bool:
        """
        Approximate equality: ``True`` when the distance between the vectors is less than `precision`.
        """

        return self.distance_to(other) < precision

    def __add__(self, other: Any) -> Self:
        if isinstance(other, type(self)):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other: Any) -> Self:
        if isinstance(other, type(self)):
            return self.sub(other)
        return NotImplemented

    def __neg__(self) -> Self:
        return self.negate()

    def __mul__(self, other: Any) -> Self:
        if isinstance(other, numbers.Real):
            return self.scale(float(other))
        return NotImplemented

    __rmul__ = __mul__

    @classmethod
    def make(cls, values: Any) -> Self | None:
        """
        Build a vector from a sequence of numbers, returning ``None`` instead of raising for unusable input.

        An instance of the class is returned as is.  Otherwise the first components are taken from `values`; if there
        are too few of them, or any of them is not a finite number, ``None`` is returned.

        :param values: The candidate components
        :return: The vector or ``None``
        """

        if isinstance(values, cls):
            return values

        if isinstance(values, (str, bytes)) or not isinstance(values, (Sequence, np.ndarray)):
            return None

        size = cls._shape[0]
        components = list(values)[:size]

        if len(components) < size:
            return None

        for component in components:
            if not isinstance(component, numbers.Real) or not np.isfinite(component):
                return None

        return cls._from_array(components)

    @classmethod
    def random(cls, rng: np.random.Generator | None = None) -> Self:
        """
        A vector with each component drawn uniformly from [0, 1).

        :param rng: The generator to draw from.  A fresh :func:`numpy.random.default_rng` if ``None``
        """

        if rng is None:
            rng = np.random.default_rng()

        return cls._from_array(rng.random(cls._shape[0]))


class Vec2(_Vector):
    """
    An immutable 2 dimensional vector.
    """

    _shape = (2,)

    def __init__(self, x: float = 0.0, y: float = 0.0):
        super().__init__((x, y))

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    def cross(self, other: 'Vec2') -> float:
        """
        The z component of the cross product of the two vectors embedded in the xy plane.
        """

        return self.x * other.y - self.y * other.x

    def colinear_to(self, other: 'Vec2', precision: float = EPSILON) -> bool:
        """
        ``True`` when the 2D cross product is smaller in magnitude than the square root of `precision`.
        """

        return abs(self.cross(other)) < precision ** 0.5

    def orthogonal_to(self, other: 'Vec2', precision: float = EPSILON) -> bool:
        return abs(self.dot(other)) < precision

    def orthogonal_direction(self) -> 'Vec2':
        """
        This vector rotated by +90 degrees, ``(-y, x)``.  Not normalized.
        """

        return Vec2(-self.y, self.x)

    def project_on_line(self, position: 'Vec2', direction: 'Vec2') -> 'Vec2':
        """
        Project this point onto the line through `position` along the unit vector `direction`.

        :param position: A point on the line
        :param direction: The unit direction of the line
        :return: The projected point
        """

        return direction.scale(direction.dot(self.sub(position))).add(position)

    def distance_to_line(self, position: 'Vec2', direction: 'Vec2') -> float:
        """
        The distance from this point to the line through `position` along the unit vector `direction`.
        """

        return self.distance_to(self.project_on_line(position, direction))

    def mul_mat2(self, matrix: 'Mat2') -> 'Vec2':
        return Vec2._from_array(self._data @ matrix._data)

    def permul_mat2(self, matrix: 'Mat2') -> 'Vec2':
        return Vec2._from_array(matrix._data @ self._data)

    def permul_mat3(self, matrix: 'Mat3') -> 'Vec2':
        """
        Transform this point by a 3x3 homogeneous matrix, dividing by the resulting third coordinate.
        """

        homogeneous = matrix._data @ np.append(self._data, 1.0)

        return Vec2._from_array(homogeneous[:2] / homogeneous[2])

    def to_vec3(self) -> 'Vec3':
        """
        The homogeneous form ``(x, y, 1)``.
        """

        return Vec3(self.x, self.y, 1.0)

    @classmethod
    def from_vec3(cls, vector: 'Vec3') -> 'Vec2':
        return cls(vector.x, vector.y)

    @classmethod
    def random_direction(cls, rng: np.random.Generator | None = None) -> 'Vec2':
        """
        A unit vector pointing in a uniformly distributed direction.

        :param rng: The generator to draw from.  A fresh :func:`numpy.random.default_rng` if ``None``
        """

        if rng is None:
            rng = np.random.default_rng()

        theta = rng.uniform(0, 2 * np.pi)

        return cls(np.cos(theta), np.sin(theta))


class Vec3(_Vector):
    """
    An immutable 3 dimensional vector.
    """

    _shape = (3,)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        super().__init__((x, y, z))

    @property
    def x(self) -> float:
        return float(self._data[0])

    @property
    def y(self) -> float:
        return float(self._data[1])

    @property
    def z(self) -> float:
        return float(self._data[2])

    def cross(self, other: 'Vec3') -> 'Vec3':
        return Vec3._from_array(np.cross(self._data, other._data))

    def colinear_to(self, other: 'Vec3', precision: float = EPSILON) -> bool:
        """
        ``True`` when the length of the cross product is smaller than the square root of `precision`.
        """

        return self.cross(other).length < precision ** 0.5

    def orthogonal_to(self, other: 'Vec3', precision: float = EPSILON) -> bool:
        """
        ``True`` when the magnitude of the dot product is smaller than `precision`.
        """

        return abs(self.dot(other)) < precision

    def orthogonal_direction(self, rng: np.random.Generator | None = None) -> 'Vec3':
        """
        A unit vector orthogonal to this one.

        Random directions are drawn until one is found that is not colinear with this vector, and the normalized cross
        product with it is returned.  The result is therefore one of infinitely many valid answers.  Every direction is
        orthogonal to the zero vector, which gets ``[1, 0, 0]``.

        :param rng: The generator to draw from.  A fresh :func:`numpy.random.default_rng` if ``None``
        """

        if self.length == 0:
            _LOGGER.debug('zero vector, using [1, 0, 0] as the orthogonal direction')
            return Vec3(1, 0, 0)

        if rng is None:
            rng = np.random.default_rng()

        # colinearity is judged on the unit vector so that short vectors are not colinear to everything
        unit = self.normalize()

        candidate = Vec3.random_direction(rng)
        while unit.colinear_to(candidate):
            candidate = Vec3.random_direction(rng)

        return unit.cross(candidate).normalize()

    def mul_mat3(self, matrix: 'Mat3') -> 'Vec3':
        return Vec3._from_array(self._data @ matrix._data)

    def permul_mat3(self, matrix: 'Mat3') -> 'Vec3':
        return Vec3._from_array(matrix._data @ self._data)

    def permul_mat4(self, matrix: 'Mat4') -> 'Vec3':
        """
        Transform this point by a 4x4 homogeneous matrix, dividing by the resulting w coordinate.
        """

        homogeneous = matrix._data @ np.append(self._data, 1.0)

        return Vec3._from_array(homogeneous[:3] / homogeneous[3])

    def to_vec2(self) -> Vec2:
        return Vec2(self.x, self.y)

    def to_quat(self) -> 'Quat':
        """
        The quaternion ``(x, y, z, 1)``.  Note that this is not normalized.
        """

        from orientlib.quaternion import Quat

        return Quat(self.x, self.y, self.z, 1.0)

    @classmethod
    def from_vec2(cls, vector: Vec2) -> 'Vec3':
        return cls(vector.x, vector.y, 0.0)

    @classmethod
    def from_vec4(cls, vector: 'Vec4') -> 'Vec3':
        return cls(vector.x, vector.y, vector.z)

    @classmethod
    def random_direction(cls, rng: np.random.Generator | None = None) -> 'Vec3':
        """
        A unit vector pointing in a direction drawn uniformly over the sphere.

        :param rng: The generator to draw from.  A fresh :func:`numpy.random.default_rng` if ``None``
        """

        if rng is None:
            rng = np.random.default_rng()

        u = rng.uniform(-1, 1)
        theta = rng.uniform(0, 2 * np.pi)
        f = np.sqrt(1 - u ** 2)

        return cls(f * np.cos(theta), f * np.sin(theta), u)


class Vec4(_Vector):
    """
    An immutable 4 dimensional vector.
    """

    _shape = (4,)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0):
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

    def cross(self, other: 'Vec4') -> 'Vec4':
        """
        The cross product of the x, y, z parts with w set to 1.
        """

        return Vec4._from_array(np.append(np.cross(self._data[:3], other._data[:3]), 1.0))

    def normalize(self, precision: float = EPSILON) -> 'Vec4':
        """
        Scale the vector to unit length.  Vectors shorter than `precision` are returned unchanged.
        """

        length = self.length

        if length < precision:
            return self

        return Vec4._from_array(self._data / length)

    def mul_mat4(self, matrix: 'Mat4') -> 'Vec4':
        return Vec4._from_array(self._data @ matrix._data)

    def permul_mat4(self, matrix: 'Mat4') -> 'Vec4':
        return Vec4._from_array(matrix._data @ self._data)

    def to_vec3(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    def to_quat(self) -> 'Quat':
        from orientlib.quaternion import Quat

        return Quat(self.x, self.y, self.z, self.w)

    @classmethod
    def from_quat(cls, quat: 'Quat') -> 'Vec4':
        return cls(quat.x, quat.y, quat.z, quat.w)
