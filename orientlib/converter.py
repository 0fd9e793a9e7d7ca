"""
This module provides the :class:`RotationConverter`, a configurable front end for turning rotation data of any
supported form into any other.

The converter is configured through :class:`RotationConverterOptions`, following the usual options dataclass pattern::

    >>> from orientlib import RotationConverter, RotationConverterOptions, EulerOrder
    >>> converter = RotationConverter(RotationConverterOptions(euler_order=EulerOrder.ZYX, validate_inputs=True))
    >>> converter.to_quat([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
    Quat(0.0, 0.0, 0.0, 1.0)

Plain arrays are interpreted by their size, the same way throughout: 4 elements are a quaternion ``[x, y, z, w]``, 9
elements a rotation matrix (row-major), and 3 elements a rotation vector (axis scaled by angle).
"""

import logging
import warnings

from dataclasses import dataclass

from typing import Any, Union

import numpy as np

from orientlib._typing import ARRAY_LIKE
from orientlib.axis_angle import AxisAngle
from orientlib.constants import EPSILON, POLE_PRECISION, TOLERANCE
from orientlib.core import EulerOrder, coerce_euler_order
from orientlib.euler import Euler
from orientlib.matrices import Mat3
from orientlib.quaternion import Quat
from orientlib.utilities.mixin_classes import AttributePrinting, UserOptionConfigured
from orientlib.utilities.options import UserOptions


__all__ = ['RotationConverterOptions', 'RotationConverter']


_LOGGER: logging.Logger = logging.getLogger(__name__)


ROTATION_TYPES = Union[Quat, Mat3, Euler, AxisAngle]
"""
The rotation value types the converter understands.
"""


@dataclass
class RotationConverterOptions(UserOptions):
    """
    This dataclass serves as one way to control the settings for the :class:`.RotationConverter` class.

    You can set any of the options on an instance of this dataclass and pass it to the :class:`.RotationConverter`
    class at initialization (or through the method :meth:`.RotationConverter.reset_settings`) to set the settings on
    the class.  This class is the preferred way of setting options on the class due to ease of use in IDEs.
    """

    euler_order: EulerOrder = EulerOrder.XYZ
    """
    The order Euler angles are produced in by :meth:`.RotationConverter.to_euler`.
    """

    precision: float = EPSILON
    """
    The threshold used for degenerate quantities, such as the undefined axis of a zero rotation.
    """

    pole_precision: float = POLE_PRECISION
    """
    The threshold used to detect the gimbal lock pole when extracting Euler angles.
    """

    validate_inputs: bool = False
    """
    Whether to check quaternion inputs for unit length and matrix inputs for being proper rotations.

    Problems are reported with :func:`warnings.warn`; the conversion still proceeds.
    """

    tolerance: float = TOLERANCE
    """
    How far from unit length a quaternion, or from orthonormal a matrix, may be before a validation warning is issued.
    """

    def override_options(self) -> None:
        """
        Coerce a string Euler order into the enumeration.
        """

        self.euler_order = coerce_euler_order(self.euler_order)


class RotationConverter(UserOptionConfigured[RotationConverterOptions], AttributePrinting, RotationConverterOptions):
    """
    This class converts rotation data between the quaternion, rotation matrix, Euler angle, and axis-angle forms.

    Inputs may be any of the rotation value types (:class:`.Quat`, :class:`.Mat3`, :class:`.Euler`,
    :class:`.AxisAngle`) or plain array like data, which is interpreted by :meth:`interpret`.  The conversion methods
    (:meth:`to_quat`, :meth:`to_mat3`, :meth:`to_euler`, :meth:`to_axis_angle`, and :meth:`convert`) use the settings
    of the converter: the Euler order to produce, the precisions, and whether to validate inputs.

    The settings are available as attributes of the instance and can be changed at any time; :meth:`reset_settings`
    restores the options the converter was created with.
    """

    _printing_exclude = ('original_options',)

    def __init__(self, options: RotationConverterOptions | None = None):
        """
        :param options: The options to configure the converter with.  The defaults are used if ``None``
        """

        super().__init__(RotationConverterOptions, options=options)

    def interpret(self, data: ROTATION_TYPES | ARRAY_LIKE) -> ROTATION_TYPES:
        """
        Turn `data` into one of the rotation value types.

        Rotation value types are returned unchanged.  Anything else is converted to a float array and interpreted by
        its total size: 4 is a quaternion ``[x, y, z, w]`` (a :class:`.Quat`), 9 is a rotation matrix in row-major
        order (a :class:`.Mat3`), and 3 is a rotation vector (an :class:`.AxisAngle`).

        When :attr:`validate_inputs` is set, quaternions and matrices are checked (see :meth:`validate`).

        :param data: The rotation data
        :return: The rotation as a value type
        :raises ValueError: If the data cannot be interpreted as a rotation
        """

        if isinstance(data, (Quat, Mat3, Euler, AxisAngle)):
            rotation = data
        else:
            numpy_data = np.asarray(data, dtype=np.float64)

            if numpy_data.size == 4:
                rotation = Quat(*numpy_data.ravel())
            elif numpy_data.size == 9:
                rotation = Mat3(numpy_data.reshape(3, 3))
            elif numpy_data.size == 3:
                rotation = AxisAngle.from_rotation_vector(numpy_data.ravel())
            else:
                raise ValueError(f'Rotation data of size {numpy_data.size} cannot be interpreted.  '
                                 'Expected 4 (quaternion), 9 (rotation matrix), or 3 (rotation vector) elements')

        if self.validate_inputs:
            self.validate(rotation)

        return rotation

    def validate(self, rotation: ROTATION_TYPES) -> bool:
        """
        Check that a quaternion has unit length and that a matrix is a proper rotation (orthonormal, determinant +1).

        Each problem found is reported with :func:`warnings.warn` as a :class:`UserWarning`.  Euler angles and
        axis-angle pairs are always accepted.

        :param rotation: The rotation to check
        :return: ``True`` if no problem was found
        """

        valid = True

        if isinstance(rotation, Quat):
            if abs(rotation.length - 1) > self.tolerance:
                warnings.warn(f'The quaternion is not of unit length (length {rotation.length}).  '
                              'Results may be distorted', UserWarning)
                valid = False

        elif isinstance(rotation, Mat3):
            data = rotation.to_array()

            if not np.allclose(data @ data.T, np.eye(3), atol=self.tolerance, rtol=0):
                warnings.warn('The rotation matrix is not orthonormal.  Results may be distorted', UserWarning)
                valid = False

            if rotation.det() < 0:
                warnings.warn('The rotation matrix contains a reflection (negative determinant)', UserWarning)
                valid = False

        if not valid:
            _LOGGER.debug('validation failed for %r', rotation)

        return valid

    @staticmethod
    def _as_quat(rotation: ROTATION_TYPES) -> Quat:
        if isinstance(rotation, Quat):
            return rotation

        return rotation.to_quat()

    @staticmethod
    def _as_mat3(rotation: ROTATION_TYPES) -> Mat3:
        if isinstance(rotation, Mat3):
            return rotation

        return rotation.to_mat3()

    def to_quat(self, data: ROTATION_TYPES | ARRAY_LIKE) -> Quat:
        """
        Convert `data` to a quaternion.
        """

        return self._as_quat(self.interpret(data))

    def to_mat3(self, data: ROTATION_TYPES | ARRAY_LIKE) -> Mat3:
        """
        Convert `data` to a rotation matrix.
        """

        return self._as_mat3(self.interpret(data))

    def to_euler(self, data: ROTATION_TYPES | ARRAY_LIKE) -> Euler:
        """
        Convert `data` to Euler angles in the configured :attr:`euler_order`.

        Euler inputs already in the configured order are returned as is; any other input goes through the rotation
        matrix, using :attr:`pole_precision` for the gimbal lock test.
        """

        rotation = self.interpret(data)

        order = coerce_euler_order(self.euler_order)

        if isinstance(rotation, Euler) and rotation.order is order:
            return rotation

        return Euler.from_mat3(self._as_mat3(rotation), order, self.pole_precision)

    def to_axis_angle(self, data: ROTATION_TYPES | ARRAY_LIKE) -> AxisAngle:
        """
        Convert `data` to an axis-angle pair, using :attr:`precision` for the undefined axis of a zero rotation.
        """

        rotation = self.interpret(data)

        if isinstance(rotation, AxisAngle):
            return rotation

        return AxisAngle.from_quat(self._as_quat(rotation), self.precision)

    def convert(self, data: ROTATION_TYPES | ARRAY_LIKE, target_type: type) -> Any:
        """
        Convert `data` into the rotation value type `target_type`.

        :param data: The rotation data
        :param target_type: One of :class:`.Quat`, :class:`.Mat3`, :class:`.Euler`, or :class:`.AxisAngle`
        :return: The converted rotation
        :raises TypeError: If `target_type` is not a supported rotation type
        """

        if target_type is Quat:
            return self.to_quat(data)
        elif target_type is Mat3:
            return self.to_mat3(data)
        elif target_type is Euler:
            return self.to_euler(data)
        elif target_type is AxisAngle:
            return self.to_axis_angle(data)

        raise TypeError(f'Cannot convert to {target_type!r}.  Supported targets are Quat, Mat3, Euler, and AxisAngle')
