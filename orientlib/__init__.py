r"""
This package provides immutable 3D math value types (vectors, matrices, and rotations) together with the closed form
conversions between the common rotation representations.

There are a few different rotation representations that are used in this package and their format is described as
follows:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A 4 element rotation quaternion of the form
                   :math:`\mathbf{q}=\left[\begin{array}{c} q_x \\ q_y \\ q_z \\ q_w\end{array}\right]=
                   \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                   \text{cos}(\frac{\theta}{2})\end{array}\right]`
                   where :math:`\hat{\mathbf{x}}` is a 3 element unit vector representing the axis of rotation and
                   :math:`\theta` is the total angle to rotate about that vector.  The scalar part is last.  Note that
                   the rotation represented by :math:`\mathbf{q}` is the same rotation represented by
                   :math:`-\mathbf{q}`.  See :class:`.Quat`.
rotation matrix    A :math:`3\times 3` orthonormal matrix with determinant +1 such that :math:`\mathbf{T}\mathbf{y}`
                   rotates the column vector :math:`\mathbf{y}`.  Rotation matrices uniquely represent a single
                   rotation.  See :class:`.Mat3`.
euler angles       3 angles :math:`x`, :math:`y`, :math:`z` about the unit axes together with one of the 6 axis orders
                   in :class:`.EulerOrder`.  For an order ``ABC`` the rotation matrix is
                   :math:`\mathbf{T}=\mathbf{R}_A(a)\mathbf{R}_B(b)\mathbf{R}_C(c)` where :math:`\mathbf{R}_i(\theta)`
                   is the right handed rotation about axis :math:`i` by :math:`\theta`.  The angles are always stored
                   per axis, independent of the order.  See :class:`.Euler`.
axis-angle         A 3 element axis :math:`\hat{\mathbf{x}}` and an angle :math:`\theta` in radians to rotate about it
                   (right handed).  The rotation vector :math:`\theta\hat{\mathbf{x}}` packs both into one 3 vector.
                   See :class:`.AxisAngle`.
=================  =====================================================================================================

The value types (:class:`.Vec2`, :class:`.Vec3`, :class:`.Vec4`, :class:`.Mat2`, :class:`.Mat3`, :class:`.Mat4`,
:class:`.Quat`, :class:`.Euler`, and :class:`.AxisAngle`) never change once built; every operation returns a new
value.  The array level routines they are built on live in :mod:`orientlib.core` and can be used directly on numpy
arrays, often vectorized over many rotations at once.

Finally, the :class:`.RotationConverter` accepts rotation data in any form (including plain arrays) and converts it to
the requested representation according to its :class:`.RotationConverterOptions`.
"""

import orientlib.core
import orientlib.constants

from orientlib.core import *
from orientlib.constants import EPSILON, POLE_PRECISION, TOLERANCE
from orientlib.vectors import Vec2, Vec3, Vec4
from orientlib.matrices import Mat2, Mat3, Mat4
from orientlib.quaternion import Quat
from orientlib.euler import Euler
from orientlib.axis_angle import AxisAngle
from orientlib.converter import RotationConverter, RotationConverterOptions

__all__ = ['quaternion_to_rotmat', 'quaternion_to_euler', 'quaternion_to_axis_angle', 'quaternion_to_rotvec',
           'rotmat_to_quaternion', 'rotmat_to_euler',
           'euler_to_rotmat', 'euler_to_quaternion',
           'axis_angle_to_quaternion', 'axis_angle_to_rotmat', 'axis_angle_to_euler',
           'rotvec_to_quaternion',
           'rot_x', 'rot_y', 'rot_z', 'rot_axis', 'skew',
           'EulerOrder', 'coerce_euler_order',
           'quaternion_normalize', 'quaternion_conjugate', 'quaternion_dot', 'quaternion_multiplication',
           'rotate_vector', 'nlerp', 'slerp', 'quaternion_from_two_vectors',
           'EPSILON', 'POLE_PRECISION', 'TOLERANCE',
           'Vec2', 'Vec3', 'Vec4', 'Mat2', 'Mat3', 'Mat4', 'Quat', 'Euler', 'AxisAngle',
           'RotationConverter', 'RotationConverterOptions']
