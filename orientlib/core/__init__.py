"""
This module contains the fundamental numpy routines for rotation calculations.  It has no dependencies on the value
types in :mod:`orientlib` to avoid circular imports.  All functions here operate on plain arrays and can be used as
building blocks for the higher level representations and conversions.
"""

import orientlib.core.conversions
import orientlib.core.elementals
import orientlib.core.euler_orders
import orientlib.core.quaternion_math

from orientlib.core.conversions import (quaternion_to_rotmat, quaternion_to_euler, quaternion_to_axis_angle,
                                        quaternion_to_rotvec, rotmat_to_quaternion, rotmat_to_euler,
                                        euler_to_rotmat, euler_to_quaternion,
                                        axis_angle_to_quaternion, axis_angle_to_rotmat, axis_angle_to_euler,
                                        rotvec_to_quaternion)

from orientlib.core.elementals import rot_x, rot_y, rot_z, rot_axis, skew

from orientlib.core.euler_orders import EulerOrder, coerce_euler_order

from orientlib.core.quaternion_math import (quaternion_normalize, quaternion_conjugate, quaternion_dot,
                                            quaternion_multiplication, rotate_vector, nlerp, slerp,
                                            quaternion_from_two_vectors)

__all__ = ['quaternion_to_rotmat', 'quaternion_to_euler', 'quaternion_to_axis_angle', 'quaternion_to_rotvec',
           'rotmat_to_quaternion', 'rotmat_to_euler',
           'euler_to_rotmat', 'euler_to_quaternion',
           'axis_angle_to_quaternion', 'axis_angle_to_rotmat', 'axis_angle_to_euler',
           'rotvec_to_quaternion',
           'rot_x', 'rot_y', 'rot_z', 'rot_axis', 'skew',
           'EulerOrder', 'coerce_euler_order',
           'quaternion_normalize', 'quaternion_conjugate', 'quaternion_dot', 'quaternion_multiplication',
           'rotate_vector', 'nlerp', 'slerp', 'quaternion_from_two_vectors']
