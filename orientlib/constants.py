"""
Numeric constants shared across orientlib.
"""

import numpy as np


TOLERANCE: float = 1e-6
"""
The default euclidean distance below which two points are considered coincident.
"""

EPSILON: float = 1e-10
"""
The default threshold used to decide whether two floating point values are the same or whether a quantity is
degenerate.
"""

POLE_PRECISION: float = 1e-15
"""
The default threshold used when extracting Euler angles to decide whether the middle axis sits on a pole (gimbal lock).
"""

MACHINE_EPSILON: float = float(np.finfo(np.float64).eps)
"""
The spacing between 1 and the next representable double.
"""

PI: float = np.pi

HALFPI: float = np.pi / 2

TWOPI: float = 2 * np.pi

DEG2RAD: float = np.pi / 180
"""
Multiply an angle in degrees by this to get radians.
"""

RAD2DEG: float = 180 / np.pi
"""
Multiply an angle in radians by this to get degrees.
"""
