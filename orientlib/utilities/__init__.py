"""
This package provides small utilities shared by the rest of orientlib.

The modules in this package each contain detailed information about what they provide/do.  In summary:

* :mod:`.numeric` holds scalar helpers (clamping, random numbers, and the signed angle on an ellipse)
* :mod:`.options` holds the :class:`.UserOptions` dataclass base used to configure classes
* :mod:`.mixin_classes` holds mixins providing printing and option handling
"""

from orientlib.utilities.numeric import clamp, rand_int, rand_float, ellipse_angle
from orientlib.utilities.options import UserOptions

__all__ = ['clamp', 'rand_int', 'rand_float', 'ellipse_angle', 'UserOptions']
