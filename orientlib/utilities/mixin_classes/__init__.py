"""
This package contains helpful mixin classes to provide basic functionality throughout orientlib.
"""

from orientlib.utilities.mixin_classes.array_backed import ArrayBacked
from orientlib.utilities.mixin_classes.attribute_printing import AttributePrinting
from orientlib.utilities.mixin_classes.user_option_configured import UserOptionConfigured

__all__ = ["ArrayBacked", "AttributePrinting", "UserOptionConfigured"]
