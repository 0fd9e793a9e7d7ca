"""
This module provides a mixin implementing default __str__ and __repr__ functionality from instance attributes.
"""


class AttributePrinting:
    """
    A mixin class that provides __str__ and __repr__ functionality.

    The class name is printed followed by ``name=value`` for every instance attribute, in the order the attributes
    were set.  Attributes starting with an underscore are reported under their public name when the class exposes a
    property of that name, and are left out otherwise.  Names listed in the class level ``_printing_exclude`` tuple are
    always left out.

    For example::

        >>> class Point(AttributePrinting):
        ...     def __init__(self, x):
        ...         self._x = x
        ...     @property
        ...     def x(self):
        ...         return self._x
        >>> Point(1.5)
        Point(x=1.5)
    """

    _printing_exclude: tuple[str, ...] = ()
    """
    Public attribute names that should never be printed
    """

    def _build_representation(self, attribute_repr: bool) -> str:
        """
        Turn the instance into a string including all of its printable attributes.

        :param attribute_repr: Whether to call repr on attributes instead of str.
        """

        attributes = []
        for attr, value in self.__dict__.items():
            if attr.startswith('_'):
                prop_name = attr.lstrip('_')
                if not isinstance(getattr(type(self), prop_name, None), property):
                    continue
                attr = prop_name
                value = getattr(self, prop_name)

            if attr in self._printing_exclude:
                continue

            text = repr(value) if attribute_repr else str(value)
            attributes.append(f"{attr}={text}".replace('\n', ''))

        return f"{type(self).__name__}({', '.join(attributes)})"

    def __str__(self) -> str:
        """
        :return: A string containing the class name and its attributes.
        """
        return self._build_representation(False)

    def __repr__(self) -> str:
        """
        :return: A string containing the class name and the repr of its attributes.
        """
        return self._build_representation(True)
