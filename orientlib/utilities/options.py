"""
This module provides the :class:`UserOptions` base class for the option dataclasses used to configure orientlib
classes.
"""

from dataclasses import dataclass, fields

from typing import Any

from abc import ABCMeta


@dataclass
class UserOptions(metaclass=ABCMeta):
    """
    This is an abstract class used to create a dataclass of user options.

    These options are used to set defaults for parameters set inside the associated class for the options.

    Example:
        :class:`.RotationConverterOptions` contains the default options for the :class:`.RotationConverter` class.

    Custom objects built from this abstract class should follow the naming scheme <callable_name>Options and be passed
    as the `options` keyword argument for callable_name.__init__().

    To apply options to your class, the :meth:`UserOptions.apply_options` method should be invoked.

    for example:
        >>> @dataclass
        >>> class ExampleOptions(UserOptions):
        >>>     example_var: int = 1234

        >>> class Example:
        >>>     def __init__(self, options=None):
        >>>         if options is None:
        >>>             options = ExampleOptions()
        >>>         options.apply_options(self)  # apply the options as attributes of self
        >>> my_example = Example()
        >>> print(my_example.example_var)
        ...     1234
    """

    def override_options(self) -> None:
        """
        This method is used for special cases when certain options should be overwritten before they are applied.
        """
        pass

    def apply_options(self, target: object) -> None:
        """
        Update the options as attributes of the object class

        :param target: the instance that we are to update
        """
        target.__dict__.update(self.options_dict)

    @property
    def options_dict(self) -> dict[str, Any]:
        """
        The options held by the dataclass as a dictionary mapping field name to value.

        Only the dataclass fields are included; internal attributes and methods are ignored.
        """

        self.override_options()
        return {field.name: getattr(self, field.name) for field in fields(self)}
