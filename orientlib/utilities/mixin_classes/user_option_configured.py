"""
This module provides the :class:`UserOptionConfigured` mixin class which lets a class be configured from a
:class:`.UserOptions` dataclass and later be returned to that configuration.

Example:
    Basic usage of the UserOptionConfigured mixin::

        from dataclasses import dataclass

        from orientlib.utilities.options import UserOptions
        from orientlib.utilities.mixin_classes import UserOptionConfigured

        @dataclass
        class ScalerOptions(UserOptions):
            factor: float = 2.0

        class Scaler(UserOptionConfigured[ScalerOptions], ScalerOptions):
            def __init__(self, options: ScalerOptions | None = None):
                super().__init__(ScalerOptions, options=options)

        scaler = Scaler()
        scaler.factor = 3.0  # make a change
        scaler.reset_settings()  # back to 2.0

.. Note::
    The :class:`UserOptionConfigured` class should come first in the inheritance order so that its ``__init__`` is
    the one called.
"""

from copy import deepcopy

from typing import Generic, TypeVar

from orientlib.utilities.options import UserOptions


OptionsT = TypeVar("OptionsT", bound=UserOptions)
"""
Type variable bound to UserOptions
"""


class UserOptionConfigured(Generic[OptionsT]):
    """
    Mixin class providing UserOptions based configuration with the ability to reset.

    On initialization every field of the options is copied onto the instance as an attribute and a copy of the options
    is kept in :attr:`original_options`.  :meth:`reset_settings` applies that copy again, undoing any changes made to
    the attributes since.

    To use this mixin, subclass it with the :class:`.UserOptions` subclass as the type parameter and also inherit from
    the options class itself so that the attributes are declared::

        class RotationConverter(UserOptionConfigured[RotationConverterOptions], RotationConverterOptions):
            def __init__(self, options: RotationConverterOptions | None = None):
                super().__init__(RotationConverterOptions, options=options)

    .. Warning::
        If options are not provided during initialization the default options of `options_type` are used.
    """

    def __init__(self, options_type: type[OptionsT], *args, options: OptionsT | None = None, **kwargs) -> None:
        """
        :param options_type: The type of the :class:`.UserOptions` to use
        :param options: An optional preconfigured instance of `options_type`
        """

        super().__init__(*args, **kwargs)

        if options is None:
            options = options_type()

        options.apply_options(self)

        self._original_options: OptionsT = deepcopy(options)
        """
        The configuration this instance was created with
        """

    def reset_settings(self) -> None:
        """
        Resets the instance to the options it was originally initialized with.
        """

        self._original_options.apply_options(self)

    @property
    def original_options(self) -> OptionsT:
        """
        The options used during initialization.

        .. Warning::
            Modifying the returned object changes what :meth:`reset_settings` restores.
        """
        return self._original_options
