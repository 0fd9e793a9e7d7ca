"""
This module provides the :class:`ArrayBacked` mixin used by the immutable vector and matrix value types.
"""

from typing import Any, Callable, Iterator, Self

import numpy as np

from orientlib._typing import ARRAY_LIKE, DOUBLE_ARRAY


class ArrayBacked:
    """
    A mixin storing the components of a value type in a read-only numpy array of a fixed shape.

    Subclasses set the class attribute ``_shape`` and call ``super().__init__(components)`` from their own
    constructor.  The components are copied, so later changes to the input never leak into the instance, and the
    stored array is flagged non-writeable.

    The mixin provides component access (:meth:`to_array`, :meth:`to_list`, iteration and the numpy array protocol),
    exact equality and hashing based on the components, :meth:`map` and :attr:`is_valid`.
    """

    _shape: tuple[int, ...] = ()
    """
    The shape of the component array
    """

    # numpy defers binary operators to us (so ``2.0 * vector`` stays a vector) while np.asarray still works
    __array_ufunc__ = None

    def __init__(self, components: ARRAY_LIKE) -> None:
        """
        :param components: The components, in any form numpy can turn into an array with the right number of elements
        :raises ValueError: If the number of components does not match ``_shape``
        """

        data = np.array(components, dtype=np.float64)

        if data.size != int(np.prod(self._shape)):
            raise ValueError(f'{type(self).__name__} needs {int(np.prod(self._shape))} components, got {data.size}')

        data = data.reshape(self._shape)
        data.flags.writeable = False

        self._data: DOUBLE_ARRAY = data

    @classmethod
    def _from_array(cls, data: ARRAY_LIKE) -> Self:
        """
        Build an instance straight from its components without going through the subclass constructor.
        """

        instance = cls.__new__(cls)
        ArrayBacked.__init__(instance, data)
        return instance

    def to_array(self) -> DOUBLE_ARRAY:
        """
        Return the components as a new (writeable) numpy array.
        """

        return self._data.copy()

    def to_list(self) -> list:
        """
        Return the components as (nested) lists of python floats.
        """

        return self._data.tolist()

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> np.ndarray:
        if dtype is None:
            return self.to_array()
        return self._data.astype(dtype)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.ravel().tolist())

    def __len__(self) -> int:
        return self._data.size

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented

        return bool(np.array_equal(self._data, other._data))  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, tuple(self._data.ravel().tolist())))

    @property
    def is_valid(self) -> bool:
        """
        ``True`` if every component is finite.
        """

        return bool(np.isfinite(self._data).all())

    def map(self, fn: Callable[[float], float]) -> Self:
        """
        Apply `fn` to each component and return the result as a new instance.

        :param fn: A function taking and returning a float
        :return: The mapped value
        """

        return self._from_array(np.array([fn(value) for value in self._data.ravel().tolist()]).reshape(self._shape))

    def __repr__(self) -> str:
        return '{0}({1})'.format(type(self).__name__, ', '.join(repr(value) for value in self))
