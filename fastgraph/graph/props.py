"""Dense property maps keyed by vertex or edge identifiers.

A property map pairs a projection ``id -> index`` with a backing store of
fixed length. The length is taken from the graph that created the map and
never changes, so a map must only be indexed by ids of that graph.
"""

from __future__ import annotations

import copy
from typing import Any, Callable, Generic, Hashable, Iterator, List, TypeVar, Union

import numpy as np
from numpy.typing import DTypeLike

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")

Projection = Callable[[Any], int]

_IMMUTABLE = (type(None), bool, int, float, complex, str, bytes, frozenset)


def make_values(value: T, n: int) -> List[T]:
    """Return a list of ``n`` independent copies of ``value``.

    Immutable payloads are shared; anything else is deep-copied per slot so
    that mutating one slot never affects another.
    """
    if isinstance(value, _IMMUTABLE) or (
        isinstance(value, tuple) and all(isinstance(x, _IMMUTABLE) for x in value)
    ):
        return [value] * n
    return [copy.deepcopy(value) for _ in range(n)]


class PropertyMap(Generic[K, T]):
    """Fixed-size mapping from graph ids to payload values.

    Args:
        projection: Maps an id to its dense index in ``[0, len)``.
        values: Backing store; a list or a one-dimensional numpy array.
    """

    __slots__ = ("_projection", "_values")

    def __init__(
        self, projection: Projection, values: Union[List[T], np.ndarray]
    ) -> None:
        self._projection = projection
        self._values = values

    @classmethod
    def filled(cls, projection: Projection, value: T, n: int) -> "PropertyMap[K, T]":
        """Create a list-backed map with ``n`` slots holding ``value``."""
        return cls(projection, make_values(value, n))

    @classmethod
    def array(
        cls, projection: Projection, fill: Any, n: int, dtype: DTypeLike = None
    ) -> "PropertyMap[K, Any]":
        """Create a numpy-backed map with ``n`` slots holding ``fill``."""
        return cls(projection, np.full(n, fill, dtype=dtype))

    def _index(self, key: K) -> int:
        i = self._projection(key)
        if not 0 <= i < len(self._values):
            raise IndexError(
                f"Id {key!r} projects to index {i}, outside property map of size "
                f"{len(self._values)}"
            )
        return i

    def __getitem__(self, key: K) -> T:
        return self._values[self._index(key)]

    def __setitem__(self, key: K, value: T) -> None:
        self._values[self._index(key)] = value

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the stored values in index order."""
        return iter(self._values)

    @property
    def values(self) -> Union[List[T], np.ndarray]:
        """The backing store, indexed by projected position."""
        return self._values

    @property
    def projection(self) -> Projection:
        return self._projection

    def fill(self, value: T) -> None:
        """Overwrite every slot with ``value`` without reallocating."""
        if isinstance(self._values, np.ndarray):
            self._values.fill(value)
        else:
            self._values[:] = make_values(value, len(self._values))

    def copy(self) -> "PropertyMap[K, T]":
        """Return an independent map with the same projection and contents."""
        if isinstance(self._values, np.ndarray):
            return PropertyMap(self._projection, self._values.copy())
        return PropertyMap(self._projection, copy.deepcopy(self._values))

    def __repr__(self) -> str:
        return f"PropertyMap(size={len(self._values)})"
