"""Explicit optional identifiers.

Algorithms frequently need "no vertex" / "no edge" values, e.g. the parent of
a search-tree root. ``OptionalId`` wraps such values instead of leaking a raw
sentinel integer. When a compact representation is needed (numpy scratch
arrays), ``packed``/``from_packed`` translate to and from the width sentinel.
"""

from __future__ import annotations

from typing import Any, Generic, Optional, TypeVar

from fastgraph.errors import InvalidArgumentError
from fastgraph.types.base import IdWidth

T = TypeVar("T")

_NONE = object()


class OptionalId(Generic[T]):
    """A vertex or edge id that may be absent."""

    __slots__ = ("_value",)

    def __init__(self, value: Any = _NONE) -> None:
        self._value = value

    @classmethod
    def none(cls) -> "OptionalId[T]":
        return cls()

    @classmethod
    def some(cls, value: T) -> "OptionalId[T]":
        if value is None:
            raise InvalidArgumentError("OptionalId.some() requires a value, got None")
        return cls(value)

    @classmethod
    def from_packed(cls, raw: int, width: IdWidth) -> "OptionalId[int]":
        """Decode a raw integer where ``width.sentinel`` means none."""
        raw = int(raw)
        if raw == width.sentinel:
            return cls()
        return cls(raw)

    def packed(self, width: IdWidth) -> int:
        """Encode as a raw integer, mapping none to ``width.sentinel``.

        Raises:
            InvalidArgumentError: If the value is not an int that fits below
                the sentinel of ``width``.
        """
        if self.is_none():
            return width.sentinel
        raw = int(self._value)  # type: ignore[call-overload]
        if not 0 <= raw < width.sentinel:
            raise InvalidArgumentError(
                f"Value {raw} cannot be packed into width {width.name}"
            )
        return raw

    def is_none(self) -> bool:
        return self._value is _NONE

    def is_some(self) -> bool:
        return self._value is not _NONE

    def to_option(self) -> Optional[T]:
        """Return the wrapped value, or ``None`` if absent."""
        return None if self._value is _NONE else self._value

    def eq_some(self, other: T) -> bool:
        """Return True if a value is present and equals ``other``."""
        return self._value is not _NONE and self._value == other

    def unwrap(self) -> T:
        if self._value is _NONE:
            raise InvalidArgumentError("Called unwrap() on an empty OptionalId")
        return self._value

    def unwrap_or(self, default: T) -> T:
        return default if self._value is _NONE else self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OptionalId):
            return NotImplemented
        if self.is_none() or other.is_none():
            return self.is_none() and other.is_none()
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((OptionalId, None if self.is_none() else self._value))

    def __bool__(self) -> bool:
        return self.is_some()

    def __repr__(self) -> str:
        if self.is_none():
            return "OptionalId.none()"
        return f"OptionalId.some({self._value!r})"
