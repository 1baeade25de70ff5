"""Base identifier aliases and enums for graph representations."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Hashable

import numpy as np

#: A vertex identifier: copyable, equatable, hashable and printable.
VertexId = Hashable

#: An edge identifier, with the same requirements as ``VertexId``.
EdgeId = Hashable


class IdWidth(Enum):
    """Unsigned integer width used to store vertex or edge identifiers.

    The maximum representable value of each width is reserved as the
    "none" sentinel, so a width can address ``max_value`` ids at most.
    """

    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    #: Machine-word unsigned integer.
    USIZE = "usize"

    @property
    def dtype(self) -> np.dtype:
        """Numpy dtype that stores identifiers of this width."""
        return np.dtype(_DTYPES[self])

    @property
    def max_value(self) -> int:
        """Largest representable value; doubles as the sentinel."""
        return int(np.iinfo(self.dtype).max)

    @property
    def sentinel(self) -> int:
        return self.max_value

    def is_valid(self, count: int) -> bool:
        """Return True if ``count`` ids fit strictly below the sentinel."""
        return 0 <= count < self.max_value

    @classmethod
    def from_string(cls, value: str) -> "IdWidth":
        """Parse a width name such as ``"u16"`` or ``"USIZE"``.

        Args:
            value: Case-insensitive width name.

        Returns:
            The corresponding IdWidth member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(w.name for w in cls)
            raise ValueError(
                f"Invalid id width '{value}'. Valid values are: {valid}"
            ) from None


_DTYPES = {
    IdWidth.U8: np.uint8,
    IdWidth.U16: np.uint16,
    IdWidth.U32: np.uint32,
    IdWidth.U64: np.uint64,
    IdWidth.USIZE: np.uintp,
}


class Orientation(IntEnum):
    """Whether an edge's direction carries meaning."""

    #: Either endpoint may act as source; every edge has a reverse.
    UNDIRECTED = 1
    #: Edges run from source to target only; no reverse exists.
    DIRECTED = 2

    @classmethod
    def from_string(cls, value: str) -> "Orientation":
        """Parse an orientation name such as ``"directed"``.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(o.name for o in cls)
            raise ValueError(
                f"Invalid orientation '{value}'. Valid values are: {valid}"
            ) from None
