"""Identifier types shared by every graph representation."""

from fastgraph.types.base import EdgeId, IdWidth, Orientation, VertexId
from fastgraph.types.optional import OptionalId

__all__ = ["EdgeId", "IdWidth", "OptionalId", "Orientation", "VertexId"]
