"""Configuration defaults for fastgraph components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from fastgraph.types.base import IdWidth, Orientation


@dataclass
class GraphConfig:
    """Defaults applied when a builder is created without explicit options."""

    # Width of vertex identifiers (bounds the vertex count)
    vertex_width: IdWidth = IdWidth.U32

    # Width of raw edge identifiers (bounds twice the edge count)
    edge_width: IdWidth = IdWidth.USIZE

    orientation: Orientation = Orientation.UNDIRECTED

    def builder_kwargs(
        self,
        vertex_width: Optional[IdWidth] = None,
        edge_width: Optional[IdWidth] = None,
        orientation: Optional[Orientation] = None,
    ) -> Dict[str, Any]:
        """Resolve builder options, filling ``None`` entries from this config."""
        return {
            "vertex_width": self.vertex_width if vertex_width is None else vertex_width,
            "edge_width": self.edge_width if edge_width is None else edge_width,
            "orientation": self.orientation if orientation is None else orientation,
        }


# Global configuration instance
GRAPH_CONFIG = GraphConfig()
