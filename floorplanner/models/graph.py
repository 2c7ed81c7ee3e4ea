"""Wall graph models.

Nodes and edges live in two dicts and refer to each other by key/id only,
so a graph is plain data: it serializes as-is and compares by value.
"""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import WallElement
from .geometry import Point2D


class WallNode(BaseModel):
    """A junction where one or more wall endpoints weld together."""
    key: str
    position: Point2D
    edge_ids: list[str] = Field(default_factory=list)  # encounter order

    @property
    def degree(self) -> int:
        return len(self.edge_ids)


class WallEdge(BaseModel):
    """One wall as seen by the graph."""
    id: str
    start_key: str
    end_key: str
    thickness: float
    height: float
    source: WallElement


class WallGraph(BaseModel):
    """Junctions and wall segments built from a flat element collection."""
    nodes: dict[str, WallNode] = Field(default_factory=dict)
    edges: dict[str, WallEdge] = Field(default_factory=dict)

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def incident_edges(self, key: str) -> list[WallEdge]:
        node = self.nodes.get(key)
        if node is None:
            return []
        return [self.edges[eid] for eid in node.edge_ids]

    def other_key(self, edge: WallEdge, key: str) -> str:
        """Key of the edge's endpoint that is not `key`."""
        return edge.end_key if edge.start_key == key else edge.start_key

    def is_degenerate(self, edge: WallEdge) -> bool:
        """True when both ends of the edge welded into the same node."""
        return edge.start_key == edge.end_key
