"""Corner mitering: one shared corner point per wall junction.

Every wall treats the shared corner of each of its nodes as its true
endpoint when extruded, so walls of different thickness close up at
junctions without a general polygon-offset solver.

For junctions of three or more walls the corner is the mean of all
pairwise offset-line intersections. That is an accepted approximation:
at very acute angles or 4+-way junctions the point can land outside the
visually expected region.
"""

from __future__ import annotations
import logging
from itertools import combinations

from pydantic import BaseModel

from floorplanner.models import Point2D, Vector2D, WallEdge, WallGraph, WallNode
from floorplanner.core.primitives import line_intersection, unit_direction


logger = logging.getLogger(__name__)

MIN_EDGE_LENGTH = 1e-12


class CornerReport(BaseModel):
    """How each node's corner was derived during one resolve pass."""
    open_ends: int = 0
    junctions: int = 0
    fallbacks: int = 0  # nodes left at their raw position


class CornerMiterResolver:
    """Computes the shared-corner map for a wall graph."""

    def __init__(self) -> None:
        self.report = CornerReport()

    def resolve(self, graph: WallGraph) -> dict[str, Point2D]:
        """Return node key -> shared corner for every node in the graph."""
        self.report = CornerReport()
        corners: dict[str, Point2D] = {}
        for key, node in graph.nodes.items():
            corners[key] = self.compute_shared_corner(graph, node)
        logger.debug(
            "Resolved %d corners (%d open ends, %d junctions, %d fallbacks)",
            len(corners), self.report.open_ends,
            self.report.junctions, self.report.fallbacks,
        )
        return corners

    def compute_shared_corner(self, graph: WallGraph, node: WallNode) -> Point2D:
        directions = self._outward_directions(graph, node)

        if not directions:
            self.report.fallbacks += 1
            return node.position

        if len(directions) == 1:
            # Open end: pull the tip back toward the wall by half its thickness
            edge, direction = directions[0]
            self.report.open_ends += 1
            return node.position.offset(direction, edge.thickness / 2)

        intersections: list[Point2D] = []
        for (e1, d1), (e2, d2) in combinations(directions, 2):
            o1 = node.position.offset(d1.perpendicular(), e1.thickness / 2)
            o2 = node.position.offset(d2.perpendicular(), e2.thickness / 2)
            hit = line_intersection(o1, o1.offset(d1), o2, o2.offset(d2))
            if hit is not None:
                intersections.append(hit)

        if not intersections:
            # All incident walls are collinear
            self.report.fallbacks += 1
            return node.position

        self.report.junctions += 1
        n = len(intersections)
        return Point2D(
            x=sum(p.x for p in intersections) / n,
            y=sum(p.y for p in intersections) / n,
        )

    def _outward_directions(
        self, graph: WallGraph, node: WallNode,
    ) -> list[tuple[WallEdge, Vector2D]]:
        """Unit direction of each usable incident edge, pointing away from the node."""
        result: list[tuple[WallEdge, Vector2D]] = []
        for edge in graph.incident_edges(node.key):
            if graph.is_degenerate(edge):
                continue
            far = graph.nodes[graph.other_key(edge, node.key)].position
            if node.position.distance_to(far) < MIN_EDGE_LENGTH:
                continue
            result.append((edge, unit_direction(node.position, far)))
        return result


def resolve_shared_corners(graph: WallGraph) -> dict[str, Point2D]:
    """Convenience wrapper around CornerMiterResolver."""
    return CornerMiterResolver().resolve(graph)
