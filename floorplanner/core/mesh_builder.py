"""Unified wall mesh: every wall extruded into one vertex-welded solid."""

from __future__ import annotations
import logging
import math

from floorplanner.models import (
    Point2D, WallEdge, WallGraph, WallMesh, direction_from_points,
)
from floorplanner.core.primitives import unit_direction


logger = logging.getLogger(__name__)

MIN_WALL_LENGTH = 1e-9
VERTEX_PRECISION = 2


class _MeshAccumulator:
    """Growing vertex/index buffers with vertices welded by quantized position."""

    def __init__(self, precision: int) -> None:
        self.precision = precision
        self.vertices: list[float] = []
        self.indices: list[int] = []
        self._lookup: dict[tuple[float, float, float], int] = {}

    def vertex(self, x: float, y: float, elevation: float) -> int:
        """Index of the vertex at sketch (x, y) and `elevation`, creating it if new."""
        p = self.precision
        key = (round(x, p) + 0.0, round(y, p) + 0.0, round(elevation, p) + 0.0)
        index = self._lookup.get(key)
        if index is None:
            index = len(self._lookup)
            self._lookup[key] = index
            # Y-up render space: sketch y becomes depth
            self.vertices.extend((x, elevation, y))
        return index

    def triangle(self, a: int, b: int, c: int) -> None:
        self.indices.extend((a, b, c))

    def normals(self) -> list[float]:
        """Area-weighted vertex normals."""
        acc = [0.0] * len(self.vertices)
        v = self.vertices
        for i in range(0, len(self.indices), 3):
            a, b, c = (self.indices[i] * 3, self.indices[i + 1] * 3, self.indices[i + 2] * 3)
            e1 = (v[b] - v[a], v[b + 1] - v[a + 1], v[b + 2] - v[a + 2])
            e2 = (v[c] - v[a], v[c + 1] - v[a + 1], v[c + 2] - v[a + 2])
            n = (
                e1[1] * e2[2] - e1[2] * e2[1],
                e1[2] * e2[0] - e1[0] * e2[2],
                e1[0] * e2[1] - e1[1] * e2[0],
            )
            for base in (a, b, c):
                acc[base] += n[0]
                acc[base + 1] += n[1]
                acc[base + 2] += n[2]

        for i in range(0, len(acc), 3):
            ln = math.sqrt(acc[i] ** 2 + acc[i + 1] ** 2 + acc[i + 2] ** 2)
            if ln > 1e-12:
                acc[i] /= ln
                acc[i + 1] /= ln
                acc[i + 2] /= ln
            else:
                acc[i] = acc[i + 1] = acc[i + 2] = 0.0
        return acc


class WallMeshBuilder:
    """
    Extrudes every wall edge between its mitered corners.

    Edges are processed in id order and vertices are welded across the
    whole floorplan, so the same graph and corner map always give the same
    buffers, and adjoining walls share vertices at their corners.
    """

    def __init__(self, vertex_precision: int = VERTEX_PRECISION) -> None:
        self.vertex_precision = vertex_precision

    def build(self, graph: WallGraph, corners: dict[str, Point2D]) -> WallMesh:
        mesh = _MeshAccumulator(self.vertex_precision)
        skipped = 0

        for edge_id in sorted(graph.edges):
            edge = graph.edges[edge_id]
            raw_start = graph.nodes[edge.start_key].position
            raw_end = graph.nodes[edge.end_key].position
            start = corners.get(edge.start_key, raw_start)
            end = corners.get(edge.end_key, raw_end)
            if not self._is_extrudable(edge, raw_start, raw_end, start, end):
                skipped += 1
            else:
                self._extrude(mesh, edge, start, end)

        result = WallMesh(
            vertices=mesh.vertices,
            indices=mesh.indices,
            normals=mesh.normals(),
        )
        logger.debug(
            "Built wall mesh for %d edges (%d skipped): %d vertices, %d triangles",
            graph.edge_count, skipped, result.vertex_count, result.triangle_count,
        )
        return result

    def _is_extrudable(
        self, edge: WallEdge,
        raw_start: Point2D, raw_end: Point2D, start: Point2D, end: Point2D,
    ) -> bool:
        """False when the mitered span is empty or runs against the wall."""
        if start.distance_to(end) < MIN_WALL_LENGTH:
            logger.debug("Wall %s has no length between its corners, skipped", edge.id)
            return False
        # Insets of a wall shorter than its thickness cross over each other
        along = direction_from_points(raw_start, raw_end).dot(direction_from_points(start, end))
        if along <= 0:
            logger.debug("Wall %s corners cross over, skipped", edge.id)
            return False
        return True

    def _extrude(
        self, mesh: _MeshAccumulator, edge: WallEdge, start: Point2D, end: Point2D,
    ) -> None:
        side = unit_direction(start, end).perpendicular() * (edge.thickness / 2)
        h = edge.height

        # Footprint corners: L/R of the centerline at each end
        sl = (start.x - side.x, start.y - side.y)
        sr = (start.x + side.x, start.y + side.y)
        el = (end.x - side.x, end.y - side.y)
        er = (end.x + side.x, end.y + side.y)

        sbl = mesh.vertex(*sl, 0.0)
        sbr = mesh.vertex(*sr, 0.0)
        ebr = mesh.vertex(*er, 0.0)
        ebl = mesh.vertex(*el, 0.0)
        stl = mesh.vertex(*sl, h)
        str_ = mesh.vertex(*sr, h)
        etr = mesh.vertex(*er, h)
        etl = mesh.vertex(*el, h)

        # Bottom
        mesh.triangle(sbl, ebr, sbr)
        mesh.triangle(sbl, ebl, ebr)
        # Top
        mesh.triangle(stl, str_, etr)
        mesh.triangle(stl, etr, etl)
        # Left side
        mesh.triangle(sbl, etl, ebl)
        mesh.triangle(sbl, stl, etl)
        # Right side
        mesh.triangle(sbr, ebr, etr)
        mesh.triangle(sbr, etr, str_)
        # Start cap
        mesh.triangle(sbl, sbr, str_)
        mesh.triangle(sbl, str_, stl)
        # End cap
        mesh.triangle(ebl, etr, ebr)
        mesh.triangle(ebl, etl, etr)
