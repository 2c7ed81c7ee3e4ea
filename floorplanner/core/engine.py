"""Main rebuild pipeline: elements -> graph -> corners -> mesh + openings."""

from __future__ import annotations
import logging
from typing import Iterable

from floorplanner.models import (
    EngineParams, FloorplanScene, RebuildContext, WallStroke,
    openings_of, walls_of,
)
from floorplanner.core.graph_builder import WallGraphBuilder
from floorplanner.core.miter import CornerMiterResolver
from floorplanner.core.mesh_builder import WallMeshBuilder
from floorplanner.core.openings import OpeningResolver


logger = logging.getLogger(__name__)


class FloorplanEngine:
    """
    Stateless floorplan rebuilder.

    Takes the full element collection, rebuilds the wall graph, the corner
    map, the unified wall mesh and the opening placements from scratch, and
    returns one FloorplanScene. Inputs are never mutated and nothing is kept
    between calls.
    """

    def __init__(self, params: EngineParams | None = None) -> None:
        self.params = params or EngineParams()
        self.graph_builder = WallGraphBuilder(self.params.weld_precision)
        self.mesh_builder = WallMeshBuilder(self.params.vertex_precision)

    def rebuild(self, elements: Iterable) -> FloorplanScene:
        elements = list(elements)
        context = RebuildContext(
            walls=walls_of(elements),
            openings=openings_of(elements),
            params=self.params,
        )

        # Wall topology and corners
        context.graph = self.graph_builder.build(context.walls)
        context.corners = CornerMiterResolver().resolve(context.graph)

        # 3D solid
        context.mesh = self.mesh_builder.build(context.graph, context.corners)

        # Openings ride on the raw walls, not on the mitered corners
        resolver = OpeningResolver(context.walls, context.params)
        context.placements, context.orphaned_openings = resolver.resolve_all(context.openings)
        if context.orphaned_openings:
            logger.debug(
                "Skipped %d opening(s) with no parent wall: %s",
                len(context.orphaned_openings), ", ".join(context.orphaned_openings),
            )

        return self._to_scene(context)

    def _to_scene(self, context: RebuildContext) -> FloorplanScene:
        strokes = [
            WallStroke(id=e.id, start=e.source.start, end=e.source.end, thickness=e.thickness)
            for e in context.graph.edges.values()
        ]
        return FloorplanScene(
            walls=strokes,
            nodes={k: n.position for k, n in context.graph.nodes.items()},
            corners=context.corners,
            openings=context.placements,
            orphaned_openings=context.orphaned_openings,
            mesh=context.mesh,
        )
