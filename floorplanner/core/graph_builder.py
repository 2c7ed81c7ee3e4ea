"""Wall graph construction: welds wall endpoints into shared junctions."""

from __future__ import annotations
import logging
from typing import Iterable

from floorplanner.models import (
    Point2D, WallElement, WallNode, WallEdge, WallGraph,
)


logger = logging.getLogger(__name__)

WELD_PRECISION = 3  # decimal places of the working unit


def node_key(point: Point2D, precision: int = WELD_PRECISION) -> str:
    """Quantized junction key for a point.

    Two points weld into one node iff their keys are equal. Adding 0.0
    folds -0.0 into 0.0 so tiny negative coordinates do not split a node.
    """
    x = round(point.x, precision) + 0.0
    y = round(point.y, precision) + 0.0
    return f"{x:.{precision}f},{y:.{precision}f}"


class WallGraphBuilder:
    """Builds a fresh WallGraph from a flat element collection.

    Stateless: call `build` again with the full collection after every change.
    """

    def __init__(self, precision: int = WELD_PRECISION) -> None:
        self.precision = precision

    def build(self, elements: Iterable) -> WallGraph:
        graph = WallGraph()

        for el in elements:
            if not isinstance(el, WallElement):
                continue
            if el.id in graph.edges:
                logger.warning("Duplicate wall id %r ignored", el.id)
                continue

            start_key = self._get_or_create_node(graph, el.start)
            end_key = self._get_or_create_node(graph, el.end)

            edge = WallEdge(
                id=el.id,
                start_key=start_key,
                end_key=end_key,
                thickness=el.thickness,
                height=el.height,
                source=el,
            )
            graph.edges[edge.id] = edge
            graph.nodes[start_key].edge_ids.append(edge.id)
            if end_key != start_key:
                graph.nodes[end_key].edge_ids.append(edge.id)
            else:
                logger.debug("Wall %s collapses to a single node %s", el.id, start_key)

        logger.debug(
            "Built wall graph: %d nodes, %d edges",
            graph.node_count, graph.edge_count,
        )
        return graph

    def _get_or_create_node(self, graph: WallGraph, point: Point2D) -> str:
        key = node_key(point, self.precision)
        if key not in graph.nodes:
            # First endpoint seen for a key defines the node position
            graph.nodes[key] = WallNode(key=key, position=Point2D(x=point.x, y=point.y))
        return key


def build_wall_graph(elements: Iterable, precision: int = WELD_PRECISION) -> WallGraph:
    """Convenience wrapper around WallGraphBuilder."""
    return WallGraphBuilder(precision).build(elements)
