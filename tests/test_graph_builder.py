"""Tests for wall graph construction and endpoint welding."""

import pytest

from floorplanner.models import Point2D
from floorplanner.core.graph_builder import build_wall_graph, node_key

from conftest import make_opening, make_wall


class TestNodeKey:
    """Tests for node_key quantization."""

    def test_format(self):
        assert node_key(Point2D(x=100, y=0)) == "100.000,0.000"

    def test_near_duplicates_share_key(self):
        assert node_key(Point2D(x=100.0001, y=5)) == node_key(Point2D(x=99.9999, y=5))

    def test_distinct_points_differ(self):
        assert node_key(Point2D(x=100.01, y=5)) != node_key(Point2D(x=100.0, y=5))

    def test_negative_zero_folds(self):
        assert node_key(Point2D(x=-0.0001, y=-0.0)) == "0.000,0.000"

    def test_custom_precision(self):
        assert node_key(Point2D(x=1.26, y=0), precision=1) == "1.3,0.0"


class TestBuildWallGraph:
    """Tests for build_wall_graph."""

    def test_empty(self):
        graph = build_wall_graph([])
        assert graph.node_count == 0
        assert graph.edge_count == 0

    def test_l_corner_shares_node(self, l_corner):
        graph = build_wall_graph(l_corner)
        assert graph.node_count == 3
        assert graph.edge_count == 2
        corner = graph.nodes["100.000,0.000"]
        assert corner.edge_ids == ["wall_1", "wall_2"]

    def test_node_count_equals_distinct_endpoints(self, closed_room):
        graph = build_wall_graph(closed_room)
        assert graph.node_count == 4
        assert all(node.degree == 2 for node in graph.nodes.values())

    def test_near_coincident_endpoints_weld(self):
        walls = [
            make_wall("a", (0, 0), (100, 0)),
            make_wall("b", (100.0002, -0.0003), (100, 100)),
        ]
        graph = build_wall_graph(walls)
        assert graph.node_count == 3
        assert graph.edges["a"].end_key == graph.edges["b"].start_key

    def test_node_position_is_first_point_seen(self):
        walls = [
            make_wall("a", (0, 0), (100.0002, 0)),
            make_wall("b", (100, 0), (100, 100)),
        ]
        graph = build_wall_graph(walls)
        assert graph.nodes["100.000,0.000"].position.x == 100.0002

    def test_openings_are_ignored(self, l_corner):
        graph = build_wall_graph(l_corner + [make_opening("door", "wall_1")])
        assert set(graph.edges) == {"wall_1", "wall_2"}

    def test_degenerate_wall_registers_once(self):
        graph = build_wall_graph([make_wall("dot", (5, 5), (5, 5))])
        assert graph.node_count == 1
        edge = graph.edges["dot"]
        assert graph.is_degenerate(edge)
        assert graph.nodes[edge.start_key].edge_ids == ["dot"]

    def test_duplicate_wall_id_keeps_first(self):
        walls = [
            make_wall("a", (0, 0), (100, 0)),
            make_wall("a", (0, 50), (100, 50)),
        ]
        graph = build_wall_graph(walls)
        assert graph.edge_count == 1
        assert graph.node_count == 2
        assert graph.edges["a"].source.start.y == 0

    def test_edges_reference_nodes_by_key(self, t_junction):
        graph = build_wall_graph(t_junction)
        for edge in graph.edges.values():
            assert edge.id in graph.nodes[edge.start_key].edge_ids
            assert edge.id in graph.nodes[edge.end_key].edge_ids

    def test_other_key(self, l_corner):
        graph = build_wall_graph(l_corner)
        edge = graph.edges["wall_1"]
        assert graph.other_key(edge, edge.start_key) == edge.end_key
        assert graph.other_key(edge, edge.end_key) == edge.start_key

    def test_rebuild_is_equal(self, t_junction):
        assert build_wall_graph(t_junction) == build_wall_graph(t_junction)

    def test_inputs_not_mutated(self, l_corner):
        before = [w.model_dump() for w in l_corner]
        build_wall_graph(l_corner)
        assert [w.model_dump() for w in l_corner] == before

    def test_incident_edges_unknown_node(self, l_corner):
        assert build_wall_graph(l_corner).incident_edges("nope") == []

    @pytest.mark.parametrize("n", [1, 5, 20])
    def test_chain(self, n):
        walls = [make_wall(f"w{i}", (i * 10, 0), ((i + 1) * 10, 0)) for i in range(n)]
        graph = build_wall_graph(walls)
        assert graph.node_count == n + 1
