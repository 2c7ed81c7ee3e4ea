"""Tests for the editing facade: pointer input in, store mutations out."""

import pytest

from floorplanner.models import Point2D
from floorplanner.core.graph_builder import build_wall_graph
from floorplanner.services.floorplan_service import FloorplanService
from floorplanner.services.store import FloorplanStore

from conftest import make_opening, make_wall


def P(x, y):
    return Point2D(x=x, y=y)


@pytest.fixture
def service():
    return FloorplanService()


def seeded(*elements):
    return FloorplanService(store=FloorplanStore(elements))


class TestDrawing:

    def test_draw_wall_snaps_to_grid(self, service):
        wall = service.draw_wall(P(3, 4), P(98, 2))
        assert (wall.start, wall.end) == (P(0, 0), P(100, 0))
        assert service.store.elements == (wall,)

    def test_second_wall_welds_onto_first(self, service):
        service.draw_wall(P(3, 4), P(98, 2))
        second = service.draw_wall(P(104, -6), P(103, 97))
        assert second.start == P(100, 0)
        assert build_wall_graph(service.store.elements).node_count == 3

    def test_click_without_drag_adds_nothing(self, service):
        assert service.draw_wall(P(1, 1), P(2, 2)) is None
        assert service.store.elements == ()

    def test_drag_endpoint_welds(self):
        service = seeded(
            make_wall("a", (0, 0), (100, 0)),
            make_wall("b", (200, 0), (200, 100)),
        )
        moved = service.drag_wall_endpoint("b", "start", P(104, 6))
        assert moved.start == P(100, 0)
        assert service.store.get("b").start == P(100, 0)
        assert service.store.can_undo()

    def test_drag_endpoint_of_unknown_wall(self, service):
        assert service.drag_wall_endpoint("nope", "end", P(0, 0)) is None


class TestOpenings:

    def test_place_opening(self):
        service = seeded(make_wall("w", (0, 0), (200, 0)))
        door = service.place_opening("door", P(50, 10))
        assert door.parent_wall_id == "w"
        assert door.position_on_wall == pytest.approx(0.25)
        assert service.store.get(door.id) == door

    def test_place_opening_far_away(self):
        service = seeded(make_wall("w", (0, 0), (200, 0)))
        assert service.place_opening("window", P(50, 500)) is None
        assert len(service.store.elements) == 1

    def test_drag_opening_to_other_wall(self):
        service = seeded(
            make_wall("a", (0, 0), (200, 0)),
            make_wall("b", (0, 100), (200, 100)),
            make_opening("d", "a", 0.5),
        )
        service.drag_opening("d", P(150, 95))
        stored = service.store.get("d")
        assert stored.parent_wall_id == "b"
        assert stored.position_on_wall == pytest.approx(0.75)

    def test_drag_opening_off_walls_keeps_it(self):
        service = seeded(make_wall("a", (0, 0), (200, 0)), make_opening("d", "a", 0.5))
        assert service.drag_opening("d", P(100, 400)) is None
        assert service.store.get("d").position_on_wall == 0.5


class TestViewport:

    def test_select_at(self):
        service = seeded(make_wall("w", (0, 0), (100, 0)))
        assert service.select_at(P(50, 8)).id == "w"
        assert service.store.selected_id == "w"

    def test_zoom_shrinks_hit_zone(self):
        service = seeded(make_wall("w", (0, 0), (100, 0)))
        service.zoom_at(P(0, 0), 2.0)
        # screen (100, 16) is world (50, 8), outside the 5-unit zone at zoom 2
        assert service.select_at(P(100, 16)) is None
        assert service.store.selected_id is None
        assert service.select_at(P(100, 8)).id == "w"

    def test_pan_moves_pointer(self, service):
        service.pan_by(50, 0)
        wall = service.draw_wall(P(50, 0), P(150, 0))
        assert (wall.start, wall.end) == (P(0, 0), P(100, 0))


class TestDemo:

    def test_load_demo_and_undo(self, service):
        service.load_demo()
        scene = service.rebuild()
        assert scene.stats.walls == 6
        assert scene.stats.openings == 4
        assert service.store.undo()
        assert service.store.elements == ()
