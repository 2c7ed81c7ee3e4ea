"""Tests for the JSON floorplan save format."""

import json

import pytest

from floorplanner.models import OpeningElement, WallElement
from floorplanner.io.document import (
    FloorplanDocumentError,
    dump_floorplan,
    load_floorplan,
)
from floorplanner.services.demo import demo_floorplan


class TestDump:

    def test_layout(self, room_with_openings):
        doc = json.loads(dump_floorplan(room_with_openings))
        assert doc["version"] == "1.0"
        assert len(doc["elements"]) == 6

    def test_wall_fields(self, closed_room):
        wall = json.loads(dump_floorplan(closed_room))["elements"][0]
        assert wall == {
            "id": "wall_1",
            "type": "wall",
            "start": {"x": 100.0, "y": 100.0},
            "end": {"x": 400.0, "y": 100.0},
            "thickness": 10.0,
            "height": 200.0,
        }

    def test_opening_fields_are_camel_case(self, room_with_openings):
        door = json.loads(dump_floorplan(room_with_openings))["elements"][4]
        assert door == {
            "id": "door_1",
            "type": "door",
            "parentWallId": "wall_1",
            "positionOnWall": 0.5,
            "width": 80.0,
            "height": 200.0,
        }
        assert "start" not in door

    def test_custom_version(self):
        assert json.loads(dump_floorplan([], version="2.1"))["version"] == "2.1"


class TestRoundTrip:

    def test_mixed_floorplan(self, room_with_openings):
        doc = load_floorplan(dump_floorplan(room_with_openings))
        assert doc.elements == room_with_openings

    def test_demo(self):
        elements = demo_floorplan()
        assert load_floorplan(dump_floorplan(elements)).elements == elements

    def test_variants_are_restored(self, room_with_openings):
        doc = load_floorplan(dump_floorplan(room_with_openings))
        assert isinstance(doc.elements[0], WallElement)
        assert isinstance(doc.elements[-1], OpeningElement)
        assert doc.elements[-1].type == "window"


class TestLoad:

    def test_snake_case_input_accepted(self):
        text = json.dumps({"version": "1.0", "elements": [{
            "id": "d", "type": "door", "parent_wall_id": "w",
            "position_on_wall": 0.3, "width": 80, "height": 200,
        }]})
        assert load_floorplan(text).elements[0].parent_wall_id == "w"

    def test_out_of_range_position_is_kept(self):
        text = json.dumps({"elements": [{
            "id": "d", "type": "window", "parentWallId": "w",
            "positionOnWall": 1.4, "width": 80, "height": 200,
        }]})
        doc = load_floorplan(text)
        assert doc.version == "1.0"
        assert doc.elements[0].position_on_wall == 1.4

    def test_bytes_input(self, closed_room):
        assert len(load_floorplan(dump_floorplan(closed_room).encode()).elements) == 4

    @pytest.mark.parametrize("text,reason", [
        ("{not json", "Invalid JSON"),
        ("[]", "JSON object"),
        ('{"version": "1.0"}', "no 'elements'"),
        ('{"elements": {"id": "w"}}', "must be a list"),
        ('{"elements": [{"id": "w", "type": "roof"}]}', "Invalid element"),
        ('{"elements": [{"id": "w", "type": "wall", "start": {"x": 0, "y": 0}, '
         '"end": {"x": 1, "y": 0}, "thickness": 0, "height": 10}]}', "Invalid element"),
        ('{"elements": [{"id": "w", "type": "wall", "start": {"x": NaN, "y": 0}, '
         '"end": {"x": Infinity, "y": 0}, "thickness": 10, "height": 200}]}', "Invalid JSON"),
        ('{"elements": [{"id": "w", "type": "wall", "start": {"x": 0, "y": 0}, '
         '"end": {"x": 1, "y": 0}, "thickness": 1e400, "height": 200}]}', "Invalid element"),
    ])
    def test_rejections(self, text, reason):
        with pytest.raises(FloorplanDocumentError, match=reason):
            load_floorplan(text)
