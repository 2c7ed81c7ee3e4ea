"""Shared test fixtures.

Provides element factories and small floorplans for the common junction
configurations: L-corners, T-junctions, free ends and a closed room.
"""

import pytest

from floorplanner.models import EngineParams, OpeningElement, Point2D, WallElement


# =============================================================================
# Factories
# =============================================================================


def make_wall(
    wall_id: str,
    start: tuple,
    end: tuple,
    thickness: float = 10.0,
    height: float = 200.0,
) -> WallElement:
    """Create a wall from (x, y) tuples."""
    return WallElement(
        id=wall_id,
        start=Point2D(x=start[0], y=start[1]),
        end=Point2D(x=end[0], y=end[1]),
        thickness=thickness,
        height=height,
    )


def make_opening(
    opening_id: str,
    parent_wall_id: str,
    position: float = 0.5,
    kind: str = "door",
    width: float = 80.0,
    height: float = 200.0,
) -> OpeningElement:
    return OpeningElement(
        id=opening_id,
        type=kind,
        parent_wall_id=parent_wall_id,
        position_on_wall=position,
        width=width,
        height=height,
    )


@pytest.fixture
def wall_factory():
    return make_wall


# =============================================================================
# Floorplans
# =============================================================================


@pytest.fixture
def params():
    return EngineParams()


@pytest.fixture
def l_corner():
    """Two 10-thick walls meeting at (100, 0)."""
    return [
        make_wall("wall_1", (0, 0), (100, 0)),
        make_wall("wall_2", (100, 0), (100, 100)),
    ]


@pytest.fixture
def t_junction():
    """A stem wall ending on the shared endpoint of two collinear walls."""
    return [
        make_wall("left", (0, 0), (100, 0)),
        make_wall("right", (100, 0), (200, 0)),
        make_wall("stem", (100, 0), (100, 100), thickness=6.0),
    ]


@pytest.fixture
def closed_room():
    """A 300 x 200 rectangle drawn clockwise on screen."""
    return [
        make_wall("wall_1", (100, 100), (400, 100)),
        make_wall("wall_2", (400, 100), (400, 300)),
        make_wall("wall_3", (400, 300), (100, 300)),
        make_wall("wall_4", (100, 300), (100, 100)),
    ]


@pytest.fixture
def room_with_openings(closed_room):
    return closed_room + [
        make_opening("door_1", "wall_1", 0.5),
        make_opening("window_1", "wall_3", 0.25, kind="window", height=120.0),
    ]
