"""Demo floorplan: two rooms with doors and windows."""

from __future__ import annotations

from floorplanner.models import EngineParams, OpeningElement, Point2D, WallElement
from floorplanner.core.openings import OpeningResolver


WALL_THICKNESS = 10.0
WALL_HEIGHT = 200.0

_WALLS = [
    # Outer walls
    ("wall_1", (100, 100), (400, 100)),
    ("wall_2", (400, 100), (400, 300)),
    ("wall_3", (400, 300), (100, 300)),
    ("wall_4", (100, 300), (100, 100)),
    # Interior walls
    ("wall_5", (100, 200), (300, 200)),
    ("wall_6", (300, 100), (300, 200)),
]

# (id, kind, anchor point in the sketch, width, height)
_OPENINGS = [
    ("door_1", "door", (250, 100), 80.0, 200.0),
    ("door_2", "door", (200, 200), 80.0, 200.0),
    ("window_1", "window", (150, 100), 80.0, 120.0),
    ("window_2", "window", (350, 300), 80.0, 120.0),
]


def demo_floorplan() -> list:
    """Walls followed by openings anchored onto the nearest wall."""
    walls = [
        WallElement(
            id=wall_id,
            start=Point2D(x=sx, y=sy),
            end=Point2D(x=ex, y=ey),
            thickness=WALL_THICKNESS,
            height=WALL_HEIGHT,
        )
        for wall_id, (sx, sy), (ex, ey) in _WALLS
    ]

    resolver = OpeningResolver(walls, EngineParams())
    openings = []
    for opening_id, kind, (x, y), width, height in _OPENINGS:
        placement = resolver.place(Point2D(x=x, y=y))
        if placement is None:
            raise RuntimeError(f"Demo opening {opening_id} is not on a wall")
        openings.append(OpeningElement(
            id=opening_id,
            type=kind,
            parent_wall_id=placement.wall_id,
            position_on_wall=placement.t,
            width=width,
            height=height,
        ))

    return walls + openings
