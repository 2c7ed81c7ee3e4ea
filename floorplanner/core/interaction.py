"""2D interaction geometry: snapping, endpoint welding, hit-testing, pan/zoom.

Thresholds in EngineParams are screen pixels; they are divided by the
current zoom to get world distances.
"""

from __future__ import annotations
import logging
import uuid
from typing import Iterable, Literal, Sequence

from pydantic import BaseModel, Field

from floorplanner.models import (
    EngineParams, OpeningElement, OpeningKind, Point2D, WallElement,
)
from floorplanner.core.primitives import distance, is_point_near_segment, snap_to_grid
from floorplanner.core.openings import OpeningResolver


logger = logging.getLogger(__name__)


def new_element_id(kind: str) -> str:
    return f"{kind}_{uuid.uuid4().hex[:9]}"


# ---------------------------------------------------------------------------
# Snapping
# ---------------------------------------------------------------------------

def find_nearest_endpoint(
    point: Point2D,
    walls: Iterable[WallElement],
    threshold: float,
    exclude_id: str | None = None,
) -> Point2D | None:
    """Closest existing wall endpoint strictly within `threshold`.

    The endpoint is returned verbatim so the graph builder welds it.
    """
    nearest: Point2D | None = None
    best = threshold
    for wall in walls:
        if wall.id == exclude_id:
            continue
        for candidate in (wall.start, wall.end):
            d = distance(point, candidate)
            if d < best:
                best = d
                nearest = candidate
    return nearest


def resolve_pointer(
    point: Point2D,
    walls: Iterable[WallElement],
    params: EngineParams,
    zoom: float = 1.0,
    exclude_id: str | None = None,
) -> Point2D:
    """Grid-snap a world point, then weld it onto a nearby endpoint if any."""
    snapped = snap_to_grid(point, params.grid_size)
    endpoint = find_nearest_endpoint(
        snapped, walls, params.endpoint_snap_threshold / zoom, exclude_id,
    )
    return endpoint if endpoint is not None else snapped


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

def hit_test(
    point: Point2D,
    elements: Sequence,
    params: EngineParams,
    zoom: float = 1.0,
):
    """Topmost element under `point`, or None.

    Later elements draw on top, so they are tested first.
    """
    resolver = OpeningResolver.from_elements(elements, params)
    min_threshold = params.min_hit_threshold / zoom
    padding = params.opening_hit_padding / zoom

    for el in reversed(elements):
        if isinstance(el, WallElement):
            if is_point_near_segment(point, el.start, el.end, el.thickness, min_threshold):
                return el
        elif isinstance(el, OpeningElement):
            placement = resolver.resolve(el)
            if placement is None:
                continue
            if distance(point, placement.center) <= el.width / 2 + padding:
                return el
    return None


# ---------------------------------------------------------------------------
# Editing helpers
# ---------------------------------------------------------------------------

def create_wall(
    start: Point2D,
    end: Point2D,
    params: EngineParams,
    wall_id: str | None = None,
) -> WallElement | None:
    """New wall from two committed points; None when they coincide."""
    if start.x == end.x and start.y == end.y:
        return None
    return WallElement(
        id=wall_id or new_element_id("wall"),
        start=start,
        end=end,
        thickness=params.default_wall_thickness,
        height=params.default_wall_height,
    )


def move_wall_endpoint(
    wall: WallElement,
    which: Literal["start", "end"],
    point: Point2D,
    walls: Iterable[WallElement],
    params: EngineParams,
    zoom: float = 1.0,
) -> WallElement | None:
    """Replace one endpoint of `wall` with the snapped/welded pointer position.

    Returns None when the move would collapse the wall to zero length.
    """
    target = resolve_pointer(point, walls, params, zoom, exclude_id=wall.id)
    other = wall.end if which == "start" else wall.start
    if target.x == other.x and target.y == other.y:
        return None
    return wall.model_copy(update={which: target})


def create_opening(
    kind: OpeningKind,
    point: Point2D,
    walls: Iterable[WallElement],
    params: EngineParams,
    opening_id: str | None = None,
) -> OpeningElement | None:
    """New door/window on the wall nearest `point`; None if no wall is close."""
    placement = OpeningResolver(walls, params).place(point)
    if placement is None:
        return None
    return OpeningElement(
        id=opening_id or new_element_id(kind),
        type=kind,
        parent_wall_id=placement.wall_id,
        position_on_wall=placement.t,
        width=params.default_opening_width,
        height=params.default_opening_height,
    )


def drag_opening(
    opening: OpeningElement,
    point: Point2D,
    walls: Iterable[WallElement],
    params: EngineParams,
) -> OpeningElement | None:
    """Re-project a dragged opening, possibly onto a different wall.

    None means the drag left every wall behind and should be ignored.
    """
    placement = OpeningResolver(walls, params).place(point)
    if placement is None:
        return None
    if placement.wall_id != opening.parent_wall_id:
        logger.debug(
            "Opening %s moved from wall %s to %s",
            opening.id, opening.parent_wall_id, placement.wall_id,
        )
    return opening.model_copy(update={
        "parent_wall_id": placement.wall_id,
        "position_on_wall": placement.t,
    })


# ---------------------------------------------------------------------------
# Pan / zoom
# ---------------------------------------------------------------------------

class Viewport(BaseModel):
    """Screen <-> world transform: world = (screen - pan) / zoom."""
    pan: Point2D = Field(default_factory=lambda: Point2D(x=0.0, y=0.0))
    zoom: float = Field(default=1.0, gt=0)
    min_zoom: float = Field(default=0.1, gt=0)
    max_zoom: float = Field(default=10.0, gt=0)

    @classmethod
    def from_params(cls, params: EngineParams) -> Viewport:
        return cls(min_zoom=params.min_zoom, max_zoom=params.max_zoom)

    def screen_to_world(self, screen: Point2D) -> Point2D:
        return Point2D(
            x=(screen.x - self.pan.x) / self.zoom,
            y=(screen.y - self.pan.y) / self.zoom,
        )

    def world_to_screen(self, world: Point2D) -> Point2D:
        return Point2D(
            x=world.x * self.zoom + self.pan.x,
            y=world.y * self.zoom + self.pan.y,
        )

    def pan_by(self, dx: float, dy: float) -> Viewport:
        return self.model_copy(update={"pan": Point2D(x=self.pan.x + dx, y=self.pan.y + dy)})

    def zoom_at(self, screen: Point2D, factor: float) -> Viewport:
        """Zoom by `factor` keeping the world point under `screen` fixed."""
        anchor = self.screen_to_world(screen)
        zoom = max(self.min_zoom, min(self.max_zoom, self.zoom * factor))
        pan = Point2D(x=screen.x - anchor.x * zoom, y=screen.y - anchor.y * zoom)
        return self.model_copy(update={"zoom": zoom, "pan": pan})
