"""Opening placement: wall-relative doors/windows to world space and back."""

from __future__ import annotations
import logging
import math
from typing import Iterable

from floorplanner.models import (
    EngineParams, OpeningElement, OpeningPlacement, OpeningTransform,
    Point2D, Point3D, WallElement, WallPlacement, walls_of,
)
from floorplanner.core.primitives import clamp, project_point_to_segment


logger = logging.getLogger(__name__)


def opening_center(opening: OpeningElement, wall: WallElement) -> Point2D:
    """World point at the opening's (clamped) parametric position on the wall."""
    return wall.start.lerp(wall.end, clamp(opening.position_on_wall))


def wall_angle(wall: WallElement) -> float:
    return math.atan2(wall.end.y - wall.start.y, wall.end.x - wall.start.x)


def find_placement(
    point: Point2D,
    walls: Iterable[WallElement],
    max_distance: float,
) -> WallPlacement | None:
    """Nearest wall to `point` and the clamped parameter along it.

    The first wall wins ties. Returns None when every wall is farther
    than `max_distance`: an opening must never float free of a wall.
    """
    best: WallPlacement | None = None
    for wall in walls:
        proj = project_point_to_segment(point, wall.start, wall.end)
        if proj.distance > max_distance:
            continue
        if best is None or proj.distance < best.distance:
            best = WallPlacement(
                wall_id=wall.id,
                t=proj.t,
                closest_point=proj.closest_point,
                distance=proj.distance,
            )
    return best


class OpeningResolver:
    """Resolves openings against one snapshot of walls."""

    def __init__(self, walls: Iterable[WallElement], params: EngineParams | None = None) -> None:
        self.params = params or EngineParams()
        self.walls: dict[str, WallElement] = {}
        for w in walls:
            self.walls.setdefault(w.id, w)

    @classmethod
    def from_elements(cls, elements, params: EngineParams | None = None) -> OpeningResolver:
        return cls(walls_of(elements), params)

    def parent_wall(self, opening: OpeningElement) -> WallElement | None:
        return self.walls.get(opening.parent_wall_id)

    def resolve(self, opening: OpeningElement) -> OpeningPlacement | None:
        """Render-time placement, or None if the parent wall is gone."""
        wall = self.parent_wall(opening)
        if wall is None:
            logger.debug(
                "Opening %s references missing wall %s, skipped",
                opening.id, opening.parent_wall_id,
            )
            return None

        t = clamp(opening.position_on_wall)
        center = opening_center(opening, wall)
        angle = wall_angle(wall)
        depth = wall.thickness * self._depth_factor(opening)
        base = self.params.window_sill_height if opening.type == "window" else 0.0

        return OpeningPlacement(
            opening_id=opening.id,
            kind=opening.type,
            wall_id=wall.id,
            t=t,
            center=center,
            angle=angle,
            width=opening.width,
            depth=depth,
            height=opening.height,
            transform=OpeningTransform(
                position=Point3D(x=center.x, y=base + opening.height / 2, z=center.y),
                # sketch y maps to render z, which flips the sense of rotation
                rotation_y=-angle,
                size=Point3D(x=opening.width, y=opening.height, z=depth),
            ),
        )

    def resolve_all(
        self, openings: Iterable[OpeningElement],
    ) -> tuple[list[OpeningPlacement], list[str]]:
        """Placements for every resolvable opening, plus the ids of orphans."""
        placements: list[OpeningPlacement] = []
        orphans: list[str] = []
        for opening in openings:
            placement = self.resolve(opening)
            if placement is None:
                orphans.append(opening.id)
            else:
                placements.append(placement)
        return placements, orphans

    def place(self, point: Point2D, max_distance: float | None = None) -> WallPlacement | None:
        """Inverse mapping for placement and drag."""
        if max_distance is None:
            max_distance = self.params.placement_max_distance
        return find_placement(point, self.walls.values(), max_distance)

    def _depth_factor(self, opening: OpeningElement) -> float:
        if opening.type == "door":
            return self.params.door_depth_factor
        return self.params.window_depth_factor
