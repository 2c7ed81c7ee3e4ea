"""Stateless 2D geometry used by every stage of the engine.

All functions are total: degenerate input (zero-length segments, parallel
lines) produces a defined fallback instead of an exception.
"""

from __future__ import annotations
import math
from typing import NamedTuple

from floorplanner.models import Point2D, Vector2D, direction_from_points


PARALLEL_EPSILON = 1e-8


class SegmentProjection(NamedTuple):
    t: float                 # clamped parameter along the segment
    closest_point: Point2D
    distance: float          # from the query point to closest_point


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, value))


def distance(a: Point2D, b: Point2D) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def _snap(value: float, grid_size: float) -> float:
    steps = value / grid_size
    if not math.isfinite(steps):
        return value
    return round(steps) * grid_size


def snap_to_grid(point: Point2D, grid_size: float) -> Point2D:
    """Round each coordinate to the nearest multiple of `grid_size`.

    A coordinate too large to divide by the grid is passed through unchanged.
    """
    if grid_size <= 0:
        return point
    return Point2D(x=_snap(point.x, grid_size), y=_snap(point.y, grid_size))


def project_point_to_segment(
    point: Point2D, seg_start: Point2D, seg_end: Point2D,
) -> SegmentProjection:
    """Clamped orthogonal projection of `point` onto a segment.

    A zero-length segment projects everything onto its start (t = 0).
    """
    cx = seg_end.x - seg_start.x
    cy = seg_end.y - seg_start.y
    len_sq = cx * cx + cy * cy
    if len_sq == 0:
        return SegmentProjection(0.0, seg_start, distance(point, seg_start))

    t = ((point.x - seg_start.x) * cx + (point.y - seg_start.y) * cy) / len_sq
    t = clamp(t)
    closest = Point2D(x=seg_start.x + t * cx, y=seg_start.y + t * cy)
    return SegmentProjection(t, closest, distance(point, closest))


def hit_threshold(thickness_hint: float, min_threshold: float) -> float:
    """Half the wall thickness, but never less than `min_threshold`."""
    return max(thickness_hint / 2, min_threshold)


def is_point_near_segment(
    point: Point2D,
    seg_start: Point2D,
    seg_end: Point2D,
    thickness_hint: float,
    min_threshold: float = 10.0,
) -> bool:
    """Whether `point` falls inside a segment's thickness-aware hit zone."""
    projection = project_point_to_segment(point, seg_start, seg_end)
    return projection.distance <= hit_threshold(thickness_hint, min_threshold)


def perpendicular(v: Vector2D) -> Vector2D:
    """(x, y) -> (-y, x)."""
    return v.perpendicular()


def unit_direction(start: Point2D, end: Point2D) -> Vector2D:
    """Unit vector from start to end, or the zero vector for a zero-length span."""
    return direction_from_points(start, end).normalized()


def line_intersection(
    a1: Point2D, a2: Point2D, b1: Point2D, b2: Point2D,
) -> Point2D | None:
    """Intersection of the infinite lines a1-a2 and b1-b2.

    Returns None when the lines are parallel (or either is degenerate).
    """
    dax, day = a2.x - a1.x, a2.y - a1.y
    dbx, dby = b2.x - b1.x, b2.y - b1.y
    det = dax * dby - day * dbx
    if abs(det) < PARALLEL_EPSILON:
        return None
    t = ((b1.x - a1.x) * dby - (b1.y - a1.y) * dbx) / det
    return Point2D(x=a1.x + t * dax, y=a1.y + t * day)
