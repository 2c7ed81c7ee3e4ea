"""Geometric value types used throughout the engine."""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict


class Point2D(BaseModel):
    """Point on the sketch plane. `z` is carried through but never used."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    x: float
    y: float
    z: float | None = None

    def distance_to(self, other: Point2D) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def lerp(self, other: Point2D, t: float) -> Point2D:
        return Point2D(
            x=self.x + (other.x - self.x) * t,
            y=self.y + (other.y - self.y) * t,
        )

    def offset(self, v: Vector2D, scale: float = 1.0) -> Point2D:
        """Translate by `v * scale`."""
        return Point2D(x=self.x + v.x * scale, y=self.y + v.y * scale)

    def __add__(self, other: Point2D) -> Point2D:
        return Point2D(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: Point2D) -> Point2D:
        return Point2D(x=self.x - other.x, y=self.y - other.y)

    def __mul__(self, scalar: float) -> Point2D:
        return Point2D(x=self.x * scalar, y=self.y * scalar)


class Point3D(BaseModel):
    """Point in render space (Y-up)."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float


class Vector2D(BaseModel):
    """2D vector for direction calculations on the sketch plane."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2D:
        ln = self.length()
        if ln < 1e-10:
            return Vector2D(x=0.0, y=0.0)
        return Vector2D(x=self.x / ln, y=self.y / ln)

    def perpendicular(self) -> Vector2D:
        """90-degree counterclockwise rotation."""
        return Vector2D(x=-self.y, y=self.x)

    def dot(self, other: Vector2D) -> float:
        return self.x * other.x + self.y * other.y

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(x=self.x * scalar, y=self.y * scalar)


def direction_from_points(start: Point2D, end: Point2D) -> Vector2D:
    """Get direction vector from start to end."""
    return Vector2D(x=end.x - start.x, y=end.y - start.y)
