from .geometry import Point2D, Point3D, Vector2D, direction_from_points
from .building import (
    OpeningKind, WallElement, OpeningElement, Element,
    walls_of, openings_of,
)
from .graph import WallNode, WallEdge, WallGraph
from .scene import (
    WallMesh, WallStroke, OpeningTransform, OpeningPlacement, WallPlacement,
    SceneStats, FloorplanScene,
)
from .parameters import EngineParams
from .context import RebuildContext

__all__ = [
    "Point2D", "Point3D", "Vector2D", "direction_from_points",
    "OpeningKind", "WallElement", "OpeningElement", "Element",
    "walls_of", "openings_of",
    "WallNode", "WallEdge", "WallGraph",
    "WallMesh", "WallStroke", "OpeningTransform", "OpeningPlacement",
    "WallPlacement", "SceneStats", "FloorplanScene",
    "EngineParams",
    "RebuildContext",
]
