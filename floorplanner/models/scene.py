"""Rebuild output models consumed by the 2D and 3D renderers."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import OpeningKind
from .geometry import Point2D, Point3D


class WallMesh(BaseModel):
    """One welded triangle mesh for every wall in the floorplan.

    Buffers are flat: `vertices` and `normals` hold xyz triples in render
    space (Y-up), `indices` holds one vertex-index triple per triangle.
    """
    vertices: list[float] = Field(default_factory=list)
    indices: list[int] = Field(default_factory=list)
    normals: list[float] = Field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices) // 3

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def vertex(self, index: int) -> tuple[float, float, float]:
        i = index * 3
        return (self.vertices[i], self.vertices[i + 1], self.vertices[i + 2])


class WallStroke(BaseModel):
    """A wall centerline to stroke in the 2D view."""
    id: str
    start: Point2D
    end: Point2D
    thickness: float


class OpeningTransform(BaseModel):
    """Placement of an opening's box in render space."""
    position: Point3D      # box center
    rotation_y: float      # radians about the up axis
    size: Point3D          # (along wall, height, across wall)


class OpeningPlacement(BaseModel):
    """A door or window resolved against its parent wall."""
    opening_id: str
    kind: OpeningKind
    wall_id: str
    t: float               # clamped position on the wall
    center: Point2D
    angle: float           # wall orientation, radians
    width: float           # footprint along the wall
    depth: float           # footprint across the wall
    height: float
    transform: OpeningTransform


class WallPlacement(BaseModel):
    """Result of projecting a free point onto the nearest wall."""
    wall_id: str
    t: float
    closest_point: Point2D
    distance: float


class SceneStats(BaseModel):
    """Summary statistics for a rebuilt floorplan."""
    walls: int = 0
    nodes: int = 0
    openings: int = 0
    orphaned_openings: int = 0
    vertices: int = 0
    triangles: int = 0


class FloorplanScene(BaseModel):
    """Everything one full rebuild produces."""
    walls: list[WallStroke] = Field(default_factory=list)
    nodes: dict[str, Point2D] = Field(default_factory=dict)
    corners: dict[str, Point2D] = Field(default_factory=dict)
    openings: list[OpeningPlacement] = Field(default_factory=list)
    orphaned_openings: list[str] = Field(default_factory=list)
    mesh: WallMesh = Field(default_factory=WallMesh)
    stats: SceneStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = SceneStats(
                walls=len(self.walls),
                nodes=len(self.nodes),
                openings=len(self.openings),
                orphaned_openings=len(self.orphaned_openings),
                vertices=self.mesh.vertex_count,
                triangles=self.mesh.triangle_count,
            )
