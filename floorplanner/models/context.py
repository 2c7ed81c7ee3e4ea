"""Rebuild context: accumulates derived state during one rebuild pass."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import WallElement, OpeningElement
from .graph import WallGraph
from .geometry import Point2D
from .parameters import EngineParams
from .scene import OpeningPlacement, WallMesh


class RebuildContext(BaseModel):
    """
    Holds all state during a single rebuild.

    The graph builder fills `graph`, the miter resolver `corners`, the mesh
    builder `mesh`, and the opening resolver `placements` and `orphaned_openings`.
    Nothing in here outlives the rebuild that created it.
    """
    # Input
    walls: list[WallElement]
    openings: list[OpeningElement] = Field(default_factory=list)
    params: EngineParams = Field(default_factory=EngineParams)

    # Derived
    graph: WallGraph = Field(default_factory=WallGraph)
    corners: dict[str, Point2D] = Field(default_factory=dict)
    mesh: WallMesh = Field(default_factory=WallMesh)
    placements: list[OpeningPlacement] = Field(default_factory=list)
    orphaned_openings: list[str] = Field(default_factory=list)

