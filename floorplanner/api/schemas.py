"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel, Field

from floorplanner.models import Element, EngineParams, FloorplanScene, Point2D


class RebuildRequest(BaseModel):
    """Request body for the /rebuild endpoint."""
    elements: list[Element]
    params: EngineParams = EngineParams()


class PlaceOpeningRequest(BaseModel):
    """A pointer position to anchor onto the nearest wall."""
    point: Point2D
    elements: list[Element]
    max_distance: float | None = Field(default=None, gt=0)


class HitTestRequest(BaseModel):
    point: Point2D
    elements: list[Element]
    zoom: float = Field(default=1.0, gt=0)


class HitTestResponse(BaseModel):
    element_id: str | None = None


class SnapRequest(BaseModel):
    """World-space pointer position to grid-snap and weld."""
    point: Point2D
    elements: list[Element]
    zoom: float = Field(default=1.0, gt=0)
    exclude_id: str | None = None


class DocumentResponse(BaseModel):
    """A loaded floorplan document and its rebuilt scene."""
    version: str
    elements: list[Element]
    scene: FloorplanScene
