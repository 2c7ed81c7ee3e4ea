"""FastAPI route definitions."""

from __future__ import annotations
import logging

from fastapi import APIRouter, HTTPException, Request, status

from floorplanner.models import EngineParams, FloorplanScene, Point2D, WallPlacement, walls_of
from floorplanner.core.engine import FloorplanEngine
from floorplanner.core.interaction import hit_test, resolve_pointer
from floorplanner.core.openings import find_placement
from floorplanner.io.document import FloorplanDocumentError, load_floorplan
from floorplanner.services.demo import demo_floorplan
from floorplanner.api.schemas import (
    DocumentResponse, HitTestRequest, HitTestResponse, PlaceOpeningRequest,
    RebuildRequest, SnapRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Shared defaults; every request is rebuilt from scratch
_params = EngineParams()
_engine = FloorplanEngine(_params)


@router.post("/rebuild", response_model=FloorplanScene)
async def rebuild(request: RebuildRequest) -> FloorplanScene:
    """Rebuild the wall graph, corners, mesh and openings for a floorplan."""
    engine = _engine if request.params == _params else FloorplanEngine(request.params)
    return engine.rebuild(request.elements)


@router.post("/openings/place", response_model=WallPlacement)
async def place_opening(request: PlaceOpeningRequest) -> WallPlacement:
    """Anchor a pointer position onto the nearest wall."""
    max_distance = request.max_distance or _params.placement_max_distance
    placement = find_placement(request.point, walls_of(request.elements), max_distance)
    if placement is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No wall within {max_distance} of ({request.point.x}, {request.point.y})",
        )
    return placement


@router.post("/hit-test", response_model=HitTestResponse)
async def hit_test_point(request: HitTestRequest) -> HitTestResponse:
    """Topmost element under a world-space point."""
    element = hit_test(request.point, request.elements, _params, request.zoom)
    return HitTestResponse(element_id=element.id if element is not None else None)


@router.post("/snap", response_model=Point2D)
async def snap(request: SnapRequest) -> Point2D:
    """Grid-snap a point and weld it onto a nearby wall endpoint."""
    return resolve_pointer(
        request.point, walls_of(request.elements), _params,
        request.zoom, request.exclude_id,
    )


@router.post("/documents/load", response_model=DocumentResponse)
async def load_document(request: Request) -> DocumentResponse:
    """Validate a saved floorplan document and rebuild it."""
    body = await request.body()
    try:
        doc = load_floorplan(body)
    except FloorplanDocumentError as e:
        logger.warning("Rejected floorplan document: %s", e)
        raise HTTPException(
            status_code=422,
            detail=str(e),
        ) from e
    return DocumentResponse(
        version=doc.version,
        elements=doc.elements,
        scene=_engine.rebuild(doc.elements),
    )


@router.get("/demo", response_model=DocumentResponse)
async def demo() -> DocumentResponse:
    """The bundled two-room demo floorplan."""
    elements = demo_floorplan()
    return DocumentResponse(version="1.0", elements=elements, scene=_engine.rebuild(elements))


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
