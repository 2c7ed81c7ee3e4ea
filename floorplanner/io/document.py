"""Floorplan save format: `{"version": str, "elements": [Element, ...]}`."""

from __future__ import annotations
import json
import logging
from typing import Iterable

from pydantic import BaseModel, Field, ValidationError

from floorplanner.models import Element


logger = logging.getLogger(__name__)

FORMAT_VERSION = "1.0"


class FloorplanDocumentError(ValueError):
    """A floorplan document was rejected; nothing from it was loaded."""


def _reject_constant(name: str) -> float:
    raise FloorplanDocumentError(f"Invalid JSON: non-standard constant {name}")


class FloorplanDocument(BaseModel):
    version: str = FORMAT_VERSION
    elements: list[Element] = Field(default_factory=list)


def dump_floorplan(elements: Iterable, version: str = FORMAT_VERSION) -> str:
    """Serialize elements to the JSON save format."""
    doc = FloorplanDocument(version=version, elements=list(elements))
    return json.dumps(
        doc.model_dump(mode="json", by_alias=True, exclude_none=True), allow_nan=False,
    )


def load_floorplan(data: str | bytes) -> FloorplanDocument:
    """Parse and validate a saved floorplan.

    Raises:
        FloorplanDocumentError: invalid JSON, no `elements` list, or any
            element that fails validation.
    """
    try:
        parsed = json.loads(data, parse_constant=_reject_constant)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise FloorplanDocumentError(f"Invalid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise FloorplanDocumentError("Document must be a JSON object")
    if "elements" not in parsed:
        raise FloorplanDocumentError("Document has no 'elements' field")
    if not isinstance(parsed["elements"], list):
        raise FloorplanDocumentError("'elements' must be a list")

    try:
        doc = FloorplanDocument.model_validate(parsed)
    except ValidationError as e:
        raise FloorplanDocumentError(
            f"Invalid element data ({e.error_count()} error(s)): {e.errors()[0]['msg']}"
        ) from e

    logger.debug("Loaded floorplan v%s with %d elements", doc.version, len(doc.elements))
    return doc
