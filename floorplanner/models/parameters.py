"""Engine parameters: tolerances, interaction thresholds and defaults."""

from __future__ import annotations
from pydantic import BaseModel, Field


class EngineParams(BaseModel):
    """User-adjustable parameters for rebuilds and pointer interaction.

    Lengths are in sketch units (the 2D canvas works in pixels at zoom 1).
    """
    # Welding
    weld_precision: int = Field(default=3, ge=0)     # decimals for node keys
    vertex_precision: int = Field(default=2, ge=0)   # decimals for mesh vertex keys

    # Pointer interaction (screen pixels)
    grid_size: float = 20.0
    endpoint_snap_threshold: float = 15.0
    min_hit_threshold: float = 10.0
    opening_hit_padding: float = 5.0
    placement_max_distance: float = 50.0

    # Viewport
    min_zoom: float = Field(default=0.1, gt=0)
    max_zoom: float = Field(default=10.0, gt=0)

    # New element defaults
    default_wall_thickness: float = Field(default=10.0, gt=0)
    default_wall_height: float = Field(default=200.0, gt=0)
    default_opening_width: float = Field(default=80.0, gt=0)
    default_opening_height: float = Field(default=200.0, gt=0)

    # Opening footprints, as a multiple of the host wall's thickness
    door_depth_factor: float = 1.5
    window_depth_factor: float = 1.2
    window_sill_height: float = 0.0
