"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from floorplan.domain import TableShape
from floorplan.domain.constants import SEAT_RADIUS
from floorplan.web.schemas.common import SeatSectionsSchema


class SeatLayoutRequest(BaseModel):
    """Request for the seat positions around a single table."""

    shape: TableShape = Field(..., description="Table shape")
    seats: int = Field(..., ge=0, le=200, description="Total seat count")
    width: float | None = Field(
        default=None, gt=0, description="Table width; computed from seats if omitted"
    )
    height: float | None = Field(
        default=None, gt=0, description="Table height; computed from seats if omitted"
    )
    seat_sections: SeatSectionsSchema | None = Field(
        default=None, description="Optional per-edge seat counts"
    )
    seat_radius: float = Field(default=SEAT_RADIUS, gt=0, description="Seat circle radius")


class FloorPlanRequest(BaseModel):
    """Request carrying a full floor plan configuration."""

    config: dict[str, Any] = Field(..., description="Full floor plan configuration JSON")
    width: float | None = Field(default=None, gt=0, description="Override canvas width")
    height: float | None = Field(default=None, gt=0, description="Override canvas height")


class SnapRequest(FloorPlanRequest):
    """Request for the snap of one table moved to a candidate position."""

    table_id: str = Field(..., min_length=1, description="Table being moved")
    x: float = Field(..., description="Candidate left edge")
    y: float = Field(..., description="Candidate top edge")


class RenderRequest(FloorPlanRequest):
    """Request for rendering or exporting a floor plan."""

    selected_table_id: str | None = Field(
        default=None, description="Table drawn as selected; overrides the file"
    )
    focus_table_id: str | None = Field(default=None, description="Table to zoom to")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Floor plan configuration JSON")
