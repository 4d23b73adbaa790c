"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from floorplan.domain import TableShape
from floorplan.web.schemas.common import (
    BoundsSchema,
    GuideLineSchema,
    PointSchema,
    ViewportSchema,
)


class SeatLayoutSchema(BaseModel):
    """Response for a seat layout query."""

    shape: TableShape = Field(..., description="Table shape")
    seats: int = Field(..., description="Requested seat count")
    width: float = Field(..., description="Table width used for placement")
    height: float = Field(..., description="Table height used for placement")
    positions: list[PointSchema] = Field(
        default_factory=list, description="Seat centres relative to the table's top-left"
    )


class SnapResultSchema(BaseModel):
    """Response for a snap query."""

    x: float = Field(..., description="Snapped left edge")
    y: float = Field(..., description="Snapped top edge")
    offset_x: float = Field(..., description="Applied x correction")
    offset_y: float = Field(..., description="Applied y correction")
    snapped: bool = Field(..., description="Whether either axis snapped")
    guide_lines: list[GuideLineSchema] = Field(
        default_factory=list, description="At most one guide per axis"
    )


class ViewportFitSchema(BaseModel):
    """Response for fitting the viewport to the floor plan."""

    table_count: int = Field(..., description="Number of tables fitted")
    viewport: ViewportSchema = Field(..., description="Fitted viewport")
    content_bounds: BoundsSchema | None = Field(
        default=None, description="Bounds of all tables and seats; null if empty"
    )


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class HealthSchema(BaseModel):
    """Service health and capabilities."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Package version")
    shapes: list[TableShape] = Field(..., description="Table shapes with a seat layout")
    export_formats: list[str] = Field(..., description="Registered export formats")


class ExportFormatsSchema(BaseModel):
    """Response listing available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
