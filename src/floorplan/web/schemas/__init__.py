"""Pydantic schemas for the REST API."""

from floorplan.web.schemas.common import (
    BoundsSchema,
    GuideLineSchema,
    PointSchema,
    SeatSectionsSchema,
    ViewportSchema,
)
from floorplan.web.schemas.requests import (
    ConfigValidateRequest,
    FloorPlanRequest,
    RenderRequest,
    SeatLayoutRequest,
    SnapRequest,
)
from floorplan.web.schemas.responses import (
    ErrorResponseSchema,
    ExportFormatsSchema,
    HealthSchema,
    SeatLayoutSchema,
    SnapResultSchema,
    ValidationResultSchema,
    ViewportFitSchema,
)

__all__ = [
    # Common
    "BoundsSchema",
    "GuideLineSchema",
    "PointSchema",
    "SeatSectionsSchema",
    "ViewportSchema",
    # Requests
    "ConfigValidateRequest",
    "FloorPlanRequest",
    "RenderRequest",
    "SeatLayoutRequest",
    "SnapRequest",
    # Responses
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "HealthSchema",
    "SeatLayoutSchema",
    "SnapResultSchema",
    "ValidationResultSchema",
    "ViewportFitSchema",
]
