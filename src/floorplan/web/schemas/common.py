"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field

from floorplan.domain import GuideAxis


class PointSchema(BaseModel):
    """A world-space point."""

    x: float = Field(..., description="X coordinate")
    y: float = Field(..., description="Y coordinate")


class SeatSectionsSchema(BaseModel):
    """Per-edge seat counts - mirrors domain SeatSections."""

    front: int | None = Field(default=None, ge=0, description="Seats along the front edge")
    back: int | None = Field(default=None, ge=0, description="Seats along the back edge")
    left: int | None = Field(default=None, ge=0, description="Seats along the left edge")
    right: int | None = Field(default=None, ge=0, description="Seats along the right edge")


class GuideLineSchema(BaseModel):
    """An alignment guide line."""

    axis: GuideAxis = Field(..., description="Guide orientation")
    position: float = Field(..., description="Aligned world coordinate")
    extent_min: float = Field(..., description="Start of the drawn span")
    extent_max: float = Field(..., description="End of the drawn span")


class ViewportSchema(BaseModel):
    """Visible world region."""

    zoom: float = Field(..., description="Zoom factor")
    origin_x: float = Field(..., description="World x at the left edge")
    origin_y: float = Field(..., description="World y at the top edge")
    view_width: float = Field(..., description="Visible world width")
    view_height: float = Field(..., description="Visible world height")


class BoundsSchema(BaseModel):
    """Axis-aligned world-space rectangle."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float
