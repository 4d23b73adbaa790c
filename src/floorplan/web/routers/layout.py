"""Seat layout, snapping and viewport endpoints."""

from fastapi import APIRouter

from floorplan.domain import SeatSections
from floorplan.domain.services import (
    calculate_table_size,
    compute_seat_positions,
    content_bounds,
)
from floorplan.web.dependencies import load_editor
from floorplan.web.schemas.common import (
    BoundsSchema,
    GuideLineSchema,
    PointSchema,
    ViewportSchema,
)
from floorplan.web.schemas.requests import FloorPlanRequest, SeatLayoutRequest, SnapRequest
from floorplan.web.schemas.responses import (
    SeatLayoutSchema,
    SnapResultSchema,
    ViewportFitSchema,
)

router = APIRouter(tags=["layout"])


@router.post("/seats", response_model=SeatLayoutSchema)
async def seat_layout(request: SeatLayoutRequest) -> SeatLayoutSchema:
    """Compute seat centres around a single table.

    Width and height default to the size the seat count needs.
    """
    sections = None
    if request.seat_sections is not None:
        sections = SeatSections(**request.seat_sections.model_dump())

    size = calculate_table_size(request.seats, request.shape, sections)
    width = request.width if request.width is not None else size.width
    height = request.height if request.height is not None else size.height

    layout = compute_seat_positions(
        request.shape,
        request.seats,
        width / 2,
        height / 2,
        seat_radius=request.seat_radius,
        sections=sections,
    )
    return SeatLayoutSchema(
        shape=request.shape,
        seats=request.seats,
        width=width,
        height=height,
        positions=[PointSchema(x=seat.x, y=seat.y) for seat in layout],
    )


@router.post("/snap", response_model=SnapResultSchema)
async def snap_table(request: SnapRequest) -> SnapResultSchema:
    """Snap a table moved to a candidate position against every other table.

    Raises:
        TableNotFoundError: If the table does not exist (handled by exception handler).
    """
    editor = load_editor(request)
    result = editor.snap(request.table_id, request.x, request.y)
    position = result.apply(request.x, request.y)
    return SnapResultSchema(
        x=position.x,
        y=position.y,
        offset_x=result.offset_x,
        offset_y=result.offset_y,
        snapped=result.snapped,
        guide_lines=[
            GuideLineSchema(
                axis=line.axis,
                position=line.position,
                extent_min=line.extent_min,
                extent_max=line.extent_max,
            )
            for line in result.guide_lines
        ],
    )


@router.post("/viewport/fit", response_model=ViewportFitSchema)
async def fit_viewport(request: FloorPlanRequest) -> ViewportFitSchema:
    """Fit the viewport to every table in the floor plan."""
    editor = load_editor(request)
    bounds = content_bounds(editor.tables, editor.settings.seat_radius)
    return ViewportFitSchema(
        table_count=len(editor.tables),
        viewport=ViewportSchema(**editor.viewport.state.to_dict()),
        content_bounds=(
            BoundsSchema(
                min_x=bounds.min_x,
                min_y=bounds.min_y,
                max_x=bounds.max_x,
                max_y=bounds.max_y,
            )
            if bounds is not None
            else None
        ),
    )
