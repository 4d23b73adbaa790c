"""Export format endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from floorplan.infrastructure.exporters import ExporterRegistry
from floorplan.web.dependencies import ExporterDep, load_render_editor
from floorplan.web.schemas.requests import RenderRequest
from floorplan.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}")
async def export_floor_plan(
    format_name: str,
    request: RenderRequest,
    exporter: ExporterDep,
) -> Response:
    """Export the floor plan to any registered format.

    Args:
        format_name: Export format name.
        request: Floor plan configuration and view options.
        exporter: Exporter resolved from ``format_name``.

    Raises:
        UnsupportedFormatError: If format is not registered.
    """
    editor = load_render_editor(request)
    content = exporter.export_string(editor.snapshot())
    filename = f"floorplan.{exporter.file_extension}"
    return Response(
        content=content,
        media_type=exporter.media_type,
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
