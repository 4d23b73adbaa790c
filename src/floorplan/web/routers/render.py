"""Canvas rendering endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from floorplan.web.dependencies import load_render_editor
from floorplan.web.schemas.requests import RenderRequest

router = APIRouter(prefix="/render", tags=["render"])


@router.post("")
async def render_floor_plan(request: RenderRequest) -> Response:
    """Render the floor plan as the editor canvas draws it.

    Returns:
        SVG document sized to the canvas.
    """
    editor = load_render_editor(request)
    return Response(content=editor.render_svg(), media_type="image/svg+xml")
