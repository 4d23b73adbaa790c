"""API routers for the REST API."""

from floorplan.web.routers.export import router as export_router
from floorplan.web.routers.layout import router as layout_router
from floorplan.web.routers.render import router as render_router
from floorplan.web.routers.validate import router as validate_router

__all__ = [
    "export_router",
    "layout_router",
    "render_router",
    "validate_router",
]
