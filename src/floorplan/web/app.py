"""FastAPI application factory."""

from collections.abc import Sequence

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from floorplan import __version__
from floorplan.domain import TableShape
from floorplan.infrastructure.exporters import ExporterRegistry
from floorplan.web.exceptions import register_exception_handlers
from floorplan.web.routers import (
    export_router,
    layout_router,
    render_router,
    validate_router,
)
from floorplan.web.schemas import HealthSchema

API_PREFIX = "/api/v1"

_ROUTERS = (layout_router, render_router, validate_router, export_router)


def create_app(cors_origins: Sequence[str] = ("*",)) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        cors_origins: Origins allowed to call the API from a browser, such
            as the host serving the floor plan canvas.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Floor Plan API",
        description="Seat layout, alignment snapping, viewport fitting and rendering "
        "for restaurant floor plans",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors_origins),
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    for router in _ROUTERS:
        app.include_router(router, prefix=API_PREFIX)

    @app.get("/health", response_model=HealthSchema)
    async def health_check() -> HealthSchema:
        """Report the service version and what it can lay out and export."""
        return HealthSchema(
            status="healthy",
            version=__version__,
            shapes=list(TableShape),
            export_formats=ExporterRegistry.available_formats(),
        )

    return app


# Application instance for ASGI servers (uvicorn)
app = create_app()
