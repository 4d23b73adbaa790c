"""FastAPI dependency injection for floor plan services."""

from typing import Annotated

from fastapi import Depends

from floorplan.application import FloorPlanEditor
from floorplan.application.config import load_config_from_dict
from floorplan.infrastructure.exporters import Exporter, ExporterRegistry
from floorplan.web.exceptions import UnsupportedFormatError
from floorplan.web.schemas.requests import FloorPlanRequest, RenderRequest


def load_editor(request: FloorPlanRequest) -> FloorPlanEditor:
    """Build an editor from a request's configuration and canvas overrides.

    Raises:
        ConfigError: If the configuration is invalid (handled by exception handler).
    """
    editor = FloorPlanEditor.from_config(load_config_from_dict(request.config))
    if request.width is not None or request.height is not None:
        container = editor.viewport.container
        editor.resize(request.width or container.width, request.height or container.height)
        editor.fit()
    return editor


def load_render_editor(request: RenderRequest) -> FloorPlanEditor:
    """Build an editor and apply the requested selection and focus.

    Raises:
        TableNotFoundError: If a referenced table does not exist.
    """
    editor = load_editor(request)
    if request.selected_table_id is not None:
        editor.store.select_table(request.selected_table_id)
    if request.focus_table_id is not None:
        editor.focus_table(request.focus_table_id)
    return editor


def get_exporter(format_name: str) -> Exporter:
    """Dependency resolving the ``format_name`` path parameter to an exporter."""
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())
    return ExporterRegistry.get(format_name)()


# Type aliases for cleaner endpoint signatures
ExporterDep = Annotated[Exporter, Depends(get_exporter)]
