"""Infrastructure layer - canvas rendering and file exporters."""

from .canvas_renderer import FloorPlanRenderer, ShapeOutline, table_outline
from .exporters import (
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonExporter,
    SvgExporter,
)

__all__ = [
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "FloorPlanRenderer",
    "JsonExporter",
    "ShapeOutline",
    "SvgExporter",
    "table_outline",
]
