"""Exporter framework for floor plan snapshots.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- dxf: DXF drawing with table, seat and label layers
- json: Tables, seat positions, viewport and selection
- svg: The editor canvas as shown, viewport included

Usage:
    from floorplan.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    svg_exporter = ExporterRegistry.get("svg")()
    manager = ExportManager(Path("out"))
    manager.export_all(["svg", "json"], editor.snapshot(), project_name="dining-room")
"""

from floorplan.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)
from floorplan.infrastructure.exporters.dxf import DxfExporter
from floorplan.infrastructure.exporters.json_export import JsonExporter
from floorplan.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonExporter",
    "SvgExporter",
]
