"""JSON exporter with tables, seat positions and viewport.

Exports:
- Every table with its committed (or previewed) position and size
- Seat centres in each table's local frame
- The visible viewport and container size
- The current selection and any alignment guides
- A schema version field for compatibility
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from floorplan.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from floorplan.application.dtos import FloorPlanSnapshot

logger = logging.getLogger(__name__)

# Current schema version for JSON output
SCHEMA_VERSION = "1.0"


@ExporterRegistry.register("json")
class JsonExporter:
    """JSON exporter for floor plan snapshots.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"
    media_type: ClassVar[str] = "application/json"

    def __init__(self, include_seats: bool = True, indent: int = 2) -> None:
        self.include_seats = include_seats
        self.indent = indent

    def build(self, snapshot: FloorPlanSnapshot) -> dict[str, Any]:
        """Assemble the JSON document as a dict."""
        data = snapshot.to_dict()
        if not self.include_seats:
            for table in data["tables"]:
                table.pop("seat_positions", None)
        return {"schema_version": SCHEMA_VERSION, **data}

    def export(self, snapshot: FloorPlanSnapshot, path: Path) -> None:
        path.write_text(self.export_string(snapshot), encoding="utf-8")
        logger.debug(f"Wrote JSON with {len(snapshot.tables)} tables to {path}")

    def export_string(self, snapshot: FloorPlanSnapshot) -> str:
        return json.dumps(self.build(snapshot), indent=self.indent)
