"""DXF format exporter for floor plans.

Generates 2D DXF drawings (R2010 format) of the floor plan with table
outlines, seat circles and labels on separate layers. World y grows
downward on the canvas, so it is negated to keep the drawing upright in
CAD tools.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf

from floorplan.domain.entities import Table
from floorplan.domain.services import seat_layout_for
from floorplan.infrastructure.canvas_renderer import table_outline
from floorplan.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from floorplan.application.dtos import FloorPlanSnapshot


logger = logging.getLogger(__name__)


# Layer name -> ACI colour
LAYERS: dict[str, int] = {
    "TABLES": 7,  # White - table outlines
    "SEATS": 3,  # Green - seat circles
    "LABELS": 5,  # Blue - names and seat counts
}


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports floor plans to DXF for CAD tools.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
        scale: Output units per world unit.
        include_seats: Whether to draw seat circles.
        include_labels: Whether to draw table labels.
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"
    media_type: ClassVar[str] = "application/dxf"

    def __init__(
        self,
        scale: float = 1.0,
        include_seats: bool = True,
        include_labels: bool = True,
    ) -> None:
        if scale <= 0:
            raise ValueError(f"Invalid scale: {scale}. Must be positive")
        self.scale = scale
        self.include_seats = include_seats
        self.include_labels = include_labels

    def export(self, snapshot: FloorPlanSnapshot, path: Path) -> None:
        if not snapshot.tables:
            logger.warning("No tables to export")
            return
        doc = self.build_document(snapshot)
        doc.saveas(path)
        logger.info(f"Exported DXF to {path}")

    def export_string(self, snapshot: FloorPlanSnapshot) -> str:
        if not snapshot.tables:
            return ""
        stream = StringIO()
        self.build_document(snapshot).write(stream)
        return stream.getvalue()

    def build_document(self, snapshot: FloorPlanSnapshot) -> Drawing:
        """Create a DXF document containing every table in the snapshot."""
        doc = ezdxf.new("R2010")
        for name, color in LAYERS.items():
            doc.layers.add(name, color=color)
        msp = doc.modelspace()
        for table in snapshot.tables:
            x, y = snapshot.display_position(table)
            self._draw_table(msp, table, x, y, snapshot.seat_radius)
        return doc

    def _point(self, x: float, y: float) -> tuple[float, float]:
        return (x * self.scale, -y * self.scale)

    def _draw_table(
        self, msp: Modelspace, table: Table, x: float, y: float, seat_radius: float
    ) -> None:
        outline = table_outline(table)
        if outline.kind == "circle":
            (cx, cy), = outline.points
            msp.add_circle(
                self._point(x + cx, y + cy),
                outline.radius * self.scale,
                dxfattribs={"layer": "TABLES"},
            )
        else:
            points = [self._point(x + px, y + py) for px, py in outline.points]
            msp.add_lwpolyline(points, close=True, dxfattribs={"layer": "TABLES"})

        if self.include_seats:
            for seat in seat_layout_for(table, seat_radius):
                msp.add_circle(
                    self._point(x + seat.x, y + seat.y),
                    seat_radius * self.scale,
                    dxfattribs={"layer": "SEATS"},
                )

        if self.include_labels:
            seat_word = "seat" if table.seats == 1 else "seats"
            text_height = max(4.0, min(16.0, table.width * 0.12)) * self.scale
            msp.add_mtext(
                f"{table.name or table.id}\\P{table.seats} {seat_word}",
                dxfattribs={
                    "layer": "LABELS",
                    "char_height": text_height,
                    "insert": self._point(x + table.half_width, y + table.half_height),
                    "attachment_point": 5,  # MIDDLE_CENTER
                },
            )


__all__ = ["DxfExporter", "LAYERS"]
