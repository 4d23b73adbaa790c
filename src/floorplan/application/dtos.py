"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from floorplan.domain import (
    AlignmentGuideLine,
    ContainerRect,
    SeatPosition,
    Table,
)
from floorplan.domain.services import DragPreview, ViewportState, seat_layout_for


@dataclass
class FloorPlanSnapshot:
    """Everything needed to draw or export the floor plan at one moment.

    Attributes:
        tables: Tables in store order, at their committed positions.
        viewport: Visible world region.
        container: Canvas pixel rectangle.
        selected_table_id: Selected table, if any.
        guide_lines: Alignment guides of an in-progress drag.
        drag_preview: Uncommitted position of the dragged table.
        seat_radius: Seat radius used for the seat positions.
    """

    tables: list[Table]
    viewport: ViewportState
    container: ContainerRect
    selected_table_id: str | None = None
    guide_lines: list[AlignmentGuideLine] = field(default_factory=list)
    drag_preview: DragPreview | None = None
    seat_radius: float = 12.0

    @property
    def selected_table(self) -> Table | None:
        return next((t for t in self.tables if t.id == self.selected_table_id), None)

    def display_position(self, table: Table) -> tuple[float, float]:
        """Position a table is drawn at, honouring the drag preview."""
        preview = self.drag_preview
        if preview is not None and preview.table_id == table.id:
            return preview.x, preview.y
        return table.x, table.y

    def seat_positions(self, table: Table) -> list[SeatPosition]:
        """Seat centres for a table in its local frame."""
        return list(seat_layout_for(table, self.seat_radius))

    @property
    def total_seats(self) -> int:
        return sum(table.seats for table in self.tables)

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible representation."""
        tables = []
        for table in self.tables:
            x, y = self.display_position(table)
            entry: dict[str, Any] = {
                "id": table.id,
                "name": table.name,
                "shape": table.shape.value,
                "status": table.status.value,
                "seats": table.seats,
                "x": x,
                "y": y,
                "width": table.width,
                "height": table.height,
                "seat_positions": [
                    {"x": seat.x, "y": seat.y} for seat in self.seat_positions(table)
                ],
            }
            if table.seat_sections is not None:
                entry["seat_sections"] = table.seat_sections.to_dict()
            tables.append(entry)
        return {
            "tables": tables,
            "selected_table_id": self.selected_table_id,
            "viewport": self.viewport.to_dict(),
            "container": {
                "width": self.container.width,
                "height": self.container.height,
            },
            "guide_lines": [
                {
                    "axis": line.axis.value,
                    "position": line.position,
                    "extent_min": line.extent_min,
                    "extent_max": line.extent_max,
                }
                for line in self.guide_lines
            ],
            "total_seats": self.total_seats,
        }
