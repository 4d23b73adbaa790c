"""SVG exporter for the floor plan canvas.

Wraps FloorPlanRenderer so the canvas as the editor shows it, viewport
included, can be written to a file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from floorplan.domain.constants import SEAT_RADIUS
from floorplan.infrastructure.canvas_renderer import FloorPlanRenderer
from floorplan.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from floorplan.application.dtos import FloorPlanSnapshot

logger = logging.getLogger(__name__)


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for the floor plan canvas.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"
    media_type: ClassVar[str] = "image/svg+xml"

    def __init__(
        self,
        seat_radius: float | None = None,
        show_grid: bool = True,
        show_labels: bool = True,
    ) -> None:
        """Initialize the SVG exporter.

        Args:
            seat_radius: Seat radius override; the snapshot's when None.
            show_grid: Whether to draw the background grid.
            show_labels: Whether to draw table names and seat counts.
        """
        self.seat_radius = seat_radius
        self.show_grid = show_grid
        self.show_labels = show_labels

    def _renderer(self, snapshot: FloorPlanSnapshot) -> FloorPlanRenderer:
        radius = self.seat_radius or snapshot.seat_radius or SEAT_RADIUS
        return FloorPlanRenderer(
            seat_radius=radius,
            show_grid=self.show_grid,
            show_labels=self.show_labels,
        )

    def export(self, snapshot: FloorPlanSnapshot, path: Path) -> None:
        path.write_text(self.export_string(snapshot), encoding="utf-8")
        logger.debug(f"Wrote SVG with {len(snapshot.tables)} tables to {path}")

    def export_string(self, snapshot: FloorPlanSnapshot) -> str:
        return self._renderer(snapshot).render_snapshot(snapshot)
