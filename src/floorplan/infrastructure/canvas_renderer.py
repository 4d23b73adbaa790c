"""SVG rendering of the floor plan canvas.

This module draws the editor canvas as a standalone SVG document: a grid
background, alignment guide lines, and one group per table containing its
outline, labels, seats and selection indicator. The SVG viewBox is the
viewport's visible world region.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Sequence
from xml.sax.saxutils import escape

from floorplan.domain.constants import GRID_SIZE, SEAT_RADIUS
from floorplan.domain.entities import Table
from floorplan.domain.services import DragPreview, ViewportState, seat_layout_for
from floorplan.domain.value_objects import AlignmentGuideLine, ContainerRect, GuideAxis, TableShape

if TYPE_CHECKING:
    from floorplan.application.dtos import FloorPlanSnapshot

TABLE_COLORS: dict[str, str] = {
    "fill": "#e5e7eb",  # Light grey
    "stroke": "#d1d5db",
    "seat_fill": "#d1d5db",
    "seat_stroke": "#9ca3af",
    "name": "#374151",
    "seats": "#6b7280",
    "grid": "#e2e8f0",
}
SELECTION_COLOR = "#3b82f6"  # Blue
SELECTION_OFFSET = 4.0
GUIDE_OVERSHOOT = 100.0  # Guide lines reach past the visible region
GRID_EXTENT = 10000.0
_ATTR_ENTITIES = {"\"": "&quot;"}


def _num(value: float) -> str:
    """Compact number formatting for SVG attributes."""
    text = f"{round(value, 3):.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


@dataclass(frozen=True)
class ShapeOutline:
    """Table outline in table-local coordinates.

    Attributes:
        kind: "circle", "rect" or "polygon".
        points: Polygon vertices, or the rect's corners.
        radius: Circle radius.
        corner_radius: Rounded corner radius for rects.
    """

    kind: str
    points: tuple[tuple[float, float], ...] = field(default_factory=tuple)
    radius: float = 0.0
    corner_radius: float = 0.0


def table_outline(table: Table, offset: float = 0.0) -> ShapeOutline:
    """Outline of a table, grown outward by ``offset`` for selection rings.

    Booth outlines only grow along their outer edges; the inner cut-outs
    keep their position.
    """
    w, h = table.width, table.height
    hw, hh = table.half_width, table.half_height
    o = offset

    if table.shape == TableShape.CIRCLE:
        return ShapeOutline("circle", ((hw, hh),), radius=min(hw, hh) + o)

    if table.shape == TableShape.L_BOOTH:
        arm = min(hw, hh) * 0.8
        points = ((-o, -o), (w + o, -o), (w + o, arm), (arm, arm), (arm, h + o), (-o, h + o))
        return ShapeOutline("polygon", points)

    if table.shape == TableShape.U_BOOTH:
        depth = hh * 0.3
        points = (
            (-o, -o),
            (w + o, -o),
            (w + o, h + o),
            (w - depth, h + o),
            (w - depth, depth),
            (depth, depth),
            (depth, h + o),
            (-o, h + o),
        )
        return ShapeOutline("polygon", points)

    if table.shape == TableShape.CORNER_BOOTH:
        notch = min(hw, hh) * 0.8
        points = (
            (-o, -o),
            (w - notch, -o),
            (w - notch, notch),
            (w + o, notch),
            (w + o, h + o),
            (-o, h + o),
        )
        return ShapeOutline("polygon", points)

    # Rectangular and bar tables
    corner = min(20.0, w * 0.15, h * 0.2)
    points = ((-o, -o), (w + o, -o), (w + o, h + o), (-o, h + o))
    return ShapeOutline("rect", points, corner_radius=corner + o if o else corner)


class FloorPlanRenderer:
    """Renders the floor plan canvas as SVG.

    Attributes:
        seat_radius: Radius of seat circles in world units.
        grid_size: Grid cell size in world units.
        show_grid: Whether to draw the background grid.
        show_labels: Whether to draw table names and seat counts.
    """

    def __init__(
        self,
        seat_radius: float = SEAT_RADIUS,
        grid_size: float = GRID_SIZE,
        show_grid: bool = True,
        show_labels: bool = True,
    ) -> None:
        self.seat_radius = seat_radius
        self.grid_size = grid_size
        self.show_grid = show_grid
        self.show_labels = show_labels

    def render_snapshot(self, snapshot: FloorPlanSnapshot) -> str:
        """Render an editor snapshot."""
        return self.render_svg(
            snapshot.tables,
            snapshot.viewport,
            selected_table_id=snapshot.selected_table_id,
            guide_lines=snapshot.guide_lines,
            drag_preview=snapshot.drag_preview,
            container=snapshot.container,
        )

    def render_svg(
        self,
        tables: Iterable[Table],
        viewport: ViewportState,
        selected_table_id: str | None = None,
        guide_lines: Sequence[AlignmentGuideLine] = (),
        drag_preview: DragPreview | None = None,
        container: ContainerRect | None = None,
    ) -> str:
        """Generate the canvas SVG.

        Args:
            tables: Tables in drawing order.
            viewport: Visible world region, used as the viewBox.
            selected_table_id: Table drawn with a selection indicator.
            guide_lines: Alignment guides to draw across the view.
            drag_preview: Uncommitted position overriding one table's.
            container: Pixel size for the width/height attributes.

        Returns:
            SVG document as a string.
        """
        bounds = viewport.visible_bounds
        view_box = " ".join(
            _num(v) for v in (bounds.min_x, bounds.min_y, bounds.width, bounds.height)
        )
        size_attrs = ""
        if container is not None:
            size_attrs = f' width="{_num(container.width)}" height="{_num(container.height)}"'

        parts: list[str] = [
            f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{view_box}"'
            f'{size_attrs} preserveAspectRatio="none">',
        ]

        if self.show_grid:
            parts.append(self._render_grid(bounds.min_x, bounds.min_y))

        if guide_lines:
            parts.append("  <!-- Alignment guides -->")
            for line in guide_lines:
                parts.append(self._render_guide_line(line, viewport))

        parts.append("  <!-- Tables -->")
        for table in tables:
            x, y = table.x, table.y
            if drag_preview is not None and drag_preview.table_id == table.id:
                x, y = drag_preview.x, drag_preview.y
            parts.append(self._render_table(table, x, y, table.id == selected_table_id))

        parts.append("</svg>")
        return "\n".join(parts)

    def _render_grid(self, origin_x: float, origin_y: float) -> str:
        g = _num(self.grid_size)
        return "\n".join(
            [
                "  <defs>",
                f'    <pattern id="floor-grid" width="{g}" height="{g}" '
                f'patternUnits="userSpaceOnUse">',
                f'      <path d="M {g} 0 L 0 0 0 {g}" fill="none" '
                f'stroke="{TABLE_COLORS["grid"]}" stroke-width="1"/>',
                "    </pattern>",
                "  </defs>",
                f'  <rect x="{_num(origin_x - GRID_EXTENT)}" y="{_num(origin_y - GRID_EXTENT)}" '
                f'width="{_num(GRID_EXTENT * 2)}" height="{_num(GRID_EXTENT * 2)}" '
                f'fill="url(#floor-grid)"/>',
            ]
        )

    def _render_guide_line(self, line: AlignmentGuideLine, viewport: ViewportState) -> str:
        bounds = viewport.visible_bounds
        style = (
            f'stroke="{SELECTION_COLOR}" stroke-width="1.5" '
            f'stroke-dasharray="4 4" opacity="0.6"'
        )
        if line.axis == GuideAxis.HORIZONTAL:
            return (
                f'  <line class="guide-line guide-horizontal" '
                f'x1="{_num(bounds.min_x - GUIDE_OVERSHOOT)}" y1="{_num(line.position)}" '
                f'x2="{_num(bounds.max_x + GUIDE_OVERSHOOT)}" y2="{_num(line.position)}" {style}/>'
            )
        return (
            f'  <line class="guide-line guide-vertical" '
            f'x1="{_num(line.position)}" y1="{_num(bounds.min_y - GUIDE_OVERSHOOT)}" '
            f'x2="{_num(line.position)}" y2="{_num(bounds.max_y + GUIDE_OVERSHOOT)}" {style}/>'
        )

    def _render_outline(self, outline: ShapeOutline, attrs: str) -> str:
        if outline.kind == "circle":
            (cx, cy), = outline.points
            return (
                f'<circle cx="{_num(cx)}" cy="{_num(cy)}" r="{_num(outline.radius)}" {attrs}/>'
            )
        if outline.kind == "rect":
            (x0, y0), _, (x1, y1), _ = outline.points
            return (
                f'<rect x="{_num(x0)}" y="{_num(y0)}" width="{_num(x1 - x0)}" '
                f'height="{_num(y1 - y0)}" rx="{_num(outline.corner_radius)}" {attrs}/>'
            )
        first, *rest = outline.points
        d = f"M {_num(first[0])} {_num(first[1])} " + " ".join(
            f"L {_num(x)} {_num(y)}" for x, y in rest
        )
        return f'<path d="{d} Z" {attrs}/>'

    def _render_table(self, table: Table, x: float, y: float, selected: bool) -> str:
        stroke = SELECTION_COLOR if selected else TABLE_COLORS["stroke"]
        stroke_width = 3 if selected else 2
        body_attrs = f'fill="{TABLE_COLORS["fill"]}" stroke="{stroke}" stroke-width="{stroke_width}"'

        parts = [
            f'  <g class="table" data-table-id="{escape(table.id, _ATTR_ENTITIES)}" '
            f'transform="translate({_num(x)} {_num(y)})">',
            "    " + self._render_outline(table_outline(table), body_attrs),
        ]

        if self.show_labels:
            cx, cy = table.half_width, table.half_height
            name_size = min(16.0, table.width * 0.12)
            seats_size = min(12.0, table.width * 0.09)
            seat_word = "seat" if table.seats == 1 else "seats"
            parts.append(
                f'    <text x="{_num(cx)}" y="{_num(cy - 4)}" text-anchor="middle" '
                f'font-size="{_num(name_size)}" font-weight="700" '
                f'fill="{TABLE_COLORS["name"]}">{escape(table.name or table.id)}</text>'
            )
            parts.append(
                f'    <text x="{_num(cx)}" y="{_num(cy + 14)}" text-anchor="middle" '
                f'font-size="{_num(seats_size)}" font-weight="500" '
                f'fill="{TABLE_COLORS["seats"]}">{table.seats} {seat_word}</text>'
            )

        for seat in seat_layout_for(table, self.seat_radius):
            parts.append(
                f'    <circle class="seat" cx="{_num(seat.x)}" cy="{_num(seat.y)}" '
                f'r="{_num(self.seat_radius)}" fill="{TABLE_COLORS["seat_fill"]}" '
                f'stroke="{TABLE_COLORS["seat_stroke"]}" stroke-width="1.5"/>'
            )

        if selected:
            ring_attrs = (
                f'class="selection-indicator" fill="none" stroke="{SELECTION_COLOR}" '
                f'stroke-width="2" stroke-dasharray="6 4" opacity="0.8"'
            )
            parts.append(
                "    " + self._render_outline(table_outline(table, SELECTION_OFFSET), ring_attrs)
            )

        parts.append("  </g>")
        return "\n".join(parts)
