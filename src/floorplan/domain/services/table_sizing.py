"""Table footprint sizing from seat counts.

The floor plan store derives every table's width and height from its shape
and seats so that seats laid out by the seat layout service have room along
each edge. The seat layout service itself never resizes tables.
"""

from __future__ import annotations

from ..constants import FIXED_SEAT_SPACING, SEAT_RADIUS, SEAT_SPACING, SIZE_PADDING
from ..value_objects import SeatEdge, SeatSections, Side, TableShape, TableSize
from .seat_layout import derive_sections, resolve_sections

__all__ = ["calculate_table_size", "min_edge_length"]

_CLEARANCE = SEAT_SPACING + SEAT_RADIUS


def min_edge_length(seat_count: int, minimum: float) -> float:
    """Shortest edge that fits ``seat_count`` seats at fixed spacing."""
    if seat_count <= 1:
        return minimum
    return max(minimum, (seat_count - 1) * FIXED_SEAT_SPACING)


def _with_clearance(base: float) -> float:
    return base + _CLEARANCE * 2 + SIZE_PADDING


def _section(sections: SeatSections | None, edge: SeatEdge, fallback: int) -> int:
    explicit = sections.get(edge) if sections is not None else None
    return explicit if explicit is not None else fallback


def calculate_table_size(
    seats: int,
    shape: TableShape,
    sections: SeatSections | None = None,
) -> TableSize:
    """Calculate a table's footprint from its seats.

    Args:
        seats: Total seat count.
        shape: Table shape.
        sections: Optional explicit per-edge seat counts.

    Returns:
        Width and height in world units.
    """
    if shape == TableShape.CIRCLE:
        base = 40 + seats * 4
        size = max(80.0, (base / 2 + _CLEARANCE) * 2 + SIZE_PADDING)
        return TableSize(size, size)

    if shape == TableShape.BAR:
        front = _section(sections, SeatEdge.FRONT, seats)
        base_width = min_edge_length(front, 30.0)
        return TableSize(
            max(80.0, _with_clearance(base_width)),
            max(60.0, _with_clearance(30.0)),
        )

    if shape == TableShape.L_BOOTH:
        derived = derive_sections(shape, seats)
        front = _section(sections, SeatEdge.FRONT, derived[SeatEdge.FRONT])
        left = _section(sections, SeatEdge.LEFT, derived[SeatEdge.LEFT])
        return TableSize(
            max(100.0, _with_clearance(min_edge_length(front, 40.0))),
            max(100.0, _with_clearance(min_edge_length(left, 40.0))),
        )

    if shape == TableShape.U_BOOTH:
        derived = derive_sections(shape, seats)
        front = _section(sections, SeatEdge.FRONT, derived[SeatEdge.FRONT])
        left = _section(sections, SeatEdge.LEFT, derived[SeatEdge.LEFT])
        right = _section(sections, SeatEdge.RIGHT, derived[SeatEdge.RIGHT])
        base_height = max(
            min_edge_length(left, 50.0), min_edge_length(right, 50.0), 50.0
        )
        return TableSize(
            max(120.0, _with_clearance(min_edge_length(front, 50.0))),
            max(100.0, _with_clearance(base_height)),
        )

    if shape == TableShape.CORNER_BOOTH:
        base = min_edge_length(seats, 40.0)
        size = max(100.0, _with_clearance(base))
        return TableSize(size, size)

    # Rectangular
    base_table_size = 50.0
    edges = resolve_sections(shape, seats)
    if not edges:
        size = max(80.0, (base_table_size / 2 + _CLEARANCE) * 2 + SIZE_PADDING)
        return TableSize(size, size)

    lengths = {edge.side: min_edge_length(edge.count, 40.0) for edge in edges}
    base_width = max(lengths[Side.TOP], lengths[Side.BOTTOM], base_table_size * 1.2)
    base_height = max(lengths[Side.LEFT], lengths[Side.RIGHT], base_table_size)
    return TableSize(
        max(100.0, _with_clearance(base_width)),
        max(80.0, _with_clearance(base_height)),
    )
