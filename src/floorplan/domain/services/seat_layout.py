"""Seat placement around tables.

Maps a table's shape, half-dimensions and seat count (optionally split into
named edge sections) to seat centres in the table's local frame, whose
origin is the table's top-left corner. Layouts are lazy: iterating a
SeatLayout regenerates its positions, so the same layout can be walked any
number of times.

Placement rules by shape:
- circle: equal angular steps starting at 12 o'clock, clockwise
- bar: every seat on the front (bottom) edge
- l-booth: left and front (top) edges
- u-booth: left, front (top) and right edges; the inside of the U stays empty
- corner-booth: left and back (bottom) edges
- rectangular: one seat per side up to four seats, otherwise a 60/40 split
  between the long (top/bottom) and short (left/right) sides
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from ..constants import (
    FIXED_SEAT_SPACING,
    LONG_SIDE_SHARE,
    RECTANGULAR_SIMPLE_MAX_SEATS,
    SEAT_RADIUS,
    SEAT_SPACING,
)
from ..entities import Table
from ..value_objects import SeatEdge, SeatPosition, SeatSections, Side, TableShape

__all__ = [
    "EdgeSeats",
    "SeatLayout",
    "compute_seat_positions",
    "derive_sections",
    "resolve_sections",
    "seat_layout_for",
]

# Which physical side each named section of a booth or bar occupies, in
# emission order.
SECTION_SIDES: dict[TableShape, tuple[tuple[SeatEdge, Side], ...]] = {
    TableShape.BAR: ((SeatEdge.FRONT, Side.BOTTOM),),
    TableShape.L_BOOTH: (
        (SeatEdge.LEFT, Side.LEFT),
        (SeatEdge.FRONT, Side.TOP),
    ),
    TableShape.U_BOOTH: (
        (SeatEdge.LEFT, Side.LEFT),
        (SeatEdge.FRONT, Side.TOP),
        (SeatEdge.RIGHT, Side.RIGHT),
    ),
    TableShape.CORNER_BOOTH: (
        (SeatEdge.LEFT, Side.LEFT),
        (SeatEdge.BACK, Side.BOTTOM),
    ),
}

_SIMPLE_RECTANGULAR_ORDER = (Side.TOP, Side.RIGHT, Side.BOTTOM, Side.LEFT)


@dataclass(frozen=True)
class EdgeSeats:
    """Seats allotted to one side of a table."""

    side: Side
    count: int


def _ceil_half(value: int) -> int:
    return -(-value // 2)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def derive_sections(shape: TableShape, seats: int) -> dict[SeatEdge, int]:
    """Split a total seat count across a shape's named sections.

    The derived counts always sum to ``seats``. Shapes without named
    sections (circle, rectangular) return an empty mapping.
    """
    if shape == TableShape.BAR:
        return {SeatEdge.FRONT: seats}
    if shape == TableShape.L_BOOTH:
        return {SeatEdge.LEFT: _ceil_half(seats), SeatEdge.FRONT: seats // 2}
    if shape == TableShape.U_BOOTH:
        base, remainder = divmod(seats, 3)
        return {
            SeatEdge.LEFT: base + (1 if remainder > 0 else 0),
            SeatEdge.FRONT: base + (1 if remainder > 1 else 0),
            SeatEdge.RIGHT: base,
        }
    if shape == TableShape.CORNER_BOOTH:
        return {SeatEdge.LEFT: _ceil_half(seats), SeatEdge.BACK: seats // 2}
    return {}


def resolve_sections(
    shape: TableShape,
    seats: int,
    sections: SeatSections | None = None,
) -> tuple[EdgeSeats, ...]:
    """Resolve the per-side seat counts used for edge-based layouts.

    Explicitly defined sections (including zero) are used as given; absent
    sections fall back to the derived split of the total. Seats beyond the
    sum of the resolved sections are not placed.

    Args:
        shape: Table shape.
        seats: Total seat count.
        sections: Optional explicit per-edge counts. Ignored for
            rectangular and circle tables.

    Returns:
        Side allocations in emission order. Circle tables and rectangular
        tables with four or fewer seats have no edge allocation and return
        an empty tuple.
    """
    if shape in SECTION_SIDES:
        derived = derive_sections(shape, seats)
        resolved: list[EdgeSeats] = []
        for edge, side in SECTION_SIDES[shape]:
            explicit = sections.get(edge) if sections is not None else None
            resolved.append(
                EdgeSeats(side, explicit if explicit is not None else derived[edge])
            )
        return tuple(resolved)

    if shape == TableShape.RECTANGULAR and seats > RECTANGULAR_SIMPLE_MAX_SEATS:
        long_total = _round_half_up(seats * LONG_SIDE_SHARE)
        short_total = seats - long_total
        return (
            EdgeSeats(Side.TOP, _ceil_half(long_total)),
            EdgeSeats(Side.RIGHT, short_total // 2),
            EdgeSeats(Side.BOTTOM, long_total // 2),
            EdgeSeats(Side.LEFT, _ceil_half(short_total)),
        )

    return ()


def _group_offsets(count: int) -> Iterator[float]:
    """Offsets along an edge for seats centred as a group on its midpoint."""
    if count == 1:
        yield 0.0
        return
    start = -(count - 1) * FIXED_SEAT_SPACING / 2
    for index in range(count):
        yield start + index * FIXED_SEAT_SPACING


@dataclass(frozen=True)
class SeatLayout:
    """Lazy, restartable sequence of seat positions for one table.

    Attributes:
        shape: Table shape selecting the placement rule.
        seat_count: Total seats requested.
        half_width: Half the table width.
        half_height: Half the table height.
        seat_radius: Seat radius, part of the clearance from the table edge.
        sections: Optional explicit per-edge seat counts.
    """

    shape: TableShape
    seat_count: int
    half_width: float
    half_height: float
    seat_radius: float = SEAT_RADIUS
    sections: SeatSections | None = None

    @property
    def edges(self) -> tuple[EdgeSeats, ...]:
        """Side allocations for edge-based layouts."""
        return resolve_sections(self.shape, self.seat_count, self.sections)

    @property
    def _clearance(self) -> float:
        return SEAT_SPACING + self.seat_radius

    def __len__(self) -> int:
        if self.shape == TableShape.CIRCLE:
            return max(self.seat_count, 0)
        if self._is_simple_rectangular:
            return max(self.seat_count, 0)
        return sum(max(edge.count, 0) for edge in self.edges)

    def __iter__(self) -> Iterator[SeatPosition]:
        if self.shape == TableShape.CIRCLE:
            yield from self._circle()
        elif self._is_simple_rectangular:
            yield from self._simple_rectangular()
        else:
            for edge in self.edges:
                yield from self._edge(edge.side, edge.count)

    @property
    def _is_simple_rectangular(self) -> bool:
        return (
            self.shape not in SECTION_SIDES
            and self.shape != TableShape.CIRCLE
            and self.seat_count <= RECTANGULAR_SIMPLE_MAX_SEATS
        )

    def _circle(self) -> Iterator[SeatPosition]:
        if self.seat_count <= 0:
            return
        angle_step = 2 * math.pi / self.seat_count
        distance = min(self.half_width, self.half_height) + self._clearance
        for index in range(self.seat_count):
            angle = index * angle_step - math.pi / 2  # 12 o'clock
            yield SeatPosition(
                self.half_width + math.cos(angle) * distance,
                self.half_height + math.sin(angle) * distance,
            )

    def _simple_rectangular(self) -> Iterator[SeatPosition]:
        # Anchors sit on a circle so seats look uniform for any aspect ratio
        distance = max(self.half_width, self.half_height) + self._clearance
        cx, cy = self.half_width, self.half_height
        anchors = {
            Side.TOP: SeatPosition(cx, cy - distance),
            Side.RIGHT: SeatPosition(cx + distance, cy),
            Side.BOTTOM: SeatPosition(cx, cy + distance),
            Side.LEFT: SeatPosition(cx - distance, cy),
        }
        for side in _SIMPLE_RECTANGULAR_ORDER[: max(self.seat_count, 0)]:
            yield anchors[side]

    def _edge(self, side: Side, count: int) -> Iterator[SeatPosition]:
        if count <= 0:
            return
        cx, cy = self.half_width, self.half_height
        if side.is_horizontal:
            offset = self.half_height + self._clearance
            y = cy - offset if side == Side.TOP else cy + offset
            for along in _group_offsets(count):
                yield SeatPosition(cx + along, y)
        else:
            offset = self.half_width + self._clearance
            x = cx - offset if side == Side.LEFT else cx + offset
            for along in _group_offsets(count):
                yield SeatPosition(x, cy + along)


def compute_seat_positions(
    shape: TableShape,
    seat_count: int,
    half_width: float,
    half_height: float,
    seat_radius: float = SEAT_RADIUS,
    sections: SeatSections | None = None,
) -> SeatLayout:
    """Compute seat positions for a table in its local frame.

    Pure and deterministic; never raises. A seat count of zero yields an
    empty layout. Negative inputs are not validated.

    Args:
        shape: Table shape.
        seat_count: Total number of seats.
        half_width: Half the table width in world units.
        half_height: Half the table height in world units.
        seat_radius: Seat radius in world units.
        sections: Optional explicit per-edge seat counts.

    Returns:
        A SeatLayout that can be iterated repeatedly.

    Example:
        >>> layout = compute_seat_positions(TableShape.CIRCLE, 4, 50, 50)
        >>> len(layout)
        4
    """
    return SeatLayout(
        shape=shape,
        seat_count=seat_count,
        half_width=half_width,
        half_height=half_height,
        seat_radius=seat_radius,
        sections=sections,
    )


def seat_layout_for(table: Table, seat_radius: float = SEAT_RADIUS) -> SeatLayout:
    """Seat layout for a table record."""
    return compute_seat_positions(
        table.shape,
        table.seats,
        table.half_width,
        table.half_height,
        seat_radius,
        table.seat_sections,
    )
