"""Domain entities for the floor plan."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .value_objects import Point2D, SeatSections, TableShape, TableStatus


@dataclass(frozen=True)
class Table:
    """A table placed on the floor plan.

    Records are owned by the floor plan store; the editor reads them and
    reports position changes back through callbacks.

    Attributes:
        id: Opaque identifier, stable for the table's lifetime.
        x: World-space left edge.
        y: World-space top edge.
        width: World-space width, derived from the seat count elsewhere.
        height: World-space height.
        shape: Outline type, which selects the seat placement rule.
        seats: Total seat count.
        seat_sections: Optional per-edge seat counts for booths and bars.
        name: Display label.
        status: Reservation status.
    """

    id: str
    x: float
    y: float
    width: float
    height: float
    shape: TableShape = TableShape.RECTANGULAR
    seats: int = 4
    seat_sections: SeatSections | None = None
    name: str = ""
    status: TableStatus = TableStatus.AVAILABLE

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Table dimensions must be positive")
        if self.seats < 0:
            raise ValueError("Seat count must be non-negative")

    @property
    def half_width(self) -> float:
        return self.width / 2

    @property
    def half_height(self) -> float:
        return self.height / 2

    @property
    def center(self) -> Point2D:
        """World-space centre of the table."""
        return Point2D(self.x + self.width / 2, self.y + self.height / 2)

    def center_at(self, x: float, y: float) -> Point2D:
        """Centre the table would have with its top-left at (x, y)."""
        return Point2D(x + self.width / 2, y + self.height / 2)

    def moved_to(self, x: float, y: float) -> Table:
        """Copy of this table with a new top-left position."""
        return replace(self, x=x, y=y)
