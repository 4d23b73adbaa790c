"""Value objects for the floor plan domain.

Immutable data types shared by the seat layout, alignment, viewport and
interaction services.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from .constants import (
    DETAILS_PANEL_FRACTION,
    MOVE_THRESHOLD,
    SEAT_RADIUS,
    SNAP_THRESHOLD,
    ZOOM_STEP,
)


class TableShape(str, Enum):
    """Table outline types supported by the editor."""

    RECTANGULAR = "rectangular"
    CIRCLE = "circle"
    BAR = "bar"
    L_BOOTH = "l-booth"
    U_BOOTH = "u-booth"
    CORNER_BOOTH = "corner-booth"


class TableStatus(str, Enum):
    """Reservation status of a table."""

    AVAILABLE = "available"
    RESERVED = "reserved"
    BLOCKED = "blocked"


class SeatEdge(str, Enum):
    """Named seat sections a table's seats can be partitioned into."""

    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"


class Side(str, Enum):
    """Physical side of a table outline in screen orientation (y down)."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @property
    def is_horizontal(self) -> bool:
        """True for sides whose seats are spread along the x axis."""
        return self in (Side.TOP, Side.BOTTOM)


class GuideAxis(str, Enum):
    """Orientation of an alignment guide line."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class SeatSections:
    """Optional per-edge seat counts.

    A value of None means the section is absent and its count is derived
    from the table's total seats. Zero is an explicit, empty section.
    """

    front: int | None = None
    back: int | None = None
    left: int | None = None
    right: int | None = None

    def get(self, edge: SeatEdge) -> int | None:
        """Return the explicit count for an edge, or None when absent."""
        return getattr(self, edge.value)

    @property
    def total(self) -> int:
        """Sum of the explicitly defined sections."""
        return sum(
            count for count in (self.front, self.back, self.left, self.right) if count
        )

    def to_dict(self) -> dict[str, int]:
        """Defined sections only, keyed by edge name."""
        return {edge.value: count for edge in SeatEdge if (count := self.get(edge)) is not None}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> SeatSections | None:
        """Build sections from a plain mapping, ignoring unknown keys."""
        if data is None:
            return None
        return cls(**{edge.value: data.get(edge.value) for edge in SeatEdge})


@dataclass(frozen=True)
class SeatPosition:
    """Seat centre in table-local coordinates (origin at table top-left)."""

    x: float
    y: float


@dataclass(frozen=True)
class Point2D:
    """2D point; used for both world and screen coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class TableSize:
    """Footprint of a table in world units."""

    width: float
    height: float


@dataclass(frozen=True)
class AlignmentGuideLine:
    """Dashed alignment guide shown while a table is dragged.

    Attributes:
        axis: HORIZONTAL lines mark an aligned y, VERTICAL lines an aligned x.
        position: Aligned world coordinate (y for horizontal, x for vertical).
        extent_min: Start of the line along its own axis.
        extent_max: End of the line along its own axis.
    """

    axis: GuideAxis
    position: float
    extent_min: float
    extent_max: float


@dataclass(frozen=True)
class ContainerRect:
    """Pixel rectangle of the canvas element in client coordinates."""

    width: float
    height: float
    left: float = 0.0
    top: float = 0.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Container dimensions must be positive")

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width / self.height


@dataclass(frozen=True)
class EditorSettings:
    """Tunable editor parameters.

    Attributes:
        seat_radius: Rendered seat radius, also part of the seat clearance.
        snap_threshold: Maximum centre distance that still snaps.
        move_threshold: Screen pixels a press must travel to become a drag.
        zoom_step: Zoom increment of the +/- buttons.
        details_panel_fraction: Container height share hidden by the
            details panel when focusing a table.
    """

    seat_radius: float = SEAT_RADIUS
    snap_threshold: float = SNAP_THRESHOLD
    move_threshold: float = MOVE_THRESHOLD
    zoom_step: float = ZOOM_STEP
    details_panel_fraction: float = DETAILS_PANEL_FRACTION

    def __post_init__(self) -> None:
        if self.seat_radius <= 0:
            raise ValueError("seat_radius must be positive")
        if self.snap_threshold < 0:
            raise ValueError("snap_threshold must be non-negative")
        if self.move_threshold < 0:
            raise ValueError("move_threshold must be non-negative")
        if not 0 <= self.details_panel_fraction < 1:
            raise ValueError("details_panel_fraction must be in [0, 1)")

    @property
    def available_height_fraction(self) -> float:
        """Container height share left visible beside the details panel."""
        return 1.0 - self.details_panel_fraction
