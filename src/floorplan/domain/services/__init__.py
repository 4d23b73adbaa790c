"""Domain services for the floor plan editor.

This package provides the pure services behind the editor canvas:
- Seat placement around every table shape
- Table footprint sizing from seat counts
- Centre alignment snapping with guide lines
- Viewport transform, zoom and fitting
- Pointer, touch, wheel and keyboard interaction
"""

from .alignment import SnapResult, compute_snap, guide_lines_changed
from .interaction import (
    DragGesture,
    DragOutcome,
    DragPhase,
    DragPreview,
    EventTarget,
    InteractionController,
    PointerEvent,
    TouchEvent,
    WindowEvents,
)
from .seat_layout import (
    EdgeSeats,
    SeatLayout,
    compute_seat_positions,
    derive_sections,
    resolve_sections,
    seat_layout_for,
)
from .table_sizing import calculate_table_size, min_edge_length
from .viewport import (
    Bounds,
    ViewportState,
    ViewportTransform,
    clamp_zoom,
    content_bounds,
    seat_overhang,
)

__all__ = [
    "Bounds",
    "DragGesture",
    "DragOutcome",
    "DragPhase",
    "DragPreview",
    "EdgeSeats",
    "EventTarget",
    "InteractionController",
    "PointerEvent",
    "SeatLayout",
    "SnapResult",
    "TouchEvent",
    "ViewportState",
    "ViewportTransform",
    "WindowEvents",
    "calculate_table_size",
    "clamp_zoom",
    "compute_seat_positions",
    "compute_snap",
    "content_bounds",
    "derive_sections",
    "guide_lines_changed",
    "min_edge_length",
    "resolve_sections",
    "seat_layout_for",
    "seat_overhang",
]
