"""Geometry and interaction constants for the floor plan editor.

All lengths are abstract world units unless marked as screen pixels.
"""

from __future__ import annotations

# --- Seat geometry ---

SEAT_RADIUS = 12.0  # Rendered seat circle radius
SEAT_SPACING = 12.0  # Clearance between table edge and seat circle
FIXED_SEAT_SPACING = 36.0  # Centre-to-centre distance of adjacent seats

# Rectangular tables with more than this many seats spread along all edges
RECTANGULAR_SIMPLE_MAX_SEATS = 4
LONG_SIDE_SHARE = 0.6

# --- Alignment ---

SNAP_THRESHOLD = 20.0
GUIDE_LINE_EXTENT = 10000.0

# --- Viewport ---

BASE_EXTENT = 2000.0  # Visible world width at zoom 1
MIN_ZOOM = 0.5
MAX_ZOOM = 3.0
ZOOM_STEP = 0.25
FIT_PADDING_FRACTION = 0.2
FOCUS_PADDING = 100.0
DETAILS_PANEL_FRACTION = 0.4  # Share of the container covered by the details panel
DEFAULT_CONTAINER_WIDTH = 1920.0
DEFAULT_CONTAINER_HEIGHT = 1080.0
GRID_SIZE = 40.0

# --- Input ---

MOVE_THRESHOLD = 5.0  # Screen pixels before a press becomes a drag
WHEEL_ZOOM_OUT = 0.9
WHEEL_ZOOM_IN = 1.1
PAN_KEYS = frozenset({" ", "Space"})

# --- Table sizing (collaborator side) ---

SIZE_PADDING = 20.0
