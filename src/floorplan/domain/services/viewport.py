"""Viewport transform between screen pixels and world units.

The viewport shows a world-space rectangle whose width is
``BASE_EXTENT / zoom`` and whose height follows the container's aspect
ratio. Zoom is clamped to ``[MIN_ZOOM, MAX_ZOOM]`` whenever the state is
written, so no operation can leave the viewport outside those bounds.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Sequence

from ..constants import (
    BASE_EXTENT,
    DEFAULT_CONTAINER_HEIGHT,
    DEFAULT_CONTAINER_WIDTH,
    DETAILS_PANEL_FRACTION,
    FIT_PADDING_FRACTION,
    FOCUS_PADDING,
    MAX_ZOOM,
    MIN_ZOOM,
    SEAT_RADIUS,
    SEAT_SPACING,
    ZOOM_STEP,
)
from ..entities import Table
from ..value_objects import ContainerRect, Point2D, TableSize

__all__ = [
    "Bounds",
    "ViewportState",
    "ViewportTransform",
    "clamp_zoom",
    "content_bounds",
    "seat_overhang",
]

logger = logging.getLogger(__name__)


def clamp_zoom(zoom: float) -> float:
    """Clamp a zoom factor to the supported range."""
    return max(MIN_ZOOM, min(MAX_ZOOM, zoom))


def seat_overhang(table: Table, seat_radius: float = SEAT_RADIUS) -> float:
    """Distance seats may reach beyond a table's bounding box on any side."""
    return max(table.width, table.height) / 2 + SEAT_SPACING + seat_radius


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned world-space rectangle."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point2D:
        return Point2D((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def padded(self, fraction: float) -> Bounds:
        """Grow each side by ``fraction`` of the size on that axis."""
        pad_x = self.width * fraction
        pad_y = self.height * fraction
        return Bounds(
            self.min_x - pad_x,
            self.min_y - pad_y,
            self.max_x + pad_x,
            self.max_y + pad_y,
        )

    def contains(self, other: Bounds, tolerance: float = 1e-9) -> bool:
        """Whether ``other`` lies entirely inside this rectangle."""
        return (
            other.min_x >= self.min_x - tolerance
            and other.min_y >= self.min_y - tolerance
            and other.max_x <= self.max_x + tolerance
            and other.max_y <= self.max_y + tolerance
        )


def content_bounds(
    tables: Sequence[Table], seat_radius: float = SEAT_RADIUS
) -> Bounds | None:
    """Union bounding box of all tables including seat overhang.

    Returns:
        The bounds, or None for an empty table list.
    """
    if not tables:
        return None
    min_x = min_y = float("inf")
    max_x = max_y = float("-inf")
    for table in tables:
        overhang = seat_overhang(table, seat_radius)
        min_x = min(min_x, table.x - overhang)
        min_y = min(min_y, table.y - overhang)
        max_x = max(max_x, table.x + table.width + overhang)
        max_y = max(max_y, table.y + table.height + overhang)
    return Bounds(min_x, min_y, max_x, max_y)


@dataclass(frozen=True)
class ViewportState:
    """Visible world region.

    Attributes:
        zoom: Zoom factor; doubling it halves the visible world width.
        origin_x: World x at the container's left edge.
        origin_y: World y at the container's top edge.
        aspect_ratio: Container width divided by height.
    """

    zoom: float
    origin_x: float
    origin_y: float
    aspect_ratio: float

    @property
    def view_width(self) -> float:
        return BASE_EXTENT / self.zoom

    @property
    def view_height(self) -> float:
        return self.view_width / self.aspect_ratio

    @property
    def visible_bounds(self) -> Bounds:
        return Bounds(
            self.origin_x,
            self.origin_y,
            self.origin_x + self.view_width,
            self.origin_y + self.view_height,
        )

    def to_dict(self) -> dict[str, float]:
        return {
            "zoom": self.zoom,
            "origin_x": self.origin_x,
            "origin_y": self.origin_y,
            "view_width": self.view_width,
            "view_height": self.view_height,
        }


class ViewportTransform:
    """Stateful world/screen mapping with zoom, pan and auto-fit.

    Every mutation goes through ``_commit``, which clamps the zoom and
    notifies ``on_change`` only when the resulting state differs from the
    previous one.

    Example:
        >>> viewport = ViewportTransform(ContainerRect(1000, 500))
        >>> viewport.screen_to_world(500, 250)
        Point2D(x=1000.0, y=500.0)
    """

    def __init__(
        self,
        container: ContainerRect | None = None,
        zoom: float = 1.0,
        origin_x: float = 0.0,
        origin_y: float = 0.0,
        seat_radius: float = SEAT_RADIUS,
        on_change: Callable[[ViewportState], None] | None = None,
    ) -> None:
        self._container = container or ContainerRect(
            DEFAULT_CONTAINER_WIDTH, DEFAULT_CONTAINER_HEIGHT
        )
        self.seat_radius = seat_radius
        self.on_change = on_change
        self._state = ViewportState(
            clamp_zoom(zoom), origin_x, origin_y, self._container.aspect_ratio
        )
        self._last_table_count: int | None = None

    # --- State ---

    @property
    def state(self) -> ViewportState:
        return self._state

    @property
    def container(self) -> ContainerRect:
        return self._container

    @property
    def zoom(self) -> float:
        return self._state.zoom

    @property
    def can_zoom_in(self) -> bool:
        return self._state.zoom < MAX_ZOOM

    @property
    def can_zoom_out(self) -> bool:
        return self._state.zoom > MIN_ZOOM

    def _commit(self, zoom: float, origin_x: float, origin_y: float) -> ViewportState:
        new_state = ViewportState(
            clamp_zoom(zoom), origin_x, origin_y, self._container.aspect_ratio
        )
        if new_state != self._state:
            self._state = new_state
            if self.on_change is not None:
                self.on_change(new_state)
        return self._state

    def resize(
        self, width: float, height: float, left: float = 0.0, top: float = 0.0
    ) -> ViewportState:
        """Apply a new container rectangle from resize observation."""
        self._container = ContainerRect(width, height, left, top)
        return self._commit(self._state.zoom, self._state.origin_x, self._state.origin_y)

    # --- Coordinate conversion ---

    def scale_factors(self, container: ContainerRect | None = None) -> tuple[float, float]:
        """World units per screen pixel on each axis."""
        rect = container or self._container
        return (
            self._state.view_width / rect.width,
            self._state.view_height / rect.height,
        )

    def screen_to_world(
        self, px: float, py: float, container: ContainerRect | None = None
    ) -> Point2D:
        """Convert client-space pixels to world coordinates."""
        rect = container or self._container
        scale_x, scale_y = self.scale_factors(rect)
        return Point2D(
            self._state.origin_x + (px - rect.left) * scale_x,
            self._state.origin_y + (py - rect.top) * scale_y,
        )

    def world_to_screen(
        self, wx: float, wy: float, container: ContainerRect | None = None
    ) -> Point2D:
        """Convert world coordinates to client-space pixels."""
        rect = container or self._container
        scale_x, scale_y = self.scale_factors(rect)
        return Point2D(
            rect.left + (wx - self._state.origin_x) / scale_x,
            rect.top + (wy - self._state.origin_y) / scale_y,
        )

    # --- Fitting ---

    def auto_fit(
        self, tables: Sequence[Table], aspect_ratio: float | None = None
    ) -> ViewportState:
        """Fit all tables, with seats and padding, into the view.

        An empty table list resets the origin and keeps the zoom.

        Args:
            tables: Tables to fit.
            aspect_ratio: Current container aspect ratio, when the caller
                observed it before the container was resized. The container
                keeps its width and takes the matching height.
        """
        if (
            aspect_ratio is not None
            and aspect_ratio > 0
            and aspect_ratio != self._container.aspect_ratio
        ):
            self._container = replace(
                self._container, height=self._container.width / aspect_ratio
            )

        bounds = content_bounds(tables, self.seat_radius)
        if bounds is None:
            return self._commit(self._state.zoom, 0.0, 0.0)

        aspect = self._container.aspect_ratio
        padded = bounds.padded(FIT_PADDING_FRACTION)
        zoom = clamp_zoom(
            min(
                BASE_EXTENT / padded.width,
                (BASE_EXTENT / aspect) / padded.height,
            )
        )
        view_width = BASE_EXTENT / zoom
        view_height = view_width / aspect
        center = padded.center
        logger.debug(
            f"Auto-fit {len(tables)} tables: zoom={zoom:.3f} "
            f"center=({center.x:.1f}, {center.y:.1f})"
        )
        return self._commit(
            zoom, center.x - view_width / 2, center.y - view_height / 2
        )

    def sync_table_count(self, tables: Sequence[Table]) -> bool:
        """Auto-fit when the number of tables changed since the last sync.

        Moving a table never changes the count, so repositioning does not
        refit the camera.

        Returns:
            True if the viewport was refit.
        """
        count = len(tables)
        if count == self._last_table_count:
            return False
        self._last_table_count = count
        self.auto_fit(tables)
        return True

    def zoom_to_region(
        self,
        target_center: Point2D,
        content_size: TableSize,
        available_height_fraction: float = 1.0 - DETAILS_PANEL_FRACTION,
    ) -> ViewportState:
        """Focus a region inside the unobscured top part of the container.

        Args:
            target_center: World-space point to centre.
            content_size: World-space size that must fit.
            available_height_fraction: Share of the container height, from
                the top, that is not covered by overlays. Values outside
                (0, 1] use the full height.
        """
        fraction = available_height_fraction
        if not 0 < fraction <= 1:
            fraction = 1.0
        rect = self._container
        available_height = rect.height * fraction
        available_aspect = rect.width / available_height

        candidates = []
        if content_size.width > 0:
            candidates.append(BASE_EXTENT / content_size.width)
        if content_size.height > 0:
            candidates.append((BASE_EXTENT / available_aspect) / content_size.height)
        zoom = clamp_zoom(min(candidates)) if candidates else self._state.zoom

        view_width = BASE_EXTENT / zoom
        scale = view_width / rect.width
        return self._commit(
            zoom,
            target_center.x - view_width / 2,
            target_center.y - available_height * scale / 2,
        )

    def zoom_to_table(
        self,
        table: Table,
        available_height_fraction: float = 1.0 - DETAILS_PANEL_FRACTION,
    ) -> ViewportState:
        """Focus a single table, leaving room for seats and a margin."""
        overhang = seat_overhang(table, self.seat_radius)
        size = TableSize(
            table.width + overhang * 2 + FOCUS_PADDING * 2,
            table.height + overhang * 2 + FOCUS_PADDING * 2,
        )
        return self.zoom_to_region(table.center, size, available_height_fraction)

    # --- Zoom and pan ---

    def zoom_at_point(
        self,
        new_zoom: float,
        anchor_x: float,
        anchor_y: float,
        container: ContainerRect | None = None,
    ) -> ViewportState:
        """Zoom while keeping the world point under the anchor in place."""
        rect = container or self._container
        world = self.screen_to_world(anchor_x, anchor_y, rect)
        zoom = clamp_zoom(new_zoom)
        view_width = BASE_EXTENT / zoom
        view_height = view_width / self._container.aspect_ratio
        return self._commit(
            zoom,
            world.x - (anchor_x - rect.left) * (view_width / rect.width),
            world.y - (anchor_y - rect.top) * (view_height / rect.height),
        )

    def step_zoom(self, delta: float) -> ViewportState:
        """Change zoom by a fixed amount, keeping the origin."""
        return self._commit(
            self._state.zoom + delta, self._state.origin_x, self._state.origin_y
        )

    def zoom_in(self, step: float = ZOOM_STEP) -> ViewportState:
        return self.step_zoom(step)

    def zoom_out(self, step: float = ZOOM_STEP) -> ViewportState:
        return self.step_zoom(-step)

    def pan_to(self, origin_x: float, origin_y: float) -> ViewportState:
        return self._commit(self._state.zoom, origin_x, origin_y)

    def pan_by_screen(self, start_origin: Point2D, dx: float, dy: float) -> ViewportState:
        """Pan so content follows a pointer moved by (dx, dy) pixels.

        Args:
            start_origin: Origin at the start of the pan gesture.
            dx: Horizontal pointer travel in pixels since the start.
            dy: Vertical pointer travel in pixels since the start.
        """
        scale_x, scale_y = self.scale_factors()
        return self._commit(
            self._state.zoom,
            start_origin.x - dx * scale_x,
            start_origin.y - dy * scale_y,
        )
