"""Editor facade wiring the store, viewport and interaction controller."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from floorplan.domain import AlignmentGuideLine, ContainerRect, EditorSettings, Table
from floorplan.domain.services import (
    EventTarget,
    InteractionController,
    SnapResult,
    ViewportState,
    ViewportTransform,
    compute_snap,
)

from .dtos import FloorPlanSnapshot
from .floor_plan import FloorPlanStore

if TYPE_CHECKING:
    from floorplan.application.config import FloorPlanConfiguration

logger = logging.getLogger(__name__)


class FloorPlanEditor:
    """One editing session over a floor plan.

    The store owns the table records and the selection. The controller
    reports selections and committed drags back to the store, and the
    viewport refits whenever the number of tables changes.

    Args:
        store: Table store; the default layout when omitted.
        container: Canvas pixel rectangle; 1920x1080 when omitted.
        settings: Editor parameters.
        window: Global event target for gesture listeners.
    """

    def __init__(
        self,
        store: FloorPlanStore | None = None,
        container: ContainerRect | None = None,
        settings: EditorSettings | None = None,
        window: EventTarget | None = None,
    ) -> None:
        self.settings = settings or EditorSettings()
        self.store = store if store is not None else FloorPlanStore()
        self.viewport = ViewportTransform(container, seat_radius=self.settings.seat_radius)
        self.controller = InteractionController(
            self.viewport,
            tables=lambda: self.store.tables,
            on_select=self.store.select_table,
            on_position_change=self.store.update_table_position,
            window=window,
            snap_threshold=self.settings.snap_threshold,
            move_threshold=self.settings.move_threshold,
        )
        self._unsubscribe = self.store.subscribe(self._on_store_change)
        self.viewport.sync_table_count(self.store.tables)

    @classmethod
    def from_config(cls, config: FloorPlanConfiguration) -> FloorPlanEditor:
        """Create an editor from a validated floor plan configuration."""
        from floorplan.application.config import (
            config_to_container,
            config_to_settings,
            config_to_tables,
        )

        store = FloorPlanStore(config_to_tables(config), config.selected_table_id)
        return cls(
            store=store,
            container=config_to_container(config),
            settings=config_to_settings(config),
        )

    def close(self) -> None:
        """Detach from the store and drop any active gesture listeners."""
        self.controller.reset()
        self._unsubscribe()

    def _on_store_change(self, store: FloorPlanStore) -> None:
        if self.viewport.sync_table_count(store.tables):
            logger.debug(f"Table count changed to {len(store)}; viewport refit")

    # --- Queries ---

    @property
    def tables(self) -> tuple[Table, ...]:
        return self.store.tables

    @property
    def guide_lines(self) -> tuple[AlignmentGuideLine, ...]:
        return self.controller.guide_lines

    def snap(self, table_id: str, x: float, y: float) -> SnapResult:
        """Alignment snap for moving a table's top-left to (x, y)."""
        table = self.store.get(table_id)
        return compute_snap(table, x, y, self.store.tables, self.settings.snap_threshold)

    def snapshot(self) -> FloorPlanSnapshot:
        return FloorPlanSnapshot(
            tables=list(self.store.tables),
            viewport=self.viewport.state,
            container=self.viewport.container,
            selected_table_id=self.store.selected_table_id,
            guide_lines=list(self.controller.guide_lines),
            drag_preview=self.controller.drag_preview,
            seat_radius=self.settings.seat_radius,
        )

    def render_svg(self) -> str:
        from floorplan.infrastructure.canvas_renderer import FloorPlanRenderer

        return FloorPlanRenderer(seat_radius=self.settings.seat_radius).render_snapshot(
            self.snapshot()
        )

    # --- Viewport commands ---

    def fit(self) -> ViewportState:
        return self.viewport.auto_fit(self.store.tables)

    def focus_table(self, table_id: str) -> ViewportState:
        """Zoom to a table, leaving room for the details panel below it."""
        table = self.store.get(table_id)
        return self.viewport.zoom_to_table(table, self.settings.available_height_fraction)

    def zoom_in(self) -> ViewportState:
        return self.viewport.zoom_in(self.settings.zoom_step)

    def zoom_out(self) -> ViewportState:
        return self.viewport.zoom_out(self.settings.zoom_step)

    def resize(self, width: float, height: float, left: float = 0.0, top: float = 0.0) -> ViewportState:
        return self.viewport.resize(width, height, left, top)
