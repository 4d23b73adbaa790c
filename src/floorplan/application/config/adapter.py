"""Adapters between FloorPlanConfiguration and domain objects.

Configuration tables carry optional sizes; the domain Table always has one.
Missing sizes are computed from the seat count the same way the floor plan
store does it.
"""

from collections.abc import Iterable

from floorplan.application.config.schema import (
    ContainerConfig,
    EditorSettingsConfig,
    FloorPlanConfiguration,
    SeatSectionsConfig,
    TableConfig,
)
from floorplan.domain.entities import Table
from floorplan.domain.services import calculate_table_size
from floorplan.domain.value_objects import ContainerRect, EditorSettings, SeatSections


def _sections(config: SeatSectionsConfig | None) -> SeatSections | None:
    if config is None:
        return None
    return SeatSections(
        front=config.front,
        back=config.back,
        left=config.left,
        right=config.right,
    )


def config_to_table(config: TableConfig) -> Table:
    """Convert one table entry, computing any size it leaves out."""
    sections = _sections(config.seat_sections)
    width, height = config.width, config.height
    if width is None or height is None:
        size = calculate_table_size(config.seats, config.shape, sections)
        width = width if width is not None else size.width
        height = height if height is not None else size.height
    return Table(
        id=config.id,
        x=config.x,
        y=config.y,
        width=width,
        height=height,
        shape=config.shape,
        seats=config.seats,
        seat_sections=sections,
        name=config.name,
        status=config.status,
    )


def config_to_tables(config: FloorPlanConfiguration) -> list[Table]:
    """Convert all configured tables, preserving order."""
    return [config_to_table(table) for table in config.tables]


def config_to_settings(config: FloorPlanConfiguration) -> EditorSettings:
    settings: EditorSettingsConfig = config.settings
    return EditorSettings(
        seat_radius=settings.seat_radius,
        snap_threshold=settings.snap_threshold,
        move_threshold=settings.move_threshold,
        zoom_step=settings.zoom_step,
        details_panel_fraction=settings.details_panel_fraction,
    )


def config_to_container(config: FloorPlanConfiguration) -> ContainerRect:
    container: ContainerConfig = config.container
    return ContainerRect(width=container.width, height=container.height)


def tables_to_config(
    tables: Iterable[Table],
    selected_table_id: str | None = None,
    schema_version: str = "1.1",
) -> FloorPlanConfiguration:
    """Build a configuration from domain tables, keeping their sizes explicit."""
    entries = []
    for table in tables:
        sections = table.seat_sections
        entries.append(
            TableConfig(
                id=table.id,
                name=table.name,
                shape=table.shape,
                seats=table.seats,
                x=table.x,
                y=table.y,
                status=table.status,
                seat_sections=(
                    SeatSectionsConfig(**sections.to_dict()) if sections is not None else None
                ),
                width=table.width,
                height=table.height,
            )
        )
    return FloorPlanConfiguration(
        schema_version=schema_version,
        tables=entries,
        selected_table_id=selected_table_id,
    )
