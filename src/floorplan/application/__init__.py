"""Application layer - store, editor session and configuration."""

from .dtos import FloorPlanSnapshot
from .editor import FloorPlanEditor
from .floor_plan import (
    DEFAULT_SECTIONS,
    DEFAULT_TABLES,
    FloorPlanStore,
    TableNotFoundError,
    TableSpec,
    sized_table,
)

__all__ = [
    "DEFAULT_SECTIONS",
    "DEFAULT_TABLES",
    "FloorPlanEditor",
    "FloorPlanSnapshot",
    "FloorPlanStore",
    "TableNotFoundError",
    "TableSpec",
    "sized_table",
]
