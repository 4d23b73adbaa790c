"""Pydantic configuration schema models for floor plan files.

This module defines the configuration schema for JSON-based floor plan
files. It uses Pydantic v2 for validation and serialization.

The TableShape and TableStatus enums are reused from the domain layer to
ensure consistency and avoid duplication.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from floorplan.domain.constants import (
    DEFAULT_CONTAINER_HEIGHT,
    DEFAULT_CONTAINER_WIDTH,
    DETAILS_PANEL_FRACTION,
    MOVE_THRESHOLD,
    SEAT_RADIUS,
    SNAP_THRESHOLD,
    ZOOM_STEP,
)
from floorplan.domain.value_objects import TableShape, TableStatus

# Supported schema versions for floor plan files
# Version 1.0: Tables, selection and container size
# Version 1.1: Added editor settings and explicit table sizes
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0", "1.1"})


class SeatSectionsConfig(BaseModel):
    """Per-edge seat counts for booths and bars.

    Omitted edges are derived from the table's total seat count; an explicit
    zero leaves that edge empty.
    """

    model_config = ConfigDict(extra="forbid")

    front: int | None = Field(default=None, ge=0)
    back: int | None = Field(default=None, ge=0)
    left: int | None = Field(default=None, ge=0)
    right: int | None = Field(default=None, ge=0)


class TableConfig(BaseModel):
    """Configuration for a single table.

    Attributes:
        id: Unique table identifier
        name: Display label
        shape: Table outline type
        seats: Total seat count
        x: World-space left edge
        y: World-space top edge
        status: Reservation status
        seat_sections: Optional per-edge seat counts
        width: Optional explicit width; computed from seats when omitted
        height: Optional explicit height; computed from seats when omitted
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    name: str = ""
    shape: TableShape = TableShape.RECTANGULAR
    seats: int = Field(default=4, ge=0)
    x: float = 0.0
    y: float = 0.0
    status: TableStatus = TableStatus.AVAILABLE
    seat_sections: SeatSectionsConfig | None = None
    width: float | None = Field(default=None, gt=0)
    height: float | None = Field(default=None, gt=0)


class ContainerConfig(BaseModel):
    """Pixel size of the canvas the floor plan is shown in."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=DEFAULT_CONTAINER_WIDTH, gt=0)
    height: float = Field(default=DEFAULT_CONTAINER_HEIGHT, gt=0)


class EditorSettingsConfig(BaseModel):
    """Tunable editor parameters."""

    model_config = ConfigDict(extra="forbid")

    seat_radius: float = Field(default=SEAT_RADIUS, gt=0)
    snap_threshold: float = Field(default=SNAP_THRESHOLD, ge=0)
    move_threshold: float = Field(default=MOVE_THRESHOLD, ge=0)
    zoom_step: float = Field(default=ZOOM_STEP, gt=0)
    details_panel_fraction: float = Field(default=DETAILS_PANEL_FRACTION, ge=0, lt=1)


class FloorPlanConfiguration(BaseModel):
    """Root configuration model for floor plan files.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        settings: Editor parameters
        container: Canvas size used for fitting and rendering
        tables: Ordered table list
        selected_table_id: Optional id of the selected table

    Example:
        >>> config = FloorPlanConfiguration(
        ...     schema_version="1.0",
        ...     tables=[TableConfig(id="t1", seats=4)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    settings: EditorSettingsConfig = Field(default_factory=EditorSettingsConfig)
    container: ContainerConfig = Field(default_factory=ContainerConfig)
    tables: list[TableConfig] = Field(default_factory=list)
    selected_table_id: str | None = None

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions within a supported major version are accepted
        for forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_table_references(self) -> "FloorPlanConfiguration":
        """Validate that table ids are unique and the selection exists."""
        seen: set[str] = set()
        for table in self.tables:
            if table.id in seen:
                raise ValueError(f"Duplicate table id '{table.id}'")
            seen.add(table.id)
        if self.selected_table_id is not None and self.selected_table_id not in seen:
            raise ValueError(
                f"selected_table_id '{self.selected_table_id}' does not match any table"
            )
        return self

    def table_ids(self) -> list[str]:
        return [table.id for table in self.tables]

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict, omitting unset optionals."""
        return self.model_dump(mode="json", exclude_none=True)
