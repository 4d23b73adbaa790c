"""Validation structures and floor plan advisory checks.

Schema errors are reported by the loader. This module adds non-blocking
advisories about tables that are valid but probably not what the author
meant, such as seat sections that do not add up to the seat count.
"""

from dataclasses import dataclass, field
from typing import Any

from floorplan.application.config.adapter import config_to_table
from floorplan.application.config.schema import FloorPlanConfiguration, TableConfig
from floorplan.domain.services import calculate_table_size, seat_layout_for
from floorplan.domain.value_objects import TableShape

_SECTIONED_SHAPES = frozenset(
    {TableShape.BAR, TableShape.L_BOOTH, TableShape.U_BOOTH, TableShape.CORNER_BOOTH}
)


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "tables[0].seats")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """CLI exit code: 0 clean, 1 errors, 2 warnings only."""
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(self, path: str, message: str, value: Any = None) -> "ValidationResult":
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        self.warnings.append(ValidationWarning(path=path, message=message, suggestion=suggestion))
        return self


def _check_table(table: TableConfig, path: str, result: ValidationResult) -> None:
    if table.seats == 0:
        result.add_warning(f"{path}.seats", "Table has no seats")

    if table.seat_sections is not None and table.shape not in _SECTIONED_SHAPES:
        result.add_warning(
            f"{path}.seat_sections",
            f"seat_sections are ignored for {table.shape.value} tables",
            "Remove seat_sections or use a booth or bar shape",
        )

    domain_table = config_to_table(table)
    placed = len(seat_layout_for(domain_table))
    if table.shape in _SECTIONED_SHAPES and placed != table.seats:
        result.add_warning(
            f"{path}.seat_sections",
            f"Sections place {placed} seats but the table has {table.seats}",
            f"Set seats to {placed} or adjust the sections",
        )

    if table.width is not None or table.height is not None:
        sections = domain_table.seat_sections
        needed = calculate_table_size(table.seats, table.shape, sections)
        if domain_table.width < needed.width or domain_table.height < needed.height:
            result.add_warning(
                path,
                f"Explicit size {domain_table.width:g}x{domain_table.height:g} is smaller "
                f"than the {needed.width:g}x{needed.height:g} its seats need",
                "Omit width and height to size the table from its seats",
            )


def validate_config(config: FloorPlanConfiguration) -> ValidationResult:
    """Run advisory checks on a schema-valid floor plan."""
    result = ValidationResult()
    if not config.tables:
        result.add_warning("tables", "Floor plan has no tables")
    for index, table in enumerate(config.tables):
        _check_table(table, f"tables[{index}]", result)
    return result
