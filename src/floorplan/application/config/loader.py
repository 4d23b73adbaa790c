"""Floor plan file loader with error categorisation.

Loads JSON floor plan files and turns file system, JSON and Pydantic
validation failures into a single ConfigError carrying an ``error_type``
and per-field details that the CLI and web API report as-is.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from floorplan.application.config.schema import FloorPlanConfiguration

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors.

    Attributes:
        message: The primary error message
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation
        path: Path to the configuration file (if applicable)
        details: Line/column for JSON errors, or one entry per failed field
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("container", "width"))
        'container.width'
        >>> _format_json_path(("tables", 0, "seat_sections", "front"))
        'tables[0].seat_sections.front'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_json_path(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Configuration validation failed:"]
    for detail in details:
        path = detail["path"] or "<root>"
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {detail['message']}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> FloorPlanConfiguration:
    try:
        config = FloorPlanConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(
            message=_validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e
    logger.debug(f"Loaded floor plan with {len(config.tables)} tables")
    return config


def load_config(path: Path | str) -> FloorPlanConfiguration:
    """Load and validate a floor plan from a JSON file.

    Args:
        path: Path to the JSON floor plan file

    Returns:
        A validated FloorPlanConfiguration instance

    Raises:
        ConfigError: If the file cannot be read, parsed or validated. The
            error_type attribute names the failing stage.

    Example:
        >>> try:
        ...     config = load_config(Path("my-floor.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(
            message=f"Config file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading config file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading config file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    return load_config_from_json(content, path)


def load_config_from_json(content: str, path: Path | None = None) -> FloorPlanConfiguration:
    """Parse and validate floor plan JSON text.

    Raises:
        ConfigError: With error_type json_parse or validation.
    """
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        where = f"{path} " if path is not None else ""
        raise ConfigError(
            message=f"Invalid JSON in config {where}(line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e
    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> FloorPlanConfiguration:
    """Validate a floor plan held in a dictionary, e.g. an API request body.

    Raises:
        ConfigError: If the data fails validation.
    """
    return _validate(data)
