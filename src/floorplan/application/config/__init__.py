"""Configuration schema and loading for floor plan files.

This package provides JSON-based floor plan loading and validation. It
includes Pydantic models for schema validation, a loader with error
categorisation, and adapters to domain objects.

Public API:
    - FloorPlanConfiguration: Root configuration model
    - TableConfig: Single table model
    - SeatSectionsConfig: Per-edge seat count model
    - ContainerConfig: Canvas size model
    - EditorSettingsConfig: Editor parameter model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - load_config_from_json: Load configuration from JSON text
    - ConfigError: Exception for configuration errors
    - ValidationResult: Container for advisory errors and warnings
    - validate_config: Run advisory checks on a loaded floor plan
    - config_to_tables, config_to_settings, config_to_container: Adapters

Example:
    >>> from pathlib import Path
    >>> from floorplan.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-floor.json"))
    ...     print(f"{len(config.tables)} tables")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from floorplan.application.config.adapter import (
    config_to_container,
    config_to_settings,
    config_to_table,
    config_to_tables,
    tables_to_config,
)
from floorplan.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    load_config_from_json,
)
from floorplan.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)
from floorplan.application.config.schema import (
    SUPPORTED_VERSIONS,
    ContainerConfig,
    EditorSettingsConfig,
    FloorPlanConfiguration,
    SeatSectionsConfig,
    TableConfig,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "ContainerConfig",
    "EditorSettingsConfig",
    "FloorPlanConfiguration",
    "SeatSectionsConfig",
    "TableConfig",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_container",
    "config_to_settings",
    "config_to_table",
    "config_to_tables",
    "load_config",
    "load_config_from_dict",
    "load_config_from_json",
    "tables_to_config",
    "validate_config",
]
