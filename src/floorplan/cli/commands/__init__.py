"""CLI command implementations for the floorplan application.

This package contains subcommands for the floorplan CLI, including:
- validate: Validate a floor plan file
"""

from floorplan.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
