"""Command-line interface for the floor plan editor."""
