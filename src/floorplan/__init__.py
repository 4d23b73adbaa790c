"""Floor plan editor core: seat layout, alignment, viewport and interaction."""

__version__ = "0.1.0"
