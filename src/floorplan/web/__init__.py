"""FastAPI REST API for floor plans.

This module exposes seat layout, alignment snapping, viewport fitting,
rendering, validation and export over HTTP.

Usage:
    uvicorn floorplan.web:app --reload
"""

from floorplan.web.app import app, create_app

__all__ = ["app", "create_app"]
