"""Pytest configuration and shared fixtures for floor plan tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from floorplan.application import FloorPlanEditor, FloorPlanStore
from floorplan.domain import ContainerRect, Table, TableShape
from floorplan.domain.services import WindowEvents


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: end-to-end editor sessions")


# =============================================================================
# Shared table fixtures
# =============================================================================


def _make_table(
    table_id: str = "t1",
    x: float = 0.0,
    y: float = 0.0,
    width: float = 100.0,
    height: float = 100.0,
    shape: TableShape = TableShape.RECTANGULAR,
    seats: int = 4,
    **kwargs: Any,
) -> Table:
    """Create a Table with explicit geometry for testing."""
    return Table(
        id=table_id,
        x=x,
        y=y,
        width=width,
        height=height,
        shape=shape,
        seats=seats,
        **kwargs,
    )


@pytest.fixture
def make_table():
    """Factory for tables with explicit geometry."""
    return _make_table


@pytest.fixture
def two_tables() -> list[Table]:
    """Two 100x100 tables side by side, centres at (50, 50) and (250, 50)."""
    return [_make_table("a", 0, 0), _make_table("b", 200, 0)]


@pytest.fixture
def container() -> ContainerRect:
    """A 1000x500 canvas at the page origin."""
    return ContainerRect(width=1000, height=500)


@pytest.fixture
def window() -> WindowEvents:
    return WindowEvents()


@pytest.fixture
def editor(container: ContainerRect, window: WindowEvents) -> FloorPlanEditor:
    """Editor over the default layout with an observable window."""
    return FloorPlanEditor(store=FloorPlanStore(), container=container, window=window)


# =============================================================================
# Floor plan files
# =============================================================================


@pytest.fixture
def floor_plan_data() -> dict[str, Any]:
    """A valid version 1.1 floor plan."""
    return {
        "schema_version": "1.1",
        "container": {"width": 1000, "height": 500},
        "selected_table_id": "t1",
        "tables": [
            {"id": "t1", "name": "Window", "shape": "rectangular", "seats": 4, "x": 0, "y": 0},
            {"id": "t2", "name": "Round", "shape": "circle", "seats": 2, "x": 300, "y": 0},
            {
                "id": "t3",
                "name": "Booth",
                "shape": "u-booth",
                "seats": 6,
                "x": 0,
                "y": 300,
                "status": "reserved",
                "seat_sections": {"left": 2, "front": 2, "right": 2},
            },
        ],
    }


@pytest.fixture
def floor_plan_file(tmp_path: Path, floor_plan_data: dict[str, Any]) -> Path:
    path = tmp_path / "floor.json"
    path.write_text(json.dumps(floor_plan_data), encoding="utf-8")
    return path
