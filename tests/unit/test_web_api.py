"""Tests for the floor plan REST API."""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from floorplan import __version__
from floorplan.web import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def test_health_reports_capabilities(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == __version__
    assert "u-booth" in data["shapes"]
    assert len(data["shapes"]) == 6
    assert data["export_formats"] == ["dxf", "json", "svg"]


def test_cors_origins_are_configurable() -> None:
    client = TestClient(create_app(cors_origins=["https://host.example"]))
    response = client.options(
        "/api/v1/seats",
        headers={
            "Origin": "https://host.example",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "https://host.example"


class TestSeatsEndpoint:
    """Tests for POST /api/v1/seats."""

    def test_circle(self, client: TestClient) -> None:
        response = client.post("/api/v1/seats", json={"shape": "circle", "seats": 4})

        assert response.status_code == 200
        data = response.json()
        assert data["width"] == 124
        assert len(data["positions"]) == 4
        assert data["positions"][0]["x"] == pytest.approx(62)

    def test_sections(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/seats",
            json={"shape": "bar", "seats": 6, "seat_sections": {"front": 2}},
        )
        assert len(response.json()["positions"]) == 2

    def test_negative_seats_rejected(self, client: TestClient) -> None:
        response = client.post("/api/v1/seats", json={"shape": "circle", "seats": -1})
        assert response.status_code == 422


class TestSnapEndpoint:
    """Tests for POST /api/v1/snap."""

    def test_snap(self, client: TestClient, floor_plan_data: dict[str, Any]) -> None:
        response = client.post(
            "/api/v1/snap",
            json={"config": floor_plan_data, "table_id": "t1", "x": 295, "y": 500},
        )

        assert response.status_code == 200
        data = response.json()
        assert (data["x"], data["y"]) == (299, 500)
        assert data["snapped"] is True
        assert [g["axis"] for g in data["guide_lines"]] == ["vertical"]

    def test_unknown_table(self, client: TestClient, floor_plan_data: dict[str, Any]) -> None:
        response = client.post(
            "/api/v1/snap",
            json={"config": floor_plan_data, "table_id": "ghost", "x": 0, "y": 0},
        )

        assert response.status_code == 404
        assert response.json()["error_type"] == "not_found"
        assert response.json()["details"] == {"table_id": "ghost"}

    def test_invalid_config(self, client: TestClient, floor_plan_data: dict[str, Any]) -> None:
        floor_plan_data["tables"][0]["seats"] = -3
        response = client.post(
            "/api/v1/snap",
            json={"config": floor_plan_data, "table_id": "t1", "x": 0, "y": 0},
        )

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "validation"
        assert body["details"][0]["path"] == "tables[0].seats"


class TestViewportEndpoint:
    """Tests for POST /api/v1/viewport/fit."""

    def test_fit(self, client: TestClient, floor_plan_data: dict[str, Any]) -> None:
        response = client.post("/api/v1/viewport/fit", json={"config": floor_plan_data})

        data = response.json()
        assert data["table_count"] == 3
        bounds = data["content_bounds"]
        viewport = data["viewport"]
        assert viewport["origin_x"] <= bounds["min_x"]
        assert viewport["origin_x"] + viewport["view_width"] >= bounds["max_x"]

    def test_fit_empty(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/viewport/fit", json={"config": {"schema_version": "1.0"}}
        )

        data = response.json()
        assert data["content_bounds"] is None
        assert data["viewport"]["origin_x"] == 0


class TestRenderEndpoint:
    """Tests for POST /api/v1/render."""

    def test_render_svg(self, client: TestClient, floor_plan_data: dict[str, Any]) -> None:
        response = client.post(
            "/api/v1/render", json={"config": floor_plan_data, "selected_table_id": "t2"}
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("image/svg+xml")
        assert 'class="selection-indicator"' in response.text

    def test_focus_unknown_table(
        self, client: TestClient, floor_plan_data: dict[str, Any]
    ) -> None:
        response = client.post(
            "/api/v1/render", json={"config": floor_plan_data, "focus_table_id": "ghost"}
        )
        assert response.status_code == 404


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_valid(self, client: TestClient, floor_plan_data: dict[str, Any]) -> None:
        response = client.post("/api/v1/validate", json={"config": floor_plan_data})
        assert response.json() == {"is_valid": True, "errors": [], "warnings": []}

    def test_schema_errors_reported(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate",
            json={"config": {"schema_version": "1.0", "tables": [{"id": "t", "shape": "oval"}]}},
        )

        data = response.json()
        assert response.status_code == 200
        assert data["is_valid"] is False
        assert data["errors"][0]["path"] == "tables[0].shape"

    def test_warnings_reported(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"config": {"schema_version": "1.0"}}
        )

        data = response.json()
        assert data["is_valid"] is True
        assert data["warnings"][0]["path"] == "tables"


class TestExportEndpoints:
    """Tests for the export endpoints."""

    def test_formats(self, client: TestClient) -> None:
        response = client.get("/api/v1/export/formats")
        assert response.json() == {"formats": ["dxf", "json", "svg"]}

    def test_export_json(self, client: TestClient, floor_plan_data: dict[str, Any]) -> None:
        response = client.post("/api/v1/export/json", json={"config": floor_plan_data})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert "floorplan.json" in response.headers["content-disposition"]
        assert response.json()["total_seats"] == 12

    def test_export_dxf(self, client: TestClient, floor_plan_data: dict[str, Any]) -> None:
        response = client.post("/api/v1/export/dxf", json={"config": floor_plan_data})

        assert response.status_code == 200
        assert "SECTION" in response.text

    def test_unsupported_format(
        self, client: TestClient, floor_plan_data: dict[str, Any]
    ) -> None:
        response = client.post("/api/v1/export/png", json={"config": floor_plan_data})

        assert response.status_code == 400
        body = response.json()
        assert body["error_type"] == "unsupported_format"
        assert body["details"]["available"] == ["dxf", "json", "svg"]
