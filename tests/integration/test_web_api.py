"""Integration tests for the REST API."""

import pytest
from fastapi.testclient import TestClient

from skapa.web import create_app
from skapa.web.dependencies import get_regenerator


@pytest.fixture(scope="module")
def client() -> TestClient:
    return TestClient(create_app())


@pytest.fixture
def box_request() -> dict:
    return {"box": {"width": 80, "depth": 60, "levels": 2}}


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.slow
class TestGenerateEndpoint:
    """Tests for POST /api/v1/generate."""

    def test_default_box(self, client: TestClient, box_request: dict) -> None:
        response = client.post("/api/v1/generate", json=box_request)

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert data["box"]["height"] == 52.0
        assert data["clip_pairs"] == 4
        assert data["open_front"] is None
        assert data["mesh"]["triangles"] > 0

    def test_clamped_values_in_response(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/generate",
            json={
                "box": {"width": 80, "depth": 60, "levels": 2, "corners": {"back_left": 20}},
                "open_front": {"openness": 50, "bottom_offset": 100, "cutout_radius": 6},
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["corner_radii"]["back_left"] == 20.0
        assert data["open_front"]["bottom_offset"] == 48.0
        assert data["open_front"]["cutout_radius"] == 0.0

    def test_from_config(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/generate/from-config",
            json={
                "config": {
                    "schema_version": "1.0",
                    "box": {"width": 130, "depth": 60, "levels": 3},
                    "clips": {"corner_clips_only": False},
                }
            },
        )

        assert response.status_code == 200
        assert response.json()["clip_pairs"] == 9


class TestGenerateErrors:
    """Tests for request validation and generation errors."""

    def test_schema_violation(self, client: TestClient) -> None:
        response = client.post("/api/v1/generate", json={"box": {"width": 80}})

        assert response.status_code == 422

    def test_invalid_config_document(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/generate/from-config",
            json={"config": {"box": {"width": 80, "depth": 60, "height": 52, "levels": 2}}},
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "validation"
        assert data["error"] == "Invalid configuration"

    def test_walls_too_thick(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/generate",
            json={"box": {"width": 16, "depth": 16, "levels": 1, "radius": 0, "wall": 8}},
        )

        assert response.status_code == 422
        data = response.json()
        assert data["error_type"] == "generation"
        assert {"message": "Walls leave no room inside the box (width)"} in data["details"]


class SupersededRegenerator:
    """Regenerator whose every request is overtaken by a newer one."""

    async def request(self, box_input):
        return None


class TestPreviewEndpoint:
    """Tests for POST /api/v1/generate/preview."""

    @pytest.mark.slow
    def test_preview(self, client: TestClient, box_request: dict) -> None:
        response = client.post("/api/v1/generate/preview", json=box_request)

        assert response.status_code == 200
        data = response.json()
        assert data["is_valid"] is True
        assert data["clip_pairs"] == 4

    def test_superseded_request(self, box_request: dict) -> None:
        app = create_app()
        app.dependency_overrides[get_regenerator] = SupersededRegenerator
        response = TestClient(app).post("/api/v1/generate/preview", json=box_request)

        assert response.status_code == 409
        data = response.json()
        assert data["error_type"] == "superseded"
        assert data["details"] is None


class TestLimitsEndpoint:
    """Tests for POST /api/v1/limits."""

    def test_default_box(self, client: TestClient, box_request: dict) -> None:
        response = client.post("/api/v1/limits", json=box_request)

        assert response.status_code == 200
        assert response.json() == {
            "max_corner_radius": 30.0,
            "max_bottom_offset": 48.0,
            "max_cutout_radius": 18.0,
            "openness": 0.5,
            "bottom_offset": 10.0,
            "clip_columns": 2,
            "clip_rows": 2,
        }

    def test_requested_opening(self, client: TestClient, box_request: dict) -> None:
        box_request["open_front"] = {"openness": 10}
        response = client.post("/api/v1/limits", json=box_request)

        assert response.json()["max_cutout_radius"] == 8.0


class TestExportEndpoints:
    """Tests for /api/v1/export."""

    def test_formats(self, client: TestClient) -> None:
        response = client.get("/api/v1/export/formats")

        assert response.status_code == 200
        assert response.json() == {"formats": ["json", "stl"]}

    @pytest.mark.slow
    def test_stl_download(self, client: TestClient, box_request: dict) -> None:
        response = client.post("/api/v1/export/stl", json=box_request)

        assert response.status_code == 200
        assert response.headers["content-type"] == "model/stl"
        assert (
            response.headers["content-disposition"]
            == "attachment; filename=skapa-80-60-52.stl"
        )
        triangles = int.from_bytes(response.content[80:84], "little")
        assert len(response.content) == 84 + 50 * triangles

    @pytest.mark.slow
    def test_json_download(self, client: TestClient, box_request: dict) -> None:
        box_request["open_front"] = {"openness": 60}
        response = client.post("/api/v1/export/json", json=box_request)

        assert response.status_code == 200
        assert "skapa-80-60-52-open.json" in response.headers["content-disposition"]
        assert response.json()["open_front"]["openness"] == pytest.approx(0.6)

    def test_unsupported_format(self, client: TestClient, box_request: dict) -> None:
        response = client.post("/api/v1/export/xyz", json=box_request)

        assert response.status_code == 400
        data = response.json()
        assert data["error_type"] == "unsupported_format"
        assert data["details"]["available"] == ["json", "stl"]


class TestOpenApi:
    """Error bodies are documented in the schema."""

    @pytest.mark.parametrize(
        ("path", "status"),
        [
            ("/api/v1/generate", "422"),
            ("/api/v1/generate/preview", "409"),
            ("/api/v1/limits", "422"),
            ("/api/v1/export/{format_name}", "400"),
        ],
    )
    def test_error_responses(self, client: TestClient, path: str, status: str) -> None:
        responses = client.get("/openapi.json").json()["paths"][path]["post"]["responses"]
        schema = responses[status]["content"]["application/json"]["schema"]

        assert schema["$ref"].endswith("/ErrorResponseSchema")
