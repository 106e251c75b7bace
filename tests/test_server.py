"""
Tests for the asmdoc FastAPI server.
"""

import pytest
from fastapi.testclient import TestClient

from asmdoc.server import app


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def payload(sample_listing_text, sample_labels_text) -> dict:
    return {
        "listing": sample_listing_text,
        "labels": sample_labels_text,
        "name": "main.lis",
        "title": "Sample",
    }


class TestUtilityEndpoints:
    """Tests for health and format endpoints."""

    def test_health_check(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "ok"
        assert "version" in data

    def test_formats(self, client):
        response = client.get("/api/formats")
        assert response.status_code == 200
        assert "html" in response.json()["formats"]


class TestHierarchyEndpoint:
    """Tests for POST /api/hierarchy."""

    def test_build(self, client, payload):
        response = client.post("/api/hierarchy", json=payload)
        assert response.status_code == 200

        data = response.json()
        assert data["title"] == "Sample"
        assert data["source_name"] == "main.lis"
        assert [e["label"] for e in data["entries"]] == ["text", "COLOR", "msg", "missing"]

    def test_descriptions_and_kinds(self, client, payload):
        data = client.post("/api/hierarchy", json=payload).json()
        color = next(e for e in data["entries"] if e["label"] == "COLOR")
        assert color["description"] == " Screen colour."
        assert color["kind"] == "constant"
        assert color["value"] == 7

    def test_invalid_option(self, client, payload):
        payload["source_column"] = -1
        response = client.post("/api/hierarchy", json=payload)
        assert response.status_code == 422

    def test_missing_field(self, client):
        response = client.post("/api/hierarchy", json={"labels": ""})
        assert response.status_code == 422


class TestRenderEndpoint:
    """Tests for POST /api/render."""

    def test_render_html(self, client, payload):
        response = client.post("/api/render", json=payload)
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<title>Sample</title>" in response.text
        assert 'id="label-text-layer2-print_string"' in response.text
