"""Tests for application wiring."""

from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)


def test_health_check():
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_path_recommendation_routes_registered():
    paths = {route.path for route in app.routes}

    assert "/v1/projects/{project_id}/path-recommendation" in paths
    assert "/v1/projects/{project_id}/path-recommendation/report" in paths
    assert "/v1/projects/{project_id}/path-recommendation/accept" in paths
