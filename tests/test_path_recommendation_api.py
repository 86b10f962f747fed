"""Tests for path recommendation API endpoints."""

import logging
from unittest.mock import AsyncMock, patch
from uuid import uuid4

from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)

MODULE = "app.api.path_recommendation"


def _project_row(project_id, description=None, transformation_path=None):
    return {
        "id": str(project_id),
        "name": "Acme Modernization",
        "description": description,
        "transformation_path": transformation_path,
        "created_at": "2025-01-15T10:00:00+00:00",
        "updated_at": "2025-01-15T10:00:00+00:00",
        "status": "active",
    }


def _response_row(project_id, tier, response, ai_readiness_flag=None):
    return {
        "id": str(uuid4()),
        "project_id": str(project_id),
        "tier": tier,
        "question": "Describe the current state",
        "response": response,
        "priority": "",
        "ai_readiness_flag": ai_readiness_flag,
    }


class TestGetPathRecommendation:
    def test_empty_assessment(self):
        project_id = uuid4()

        with (
            patch(f"{MODULE}.get_project", return_value=_project_row(project_id)),
            patch(f"{MODULE}.list_assessment_responses", return_value=[]),
        ):
            response = client.get(f"/v1/projects/{project_id}/path-recommendation")

        assert response.status_code == 200
        data = response.json()
        assert data["recommendation"]["recommended_path"] == "AI_FREE"
        assert data["recommendation"]["confidence"] == "HIGH"
        assert data["recommendation"]["overall_score"] == 43
        assert len(data["recommendation"]["readiness_scores"]) == 6
        assert data["comparison"]["highlighted_path"] == "AI_FREE"
        assert len(data["comparison"]["key_differences"]) == 6

    def test_regulated_project(self):
        project_id = uuid4()
        row = _project_row(project_id, description="HIPAA-covered clinic network")
        responses = [_response_row(project_id, "DATA", "We have no data catalog")]

        with (
            patch(f"{MODULE}.get_project", return_value=row),
            patch(f"{MODULE}.list_assessment_responses", return_value=responses),
        ):
            response = client.get(f"/v1/projects/{project_id}/path-recommendation")

        assert response.status_code == 200
        flags = response.json()["recommendation"]["risk_flags"]
        assert flags[0]["severity"] == "CRITICAL"

    def test_project_not_found(self):
        project_id = uuid4()

        with patch(f"{MODULE}.get_project", return_value=None):
            response = client.get(f"/v1/projects/{project_id}/path-recommendation")

        assert response.status_code == 404
        assert response.json()["detail"] == "Project not found"

    def test_invalid_project_id(self):
        response = client.get("/v1/projects/not-a-uuid/path-recommendation")
        assert response.status_code == 422

    def test_database_failure(self):
        project_id = uuid4()

        with (
            patch(f"{MODULE}.get_project", return_value=_project_row(project_id)),
            patch(
                f"{MODULE}.list_assessment_responses",
                side_effect=RuntimeError("connection reset"),
            ),
        ):
            response = client.get(f"/v1/projects/{project_id}/path-recommendation")

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to compute path recommendation"

    def test_enhance_not_called_by_default(self):
        project_id = uuid4()

        with (
            patch(f"{MODULE}.get_project", return_value=_project_row(project_id)),
            patch(f"{MODULE}.list_assessment_responses", return_value=[]),
            patch(f"{MODULE}.enhance_path_recommendation", new_callable=AsyncMock) as mock_enhance,
        ):
            response = client.get(f"/v1/projects/{project_id}/path-recommendation")

        assert response.status_code == 200
        mock_enhance.assert_not_called()

    def test_enhance_replaces_justification(self):
        project_id = uuid4()

        def rewrite(project, responses, recommendation):
            return recommendation.model_copy(update={"justification": "Executive summary."})

        with (
            patch(f"{MODULE}.get_project", return_value=_project_row(project_id)),
            patch(f"{MODULE}.list_assessment_responses", return_value=[]),
            patch(
                f"{MODULE}.enhance_path_recommendation",
                new_callable=AsyncMock,
                side_effect=rewrite,
            ) as mock_enhance,
        ):
            response = client.get(
                f"/v1/projects/{project_id}/path-recommendation", params={"enhance": "true"}
            )

        assert response.status_code == 200
        assert response.json()["recommendation"]["justification"] == "Executive summary."
        assert response.json()["recommendation"]["overall_score"] == 43
        mock_enhance.assert_awaited_once()


    def test_logs_recommendation_context(self, caplog):
        project_id = uuid4()

        with (
            patch(f"{MODULE}.get_project", return_value=_project_row(project_id)),
            patch(f"{MODULE}.list_assessment_responses", return_value=[]),
            caplog.at_level(logging.INFO, logger=MODULE),
        ):
            response = client.get(f"/v1/projects/{project_id}/path-recommendation")

        assert response.status_code == 200
        records = [r for r in caplog.records if r.getMessage() == "Computed path recommendation"]
        assert len(records) == 1
        context = records[0].extra_data
        assert context["project_id"] == str(project_id)
        assert context["overall_score"] == 43
        assert context["risk_flags"] == 2
        assert context["recommended_path"].value == "AI_FREE"
        assert context["enhanced"] is False


class TestGetReport:
    def test_markdown_report(self):
        project_id = uuid4()

        with (
            patch(f"{MODULE}.get_project", return_value=_project_row(project_id)),
            patch(f"{MODULE}.list_assessment_responses", return_value=[]),
        ):
            response = client.get(f"/v1/projects/{project_id}/path-recommendation/report")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/markdown")
        assert response.text.startswith(
            "# Transformation Path Recommendation: Acme Modernization"
        )
        assert "## Path Comparison" in response.text

    def test_project_not_found(self):
        with patch(f"{MODULE}.get_project", return_value=None):
            response = client.get(f"/v1/projects/{uuid4()}/path-recommendation/report")

        assert response.status_code == 404


class TestAcceptPath:
    def test_accept(self):
        project_id = uuid4()
        updated = _project_row(project_id, transformation_path="AI_FREE")

        with (
            patch(f"{MODULE}.get_project", return_value=_project_row(project_id)),
            patch(f"{MODULE}.update_transformation_path", return_value=updated) as mock_update,
        ):
            response = client.post(
                f"/v1/projects/{project_id}/path-recommendation/accept",
                json={"transformation_path": "AI_FREE"},
            )

        assert response.status_code == 200
        assert response.json()["transformation_path"] == "AI_FREE"
        args = mock_update.call_args.args
        assert args[0] == project_id
        assert args[1].value == "AI_FREE"

    def test_invalid_path(self):
        project_id = uuid4()

        with patch(f"{MODULE}.update_transformation_path") as mock_update:
            response = client.post(
                f"/v1/projects/{project_id}/path-recommendation/accept",
                json={"transformation_path": "MAYBE"},
            )

        assert response.status_code == 422
        mock_update.assert_not_called()

    def test_project_not_found(self):
        with patch(f"{MODULE}.get_project", return_value=None):
            response = client.post(
                f"/v1/projects/{uuid4()}/path-recommendation/accept",
                json={"transformation_path": "AI_INCLUDED"},
            )

        assert response.status_code == 404

    def test_update_failure(self):
        project_id = uuid4()

        with (
            patch(f"{MODULE}.get_project", return_value=_project_row(project_id)),
            patch(
                f"{MODULE}.update_transformation_path",
                side_effect=ValueError("no rows updated"),
            ),
        ):
            response = client.post(
                f"/v1/projects/{project_id}/path-recommendation/accept",
                json={"transformation_path": "AI_INCLUDED"},
            )

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to update transformation path"

    def test_project_lookup_failure_is_logged(self, caplog):
        project_id = uuid4()

        with (
            patch(f"{MODULE}.get_project", side_effect=RuntimeError("connection reset")),
            patch(f"{MODULE}.update_transformation_path") as mock_update,
            caplog.at_level(logging.ERROR, logger=MODULE),
        ):
            response = client.post(
                f"/v1/projects/{project_id}/path-recommendation/accept",
                json={"transformation_path": "AI_FREE"},
            )

        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to update transformation path"
        mock_update.assert_not_called()
        assert any(
            r.levelno == logging.ERROR and r.exc_info and str(project_id) in r.getMessage()
            for r in caplog.records
        )
