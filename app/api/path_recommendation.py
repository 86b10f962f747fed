"""API endpoints for transformation path recommendations."""

import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from app.chains.enhance_path_justification import enhance_path_recommendation
from app.core.logging import get_logger, log_with_context
from app.core.path_recommendation import (
    AssessmentResponse,
    PathComparison,
    PathRecommendation,
    Project,
    TransformationPath,
    generate_comparison,
    recommend_path,
)
from app.core.path_report_renderer import render_path_recommendation_markdown
from app.db.assessment_responses import list_assessment_responses
from app.db.projects import get_project, update_transformation_path

logger = get_logger(__name__)

router = APIRouter()


class PathRecommendationResponse(BaseModel):
    recommendation: PathRecommendation
    comparison: PathComparison


class AcceptPathRequest(BaseModel):
    transformation_path: TransformationPath = Field(
        ..., description="Path the user accepted for the project"
    )


def _load_assessment(project_id: UUID) -> tuple[Project, list[AssessmentResponse]]:
    """Load a project and its responses, 404 if the project does not exist."""
    row = get_project(project_id)
    if not row:
        raise HTTPException(status_code=404, detail="Project not found")

    project = Project.model_validate(row)
    responses = [
        AssessmentResponse.model_validate(r) for r in list_assessment_responses(project_id)
    ]
    return project, responses


@router.get(
    "/projects/{project_id}/path-recommendation",
    response_model=PathRecommendationResponse,
)
async def get_path_recommendation(
    project_id: UUID,
    enhance: bool = Query(False, description="Rewrite the justification with an LLM"),
) -> PathRecommendationResponse:
    """
    Recommend the AI-Included or AI-Free path for a project.

    Always computed fresh from the current assessment responses.

    Raises:
        HTTPException 404: If the project does not exist
        HTTPException 500: If computation fails
    """
    try:
        project, responses = _load_assessment(project_id)
        recommendation = recommend_path(project, responses)

        if enhance:
            recommendation = await enhance_path_recommendation(
                project, responses, recommendation
            )

        log_with_context(
            logger,
            logging.INFO,
            "Computed path recommendation",
            project_id=str(project_id),
            recommended_path=recommendation.recommended_path,
            overall_score=recommendation.overall_score,
            risk_flags=len(recommendation.risk_flags),
            enhanced=enhance,
        )

        return PathRecommendationResponse(
            recommendation=recommendation,
            comparison=generate_comparison(recommendation),
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Failed to compute path recommendation for project {project_id}")
        raise HTTPException(
            status_code=500,
            detail="Failed to compute path recommendation",
        ) from e


@router.get(
    "/projects/{project_id}/path-recommendation/report",
    response_class=PlainTextResponse,
)
async def get_path_recommendation_report(project_id: UUID) -> PlainTextResponse:
    """Markdown report of the recommendation and the path comparison."""
    try:
        project, responses = _load_assessment(project_id)
        recommendation = recommend_path(project, responses)
        markdown = render_path_recommendation_markdown(
            project, recommendation, generate_comparison(recommendation)
        )
        return PlainTextResponse(content=markdown, media_type="text/markdown")

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Failed to render path report for project {project_id}")
        raise HTTPException(
            status_code=500,
            detail="Failed to render path recommendation report",
        ) from e


@router.post("/projects/{project_id}/path-recommendation/accept")
async def accept_path_recommendation(project_id: UUID, body: AcceptPathRequest) -> dict:
    """
    Record the transformation path the user accepted on the project.

    Raises:
        HTTPException 404: If the project does not exist
        HTTPException 500: If the update fails
    """
    try:
        if not get_project(project_id):
            raise HTTPException(status_code=404, detail="Project not found")

        return update_transformation_path(project_id, body.transformation_path)

    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Failed to accept path for project {project_id}")
        raise HTTPException(
            status_code=500,
            detail="Failed to update transformation path",
        ) from e
