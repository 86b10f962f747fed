"""Projects database operations."""

import logging
from typing import Any
from uuid import UUID

from app.core.logging import get_logger, log_with_context
from app.core.path_recommendation.types import TransformationPath
from app.db.supabase_client import get_supabase

logger = get_logger(__name__)


def get_project(project_id: UUID) -> dict[str, Any] | None:
    """
    Get a project by ID.

    Args:
        project_id: Project UUID

    Returns:
        Project row as dict, or None if it does not exist
    """
    supabase = get_supabase()

    response = (
        supabase.table("projects")
        .select("*")
        .eq("id", str(project_id))
        .maybe_single()
        .execute()
    )

    return response.data if response else None


def update_transformation_path(
    project_id: UUID, transformation_path: TransformationPath
) -> dict[str, Any]:
    """
    Persist the transformation path a user accepted for a project.

    Args:
        project_id: Project UUID
        transformation_path: Path to record on the project

    Returns:
        Updated project row

    Raises:
        ValueError: If no project row was updated
    """
    supabase = get_supabase()

    try:
        response = (
            supabase.table("projects")
            .update({"transformation_path": transformation_path.value})
            .eq("id", str(project_id))
            .execute()
        )

        if not response.data:
            raise ValueError(f"Project {project_id} not found")

        log_with_context(
            logger,
            logging.INFO,
            "Set transformation path on project",
            project_id=str(project_id),
            transformation_path=transformation_path,
        )
        return response.data[0]

    except Exception as e:
        logger.error(f"Failed to update transformation path for project {project_id}: {e}")
        raise
