"""Assessment responses database operations."""

from typing import Any
from uuid import UUID

from app.core.logging import get_logger
from app.db.supabase_client import get_supabase

logger = get_logger(__name__)

RESPONSE_COLUMNS = "id, project_id, tier, question, response, priority, ai_readiness_flag"


def list_assessment_responses(project_id: UUID) -> list[dict[str, Any]]:
    """
    List every assessment response recorded for a project.

    Args:
        project_id: Project UUID

    Returns:
        List of response dicts (unanswered questions included)
    """
    supabase = get_supabase()

    try:
        response = (
            supabase.table("assessment_responses")
            .select(RESPONSE_COLUMNS)
            .eq("project_id", str(project_id))
            .execute()
        )
        rows = response.data or []
        logger.debug(f"Loaded {len(rows)} assessment responses for project {project_id}")
        return rows

    except Exception as e:
        logger.error(f"Failed to list assessment responses for project {project_id}: {e}")
        raise
