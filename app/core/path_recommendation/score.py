"""Main path recommendation computation.

This module orchestrates the recommendation by:
1. Running each dimension scorer
2. Aggregating the weighted overall score
3. Identifying risk flags
4. Walking the decision ladder

Pure and synchronous: no I/O, no clock, fresh output on every call.
"""

import logging
import math
from collections.abc import Sequence

from app.core.logging import get_logger, log_with_context
from app.core.path_recommendation.decision import determine_recommended_path
from app.core.path_recommendation.dimensions import (
    score_budget_timeline,
    score_compliance_readiness,
    score_data_quality,
    score_governance_maturity,
    score_organizational_readiness,
    score_technical_capability,
)
from app.core.path_recommendation.risk_flags import identify_risk_flags
from app.core.path_recommendation.types import (
    AssessmentResponse,
    PathRecommendation,
    Project,
    ReadinessScore,
)

logger = get_logger(__name__)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_weighted_score(readiness_scores: Sequence[ReadinessScore]) -> int:
    """
    Weighted average of category scores, rounded half-up.

    The weight total is computed rather than assumed so categories can be
    added or removed. An empty or zero-weight set scores 0.
    """
    total_weight = math.fsum(rs.weight for rs in readiness_scores)
    if total_weight <= 0:
        return 0

    weighted_sum = math.fsum(rs.score * rs.weight for rs in readiness_scores)
    return round_half_up(weighted_sum / total_weight)


def score_readiness(
    project: Project | None, responses: Sequence[AssessmentResponse]
) -> list[ReadinessScore]:
    """All six category scores in fixed category order."""
    return [
        score_data_quality(responses),
        score_governance_maturity(responses),
        score_compliance_readiness(responses, project),
        score_technical_capability(responses),
        score_organizational_readiness(responses),
        score_budget_timeline(responses, project),
    ]


def recommend_path(
    project: Project, responses: Sequence[AssessmentResponse]
) -> PathRecommendation:
    """
    Recommend the AI-Included or AI-Free transformation path for a project.

    Args:
        project: Project being assessed (description is scanned for industry)
        responses: Assessment responses, in any order

    Returns:
        PathRecommendation with scores, flags, justification and caveats
    """
    responses = list(responses)

    readiness_scores = score_readiness(project, responses)
    for rs in readiness_scores:
        logger.debug(f"{rs.category}: {rs.score}/100 (weight {rs.weight})")

    overall_score = calculate_weighted_score(readiness_scores)
    risk_flags = identify_risk_flags(responses, readiness_scores)
    decision = determine_recommended_path(overall_score, risk_flags)

    log_with_context(
        logger,
        logging.INFO,
        f"Recommended transformation path for project {project.name}",
        project_id=project.id,
        recommended_path=decision.recommended_path,
        confidence=decision.confidence,
        overall_score=overall_score,
        risk_flags=len(risk_flags),
        responses=len(responses),
    )

    return PathRecommendation(
        recommended_path=decision.recommended_path,
        confidence=decision.confidence,
        overall_score=overall_score,
        readiness_scores=readiness_scores,
        risk_flags=risk_flags,
        justification=decision.justification,
        alternative_path_considerations=list(decision.alternative_considerations),
    )
