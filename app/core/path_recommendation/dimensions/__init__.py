"""Readiness dimension scorers, one per category."""

from app.core.path_recommendation.dimensions.budget_timeline import score_budget_timeline
from app.core.path_recommendation.dimensions.compliance import score_compliance_readiness
from app.core.path_recommendation.dimensions.data_quality import score_data_quality
from app.core.path_recommendation.dimensions.governance import score_governance_maturity
from app.core.path_recommendation.dimensions.organizational import (
    score_organizational_readiness,
)
from app.core.path_recommendation.dimensions.technical import score_technical_capability

__all__ = [
    "score_data_quality",
    "score_governance_maturity",
    "score_compliance_readiness",
    "score_technical_capability",
    "score_organizational_readiness",
    "score_budget_timeline",
]
