"""Organizational Readiness dimension (10% weight)."""

from collections.abc import Sequence

from app.core.path_recommendation.signals import KeywordSignal, ScoreCard
from app.core.path_recommendation.types import (
    ORGANIZATIONAL_READINESS,
    AssessmentResponse,
    ReadinessScore,
)

ORGANIZATIONAL_SIGNALS = (
    KeywordSignal(
        name="change_management",
        keywords=("training", "adoption", "stakeholder", "communication", "change management"),
        min_matches=4,
        hit_delta=15,
        finding="Change management considerations evident",
        recommendation="Develop change management strategy",
    ),
    KeywordSignal(
        name="executive_support",
        keywords=("executive", "leadership", "c-level"),
        hit_delta=15,
        finding="Executive support mentioned",
        recommendation="Secure executive sponsorship before AI initiatives",
    ),
)


def score_organizational_readiness(responses: Sequence[AssessmentResponse]) -> ReadinessScore:
    """Score change management maturity and executive sponsorship."""
    card = ScoreCard(ORGANIZATIONAL_READINESS)
    card.apply_all(ORGANIZATIONAL_SIGNALS, responses)
    return card.build()
