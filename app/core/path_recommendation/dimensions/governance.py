"""Governance & Policy Maturity dimension (20% weight)."""

from collections.abc import Sequence
from dataclasses import dataclass

from app.core.path_recommendation.signals import ScoreCard, count_matching
from app.core.path_recommendation.types import (
    GOVERNANCE,
    AIReadinessFlag,
    AssessmentResponse,
    ReadinessScore,
)

GOVERNANCE_KEYWORDS = ("policy", "governance", "compliance", "audit", "standard", "framework")


@dataclass(frozen=True)
class CountBand:
    """Score adjustment once more than ``above`` responses show the evidence."""

    above: int
    delta: int
    finding: str


# Evaluated top-down, first band that applies wins
GOVERNANCE_BANDS = (
    CountBand(
        above=5,
        delta=20,
        finding="Strong governance culture evidenced in multiple responses",
    ),
    CountBand(above=2, delta=10, finding="Some governance processes in place"),
)
NO_GOVERNANCE_PENALTY = -15
NO_GOVERNANCE_RECOMMENDATION = "Establish governance framework before AI adoption"

AI_READINESS_FLAG_THRESHOLD = 3
AI_READINESS_FLAG_BONUS = 15


def score_governance_maturity(responses: Sequence[AssessmentResponse]) -> ReadinessScore:
    """
    Score organizational governance and policy processes.

    Counts answers that mention governance vocabulary, then rewards
    interviewers having flagged several answers as AI-ready.
    """
    card = ScoreCard(GOVERNANCE)

    governance_count = count_matching(responses, GOVERNANCE_KEYWORDS)
    band = next((b for b in GOVERNANCE_BANDS if governance_count > b.above), None)
    if band:
        card.adjust(band.delta, finding=band.finding)
    else:
        card.adjust(NO_GOVERNANCE_PENALTY, recommendation=NO_GOVERNANCE_RECOMMENDATION)

    ai_ready = sum(1 for r in responses if r.ai_readiness_flag == AIReadinessFlag.YES)
    if ai_ready > AI_READINESS_FLAG_THRESHOLD:
        card.adjust(
            AI_READINESS_FLAG_BONUS, finding="AI readiness flags indicate preparation"
        )

    return card.build()
