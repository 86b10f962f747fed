"""Budget & Timeline dimension (10% weight)."""

from collections.abc import Sequence

from app.core.path_recommendation.signals import KeywordSignal, ScoreCard
from app.core.path_recommendation.types import (
    BUDGET_TIMELINE,
    AssessmentResponse,
    Project,
    ReadinessScore,
)

BUDGET_TIMELINE_SIGNALS = (
    KeywordSignal(
        name="budget_discussed",
        keywords=("budget", "funding", "resource", "cost", "investment"),
        hit_delta=10,
        finding="Budget considerations discussed",
    ),
    KeywordSignal(
        name="timeline_discussed",
        keywords=("timeline", "deadline", "schedule", "phase", "roadmap"),
        hit_delta=10,
        finding="Timeline considerations discussed",
    ),
    # AI work costs more and takes longer than traditional modernization
    KeywordSignal(
        name="ai_budget",
        keywords=("ml", "ai budget", "model training"),
        hit_delta=15,
        finding="AI-specific budget allocation mentioned",
        recommendation=(
            "AI adoption requires 20-30% additional budget vs traditional modernization"
        ),
    ),
)


def score_budget_timeline(
    responses: Sequence[AssessmentResponse], project: Project | None = None
) -> ReadinessScore:
    """Score resource availability and timeline awareness.

    The project is accepted for signature parity with the other
    project-aware scorers; only the answers carry budget evidence.
    """
    card = ScoreCard(BUDGET_TIMELINE)
    card.apply_all(BUDGET_TIMELINE_SIGNALS, responses)
    return card.build()
