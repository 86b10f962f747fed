"""Technical Capability dimension (15% weight)."""

from collections.abc import Sequence

from app.core.path_recommendation.signals import KeywordSignal, ScoreCard
from app.core.path_recommendation.types import (
    TECHNICAL_CAPABILITY,
    AssessmentResponse,
    ReadinessScore,
    Tier,
)

CLOUD_PROVIDER_KEYWORDS = ("azure", "aws", "gcp")

TECHNICAL_SIGNALS = (
    KeywordSignal(
        name="cloud_infrastructure",
        keywords=CLOUD_PROVIDER_KEYWORDS,
        tier=Tier.CLOUD,
        hit_delta=15,
        miss_delta=-10,
        finding="Cloud infrastructure in place - foundation for AI",
        recommendation="Migrate to cloud before AI adoption",
    ),
    KeywordSignal(
        name="modern_api",
        keywords=("rest", "graphql", "microservice"),
        tier=Tier.API,
        hit_delta=10,
        finding="Modern API architecture supports AI integration",
    ),
    KeywordSignal(
        name="technical_talent",
        keywords=("developer", "engineer", "architect", "devops", "mlops"),
        hit_delta=10,
        finding="Technical talent mentioned",
        recommendation="Assess team skills or plan training/hiring",
    ),
)


def score_technical_capability(responses: Sequence[AssessmentResponse]) -> ReadinessScore:
    """Score infrastructure readiness and technical team skills."""
    card = ScoreCard(TECHNICAL_CAPABILITY)
    card.apply_all(TECHNICAL_SIGNALS, responses)
    return card.build()
