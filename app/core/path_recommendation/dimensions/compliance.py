"""Regulatory Compliance dimension (20% weight).

Regulated industries make AI adoption harder: every industry detected in
the project description or the answers lowers the score. Existing
compliance processes partially offset that, since they can be extended to
cover AI.
"""

from collections.abc import Sequence

from app.core.path_recommendation.signals import (
    KeywordSignal,
    ScoreCard,
    mentions_any,
    response_text,
)
from app.core.path_recommendation.types import (
    COMPLIANCE,
    AssessmentResponse,
    Project,
    ReadinessScore,
)

# Industry -> keywords that reveal it (checked in declaration order)
INDUSTRY_KEYWORDS = {
    "healthcare": ("hipaa", "health", "medical", "patient"),
    "finance": ("pci", "sox", "financial", "bank"),
    "government": ("fedramp", "nist", "government", "public sector"),
}
INDUSTRY_PENALTY = -20
LOW_COMPLIANCE_BONUS = 10

COMPLIANCE_HEAVY_RECOMMENDATIONS = (
    "Consider AI-Free path or implement robust AI governance",
    "Engage compliance team early in AI evaluation",
)

EXISTING_COMPLIANCE_SIGNAL = KeywordSignal(
    name="existing_compliance_process",
    keywords=("compliant", "regulation", "audit"),
    hit_delta=15,
    finding="Existing compliance processes can be extended to AI",
)


def detect_industries(
    responses: Sequence[AssessmentResponse], project: Project | None
) -> list[str]:
    """Compliance-heavy industries mentioned anywhere in the project context."""
    description = ((project.description if project else None) or "").lower()
    all_responses = " ".join(response_text(r) for r in responses)

    return [
        industry
        for industry, keywords in INDUSTRY_KEYWORDS.items()
        if mentions_any(description, keywords) or mentions_any(all_responses, keywords)
    ]


def score_compliance_readiness(
    responses: Sequence[AssessmentResponse], project: Project | None = None
) -> ReadinessScore:
    """
    Score regulatory burden and existing compliance readiness.

    Args:
        responses: All assessment responses for the project
        project: Project whose description is scanned for industry keywords

    Returns:
        ReadinessScore for the compliance category
    """
    card = ScoreCard(COMPLIANCE)

    industries = detect_industries(responses, project)
    for industry in industries:
        card.adjust(
            INDUSTRY_PENALTY,
            finding=f"{industry.capitalize()} industry detected - high compliance requirements",
        )

    if industries:
        for recommendation in COMPLIANCE_HEAVY_RECOMMENDATIONS:
            card.adjust(0, recommendation=recommendation)
    else:
        card.adjust(LOW_COMPLIANCE_BONUS, finding="Lower compliance burden allows flexibility")

    card.apply(EXISTING_COMPLIANCE_SIGNAL, responses)
    return card.build()
