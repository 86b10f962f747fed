"""Risk flag identification.

Rules are look-ups against the already computed readiness scores. Every
rule is evaluated in declaration order and all applicable rules fire. A
rule whose categories are missing from the score set is skipped.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from app.core.logging import get_logger
from app.core.path_recommendation.dimensions.technical import CLOUD_PROVIDER_KEYWORDS
from app.core.path_recommendation.signals import count_matching
from app.core.path_recommendation.types import (
    COMPLIANCE,
    DATA_QUALITY,
    GOVERNANCE,
    TECHNICAL_CAPABILITY,
    AssessmentResponse,
    ReadinessScore,
    RiskFlag,
    Severity,
    Tier,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class RiskRule:
    """Definition of a risk flag rule."""

    id: str
    requires: tuple[str, ...]  # categories whose scores the check reads
    check: Callable[[dict[str, int], Sequence[AssessmentResponse]], bool]
    flag: RiskFlag


def has_cloud_provider(responses: Sequence[AssessmentResponse]) -> bool:
    """True when a CLOUD tier answer names a major cloud provider."""
    return count_matching(responses, CLOUD_PROVIDER_KEYWORDS, tier=Tier.CLOUD) > 0


# =============================================================================
# Rule Definitions
# =============================================================================

RISK_RULES = [
    RiskRule(
        id="compliance_without_governance",
        requires=(COMPLIANCE, GOVERNANCE),
        check=lambda scores, _: scores[COMPLIANCE] < 50 and scores[GOVERNANCE] < 40,
        flag=RiskFlag(
            severity=Severity.CRITICAL,
            category="Compliance & Governance",
            description=(
                "Compliance-heavy industry without mature governance - "
                "high risk for AI adoption"
            ),
            mitigation="Strongly recommend AI-Free path or delay AI until governance matures",
        ),
    ),
    RiskRule(
        id="poor_data_quality",
        requires=(DATA_QUALITY,),
        check=lambda scores, _: scores[DATA_QUALITY] < 40,
        flag=RiskFlag(
            severity=Severity.HIGH,
            category="Data Quality",
            description="Poor data quality will lead to unreliable AI models",
            mitigation="Invest 6-12 months in data quality improvement before AI",
        ),
    ),
    RiskRule(
        id="on_premises_infrastructure",
        requires=(TECHNICAL_CAPABILITY,),
        check=lambda scores, responses: (
            scores[TECHNICAL_CAPABILITY] < 50 and not has_cloud_provider(responses)
        ),
        flag=RiskFlag(
            severity=Severity.MEDIUM,
            category="Infrastructure",
            description="On-premises infrastructure limits AI scalability",
            mitigation="Plan cloud migration as part of transformation",
        ),
    ),
]


def identify_risk_flags(
    responses: Sequence[AssessmentResponse],
    readiness_scores: Sequence[ReadinessScore],
    rules: Sequence[RiskRule] = RISK_RULES,
) -> list[RiskFlag]:
    """
    Derive risk flags from category scores and raw responses.

    Args:
        responses: All assessment responses for the project
        readiness_scores: Scores produced by the dimension scorers
        rules: Rule set to evaluate (defaults to RISK_RULES)

    Returns:
        Flags for every rule that fired, in rule order
    """
    scores = {rs.category: rs.score for rs in readiness_scores}
    flags: list[RiskFlag] = []

    for rule in rules:
        missing = [category for category in rule.requires if category not in scores]
        if missing:
            logger.debug(f"Skipping risk rule {rule.id}: score unavailable for {missing}")
            continue
        if rule.check(scores, responses):
            flags.append(rule.flag)

    return flags
