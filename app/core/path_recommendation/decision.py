"""Path decision ladder.

An ordered list of ``(predicate, outcome)`` rules evaluated top-down; the
first rule whose predicate holds decides the path. The score boundaries
(50, 70) and the high-flag threshold (2) are product business rules.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from app.core.path_recommendation.types import (
    Confidence,
    RiskFlag,
    Severity,
    TransformationPath,
)

STRONG_READINESS_SCORE = 70
MODERATE_READINESS_SCORE = 50
HIGH_FLAG_LIMIT = 2


@dataclass(frozen=True)
class DecisionContext:
    overall_score: int
    critical_flags: tuple[RiskFlag, ...]
    high_flags: tuple[RiskFlag, ...]

    @classmethod
    def build(cls, overall_score: int, risk_flags: Sequence[RiskFlag]) -> "DecisionContext":
        return cls(
            overall_score=overall_score,
            critical_flags=tuple(f for f in risk_flags if f.severity == Severity.CRITICAL),
            high_flags=tuple(f for f in risk_flags if f.severity == Severity.HIGH),
        )


@dataclass(frozen=True)
class PathDecision:
    recommended_path: TransformationPath
    confidence: Confidence
    justification: str
    alternative_considerations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DecisionRule:
    id: str
    applies: Callable[[DecisionContext], bool]
    decide: Callable[[DecisionContext], PathDecision]


# =============================================================================
# Outcomes
# =============================================================================


def _critical_risk(ctx: DecisionContext) -> PathDecision:
    descriptions = "; ".join(f.description for f in ctx.critical_flags)
    return PathDecision(
        recommended_path=TransformationPath.AI_FREE,
        confidence=Confidence.HIGH,
        justification=(
            f"Critical risk flags present: {descriptions}. "
            "AI-Free path recommended to ensure compliance and reduce risk."
        ),
        alternative_considerations=[
            "Consider AI-Included path after addressing governance and compliance gaps "
            "(12-18 month timeline)"
        ],
    )


def _strong_readiness(ctx: DecisionContext) -> PathDecision:
    considerations = []
    if ctx.high_flags:
        descriptions = "; ".join(f.description for f in ctx.high_flags)
        considerations.append(f"Address high-risk flags: {descriptions}")

    return PathDecision(
        recommended_path=TransformationPath.AI_INCLUDED,
        confidence=Confidence.MEDIUM if ctx.high_flags else Confidence.HIGH,
        justification=(
            "Strong readiness across data quality, governance, and technical capability "
            f"(overall score: {ctx.overall_score}/100). "
            "Organization is well-positioned for AI adoption."
        ),
        alternative_considerations=considerations,
    )


def _moderate_readiness_high_risk(ctx: DecisionContext) -> PathDecision:
    categories = ", ".join(f.category for f in ctx.high_flags)
    return PathDecision(
        recommended_path=TransformationPath.AI_FREE,
        confidence=Confidence.MEDIUM,
        justification=(
            f"Moderate readiness (score: {ctx.overall_score}/100) with "
            f"{len(ctx.high_flags)} high-risk flags. AI-Free path recommended initially, "
            "with option to add AI in later phases."
        ),
        alternative_considerations=[
            f"Phase 2 AI adoption possible after addressing: {categories}"
        ],
    )


def _borderline_readiness(ctx: DecisionContext) -> PathDecision:
    return PathDecision(
        recommended_path=TransformationPath.AI_INCLUDED,
        confidence=Confidence.LOW,
        justification=(
            f"Borderline readiness (score: {ctx.overall_score}/100). AI adoption possible "
            "but requires significant upfront investment in governance, data quality, "
            "and technical capability."
        ),
        alternative_considerations=[
            "Consider AI-Free path if timeline or budget is constrained",
            'Plan 3-6 month "AI readiness sprint" before full adoption',
        ],
    )


def _low_readiness(ctx: DecisionContext) -> PathDecision:
    return PathDecision(
        recommended_path=TransformationPath.AI_FREE,
        confidence=Confidence.HIGH,
        justification=(
            f"Low readiness score ({ctx.overall_score}/100). Recommend focusing on "
            "foundational modernization (cloud, data, APIs) before considering AI. "
            "AI-Free path delivers value faster with lower risk."
        ),
        alternative_considerations=[
            "Revisit AI adoption after 12-18 months of foundational improvements"
        ],
    )


# =============================================================================
# Ladder (first match wins)
# =============================================================================

DECISION_LADDER = [
    DecisionRule(
        id="critical_risk",
        applies=lambda ctx: len(ctx.critical_flags) > 0,
        decide=_critical_risk,
    ),
    DecisionRule(
        id="strong_readiness",
        applies=lambda ctx: ctx.overall_score >= STRONG_READINESS_SCORE,
        decide=_strong_readiness,
    ),
    DecisionRule(
        id="moderate_readiness_high_risk",
        applies=lambda ctx: (
            ctx.overall_score >= MODERATE_READINESS_SCORE
            and len(ctx.high_flags) >= HIGH_FLAG_LIMIT
        ),
        decide=_moderate_readiness_high_risk,
    ),
    DecisionRule(
        id="borderline_readiness",
        applies=lambda ctx: ctx.overall_score >= MODERATE_READINESS_SCORE,
        decide=_borderline_readiness,
    ),
    DecisionRule(
        id="low_readiness",
        applies=lambda ctx: True,
        decide=_low_readiness,
    ),
]


def select_decision_rule(
    ctx: DecisionContext, ladder: Sequence[DecisionRule] = DECISION_LADDER
) -> DecisionRule:
    """Return the first rule on the ladder that applies."""
    for rule in ladder:
        if rule.applies(ctx):
            return rule
    raise ValueError("Decision ladder has no rule for this context")


def determine_recommended_path(
    overall_score: int, risk_flags: Sequence[RiskFlag]
) -> PathDecision:
    """
    Choose a transformation path from the overall score and risk flags.

    Args:
        overall_score: Weighted readiness score (0-100)
        risk_flags: Flags raised by identify_risk_flags

    Returns:
        PathDecision with path, confidence, justification and caveats
    """
    ctx = DecisionContext.build(overall_score, risk_flags)
    return select_decision_rule(ctx).decide(ctx)
