"""Keyword evidence matching shared by every readiness dimension.

Each dimension declares its business rules as a table of ``KeywordSignal``
rows; ``ScoreCard`` evaluates them against the assessment responses and
accumulates the score delta, findings and recommendations.

Matching is a case-insensitive substring test on the raw response text.
There is no tokenization, stemming or negation handling, so "we do not
have a data catalog" counts as catalog evidence.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from app.core.path_recommendation.types import (
    BASELINE_SCORE,
    CATEGORY_WEIGHTS,
    MAX_SCORE,
    MIN_SCORE,
    AssessmentResponse,
    ReadinessScore,
    Tier,
)


@dataclass(frozen=True)
class KeywordSignal:
    """One row of a dimension's evidence table."""

    name: str
    keywords: tuple[str, ...]
    hit_delta: int = 0
    miss_delta: int = 0
    finding: str | None = None  # emitted when the signal fires
    recommendation: str | None = None  # emitted when it does not
    tier: Tier | None = None  # only scan responses on this tier
    min_matches: int = 1  # responses that must mention a keyword


def response_text(response: AssessmentResponse) -> str:
    """Lower-cased answer text, empty when unanswered."""
    return (response.response or "").lower()


def mentions_any(text: str, keywords: Iterable[str]) -> bool:
    """True when any keyword occurs in the (already lower-cased) text."""
    return any(keyword in text for keyword in keywords)


def filter_tier(
    responses: Sequence[AssessmentResponse], tier: Tier | None
) -> list[AssessmentResponse]:
    if tier is None:
        return list(responses)
    return [r for r in responses if r.tier == tier]


def count_matching(
    responses: Sequence[AssessmentResponse],
    keywords: Iterable[str],
    tier: Tier | None = None,
) -> int:
    """Number of responses mentioning at least one keyword."""
    keywords = tuple(keywords)
    return sum(
        1 for r in filter_tier(responses, tier) if mentions_any(response_text(r), keywords)
    )


def clamp_score(score: int) -> int:
    return max(MIN_SCORE, min(MAX_SCORE, score))


class ScoreCard:
    """Accumulates evidence for one readiness category."""

    def __init__(self, category: str, baseline: int = BASELINE_SCORE):
        self.category = category
        self.score = baseline
        self.findings: list[str] = []
        self.recommendations: list[str] = []

    def adjust(
        self,
        delta: int,
        finding: str | None = None,
        recommendation: str | None = None,
    ) -> None:
        self.score += delta
        if finding:
            self.findings.append(finding)
        if recommendation:
            self.recommendations.append(recommendation)

    def apply(self, signal: KeywordSignal, responses: Sequence[AssessmentResponse]) -> bool:
        """Evaluate one signal row and record its outcome.

        Returns:
            Whether the signal fired
        """
        matched = count_matching(responses, signal.keywords, tier=signal.tier)
        if matched >= signal.min_matches:
            self.adjust(signal.hit_delta, finding=signal.finding)
            return True

        self.adjust(signal.miss_delta, recommendation=signal.recommendation)
        return False

    def apply_all(
        self, signals: Iterable[KeywordSignal], responses: Sequence[AssessmentResponse]
    ) -> dict[str, bool]:
        return {signal.name: self.apply(signal, responses) for signal in signals}

    def build(self) -> ReadinessScore:
        return ReadinessScore(
            category=self.category,
            score=clamp_score(self.score),
            weight=CATEGORY_WEIGHTS[self.category],
            findings=list(self.findings),
            recommendations=list(self.recommendations),
        )
