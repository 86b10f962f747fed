"""Data Quality & Accessibility dimension (25% weight).

Only DATA tier answers count. AI models are only as reliable as the data
behind them, so a missing data assessment is penalized outright.
"""

from collections.abc import Sequence

from app.core.path_recommendation.signals import KeywordSignal, ScoreCard
from app.core.path_recommendation.types import (
    DATA_QUALITY,
    AssessmentResponse,
    ReadinessScore,
    Tier,
)

NO_DATA_ASSESSMENT_PENALTY = -20

DATA_QUALITY_SIGNALS = (
    KeywordSignal(
        name="data_catalog",
        keywords=("catalog", "metadata"),
        hit_delta=15,
        miss_delta=-10,
        finding="Data catalog in place",
        recommendation="Establish data catalog before AI adoption",
    ),
    KeywordSignal(
        name="data_governance",
        keywords=("governance", "steward"),
        hit_delta=15,
        miss_delta=-10,
        finding="Data governance processes exist",
        recommendation="Implement data governance framework",
    ),
    KeywordSignal(
        name="data_quality_process",
        keywords=("clean", "quality"),
        hit_delta=10,
        finding="Data quality processes mentioned",
        recommendation="Invest in data quality improvement",
    ),
)


def score_data_quality(responses: Sequence[AssessmentResponse]) -> ReadinessScore:
    """
    Score data quality, completeness and accessibility.

    Args:
        responses: All assessment responses for the project

    Returns:
        ReadinessScore for the data quality category
    """
    card = ScoreCard(DATA_QUALITY)
    data_responses = [r for r in responses if r.tier == Tier.DATA]

    if not data_responses:
        card.adjust(NO_DATA_ASSESSMENT_PENALTY, finding="No data tier assessment completed")
        return card.build()

    card.apply_all(DATA_QUALITY_SIGNALS, data_responses)
    return card.build()
