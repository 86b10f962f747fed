"""Transformation path recommendation engine.

Scores organizational readiness across 6 categories and recommends either
the AI-Included or the AI-Free transformation path:
- Data Quality & Accessibility (25%)
- Governance & Policy Maturity (20%)
- Regulatory Compliance (20%)
- Technical Capability (15%)
- Organizational Readiness (10%)
- Budget & Timeline (10%)

Usage:
    from app.core.path_recommendation import generate_comparison, recommend_path

    recommendation = recommend_path(project, responses)
    comparison = generate_comparison(recommendation)
"""

from app.core.path_recommendation.comparison import generate_comparison
from app.core.path_recommendation.score import calculate_weighted_score, recommend_path
from app.core.path_recommendation.types import (
    CATEGORY_WEIGHTS,
    AssessmentResponse,
    Confidence,
    PathComparison,
    PathRecommendation,
    Project,
    ReadinessScore,
    RiskFlag,
    Severity,
    Tier,
    TransformationPath,
)

__all__ = [
    "recommend_path",
    "generate_comparison",
    "calculate_weighted_score",
    "AssessmentResponse",
    "Project",
    "ReadinessScore",
    "RiskFlag",
    "PathRecommendation",
    "PathComparison",
    "TransformationPath",
    "Tier",
    "Severity",
    "Confidence",
    "CATEGORY_WEIGHTS",
]
