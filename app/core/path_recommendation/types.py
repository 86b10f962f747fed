"""Pydantic models for the transformation path recommendation engine."""

from datetime import datetime
from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Enumerations
# =============================================================================


class TransformationPath(str, Enum):
    """Strategic modernization path for a project."""

    AI_INCLUDED = "AI_INCLUDED"
    AI_FREE = "AI_FREE"
    UNDECIDED = "UNDECIDED"


class Tier(str, Enum):
    """Architectural layer an assessment question belongs to."""

    UI = "UI"
    API = "API"
    DATA = "DATA"
    CLOUD = "CLOUD"
    AI = "AI"


class Priority(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class AIReadinessFlag(str, Enum):
    YES = "YES"
    NO = "NO"


class Severity(str, Enum):
    """Risk flag severity, most severe first."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class Confidence(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class Advantage(str, Enum):
    """Which path a comparison dimension favours."""

    AI_INCLUDED = "AI_INCLUDED"
    AI_FREE = "AI_FREE"
    NEUTRAL = "NEUTRAL"


# =============================================================================
# Inputs (owned by the persistence layer, read-only here)
# =============================================================================


class Project(BaseModel):
    """Organizational context for an assessment."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[UUID] = Field(None, description="Project UUID")
    name: str = Field(..., description="Project name")
    description: str | None = Field(None, description="Free-text project description")
    transformation_path: TransformationPath = Field(
        default=TransformationPath.UNDECIDED, description="Accepted transformation path"
    )
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("transformation_path", mode="before")
    @classmethod
    def _default_undecided(cls, value):
        return value or TransformationPath.UNDECIDED


class AssessmentResponse(BaseModel):
    """One interview question and its (possibly empty) answer."""

    model_config = ConfigDict(extra="ignore")

    tier: Tier = Field(..., description="Architectural tier of the question")
    question: str | None = Field(None, description="Interview question text")
    response: str | None = Field(None, description="Free-text answer")
    priority: Priority | None = None
    ai_readiness_flag: AIReadinessFlag | None = Field(
        None, description="Whether the interviewer marked the answer AI-ready"
    )

    @field_validator("priority", "ai_readiness_flag", mode="before")
    @classmethod
    def _blank_as_none(cls, value):
        return value or None


# =============================================================================
# Engine outputs
# =============================================================================


class ReadinessScore(BaseModel):
    """Heuristic readiness rating for one category."""

    model_config = ConfigDict(frozen=True)

    category: str = Field(..., description="Category name")
    score: int = Field(..., ge=0, le=100, description="Clamped score out of 100")
    weight: float = Field(..., ge=0, le=1, description="Weight in the overall score")
    findings: list[str] = Field(default_factory=list, description="Evidence found")
    recommendations: list[str] = Field(
        default_factory=list, description="Improvements for this category"
    )


class RiskFlag(BaseModel):
    """Warning that blocks or cautions a transformation path choice."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    category: str
    description: str
    mitigation: str


class PathRecommendation(BaseModel):
    """Recommended transformation path with supporting evidence."""

    model_config = ConfigDict(frozen=True)

    recommended_path: TransformationPath
    confidence: Confidence
    overall_score: int = Field(..., ge=0, le=100, description="Weighted AI readiness score")
    readiness_scores: list[ReadinessScore] = Field(
        ..., description="Category scores in fixed category order"
    )
    risk_flags: list[RiskFlag] = Field(default_factory=list)
    justification: str
    alternative_path_considerations: list[str] = Field(default_factory=list)


class PathDetails(BaseModel):
    """Static narrative for one transformation path."""

    model_config = ConfigDict(frozen=True)

    timeline: str
    estimated_cost: str
    key_technologies: list[str]
    risks: list[str]
    benefits: list[str]


class ComparisonPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    dimension: str
    ai_included: str
    ai_free: str
    advantage: Advantage


class PathComparison(BaseModel):
    """Side-by-side view of both paths, emphasizing the recommended one."""

    model_config = ConfigDict(frozen=True)

    highlighted_path: TransformationPath
    ai_included: PathDetails
    ai_free: PathDetails
    key_differences: list[ComparisonPoint]


# =============================================================================
# Categories and weights - weights must sum to 1.0
# =============================================================================

DATA_QUALITY = "Data Quality & Accessibility"
GOVERNANCE = "Governance & Policy Maturity"
COMPLIANCE = "Regulatory Compliance"
TECHNICAL_CAPABILITY = "Technical Capability"
ORGANIZATIONAL_READINESS = "Organizational Readiness"
BUDGET_TIMELINE = "Budget & Timeline"

CATEGORY_WEIGHTS = {
    DATA_QUALITY: 0.25,
    GOVERNANCE: 0.20,
    COMPLIANCE: 0.20,
    TECHNICAL_CAPABILITY: 0.15,
    ORGANIZATIONAL_READINESS: 0.10,
    BUDGET_TIMELINE: 0.10,
}

BASELINE_SCORE = 50
MIN_SCORE = 0
MAX_SCORE = 100
