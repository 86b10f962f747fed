"""Static side-by-side comparison of the two transformation paths.

The narrative is fixed content keyed by path; the recommendation only
decides which side is highlighted.
"""

from app.core.path_recommendation.types import (
    Advantage,
    ComparisonPoint,
    PathComparison,
    PathDetails,
    PathRecommendation,
    TransformationPath,
)

PATH_DETAILS: dict[TransformationPath, PathDetails] = {
    TransformationPath.AI_INCLUDED: PathDetails(
        timeline="32-40 weeks (including AI model development and training)",
        estimated_cost="$800K - $1.5M (includes MLOps platform, model training, governance)",
        key_technologies=[
            "Azure ML / AWS SageMaker / Google Vertex AI",
            "MLOps platform (MLflow, Kubeflow)",
            "Model governance tools",
            "AI-powered features (chatbots, predictive analytics, automation)",
        ],
        risks=[
            "AI model bias and fairness concerns",
            "Data privacy and PII exposure",
            "Model drift and maintenance overhead",
            "Regulatory uncertainty (AI regulations evolving)",
            "Longer time to value (model development takes time)",
        ],
        benefits=[
            "Automation potential (30-50% efficiency gains)",
            "Predictive capabilities (forecasting, anomaly detection)",
            "Enhanced user experience (personalization, chatbots)",
            "Competitive advantage through AI differentiation",
            "Future-proof architecture",
        ],
    ),
    TransformationPath.AI_FREE: PathDetails(
        timeline="24-32 weeks (focused on modernization without AI complexity)",
        estimated_cost="$500K - $900K (traditional cloud, APIs, modernization)",
        key_technologies=[
            "Cloud platform (Azure, AWS, GCP)",
            "Modern API gateway (APIM, Kong)",
            "Rule-based automation (Logic Apps, SSIS, Azure Functions)",
            "Deterministic workflows and business logic",
        ],
        risks=[
            "Lack of predictive capabilities",
            "Manual processes not automated",
            "Competitive disadvantage if competitors adopt AI",
            "Future re-architecture needed if AI added later",
        ],
        benefits=[
            "Faster time to value (simpler implementation)",
            "Lower cost (no MLOps, model training)",
            "Easier compliance (deterministic, auditable)",
            "Lower risk (proven technologies)",
            "Predictable outcomes (no model drift)",
        ],
    ),
}

KEY_DIFFERENCES: tuple[ComparisonPoint, ...] = (
    ComparisonPoint(
        dimension="Timeline",
        ai_included="32-40 weeks",
        ai_free="24-32 weeks",
        advantage=Advantage.AI_FREE,
    ),
    ComparisonPoint(
        dimension="Cost",
        ai_included="$800K - $1.5M",
        ai_free="$500K - $900K",
        advantage=Advantage.AI_FREE,
    ),
    ComparisonPoint(
        dimension="Compliance Complexity",
        ai_included="High (AI governance, bias testing, explainability)",
        ai_free="Low (standard audit trails)",
        advantage=Advantage.AI_FREE,
    ),
    ComparisonPoint(
        dimension="Automation Potential",
        ai_included="High (30-50% efficiency gains)",
        ai_free="Medium (15-25% gains via rule-based automation)",
        advantage=Advantage.AI_INCLUDED,
    ),
    ComparisonPoint(
        dimension="Future Competitiveness",
        ai_included="High (AI differentiation)",
        ai_free="Medium (modernization without AI edge)",
        advantage=Advantage.AI_INCLUDED,
    ),
    ComparisonPoint(
        dimension="Risk Profile",
        ai_included="Higher (model bias, drift, privacy)",
        ai_free="Lower (proven, deterministic)",
        advantage=Advantage.AI_FREE,
    ),
)


def generate_comparison(recommendation: PathRecommendation) -> PathComparison:
    """
    Build the path comparison view for a recommendation.

    Only ``recommendation.recommended_path`` is read; scores and flags do
    not change the content. Every call gets its own copies of the static
    content, so mutating one comparison never reaches another.
    """
    return PathComparison(
        highlighted_path=recommendation.recommended_path,
        ai_included=PATH_DETAILS[TransformationPath.AI_INCLUDED].model_copy(deep=True),
        ai_free=PATH_DETAILS[TransformationPath.AI_FREE].model_copy(deep=True),
        key_differences=[point.model_copy() for point in KEY_DIFFERENCES],
    )
