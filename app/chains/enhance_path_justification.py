"""LLM chain that rewrites a path recommendation's justification.

Best-effort only: the deterministic recommendation is always complete on
its own. Any failure (feature disabled, no API key, timeout, API error,
empty output) returns the base justification unchanged.
"""

import asyncio
from collections.abc import Sequence

from openai import AsyncOpenAI

from app.core.config import Settings, get_settings
from app.core.logging import get_logger
from app.core.path_recommendation.types import (
    AssessmentResponse,
    PathRecommendation,
    Project,
)

logger = get_logger(__name__)


SYSTEM_PROMPT = """You are a senior digital transformation consultant providing executive-level
recommendations. Write in a professional, confident tone. Be specific and cite evidence."""


def build_enhancement_prompt(
    project: Project,
    responses: Sequence[AssessmentResponse],
    recommendation: PathRecommendation,
    max_responses: int = 10,
    preview_chars: int = 100,
) -> str:
    """
    Build the user prompt for justification enhancement.

    Only the first ``max_responses`` answers are previewed, each cut to
    ``preview_chars`` characters.
    """
    scores = "\n".join(
        f"- {rs.category}: {rs.score}/100" for rs in recommendation.readiness_scores
    )
    flags = "\n".join(
        f"- [{rf.severity.value}] {rf.description}" for rf in recommendation.risk_flags
    )
    previews = "\n".join(
        f"- [{r.tier.value}] {r.question or ''}: {(r.response or '')[:preview_chars]}"
        for r in list(responses)[:max_responses]
    )

    return f"""Project: {project.name}
Current Path Recommendation: {recommendation.recommended_path.value}
Confidence: {recommendation.confidence.value}
Overall Score: {recommendation.overall_score}/100

Readiness Scores:
{scores}

Risk Flags:
{flags}

Assessment Responses ({len(responses)} total):
{previews}

Provide a 2-3 paragraph executive summary that explains WHY this path is recommended,
considering the organization's specific context, readiness, and constraints.
Be specific and reference actual findings from the assessment."""


async def enhance_path_justification(
    project: Project,
    responses: Sequence[AssessmentResponse],
    recommendation: PathRecommendation,
    settings: Settings | None = None,
    client: AsyncOpenAI | None = None,
) -> str:
    """
    Ask the LLM for an executive-level justification.

    Args:
        project: Project being assessed
        responses: Assessment responses used for the recommendation
        recommendation: Deterministic recommendation to explain
        settings: Application settings (defaults to get_settings())
        client: Optional pre-built OpenAI client

    Returns:
        Enhanced justification, or the base justification on any failure
    """
    fallback = recommendation.justification
    if settings is None:
        try:
            settings = get_settings()
        except Exception as e:
            logger.warning(f"Settings unavailable for justification enhancement: {e}")
            return fallback

    if not settings.PATH_ENHANCE_ENABLED:
        return fallback
    if not settings.OPENAI_API_KEY and client is None:
        logger.warning("No OpenAI API key for justification enhancement")
        return fallback

    prompt = build_enhancement_prompt(
        project,
        responses,
        recommendation,
        max_responses=settings.PATH_ENHANCE_MAX_RESPONSES,
        preview_chars=settings.PATH_ENHANCE_PREVIEW_CHARS,
    )

    try:
        openai_client = client or AsyncOpenAI(api_key=settings.OPENAI_API_KEY)
        completion = await asyncio.wait_for(
            openai_client.chat.completions.create(
                model=settings.PATH_ENHANCE_MODEL,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=settings.PATH_ENHANCE_TEMPERATURE,
                max_tokens=settings.PATH_ENHANCE_MAX_TOKENS,
            ),
            timeout=settings.PATH_ENHANCE_TIMEOUT_SECONDS,
        )
        content = completion.choices[0].message.content if completion.choices else None
    except asyncio.TimeoutError:
        logger.warning(
            f"Justification enhancement timed out after "
            f"{settings.PATH_ENHANCE_TIMEOUT_SECONDS}s for project {project.name}"
        )
        return fallback
    except Exception as e:
        logger.warning(f"Justification enhancement failed for project {project.name}: {e}")
        return fallback

    if not content or not content.strip():
        logger.warning(f"Empty justification enhancement for project {project.name}")
        return fallback

    logger.info(
        f"Enhanced justification for project {project.name} with {settings.PATH_ENHANCE_MODEL}"
    )
    return content.strip()


async def enhance_path_recommendation(
    project: Project,
    responses: Sequence[AssessmentResponse],
    recommendation: PathRecommendation,
    settings: Settings | None = None,
    client: AsyncOpenAI | None = None,
) -> PathRecommendation:
    """Copy of the recommendation with only the justification replaced."""
    justification = await enhance_path_justification(
        project, responses, recommendation, settings=settings, client=client
    )
    if justification == recommendation.justification:
        return recommendation
    return recommendation.model_copy(update={"justification": justification})
