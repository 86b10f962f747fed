"""Render a PathRecommendation (and optional PathComparison) as Markdown.

Pure Python, no LLM calls and no timestamps, so the same recommendation
always renders to the same document.
"""

from __future__ import annotations

from app.core.path_recommendation.types import (
    Advantage,
    PathComparison,
    PathDetails,
    PathRecommendation,
    Project,
    TransformationPath,
)

PATH_LABELS = {
    TransformationPath.AI_INCLUDED: "AI-Included",
    TransformationPath.AI_FREE: "AI-Free",
    TransformationPath.UNDECIDED: "Undecided",
}

ADVANTAGE_LABELS = {
    Advantage.AI_INCLUDED: "AI-Included",
    Advantage.AI_FREE: "AI-Free",
    Advantage.NEUTRAL: "Neutral",
}


def render_path_recommendation_markdown(
    project: Project,
    recommendation: PathRecommendation,
    comparison: PathComparison | None = None,
) -> str:
    """Render the recommendation report for a project."""
    lines: list[str] = [
        f"# Transformation Path Recommendation: {project.name}",
        "",
        f"**Recommended path:** {PATH_LABELS[recommendation.recommended_path]}",
        f"**Confidence:** {recommendation.confidence.value}",
        f"**Overall AI readiness score:** {recommendation.overall_score}/100",
        "",
        "## Justification",
        "",
        recommendation.justification,
        "",
    ]

    lines.extend(_render_readiness(recommendation))
    lines.extend(_render_risk_flags(recommendation))

    if recommendation.alternative_path_considerations:
        lines.extend(["## Alternative Path Considerations", ""])
        lines.extend(f"- {c}" for c in recommendation.alternative_path_considerations)
        lines.append("")

    if comparison:
        lines.extend(_render_comparison(comparison))

    return "\n".join(lines).rstrip() + "\n"


def _render_readiness(recommendation: PathRecommendation) -> list[str]:
    lines = [
        "## Readiness Scores",
        "",
        "| Category | Score | Weight |",
        "|---|---|---|",
    ]
    for rs in recommendation.readiness_scores:
        lines.append(f"| {rs.category} | {rs.score}/100 | {rs.weight:.0%} |")
    lines.append("")

    for rs in recommendation.readiness_scores:
        if not rs.findings and not rs.recommendations:
            continue
        lines.extend([f"### {rs.category}", ""])
        lines.extend(f"- Finding: {f}" for f in rs.findings)
        lines.extend(f"- Recommendation: {r}" for r in rs.recommendations)
        lines.append("")

    return lines


def _render_risk_flags(recommendation: PathRecommendation) -> list[str]:
    lines = ["## Risk Flags", ""]
    if not recommendation.risk_flags:
        return lines + ["No risk flags identified.", ""]

    for flag in recommendation.risk_flags:
        lines.append(f"- **[{flag.severity.value}] {flag.category}:** {flag.description}")
        lines.append(f"  - Mitigation: {flag.mitigation}")
    lines.append("")
    return lines


def _render_path_details(title: str, details: PathDetails) -> list[str]:
    lines = [
        f"### {title}",
        "",
        f"- Timeline: {details.timeline}",
        f"- Estimated cost: {details.estimated_cost}",
        "",
        "Key technologies:",
    ]
    lines.extend(f"- {t}" for t in details.key_technologies)
    lines.extend(["", "Benefits:"])
    lines.extend(f"- {b}" for b in details.benefits)
    lines.extend(["", "Risks:"])
    lines.extend(f"- {r}" for r in details.risks)
    lines.append("")
    return lines


def _render_comparison(comparison: PathComparison) -> list[str]:
    def title(path: TransformationPath) -> str:
        label = PATH_LABELS[path]
        return f"{label} (recommended)" if comparison.highlighted_path == path else label

    lines = ["## Path Comparison", ""]
    lines.extend(
        _render_path_details(title(TransformationPath.AI_INCLUDED), comparison.ai_included)
    )
    lines.extend(_render_path_details(title(TransformationPath.AI_FREE), comparison.ai_free))

    lines.extend(
        [
            "### Key Differences",
            "",
            "| Dimension | AI-Included | AI-Free | Advantage |",
            "|---|---|---|---|",
        ]
    )
    for point in comparison.key_differences:
        lines.append(
            f"| {point.dimension} | {point.ai_included} | {point.ai_free} "
            f"| {ADVANTAGE_LABELS[point.advantage]} |"
        )
    lines.append("")
    return lines
