"""Tests for the Markdown path recommendation report."""

from app.core.path_recommendation import generate_comparison, recommend_path
from app.core.path_report_renderer import render_path_recommendation_markdown
from tests.fixtures_path_recommendation import hipaa_scenario, strong_readiness_scenario


def _render(scenario, with_comparison=True):
    project, responses = scenario()
    recommendation = recommend_path(project, responses)
    comparison = generate_comparison(recommendation) if with_comparison else None
    return render_path_recommendation_markdown(project, recommendation, comparison)


def test_header():
    md = _render(hipaa_scenario)

    assert md.startswith("# Transformation Path Recommendation: Acme Modernization\n")
    assert "**Recommended path:** AI-Free" in md
    assert "**Confidence:** HIGH" in md
    assert "**Overall AI readiness score:** 43/100" in md


def test_readiness_table():
    md = _render(hipaa_scenario)

    assert "| Data Quality & Accessibility | 55/100 | 25% |" in md
    assert "| Regulatory Compliance | 30/100 | 20% |" in md
    assert "| Technical Capability | 40/100 | 15% |" in md
    assert "| Budget & Timeline | 50/100 | 10% |" in md
    assert "- Finding: Healthcare industry detected - high compliance requirements" in md
    assert "- Recommendation: Migrate to cloud before AI adoption" in md


def test_risk_flags():
    md = _render(hipaa_scenario)

    assert "- **[CRITICAL] Compliance & Governance:**" in md
    assert "- **[MEDIUM] Infrastructure:**" in md
    assert "  - Mitigation: Plan cloud migration as part of transformation" in md


def test_no_risk_flags():
    md = _render(strong_readiness_scenario)

    assert "No risk flags identified." in md
    assert "## Alternative Path Considerations" not in md


def test_comparison_highlights_recommended_path():
    md = _render(strong_readiness_scenario)

    assert "### AI-Included (recommended)" in md
    assert "### AI-Free\n" in md
    assert "| Timeline | 32-40 weeks | 24-32 weeks | AI-Free |" in md
    assert "| Automation Potential |" in md


def test_comparison_is_optional():
    md = _render(hipaa_scenario, with_comparison=False)

    assert "## Path Comparison" not in md
    assert md.endswith("\n")
    assert not md.endswith("\n\n")


def test_deterministic():
    assert _render(hipaa_scenario) == _render(hipaa_scenario)
