"""Tests for risk flag identification."""

from app.core.path_recommendation.risk_flags import (
    RISK_RULES,
    has_cloud_provider,
    identify_risk_flags,
)
from app.core.path_recommendation.types import (
    COMPLIANCE,
    DATA_QUALITY,
    GOVERNANCE,
    TECHNICAL_CAPABILITY,
    Severity,
    Tier,
)
from tests.fixtures_path_recommendation import make_response, make_scores


def _categories(flags):
    return [f.category for f in flags]


def test_no_flags_at_baseline():
    assert identify_risk_flags([], make_scores()) == []


class TestComplianceGovernanceRule:
    def test_fires_below_both_thresholds(self):
        flags = identify_risk_flags([], make_scores(**{COMPLIANCE: 49, GOVERNANCE: 39}))

        assert len(flags) == 1
        assert flags[0].severity == Severity.CRITICAL
        assert flags[0].category == "Compliance & Governance"
        assert flags[0].mitigation == (
            "Strongly recommend AI-Free path or delay AI until governance matures"
        )

    def test_compliance_boundary(self):
        flags = identify_risk_flags([], make_scores(**{COMPLIANCE: 50, GOVERNANCE: 39}))
        assert flags == []

    def test_governance_boundary(self):
        flags = identify_risk_flags([], make_scores(**{COMPLIANCE: 49, GOVERNANCE: 40}))
        assert flags == []


class TestDataQualityRule:
    def test_fires_below_forty(self):
        flags = identify_risk_flags([], make_scores(**{DATA_QUALITY: 39}))

        assert _categories(flags) == ["Data Quality"]
        assert flags[0].severity == Severity.HIGH
        assert flags[0].description == "Poor data quality will lead to unreliable AI models"

    def test_boundary(self):
        assert identify_risk_flags([], make_scores(**{DATA_QUALITY: 40})) == []


class TestInfrastructureRule:
    def test_fires_without_cloud_provider(self):
        flags = identify_risk_flags([], make_scores(**{TECHNICAL_CAPABILITY: 49}))

        assert _categories(flags) == ["Infrastructure"]
        assert flags[0].severity == Severity.MEDIUM

    def test_suppressed_by_cloud_provider(self):
        responses = [make_response(Tier.CLOUD, "Hybrid estate, some GCP projects")]
        flags = identify_risk_flags(responses, make_scores(**{TECHNICAL_CAPABILITY: 20}))
        assert flags == []

    def test_cloud_provider_must_be_on_cloud_tier(self):
        responses = [make_response(Tier.DATA, "Backups on AWS")]
        flags = identify_risk_flags(responses, make_scores(**{TECHNICAL_CAPABILITY: 20}))
        assert _categories(flags) == ["Infrastructure"]

    def test_boundary(self):
        assert identify_risk_flags([], make_scores(**{TECHNICAL_CAPABILITY: 50})) == []


def test_has_cloud_provider():
    assert has_cloud_provider([make_response(Tier.CLOUD, "Azure")])
    assert not has_cloud_provider([make_response(Tier.CLOUD, "Own datacenter")])
    assert not has_cloud_provider([])


def test_all_rules_fire_in_rule_order():
    scores = make_scores(
        **{COMPLIANCE: 10, GOVERNANCE: 10, DATA_QUALITY: 10, TECHNICAL_CAPABILITY: 10}
    )
    flags = identify_risk_flags([], scores)

    assert [f.severity for f in flags] == [Severity.CRITICAL, Severity.HIGH, Severity.MEDIUM]
    assert flags == [rule.flag for rule in RISK_RULES]


def test_missing_category_skips_rule():
    scores = make_scores(**{DATA_QUALITY: 10, COMPLIANCE: 10, GOVERNANCE: 10})
    scores = [s for s in scores if s.category != GOVERNANCE]
    flags = identify_risk_flags([], scores)

    assert _categories(flags) == ["Data Quality"]


def test_empty_score_set_produces_no_flags():
    assert identify_risk_flags([make_response(Tier.UI, "anything")], []) == []
