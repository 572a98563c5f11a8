"""
Tests for E-E-A-T Scoring and Optimization
"""

import pytest

from src.analysis import (
    EeatOptimizer,
    EeatContext,
    EeatOptimizationError,
)


@pytest.fixture
def optimizer():
    return EeatOptimizer()


@pytest.fixture
def context():
    return EeatContext(industry="finance", keyword="index funds")


@pytest.fixture
def credentialed_context():
    return EeatContext(
        industry="finance",
        keyword="index funds",
        author_credentials="Certified Financial Planner",
    )


class TestAnalyze:
    """Test component scoring."""

    def test_base_scores_without_indicators(self, optimizer, clean_content, context):
        analysis = optimizer.analyze(clean_content, context)

        assert analysis.experience.score == 40
        assert analysis.expertise.score == 45
        assert analysis.authoritativeness.score == 35
        assert analysis.trustworthiness.score == 50
        assert analysis.overall_score == 42

    def test_indicators_raise_scores(self, optimizer, rich_eeat_content, context):
        analysis = optimizer.analyze(rich_eeat_content, context)

        assert analysis.experience.score == 56
        assert analysis.expertise.score == 59
        assert analysis.authoritativeness.score == 55
        assert analysis.trustworthiness.score == 68
        assert analysis.overall_score == 59
        assert analysis.experience.indicators == ["in my experience", "hands-on experience"]

    def test_missing_elements_below_minimum(self, optimizer, clean_content, context):
        analysis = optimizer.analyze(clean_content, context)

        assert analysis.experience.missing_elements == ["No experience indicators found"]
        assert analysis.expertise.missing_elements == ["Limited expertise indicators"]
        assert analysis.authoritativeness.missing_elements == ["No authority signals found"]
        assert analysis.trustworthiness.missing_elements == ["Limited trust signals"]

    def test_no_missing_elements_when_minimum_met(self, optimizer, rich_eeat_content, context):
        analysis = optimizer.analyze(rich_eeat_content, context)

        for component in (analysis.experience, analysis.expertise,
                          analysis.authoritativeness, analysis.trustworthiness):
            assert component.missing_elements == []

    def test_component_score_capped_at_100(self, optimizer, context):
        content = (
            "We are transparent about fees. This is an honest assessment with accurate information, "
            "verified data, fact-checked figures, updated regularly, sources cited, a disclaimer, "
            "a privacy policy and contact information."
        )

        assert optimizer.analyze(content, context).trustworthiness.score == 100

    def test_matching_is_case_insensitive(self, optimizer, context):
        analysis = optimizer.analyze("RESEARCH SHOWS this works.", context)

        assert analysis.expertise.indicators == ["research shows"]

    def test_author_credentials_bonus(self, optimizer, clean_content, credentialed_context):
        analysis = optimizer.analyze(clean_content, credentialed_context)

        assert analysis.expertise.score == 55
        assert "author credentials" in analysis.expertise.indicators
        assert analysis.overall_score == 45

    def test_missing_credentials_suggestion(self, optimizer, clean_content, context):
        analysis = optimizer.analyze(clean_content, context)

        assert "Include author credentials and relevant qualifications" in analysis.expertise.suggestions

    def test_unrecognised_credentials_no_bonus(self, optimizer, clean_content):
        context = EeatContext(industry="finance", keyword="index funds", author_credentials="Enthusiast")

        assert optimizer.analyze(clean_content, context).expertise.score == 45

    def test_analyze_without_context(self, optimizer, clean_content):
        assert optimizer.analyze(clean_content).overall_score == 42


class TestOptimize:
    """Test the optimization pass."""

    def test_rejects_blank_content(self, optimizer, context):
        with pytest.raises(EeatOptimizationError, match="non-empty string"):
            optimizer.optimize("   ", context)

    def test_rejects_non_string(self, optimizer, context):
        with pytest.raises(EeatOptimizationError):
            optimizer.optimize(None, context)

    def test_weak_components_become_improvement_areas(self, optimizer, clean_content, context):
        result = optimizer.optimize(clean_content, context)

        assert result.improvement_areas == ["experience", "expertise", "authoritativeness", "trustworthiness"]
        assert result.eeat_score == 42
        assert result.confidence == 70
        assert result.optimized_content == clean_content

    def test_issues_and_recommendations(self, optimizer, clean_content, context):
        result = optimizer.optimize(clean_content, context)

        assert result.eeat_issues == [
            "No experience indicators found",
            "Limited expertise indicators",
            "No authority signals found",
            "Limited trust signals",
        ]
        assert result.eeat_recommendations == [
            "Add personal experience and practical examples",
            "Add more technical depth and authoritative sources",
            "Include author credentials and relevant qualifications",
            "Add credentials, certifications, or recognition",
            "Add more transparency and trust indicators",
        ]

    def test_rich_content_has_no_issues(self, optimizer, rich_eeat_content, credentialed_context):
        result = optimizer.optimize(rich_eeat_content, credentialed_context)

        assert result.eeat_issues == []
        assert result.expertise_score == 69
        assert result.eeat_score == 62

    def test_scores_in_range(self, optimizer, weak_content, context):
        result = optimizer.optimize(weak_content, context)

        for score in (result.eeat_score, result.experience_score, result.expertise_score,
                      result.authoritativeness_score, result.trustworthiness_score):
            assert 0 <= score <= 100
        assert result.confidence <= 95

    def test_to_dict(self, optimizer, clean_content, context):
        data = optimizer.optimize(clean_content, context).to_dict()

        assert data["eeat_score"] == 42
        assert data["improvement_areas"][0] == "experience"
