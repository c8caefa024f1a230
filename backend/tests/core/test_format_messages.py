"""Tests for recommendation summary formatting — pure, no IO."""

from insurance_advisor.core.domain_types import PolicyType, Recommendation
from insurance_advisor.core.format_messages import (
    format_coverage_amount,
    format_recommendation_summary,
)


def test_coverage_amount_uses_thousands_separators():
    assert format_coverage_amount(640_000) == "$640,000"
    assert format_coverage_amount(1_200_000) == "$1,200,000"
    assert format_coverage_amount(0) == "$0"


def test_summary_uses_en_dash_and_duration():
    rec = Recommendation(
        recommendation_type=PolicyType.TERM_LIFE,
        coverage_amount=640_000,
        duration_years=20,
        explanation="irrelevant",
    )
    assert format_recommendation_summary(rec) == "Term Life – $640,000 for 20 years"


def test_summary_for_whole_life():
    rec = Recommendation(
        recommendation_type=PolicyType.WHOLE_LIFE,
        coverage_amount=360_000,
        duration_years=15,
        explanation="irrelevant",
    )
    assert format_recommendation_summary(rec) == "Whole Life – $360,000 for 15 years"
