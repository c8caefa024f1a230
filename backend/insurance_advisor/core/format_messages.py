"""Recommendation Message Formatting — pure functions for user-facing text.

Invariants:
    - All functions are pure (no IO, no async, no DB)
    - Summary format: "<type> – $<coverage with comma separators> for <duration> years"
      (en dash, en-US grouping) — clients parse this string, keep it stable
"""

from insurance_advisor.core.domain_types import Recommendation


def format_coverage_amount(amount: int) -> str:
    """Dollar amount with thousands separators, e.g. 640000 -> '$640,000'."""
    return f"${amount:,}"


def format_recommendation_summary(recommendation: Recommendation) -> str:
    """One-line summary returned as the `recommendation` field."""
    return (
        f"{recommendation.recommendation_type.value} – "
        f"{format_coverage_amount(recommendation.coverage_amount)} "
        f"for {recommendation.duration_years} years"
    )
