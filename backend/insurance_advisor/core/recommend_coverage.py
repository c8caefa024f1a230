"""Recommendation Engine — fixed rule table mapping applicant inputs to a policy.

Invariants:
    - Pure and deterministic: no IO, no state between calls
    - Pre-adjustment coverage is a multiple of 50,000 or exactly the 500,000 floor
    - Dependents floor is applied BEFORE the risk adjustment, so Low risk may
      take a large family below the floor
    - Each rounding step uses round-half-up independently

Design Decisions:
    - floor(x + 0.5) over built-in round(): round() is banker's rounding, the
      rule table rounds halves up
    - Tiers and adjustments as module-level tables: the decision table is data,
      the function only walks it
"""

import math

from insurance_advisor.core.domain_types import (
    ApplicantInputs, PolicyType, Recommendation, RiskTolerance,
)

INCOME_MULTIPLE = 10
COVERAGE_STEP = 50_000
LARGE_FAMILY_DEPENDENTS = 2      # strictly more than this triggers the floor
LARGE_FAMILY_COVERAGE_FLOOR = 500_000

YOUNG_EXPLANATION = (
    "Term life insurance is ideal for younger individuals as it provides "
    "substantial coverage at an affordable price for a long period."
)
MIDDLE_AGED_EXPLANATION = (
    "Term life insurance balances coverage and cost for middle-aged individuals."
)
OLDER_EXPLANATION = (
    "Whole life insurance provides lifelong coverage and builds cash value, "
    "suitable for older individuals."
)
LOW_RISK_SUFFIX = " We reduced coverage slightly due to your low risk tolerance."
HIGH_RISK_SUFFIX = " We increased coverage to match your high risk tolerance."

# (exclusive upper age bound, policy, duration years, explanation)
AGE_TIERS: tuple[tuple[float, PolicyType, int, str], ...] = (
    (40, PolicyType.TERM_LIFE, 30, YOUNG_EXPLANATION),
    (55, PolicyType.TERM_LIFE, 20, MIDDLE_AGED_EXPLANATION),
    (math.inf, PolicyType.WHOLE_LIFE, 15, OLDER_EXPLANATION),
)

# Medium has no entry: coverage and explanation unchanged
RISK_ADJUSTMENTS: dict[RiskTolerance, tuple[float, str]] = {
    RiskTolerance.LOW: (0.8, LOW_RISK_SUFFIX),
    RiskTolerance.HIGH: (1.2, HIGH_RISK_SUFFIX),
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from -inf (0.5 -> 1)."""
    return math.floor(value + 0.5)


def compute_base_coverage(income: int, dependents: int) -> int:
    """Coverage before risk adjustment: ~10x income, with a large-family floor."""
    coverage = round_half_up(income * INCOME_MULTIPLE / COVERAGE_STEP) * COVERAGE_STEP
    if dependents > LARGE_FAMILY_DEPENDENTS:
        coverage = max(coverage, LARGE_FAMILY_COVERAGE_FLOOR)
    return coverage


def _select_age_tier(age: int) -> tuple[PolicyType, int, str]:
    for upper_bound, policy_type, duration, explanation in AGE_TIERS:
        if age < upper_bound:
            return policy_type, duration, explanation
    raise AssertionError("AGE_TIERS must end with an unbounded tier")


def generate_recommendation(inputs: ApplicantInputs) -> Recommendation:
    """Evaluate the rule table for one applicant.

    Steps run in a fixed order: base coverage, dependents floor, age tier,
    risk adjustment. Inputs must already be validated (see validate_inputs).
    """
    coverage = compute_base_coverage(inputs.income, inputs.dependents)
    policy_type, duration, explanation = _select_age_tier(inputs.age)

    adjustment = RISK_ADJUSTMENTS.get(inputs.risk_tolerance)
    if adjustment:
        multiplier, suffix = adjustment
        coverage = round_half_up(coverage * multiplier)
        explanation += suffix

    return Recommendation(
        recommendation_type=policy_type,
        coverage_amount=coverage,
        duration_years=duration,
        explanation=explanation,
    )
