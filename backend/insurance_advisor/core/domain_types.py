"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ApplicantInputs is only ever built by validate_inputs (already validated)
    - Recommendation is immutable once computed (append-only audit log)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers for ids: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and to VARCHAR columns without custom encoders
    - frozen dataclasses for inputs/outputs: the engine is a pure function of its inputs
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ApplicantId = NewType("ApplicantId", int)
RecommendationId = NewType("RecommendationId", int)


# ─── Bounds ──────────────────────────────────────────────────────

MIN_AGE = 18
MAX_AGE = 100


# ─── Enums ───────────────────────────────────────────────────────

class RiskTolerance(str, Enum):
    """Self-reported preference that scales coverage magnitude."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class PolicyType(str, Enum):
    """Recommended policy family."""
    TERM_LIFE = "Term Life"
    WHOLE_LIFE = "Whole Life"


# ─── Value Objects ───────────────────────────────────────────────

@dataclass(frozen=True)
class ApplicantInputs:
    """Validated personal-finance inputs for one submission."""
    age: int
    income: int
    dependents: int
    risk_tolerance: RiskTolerance


@dataclass(frozen=True)
class Recommendation:
    """Computed recommendation — one per submission, never updated."""
    recommendation_type: PolicyType
    coverage_amount: int
    duration_years: int
    explanation: str
