"""Recommendation Schemas — Pydantic models for the recommendation endpoints.

Invariants:
    - RecommendationRequest only checks JSON types; presence, ranges and enum
      membership are checked by core.validate_inputs so every rejection
      carries its own message
    - Request field names are camelCase on the wire (riskTolerance)

Design Decisions:
    - All request fields optional: a missing field must produce
      "Missing required fields" (400), not a generic schema error
"""

from pydantic import (
    BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr,
)


class RecommendationRequest(BaseModel):
    """Submitted applicant inputs, as received."""
    model_config = ConfigDict(populate_by_name=True)

    age: int | None = None
    income: int | None = None
    dependents: int | None = None
    # any JSON scalar; non-string values are rejected by validate_inputs
    risk_tolerance: StrictStr | StrictInt | StrictFloat | StrictBool | None = Field(
        None, alias="riskTolerance",
    )


class RecommendationResponse(BaseModel):
    """Successful recommendation — summary line plus explanation."""
    recommendation: str
    explanation: str


class ApplicantSnapshot(BaseModel):
    """Inputs a stored recommendation was computed from."""
    id: int
    age: int
    income: int
    dependents: int
    risk_tolerance: str


class RecommendationRecordResponse(BaseModel):
    """One entry of the recommendation audit log."""
    id: int
    recommendation_type: str
    coverage_amount: int
    duration_years: int
    explanation: str
    created_at: str
    applicant: ApplicantSnapshot | None = None


class RecommendationHistoryResponse(BaseModel):
    """Page of audit log entries, newest first."""
    recommendations: list[RecommendationRecordResponse]
    pagination: dict[str, int]
