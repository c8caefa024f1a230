"""Boundary Validation — turns loosely-typed request fields into ApplicantInputs.

Invariants:
    - The engine never sees unvalidated data
    - Checks run in a fixed order; the first failure wins
    - age/income of 0 count as missing; dependents of 0 is a valid value
    - A body field that fails JSON type checks gets the same message as a
      bad value for that field (message_for_invalid_field)
"""

from typing import Any

from insurance_advisor.core.domain_types import (
    MAX_AGE, MIN_AGE, ApplicantInputs, RiskTolerance,
)
from insurance_advisor.core.errors import InputValidationError

MISSING_FIELDS_MESSAGE = "Missing required fields"
AGE_RANGE_MESSAGE = f"Age must be between {MIN_AGE} and {MAX_AGE}"
INVALID_RISK_MESSAGE = "Invalid risk tolerance value"
NEGATIVE_INCOME_MESSAGE = "Income must be a positive number"
NEGATIVE_DEPENDENTS_MESSAGE = "Dependents cannot be negative"
INVALID_DEPENDENTS_MESSAGE = "Dependents must be a whole number"
INVALID_REQUEST_MESSAGE = "Invalid request data"

# Request field (wire name) -> message when its value has the wrong type
_FIELD_TYPE_MESSAGES = {
    "age": AGE_RANGE_MESSAGE,
    "income": NEGATIVE_INCOME_MESSAGE,
    "dependents": INVALID_DEPENDENTS_MESSAGE,
    "riskTolerance": INVALID_RISK_MESSAGE,
}


def message_for_invalid_field(field: str | None) -> str:
    """Message for a body field whose JSON value could not be parsed."""
    return _FIELD_TYPE_MESSAGES.get(field, INVALID_REQUEST_MESSAGE)


def _first_missing_field(
    age: int | None,
    income: int | None,
    dependents: int | None,
    risk_tolerance: Any,
) -> str | None:
    if not age:
        return "age"
    if not income:
        return "income"
    if dependents is None:
        return "dependents"
    if not risk_tolerance:
        return "riskTolerance"
    return None


def _parse_risk_tolerance(value: Any) -> RiskTolerance:
    # Only the exact strings are accepted; 5, True or "low" are all invalid
    if isinstance(value, str):
        try:
            return RiskTolerance(value)
        except ValueError:
            pass
    raise InputValidationError(INVALID_RISK_MESSAGE, "riskTolerance")


def parse_applicant_inputs(
    age: int | None,
    income: int | None,
    dependents: int | None,
    risk_tolerance: Any,
) -> ApplicantInputs:
    """Validate raw submission fields. Raises InputValidationError (400)."""
    missing = _first_missing_field(age, income, dependents, risk_tolerance)
    if missing:
        raise InputValidationError(MISSING_FIELDS_MESSAGE, missing)

    if age < MIN_AGE or age > MAX_AGE:
        raise InputValidationError(AGE_RANGE_MESSAGE, "age")

    tolerance = _parse_risk_tolerance(risk_tolerance)

    if income < 0:
        raise InputValidationError(NEGATIVE_INCOME_MESSAGE, "income")
    if dependents < 0:
        raise InputValidationError(NEGATIVE_DEPENDENTS_MESSAGE, "dependents")

    return ApplicantInputs(
        age=age, income=income, dependents=dependents, risk_tolerance=tolerance,
    )
