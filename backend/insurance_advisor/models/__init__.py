"""ORM Models — SQLAlchemy declarative models for the audit log.

Invariants:
    - All models inherit from Base (db/base.py)
    - Both tables are append-only

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from insurance_advisor.models.applicant_profile import ApplicantProfile  # noqa: F401
from insurance_advisor.models.recommendation_record import RecommendationRecord  # noqa: F401
