"""SQL Recommendation Repository — RecommendationLog backed by SQLAlchemy.

Invariants:
    - record() writes the applicant row and its recommendation in ONE transaction
    - Any SQLAlchemy failure rolls back and surfaces as DatabaseError (HTTP 500)
    - Rows are only ever inserted (append-only audit log)

Design Decisions:
    - Errors mapped here rather than in the get_db dependency: the route sees
      DatabaseError before its response is built, so the client gets a 500
    - flush() after the applicant insert to obtain its id for the FK
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from insurance_advisor.core.domain_types import (
    ApplicantId, ApplicantInputs, Recommendation, RecommendationId,
)
from insurance_advisor.core.errors import DatabaseError, ErrorContext
from insurance_advisor.models.applicant_profile import ApplicantProfile
from insurance_advisor.models.recommendation_record import RecommendationRecord

logger = logging.getLogger(__name__)


def _to_dict(record: RecommendationRecord) -> dict:
    applicant = record.applicant
    return {
        "id": record.id,
        "recommendation_type": record.recommendation_type,
        "coverage_amount": record.coverage_amount,
        "duration_years": record.duration_years,
        "explanation": record.explanation,
        "created_at": record.created_at.isoformat(),
        "applicant": {
            "id": applicant.id,
            "age": applicant.age,
            "income": applicant.income,
            "dependents": applicant.dependents,
            "risk_tolerance": applicant.risk_tolerance,
        } if applicant else None,
    }


class SqlRecommendationRepository:
    """Persists submissions and recommendations through an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def record(
        self, inputs: ApplicantInputs, recommendation: Recommendation,
    ) -> tuple[ApplicantId, RecommendationId]:
        try:
            applicant = ApplicantProfile(
                age=inputs.age,
                income=inputs.income,
                dependents=inputs.dependents,
                risk_tolerance=inputs.risk_tolerance.value,
            )
            self._db.add(applicant)
            await self._db.flush()

            record = RecommendationRecord(
                user_id=applicant.id,
                recommendation_type=recommendation.recommendation_type.value,
                coverage_amount=recommendation.coverage_amount,
                duration_years=recommendation.duration_years,
                explanation=recommendation.explanation,
            )
            self._db.add(record)
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(f"Failed to record recommendation: {e}", exc_info=True)
            raise DatabaseError(
                "insert", ErrorContext(debug_info={"table": "recommendations"}),
            ) from e
        return ApplicantId(applicant.id), RecommendationId(record.id)

    async def list_recent(self, limit: int, offset: int) -> list[dict]:
        query = (
            select(RecommendationRecord)
            .order_by(RecommendationRecord.id.desc())
            .limit(limit)
            .offset(offset)
        )
        try:
            result = await self._db.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"Failed to list recommendations: {e}", exc_info=True)
            raise DatabaseError("query") from e
        return [_to_dict(r) for r in result.scalars().unique().all()]

    async def get(self, recommendation_id: RecommendationId) -> dict | None:
        try:
            record = await self._db.get(RecommendationRecord, recommendation_id)
        except SQLAlchemyError as e:
            logger.error(f"Failed to load recommendation: {e}", exc_info=True)
            raise DatabaseError("query") from e
        return _to_dict(record) if record else None
