"""Recommendation Endpoint — validate, compute, persist, respond.

Invariants:
    - Input is validated by core.validate_inputs before the engine runs
    - The engine is pure; the only IO is the RecommendationLog write
    - Persistence failure → DatabaseError → 500 (global handler)

Design Decisions:
    - RecommendationLog injected via Depends: the persistence handle is acquired
      once at startup and handed to the handler, tests swap in a fake
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from insurance_advisor.core.format_messages import format_recommendation_summary
from insurance_advisor.core.recommend_coverage import generate_recommendation
from insurance_advisor.core.repository_protocols import RecommendationLog
from insurance_advisor.core.validate_inputs import parse_applicant_inputs
from insurance_advisor.infrastructure.database import get_db
from insurance_advisor.infrastructure.recommendation_repository import (
    SqlRecommendationRepository,
)
from insurance_advisor.schemas.recommendation import (
    RecommendationRequest, RecommendationResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["recommendations"])


def get_recommendation_log(
    db: AsyncSession = Depends(get_db),
) -> RecommendationLog:
    return SqlRecommendationRepository(db)


@router.post("/recommendation", response_model=RecommendationResponse)
async def create_recommendation(
    body: RecommendationRequest,
    log: RecommendationLog = Depends(get_recommendation_log),
):
    """Compute and store an insurance recommendation for the submitted inputs."""
    inputs = parse_applicant_inputs(
        body.age, body.income, body.dependents, body.risk_tolerance,
    )
    recommendation = generate_recommendation(inputs)
    applicant_id, recommendation_id = await log.record(inputs, recommendation)
    logger.info(
        "Recommendation issued",
        extra={
            "applicant_id": applicant_id,
            "recommendation_id": recommendation_id,
        },
    )
    return RecommendationResponse(
        recommendation=format_recommendation_summary(recommendation),
        explanation=recommendation.explanation,
    )
