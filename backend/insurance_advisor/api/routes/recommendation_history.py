"""Recommendation History — read side of the append-only audit log.

Invariants:
    - Read-only: no route here inserts, updates or deletes
    - Newest first; pagination via limit/offset
"""

from fastapi import APIRouter, Depends, Query

from insurance_advisor.api.routes.recommendation import get_recommendation_log
from insurance_advisor.core.domain_types import RecommendationId
from insurance_advisor.core.errors import ResourceNotFoundError
from insurance_advisor.core.repository_protocols import RecommendationLog
from insurance_advisor.schemas.recommendation import (
    RecommendationHistoryResponse, RecommendationRecordResponse,
)

router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])


@router.get("", response_model=RecommendationHistoryResponse)
async def list_recommendations(
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    log: RecommendationLog = Depends(get_recommendation_log),
):
    """List stored recommendations with pagination."""
    records = await log.list_recent(limit, offset)
    return {
        "recommendations": records,
        "pagination": {"limit": limit, "offset": offset},
    }


@router.get("/{recommendation_id}", response_model=RecommendationRecordResponse)
async def get_recommendation(
    recommendation_id: int,
    log: RecommendationLog = Depends(get_recommendation_log),
):
    """Get one stored recommendation with its inputs."""
    record = await log.get(RecommendationId(recommendation_id))
    if record is None:
        raise ResourceNotFoundError("Recommendation", str(recommendation_id))
    return record
