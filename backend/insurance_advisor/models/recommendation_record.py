"""RecommendationRecord ORM — persists one computed recommendation.

Invariants:
    - Linked to the ApplicantProfile it was computed from (user_id FK)
    - Append-only: never updated or deleted by the service
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from insurance_advisor.db.base import Base


class RecommendationRecord(Base):
    """Computed recommendation for one submission."""
    __tablename__ = "recommendations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=True,
    )
    recommendation_type: Mapped[str] = mapped_column(String(50), nullable=False)
    coverage_amount: Mapped[int] = mapped_column(Integer, nullable=False)
    duration_years: Mapped[int] = mapped_column(Integer, nullable=False)
    explanation: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    applicant: Mapped["ApplicantProfile"] = relationship(
        "ApplicantProfile", back_populates="recommendations", lazy="joined",
    )
