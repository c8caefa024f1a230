"""ApplicantProfile ORM — one row per submitted set of inputs.

Invariants:
    - Append-only: rows are inserted once, never updated or deleted
    - risk_tolerance stores the RiskTolerance value ("Low" | "Medium" | "High")

Design Decisions:
    - Table name "users" and integer ids kept for compatibility with the
      existing database schema
"""

from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from insurance_advisor.db.base import Base


class ApplicantProfile(Base):
    """Submitted applicant inputs."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    income: Mapped[int] = mapped_column(Integer, nullable=False)
    dependents: Mapped[int] = mapped_column(Integer, nullable=False)
    risk_tolerance: Mapped[str] = mapped_column(String(10), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    recommendations: Mapped[list["RecommendationRecord"]] = relationship(
        "RecommendationRecord", back_populates="applicant",
    )
