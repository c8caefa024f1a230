"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO, but the engine that produces
      what they store is never async — the route orchestrates the calls
      around the pure logic
"""

from typing import Protocol

from insurance_advisor.core.domain_types import (
    ApplicantId, ApplicantInputs, Recommendation, RecommendationId,
)


class RecommendationLog(Protocol):
    """Append-only audit log of submissions and their recommendations."""
    async def record(
        self, inputs: ApplicantInputs, recommendation: Recommendation,
    ) -> tuple[ApplicantId, RecommendationId]: ...
    async def list_recent(self, limit: int, offset: int) -> list[dict]: ...
    async def get(self, recommendation_id: RecommendationId) -> dict | None: ...
