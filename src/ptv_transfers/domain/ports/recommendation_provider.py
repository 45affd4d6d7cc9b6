"""Recommendation provider port."""

from datetime import datetime
from typing import Protocol

from ptv_transfers.domain.models.recommendation_result import RecommendationResult


class RecommendationProvider(Protocol):
    """Port for producing a transfer recommendation for the current moment."""

    async def get_recommendation(self, now: datetime | None = None) -> RecommendationResult:
        """Fetch current departures and recommend the fastest transfer."""
        ...
