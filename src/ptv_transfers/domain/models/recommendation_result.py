"""Recommendation result domain model."""

from dataclasses import dataclass, field
from datetime import datetime

from .itinerary import Itinerary


@dataclass(frozen=True)
class RecommendationResult:
    """Outcome of one recommendation query."""

    timestamp: datetime
    station_arrivals: dict[str, datetime] = field(default_factory=dict)
    recommendation: Itinerary | None = None
    options: list[Itinerary] = field(default_factory=list)
    no_upcoming_service: bool = False
