"""Normalized event domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NormalizedEvent:
    """A departure with a single resolved, timezone-aware departure instant."""

    route_id: str
    departure_time: datetime
    direction_id: int | None = None
    route_number: str | None = None
    is_realtime: bool = False
