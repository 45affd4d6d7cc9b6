"""Raw departure domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RawDeparture:
    """A departure record as reported by the timetable feed.

    Times are kept exactly as received (usually ISO 8601 strings in UTC) so that
    parsing failures surface during normalization rather than in the adapter.
    """

    route_id: str
    scheduled_departure: str | datetime | None
    estimated_departure: str | datetime | None = None
    direction_id: int | None = None
    route_number: str | None = None  # Resolved from the feed's route lookup, e.g. "733"
