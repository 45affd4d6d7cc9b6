"""Station offset domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StationOffset:
    """A station on the line and its travel time from the origin station."""

    station_id: str
    name: str
    offset_minutes: int
