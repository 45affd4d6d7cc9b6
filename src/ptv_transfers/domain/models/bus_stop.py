"""Bus stop domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BusStop:
    """A bus stop near a station, identified by a feed key and its PTV stop id."""

    key: str
    stop_id: int
    name: str = ""
