"""Route configuration domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RouteConfig:
    """A candidate bus route boarded at a station's bus stop."""

    route_number: str
    station_id: str
    bus_stop_key: str
    travel_minutes: int  # Bus travel time from the stop to the destination
    min_transfer_minutes: int = 3
