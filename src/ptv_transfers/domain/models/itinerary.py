"""Itinerary domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Itinerary:
    """One complete candidate journey: train, transfer, bus, destination."""

    station_name: str
    train_arrival: datetime
    bus_departure: datetime
    route_number: str
    bus_travel_minutes: int
    destination_arrival: datetime
    total_minutes: int
    bus_is_realtime: bool = False
