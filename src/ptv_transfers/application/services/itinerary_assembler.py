"""Assembly of complete itineraries from matched connections."""

from datetime import datetime, timedelta

from ptv_transfers.domain.models.itinerary import Itinerary
from ptv_transfers.domain.models.normalized_event import NormalizedEvent


def minutes_until(instant: datetime, now: datetime) -> int:
    """Whole minutes from now until the instant, rounded to nearest."""
    return round((instant - now).total_seconds() / 60)


def assemble_itinerary(
    station_name: str,
    train_arrival: datetime,
    bus: NormalizedEvent,
    route_number: str,
    travel_minutes: int,
    now: datetime,
) -> Itinerary:
    """Build the itinerary for catching ``bus`` after arriving at ``station_name``."""
    destination_arrival = bus.departure_time + timedelta(minutes=travel_minutes)
    return Itinerary(
        station_name=station_name,
        train_arrival=train_arrival,
        bus_departure=bus.departure_time,
        route_number=route_number,
        bus_travel_minutes=travel_minutes,
        destination_arrival=destination_arrival,
        total_minutes=minutes_until(destination_arrival, now),
        bus_is_realtime=bus.is_realtime,
    )
