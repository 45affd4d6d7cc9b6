"""JSON serialization of recommendation results.

Field names match the JSON consumed by the web front end.
"""

from datetime import UTC, datetime
from typing import Any

from ptv_transfers.domain.models.itinerary import Itinerary
from ptv_transfers.domain.models.recommendation_result import RecommendationResult


def to_iso(instant: datetime) -> str:
    """Format an instant as ISO 8601 UTC with millisecond precision and a 'Z' suffix."""
    return instant.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def station_field_name(station_id: str) -> str:
    """'syndal' -> 'atSyndal'."""
    return f"at{station_id[:1].upper()}{station_id[1:]}"


def serialize_itinerary(itinerary: Itinerary) -> dict[str, Any]:
    """Serialize one itinerary.

    ``arrivalAtMonash`` repeats ``arrivalAtDestination`` for clients written
    against the original Monash-only payload.
    """
    arrival = to_iso(itinerary.destination_arrival)
    return {
        "station": itinerary.station_name,
        "trainArrival": to_iso(itinerary.train_arrival),
        "bus": {
            "route": itinerary.route_number,
            "departure": to_iso(itinerary.bus_departure),
            "travelTime": itinerary.bus_travel_minutes,
            "realtime": itinerary.bus_is_realtime,
        },
        "arrivalAtDestination": arrival,
        "arrivalAtMonash": arrival,
        "totalMinutes": itinerary.total_minutes,
    }


def serialize_recommendation(result: RecommendationResult) -> dict[str, Any]:
    """Serialize a recommendation result.

    A result without upcoming service becomes an error payload with a timestamp.
    """
    if result.no_upcoming_service:
        return {"error": "No upcoming trains", "timestamp": to_iso(result.timestamp)}

    return {
        "timestamp": to_iso(result.timestamp),
        "nextTrain": {
            station_field_name(station_id): to_iso(arrival)
            for station_id, arrival in result.station_arrivals.items()
        },
        "recommendation": (
            serialize_itinerary(result.recommendation) if result.recommendation else None
        ),
        "allOptions": [serialize_itinerary(i) for i in result.options],
    }
