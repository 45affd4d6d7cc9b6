"""Transfer network domain model."""

from dataclasses import dataclass

from .bus_stop import BusStop
from .route_config import RouteConfig
from .station_offset import StationOffset


@dataclass(frozen=True)
class TransferNetwork:
    """Static description of the line, its stations and the connecting bus routes.

    ``routes`` is evaluated in order; that order breaks ties between itineraries
    arriving at the same time.
    """

    origin_stop_id: int
    inbound_direction_id: int
    stations: tuple[StationOffset, ...]
    bus_stops: tuple[BusStop, ...]
    routes: tuple[RouteConfig, ...]
    destination_name: str = "Destination"

    def station(self, station_id: str) -> StationOffset:
        """Return the station with the given id."""
        for station in self.stations:
            if station.station_id == station_id:
                return station
        raise KeyError(f"Unknown station: {station_id}")
