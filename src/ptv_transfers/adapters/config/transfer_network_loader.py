"""Transfer network loader."""

import logging
from pathlib import Path
from typing import Any

from ptv_transfers.adapters.config.app_config import AppConfig
from ptv_transfers.domain.models.bus_stop import BusStop
from ptv_transfers.domain.models.route_config import RouteConfig
from ptv_transfers.domain.models.station_offset import StationOffset
from ptv_transfers.domain.models.transfer_network import TransferNetwork

logger = logging.getLogger(__name__)

DEFAULT_MIN_TRANSFER_MINUTES = 3


def default_network() -> TransferNetwork:
    """The Glen Waverley line to Monash University Clayton network."""
    return TransferNetwork(
        origin_stop_id=1137,  # Mount Waverley
        inbound_direction_id=6,  # Towards Glen Waverley
        destination_name="Monash University Clayton",
        stations=(
            StationOffset("mountWaverley", "Mount Waverley", 0),
            StationOffset("syndal", "Syndal", 3),
            StationOffset("glenWaverley", "Glen Waverley", 6),
        ),
        bus_stops=(
            BusStop("mountWaverley733", 19051, "Mt Waverley SC/Stephensons Rd"),
            BusStop("syndal703", 16517, "Syndal Station/Blackburn Rd"),
            BusStop("syndal737", 11385, "Syndal Station/Coleman Pde"),
            BusStop("glenWaverley", 11119, "Glen Waverley Station/Railway Pde"),
        ),
        routes=(
            RouteConfig("733", "mountWaverley", "mountWaverley733", 17),
            RouteConfig("703", "syndal", "syndal703", 13),
            RouteConfig("737", "syndal", "syndal737", 15),
            RouteConfig("742", "glenWaverley", "glenWaverley", 12),
            RouteConfig("737", "glenWaverley", "glenWaverley", 15),
        ),
    )


class TransferNetworkLoader:
    """Loads the transfer network from app config."""

    @staticmethod
    def load(config: AppConfig) -> TransferNetwork:
        """Load the network from the TOML file, or the built-in one.

        The built-in network is used when no config file is set, or when the
        default file is absent. An explicitly configured file must exist.
        """
        if not config.config_file:
            logger.info("No config_file set, using the built-in network")
            return default_network()

        if "config_file" not in config.model_fields_set and not Path(config.config_file).exists():
            logger.info(f"{config.config_file} not found, using the built-in network")
            return default_network()

        return TransferNetworkLoader.from_dict(config.get_network_config())

    @staticmethod
    def from_dict(data: dict[str, Any]) -> TransferNetwork:
        """Build and validate a network from parsed TOML data.

        Raises:
            ValueError: If a required field is missing or a route references an
                unknown station or bus stop.
        """
        network = data.get("network", {})
        try:
            origin_stop_id = int(network["origin_stop_id"])
            inbound_direction_id = int(network["inbound_direction_id"])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(
                "[network] must define integer origin_stop_id and inbound_direction_id"
            ) from e
        min_transfer = int(network.get("min_transfer_minutes", DEFAULT_MIN_TRANSFER_MINUTES))

        stations = tuple(_parse_station(s) for s in data.get("stations", []))
        bus_stops = tuple(_parse_bus_stop(b) for b in data.get("bus_stops", []))
        routes = tuple(_parse_route(r, min_transfer) for r in data.get("routes", []))

        if not stations:
            raise ValueError("At least one station must be configured")

        station_ids = {s.station_id for s in stations}
        bus_stop_keys = {b.key for b in bus_stops}
        for route in routes:
            if route.station_id not in station_ids:
                raise ValueError(
                    f"Route {route.route_number} references unknown station '{route.station_id}'"
                )
            if route.bus_stop_key not in bus_stop_keys:
                raise ValueError(
                    f"Route {route.route_number} references unknown bus stop "
                    f"'{route.bus_stop_key}'"
                )

        return TransferNetwork(
            origin_stop_id=origin_stop_id,
            inbound_direction_id=inbound_direction_id,
            stations=stations,
            bus_stops=bus_stops,
            routes=routes,
            destination_name=str(network.get("destination_name", "Destination")),
        )


def _parse_station(data: dict[str, Any]) -> StationOffset:
    try:
        offset = int(data.get("offset_minutes", 0))
        station_id = str(data["station_id"])
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid station entry: {data!r}") from e
    if offset < 0:
        raise ValueError(f"Station '{station_id}' has a negative offset")
    return StationOffset(station_id, str(data.get("name", station_id)), offset)


def _parse_bus_stop(data: dict[str, Any]) -> BusStop:
    try:
        return BusStop(str(data["key"]), int(data["stop_id"]), str(data.get("name", "")))
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid bus stop entry: {data!r}") from e


def _parse_route(data: dict[str, Any], min_transfer: int) -> RouteConfig:
    try:
        return RouteConfig(
            route_number=str(data["route_number"]),
            station_id=str(data["station_id"]),
            bus_stop_key=str(data["bus_stop_key"]),
            travel_minutes=int(data["travel_minutes"]),
            min_transfer_minutes=int(data.get("min_transfer_minutes", min_transfer)),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid route entry: {data!r}") from e
