"""Domain models for PTV transfer recommendations."""

from ptv_transfers.domain.models.bus_stop import BusStop
from ptv_transfers.domain.models.itinerary import Itinerary
from ptv_transfers.domain.models.normalized_event import NormalizedEvent
from ptv_transfers.domain.models.raw_departure import RawDeparture
from ptv_transfers.domain.models.recommendation_result import RecommendationResult
from ptv_transfers.domain.models.route_config import RouteConfig
from ptv_transfers.domain.models.route_type import RouteType
from ptv_transfers.domain.models.station_offset import StationOffset
from ptv_transfers.domain.models.transfer_network import TransferNetwork

__all__ = [
    "BusStop",
    "Itinerary",
    "NormalizedEvent",
    "RawDeparture",
    "RecommendationResult",
    "RouteConfig",
    "RouteType",
    "StationOffset",
    "TransferNetwork",
]
