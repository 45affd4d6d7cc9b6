"""Application services."""

from ptv_transfers.application.services.departure_normalizer import (
    normalize_departure,
    normalize_departures,
)
from ptv_transfers.application.services.itinerary_assembler import assemble_itinerary
from ptv_transfers.application.services.itinerary_ranker import rank_itineraries
from ptv_transfers.application.services.station_arrival_projector import (
    project_station_arrivals,
    select_next_train,
)
from ptv_transfers.application.services.transfer_matcher import find_connection
from ptv_transfers.application.services.transfer_recommendation_service import (
    TransferRecommendationService,
)

__all__ = [
    "TransferRecommendationService",
    "assemble_itinerary",
    "find_connection",
    "normalize_departure",
    "normalize_departures",
    "project_station_arrivals",
    "rank_itineraries",
    "select_next_train",
]
