"""Domain layer - core business logic and models."""

from ptv_transfers.domain.errors import (
    ConfigurationError,
    MalformedRecordError,
    TransferError,
    UpstreamUnavailableError,
)
from ptv_transfers.domain.models import (
    Itinerary,
    NormalizedEvent,
    RawDeparture,
    RecommendationResult,
    TransferNetwork,
)
from ptv_transfers.domain.ports import DepartureFeedRepository

__all__ = [
    "ConfigurationError",
    "DepartureFeedRepository",
    "Itinerary",
    "MalformedRecordError",
    "NormalizedEvent",
    "RawDeparture",
    "RecommendationResult",
    "TransferError",
    "TransferNetwork",
    "UpstreamUnavailableError",
]
