"""Ports (interfaces) for the ports-and-adapters architecture."""

from ptv_transfers.domain.ports.departure_feed_repository import DepartureFeedRepository
from ptv_transfers.domain.ports.recommendation_provider import RecommendationProvider

__all__ = ["DepartureFeedRepository", "RecommendationProvider"]
