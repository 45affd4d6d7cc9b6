"""Departure feed repository port."""

from typing import Protocol

from ptv_transfers.domain.models.raw_departure import RawDeparture
from ptv_transfers.domain.models.route_type import RouteType


class DepartureFeedRepository(Protocol):
    """Port for retrieving raw departures for a stop."""

    async def get_departures(
        self,
        route_type: RouteType,
        stop_id: int,
        max_results: int = 10,
    ) -> list[RawDeparture]:
        """Get raw departures for a stop.

        Raises:
            UpstreamUnavailableError: If the feed cannot be fetched or decoded.
        """
        ...
