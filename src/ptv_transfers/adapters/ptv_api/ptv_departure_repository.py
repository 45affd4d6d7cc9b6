"""PTV departure feed repository adapter."""

import logging
from typing import TYPE_CHECKING

from ptv_transfers.adapters.ptv_api.departure_parser import DepartureParser
from ptv_transfers.adapters.ptv_api.http_client import PtvHttpClient
from ptv_transfers.domain.models.raw_departure import RawDeparture
from ptv_transfers.domain.models.route_type import RouteType
from ptv_transfers.domain.ports.departure_feed_repository import DepartureFeedRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from ptv_transfers.adapters.config.app_config import AppConfig


class PtvDepartureRepository(DepartureFeedRepository):
    """Adapter for the PTV Timetable API departures endpoint."""

    def __init__(self, http_client: PtvHttpClient) -> None:
        """Initialize with a PTV HTTP client."""
        self._http_client = http_client

    @classmethod
    def from_config(
        cls, config: "AppConfig", session: "ClientSession"
    ) -> "PtvDepartureRepository":
        """Build a repository from app config.

        Raises:
            ConfigurationError: If PTV credentials are not configured.
        """
        return cls(
            PtvHttpClient(
                session,
                dev_id=config.ptv_devid,
                api_key=config.ptv_key,
                base_url=config.ptv_base_url,
                timeout_seconds=config.ptv_api_timeout,
            )
        )

    async def get_departures(
        self,
        route_type: RouteType,
        stop_id: int,
        max_results: int = 10,
    ) -> list[RawDeparture]:
        """Get raw departures for a PTV stop."""
        data = await self._http_client.fetch_departures(route_type, stop_id, max_results)
        departures = DepartureParser.parse_departures(data)
        logger.debug(
            f"Got {len(departures)} {route_type.name.lower()} departure(s) for stop {stop_id}"
        )
        return departures
