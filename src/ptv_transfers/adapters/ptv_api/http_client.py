"""HTTP client for PTV Timetable API requests."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from ptv_transfers.adapters.api_request_logger import log_api_request
from ptv_transfers.adapters.ptv_api.constants import (
    DEFAULT_HEADERS,
    PTV_BASE_URL,
    PTV_DEPARTURES_PATH,
)
from ptv_transfers.adapters.ptv_api.request_signer import sign_request
from ptv_transfers.domain.errors import ConfigurationError, UpstreamUnavailableError
from ptv_transfers.domain.models.route_type import RouteType

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class PtvHttpClient:
    """HTTP client for signed PTV Timetable API requests."""

    def __init__(
        self,
        session: "ClientSession",
        dev_id: str | None,
        api_key: str | None,
        base_url: str = PTV_BASE_URL,
        timeout_seconds: int = 10,
    ) -> None:
        """Initialize with an aiohttp session and PTV credentials.

        Raises:
            ConfigurationError: If the developer id or API key is missing.
        """
        if not dev_id or not api_key:
            raise ConfigurationError(
                "PTV API credentials not configured: set PTV_DEVID and PTV_KEY"
            )
        self._session = session
        self._dev_id = dev_id
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def _log_error_response(self, response: "ClientResponse", path: str) -> None:
        """Log error response details."""
        error_text = await response.text()
        error_body = error_text[:500] if error_text else "(empty response body)"
        content_type = response.headers.get("Content-Type", "unknown")
        logger.error(
            f"PTV API returned status {response.status} for {path}: "
            f"{error_body} (Content-Type: {content_type})"
        )

    async def _handle_response(self, response: "ClientResponse", path: str) -> dict[str, Any]:
        """Decode a JSON object body or raise."""
        if response.status != 200:
            await self._log_error_response(response, path)
            raise UpstreamUnavailableError(
                f"PTV API error: {response.status} {response.reason or ''}".strip(),
                status_code=response.status,
            )

        try:
            data = await response.json(content_type=None)
        except ValueError as e:
            raise UpstreamUnavailableError(f"PTV API returned invalid JSON for {path}") from e

        if not isinstance(data, dict):
            raise UpstreamUnavailableError(f"PTV API returned unexpected payload for {path}")
        return data

    async def get_json(self, request_path: str) -> dict[str, Any]:
        """Issue a signed GET request and return the decoded JSON object.

        Raises:
            UpstreamUnavailableError: On transport errors, timeouts, non-200
                responses or undecodable bodies.
        """
        url = sign_request(request_path, self._dev_id, self._api_key, self._base_url)
        log_api_request("GET", url, headers=DEFAULT_HEADERS)

        try:
            async with self._session.get(
                url, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                return await self._handle_response(response, request_path)
        except asyncio.TimeoutError as e:
            logger.warning(f"Timed out fetching {request_path}")
            raise UpstreamUnavailableError(f"PTV API timed out for {request_path}") from e
        except aiohttp.ClientError as e:
            logger.warning(f"Error fetching {request_path}: {e}")
            raise UpstreamUnavailableError(f"PTV API request failed: {e}") from e

    async def fetch_departures(
        self, route_type: RouteType, stop_id: int, max_results: int
    ) -> dict[str, Any]:
        """Fetch departures for a stop with route details expanded.

        Args:
            route_type: Train or bus.
            stop_id: PTV stop id.
            max_results: Maximum departures per route.

        Returns:
            Decoded response with 'departures' and 'routes' keys.
        """
        path = PTV_DEPARTURES_PATH.format(route_type=int(route_type), stop_id=stop_id)
        path = f"{path}?max_results={max_results}&expand=run&expand=route"
        return await self.get_json(path)
