"""Starlette web adapter serving recommendations and the static front end."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.responses import JSONResponse, Response
from starlette.routing import BaseRoute, Route

from ptv_transfers.domain.errors import UpstreamUnavailableError

from .cors_middleware import CorsHeadersMiddleware
from .rate_limit_middleware import RateLimitMiddleware
from .serializers import serialize_recommendation
from .static_files import static_mount

if TYPE_CHECKING:
    from starlette.requests import Request

    from ptv_transfers.adapters.config import AppConfig
    from ptv_transfers.domain.ports import RecommendationProvider

logger = logging.getLogger(__name__)


def create_app(
    service: RecommendationProvider | None,
    config: AppConfig,
) -> Starlette:
    """Create the ASGI application.

    Args:
        service: Recommendation service, or None when PTV credentials are not
            configured (the API then answers with a configuration error).
        config: Application configuration.
    """

    async def departures(_request: Request) -> Response:
        """Recommend the fastest transfer for the next train."""
        if service is None:
            return JSONResponse(
                {
                    "error": "PTV API credentials not configured",
                    "message": "Please set PTV_DEVID and PTV_KEY environment variables",
                },
                status_code=500,
            )

        try:
            result = await service.get_recommendation()
        except UpstreamUnavailableError as e:
            logger.error(f"Failed to fetch departures: {e}")
            return JSONResponse(
                {"error": "Failed to fetch data", "message": str(e)}, status_code=500
            )

        return JSONResponse(serialize_recommendation(result))

    async def healthz(_request: Any) -> Response:
        """Health check endpoint for load balancers and monitoring."""
        return Response(content="Ok", media_type="text/plain")

    routes: list[BaseRoute] = [
        Route("/api/departures", departures, methods=["GET"]),
        Route("/healthz", healthz, methods=["GET"]),
    ]
    # Must stay last, it matches every path
    mount = static_mount(config.static_dir)
    if mount is not None:
        routes.append(mount)

    return Starlette(
        routes=routes,
        middleware=[
            Middleware(CorsHeadersMiddleware, allow_origin=config.cors_allow_origin),
            Middleware(RateLimitMiddleware, requests_per_minute=config.rate_limit_per_minute),
        ],
    )
