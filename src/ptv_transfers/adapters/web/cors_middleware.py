"""Middleware adding CORS headers to every response."""

import logging
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


class CorsHeadersMiddleware(BaseHTTPMiddleware):
    """Adds Access-Control-Allow-* headers and answers preflight requests."""

    def __init__(
        self,
        app: Callable,
        allow_origin: str = "*",
        allow_methods: str = "GET, OPTIONS",
        allow_headers: str = "Content-Type",
    ) -> None:
        """Initialize CORS middleware.

        Args:
            app: The ASGI application to wrap.
            allow_origin: Value of Access-Control-Allow-Origin.
            allow_methods: Value of Access-Control-Allow-Methods.
            allow_headers: Value of Access-Control-Allow-Headers.
        """
        super().__init__(app)
        self.headers = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Methods": allow_methods,
            "Access-Control-Allow-Headers": allow_headers,
        }

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Short-circuit OPTIONS and decorate every other response."""
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=self.headers)

        response: Response = await call_next(request)
        for name, value in self.headers.items():
            response.headers[name] = value
        return response
