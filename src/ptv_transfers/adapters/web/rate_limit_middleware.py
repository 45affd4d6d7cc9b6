"""Rate limiting middleware for Starlette using throttled-py."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from throttled import RateLimiterType, Throttled, rate_limiter, store

logger = logging.getLogger(__name__)

# Paths that are never rate limited (load balancer probes)
EXEMPT_PATHS = frozenset({"/healthz"})


def extract_client_ip(request: Request) -> str:
    """Extract client IP address from request, supporting X-Forwarded-For header.

    The first address in an X-Forwarded-For chain is the original client.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()
        if client_ip:
            return client_ip

    if request.client and request.client.host:
        return request.client.host

    logger.warning("Could not determine client IP, using 'unknown'")
    return "unknown"


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Middleware to enforce a per-IP token bucket on incoming requests.

    Every upstream recommendation costs five signed PTV requests, so this keeps
    a single client from exhausting the developer key's quota.
    """

    def __init__(
        self,
        app: Callable,
        requests_per_minute: int = 100,
    ) -> None:
        """Initialize rate limiting middleware.

        Args:
            app: The ASGI application to wrap.
            requests_per_minute: Maximum number of requests allowed per IP per minute.
        """
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.quota = rate_limiter.per_min(requests_per_minute, burst=requests_per_minute)
        self.rate_limiter_store = store.MemoryStore()
        logger.info(f"Rate limiting enabled: {requests_per_minute} requests per minute per IP")

    @staticmethod
    def _retry_after(result: Any) -> int:
        """Seconds until the client may retry, defaulting to a minute."""
        state = getattr(result, "state", None)
        retry_after = getattr(state, "retry_after", None) if state else None
        if retry_after is None:
            retry_after = getattr(result, "retry_after", None)
        return max(1, int(float(retry_after))) if retry_after else 60

    def _limited_response(self, request: Request, client_ip: str, retry_after: int) -> Response:
        """Build the 429 response, JSON for API paths and plain text otherwise."""
        logger.warning(f"Rate limit exceeded for IP {client_ip}, retry after {retry_after} seconds")
        headers = {"Retry-After": str(retry_after)}
        if request.url.path.startswith("/api/"):
            return JSONResponse(
                {"error": "Rate limit exceeded", "message": "Please try again later."},
                status_code=429,
                headers=headers,
            )
        return Response(
            content="Rate limit exceeded. Please try again later.",
            status_code=429,
            headers=headers,
        )

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Process request and enforce rate limiting."""
        if request.url.path in EXEMPT_PATHS:
            return await call_next(request)

        client_ip = extract_client_ip(request)
        throttle = Throttled(
            key=f"ip:{client_ip}",
            using=RateLimiterType.TOKEN_BUCKET.value,
            quota=self.quota,
            store=self.rate_limiter_store,
        )

        result = throttle.limit()
        if result.limited:
            return self._limited_response(request, client_ip, self._retry_after(result))

        response: Response = await call_next(request)
        return response
