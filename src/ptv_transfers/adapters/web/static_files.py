"""Static file serving for the web front end."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from starlette.routing import Mount
from starlette.staticfiles import StaticFiles

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, MutableMapping

logger = logging.getLogger(__name__)

CACHE_CONTROL = b"public, max-age=60, must-revalidate"


class StaticFileCacheApp:
    """ASGI app wrapper that adds cache headers to static file responses."""

    def __init__(self, static_files: StaticFiles) -> None:
        """Initialize with a StaticFiles instance."""
        self.static_files = static_files

    async def __call__(
        self,
        scope: dict[str, Any],
        receive: Callable[[], Awaitable[dict[str, Any]]],
        send: Callable[[MutableMapping[str, Any]], Awaitable[None]],
    ) -> None:
        """Serve the file, adding Cache-Control unless one is already set."""

        async def send_with_cache_headers(message: MutableMapping[str, Any]) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                if not any(name.lower() == b"cache-control" for name, _ in headers):
                    headers.append((b"cache-control", CACHE_CONTROL))
                    message["headers"] = headers
            await send(message)

        await self.static_files(scope, receive, send_with_cache_headers)


def resolve_static_dir(static_dir: str) -> Path | None:
    """Find the static directory relative to the working directory or the project root."""
    candidates = [
        Path(static_dir),
        Path.cwd() / static_dir,
        Path(__file__).parent.parent.parent.parent.parent / static_dir,
    ]
    for path in candidates:
        if path.is_dir():
            return path
    logger.warning(f"Static directory not found at any of: {[str(p) for p in candidates]}")
    return None


def static_mount(static_dir: str) -> Mount | None:
    """Mount serving ``static_dir`` at '/' with index.html as the directory index."""
    path = resolve_static_dir(static_dir)
    if path is None:
        return None

    logger.info(f"Serving static files from {path}")
    return Mount("/", app=StaticFileCacheApp(StaticFiles(directory=str(path), html=True)))
