"""
Shared HTTP client for the activity sources.

One pooled AsyncClient serves the GitHub API and the contributions provider.
Timeouts and pool limits come from Settings; auth headers are added per
request by the reader, so the client itself carries no credentials.
"""

import logging

import httpx

from app.config import Settings
from app.config import settings as default_settings

logger = logging.getLogger(__name__)

_client: httpx.AsyncClient | None = None


def build_http_client(config: Settings) -> httpx.AsyncClient:
    """Create a pooled client configured for activity fetches."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            config.http_timeout_seconds,
            connect=config.http_connect_timeout_seconds,
        ),
        limits=httpx.Limits(
            max_connections=config.http_max_connections,
            max_keepalive_connections=config.http_max_keepalive_connections,
        ),
        headers={"User-Agent": config.http_user_agent},
        http2=True,
    )


def get_http_client(config: Settings | None = None) -> httpx.AsyncClient:
    """
    Get or create the shared client.

    `config` only matters when the client is (re)created; later calls
    return the existing client unchanged.
    """
    global _client
    if _client is None or _client.is_closed:
        _client = build_http_client(config or default_settings)
        logger.debug("Created activity HTTP client")
    return _client


async def close_http_client() -> None:
    """Close the shared client. Called from the app's shutdown hook."""
    global _client
    if _client is not None and not _client.is_closed:
        await _client.aclose()
        logger.debug("Closed activity HTTP client")
    _client = None
