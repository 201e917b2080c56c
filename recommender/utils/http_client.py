"""Shared persistent httpx client for content catalog calls.

A persistent client reuses pooled connections across requests instead of
opening a new TCP connection for every catalog lookup.
"""

import httpx

from recommender.config import get_settings

# Connection pool limits
_POOL_LIMITS = httpx.Limits(
    max_connections=50,
    max_keepalive_connections=20,
    keepalive_expiry=30,
)

_catalog_client: httpx.AsyncClient | None = None


def get_catalog_http_client() -> httpx.AsyncClient:
    """Get the persistent httpx client used for catalog calls."""
    global _catalog_client
    if _catalog_client is None:
        settings = get_settings()
        _catalog_client = httpx.AsyncClient(
            timeout=settings.catalog_timeout,
            limits=_POOL_LIMITS,
            headers={"Accept": "application/json"},
        )
    return _catalog_client


async def close_all_clients() -> None:
    """Close persistent httpx clients. Call during app shutdown."""
    global _catalog_client
    if _catalog_client is not None:
        await _catalog_client.aclose()
        _catalog_client = None
