"""Utility modules for the recommendation service."""

from recommender.utils.http_client import close_all_clients, get_catalog_http_client
from recommender.utils.logging import LogContext, setup_logging
from recommender.utils.retry import RetryConfig, retry_async

__all__ = [
    # HTTP
    "close_all_clients",
    "get_catalog_http_client",
    # Logging
    "LogContext",
    "setup_logging",
    # Retry
    "retry_async",
    "RetryConfig",
]
