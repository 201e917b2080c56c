"""Logging setup for the recommendation service."""

import logging
import sys
from collections.abc import MutableMapping
from typing import Any, Literal

from recommender.config import get_settings

# Third-party loggers that are too chatty below WARNING
_NOISY_LOGGERS = ("httpx", "httpcore", "aiosqlite", "sqlalchemy.engine", "uvicorn.access")


def setup_logging(
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] | None = None
) -> None:
    """Configure the root logger.

    Args:
        level: Override log level (default: INFO for production, DEBUG otherwise)
    """
    if level is None:
        level = "INFO" if get_settings().is_production else "DEBUG"

    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class LogContext(logging.LoggerAdapter):
    """Prefix log messages with ``[key=value]`` pairs for one unit of work.

    Example:
        log = LogContext(logger, user_id="42")
        log.info("Generated 10 songs")  # "[user_id=42] Generated 10 songs"
    """

    def __init__(self, logger: logging.Logger, **context: str) -> None:
        super().__init__(logger, context)
        self.prefix = " ".join(f"[{k}={v}]" for k, v in context.items())

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        return f"{self.prefix} {msg}", kwargs
