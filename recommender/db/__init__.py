"""Database module."""

from recommender.db.database import (
    async_session_maker,
    engine,
    get_db,
    init_db,
    ping,
)

__all__ = [
    "async_session_maker",
    "engine",
    "get_db",
    "init_db",
    "ping",
]
