"""Authentication module."""

from recommender.auth.access import authorize
from recommender.auth.dependencies import Caller, get_caller
from recommender.auth.tokens import TokenIdentity, decode_token

__all__ = [
    "Caller",
    "TokenIdentity",
    "authorize",
    "decode_token",
    "get_caller",
]
