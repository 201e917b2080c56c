"""Authentication dependencies for FastAPI."""

import secrets
from dataclasses import dataclass

from fastapi import Request

from recommender.auth.tokens import decode_token
from recommender.config import get_settings
from recommender.constants import SERVICE_TOKEN_HEADER


@dataclass(frozen=True)
class Caller:
    """Who is making the request."""

    user_id: int | None = None
    email: str | None = None
    is_service: bool = False


def _is_service_request(request: Request) -> bool:
    expected = get_settings().service_token
    provided = request.headers.get(SERVICE_TOKEN_HEADER)
    if not expected or not provided:
        return False
    return secrets.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


async def get_caller(request: Request) -> Caller:
    """Identify the caller from a service token or a Bearer user token.

    Requests without credentials yield an anonymous caller; the ownership
    check rejects them.
    """
    if _is_service_request(request):
        return Caller(is_service=True)

    auth_header = request.headers.get("Authorization", "")
    if not auth_header.startswith("Bearer "):
        return Caller()

    identity = decode_token(auth_header[len("Bearer "):].strip())
    return Caller(user_id=identity.user_id, email=identity.email)
