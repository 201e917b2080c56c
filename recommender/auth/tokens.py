"""Validation of user tokens issued by the user service.

Tokens are HS256 JWTs carrying the user id in a ``userId`` claim (int or
numeric string) and an optional ``email`` claim. This service only
validates tokens, it never issues them.
"""

import logging
from dataclasses import dataclass

from authlib.jose import JsonWebToken
from authlib.jose.errors import ExpiredTokenError, JoseError

from recommender.config import get_settings
from recommender.constants import JWT_ALGORITHM
from recommender.exceptions import InvalidTokenError, TokenExpiredError

logger = logging.getLogger(__name__)

_jwt = JsonWebToken([JWT_ALGORITHM])


@dataclass(frozen=True)
class TokenIdentity:
    """Identity extracted from a valid token."""

    user_id: int
    email: str | None = None


def decode_token(token: str) -> TokenIdentity:
    """Verify a token's signature and expiry and extract the caller identity.

    Raises:
        TokenExpiredError: if the token has expired
        InvalidTokenError: if the token is malformed, badly signed or has no user id
    """
    key = get_settings().jwt_secret.encode("utf-8")
    try:
        claims = _jwt.decode(token, key)
        claims.validate()
    except ExpiredTokenError as e:
        logger.warning(f"Expired token: {e}")
        raise TokenExpiredError("The token has expired") from e
    except (JoseError, ValueError) as e:
        logger.warning(f"Invalid token: {e}")
        raise InvalidTokenError("Invalid token") from e

    raw_user_id = claims.get("userId")
    if isinstance(raw_user_id, bool) or raw_user_id is None:
        raise InvalidTokenError("Token has no userId")
    try:
        user_id = int(raw_user_id)
    except (TypeError, ValueError) as e:
        raise InvalidTokenError("Token has an invalid userId") from e

    email = claims.get("email")
    return TokenIdentity(user_id=user_id, email=email if isinstance(email, str) else None)
