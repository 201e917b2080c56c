"""Ownership check shared by every user-scoped endpoint."""

import logging

from recommender.exceptions import ForbiddenAccessError

logger = logging.getLogger(__name__)


def authorize(caller_id: int | None, target_user_id: int, is_service_call: bool) -> None:
    """Allow service calls, or callers acting on their own user id.

    Raises:
        ForbiddenAccessError: if the caller may not act on ``target_user_id``
    """
    if is_service_call:
        logger.debug(f"Access granted to service call for user {target_user_id}")
        return

    if caller_id is None or caller_id != target_user_id:
        logger.warning(f"Access denied: user {caller_id} tried to act on user {target_user_id}")
        raise ForbiddenAccessError("You are not allowed to access another user's resources")
