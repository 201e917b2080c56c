"""Application error taxonomy.

Every client-facing error carries a stable machine-readable ``error_code``
and the HTTP status it maps to. The handlers in ``recommender.main`` render
them as ``{error, message, status_code, timestamp}``.
"""


class AppError(Exception):
    """Base class for errors surfaced to API clients."""

    error_code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidParameterError(AppError):
    """A query parameter (content type, limit) is out of range."""

    error_code = "INVALID_PARAMETER"
    status_code = 400


class InvalidDataError(AppError):
    """Required input is missing or empty."""

    error_code = "INVALID_DATA"
    status_code = 400


class InvalidGenreError(AppError):
    """The content catalog does not know the genre."""

    error_code = "INVALID_GENRE"
    status_code = 400


class PreferenceNotFoundError(AppError):
    error_code = "PREFERENCE_NOT_FOUND"
    status_code = 404


class ForbiddenAccessError(AppError):
    error_code = "FORBIDDEN_ACCESS"
    status_code = 403


class TokenExpiredError(AppError):
    error_code = "TOKEN_EXPIRED"
    status_code = 401


class InvalidTokenError(AppError):
    error_code = "INVALID_TOKEN"
    status_code = 401
