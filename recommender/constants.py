"""Application constants - centralized configuration values."""

# =============================================================================
# Recommendations
# =============================================================================
DEFAULT_CONTENT_TYPE = "both"
DEFAULT_RECOMMENDATION_LIMIT = 20
MIN_RECOMMENDATION_LIMIT = 1
MAX_RECOMMENDATION_LIMIT = 50
PER_GENRE_SLACK = 2  # Extra candidates per genre to absorb ownership filtering

# =============================================================================
# Preferences
# =============================================================================
GENRE_NAME_FALLBACK = "Genre {genre_id}"

# =============================================================================
# API Timeouts (in seconds)
# =============================================================================
CATALOG_RETRY_BASE_DELAY = 0.2
CATALOG_RETRY_MAX_DELAY = 2.0

# =============================================================================
# Security
# =============================================================================
JWT_ALGORITHM = "HS256"
SERVICE_TOKEN_HEADER = "X-Service-Token"
