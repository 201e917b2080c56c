"""SQLAlchemy models and API schemas."""

from recommender.models.base import Base
from recommender.models.preference import GenrePreference
from recommender.models.schemas import (
    ContentType,
    PreferenceRead,
    PreferencesAdd,
    PreferencesAddResult,
    RecommendationResult,
    RecommendedItem,
)

__all__ = [
    "Base",
    "ContentType",
    "GenrePreference",
    "PreferenceRead",
    "PreferencesAdd",
    "PreferencesAddResult",
    "RecommendationResult",
    "RecommendedItem",
]
