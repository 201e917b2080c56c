"""Recommendation services package."""

from recommender.services.recommendations.engine import (
    RecommendationEngine,
    balance,
    items_per_genre,
    parse_content_type,
)

__all__ = ["RecommendationEngine", "balance", "items_per_genre", "parse_content_type"]
