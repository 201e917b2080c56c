"""CRUD operations module."""

from recommender.db.crud.preferences import (
    delete_all_preferences,
    delete_preference,
    get_genre_ids,
    insert_preference,
    list_preferences,
    preference_exists,
)

__all__ = [
    "delete_all_preferences",
    "delete_preference",
    "get_genre_ids",
    "insert_preference",
    "list_preferences",
    "preference_exists",
]
