"""Management of a user's preferred genres."""

import asyncio
import logging
from collections.abc import Iterable

from sqlalchemy.ext.asyncio import AsyncSession

from recommender.constants import GENRE_NAME_FALLBACK
from recommender.db.crud.preferences import (
    delete_all_preferences,
    delete_preference,
    insert_preference,
    list_preferences,
    preference_exists,
)
from recommender.exceptions import InvalidDataError, InvalidGenreError, PreferenceNotFoundError
from recommender.models.schemas import PreferenceRead, PreferencesAddResult
from recommender.services.catalog import CatalogClient

logger = logging.getLogger(__name__)


class PreferenceManager:
    """Validates and mutates user genre preferences against the catalog."""

    def __init__(self, db: AsyncSession, catalog: CatalogClient):
        self.db = db
        self.catalog = catalog

    async def list(self, user_id: int) -> list[PreferenceRead]:
        """Get the user's preferences, each with its catalog genre name."""
        preferences = await list_preferences(self.db, user_id)
        names = await asyncio.gather(
            *(self.catalog.genre_name(p.genre_id) for p in preferences)
        )

        result = [
            PreferenceRead(
                genre_id=preference.genre_id,
                genre_name=name or GENRE_NAME_FALLBACK.format(genre_id=preference.genre_id),
            )
            for preference, name in zip(preferences, names)
        ]
        logger.debug(f"Loaded {len(result)} preferences for user {user_id}")
        return result

    async def add(self, user_id: int, genre_ids: Iterable[int] | None) -> PreferencesAddResult:
        """Add preferred genres, skipping those already present.

        Every genre is validated before anything is written, so one unknown
        genre rejects the whole request.

        Raises:
            InvalidDataError: if no genre ids were given
            InvalidGenreError: if the catalog does not know one of the genres
        """
        if not genre_ids:
            raise InvalidDataError("The genre list cannot be empty")

        unique_ids = list(dict.fromkeys(genre_ids))

        for genre_id in unique_ids:
            if genre_id <= 0 or not await self.catalog.genre_exists(genre_id):
                raise InvalidGenreError(f"Genre with ID {genre_id} does not exist")

        added = 0
        duplicated = 0
        for genre_id in unique_ids:
            if await preference_exists(self.db, user_id, genre_id):
                duplicated += 1
            elif await insert_preference(self.db, user_id, genre_id) is None:
                # Lost a race with a concurrent add of the same genre
                duplicated += 1
            else:
                added += 1

        logger.info(f"Preferences for user {user_id}: {added} added, {duplicated} duplicated")

        return PreferencesAddResult(
            message="Preferences added successfully",
            genres_added=added,
            genres_duplicated=duplicated,
            preferences=await self.list(user_id),
        )

    async def remove(self, user_id: int, genre_id: int) -> None:
        """Remove one preferred genre.

        Raises:
            PreferenceNotFoundError: if the user does not prefer the genre
        """
        if not await delete_preference(self.db, user_id, genre_id):
            raise PreferenceNotFoundError(
                f"User does not have genre with ID {genre_id} in their preferences"
            )
        logger.info(f"Removed genre {genre_id} from preferences of user {user_id}")

    async def remove_all(self, user_id: int) -> int:
        """Remove every preferred genre of the user. Returns the count removed."""
        count = await delete_all_preferences(self.db, user_id)
        logger.info(f"Removed all {count} preferences of user {user_id}")
        return count
