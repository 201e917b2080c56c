"""Recommendation engine for genre-based song and album recommendations."""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from recommender.constants import (
    MAX_RECOMMENDATION_LIMIT,
    MIN_RECOMMENDATION_LIMIT,
    PER_GENRE_SLACK,
)
from recommender.db.crud.preferences import get_genre_ids
from recommender.exceptions import InvalidParameterError
from recommender.models.schemas import ContentType, RecommendationResult, RecommendedItem
from recommender.services.catalog import CatalogClient
from recommender.utils.logging import LogContext

logger = logging.getLogger(__name__)


def parse_content_type(value: str | ContentType) -> ContentType:
    """Parse a requested content type, rejecting unknown values."""
    try:
        return ContentType(value)
    except ValueError as e:
        allowed = ", ".join(f"'{t.value}'" for t in ContentType)
        raise InvalidParameterError(f"Type must be one of {allowed}") from e


def items_per_genre(limit: int, genre_count: int) -> int:
    """Candidates to request per genre: an even split of the limit plus slack."""
    return max(1, limit // genre_count) + PER_GENRE_SLACK


def balance(
    songs: list[RecommendedItem],
    albums: list[RecommendedItem],
    limit: int,
) -> tuple[list[RecommendedItem], list[RecommendedItem]]:
    """Trim songs and albums so that together they fit in ``limit``.

    When the combined count exceeds the limit, songs are capped at
    ``limit // 2`` and albums at the remainder, keeping the earliest items.
    """
    if len(songs) + len(albums) <= limit:
        return songs, albums

    songs_max = limit // 2
    albums_max = limit - songs_max
    return songs[:songs_max], albums[:albums_max]


class RecommendationEngine:
    """Engine for generating recommendations from a user's preferred genres.

    Strategy:
    1. Load the user's preferred genre ids (empty -> empty result)
    2. Load the ids of content the user already owns, per requested type
    3. Walk the genres in order, fetching a few candidates per genre and
       dropping owned ones, until the per-type limit is reached
    4. For "both", trim songs and albums to fit the overall limit

    Genres earlier in the preference order are favored: once they fill the
    limit, later genres are never queried.
    """

    def __init__(self, db: AsyncSession, catalog: CatalogClient):
        self.db = db
        self.catalog = catalog

    async def generate(
        self,
        user_id: int,
        content_type: str | ContentType,
        limit: int,
    ) -> RecommendationResult:
        """Generate recommendations for a user.

        Args:
            user_id: User to recommend for
            content_type: "song", "album" or "both"
            limit: Maximum number of items returned, between 1 and 50

        Raises:
            InvalidParameterError: if the content type or limit is invalid
        """
        content_type = parse_content_type(content_type)
        if not MIN_RECOMMENDATION_LIMIT <= limit <= MAX_RECOMMENDATION_LIMIT:
            raise InvalidParameterError(
                f"Limit must be between {MIN_RECOMMENDATION_LIMIT} and {MAX_RECOMMENDATION_LIMIT}"
            )

        log = LogContext(logger, user_id=str(user_id))
        log.info(f"Generating recommendations (type={content_type.value}, limit={limit})")

        genre_ids = await get_genre_ids(self.db, user_id)
        if not genre_ids:
            log.warning("No preferred genres, returning empty recommendations")
            return RecommendationResult(user_id=user_id)

        kinds = content_type.kinds
        owned_sets = await asyncio.gather(
            *(self.catalog.owned_content_ids(user_id, kind) for kind in kinds)
        )
        owned = dict(zip(kinds, owned_sets))

        per_genre = items_per_genre(limit, len(genre_ids))
        step_limits = {
            ContentType.SONG: limit,
            ContentType.ALBUM: limit // 2 if content_type is ContentType.BOTH else limit,
        }

        generated = await asyncio.gather(
            *(
                self._generate_for_type(kind, genre_ids, owned[kind], per_genre, step_limits[kind])
                for kind in kinds
            )
        )
        by_kind = dict(zip(kinds, generated))
        songs = by_kind.get(ContentType.SONG, [])
        albums = by_kind.get(ContentType.ALBUM, [])

        if content_type is ContentType.BOTH:
            songs, albums = balance(songs, albums, limit)

        result = RecommendationResult(
            user_id=user_id,
            total_count=len(songs) + len(albums),
            songs=songs,
            albums=albums,
        )
        log.info(
            f"Generated {len(songs)} songs, {len(albums)} albums "
            f"({result.total_count} total)"
        )
        return result

    async def _generate_for_type(
        self,
        content_type: ContentType,
        genre_ids: list[int],
        owned_ids: set[int],
        per_genre: int,
        step_limit: int,
    ) -> list[RecommendedItem]:
        """Collect unowned candidates of one type, genre by genre, up to ``step_limit``."""
        collected: list[RecommendedItem] = []

        for genre_id in genre_ids:
            candidates = await self.catalog.content_by_genre(genre_id, content_type, per_genre)
            collected.extend(item for item in candidates if item.id not in owned_ids)

            if len(collected) >= step_limit:
                break

        return collected[:step_limit]
