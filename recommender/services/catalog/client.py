"""Content catalog API client.

Every call degrades to an empty or absent result when the catalog is
unreachable, answers with an error status or returns a malformed body.
Recommendations are best-effort, so callers never see catalog failures.
"""

import logging
from typing import Any

import httpx

from recommender.config import get_settings
from recommender.constants import CATALOG_RETRY_BASE_DELAY, CATALOG_RETRY_MAX_DELAY
from recommender.models.schemas import ContentType, RecommendedItem
from recommender.utils.http_client import get_catalog_http_client
from recommender.utils.retry import RetryConfig, retry_async

logger = logging.getLogger(__name__)

# Catalog collection path and item id key per content type
_CONTENT_PATHS = {
    ContentType.SONG: ("songs", "song_id"),
    ContentType.ALBUM: ("albums", "album_id"),
}


def coerce_id(value: Any) -> int | None:
    """Normalize an id from the catalog to ``int``.

    Accepts ints, integral floats and numeric strings. Anything else
    (including booleans) yields None instead of raising.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value.is_integer():
            return int(value)
        logger.warning(f"Cannot coerce non-integral id {value!r}")
        return None
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            logger.warning(f"Cannot coerce id {value!r}")
            return None

    logger.warning(f"Unsupported id type {type(value).__name__}: {value!r}")
    return None


class CatalogClient:
    """Client for genre lookups, content listings and owned-content ids."""

    def __init__(
        self,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        retry_config: RetryConfig | None = None,
    ) -> None:
        settings = get_settings()
        self.base_url = (base_url or settings.catalog_url).rstrip("/")
        self._http_client = http_client
        self.retry_config = retry_config or RetryConfig(
            max_retries=settings.catalog_max_retries,
            base_delay=CATALOG_RETRY_BASE_DELAY,
            max_delay=CATALOG_RETRY_MAX_DELAY,
        )

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client or get_catalog_http_client()

    async def _get(
        self,
        path: str,
        operation: str,
        params: dict[str, Any] | None = None,
    ) -> httpx.Response | None:
        """GET a catalog path, returning None on any transport failure or non-200."""
        url = f"{self.base_url}{path}"
        try:
            response = await retry_async(
                self.http_client.get,
                url,
                params=params,
                config=self.retry_config,
                operation_name=f"catalog {operation}",
            )
        except httpx.HTTPError as e:
            logger.error(f"Catalog {operation} failed: {e}")
            return None

        if response is None:
            return None
        if response.status_code != 200:
            logger.warning(f"Catalog {operation} returned status {response.status_code}")
            return None
        return response

    async def _get_json(
        self,
        path: str,
        operation: str,
        params: dict[str, Any] | None = None,
    ) -> Any | None:
        response = await self._get(path, operation, params=params)
        if response is None:
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Catalog {operation} returned invalid JSON: {e}")
            return None

    async def genre_exists(self, genre_id: int) -> bool:
        """Check whether the catalog knows the genre."""
        data = await self._get_json(f"/genres/{genre_id}/exists", f"genre_exists({genre_id})")
        exists = data is True
        logger.debug(f"Genre {genre_id} exists: {exists}")
        return exists

    async def genre_name(self, genre_id: int) -> str | None:
        """Get a genre's display name, or None if unavailable."""
        response = await self._get(f"/genres/{genre_id}/name", f"genre_name({genre_id})")
        if response is None:
            return None

        if "json" in response.headers.get("content-type", ""):
            try:
                data = response.json()
            except ValueError as e:
                logger.error(f"Catalog genre_name({genre_id}) returned invalid JSON: {e}")
                return None
            name = data if isinstance(data, str) else None
        else:
            name = response.text

        name = name.strip() if name else None
        return name or None

    async def content_by_genre(
        self,
        genre_id: int,
        content_type: ContentType,
        limit: int,
    ) -> list[RecommendedItem]:
        """List up to ``limit`` songs or albums of a genre, in catalog order."""
        path, id_key = _CONTENT_PATHS[content_type]
        data = await self._get_json(
            f"/{path}",
            f"{path}_by_genre({genre_id})",
            params={"genre_id": genre_id, "limit": limit},
        )
        if not isinstance(data, list):
            if data is not None:
                logger.error(f"Catalog {path} for genre {genre_id}: expected a list")
            return []

        items = []
        for raw in data:
            if not isinstance(raw, dict):
                continue
            item_id = coerce_id(raw.get(id_key, raw.get("id")))
            if item_id is None:
                logger.warning(f"Skipping {content_type.value} without a usable id: {raw!r}")
                continue
            title = raw.get("title")
            genre_name = raw.get("genre_name")
            items.append(
                RecommendedItem(
                    id=item_id,
                    title=title if isinstance(title, str) else None,
                    genre_id=coerce_id(raw.get("genre_id")),
                    genre_name=genre_name if isinstance(genre_name, str) else None,
                )
            )

        logger.debug(f"Got {len(items)} {path} for genre {genre_id} (limit {limit})")
        return items

    async def owned_content_ids(self, user_id: int, content_type: ContentType) -> set[int]:
        """Get ids of songs or albums the user already owns or has favorited."""
        path, _ = _CONTENT_PATHS[content_type]
        data = await self._get_json(
            f"/users/{user_id}/{path}/ids",
            f"owned_{path}({user_id})",
        )
        if not isinstance(data, list):
            return set()

        ids = {coerced for value in data if (coerced := coerce_id(value)) is not None}
        logger.debug(f"User {user_id} owns {len(ids)} {path}")
        return ids


# Singleton instance
catalog_client = CatalogClient()


def get_catalog_client() -> CatalogClient:
    """Dependency returning the shared catalog client."""
    return catalog_client
