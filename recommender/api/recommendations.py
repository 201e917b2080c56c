"""Recommendations API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from recommender.auth import Caller, authorize, get_caller
from recommender.constants import DEFAULT_CONTENT_TYPE, DEFAULT_RECOMMENDATION_LIMIT
from recommender.db import get_db
from recommender.models.schemas import RecommendationResult
from recommender.services.catalog import CatalogClient, get_catalog_client
from recommender.services.recommendations import RecommendationEngine

router = APIRouter()


@router.get("/{user_id}/recommendations", response_model=RecommendationResult)
async def get_recommendations(
    user_id: int,
    caller: Annotated[Caller, Depends(get_caller)],
    db: Annotated[AsyncSession, Depends(get_db)],
    catalog: Annotated[CatalogClient, Depends(get_catalog_client)],
    content_type: Annotated[str, Query(alias="type")] = DEFAULT_CONTENT_TYPE,
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
) -> RecommendationResult:
    """Get song and/or album recommendations based on the user's preferred genres.

    ``type`` is one of "song", "album" or "both"; ``limit`` caps the total
    number of items (1-50).
    """
    authorize(caller.user_id, user_id, caller.is_service)

    engine = RecommendationEngine(db, catalog)
    return await engine.generate(user_id, content_type, limit)
