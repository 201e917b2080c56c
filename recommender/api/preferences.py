"""Genre preference API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from recommender.auth import Caller, authorize, get_caller
from recommender.db import get_db
from recommender.models.schemas import (
    DeleteAllResponse,
    MessageResponse,
    PreferenceRead,
    PreferencesAdd,
    PreferencesAddResult,
)
from recommender.services.catalog import CatalogClient, get_catalog_client
from recommender.services.preferences import PreferenceManager

router = APIRouter()


def get_preference_manager(
    db: Annotated[AsyncSession, Depends(get_db)],
    catalog: Annotated[CatalogClient, Depends(get_catalog_client)],
) -> PreferenceManager:
    return PreferenceManager(db, catalog)


@router.get("/{user_id}/preferences", response_model=list[PreferenceRead])
async def list_preferences(
    user_id: int,
    caller: Annotated[Caller, Depends(get_caller)],
    manager: Annotated[PreferenceManager, Depends(get_preference_manager)],
) -> list[PreferenceRead]:
    """List the user's preferred genres with their names."""
    authorize(caller.user_id, user_id, caller.is_service)
    return await manager.list(user_id)


@router.post(
    "/{user_id}/preferences",
    response_model=PreferencesAddResult,
    status_code=status.HTTP_201_CREATED,
)
async def add_preferences(
    user_id: int,
    data: PreferencesAdd,
    caller: Annotated[Caller, Depends(get_caller)],
    manager: Annotated[PreferenceManager, Depends(get_preference_manager)],
) -> PreferencesAddResult:
    """Add preferred genres. Genres already preferred are counted as duplicates."""
    authorize(caller.user_id, user_id, caller.is_service)
    return await manager.add(user_id, data.genre_ids)


@router.delete("/{user_id}/preferences", response_model=DeleteAllResponse)
async def delete_all_preferences(
    user_id: int,
    caller: Annotated[Caller, Depends(get_caller)],
    manager: Annotated[PreferenceManager, Depends(get_preference_manager)],
) -> DeleteAllResponse:
    """Remove every preferred genre of the user."""
    authorize(caller.user_id, user_id, caller.is_service)
    count = await manager.remove_all(user_id)
    return DeleteAllResponse(message="All preferences removed", deleted_count=count)


@router.delete("/{user_id}/preferences/{genre_id}", response_model=MessageResponse)
async def delete_preference(
    user_id: int,
    genre_id: int,
    caller: Annotated[Caller, Depends(get_caller)],
    manager: Annotated[PreferenceManager, Depends(get_preference_manager)],
) -> MessageResponse:
    """Remove one preferred genre."""
    authorize(caller.user_id, user_id, caller.is_service)
    await manager.remove(user_id, genre_id)
    return MessageResponse(message="Preference removed")
