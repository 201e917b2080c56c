"""Main API router."""

from fastapi import APIRouter

from recommender.api.preferences import router as preferences_router
from recommender.api.recommendations import router as recommendations_router

api_router = APIRouter(prefix="/users")

api_router.include_router(preferences_router, tags=["preferences"])
api_router.include_router(recommendations_router, tags=["recommendations"])
