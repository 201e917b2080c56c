"""Pydantic schemas for API validation and serialization."""

import enum

from pydantic import BaseModel, Field


class ContentType(str, enum.Enum):
    """Kind of content a recommendation request asks for."""

    SONG = "song"
    ALBUM = "album"
    BOTH = "both"

    @property
    def kinds(self) -> tuple["ContentType", ...]:
        """Concrete catalog content types covered by this request type."""
        if self is ContentType.BOTH:
            return (ContentType.SONG, ContentType.ALBUM)
        return (self,)


# Recommendation schemas
class RecommendedItem(BaseModel):
    """A song or album projected from the content catalog."""

    id: int
    title: str | None = None
    genre_id: int | None = None
    genre_name: str | None = None


class RecommendationResult(BaseModel):
    """Recommendations generated for one user in one request."""

    user_id: int
    total_count: int = 0
    songs: list[RecommendedItem] = Field(default_factory=list)
    albums: list[RecommendedItem] = Field(default_factory=list)


# Preference schemas
class PreferenceRead(BaseModel):
    """A preferred genre enriched with its catalog name."""

    genre_id: int
    genre_name: str


class PreferencesAdd(BaseModel):
    """Body of a request adding preferred genres."""

    genre_ids: list[int] | None = None


class PreferencesAddResult(BaseModel):
    """Outcome of adding preferred genres."""

    message: str
    genres_added: int
    genres_duplicated: int
    preferences: list[PreferenceRead]


class MessageResponse(BaseModel):
    message: str


class DeleteAllResponse(MessageResponse):
    deleted_count: int


# Error schema
class ErrorResponse(BaseModel):
    """Body of every client-facing error response."""

    error: str
    message: str
    status_code: int
    timestamp: str
