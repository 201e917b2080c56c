"""CRUD operations for genre preferences."""

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from recommender.models.preference import GenrePreference


async def list_preferences(db: AsyncSession, user_id: int) -> Sequence[GenrePreference]:
    """Get all preferences of a user, oldest first."""
    result = await db.execute(
        select(GenrePreference)
        .where(GenrePreference.user_id == user_id)
        .order_by(GenrePreference.created_at, GenrePreference.id)
    )
    return result.scalars().all()


async def get_genre_ids(db: AsyncSession, user_id: int) -> list[int]:
    """Get only the preferred genre ids of a user."""
    result = await db.execute(
        select(GenrePreference.genre_id)
        .where(GenrePreference.user_id == user_id)
        .order_by(GenrePreference.created_at, GenrePreference.id)
    )
    return list(result.scalars().all())


async def preference_exists(db: AsyncSession, user_id: int, genre_id: int) -> bool:
    """Check whether the user already prefers the genre."""
    result = await db.execute(
        select(GenrePreference.id).where(
            GenrePreference.user_id == user_id,
            GenrePreference.genre_id == genre_id,
        )
    )
    return result.first() is not None


async def insert_preference(
    db: AsyncSession,
    user_id: int,
    genre_id: int,
) -> GenrePreference | None:
    """Insert a preference, or return None if the pair already exists.

    The insert runs in a SAVEPOINT so that a unique-constraint violation
    (e.g. a concurrent add of the same genre) only rolls back this row.
    """
    preference = GenrePreference(user_id=user_id, genre_id=genre_id)
    try:
        async with db.begin_nested():
            db.add(preference)
            await db.flush()
    except IntegrityError:
        return None

    await db.refresh(preference)
    return preference


async def delete_preference(db: AsyncSession, user_id: int, genre_id: int) -> bool:
    """Delete one preference. Returns False if it did not exist."""
    result = await db.execute(
        delete(GenrePreference).where(
            GenrePreference.user_id == user_id,
            GenrePreference.genre_id == genre_id,
        )
    )
    return result.rowcount > 0


async def delete_all_preferences(db: AsyncSession, user_id: int) -> int:
    """Delete every preference of a user and return how many were removed."""
    result = await db.execute(
        delete(GenrePreference).where(GenrePreference.user_id == user_id)
    )
    return result.rowcount or 0
