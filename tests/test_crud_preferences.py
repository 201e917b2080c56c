"""Tests for genre preference CRUD operations."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from recommender.db.crud.preferences import (
    delete_all_preferences,
    delete_preference,
    get_genre_ids,
    insert_preference,
    list_preferences,
    preference_exists,
)


class TestInsertPreference:
    """Tests for insert_preference."""

    @pytest.mark.asyncio
    async def test_insert(self, db_session: AsyncSession):
        preference = await insert_preference(db_session, 1, 10)

        assert preference is not None
        assert preference.id is not None
        assert preference.user_id == 1
        assert preference.genre_id == 10
        assert preference.created_at is not None

    @pytest.mark.asyncio
    async def test_duplicate_insert_returns_none(self, db_session: AsyncSession):
        await insert_preference(db_session, 1, 10)

        assert await insert_preference(db_session, 1, 10) is None

        # The session is still usable after the rejected insert
        assert await insert_preference(db_session, 1, 11) is not None
        await db_session.commit()
        assert await get_genre_ids(db_session, 1) == [10, 11]


class TestQueries:
    """Tests for preference lookups."""

    @pytest.mark.asyncio
    async def test_list_and_ids_keep_insertion_order(self, db_session: AsyncSession):
        for genre_id in (30, 10, 20):
            await insert_preference(db_session, 1, genre_id)

        preferences = await list_preferences(db_session, 1)

        assert [p.genre_id for p in preferences] == [30, 10, 20]
        assert await get_genre_ids(db_session, 1) == [30, 10, 20]

    @pytest.mark.asyncio
    async def test_exists(self, db_session: AsyncSession):
        await insert_preference(db_session, 1, 10)

        assert await preference_exists(db_session, 1, 10) is True
        assert await preference_exists(db_session, 1, 11) is False
        assert await preference_exists(db_session, 2, 10) is False


class TestDelete:
    """Tests for preference deletion."""

    @pytest.mark.asyncio
    async def test_delete_one(self, db_session: AsyncSession):
        await insert_preference(db_session, 1, 10)

        assert await delete_preference(db_session, 1, 10) is True
        assert await delete_preference(db_session, 1, 10) is False

    @pytest.mark.asyncio
    async def test_delete_all_counts_rows(self, db_session: AsyncSession):
        for genre_id in (1, 2):
            await insert_preference(db_session, 1, genre_id)

        assert await delete_all_preferences(db_session, 1) == 2
        assert await delete_all_preferences(db_session, 1) == 0
