"""Favourite service for business logic."""

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from fitness_server.models.favourites import favourites
from fitness_server.schemas.common import DeleteResult, InsertResult


class FavouriteService:
    """Service for user favourites."""

    @staticmethod
    async def add_favourite(db: AsyncSession, clerk_id: str, recommendation_id: str) -> InsertResult:
        """Store a favourite; the same pair may be stored more than once."""
        favourite_id = uuid4()
        query = favourites.insert().values(
            id=favourite_id,
            clerk_id=clerk_id,
            favourite_id=recommendation_id,
            created_at=datetime.now(UTC),
        )

        await db.execute(query)
        await db.commit()
        return InsertResult(inserted_id=favourite_id)

    @staticmethod
    async def remove_favourite(
        db: AsyncSession, clerk_id: str, recommendation_id: str
    ) -> DeleteResult:
        """Delete one row matching the pair; no match is not an error."""
        match = select(favourites.c.id).where(
            favourites.c.clerk_id == clerk_id,
            favourites.c.favourite_id == recommendation_id,
        )
        result = await db.execute(match.limit(1))
        row_id = result.scalar_one_or_none()

        if row_id is None:
            return DeleteResult(deleted_count=0)

        result = await db.execute(delete(favourites).where(favourites.c.id == row_id))
        await db.commit()
        return DeleteResult(deleted_count=result.rowcount)  # type: ignore[attr-defined]

    @staticmethod
    async def list_favourites(db: AsyncSession, clerk_id: str) -> list[dict]:
        """All favourites of a user, duplicates included."""
        query = select(favourites).where(favourites.c.clerk_id == clerk_id)
        result = await db.execute(query)
        return [dict(row) for row in result.mappings().all()]

    @staticmethod
    async def list_favourite_ids(db: AsyncSession, clerk_id: str) -> list[dict]:
        """Recommendation ids a user has favourited."""
        query = select(favourites.c.id, favourites.c.favourite_id).where(
            favourites.c.clerk_id == clerk_id
        )
        result = await db.execute(query)
        return [dict(row) for row in result.mappings().all()]
