"""Rating service."""

from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy import desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from fitness_server.core.exceptions import NotFoundException
from fitness_server.models.ratings import ratings
from fitness_server.schemas.common import InsertResult, UpdateResult
from fitness_server.schemas.ratings import RatingCreate

DEFAULT_REVIEW_STATUS = "later"


class RatingService:
    """Service for app ratings."""

    @staticmethod
    async def add_rating(db: AsyncSession, rating: RatingCreate) -> InsertResult:
        """Store a rating; the review prompt status defaults to "later"."""
        rating_id = uuid4()
        query = ratings.insert().values(
            id=rating_id,
            clerk_id=rating.clerk_id,
            stars=rating.stars,
            review=rating.review,
            review_status=rating.review_status or DEFAULT_REVIEW_STATUS,
            created_at=datetime.now(UTC),
        )

        await db.execute(query)
        await db.commit()
        return InsertResult(inserted_id=rating_id)

    @staticmethod
    async def list_ratings(db: AsyncSession, clerk_id: str | None = None) -> list[dict]:
        """Ratings, newest first, optionally for one user."""
        query = select(ratings).order_by(desc(ratings.c.created_at))
        if clerk_id:
            query = query.where(ratings.c.clerk_id == clerk_id)

        result = await db.execute(query)
        return [dict(row) for row in result.mappings().all()]

    @staticmethod
    async def update_review_status(db: AsyncSession, clerk_id: str, status: str) -> UpdateResult:
        """Set the review prompt status on every rating of a user."""
        query = update(ratings).where(ratings.c.clerk_id == clerk_id).values(review_status=status)
        result = await db.execute(query)
        await db.commit()

        if not result.rowcount:  # type: ignore[attr-defined]
            raise NotFoundException("Rating not found")

        return UpdateResult(matched_count=result.rowcount)  # type: ignore[attr-defined]
