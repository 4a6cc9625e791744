"""Rating endpoints."""

from fastapi import APIRouter, Query, status

from fitness_server.dependencies import DatabaseSession
from fitness_server.schemas.common import DataResponse, InsertResult, UpdateResult
from fitness_server.schemas.ratings import RatingCreate, RatingResponse, ReviewStatusUpdate
from fitness_server.services.rating_service import RatingService

router = APIRouter(tags=["Ratings"])


@router.post(
    "/rating",
    response_model=DataResponse[InsertResult],
    status_code=status.HTTP_201_CREATED,
)
async def add_rating(rating: RatingCreate, db: DatabaseSession):
    """Store a rating."""
    result = await RatingService.add_rating(db, rating)
    return DataResponse(message="Rating added successfully", data=result)


@router.get("/ratings", response_model=DataResponse[list[RatingResponse]])
async def list_ratings(
    db: DatabaseSession,
    clerk_id: str | None = Query(None, alias="clerkId"),
):
    """Ratings, optionally for one user."""
    return DataResponse(data=await RatingService.list_ratings(db, clerk_id))


@router.put("/update-review-status", response_model=DataResponse[UpdateResult])
async def update_review_status(update: ReviewStatusUpdate, db: DatabaseSession):
    """Record the user's answer to the review prompt."""
    result = await RatingService.update_review_status(db, update.clerk_id, update.review_status)
    return DataResponse(message="Review status updated successfully", data=result)
