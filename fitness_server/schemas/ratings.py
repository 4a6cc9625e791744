"""Rating schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from fitness_server.schemas.common import CamelModel, ClerkId


class RatingCreate(CamelModel):
    """Star rating with optional text."""

    clerk_id: ClerkId
    stars: int = Field(..., ge=1, le=5)
    review: str | None = None
    review_status: str | None = None


class ReviewStatusUpdate(CamelModel):
    """Review prompt state for a user."""

    clerk_id: ClerkId
    review_status: str = Field(..., min_length=1)


class RatingResponse(CamelModel):
    """Stored rating."""

    id: UUID
    clerk_id: str
    stars: int
    review: str | None = None
    review_status: str
    created_at: datetime
