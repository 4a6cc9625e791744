"""Favourite schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from fitness_server.schemas.common import CamelModel, ClerkId


class FavouriteRequest(CamelModel):
    """User/recommendation pair."""

    clerk_id: ClerkId
    recommendation_id: str = Field(..., min_length=1, alias="recommendation_id")


class FavouriteResponse(CamelModel):
    """Stored favourite."""

    id: UUID
    clerk_id: str
    favourite_id: str = Field(alias="favourite_id")
    created_at: datetime


class FavouriteIdResponse(CamelModel):
    """Recommendation id projection."""

    id: UUID
    favourite_id: str = Field(alias="favourite_id")
