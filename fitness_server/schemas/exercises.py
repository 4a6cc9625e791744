"""Exercise catalog schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from fitness_server.schemas.common import CamelModel


class ExerciseCreate(CamelModel):
    """New catalog entry."""

    exercise_id: int = Field(..., description="Numeric external id")
    title: str = Field(..., min_length=1)
    image: str | None = None
    is_video: bool = False
    description: str | None = None


class ExerciseUpdate(CamelModel):
    """Partial catalog update."""

    exercise_id: int | None = None
    title: str | None = Field(None, min_length=1)
    image: str | None = None
    is_video: bool | None = None
    description: str | None = None


class ExerciseDelete(CamelModel):
    """Delete by internal id."""

    id: UUID


class ExerciseResponse(CamelModel):
    """Stored catalog entry."""

    id: UUID
    exercise_id: int
    title: str
    image: str | None = None
    is_video: bool
    description: str | None = None
    created_at: datetime
    updated_at: datetime | None = None
