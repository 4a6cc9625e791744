"""User profile schemas for request/response validation."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import EmailStr, Field

from fitness_server.schemas.common import CamelModel, ClerkId


class UserCreate(CamelModel):
    """Registration payload."""

    name: str = Field(..., min_length=1)
    email: EmailStr
    clerk_id: ClerkId


class VitalsUpdate(CamelModel):
    """Vitals upsert payload; BMI is computed when omitted."""

    clerk_id: ClerkId
    age: int = Field(..., gt=0)
    weight: float = Field(..., gt=0, description="Weight in kilograms")
    height: float = Field(..., gt=0, description="Height in the configured unit")
    bmi: float | None = Field(None, gt=0)
    terms_accepted: bool | None = None


class FieldUpdate(CamelModel):
    """Single allow-listed field update."""

    clerk_id: ClerkId
    field: str = Field(..., min_length=1, description="Wire name of the profile field")
    value: Any
    bmi: float | None = Field(None, gt=0)


class ClerkIdRequest(CamelModel):
    """Body carrying only the user identifier."""

    clerk_id: ClerkId


class TargetStepsUpdate(CamelModel):
    """Daily step target payload."""

    clerk_id: ClerkId
    goal: int = Field(..., gt=0, description="Target steps per day")


class GoalUpdate(CamelModel):
    """Fitness goal payload."""

    clerk_id: ClerkId
    goal: str = Field(..., min_length=1)


class GenderUpdate(CamelModel):
    """Gender payload; name and email create the profile in the same upsert."""

    clerk_id: ClerkId
    gender: str = Field(..., min_length=1)
    name: str | None = None
    email: EmailStr | None = None


class ExerciseTypeUpdate(CamelModel):
    """Exercise type preference payload."""

    clerk_id: ClerkId
    exercise_type: str = Field(..., min_length=1)


class UserResponse(CamelModel):
    """User profile as returned to clients."""

    id: UUID
    clerk_id: str
    name: str | None = None
    email: str | None = None
    age: int | None = None
    weight: float | None = None
    height: float | None = None
    bmi: float | None = None
    gender: str | None = None
    goal: str | None = None
    exercise_type: str | None = None
    target_steps: int | None = None
    terms_accepted: bool | None = None
    created_at: datetime
    updated_at: datetime | None = None


class TargetStepsResponse(CamelModel):
    """Daily step target."""

    clerk_id: str
    target_steps: int


class GoalResponse(CamelModel):
    """Goal-related profile fields."""

    clerk_id: str
    goal: str | None = None
    target_steps: int | None = None
    exercise_type: str | None = None
