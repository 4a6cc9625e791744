"""Activity schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, Field

from fitness_server.schemas.common import CamelModel, ClerkId


class DailyUsageCreate(CamelModel):
    """Daily usage report; accepts `clerkId` or `clerk_id`."""

    clerk_id: ClerkId = Field(validation_alias=AliasChoices("clerkId", "clerk_id"))
    daily_steps: int | None = Field(None, ge=0)
    calories: float | None = Field(None, ge=0)
    distance: float | None = Field(None, ge=0)
    daily_use: float | None = Field(None, ge=0)
    is_daily_goal_achieved: bool | None = None


class CurrentStepsCreate(CamelModel):
    """Live step snapshot."""

    clerk_id: ClerkId
    steps: int = Field(..., ge=0)
    calories: float = Field(..., ge=0)
    distance: float | None = Field(None, ge=0)
    date: datetime | None = None


class DailyUsageResponse(CamelModel):
    """Stored daily usage record."""

    id: UUID
    clerk_id: str
    daily_steps: int | None = None
    calories: float | None = None
    distance: float | None = None
    daily_use: float | None = None
    is_daily_goal_achieved: bool | None = None
    created_at: datetime


class ActivityReport(CamelModel):
    """Records in a window plus their mean step count."""

    data: list[DailyUsageResponse]
    average_steps: float
