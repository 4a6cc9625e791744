"""Admin-specific schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr, Field

from fitness_server.schemas.common import CamelModel


class AdminCreate(CamelModel):
    """New admin account."""

    name: str | None = None
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)
    role: str = "admin"
    phone: str | None = Field(None, max_length=20)
    avatar: str | None = None


class LoginRequest(CamelModel):
    """One-shot credential check."""

    email: EmailStr
    password: str = Field(..., min_length=1)


class PasswordReset(CamelModel):
    """Password change verified by the current password."""

    email: EmailStr
    old_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=8, max_length=72)


class AdminResponse(CamelModel):
    """Admin profile without credentials."""

    id: UUID
    name: str | None = None
    email: str
    role: str
    phone: str | None = None
    avatar: str | None = None
    created_at: datetime
    updated_at: datetime | None = None


class ActivityTotals(CamelModel):
    records: int
    average_steps: float


class RatingTotals(CamelModel):
    total: int
    average_stars: float


class AnalyticsResponse(CamelModel):
    """Dashboard totals."""

    users: dict[str, int] = Field(..., description="User totals", examples=[{"total": 1000}])
    activity: ActivityTotals = Field(
        ...,
        description="Activity totals",
        examples=[{"records": 5000, "averageSteps": 6400.5}],
    )
    favourites: dict[str, int]
    exercises: dict[str, int]
    complaints: dict[str, int] = Field(
        ...,
        description="Ticket totals",
        examples=[{"total": 12, "accepted": 9, "pending": 3}],
    )
    ratings: RatingTotals
    admins: dict[str, int]
