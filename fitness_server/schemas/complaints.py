"""Support ticket schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from fitness_server.schemas.common import CamelModel, ClerkId


class ComplaintCreate(CamelModel):
    """Ticket raised by a user. `is_accept` is accepted but never stored."""

    clerk_id: ClerkId
    room_id: str = Field(..., min_length=1)
    status: str = "open"
    message: str | None = None
    is_accept: bool | None = None


class ComplaintAcceptUpdate(CamelModel):
    """Acceptance decision for a room's ticket."""

    room_id: str = Field(..., min_length=1)
    is_accept: bool


class ComplaintStatusUpdate(CamelModel):
    """Free-text status for a room's ticket."""

    room_id: str = Field(..., min_length=1)
    status: str = Field(..., min_length=1)


class RoomRequest(CamelModel):
    """Room lookup."""

    room_id: str = Field(..., min_length=1)


class ComplaintResponse(CamelModel):
    """Stored ticket."""

    id: UUID
    clerk_id: str
    room_id: str
    status: str
    message: str | None = None
    is_accept: bool
    created_at: datetime
    updated_at: datetime | None = None
