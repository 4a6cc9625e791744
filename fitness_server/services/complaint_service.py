"""Support ticket service."""

from datetime import UTC, datetime
from uuid import uuid4

import structlog
from sqlalchemy import desc, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from fitness_server.core.exceptions import NotFoundException
from fitness_server.models.complaints import complaints
from fitness_server.schemas.common import InsertResult, UpdateResult
from fitness_server.schemas.complaints import ComplaintCreate

logger = structlog.get_logger(__name__)


class ComplaintService:
    """Service for support tickets."""

    @staticmethod
    async def raise_complaint(db: AsyncSession, complaint: ComplaintCreate) -> InsertResult:
        """Open a ticket. Acceptance is always stored as false."""
        complaint_id = uuid4()
        now = datetime.now(UTC)
        query = complaints.insert().values(
            id=complaint_id,
            clerk_id=complaint.clerk_id,
            room_id=complaint.room_id,
            status=complaint.status,
            message=complaint.message,
            is_accept=False,
            created_at=now,
            updated_at=now,
        )

        await db.execute(query)
        await db.commit()

        logger.info("complaint_raised", clerk_id=complaint.clerk_id, room_id=complaint.room_id)
        return InsertResult(inserted_id=complaint_id)

    @staticmethod
    async def _update_by_room(db: AsyncSession, room_id: str, **values) -> UpdateResult:
        query = (
            update(complaints)
            .where(complaints.c.room_id == room_id)
            .values(**values, updated_at=datetime.now(UTC))
        )
        result = await db.execute(query)
        await db.commit()

        if not result.rowcount:  # type: ignore[attr-defined]
            raise NotFoundException("Complaint not found")

        return UpdateResult(matched_count=result.rowcount)  # type: ignore[attr-defined]

    @staticmethod
    async def update_complaint(db: AsyncSession, room_id: str, is_accept: bool) -> UpdateResult:
        """Accept or decline the ticket of a room."""
        return await ComplaintService._update_by_room(db, room_id, is_accept=is_accept)

    @staticmethod
    async def update_complaint_status(db: AsyncSession, room_id: str, status: str) -> UpdateResult:
        """Set the free-text status of the ticket of a room."""
        return await ComplaintService._update_by_room(db, room_id, status=status)

    @staticmethod
    async def verify_room(db: AsyncSession, room_id: str) -> dict:
        """Get the latest ticket for a room."""
        query = (
            select(complaints)
            .where(complaints.c.room_id == room_id)
            .order_by(desc(complaints.c.created_at))
        )
        result = await db.execute(query)
        complaint = result.mappings().first()

        if not complaint:
            raise NotFoundException("Room not found")

        return dict(complaint)

    @staticmethod
    async def list_for_user(db: AsyncSession, clerk_id: str) -> list[dict]:
        """Tickets raised by a user, newest first."""
        query = (
            select(complaints)
            .where(complaints.c.clerk_id == clerk_id)
            .order_by(desc(complaints.c.created_at))
        )
        result = await db.execute(query)
        return [dict(row) for row in result.mappings().all()]

    @staticmethod
    async def list_all(db: AsyncSession) -> list[dict]:
        """Every ticket, newest first."""
        query = select(complaints).order_by(desc(complaints.c.created_at))
        result = await db.execute(query)
        return [dict(row) for row in result.mappings().all()]
