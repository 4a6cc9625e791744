"""Support ticket endpoints."""

from fastapi import APIRouter, status

from fitness_server.dependencies import DatabaseSession
from fitness_server.schemas.common import DataResponse, InsertResult, UpdateResult
from fitness_server.schemas.complaints import (
    ComplaintAcceptUpdate,
    ComplaintCreate,
    ComplaintResponse,
    ComplaintStatusUpdate,
    RoomRequest,
)
from fitness_server.services.complaint_service import ComplaintService

router = APIRouter(tags=["Complaints"])


@router.post(
    "/complain-raised",
    response_model=DataResponse[InsertResult],
    status_code=status.HTTP_201_CREATED,
)
async def raise_complaint(complaint: ComplaintCreate, db: DatabaseSession):
    """Open a ticket. It always starts unaccepted."""
    result = await ComplaintService.raise_complaint(db, complaint)
    return DataResponse(message="Complaint raised successfully", data=result)


@router.put("/update-complain", response_model=DataResponse[UpdateResult])
async def update_complaint(update: ComplaintAcceptUpdate, db: DatabaseSession):
    """Accept or decline a room's ticket."""
    result = await ComplaintService.update_complaint(db, update.room_id, update.is_accept)
    return DataResponse(message="Complaint updated successfully", data=result)


@router.put("/update-complain-status", response_model=DataResponse[UpdateResult])
async def update_complaint_status(update: ComplaintStatusUpdate, db: DatabaseSession):
    """Set a room's ticket status."""
    result = await ComplaintService.update_complaint_status(db, update.room_id, update.status)
    return DataResponse(message="Complaint status updated successfully", data=result)


@router.post("/verify-room", response_model=DataResponse[ComplaintResponse])
async def verify_room(request: RoomRequest, db: DatabaseSession):
    """Get the ticket behind a support room."""
    return DataResponse(data=await ComplaintService.verify_room(db, request.room_id))


@router.get("/fetch-complains/{clerk_id}", response_model=DataResponse[list[ComplaintResponse]])
async def list_user_complaints(clerk_id: str, db: DatabaseSession):
    """Tickets raised by a user."""
    return DataResponse(data=await ComplaintService.list_for_user(db, clerk_id))


@router.get("/fetch-all-complains", response_model=DataResponse[list[ComplaintResponse]])
async def list_all_complaints(db: DatabaseSession):
    """Every ticket."""
    return DataResponse(data=await ComplaintService.list_all(db))
