"""Exercise catalog endpoints."""

from uuid import UUID

from fastapi import APIRouter, status

from fitness_server.dependencies import DatabaseSession
from fitness_server.schemas.common import DataResponse, DeleteResult, InsertResult, UpdateResult
from fitness_server.schemas.exercises import (
    ExerciseCreate,
    ExerciseDelete,
    ExerciseResponse,
    ExerciseUpdate,
)
from fitness_server.services.exercise_service import ExerciseService

router = APIRouter(tags=["Exercises"])


# Path spelling kept for existing clients
@router.get("/fetch-excersies", response_model=DataResponse[list[ExerciseResponse]])
async def list_exercises(db: DatabaseSession):
    """All catalog entries."""
    return DataResponse(data=await ExerciseService.list_exercises(db))


@router.get("/fetch-unique-name-exercise", response_model=DataResponse[list[ExerciseResponse]])
async def list_unique_exercises(db: DatabaseSession):
    """One catalog entry per distinct title."""
    return DataResponse(data=await ExerciseService.list_unique_exercises(db))


@router.get("/fetch-exercise-by-id/{exercise_id}", response_model=DataResponse[ExerciseResponse])
async def get_exercise(exercise_id: UUID, db: DatabaseSession):
    """Get a catalog entry by internal id."""
    return DataResponse(data=await ExerciseService.get_exercise(db, exercise_id))


@router.post(
    "/add-exercise",
    response_model=DataResponse[InsertResult],
    status_code=status.HTTP_201_CREATED,
)
async def add_exercise(exercise_data: ExerciseCreate, db: DatabaseSession):
    """Add a catalog entry."""
    result = await ExerciseService.add_exercise(db, exercise_data)
    return DataResponse(message="Exercise added successfully", data=result)


@router.put("/update-exercise/{exercise_id}", response_model=DataResponse[UpdateResult])
async def update_exercise(exercise_id: UUID, exercise_data: ExerciseUpdate, db: DatabaseSession):
    """Update a catalog entry."""
    result = await ExerciseService.update_exercise(db, exercise_id, exercise_data)
    return DataResponse(message="Exercise updated successfully", data=result)


@router.delete("/delete-exercise", response_model=DataResponse[DeleteResult])
async def delete_exercise(request: ExerciseDelete, db: DatabaseSession):
    """Delete a catalog entry by internal id."""
    result = await ExerciseService.delete_exercise(db, request.id)
    return DataResponse(message="Exercise deleted successfully", data=result)
