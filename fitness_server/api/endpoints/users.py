"""User profile endpoints."""

from fastapi import APIRouter, Query, status

from fitness_server.dependencies import DatabaseSession
from fitness_server.schemas.common import DataResponse, InsertResult, UpdateResult
from fitness_server.schemas.users import (
    ClerkIdRequest,
    ExerciseTypeUpdate,
    FieldUpdate,
    GenderUpdate,
    GoalResponse,
    GoalUpdate,
    TargetStepsResponse,
    TargetStepsUpdate,
    UserCreate,
    UserResponse,
    VitalsUpdate,
)
from fitness_server.services.user_service import UserService

router = APIRouter(tags=["Users"])


@router.post(
    "/user-create",
    response_model=DataResponse[InsertResult],
    status_code=status.HTTP_201_CREATED,
)
async def create_user(user_data: UserCreate, db: DatabaseSession):
    """Register a user profile."""
    result = await UserService.create_user(db, user_data)
    return DataResponse(message="User created successfully", data=result)


@router.put("/update-bmi", response_model=DataResponse[UpdateResult])
async def update_bmi(vitals: VitalsUpdate, db: DatabaseSession):
    """Upsert vitals; BMI is computed from weight and height when omitted."""
    result = await UserService.upsert_vitals(db, vitals)
    return DataResponse(message="BMI updated successfully", data=result)


@router.post("/user-update", response_model=DataResponse[UpdateResult])
async def update_user_field(update: FieldUpdate, db: DatabaseSession):
    """Update a single allow-listed profile field."""
    result = await UserService.update_field(
        db, update.clerk_id, update.field, update.value, bmi=update.bmi
    )
    return DataResponse(message="User updated successfully", data=result)


@router.post("/user-details", response_model=DataResponse[UserResponse])
async def get_user_details(request: ClerkIdRequest, db: DatabaseSession):
    """Get a user's full profile."""
    user = await UserService.get_user_details(db, request.clerk_id)
    return DataResponse(data=UserResponse.model_validate(user))


@router.put("/user-target-steps", response_model=DataResponse[UpdateResult])
async def set_target_steps(update: TargetStepsUpdate, db: DatabaseSession):
    """Set the daily step target."""
    result = await UserService.set_target_steps(db, update.clerk_id, update.goal)
    return DataResponse(message="Target steps updated successfully", data=result)


@router.get("/user-target-steps", response_model=DataResponse[TargetStepsResponse])
async def get_target_steps(
    db: DatabaseSession,
    clerk_id: str = Query(..., alias="clerkId", min_length=1),
):
    """Get the daily step target."""
    target_steps = await UserService.get_target_steps(db, clerk_id)
    return DataResponse(data=TargetStepsResponse(clerk_id=clerk_id, target_steps=target_steps))


@router.put("/update-goal", response_model=DataResponse[UpdateResult])
async def update_goal(update: GoalUpdate, db: DatabaseSession):
    """Set the fitness goal."""
    result = await UserService.update_goal(db, update.clerk_id, update.goal)
    return DataResponse(message="Goal updated successfully", data=result)


@router.put("/update-gender", response_model=DataResponse[UpdateResult])
async def update_gender(update: GenderUpdate, db: DatabaseSession):
    """Set gender, creating the profile when it does not exist yet."""
    result = await UserService.update_gender(
        db, update.clerk_id, update.gender, name=update.name, email=update.email
    )
    return DataResponse(message="Gender updated successfully", data=result)


@router.put("/update-exercise-type", response_model=DataResponse[UpdateResult])
async def update_exercise_type(update: ExerciseTypeUpdate, db: DatabaseSession):
    """Set the preferred exercise type."""
    result = await UserService.update_exercise_type(db, update.clerk_id, update.exercise_type)
    return DataResponse(message="Exercise type updated successfully", data=result)


@router.post("/fetch-goal", response_model=DataResponse[GoalResponse])
async def fetch_goal(request: ClerkIdRequest, db: DatabaseSession):
    """Get the goal-related fields of a profile."""
    goal = await UserService.fetch_goal(db, request.clerk_id)
    return DataResponse(data=GoalResponse.model_validate(goal))
