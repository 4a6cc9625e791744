"""Admin endpoints: credentials, accounts and dashboard."""

from uuid import UUID

from fastapi import APIRouter, status

from fitness_server.dependencies import DatabaseSession
from fitness_server.schemas.admin import (
    AdminCreate,
    AdminResponse,
    AnalyticsResponse,
    LoginRequest,
    PasswordReset,
)
from fitness_server.schemas.common import (
    CountResponse,
    DataResponse,
    DeleteResult,
    InsertResult,
    UpdateResult,
)
from fitness_server.schemas.users import UserResponse
from fitness_server.services.admin_service import AdminService

router = APIRouter(tags=["Admin"])


@router.post("/validate-login", response_model=DataResponse[AdminResponse])
async def validate_login(credentials: LoginRequest, db: DatabaseSession):
    """
    Check admin credentials.

    This is a one-shot check: no session or token is issued.
    """
    admin = await AdminService.validate_login(db, credentials.email, credentials.password)
    return DataResponse(message="Login successful", data=admin)


@router.post("/reset-password", response_model=DataResponse[UpdateResult])
async def reset_password(reset: PasswordReset, db: DatabaseSession):
    """Change an admin password after verifying the current one."""
    result = await AdminService.reset_password(
        db, reset.email, reset.old_password, reset.new_password
    )
    return DataResponse(message="Password reset successfully", data=result)


@router.get("/admins", response_model=DataResponse[list[AdminResponse]])
async def list_admins(db: DatabaseSession):
    """All admin accounts."""
    return DataResponse(data=await AdminService.list_admins(db))


@router.post(
    "/admins",
    response_model=DataResponse[InsertResult],
    status_code=status.HTTP_201_CREATED,
)
async def create_admin(admin_data: AdminCreate, db: DatabaseSession):
    """Create an admin account."""
    result = await AdminService.create_admin(db, admin_data)
    return DataResponse(message="Admin created successfully", data=result)


@router.get("/total-admins", response_model=CountResponse)
async def total_admins(db: DatabaseSession):
    """Number of admin accounts."""
    return CountResponse(total=await AdminService.count_admins(db))


@router.get("/users", response_model=DataResponse[list[UserResponse]])
async def list_users(db: DatabaseSession):
    """All user profiles."""
    return DataResponse(data=await AdminService.list_users(db))


@router.delete("/users/{user_id}", response_model=DataResponse[DeleteResult])
async def delete_user(user_id: UUID, db: DatabaseSession):
    """Delete a user profile by internal id."""
    result = await AdminService.delete_user(db, user_id)
    return DataResponse(message="User deleted successfully", data=result)


@router.get("/analytics", response_model=AnalyticsResponse)
async def analytics(db: DatabaseSession):
    """Dashboard totals."""
    return await AdminService.analytics(db)
