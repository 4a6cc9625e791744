"""Activity endpoints: usage logging and step reports."""

from fastapi import APIRouter, Query, status

from fitness_server.dependencies import DatabaseSession
from fitness_server.schemas.activity import ActivityReport, CurrentStepsCreate, DailyUsageCreate
from fitness_server.schemas.common import DataResponse, InsertResult
from fitness_server.services.activity_service import (
    MONTH_DAYS,
    WEEK_DAYS,
    YEAR_DAYS,
    ActivityService,
)

router = APIRouter(tags=["Activity"])

ClerkIdQuery = Query(..., alias="clerkId", min_length=1, description="External user identifier")


@router.post(
    "/daily-usage",
    response_model=DataResponse[InsertResult],
    status_code=status.HTTP_201_CREATED,
)
async def record_daily_usage(usage: DailyUsageCreate, db: DatabaseSession):
    """Append a daily usage record."""
    result = await ActivityService.record_daily_usage(db, usage)
    return DataResponse(data=result)


@router.post(
    "/current-steps",
    response_model=DataResponse[InsertResult],
    status_code=status.HTTP_201_CREATED,
)
async def record_current_steps(snapshot: CurrentStepsCreate, db: DatabaseSession):
    """Append a live step snapshot."""
    result = await ActivityService.record_current_steps(db, snapshot)
    return DataResponse(data=result)


@router.get("/daily-data", response_model=ActivityReport)
async def get_daily_data(db: DatabaseSession, clerk_id: str = ClerkIdQuery):
    """The last seven records, however old, and their average steps."""
    return await ActivityService.recent_report(db, clerk_id)


@router.get("/weekly-data", response_model=ActivityReport)
async def get_weekly_data(db: DatabaseSession, clerk_id: str = ClerkIdQuery):
    """Records from the last 7 days and their average steps."""
    return await ActivityService.windowed_report(db, clerk_id, WEEK_DAYS)


@router.get("/monthly-data", response_model=ActivityReport)
async def get_monthly_data(db: DatabaseSession, clerk_id: str = ClerkIdQuery):
    """Records from the last 30 days and their average steps."""
    return await ActivityService.windowed_report(db, clerk_id, MONTH_DAYS)


@router.get("/yearly-data", response_model=ActivityReport)
async def get_yearly_data(db: DatabaseSession, clerk_id: str = ClerkIdQuery):
    """Records from the last 365 days and their average steps."""
    return await ActivityService.windowed_report(db, clerk_id, YEAR_DAYS)
