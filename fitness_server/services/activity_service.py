"""Activity service: usage logging and step reports."""

from collections.abc import Iterable, Mapping
from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import uuid4

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from fitness_server.models.activity import current_steps, daily_targets
from fitness_server.schemas.common import InsertResult
from fitness_server.schemas.activity import CurrentStepsCreate, DailyUsageCreate

# Trailing windows in days served by the report endpoints
WEEK_DAYS = 7
MONTH_DAYS = 30
YEAR_DAYS = 365

# /daily-data reports the most recent records, not a time window
RECENT_RECORDS = 7


def average_steps(records: Iterable[Mapping[str, Any]]) -> float:
    """
    Mean of `daily_steps` over records, missing steps counted as 0.

    An empty input yields 0.0.
    """
    records = list(records)
    if not records:
        return 0.0
    return sum(record["daily_steps"] or 0 for record in records) / len(records)


class ActivityService:
    """Service for activity records."""

    @staticmethod
    async def record_daily_usage(db: AsyncSession, usage: DailyUsageCreate) -> InsertResult:
        """Append a daily usage record stamped with the server time."""
        record_id = uuid4()
        query = daily_targets.insert().values(
            id=record_id,
            clerk_id=usage.clerk_id,
            daily_steps=usage.daily_steps,
            calories=usage.calories,
            distance=usage.distance,
            daily_use=usage.daily_use,
            is_daily_goal_achieved=usage.is_daily_goal_achieved,
            created_at=datetime.now(UTC),
        )

        await db.execute(query)
        await db.commit()
        return InsertResult(inserted_id=record_id)

    @staticmethod
    async def record_current_steps(db: AsyncSession, snapshot: CurrentStepsCreate) -> InsertResult:
        """Append a live step snapshot; `date` defaults to now."""
        record_id = uuid4()
        now = datetime.now(UTC)
        query = current_steps.insert().values(
            id=record_id,
            clerk_id=snapshot.clerk_id,
            steps=snapshot.steps,
            calories=snapshot.calories,
            distance=snapshot.distance,
            date=snapshot.date or now,
            created_at=now,
        )

        await db.execute(query)
        await db.commit()
        return InsertResult(inserted_id=record_id)

    @staticmethod
    async def windowed_report(
        db: AsyncSession,
        clerk_id: str,
        days: int,
        now: datetime | None = None,
    ) -> dict:
        """
        Records from the trailing `days` window and their average steps.

        Args:
            db: Database session
            clerk_id: External user identifier
            days: Window length in days
            now: End of the window, defaults to the current time

        Returns:
            Dict with `data` (newest first) and `average_steps`
        """
        now = now or datetime.now(UTC)
        since = now - timedelta(days=days)

        query = (
            select(daily_targets)
            .where(
                daily_targets.c.clerk_id == clerk_id,
                daily_targets.c.created_at >= since,
                daily_targets.c.created_at <= now,
            )
            .order_by(desc(daily_targets.c.created_at))
        )
        result = await db.execute(query)
        records = [dict(row) for row in result.mappings().all()]

        return {"data": records, "average_steps": average_steps(records)}

    @staticmethod
    async def recent_report(db: AsyncSession, clerk_id: str, limit: int = RECENT_RECORDS) -> dict:
        """The last `limit` records regardless of their age, and their average steps."""
        query = (
            select(daily_targets)
            .where(daily_targets.c.clerk_id == clerk_id)
            .order_by(desc(daily_targets.c.created_at))
            .limit(limit)
        )
        result = await db.execute(query)
        records = [dict(row) for row in result.mappings().all()]

        return {"data": records, "average_steps": average_steps(records)}
