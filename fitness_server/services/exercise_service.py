"""Exercise catalog service."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy import asc, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from fitness_server.core.exceptions import NotFoundException
from fitness_server.models.exercises import exercises
from fitness_server.schemas.common import DeleteResult, InsertResult, UpdateResult
from fitness_server.schemas.exercises import ExerciseCreate, ExerciseUpdate


def unique_by_title(rows: list[dict]) -> list[dict]:
    """Keep the first row seen for each distinct title."""
    seen: set[str] = set()
    unique = []
    for row in rows:
        if row["title"] in seen:
            continue
        seen.add(row["title"])
        unique.append(row)
    return unique


class ExerciseService:
    """Service for the admin-managed exercise catalog."""

    @staticmethod
    async def list_exercises(db: AsyncSession) -> list[dict]:
        """All entries, oldest first."""
        query = select(exercises).order_by(asc(exercises.c.created_at))
        result = await db.execute(query)
        return [dict(row) for row in result.mappings().all()]

    @staticmethod
    async def list_unique_exercises(db: AsyncSession) -> list[dict]:
        """One entry per title, the earliest created one."""
        return unique_by_title(await ExerciseService.list_exercises(db))

    @staticmethod
    async def get_exercise(db: AsyncSession, exercise_id: UUID) -> dict:
        """Get an entry by internal id."""
        query = select(exercises).where(exercises.c.id == exercise_id)
        result = await db.execute(query)
        exercise = result.mappings().first()

        if not exercise:
            raise NotFoundException("Exercise not found")

        return dict(exercise)

    @staticmethod
    async def add_exercise(db: AsyncSession, exercise_data: ExerciseCreate) -> InsertResult:
        """Add a catalog entry."""
        exercise_id = uuid4()
        now = datetime.now(UTC)
        query = exercises.insert().values(
            id=exercise_id,
            exercise_id=exercise_data.exercise_id,
            title=exercise_data.title,
            image=exercise_data.image,
            is_video=exercise_data.is_video,
            description=exercise_data.description,
            created_at=now,
            updated_at=now,
        )

        await db.execute(query)
        await db.commit()
        return InsertResult(inserted_id=exercise_id)

    @staticmethod
    async def update_exercise(
        db: AsyncSession, exercise_id: UUID, exercise_data: ExerciseUpdate
    ) -> UpdateResult:
        """Apply the supplied fields to an entry."""
        update_data = {
            field: value
            for field, value in exercise_data.model_dump(exclude_unset=True).items()
            # null clears nullable columns and leaves required ones unchanged
            if value is not None or exercises.c[field].nullable
        }
        if not update_data:
            await ExerciseService.get_exercise(db, exercise_id)
            return UpdateResult(matched_count=1)

        update_data["updated_at"] = datetime.now(UTC)
        query = update(exercises).where(exercises.c.id == exercise_id).values(**update_data)
        result = await db.execute(query)
        await db.commit()

        if not result.rowcount:  # type: ignore[attr-defined]
            raise NotFoundException("Exercise not found")

        return UpdateResult(matched_count=result.rowcount)  # type: ignore[attr-defined]

    @staticmethod
    async def delete_exercise(db: AsyncSession, exercise_id: UUID) -> DeleteResult:
        """Delete an entry by internal id."""
        query = delete(exercises).where(exercises.c.id == exercise_id)
        result = await db.execute(query)
        await db.commit()
        return DeleteResult(deleted_count=result.rowcount)  # type: ignore[attr-defined]
