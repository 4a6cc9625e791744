"""User profile service for business logic."""

from datetime import UTC, datetime
from typing import Annotated, Any
from uuid import uuid4

import structlog
from pydantic import EmailStr, Field, PositiveFloat, PositiveInt, StrictBool, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fitness_server.config import settings
from fitness_server.core.bmi import HeightUnit, calculate_bmi
from fitness_server.core.exceptions import (
    ConflictException,
    NotFoundException,
    ValidationException,
)
from fitness_server.models.users import users
from fitness_server.schemas.common import InsertResult, UpdateResult
from fitness_server.schemas.users import UserCreate, VitalsUpdate

logger = structlog.get_logger(__name__)

NonEmptyStr = Annotated[str, Field(min_length=1)]

# Wire name -> (column, value type) for every field a single-field update can touch.
# The configured allow-list selects from these; identity and audit columns are never here.
UPDATABLE_FIELDS: dict[str, tuple[str, TypeAdapter]] = {
    "name": ("name", TypeAdapter(NonEmptyStr)),
    "email": ("email", TypeAdapter(EmailStr)),
    "gender": ("gender", TypeAdapter(NonEmptyStr)),
    "weight": ("weight", TypeAdapter(PositiveFloat)),
    "height": ("height", TypeAdapter(PositiveFloat)),
    "age": ("age", TypeAdapter(PositiveInt)),
    "goal": ("goal", TypeAdapter(NonEmptyStr)),
    "exerciseType": ("exercise_type", TypeAdapter(NonEmptyStr)),
    "bmi": ("bmi", TypeAdapter(PositiveFloat)),
    "targetSteps": ("target_steps", TypeAdapter(PositiveInt)),
    "termsAccepted": ("terms_accepted", TypeAdapter(StrictBool)),
}


def allowed_update_fields(configured: frozenset[str] | None = None) -> frozenset[str]:
    """Configured allow-list, restricted to fields that map onto a profile column."""
    configured = settings.profile_update_fields if configured is None else configured
    return frozenset(configured) & UPDATABLE_FIELDS.keys()


class UserService:
    """Service for user profile operations."""

    @staticmethod
    async def _upsert(db: AsyncSession, clerk_id: str, values: dict[str, Any]) -> UpdateResult:
        """Update the profile for `clerk_id`, creating it when absent."""
        now = datetime.now(UTC)
        query = (
            update(users).where(users.c.clerk_id == clerk_id).values(**values, updated_at=now)
        )

        result = await db.execute(query)
        if result.rowcount:  # type: ignore[attr-defined]
            await db.commit()
            return UpdateResult(matched_count=result.rowcount)  # type: ignore[attr-defined]

        user_id = uuid4()
        try:
            await db.execute(
                users.insert().values(
                    id=user_id,
                    clerk_id=clerk_id,
                    created_at=now,
                    updated_at=now,
                    **values,
                )
            )
            await db.commit()
        except IntegrityError:
            # Another request created the profile between our update and insert
            await db.rollback()
            result = await db.execute(query)
            await db.commit()
            return UpdateResult(matched_count=result.rowcount)  # type: ignore[attr-defined]

        logger.info("user_profile_upserted", clerk_id=clerk_id)
        return UpdateResult(matched_count=0, upserted_id=user_id)

    @staticmethod
    async def create_user(db: AsyncSession, user_data: UserCreate) -> InsertResult:
        """Register a new user profile."""
        user_id = uuid4()
        now = datetime.now(UTC)
        query = users.insert().values(
            id=user_id,
            clerk_id=user_data.clerk_id,
            name=user_data.name,
            email=user_data.email,
            created_at=now,
            updated_at=now,
        )

        try:
            await db.execute(query)
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise ConflictException("User already exists")

        logger.info("user_created", clerk_id=user_data.clerk_id)
        return InsertResult(inserted_id=user_id)

    @staticmethod
    async def get_user_by_clerk_id(db: AsyncSession, clerk_id: str) -> dict | None:
        """Get user by external identifier."""
        query = select(users).where(users.c.clerk_id == clerk_id)
        result = await db.execute(query)
        user = result.mappings().first()
        return dict(user) if user else None

    @staticmethod
    async def get_user_details(db: AsyncSession, clerk_id: str) -> dict:
        """Get a full profile or raise NotFoundException."""
        user = await UserService.get_user_by_clerk_id(db, clerk_id)
        if not user:
            raise NotFoundException("User not found")
        return user

    @staticmethod
    async def upsert_vitals(
        db: AsyncSession,
        vitals: VitalsUpdate,
        height_unit: HeightUnit | None = None,
    ) -> UpdateResult:
        """Store age, weight, height and BMI, computing BMI when not supplied."""
        bmi = vitals.bmi
        if bmi is None:
            bmi = calculate_bmi(vitals.weight, vitals.height, height_unit or settings.bmi_height_unit)

        values: dict[str, Any] = {
            "age": vitals.age,
            "weight": vitals.weight,
            "height": vitals.height,
            "bmi": bmi,
        }
        if vitals.terms_accepted is not None:
            values["terms_accepted"] = vitals.terms_accepted

        return await UserService._upsert(db, vitals.clerk_id, values)

    @staticmethod
    async def update_field(
        db: AsyncSession,
        clerk_id: str,
        field: str,
        value: Any,
        bmi: float | None = None,
        allowed: frozenset[str] | None = None,
    ) -> UpdateResult:
        """
        Update one allow-listed profile field.

        Args:
            db: Database session
            clerk_id: External user identifier
            field: Wire name of the field, checked against the allow-list
            value: New value, validated against the field's type
            bmi: Optional BMI written alongside (weight/height edits)
            allowed: Allow-list override, defaults to settings

        Returns:
            Update result

        Raises:
            ValidationException: If the field is not allowed or the value is invalid
            NotFoundException: If the profile does not exist
        """
        if field not in allowed_update_fields(allowed):
            raise ValidationException(f"Invalid field: {field}")

        column, adapter = UPDATABLE_FIELDS[field]
        try:
            coerced = adapter.validate_python(value)
        except PydanticValidationError:
            raise ValidationException(f"Invalid value for field: {field}")

        values: dict[str, Any] = {column: coerced, "updated_at": datetime.now(UTC)}
        if bmi is not None:
            values["bmi"] = bmi

        query = update(users).where(users.c.clerk_id == clerk_id).values(**values)
        result = await db.execute(query)
        await db.commit()

        if not result.rowcount:  # type: ignore[attr-defined]
            raise NotFoundException("User not found")

        return UpdateResult(matched_count=result.rowcount)  # type: ignore[attr-defined]

    @staticmethod
    async def set_target_steps(db: AsyncSession, clerk_id: str, target_steps: int) -> UpdateResult:
        """Set the daily step target."""
        return await UserService._upsert(db, clerk_id, {"target_steps": target_steps})

    @staticmethod
    async def get_target_steps(db: AsyncSession, clerk_id: str) -> int:
        """Get the daily step target."""
        query = select(users.c.target_steps).where(users.c.clerk_id == clerk_id)
        result = await db.execute(query)
        target_steps = result.scalar_one_or_none()

        if target_steps is None:
            raise NotFoundException("Target steps not found")

        return target_steps

    @staticmethod
    async def update_goal(db: AsyncSession, clerk_id: str, goal: str) -> UpdateResult:
        """Set the fitness goal."""
        return await UserService._upsert(db, clerk_id, {"goal": goal})

    @staticmethod
    async def update_gender(
        db: AsyncSession,
        clerk_id: str,
        gender: str,
        name: str | None = None,
        email: str | None = None,
    ) -> UpdateResult:
        """Set gender, optionally filling name and email for a new profile."""
        values: dict[str, Any] = {"gender": gender}
        if name is not None:
            values["name"] = name
        if email is not None:
            values["email"] = email
        return await UserService._upsert(db, clerk_id, values)

    @staticmethod
    async def update_exercise_type(
        db: AsyncSession, clerk_id: str, exercise_type: str
    ) -> UpdateResult:
        """Set the preferred exercise type."""
        return await UserService._upsert(db, clerk_id, {"exercise_type": exercise_type})

    @staticmethod
    async def fetch_goal(db: AsyncSession, clerk_id: str) -> dict:
        """Get the goal-related fields of a profile."""
        query = select(
            users.c.clerk_id,
            users.c.goal,
            users.c.target_steps,
            users.c.exercise_type,
        ).where(users.c.clerk_id == clerk_id)
        result = await db.execute(query)
        row = result.mappings().first()

        if not row:
            raise NotFoundException("User not found")

        return dict(row)
