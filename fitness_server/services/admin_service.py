"""Admin service: credentials and dashboard queries."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

import structlog
from sqlalchemy import delete, desc, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from fitness_server.core.exceptions import (
    ConflictException,
    NotFoundException,
    UnauthorizedException,
    ValidationException,
)
from fitness_server.core.security import get_password_hash, verify_password
from fitness_server.models.activity import daily_targets
from fitness_server.models.admins import admins
from fitness_server.models.complaints import complaints
from fitness_server.models.exercises import exercises
from fitness_server.models.favourites import favourites
from fitness_server.models.ratings import ratings
from fitness_server.models.users import users
from fitness_server.schemas.admin import AdminCreate
from fitness_server.schemas.common import DeleteResult, InsertResult, UpdateResult

logger = structlog.get_logger(__name__)

# Every column except the hash
PUBLIC_ADMIN_COLUMNS = [column for column in admins.c if column.name != "password_hash"]


class AdminService:
    """Service for admin accounts and dashboard data."""

    @staticmethod
    async def create_admin(db: AsyncSession, admin_data: AdminCreate) -> InsertResult:
        """Create an admin with a bcrypt-hashed password."""
        admin_id = uuid4()
        now = datetime.now(UTC)
        query = admins.insert().values(
            id=admin_id,
            name=admin_data.name,
            email=admin_data.email,
            password_hash=get_password_hash(admin_data.password),
            role=admin_data.role,
            phone=admin_data.phone,
            avatar=admin_data.avatar,
            created_at=now,
            updated_at=now,
        )

        try:
            await db.execute(query)
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise ConflictException("Admin already exists")

        logger.info("admin_created", email=admin_data.email, role=admin_data.role)
        return InsertResult(inserted_id=admin_id)

    @staticmethod
    async def _get_admin_by_email(db: AsyncSession, email: str) -> dict:
        query = select(admins).where(admins.c.email == email)
        result = await db.execute(query)
        admin = result.mappings().first()

        if not admin:
            raise NotFoundException("Admin not found")

        return dict(admin)

    @staticmethod
    async def validate_login(db: AsyncSession, email: str, password: str) -> dict:
        """
        Check admin credentials.

        No session or token results from a successful check.

        Returns:
            Admin profile without the password hash

        Raises:
            NotFoundException: If no admin has this email
            UnauthorizedException: If the password does not match
        """
        admin = await AdminService._get_admin_by_email(db, email)

        if not verify_password(password, admin["password_hash"]):
            logger.warning("admin_login_rejected", email=email)
            raise UnauthorizedException("Invalid credentials")

        admin.pop("password_hash")
        return admin

    @staticmethod
    async def reset_password(
        db: AsyncSession, email: str, old_password: str, new_password: str
    ) -> UpdateResult:
        """Replace the password after verifying the current one."""
        if old_password == new_password:
            raise ValidationException("New password must differ from the old password")

        admin = await AdminService._get_admin_by_email(db, email)

        if not verify_password(old_password, admin["password_hash"]):
            logger.warning("admin_password_reset_rejected", email=email)
            raise UnauthorizedException("Invalid credentials")

        query = (
            update(admins)
            .where(admins.c.id == admin["id"])
            .values(password_hash=get_password_hash(new_password), updated_at=datetime.now(UTC))
        )
        result = await db.execute(query)
        await db.commit()

        logger.info("admin_password_reset", email=email)
        return UpdateResult(matched_count=result.rowcount)  # type: ignore[attr-defined]

    @staticmethod
    async def list_admins(db: AsyncSession) -> list[dict]:
        """All admins without password hashes."""
        query = select(*PUBLIC_ADMIN_COLUMNS).order_by(desc(admins.c.created_at))
        result = await db.execute(query)
        return [dict(row) for row in result.mappings().all()]

    @staticmethod
    async def count_admins(db: AsyncSession) -> int:
        """Number of admin accounts."""
        result = await db.execute(select(func.count()).select_from(admins))
        return result.scalar_one()

    @staticmethod
    async def list_users(db: AsyncSession) -> list[dict]:
        """All user profiles, newest first."""
        query = select(users).order_by(desc(users.c.created_at))
        result = await db.execute(query)
        return [dict(row) for row in result.mappings().all()]

    @staticmethod
    async def delete_user(db: AsyncSession, user_id: UUID) -> DeleteResult:
        """Hard-delete a profile by internal id. Activity rows are kept."""
        query = delete(users).where(users.c.id == user_id)
        result = await db.execute(query)
        await db.commit()

        if result.rowcount:  # type: ignore[attr-defined]
            logger.info("user_deleted", user_id=str(user_id))

        return DeleteResult(deleted_count=result.rowcount)  # type: ignore[attr-defined]

    @staticmethod
    async def analytics(db: AsyncSession) -> dict:
        """Dashboard totals across collections."""

        async def count(table, *criteria) -> int:
            query = select(func.count()).select_from(table)
            if criteria:
                query = query.where(*criteria)
            result = await db.execute(query)
            return result.scalar_one()

        activity_result = await db.execute(
            select(func.count(), func.avg(func.coalesce(daily_targets.c.daily_steps, 0)))
        )
        activity_records, avg_steps = activity_result.one()

        rating_result = await db.execute(select(func.count(), func.avg(ratings.c.stars)))
        rating_total, avg_stars = rating_result.one()

        complaint_total = await count(complaints)
        complaints_accepted = await count(complaints, complaints.c.is_accept.is_(True))

        return {
            "users": {"total": await count(users)},
            "activity": {
                "records": activity_records,
                "averageSteps": float(avg_steps or 0),
            },
            "favourites": {"total": await count(favourites)},
            "exercises": {"total": await count(exercises)},
            "complaints": {
                "total": complaint_total,
                "accepted": complaints_accepted,
                "pending": complaint_total - complaints_accepted,
            },
            "ratings": {
                "total": rating_total,
                "averageStars": float(avg_stars or 0),
            },
            "admins": {"total": await AdminService.count_admins(db)},
        }
