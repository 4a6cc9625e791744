"""Create fitness tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(updated: bool = True) -> list[sa.Column]:
    columns = [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        )
    ]
    if updated:
        columns.append(sa.Column("updated_at", sa.TIMESTAMP(timezone=True), nullable=True))
    return columns


def upgrade() -> None:
    """Create all collections."""
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("clerk_id", sa.Text(), nullable=False),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column("email", sa.Text(), nullable=True),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("weight", sa.Float(), nullable=True),
        sa.Column("height", sa.Float(), nullable=True),
        sa.Column("bmi", sa.Float(), nullable=True),
        sa.Column("gender", sa.Text(), nullable=True),
        sa.Column("goal", sa.Text(), nullable=True),
        sa.Column("exercise_type", sa.Text(), nullable=True),
        sa.Column("target_steps", sa.Integer(), nullable=True),
        sa.Column("terms_accepted", sa.Boolean(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_users_clerk_id", "users", ["clerk_id"], unique=True)
    op.create_index("ix_users_email", "users", ["email"], unique=False)

    op.create_table(
        "daily_targets",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("clerk_id", sa.Text(), nullable=False),
        sa.Column("daily_steps", sa.Integer(), nullable=True),
        sa.Column("calories", sa.Float(), nullable=True),
        sa.Column("distance", sa.Float(), nullable=True),
        sa.Column("daily_use", sa.Float(), nullable=True),
        sa.Column("is_daily_goal_achieved", sa.Boolean(), nullable=True),
        *_timestamps(updated=False),
    )
    op.create_index("ix_daily_targets_clerk_id", "daily_targets", ["clerk_id"])
    op.create_index("ix_daily_targets_created_at", "daily_targets", ["created_at"])

    op.create_table(
        "current_steps",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("clerk_id", sa.Text(), nullable=False),
        sa.Column("steps", sa.Integer(), nullable=False),
        sa.Column("calories", sa.Float(), nullable=False),
        sa.Column("distance", sa.Float(), nullable=True),
        sa.Column("date", sa.TIMESTAMP(timezone=True), nullable=False),
        *_timestamps(updated=False),
    )
    op.create_index("ix_current_steps_clerk_id", "current_steps", ["clerk_id"])

    op.create_table(
        "favourites",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("clerk_id", sa.Text(), nullable=False),
        sa.Column("favourite_id", sa.Text(), nullable=False),
        *_timestamps(updated=False),
    )
    op.create_index("ix_favourites_clerk_id", "favourites", ["clerk_id"])

    op.create_table(
        "exercises",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("exercise_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column("is_video", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        sa.Column("description", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_exercises_exercise_id", "exercises", ["exercise_id"])
    op.create_index("ix_exercises_title", "exercises", ["title"])

    op.create_table(
        "complaints",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("clerk_id", sa.Text(), nullable=False),
        sa.Column("room_id", sa.Text(), nullable=False),
        sa.Column("status", sa.Text(), nullable=False, server_default=sa.text("'open'")),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("is_accept", sa.Boolean(), nullable=False, server_default=sa.text("false")),
        *_timestamps(),
    )
    op.create_index("ix_complaints_clerk_id", "complaints", ["clerk_id"])
    op.create_index("ix_complaints_room_id", "complaints", ["room_id"])

    op.create_table(
        "admins",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("role", sa.String(50), nullable=False, server_default=sa.text("'admin'")),
        sa.Column("phone", sa.String(20), nullable=True),
        sa.Column("avatar", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_admins_email", "admins", ["email"], unique=True)

    op.create_table(
        "ratings",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("clerk_id", sa.Text(), nullable=False),
        sa.Column("stars", sa.Integer(), nullable=False),
        sa.Column("review", sa.Text(), nullable=True),
        sa.Column(
            "review_status", sa.String(20), nullable=False, server_default=sa.text("'later'")
        ),
        *_timestamps(updated=False),
    )
    op.create_index("ix_ratings_clerk_id", "ratings", ["clerk_id"])


def downgrade() -> None:
    """Drop all collections."""
    for table in (
        "ratings",
        "admins",
        "complaints",
        "exercises",
        "favourites",
        "current_steps",
        "daily_targets",
        "users",
    ):
        op.drop_table(table)
