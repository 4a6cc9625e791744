"""Activity record models using SQLAlchemy Core."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Float,
    Integer,
    MetaData,
    Table,
    Text,
    Uuid,
    text,
)

metadata = MetaData()

# Append-only daily usage reports
daily_targets = Table(
    "daily_targets",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("clerk_id", Text, nullable=False, index=True),
    Column("daily_steps", Integer),
    Column("calories", Float),
    Column("distance", Float),
    Column("daily_use", Float),
    Column("is_daily_goal_achieved", Boolean),
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
        index=True,
    ),
)

# Append-only live step snapshots
current_steps = Table(
    "current_steps",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("clerk_id", Text, nullable=False, index=True),
    Column("steps", Integer, nullable=False),
    Column("calories", Float, nullable=False),
    Column("distance", Float),
    Column("date", DateTime(timezone=True), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=text("CURRENT_TIMESTAMP")),
)
