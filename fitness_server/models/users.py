"""User profile model definition using SQLAlchemy Core."""

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

users = Table(
    "users",
    metadata,
    Column("id", Uuid, primary_key=True),
    # External identity provider subject (join key across collections)
    Column("clerk_id", Text, nullable=False, unique=True, index=True),
    Column("name", Text),
    Column("email", Text, index=True),
    # Vitals
    Column("age", Integer),
    Column("weight", Float),
    Column("height", Float),
    Column("bmi", Float),
    # Preferences
    Column("gender", Text),
    Column("goal", Text),
    Column("exercise_type", Text),
    Column("target_steps", Integer),
    Column("terms_accepted", Boolean),
    # Audit
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=text("CURRENT_TIMESTAMP")),
    Column("updated_at", DateTime(timezone=True)),
)
