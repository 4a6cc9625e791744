"""Exercise catalog model definition using SQLAlchemy Core."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Integer,
    MetaData,
    Table,
    Text,
    Uuid,
    text,
)

metadata = MetaData()

exercises = Table(
    "exercises",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("exercise_id", Integer, nullable=False, index=True),
    Column("title", Text, nullable=False, index=True),
    Column("image", Text),
    Column("is_video", Boolean, nullable=False, server_default=text("false")),
    Column("description", Text),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=text("CURRENT_TIMESTAMP")),
    Column("updated_at", DateTime(timezone=True)),
)
