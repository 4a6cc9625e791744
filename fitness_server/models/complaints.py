"""Support ticket model definition using SQLAlchemy Core."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    MetaData,
    Table,
    Text,
    Uuid,
    text,
)

metadata = MetaData()

complaints = Table(
    "complaints",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("clerk_id", Text, nullable=False, index=True),
    Column("room_id", Text, nullable=False, index=True),
    Column("status", Text, nullable=False, server_default=text("'open'")),
    Column("message", Text),
    Column("is_accept", Boolean, nullable=False, server_default=text("false")),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=text("CURRENT_TIMESTAMP")),
    Column("updated_at", DateTime(timezone=True)),
)
