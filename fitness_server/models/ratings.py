"""App rating model definition using SQLAlchemy Core."""

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    Uuid,
    text,
)

metadata = MetaData()

ratings = Table(
    "ratings",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("clerk_id", Text, nullable=False, index=True),
    Column("stars", Integer, nullable=False),
    Column("review", Text),
    # In-app review prompt state
    Column("review_status", String(20), nullable=False, server_default=text("'later'")),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=text("CURRENT_TIMESTAMP")),
)
