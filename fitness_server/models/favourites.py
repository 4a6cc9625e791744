"""Favourite model definition using SQLAlchemy Core."""

from sqlalchemy import Column, DateTime, MetaData, Table, Text, Uuid, text

metadata = MetaData()

# No uniqueness on (clerk_id, favourite_id): duplicates are kept
favourites = Table(
    "favourites",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("clerk_id", Text, nullable=False, index=True),
    Column("favourite_id", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=text("CURRENT_TIMESTAMP")),
)
