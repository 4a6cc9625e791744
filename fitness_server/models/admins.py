"""Admin credential model definition using SQLAlchemy Core."""

from sqlalchemy import (
    Column,
    DateTime,
    MetaData,
    String,
    Table,
    Text,
    Uuid,
    text,
)

metadata = MetaData()

admins = Table(
    "admins",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("name", Text),
    Column("email", Text, nullable=False, unique=True, index=True),
    # bcrypt hash, never the plaintext
    Column("password_hash", Text, nullable=False),
    Column("role", String(50), nullable=False, server_default=text("'admin'")),
    Column("phone", String(20)),
    Column("avatar", Text),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=text("CURRENT_TIMESTAMP")),
    Column("updated_at", DateTime(timezone=True)),
)
