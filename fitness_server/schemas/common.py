"""Shared schema building blocks."""

from typing import Annotated, Generic, TypeVar
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# External subject identifier issued by the identity provider
ClerkId = Annotated[str, Field(min_length=1, description="External user identifier")]


class CamelModel(BaseModel):
    """Base model speaking camelCase on the wire and snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class InsertResult(CamelModel):
    """Outcome of a single-document insert."""

    acknowledged: bool = True
    inserted_id: UUID


class UpdateResult(CamelModel):
    """Outcome of an update or upsert."""

    acknowledged: bool = True
    matched_count: int
    upserted_id: UUID | None = None


class DeleteResult(CamelModel):
    """Outcome of a delete."""

    acknowledged: bool = True
    deleted_count: int


class DataResponse(CamelModel, Generic[T]):
    """Envelope used by every route: optional message plus payload."""

    message: str | None = None
    data: T


class CountResponse(CamelModel):
    """Bare total."""

    total: int


class MessageResponse(CamelModel):
    """Bare confirmation message."""

    message: str
