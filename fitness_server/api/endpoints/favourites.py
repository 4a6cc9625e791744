"""Favourite endpoints."""

from fastapi import APIRouter, Query, status

from fitness_server.dependencies import DatabaseSession
from fitness_server.schemas.common import DataResponse, DeleteResult, InsertResult
from fitness_server.schemas.favourites import (
    FavouriteIdResponse,
    FavouriteRequest,
    FavouriteResponse,
)
from fitness_server.schemas.users import ClerkIdRequest
from fitness_server.services.favourite_service import FavouriteService

router = APIRouter(tags=["Favourites"])


@router.post(
    "/favourites",
    response_model=DataResponse[InsertResult],
    status_code=status.HTTP_201_CREATED,
)
async def add_favourite(favourite: FavouriteRequest, db: DatabaseSession):
    """Favourite a recommendation."""
    result = await FavouriteService.add_favourite(
        db, favourite.clerk_id, favourite.recommendation_id
    )
    return DataResponse(data=result)


@router.delete("/favourites", response_model=DataResponse[DeleteResult])
async def remove_favourite(favourite: FavouriteRequest, db: DatabaseSession):
    """Remove one matching favourite; succeeds even when nothing matches."""
    result = await FavouriteService.remove_favourite(
        db, favourite.clerk_id, favourite.recommendation_id
    )
    return DataResponse(data=result)


@router.get("/favourites", response_model=list[FavouriteResponse])
async def list_favourites(
    db: DatabaseSession,
    clerk_id: str = Query(..., alias="clerkId", min_length=1),
):
    """All favourites of a user."""
    return await FavouriteService.list_favourites(db, clerk_id)


@router.post("/favourite-ids", response_model=DataResponse[list[FavouriteIdResponse]])
async def list_favourite_ids(request: ClerkIdRequest, db: DatabaseSession):
    """Recommendation ids a user has favourited."""
    rows = await FavouriteService.list_favourite_ids(db, request.clerk_id)
    return DataResponse(data=rows)
