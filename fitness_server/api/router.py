"""API router configuration."""

from fastapi import APIRouter

from fitness_server.api.endpoints import (
    activity,
    admin,
    complaints,
    exercises,
    favourites,
    health,
    mail,
    ratings,
    users,
)

api_router = APIRouter()

# Include routers
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(users.router)
api_router.include_router(activity.router)
api_router.include_router(favourites.router)
api_router.include_router(exercises.router)
api_router.include_router(complaints.router)
api_router.include_router(ratings.router)
api_router.include_router(admin.router)
api_router.include_router(mail.router)
