"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import coach, regions

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    regions.router, prefix="/regions", tags=["Regions"]
)
api_router.include_router(
    coach.router,
    prefix="/users/{user_id}/regions/{region_id}",
    tags=["Coach"],
)
