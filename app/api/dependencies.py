"""
Shared API dependencies.

Reusable FastAPI dependencies for region lookup and the coach service.
"""

from fastapi import Depends, HTTPException, status
from sqlmodel import Session

# Ensure plugins are registered before the registry is used.
import app.regions  # noqa: F401
from app.db.session import get_db
from app.regions.base import RegionPlugin
from app.regions.registry import RegionRegistry
from app.services.coach_service import CoachService


def get_region(region_id: str) -> RegionPlugin:
    """Resolve the ``region_id`` path parameter to its plugin."""
    plugin = RegionRegistry.get(region_id)
    if not plugin:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown region: '{region_id}'. Available: {RegionRegistry.ids()}",
        )
    return plugin


def get_coach_service(db: Session = Depends(get_db)) -> CoachService:
    return CoachService(db)
