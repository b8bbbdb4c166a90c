"""
Region catalog and live-session endpoints.

Nothing here reads or writes history.
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_coach_service, get_region
from app.regions.base import RegionPlugin
from app.regions.registry import RegionRegistry
from app.schemas.coach import CoachState, SessionAdjustRequest
from app.schemas.region import RegionDetail, RegionSummary
from app.services.coach_service import CoachService

router = APIRouter()


@router.get(
    "",
    summary="List all available body regions.",
    response_model=list[RegionSummary],
)
def list_regions():
    return RegionRegistry.summaries()


@router.get(
    "/{region_id}",
    summary="Sensations, movement restrictions, drills and default plans for a region.",
    response_model=RegionDetail,
)
def get_region_detail(region: RegionPlugin = Depends(get_region)):
    return region.detail()


@router.post(
    "/{region_id}/session/adjust",
    summary="Apply one drill's feedback to a live session.",
    response_model=CoachState,
)
def adjust_session(
    data: SessionAdjustRequest,
    region: RegionPlugin = Depends(get_region),
    service: CoachService = Depends(get_coach_service),
):
    """Returns the updated session state.  The mode can only go down."""
    return service.adjust_session(region, data)
