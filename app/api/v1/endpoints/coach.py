"""
Per-user coach endpoints.

Check-ins, exercise sessions and the read models derived from them, all
scoped to one user and one region.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_coach_service, get_region
from app.regions.base import RegionPlugin
from app.schemas.coach import (
    CheckInResponse,
    CoachRequest,
    CoachResponse,
    DosageResponse,
    PruneResponse,
    SessionLogResponse,
)
from app.schemas.history import ExerciseSession, History
from app.schemas.progress import ProgressResponse
from app.schemas.trends import HistoryTrends
from app.services.coach_service import CoachService

router = APIRouter()


@router.post(
    "/coach/preview",
    summary="Compute today's coach state without storing a check-in.",
    response_model=CoachResponse,
)
def preview_coach(
    user_id: str,
    data: CoachRequest,
    region: RegionPlugin = Depends(get_region),
    service: CoachService = Depends(get_coach_service),
):
    return service.preview(region, user_id, data)


@router.post(
    "/check-ins",
    summary="Submit a daily check-in and get today's coach state.",
    response_model=CheckInResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_check_in(
    user_id: str,
    data: CoachRequest,
    region: RegionPlugin = Depends(get_region),
    service: CoachService = Depends(get_coach_service),
):
    return service.check_in(region, user_id, data)


@router.post(
    "/sessions",
    summary="Log a completed exercise session.",
    response_model=SessionLogResponse,
    status_code=status.HTTP_201_CREATED,
)
def log_session(
    user_id: str,
    data: ExerciseSession,
    region: RegionPlugin = Depends(get_region),
    service: CoachService = Depends(get_coach_service),
):
    return service.log_session(region, user_id, data)


@router.get(
    "/history",
    summary="Full check-in, session and milestone history, oldest first.",
    response_model=History,
)
def get_history(
    user_id: str,
    region: RegionPlugin = Depends(get_region),
    service: CoachService = Depends(get_coach_service),
):
    return service.get_history(region, user_id)


@router.get(
    "/trends",
    summary="Session and check-in trends.",
    response_model=HistoryTrends,
)
def get_trends(
    user_id: str,
    as_of: Optional[datetime.date] = Query(None, description="Reference date (defaults to today)"),
    region: RegionPlugin = Depends(get_region),
    service: CoachService = Depends(get_coach_service),
):
    return service.get_trends(region, user_id, as_of)


@router.get(
    "/progress",
    summary="Weekly summary, insights and first-week baseline.",
    response_model=ProgressResponse,
)
def get_progress(
    user_id: str,
    as_of: Optional[datetime.date] = Query(None, description="Reference date (defaults to today)"),
    region: RegionPlugin = Depends(get_region),
    service: CoachService = Depends(get_coach_service),
):
    return service.get_progress(region, user_id, as_of)


@router.get(
    "/dosage/{exercise_id}",
    summary="Adapted dosage for one exercise.",
    response_model=DosageResponse,
)
def get_dosage(
    user_id: str,
    exercise_id: str,
    region: RegionPlugin = Depends(get_region),
    service: CoachService = Depends(get_coach_service),
):
    return service.get_dosage(region, user_id, exercise_id)


@router.delete(
    "/history",
    summary="Delete check-ins and sessions older than a cutoff (milestones and baseline are kept).",
    response_model=PruneResponse,
)
def prune_history(
    user_id: str,
    before: Optional[datetime.date] = Query(
        None, description="Cutoff date (defaults to the configured retention window)",
    ),
    region: RegionPlugin = Depends(get_region),
    service: CoachService = Depends(get_coach_service),
):
    return service.prune(region, user_id, before)
