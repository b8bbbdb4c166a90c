"""
Coach service.

Glue between the pure coach engine and the history store: reads a
user's history for a region, runs the engine, and appends what the user
did.  The engine itself never touches the database.

First use
---------
A user with no check-ins and no sessions has no history: the engine is
called with ``history=None`` so that no trend rule applies.  As soon as
one record exists the full history is passed, even when its trends are
still neutral.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.coach.alerts import trend_alerts
from app.coach.milestones import detect_new_milestones, establish_baseline
from app.coach.plan import init_coach_state
from app.coach.progress import progress_insights, weekly_summary
from app.coach.session import adjust_plan_in_session
from app.coach.thresholds import CoachThresholds, configured_thresholds
from app.coach.trends import analyze_history
from app.core.config import settings
from app.db.repositories.history import HistoryRepository
from app.regions.base import RegionPlugin
from app.schemas.coach import (
    CheckInResponse,
    CoachRequest,
    CoachResponse,
    CoachState,
    DosageResponse,
    PruneResponse,
    SessionAdjustRequest,
    SessionLogResponse,
)
from app.schemas.history import CheckIn, ExerciseSession, History, Milestone
from app.schemas.progress import ProgressResponse
from app.schemas.trends import HistoryTrends

logger = logging.getLogger(__name__)


def _has_records(history: History) -> bool:
    return bool(history.check_ins or history.sessions)


class CoachService:
    """Service for check-ins, sessions and coach decisions."""

    def __init__(self, session: Session, thresholds: Optional[CoachThresholds] = None):
        self.history_repo = HistoryRepository(session)
        self.thresholds = thresholds or configured_thresholds()

    # ------------------------------------------------------------------
    # Coach decisions
    # ------------------------------------------------------------------

    def _decide(
        self, region: RegionPlugin, user_id: str, request: CoachRequest, as_of: datetime.date,
    ) -> CoachResponse:
        history = self.history_repo.read_history(user_id, region.region_id)
        engine_history = history if _has_records(history) else None

        state = init_coach_state(
            region,
            request.readiness,
            history=engine_history,
            calibration=request.calibration,
            as_of=as_of,
            thresholds=self.thresholds,
        )
        trends = None
        alerts = []
        if engine_history is not None:
            trends = analyze_history(engine_history, as_of, self.thresholds)
            alerts = trend_alerts(trends.check_ins)
        return CoachResponse(coach=state, trends=trends, alerts=alerts)

    def preview(self, region: RegionPlugin, user_id: str, request: CoachRequest) -> CoachResponse:
        """Coach state for a readiness report, without storing anything."""
        return self._decide(region, user_id, request, request.date or datetime.date.today())

    def check_in(self, region: RegionPlugin, user_id: str, request: CoachRequest) -> CheckInResponse:
        """Decide today's mode, then append the check-in and any milestones."""
        as_of = request.date or datetime.date.today()
        decision = self._decide(region, user_id, request, as_of)

        readiness = request.readiness
        check_in = self.history_repo.append_check_in(user_id, region.region_id, CheckIn(
            date=as_of,
            pain_level=readiness.resting_discomfort,
            function_level=readiness.confidence,
            confidence_level=readiness.confidence,
            sensations=readiness.sensations,
            mode_assigned=decision.coach.mode,
            notes=readiness.notes,
        ))
        milestones = self._award_milestones(region, user_id, as_of)
        logger.info(
            "Check-in user=%s region=%s mode=%s",
            user_id, region.region_id, decision.coach.mode.value,
        )
        return CheckInResponse(
            coach=decision.coach,
            trends=decision.trends,
            alerts=decision.alerts,
            check_in=check_in,
            new_milestones=milestones,
        )

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def log_session(
        self, region: RegionPlugin, user_id: str, exercise_session: ExerciseSession,
    ) -> SessionLogResponse:
        unknown = sorted({
            e.exercise_id for e in exercise_session.exercises
            if region.get_drill(e.exercise_id) is None
        })
        if unknown:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unknown exercises for region '{region.region_id}': {unknown}",
            )
        stored = self.history_repo.append_session(user_id, region.region_id, exercise_session)
        milestones = self._award_milestones(region, user_id, exercise_session.date)
        return SessionLogResponse(session=stored, new_milestones=milestones)

    def adjust_session(self, region: RegionPlugin, request: SessionAdjustRequest) -> CoachState:
        """Apply one drill's feedback to a live session state."""
        return adjust_plan_in_session(region, request.state, request.feedback, self.thresholds)

    # ------------------------------------------------------------------
    # Read models
    # ------------------------------------------------------------------

    def get_history(self, region: RegionPlugin, user_id: str) -> History:
        return self.history_repo.read_history(user_id, region.region_id)

    def get_trends(
        self, region: RegionPlugin, user_id: str, as_of: Optional[datetime.date] = None,
    ) -> HistoryTrends:
        history = self.history_repo.read_history(user_id, region.region_id)
        return analyze_history(history, as_of or datetime.date.today(), self.thresholds)

    def get_progress(
        self, region: RegionPlugin, user_id: str, as_of: Optional[datetime.date] = None,
    ) -> ProgressResponse:
        """Weekly summary and insights for the week containing *as_of*."""
        as_of = as_of or datetime.date.today()
        history = self.history_repo.read_history(user_id, region.region_id)
        return ProgressResponse(
            weekly_summary=weekly_summary(history, as_of, self.thresholds),
            insights=progress_insights(history, as_of),
            baseline=establish_baseline(history, as_of),
        )

    def get_dosage(self, region: RegionPlugin, user_id: str, exercise_id: str) -> DosageResponse:
        if region.get_drill(exercise_id) is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Exercise '{exercise_id}' not found for region '{region.region_id}'",
            )
        sessions = self.history_repo.list_sessions(user_id, region.region_id)
        return region.dosage_for(exercise_id, sessions, self.thresholds)

    # ------------------------------------------------------------------
    # Retention
    # ------------------------------------------------------------------

    def prune(
        self, region: RegionPlugin, user_id: str, before: Optional[datetime.date] = None,
    ) -> PruneResponse:
        """Delete check-ins and sessions older than *before*.

        Defaults to ``HISTORY_RETENTION_DAYS`` before today.  Milestones
        and the first-week baseline are kept.
        """
        cutoff = before or (
            datetime.date.today() - datetime.timedelta(days=settings.HISTORY_RETENTION_DAYS)
        )
        check_ins, sessions = self.history_repo.prune_before(user_id, region.region_id, cutoff)
        return PruneResponse(cutoff=cutoff, check_ins_deleted=check_ins, sessions_deleted=sessions)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _award_milestones(
        self, region: RegionPlugin, user_id: str, as_of: datetime.date,
    ) -> list[Milestone]:
        history = self.history_repo.read_history(user_id, region.region_id)
        if history.baseline is None:
            baseline = establish_baseline(history, as_of)
            if baseline is not None:
                history.baseline = self.history_repo.save_baseline(
                    user_id, region.region_id, baseline,
                )
        return self.history_repo.add_milestones(
            user_id, region.region_id, detect_new_milestones(history, as_of),
        )
