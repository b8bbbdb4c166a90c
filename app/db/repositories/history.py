"""
History repository.

Append-only store of check-ins and exercise sessions per (user, region),
plus the milestones and the first-week baseline derived from them.
Reads come back oldest first, the order the trend analyzer expects.
Pruning removes check-ins and sessions older than a cutoff; milestones
and the baseline are kept.
"""

import datetime
import logging
from typing import Iterable, Optional

from sqlalchemy import delete
from sqlmodel import Session, select

from app.models.baseline import BaselineRecord
from app.models.check_in import CheckInRecord
from app.models.exercise_session import ExerciseSessionRecord
from app.models.milestone import MilestoneRecord
from app.schemas.history import (
    Baseline,
    CheckIn,
    ExerciseEntry,
    ExerciseSession,
    History,
    Milestone,
)

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------------
# Row <-> schema conversion
# ----------------------------------------------------------------------


def _check_in_from_row(row: CheckInRecord) -> CheckIn:
    return CheckIn(
        date=row.date,
        pain_level=row.pain_level,
        function_level=row.function_level,
        confidence_level=row.confidence_level,
        sensations=list(row.sensations),
        mode_assigned=row.mode_assigned,
        notes=row.notes,
    )


def _session_from_row(row: ExerciseSessionRecord) -> ExerciseSession:
    return ExerciseSession(
        date=row.date,
        exercises=[ExerciseEntry.model_validate(e) for e in row.exercises],
        total_duration=row.total_duration,
        overall_difficulty=row.overall_difficulty,
        pain_after=row.pain_after,
        feeling_after=row.feeling_after,
    )


def _milestone_from_row(row: MilestoneRecord) -> Milestone:
    return Milestone(
        milestone_id=row.milestone_id,
        type=row.type,
        title=row.title,
        description=row.description,
        achieved_date=row.achieved_date,
    )


def _baseline_from_row(row: BaselineRecord) -> Baseline:
    return Baseline(
        pain_level=row.pain_level,
        function_level=row.function_level,
        confidence_level=row.confidence_level,
        recorded_date=row.recorded_date,
    )


class HistoryRepository:
    """Repository for check-in, session and milestone history."""

    def __init__(self, session: Session):
        self.session = session

    # ------------------------------------------------------------------
    # Append
    # ------------------------------------------------------------------

    def append_check_in(self, user_id: str, region_id: str, check_in: CheckIn) -> CheckIn:
        row = CheckInRecord(
            user_id=user_id,
            region_id=region_id,
            date=check_in.date,
            pain_level=check_in.pain_level,
            function_level=check_in.function_level,
            confidence_level=check_in.confidence_level,
            sensations=list(check_in.sensations),
            mode_assigned=check_in.mode_assigned.value,
            notes=check_in.notes,
        )
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        logger.info("Stored check-in %s for user=%s region=%s", row.id, user_id, region_id)
        return _check_in_from_row(row)

    def append_session(
        self, user_id: str, region_id: str, exercise_session: ExerciseSession,
    ) -> ExerciseSession:
        row = ExerciseSessionRecord(
            user_id=user_id,
            region_id=region_id,
            date=exercise_session.date,
            exercises=[e.model_dump(mode="json") for e in exercise_session.exercises],
            total_duration=exercise_session.total_duration,
            overall_difficulty=exercise_session.overall_difficulty.value,
            pain_after=exercise_session.pain_after,
            feeling_after=(
                exercise_session.feeling_after.value
                if exercise_session.feeling_after is not None else None
            ),
        )
        self.session.add(row)
        self.session.commit()
        self.session.refresh(row)
        logger.info("Stored session %s for user=%s region=%s", row.id, user_id, region_id)
        return _session_from_row(row)

    def add_milestones(
        self, user_id: str, region_id: str, milestones: Iterable[Milestone],
    ) -> list[Milestone]:
        """Store milestones not already held; returns the ones added."""
        held = {m.milestone_id for m in self.list_milestones(user_id, region_id)}
        added: list[Milestone] = []
        for milestone in milestones:
            if milestone.milestone_id in held:
                continue
            self.session.add(MilestoneRecord(
                user_id=user_id,
                region_id=region_id,
                milestone_id=milestone.milestone_id,
                type=milestone.type.value,
                title=milestone.title,
                description=milestone.description,
                achieved_date=milestone.achieved_date,
            ))
            held.add(milestone.milestone_id)
            added.append(milestone)
        if added:
            self.session.commit()
            logger.info(
                "Milestones for user=%s region=%s: %s",
                user_id, region_id, [m.milestone_id for m in added],
            )
        return added

    def save_baseline(self, user_id: str, region_id: str, baseline: Baseline) -> Baseline:
        """Store *baseline* unless one exists; returns the stored one."""
        existing = self._baseline_row(user_id, region_id)
        if existing is not None:
            return _baseline_from_row(existing)
        row = BaselineRecord(
            user_id=user_id,
            region_id=region_id,
            pain_level=baseline.pain_level,
            function_level=baseline.function_level,
            confidence_level=baseline.confidence_level,
            recorded_date=baseline.recorded_date,
        )
        self.session.add(row)
        self.session.commit()
        logger.info("Baseline recorded for user=%s region=%s", user_id, region_id)
        return baseline

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def list_check_ins(self, user_id: str, region_id: str) -> list[CheckIn]:
        statement = (
            select(CheckInRecord)
            .where(CheckInRecord.user_id == user_id, CheckInRecord.region_id == region_id)
            .order_by(CheckInRecord.date, CheckInRecord.id)
        )
        return [_check_in_from_row(r) for r in self.session.exec(statement).all()]

    def list_sessions(self, user_id: str, region_id: str) -> list[ExerciseSession]:
        statement = (
            select(ExerciseSessionRecord)
            .where(
                ExerciseSessionRecord.user_id == user_id,
                ExerciseSessionRecord.region_id == region_id,
            )
            .order_by(ExerciseSessionRecord.date, ExerciseSessionRecord.id)
        )
        return [_session_from_row(r) for r in self.session.exec(statement).all()]

    def list_milestones(self, user_id: str, region_id: str) -> list[Milestone]:
        statement = (
            select(MilestoneRecord)
            .where(MilestoneRecord.user_id == user_id, MilestoneRecord.region_id == region_id)
            .order_by(MilestoneRecord.achieved_date, MilestoneRecord.id)
        )
        return [_milestone_from_row(r) for r in self.session.exec(statement).all()]

    def _baseline_row(self, user_id: str, region_id: str) -> Optional[BaselineRecord]:
        statement = select(BaselineRecord).where(
            BaselineRecord.user_id == user_id, BaselineRecord.region_id == region_id,
        )
        return self.session.exec(statement).first()

    def get_baseline(self, user_id: str, region_id: str) -> Optional[Baseline]:
        row = self._baseline_row(user_id, region_id)
        return _baseline_from_row(row) if row is not None else None

    def read_history(self, user_id: str, region_id: str) -> History:
        """Full history for one user and region, oldest first."""
        return History(
            check_ins=self.list_check_ins(user_id, region_id),
            sessions=self.list_sessions(user_id, region_id),
            milestones=self.list_milestones(user_id, region_id),
            baseline=self.get_baseline(user_id, region_id),
        )

    # ------------------------------------------------------------------
    # Retention
    # ------------------------------------------------------------------

    def prune_before(
        self, user_id: str, region_id: str, cutoff: datetime.date,
    ) -> tuple[int, int]:
        """Delete check-ins and sessions dated before *cutoff*.

        Milestones and the baseline are kept.  Returns
        ``(check_ins_deleted, sessions_deleted)``.
        """
        check_ins = self.session.execute(
            delete(CheckInRecord).where(
                CheckInRecord.user_id == user_id,
                CheckInRecord.region_id == region_id,
                CheckInRecord.date < cutoff,
            )
        )
        sessions = self.session.execute(
            delete(ExerciseSessionRecord).where(
                ExerciseSessionRecord.user_id == user_id,
                ExerciseSessionRecord.region_id == region_id,
                ExerciseSessionRecord.date < cutoff,
            )
        )
        self.session.commit()
        logger.info(
            "Pruned history before %s for user=%s region=%s: %d check-ins, %d sessions",
            cutoff, user_id, region_id, check_ins.rowcount, sessions.rowcount,
        )
        return check_ins.rowcount, sessions.rowcount
