"""
Coach schemas.

The coach combines today's readiness with history trends to produce a
:class:`CoachState`: the mode, an ordered plan and in-session pain
thresholds.
The state is recomputed from its inputs on every check-in; it may be
snapshotted by the caller to resume a session but is never a source of
truth.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.history import CheckIn, ExerciseSession, Milestone
from app.schemas.readiness import CalibrationProfile, Mode, ReadinessReport
from app.schemas.region import Dosage
from app.schemas.trends import HistoryTrends


class ModeDecision(BaseModel):
    """Output of the mode decision cascade."""

    mode: Mode
    reasoning: str


class CoachState(BaseModel):
    """Mode, plan and thresholds for the active session."""

    mode: Mode
    plan: list[str] = Field(..., description="Ordered drill ids")
    pain_stop: int = Field(
        ..., ge=0, le=10,
        description="Pain at or above which the session drops to RESET",
    )
    pain_regress: int = Field(
        ..., ge=0, le=10,
        description="Pain at or above which higher-demand drills are removed",
    )
    reasoning: str


class DrillFeedback(BaseModel):
    """Live feedback after one drill."""

    exercise_id: str
    pain: int = Field(..., ge=0, le=10)
    felt_stable: bool
    notes: Optional[str] = Field(None, max_length=500)


class DosageTier(str, Enum):
    MIN = "min"
    DEFAULT = "default"
    MAX = "max"


class DosageSelection(BaseModel):
    """Resolved dosage payload and the label shown to the user."""

    dosage: Dosage
    label: str = Field(..., description="One of: Eased, Standard, Advanced")


class DosageResponse(DosageSelection):
    exercise_id: str
    tier: DosageTier


# ----------------------------------------------------------------------
# API request / response bodies
# ----------------------------------------------------------------------


class CoachRequest(BaseModel):
    """Readiness plus optional calibration, as posted by the check-in form."""

    readiness: ReadinessReport
    calibration: Optional[CalibrationProfile] = None
    date: Optional[datetime.date] = Field(
        None, description="Check-in date (defaults to today)",
    )


class TrendAlert(BaseModel):
    """A trend-based heads-up shown next to the check-in."""

    code: str
    message: str


class CoachResponse(BaseModel):
    """Coach state with the context that produced it."""

    coach: CoachState
    trends: Optional[HistoryTrends] = None
    alerts: list[TrendAlert] = Field(default_factory=list)


class CheckInResponse(CoachResponse):
    check_in: CheckIn
    new_milestones: list[Milestone] = Field(default_factory=list)


class SessionLogResponse(BaseModel):
    session: ExerciseSession
    new_milestones: list[Milestone] = Field(default_factory=list)


class SessionAdjustRequest(BaseModel):
    state: CoachState
    feedback: DrillFeedback


class PruneResponse(BaseModel):
    cutoff: datetime.date
    check_ins_deleted: int
    sessions_deleted: int
