"""Pydantic schemas for request/response validation."""

from app.schemas.region import (
    Dosage,
    DosageType,
    Drill,
    RegionDetail,
    RegionSummary,
    SensationClass,
    SensationInfo,
    Severity,
)
from app.schemas.readiness import (
    ActivityGoal,
    CalibrationProfile,
    Mode,
    ProblemZone,
    ReadinessReport,
)
from app.schemas.history import (
    CheckIn,
    Difficulty,
    ExerciseEntry,
    ExerciseSession,
    Baseline,
    History,
    Milestone,
)
from app.schemas.progress import ProgressInsight, ProgressResponse, WeeklySummary
from app.schemas.trends import CheckInTrends, HistoryTrends, SessionTrends
from app.schemas.coach import (
    CoachState,
    DosageSelection,
    DosageTier,
    DrillFeedback,
    ModeDecision,
)

__all__ = [
    "Dosage",
    "DosageType",
    "Drill",
    "RegionDetail",
    "RegionSummary",
    "SensationClass",
    "SensationInfo",
    "Severity",
    "ActivityGoal",
    "CalibrationProfile",
    "Mode",
    "ProblemZone",
    "ReadinessReport",
    "CheckIn",
    "Difficulty",
    "ExerciseEntry",
    "ExerciseSession",
    "Baseline",
    "History",
    "Milestone",
    "ProgressInsight",
    "ProgressResponse",
    "WeeklySummary",
    "CheckInTrends",
    "HistoryTrends",
    "SessionTrends",
    "CoachState",
    "DosageSelection",
    "DosageTier",
    "DrillFeedback",
    "ModeDecision",
]
