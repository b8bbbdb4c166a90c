"""
Milestone detection.

Milestones are fixed definitions checked after every check-in and every
logged session.  Each has a stable id; an id already in the history is
never awarded twice.

Pain and function milestones compare the mean of the last 7 check-ins
with the baseline, the mean of the first 7 ever recorded.  The baseline
is fixed once (:func:`establish_baseline`) and stored, so pruning old
check-ins does not move it.  With fewer than 7 check-ins in the history
those milestones cannot trigger.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Callable, Optional

from app.coach.trends import check_in_streak
from app.schemas.history import Baseline, History, Milestone, MilestoneType
from app.schemas.readiness import Mode

BASELINE_SIZE = 7


@dataclass(frozen=True)
class MilestoneDefinition:
    milestone_id: str
    type: MilestoneType
    title: str
    description: str
    condition: Callable[[History, datetime.date], bool]


# ======================================================================
# Baseline comparisons
# ======================================================================


def establish_baseline(history: History, as_of: datetime.date) -> Optional[Baseline]:
    """The first-week baseline, or ``None`` while fewer than 7 check-ins exist.

    An already stored baseline is returned unchanged.
    """
    if history.baseline is not None:
        return history.baseline
    if len(history.check_ins) < BASELINE_SIZE:
        return None
    first_week = history.check_ins[:BASELINE_SIZE]
    return Baseline(
        pain_level=sum(c.pain_level for c in first_week) / BASELINE_SIZE,
        function_level=sum(c.function_level for c in first_week) / BASELINE_SIZE,
        confidence_level=sum(c.confidence_level for c in first_week) / BASELINE_SIZE,
        recorded_date=as_of,
    )


def _baseline_delta(history: History, attr: str) -> Optional[float]:
    """``recent mean - baseline`` for a check-in field, or ``None``."""
    check_ins = history.check_ins
    if len(check_ins) < BASELINE_SIZE:
        return None
    baseline = establish_baseline(history, check_ins[-1].date)
    recent = sum(getattr(c, attr) for c in check_ins[-BASELINE_SIZE:]) / BASELINE_SIZE
    return recent - getattr(baseline, attr)


def pain_reduction(history: History) -> float:
    delta = _baseline_delta(history, "pain_level")
    return -delta if delta is not None else 0.0


def function_improvement(history: History) -> float:
    delta = _baseline_delta(history, "function_level")
    return delta if delta is not None else 0.0


def _ever_assigned(mode: Mode) -> Callable[[History, datetime.date], bool]:
    return lambda h, _: any(c.mode_assigned == mode for c in h.check_ins)


# ======================================================================
# Definitions
# ======================================================================

MILESTONE_DEFINITIONS: tuple[MilestoneDefinition, ...] = (
    MilestoneDefinition(
        "FIRST_CHECKIN", MilestoneType.CONSISTENCY,
        "First Check-In", "Completed your first daily check-in",
        lambda h, _: len(h.check_ins) >= 1,
    ),
    MilestoneDefinition(
        "WEEK_STREAK", MilestoneType.CONSISTENCY,
        "Week Warrior", "Checked in 7 days in a row",
        lambda h, d: check_in_streak(h.check_ins, d) >= 7,
    ),
    MilestoneDefinition(
        "MONTH_STREAK", MilestoneType.CONSISTENCY,
        "Monthly Dedication", "Checked in 30 days in a row",
        lambda h, d: check_in_streak(h.check_ins, d) >= 30,
    ),
    MilestoneDefinition(
        "PAIN_DOWN_2", MilestoneType.PAIN_REDUCTION,
        "Pain Reduction", "Average pain reduced by 2+ points",
        lambda h, _: pain_reduction(h) >= 2,
    ),
    MilestoneDefinition(
        "PAIN_DOWN_5", MilestoneType.PAIN_REDUCTION,
        "Major Pain Relief", "Average pain reduced by 5+ points",
        lambda h, _: pain_reduction(h) >= 5,
    ),
    MilestoneDefinition(
        "FUNCTION_UP_2", MilestoneType.FUNCTION_IMPROVEMENT,
        "Function Boost", "Function level improved by 2+ points",
        lambda h, _: function_improvement(h) >= 2,
    ),
    MilestoneDefinition(
        "FIRST_TRAINING", MilestoneType.MOVEMENT_UNLOCKED,
        "Ready to Train", "First day assigned TRAINING mode",
        _ever_assigned(Mode.TRAINING),
    ),
    MilestoneDefinition(
        "FIRST_GAME", MilestoneType.MOVEMENT_UNLOCKED,
        "Game Ready", "First day assigned GAME mode",
        _ever_assigned(Mode.GAME),
    ),
    MilestoneDefinition(
        "TEN_SESSIONS", MilestoneType.EXERCISE_PROGRESSION,
        "Dedicated Practitioner", "Completed 10 exercise sessions",
        lambda h, _: len(h.sessions) >= 10,
    ),
    MilestoneDefinition(
        "FIFTY_SESSIONS", MilestoneType.EXERCISE_PROGRESSION,
        "Exercise Expert", "Completed 50 exercise sessions",
        lambda h, _: len(h.sessions) >= 50,
    ),
)


def detect_new_milestones(history: History, as_of: datetime.date) -> list[Milestone]:
    """Milestones reached by *history* that it does not already hold."""
    achieved = {m.milestone_id for m in history.milestones}
    return [
        Milestone(
            milestone_id=d.milestone_id,
            type=d.type,
            title=d.title,
            description=d.description,
            achieved_date=as_of,
        )
        for d in MILESTONE_DEFINITIONS
        if d.milestone_id not in achieved and d.condition(history, as_of)
    ]
