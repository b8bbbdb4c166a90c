"""
Readiness schemas.

The readiness report is the user's self-assessment for the day.  It is
built fresh per check-in and never stored as-is; the persisted trace of a
check-in is :class:`~app.schemas.history.CheckIn`.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class Mode(str, Enum):
    """Training intensity mode."""
    RESET = "RESET"
    TRAINING = "TRAINING"
    GAME = "GAME"


class ActivityGoal(str, Enum):
    REST = "rest"
    LIGHT = "light"
    TRAINING = "training"
    GAME = "game"


class ProblemZoneStatus(str, Enum):
    BETTER = "better"
    SAME = "same"
    WORSE = "worse"


class RehabGoal(str, Enum):
    PAIN_FREE = "pain_free"
    DAILY_FUNCTION = "daily_function"
    RETURN_TO_SPORT = "return_to_sport"
    FULL_PERFORMANCE = "full_performance"


# Tags that mean "nothing to report".  Shared by every region.
POSITIVE_SENSATIONS: frozenset[str] = frozenset({"nothing", "good"})


def _dedupe(tags: list[str]) -> list[str]:
    return list(dict.fromkeys(tags))


def toggle_sensation(sensations: list[str], tag: str) -> list[str]:
    """Toggle *tag* in a sensation selection.

    Picking a positive tag replaces the whole selection (or clears it when
    the tag was already selected).  Picking any other tag drops the
    positive ones first.
    """
    if tag in POSITIVE_SENSATIONS:
        return [] if tag in sensations else [tag]
    filtered = [s for s in sensations if s not in POSITIVE_SENSATIONS]
    if tag in filtered:
        return [s for s in filtered if s != tag]
    return filtered + [tag]


class ReadinessReport(BaseModel):
    """Today's self-report for one region."""

    confidence: int = Field(
        ..., ge=0, le=10,
        description="How much the user trusts the region right now (0-10)",
    )
    resting_discomfort: int = Field(
        ..., ge=0, le=10,
        description="Discomfort while at rest (0-10)",
    )
    activity_goal: ActivityGoal = ActivityGoal.TRAINING
    sensations: list[str] = Field(default_factory=list)
    movement_restrictions: list[str] = Field(default_factory=list)
    problem_zone_status: ProblemZoneStatus = ProblemZoneStatus.SAME

    # Region-specific follow-ups
    pain_locations: Optional[list[str]] = None
    recent_giving_way: Optional[bool] = None
    morning_stiffness: Optional[bool] = None

    notes: Optional[str] = Field(None, max_length=1000)

    @model_validator(mode="after")
    def _normalise_tags(self) -> "ReadinessReport":
        sensations = _dedupe(self.sensations)
        if any(s not in POSITIVE_SENSATIONS for s in sensations):
            sensations = [s for s in sensations if s not in POSITIVE_SENSATIONS]
        self.sensations = sensations
        self.movement_restrictions = _dedupe(self.movement_restrictions)
        return self


class ProblemZone(BaseModel):
    """A calibrated problem zone (e.g. a knee flexion range)."""

    label: str
    severity: int = Field(1, ge=1, le=3)


class CalibrationProfile(BaseModel):
    """Read-only calibration data; only used to annotate reasoning."""

    primary_goal: Optional[RehabGoal] = None
    problem_zones: list[ProblemZone] = Field(default_factory=list)

    def primary_zone(self) -> Optional[ProblemZone]:
        """Most severe zone; the first listed wins ties."""
        if not self.problem_zones:
            return None
        return max(self.problem_zones, key=lambda z: z.severity)
