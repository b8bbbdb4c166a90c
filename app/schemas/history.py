"""
History schemas.

Check-ins and exercise sessions are append-only: once written they are only
ever removed by age-based pruning.  Milestones (keyed by a stable id) and
the first-week baseline are derived facts and are never pruned.

The engine receives a :class:`History` already ordered oldest-first and
never writes to it.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from app.schemas.readiness import Mode


class Difficulty(str, Enum):
    TOO_EASY = "too_easy"
    JUST_RIGHT = "just_right"
    TOO_HARD = "too_hard"


class Feeling(str, Enum):
    BETTER = "better"
    SAME = "same"
    WORSE = "worse"


class CheckIn(BaseModel):
    """A persisted daily check-in."""

    date: datetime.date
    pain_level: int = Field(..., ge=0, le=10)
    function_level: int = Field(..., ge=0, le=10)
    confidence_level: int = Field(..., ge=0, le=10)
    sensations: list[str] = Field(default_factory=list)
    mode_assigned: Mode
    notes: Optional[str] = Field(None, max_length=1000)


class ExerciseEntry(BaseModel):
    """Feedback for one completed exercise within a session."""

    exercise_id: str
    sets: int = Field(..., ge=0, le=20)
    reps: Optional[int] = Field(None, ge=0, le=200)
    duration: Optional[int] = Field(None, ge=0, description="Seconds")
    difficulty: Difficulty
    pain_during: int = Field(..., ge=0, le=10)


class ExerciseSession(BaseModel):
    """A persisted exercise session."""

    date: datetime.date
    exercises: list[ExerciseEntry] = Field(default_factory=list)
    total_duration: int = Field(0, ge=0, description="Minutes")
    overall_difficulty: Difficulty
    pain_after: Optional[int] = Field(None, ge=0, le=10)
    feeling_after: Optional[Feeling] = None

    @model_validator(mode="after")
    def _check_dosage_fields(self) -> "ExerciseSession":
        for entry in self.exercises:
            if entry.reps is None and entry.duration is None and entry.sets > 0:
                raise ValueError(
                    f"Exercise '{entry.exercise_id}' needs either reps or duration"
                )
        return self


class MilestoneType(str, Enum):
    PAIN_REDUCTION = "pain_reduction"
    FUNCTION_IMPROVEMENT = "function_improvement"
    CONSISTENCY = "consistency"
    EXERCISE_PROGRESSION = "exercise_progression"
    MOVEMENT_UNLOCKED = "movement_unlocked"


class Milestone(BaseModel):
    """A threshold crossing worth celebrating."""

    milestone_id: str
    type: MilestoneType
    title: str
    description: str
    achieved_date: datetime.date


class Baseline(BaseModel):
    """First-week averages, fixed once seven check-ins exist.

    Stored apart from the check-ins so pruning never moves it.
    """

    pain_level: float = Field(..., ge=0.0, le=10.0)
    function_level: float = Field(..., ge=0.0, le=10.0)
    confidence_level: float = Field(..., ge=0.0, le=10.0)
    recorded_date: datetime.date


class History(BaseModel):
    """Everything recorded for one user and region, oldest first."""

    check_ins: list[CheckIn] = Field(default_factory=list)
    sessions: list[ExerciseSession] = Field(default_factory=list)
    milestones: list[Milestone] = Field(default_factory=list)
    baseline: Optional[Baseline] = None
