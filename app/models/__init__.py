"""SQLModel database models."""

from app.models.baseline import BaselineRecord
from app.models.check_in import CheckInRecord
from app.models.exercise_session import ExerciseSessionRecord
from app.models.milestone import MilestoneRecord

__all__ = [
    "BaselineRecord",
    "CheckInRecord",
    "ExerciseSessionRecord",
    "MilestoneRecord",
]
