"""
Base database configuration.

Import all models here so ``SQLModel.metadata`` knows every table.
"""

from app.models.baseline import BaselineRecord  # noqa: F401
from app.models.check_in import CheckInRecord  # noqa: F401
from app.models.exercise_session import ExerciseSessionRecord  # noqa: F401
from app.models.milestone import MilestoneRecord  # noqa: F401
