"""
Exercise session database model.

Per-exercise feedback is stored as a JSON list in the order the user did
the drills; the dosage adapter depends on that order.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel


class ExerciseSessionRecord(SQLModel, table=True):
    """A persisted exercise session."""

    __tablename__ = "exercise_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, max_length=64, index=True)
    region_id: str = Field(nullable=False, max_length=32, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    # List of ExerciseEntry dicts (validated at the service layer)
    exercises: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    total_duration: int = Field(default=0, nullable=False)
    overall_difficulty: str = Field(nullable=False, max_length=16)
    pain_after: Optional[int] = Field(default=None)
    feeling_after: Optional[str] = Field(default=None, max_length=16)

    created_at: datetime.datetime = Field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc),
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
