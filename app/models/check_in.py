"""
Check-in database model.

One row per completed daily check-in, per user and region.  Rows are
append-only; the only delete path is age-based pruning.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel


class CheckInRecord(SQLModel, table=True):
    """A persisted daily check-in."""

    __tablename__ = "check_ins"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, max_length=64, index=True)
    region_id: str = Field(nullable=False, max_length=32, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    pain_level: int = Field(nullable=False)
    function_level: int = Field(nullable=False)
    confidence_level: int = Field(nullable=False)
    sensations: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    mode_assigned: str = Field(nullable=False, max_length=16)
    notes: Optional[str] = Field(default=None, max_length=1000)

    created_at: datetime.datetime = Field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc),
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
