"""
Milestone database model.

At most one row per (user, region, milestone id).  Milestones survive
history pruning.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class MilestoneRecord(SQLModel, table=True):
    """An awarded milestone."""

    __tablename__ = "milestones"
    __table_args__ = (
        UniqueConstraint("user_id", "region_id", "milestone_id", name="uq_milestone_user_region_id"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, max_length=64, index=True)
    region_id: str = Field(nullable=False, max_length=32, index=True)
    milestone_id: str = Field(nullable=False, max_length=32)
    type: str = Field(nullable=False, max_length=32)
    title: str = Field(nullable=False, max_length=100)
    description: str = Field(nullable=False, max_length=255)
    achieved_date: datetime.date = Field(nullable=False)
