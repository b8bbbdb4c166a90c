"""
Baseline database model.

One row per (user, region), written once after the seventh check-in.
Pruning never touches it.
"""

import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class BaselineRecord(SQLModel, table=True):
    """First-week averages for one user and region."""

    __tablename__ = "baselines"
    __table_args__ = (
        UniqueConstraint("user_id", "region_id", name="uq_baseline_user_region"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, max_length=64, index=True)
    region_id: str = Field(nullable=False, max_length=32, index=True)

    pain_level: float = Field(nullable=False)
    function_level: float = Field(nullable=False)
    confidence_level: float = Field(nullable=False)
    recorded_date: datetime.date = Field(nullable=False)
