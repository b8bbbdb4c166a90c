"""
Progress schemas.

Read-only views for the progress dashboard: the current week's summary
and a short list of insights.  Nothing here is persisted.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

from app.schemas.history import Baseline

WeekTrend = Literal["improving", "stable", "worsening"]
InsightType = Literal["positive", "neutral", "attention"]


class WeeklySummary(BaseModel):
    """Averages and counts for the Monday-anchored week containing a date."""

    week_start: datetime.date
    avg_pain_level: float = Field(..., ge=0.0, le=10.0)
    avg_function_level: float = Field(..., ge=0.0, le=10.0)
    avg_confidence_level: float = Field(..., ge=0.0, le=10.0)
    pain_trend: WeekTrend
    function_trend: WeekTrend
    check_ins_completed: int = Field(..., ge=0)
    sessions_completed: int = Field(..., ge=0)
    total_exercise_minutes: int = Field(..., ge=0)
    mode_distribution: dict[str, int] = Field(
        ..., description="Check-ins per assigned mode (RESET, TRAINING, GAME)",
    )


class ProgressInsight(BaseModel):
    type: InsightType
    title: str
    message: str
    metric: Optional[str] = None
    value: Optional[float] = None


class ProgressResponse(BaseModel):
    weekly_summary: Optional[WeeklySummary] = None
    insights: list[ProgressInsight] = Field(default_factory=list)
    baseline: Optional[Baseline] = None
