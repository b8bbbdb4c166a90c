"""
Trend schemas.

Pure computed views over history.  Each one compares a recent window with
the window of equal size just before it.  Neutral values (``stable``,
rate ``1.0``, counts ``0``) mean "not enough signal", never "confirmed
good".
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

DifficultyTrend = Literal["too_easy", "just_right", "too_hard", "insufficient_data"]
PainDirection = Literal["improving", "stable", "worsening"]
ConfidenceDirection = Literal["improving", "stable", "declining"]


class SessionTrends(BaseModel):
    """Trends over the most recent exercise sessions (window of 5)."""

    recent_avg_pain: float = Field(..., ge=0.0)
    previous_avg_pain: float = Field(..., ge=0.0)
    pain_trending_up: bool
    low_pain_streak: int = Field(..., ge=0)
    recent_stability_rate: float = Field(..., ge=0.0, le=1.0)
    recent_difficulty_trend: DifficultyTrend
    too_easy_streak: int = Field(..., ge=0)
    total_sessions: int = Field(..., ge=0)
    recent_regressions: int = Field(
        ..., ge=0,
        description="Recent sessions with at least one exercise at pain >= 6",
    )
    days_since_last_session: Optional[int] = None


class CheckInTrends(BaseModel):
    """Trends over the most recent check-ins (window of 7)."""

    weekly_avg_pain: float = Field(..., ge=0.0)
    previous_week_avg_pain: float = Field(..., ge=0.0)
    pain_direction: PainDirection
    weekly_avg_confidence: float = Field(..., ge=0.0)
    previous_week_avg_confidence: float = Field(..., ge=0.0)
    confidence_direction: ConfidenceDirection
    recent_reset_count: int = Field(..., ge=0)
    streak: int = Field(..., ge=0)
    progressive_worsening: bool


class HistoryTrends(BaseModel):
    """Both read-models, as consumed by the mode decision."""

    sessions: SessionTrends
    check_ins: CheckInTrends
