"""
Progress reporting: weekly summary and insights.

The week runs Monday to Sunday.  Its pain and function trends compare
with the week before using the same 0.5-point band as the trend
analyzer; without check-ins last week both trends are ``stable``.

Insights are short, ordered observations for the dashboard.  Fewer than
three check-ins only yields the "building your baseline" note.
"""

from __future__ import annotations

import datetime
from typing import Optional, Sequence

from app.coach.milestones import establish_baseline, function_improvement, pain_reduction
from app.coach.thresholds import DEFAULT_THRESHOLDS, CoachThresholds
from app.coach.trends import check_in_streak
from app.schemas.history import CheckIn, History
from app.schemas.progress import ProgressInsight, WeeklySummary, WeekTrend
from app.schemas.readiness import Mode

MIN_CHECK_INS_FOR_INSIGHTS = 3
STREAK_INSIGHT_DAYS = 7
PAIN_GAIN_INSIGHT = 2.0
PAIN_INCREASE_INSIGHT = 1.0
FUNCTION_GAIN_INSIGHT = 2.0
RECENT_DAYS = 14
ACTIVE_SESSIONS = 10
FEW_SESSIONS = 3
MIN_SESSIONS_FOR_REMINDER = 5


def week_start(day: datetime.date) -> datetime.date:
    """Monday of the week containing *day*."""
    return day - datetime.timedelta(days=day.weekday())


def _in_range(day: datetime.date, start: datetime.date, end: datetime.date) -> bool:
    return start <= day < end


def _avg(check_ins: Sequence[CheckIn], attr: str) -> float:
    return sum(getattr(c, attr) for c in check_ins) / len(check_ins)


def _trend(current: float, previous: float, band: float, higher_is_better: bool) -> WeekTrend:
    if current > previous + band:
        return "improving" if higher_is_better else "worsening"
    if current < previous - band:
        return "worsening" if higher_is_better else "improving"
    return "stable"


# ======================================================================
# Weekly summary
# ======================================================================


def weekly_summary(
    history: History,
    as_of: datetime.date,
    thresholds: Optional[CoachThresholds] = None,
) -> Optional[WeeklySummary]:
    """Summary of the week containing *as_of*; ``None`` with no check-ins in it."""
    th = thresholds or DEFAULT_THRESHOLDS
    start = week_start(as_of)
    end = start + datetime.timedelta(days=7)
    previous_start = start - datetime.timedelta(days=7)

    week = [c for c in history.check_ins if _in_range(c.date, start, end)]
    if not week:
        return None
    sessions = [s for s in history.sessions if _in_range(s.date, start, end)]
    previous = [c for c in history.check_ins if _in_range(c.date, previous_start, start)]

    avg_pain = _avg(week, "pain_level")
    avg_function = _avg(week, "function_level")
    pain_trend: WeekTrend = "stable"
    function_trend: WeekTrend = "stable"
    if previous:
        pain_trend = _trend(avg_pain, _avg(previous, "pain_level"),
                            th.trend_hysteresis, higher_is_better=False)
        function_trend = _trend(avg_function, _avg(previous, "function_level"),
                                th.trend_hysteresis, higher_is_better=True)

    return WeeklySummary(
        week_start=start,
        avg_pain_level=round(avg_pain, 1),
        avg_function_level=round(avg_function, 1),
        avg_confidence_level=round(_avg(week, "confidence_level"), 1),
        pain_trend=pain_trend,
        function_trend=function_trend,
        check_ins_completed=len(week),
        sessions_completed=len(sessions),
        total_exercise_minutes=sum(s.total_duration for s in sessions),
        mode_distribution={
            mode.value: sum(1 for c in week if c.mode_assigned == mode) for mode in Mode
        },
    )


# ======================================================================
# Insights
# ======================================================================


def progress_insights(history: History, as_of: datetime.date) -> list[ProgressInsight]:
    check_ins = history.check_ins
    if len(check_ins) < MIN_CHECK_INS_FOR_INSIGHTS:
        return [ProgressInsight(
            type="neutral",
            title="Building Your Baseline",
            message="Keep checking in daily to establish your baseline and track progress.",
        )]

    insights: list[ProgressInsight] = []

    streak = check_in_streak(check_ins, as_of)
    if streak >= STREAK_INSIGHT_DAYS:
        insights.append(ProgressInsight(
            type="positive",
            title="Great Consistency!",
            message=f"You've checked in {streak} days in a row. "
                    "Consistency is key to progress.",
            metric="streak",
            value=streak,
        ))

    if establish_baseline(history, as_of) is not None:
        reduction = pain_reduction(history)
        if reduction >= PAIN_GAIN_INSIGHT:
            insights.append(ProgressInsight(
                type="positive",
                title="Pain Improving",
                message=f"Your average pain has decreased by {reduction:.1f} points since starting.",
                metric="pain_reduction",
                value=reduction,
            ))
        elif reduction < -PAIN_INCREASE_INSIGHT:
            insights.append(ProgressInsight(
                type="attention",
                title="Pain Increasing",
                message="Your pain levels have been higher recently. "
                        "Consider reducing activity intensity.",
                metric="pain_increase",
                value=abs(reduction),
            ))
        improvement = function_improvement(history)
        if improvement >= FUNCTION_GAIN_INSIGHT:
            insights.append(ProgressInsight(
                type="positive",
                title="Function Improving",
                message=f"Your function level has improved by {improvement:.1f} points.",
                metric="function_improvement",
                value=improvement,
            ))

    recent = check_ins[-RECENT_DAYS:]
    training_days = sum(1 for c in recent if c.mode_assigned == Mode.TRAINING)
    game_days = sum(1 for c in recent if c.mode_assigned == Mode.GAME)
    if game_days > 0 and game_days >= training_days:
        insights.append(ProgressInsight(
            type="positive",
            title="High Readiness",
            message="You've been in GAME mode frequently. Your body is responding well!",
        ))

    if history.sessions:
        since = as_of - datetime.timedelta(days=RECENT_DAYS)
        recent_sessions = sum(1 for s in history.sessions if s.date >= since)
        if recent_sessions >= ACTIVE_SESSIONS:
            insights.append(ProgressInsight(
                type="positive",
                title="Active Rehab",
                message=f"You've completed {recent_sessions} exercise sessions in the last 2 weeks.",
            ))
        elif recent_sessions < FEW_SESSIONS and len(history.sessions) >= MIN_SESSIONS_FOR_REMINDER:
            insights.append(ProgressInsight(
                type="attention",
                title="Exercise Reminder",
                message="Your exercise frequency has dropped. "
                        "Try to maintain consistency for best results.",
            ))

    return insights
