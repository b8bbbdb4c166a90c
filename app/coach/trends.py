"""
Trend analysis over check-in and session history.

Two read-models feed the mode decision:

- :class:`~app.schemas.trends.SessionTrends` looks at the last 5 exercise
  sessions and the 5 before them: mean in-session pain, how often pain
  stayed low, what users said about difficulty and how many sessions
  hit a regression-level pain.
- :class:`~app.schemas.trends.CheckInTrends` looks at the last 7
  check-ins and the 7 before them: weekly pain and confidence, their
  direction, RESET frequency, the consecutive-day streak and whether
  pain has risen three check-ins in a row.

Windows
-------
With ``N`` entries and window size ``w``, the recent window is the last
``n = min(w, N)`` entries and the previous window is the ``n`` entries
before it (possibly fewer, possibly empty).  Both lists are expected
oldest first, which is how :class:`~app.schemas.history.History` is
delivered.

A session with no exercise entries counts as mean pain ``0``.  This
dilutes the window mean.
"""

from __future__ import annotations

import datetime
from typing import Optional, Sequence, TypeVar

from app.coach.thresholds import DEFAULT_THRESHOLDS, CoachThresholds
from app.schemas.history import CheckIn, Difficulty, ExerciseSession, History
from app.schemas.readiness import Mode
from app.schemas.trends import (
    CheckInTrends,
    ConfidenceDirection,
    DifficultyTrend,
    HistoryTrends,
    PainDirection,
    SessionTrends,
)

T = TypeVar("T")


# ======================================================================
# Helpers
# ======================================================================


def _windows(items: Sequence[T], size: int) -> tuple[list[T], list[T]]:
    """Split *items* into ``(recent, previous)`` windows."""
    n = min(size, len(items))
    if n == 0:
        return [], []
    end = len(items)
    recent = list(items[end - n:])
    previous = list(items[max(0, end - 2 * n):end - n])
    return recent, previous


def _mean(values: Sequence[float], empty: float = 0.0) -> float:
    return sum(values) / len(values) if values else empty


def session_mean_pain(session: ExerciseSession) -> float:
    """Mean ``pain_during`` of a session; ``0`` when it has no entries."""
    return _mean([e.pain_during for e in session.exercises])


# ======================================================================
# Session trends
# ======================================================================


def _difficulty_trend(
    sessions: Sequence[ExerciseSession],
    min_votes: int,
) -> DifficultyTrend:
    votes = [e.difficulty for s in sessions for e in s.exercises]
    if len(votes) < min_votes:
        return "insufficient_data"
    half = len(votes) / 2
    if sum(1 for v in votes if v == Difficulty.TOO_EASY) > half:
        return "too_easy"
    if sum(1 for v in votes if v == Difficulty.TOO_HARD) > half:
        return "too_hard"
    return "just_right"


def _stability_rate(sessions: Sequence[ExerciseSession], stable_max: int) -> float:
    entries = [e for s in sessions for e in s.exercises]
    if not entries:
        return 1.0
    stable = sum(1 for e in entries if e.pain_during <= stable_max)
    return stable / len(entries)


def _trailing_count(items: Sequence[T], predicate) -> int:
    """Length of the run at the end of *items* where *predicate* holds."""
    count = 0
    for item in reversed(items):
        if not predicate(item):
            break
        count += 1
    return count


def analyze_session_trends(
    sessions: Sequence[ExerciseSession],
    as_of: datetime.date,
    thresholds: Optional[CoachThresholds] = None,
) -> SessionTrends:
    """Summarise exercise-session history, oldest first."""
    th = thresholds or DEFAULT_THRESHOLDS
    recent, previous = _windows(sessions, th.session_window)

    recent_avg = _mean([session_mean_pain(s) for s in recent])
    previous_avg = _mean([session_mean_pain(s) for s in previous])

    days_since: Optional[int] = None
    if sessions:
        days_since = (as_of - sessions[-1].date).days

    return SessionTrends(
        recent_avg_pain=recent_avg,
        previous_avg_pain=previous_avg,
        pain_trending_up=recent_avg > previous_avg + th.trend_hysteresis,
        low_pain_streak=_trailing_count(
            sessions, lambda s: session_mean_pain(s) < th.low_pain_session_mean,
        ),
        recent_stability_rate=_stability_rate(recent, th.stable_pain_max),
        recent_difficulty_trend=_difficulty_trend(recent, th.min_difficulty_votes),
        too_easy_streak=_trailing_count(
            sessions, lambda s: s.overall_difficulty == Difficulty.TOO_EASY,
        ),
        total_sessions=len(sessions),
        recent_regressions=sum(
            1 for s in recent
            if any(e.pain_during >= th.regression_pain for e in s.exercises)
        ),
        days_since_last_session=days_since,
    )


# ======================================================================
# Check-in trends
# ======================================================================


def check_in_streak(check_ins: Sequence[CheckIn], as_of: datetime.date) -> int:
    """Consecutive-day check-in streak ending today or yesterday.

    Two check-ins on the same date end the streak, as does any gap
    longer than one day.
    """
    if not check_ins:
        return 0
    dates = sorted((c.date for c in check_ins), reverse=True)
    if (as_of - dates[0]).days > 1:
        return 0
    streak = 1
    for newer, older in zip(dates, dates[1:]):
        if (newer - older).days != 1:
            break
        streak += 1
    return streak


def _direction(
    recent: float,
    previous: float,
    enough_data: bool,
    hysteresis: float,
) -> int:
    """``1`` when *recent* rose past the hysteresis band, ``-1`` when it
    fell below it, ``0`` otherwise or without enough data."""
    if not enough_data:
        return 0
    if recent > previous + hysteresis:
        return 1
    if recent < previous - hysteresis:
        return -1
    return 0


_PAIN_DIRECTIONS: dict[int, PainDirection] = {
    1: "worsening",
    0: "stable",
    -1: "improving",
}

_CONFIDENCE_DIRECTIONS: dict[int, ConfidenceDirection] = {
    1: "improving",
    0: "stable",
    -1: "declining",
}


def analyze_check_in_trends(
    check_ins: Sequence[CheckIn],
    as_of: datetime.date,
    thresholds: Optional[CoachThresholds] = None,
) -> CheckInTrends:
    """Summarise check-in history, oldest first."""
    th = thresholds or DEFAULT_THRESHOLDS
    recent, previous = _windows(check_ins, th.check_in_window)
    enough = (
        len(recent) >= th.min_direction_entries
        and len(previous) >= th.min_direction_entries
    )

    weekly_pain = _mean([c.pain_level for c in recent])
    previous_pain = _mean([c.pain_level for c in previous])
    weekly_conf = _mean([c.confidence_level for c in recent], empty=10.0)
    previous_conf = _mean([c.confidence_level for c in previous], empty=10.0)

    progressive = False
    if len(check_ins) >= 3:
        a, b, c = (ci.pain_level for ci in check_ins[-3:])
        progressive = a < b < c

    return CheckInTrends(
        weekly_avg_pain=weekly_pain,
        previous_week_avg_pain=previous_pain,
        pain_direction=_PAIN_DIRECTIONS[_direction(
            weekly_pain, previous_pain, enough, th.trend_hysteresis,
        )],
        weekly_avg_confidence=weekly_conf,
        previous_week_avg_confidence=previous_conf,
        confidence_direction=_CONFIDENCE_DIRECTIONS[_direction(
            weekly_conf, previous_conf, enough, th.trend_hysteresis,
        )],
        recent_reset_count=sum(1 for c in recent if c.mode_assigned == Mode.RESET),
        streak=check_in_streak(check_ins, as_of),
        progressive_worsening=progressive,
    )


def analyze_history(
    history: History,
    as_of: datetime.date,
    thresholds: Optional[CoachThresholds] = None,
) -> HistoryTrends:
    """Both trend read-models for one user and region."""
    return HistoryTrends(
        sessions=analyze_session_trends(history.sessions, as_of, thresholds),
        check_ins=analyze_check_in_trends(history.check_ins, as_of, thresholds),
    )
