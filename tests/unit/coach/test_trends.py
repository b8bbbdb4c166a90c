"""
Unit tests for the trend analyzer.

Covers window splitting, the session pain mean (including sessions with
no exercises), streaks, difficulty majority vote and the check-in
direction rules.
"""

import datetime

import pytest

from app.coach.trends import (
    analyze_check_in_trends,
    analyze_history,
    analyze_session_trends,
    check_in_streak,
    session_mean_pain,
)
from app.schemas.history import (
    CheckIn,
    Difficulty,
    ExerciseEntry,
    ExerciseSession,
    History,
)
from app.schemas.readiness import Mode

TODAY = datetime.date(2026, 3, 10)


# ======================================================================
# Helpers
# ======================================================================


def _make_entry(
    pain: int = 0,
    difficulty: Difficulty = Difficulty.JUST_RIGHT,
    exercise_id: str = "QUAD_SET",
) -> ExerciseEntry:
    return ExerciseEntry(
        exercise_id=exercise_id, sets=2, reps=10,
        difficulty=difficulty, pain_during=pain,
    )


def _make_session(
    pains: list[int],
    days_ago: int = 0,
    difficulty: Difficulty = Difficulty.JUST_RIGHT,
    overall: Difficulty = Difficulty.JUST_RIGHT,
) -> ExerciseSession:
    return ExerciseSession(
        date=TODAY - datetime.timedelta(days=days_ago),
        exercises=[_make_entry(p, difficulty) for p in pains],
        overall_difficulty=overall,
    )


def _make_sessions(pain_means: list[int], **kwargs) -> list[ExerciseSession]:
    """One single-entry session per value, oldest first, one day apart."""
    n = len(pain_means)
    return [_make_session([p], days_ago=n - 1 - i, **kwargs) for i, p in enumerate(pain_means)]


def _make_check_in(
    pain: int = 2,
    days_ago: int = 0,
    confidence: int = 7,
    mode: Mode = Mode.TRAINING,
) -> CheckIn:
    return CheckIn(
        date=TODAY - datetime.timedelta(days=days_ago),
        pain_level=pain,
        function_level=confidence,
        confidence_level=confidence,
        mode_assigned=mode,
    )


def _make_check_ins(pains: list[int], **kwargs) -> list[CheckIn]:
    n = len(pains)
    return [_make_check_in(p, days_ago=n - 1 - i, **kwargs) for i, p in enumerate(pains)]


# ======================================================================
# Session trends
# ======================================================================


class TestSessionMeans:
    """Window means over per-session mean pain."""

    def test_no_sessions_is_neutral(self):
        t = analyze_session_trends([], TODAY)
        assert t.recent_avg_pain == 0.0
        assert t.previous_avg_pain == 0.0
        assert t.pain_trending_up is False
        assert t.recent_stability_rate == 1.0
        assert t.recent_difficulty_trend == "insufficient_data"
        assert t.total_sessions == 0
        assert t.recent_regressions == 0
        assert t.days_since_last_session is None

    def test_session_mean(self):
        assert session_mean_pain(_make_session([2, 4, 6])) == pytest.approx(4.0)

    def test_zero_exercise_session_counts_as_zero(self):
        # An empty session is averaged in as pain 0, diluting the window.
        sessions = [_make_session([6], days_ago=1), _make_session([], days_ago=0)]
        t = analyze_session_trends(sessions, TODAY)
        assert t.recent_avg_pain == pytest.approx(3.0)

    def test_recent_and_previous_windows(self):
        # previous = first 5, recent = last 5
        sessions = _make_sessions([1, 1, 1, 1, 1, 3, 3, 3, 3, 3])
        t = analyze_session_trends(sessions, TODAY)
        assert t.recent_avg_pain == pytest.approx(3.0)
        assert t.previous_avg_pain == pytest.approx(1.0)
        assert t.pain_trending_up is True

    def test_windows_shrink_with_short_history(self):
        # N=3: recent is all three, previous is empty
        t = analyze_session_trends(_make_sessions([2, 2, 2]), TODAY)
        assert t.recent_avg_pain == pytest.approx(2.0)
        assert t.previous_avg_pain == 0.0

    def test_previous_window_can_be_partial(self):
        # N=7: recent = last 5, previous = first 2
        t = analyze_session_trends(_make_sessions([4, 4, 1, 1, 1, 1, 1]), TODAY)
        assert t.previous_avg_pain == pytest.approx(4.0)
        assert t.recent_avg_pain == pytest.approx(1.0)

    def test_hysteresis(self):
        t = analyze_session_trends(_make_sessions([2] * 5 + [2] * 4 + [4]), TODAY)
        # recent mean 2.4 vs previous 2.0: inside the 0.5 band
        assert t.pain_trending_up is False


class TestSessionStreaks:

    def test_low_pain_streak_stops_at_first_high(self):
        t = analyze_session_trends(_make_sessions([1, 3, 1, 0, 1]), TODAY)
        assert t.low_pain_streak == 3

    def test_low_pain_streak_boundary(self):
        # mean exactly 2 is not low
        t = analyze_session_trends(_make_sessions([1, 2]), TODAY)
        assert t.low_pain_streak == 0

    def test_too_easy_streak_uses_overall_difficulty(self):
        sessions = [
            _make_session([0], days_ago=2, overall=Difficulty.JUST_RIGHT),
            _make_session([0], days_ago=1, overall=Difficulty.TOO_EASY,
                          difficulty=Difficulty.TOO_HARD),
            _make_session([0], days_ago=0, overall=Difficulty.TOO_EASY,
                          difficulty=Difficulty.TOO_HARD),
        ]
        assert analyze_session_trends(sessions, TODAY).too_easy_streak == 2


class TestSessionQuality:

    def test_stability_rate(self):
        sessions = [_make_session([0, 2, 3, 5])]
        assert analyze_session_trends(sessions, TODAY).recent_stability_rate == pytest.approx(0.5)

    def test_stability_rate_without_entries(self):
        sessions = [_make_session([])]
        assert analyze_session_trends(sessions, TODAY).recent_stability_rate == 1.0

    def test_regressions_count_sessions_not_entries(self):
        sessions = [
            _make_session([6, 7], days_ago=2),
            _make_session([1], days_ago=1),
            _make_session([6], days_ago=0),
        ]
        assert analyze_session_trends(sessions, TODAY).recent_regressions == 2

    def test_regressions_only_in_recent_window(self):
        sessions = _make_sessions([8, 1, 1, 1, 1, 1])
        assert analyze_session_trends(sessions, TODAY).recent_regressions == 0

    def test_days_since_last_session(self):
        sessions = [_make_session([1], days_ago=4)]
        assert analyze_session_trends(sessions, TODAY).days_since_last_session == 4


class TestDifficultyTrend:

    def test_needs_three_votes(self):
        sessions = [_make_session([0, 0], difficulty=Difficulty.TOO_EASY)]
        assert analyze_session_trends(sessions, TODAY).recent_difficulty_trend == "insufficient_data"

    def test_strict_majority_too_easy(self):
        sessions = [_make_session([0, 0, 0], difficulty=Difficulty.TOO_EASY)]
        assert analyze_session_trends(sessions, TODAY).recent_difficulty_trend == "too_easy"

    def test_strict_majority_too_hard(self):
        sessions = [
            _make_session([3, 3], days_ago=1, difficulty=Difficulty.TOO_HARD),
            _make_session([3], days_ago=0, difficulty=Difficulty.JUST_RIGHT),
        ]
        assert analyze_session_trends(sessions, TODAY).recent_difficulty_trend == "too_hard"

    def test_exact_half_is_just_right(self):
        sessions = [
            _make_session([0, 0], days_ago=1, difficulty=Difficulty.TOO_EASY),
            _make_session([0, 0], days_ago=0, difficulty=Difficulty.JUST_RIGHT),
        ]
        assert analyze_session_trends(sessions, TODAY).recent_difficulty_trend == "just_right"


# ======================================================================
# Check-in trends
# ======================================================================


class TestCheckInDirections:

    def test_no_check_ins_is_neutral(self):
        t = analyze_check_in_trends([], TODAY)
        assert t.weekly_avg_pain == 0.0
        assert t.pain_direction == "stable"
        assert t.weekly_avg_confidence == 10.0
        assert t.previous_week_avg_confidence == 10.0
        assert t.confidence_direction == "stable"
        assert t.recent_reset_count == 0
        assert t.streak == 0
        assert t.progressive_worsening is False

    def test_single_check_in_is_stable(self):
        t = analyze_check_in_trends([_make_check_in(pain=9)], TODAY)
        assert t.pain_direction == "stable"

    def test_worsening(self):
        t = analyze_check_in_trends(_make_check_ins([1] * 7 + [4] * 7), TODAY)
        assert t.pain_direction == "worsening"
        assert t.weekly_avg_pain == pytest.approx(4.0)
        assert t.previous_week_avg_pain == pytest.approx(1.0)

    def test_improving(self):
        t = analyze_check_in_trends(_make_check_ins([5] * 7 + [2] * 7), TODAY)
        assert t.pain_direction == "improving"

    def test_needs_three_in_previous_window(self):
        # N=4: recent 4, previous 0
        t = analyze_check_in_trends(_make_check_ins([0, 0, 9, 9]), TODAY)
        assert t.pain_direction == "stable"

    def test_three_in_each_window_is_enough(self):
        # N=10: recent 7, previous 3
        t = analyze_check_in_trends(_make_check_ins([1, 1, 1] + [5] * 7), TODAY)
        assert t.pain_direction == "worsening"

    def test_confidence_declining(self):
        check_ins = (
            [_make_check_in(days_ago=13 - i, confidence=8) for i in range(7)]
            + [_make_check_in(days_ago=6 - i, confidence=4) for i in range(7)]
        )
        t = analyze_check_in_trends(check_ins, TODAY)
        assert t.confidence_direction == "declining"
        assert t.pain_direction == "stable"

    def test_reset_count_in_recent_window(self):
        check_ins = (
            [_make_check_in(days_ago=9 - i, mode=Mode.RESET) for i in range(3)]
            + [_make_check_in(days_ago=6 - i, mode=Mode.RESET if i % 2 else Mode.TRAINING)
               for i in range(7)]
        )
        assert analyze_check_in_trends(check_ins, TODAY).recent_reset_count == 3


class TestProgressiveWorsening:

    def test_strictly_increasing(self):
        t = analyze_check_in_trends(_make_check_ins([2, 4, 6]), TODAY)
        assert t.progressive_worsening is True

    def test_plateau_is_not_worsening(self):
        t = analyze_check_in_trends(_make_check_ins([2, 4, 4]), TODAY)
        assert t.progressive_worsening is False

    def test_only_last_three_count(self):
        t = analyze_check_in_trends(_make_check_ins([9, 1, 2, 3]), TODAY)
        assert t.progressive_worsening is True

    def test_two_check_ins_are_not_enough(self):
        t = analyze_check_in_trends(_make_check_ins([1, 8]), TODAY)
        assert t.progressive_worsening is False


class TestStreak:

    def test_gap_stops_streak(self):
        check_ins = [_make_check_in(days_ago=d) for d in (4, 2, 1, 0)]
        assert check_in_streak(check_ins, TODAY) == 3

    def test_yesterday_still_counts(self):
        check_ins = [_make_check_in(days_ago=d) for d in (3, 2, 1)]
        assert check_in_streak(check_ins, TODAY) == 3

    def test_stale_latest_is_zero(self):
        check_ins = [_make_check_in(days_ago=d) for d in (4, 3, 2)]
        assert check_in_streak(check_ins, TODAY) == 0

    def test_order_does_not_matter(self):
        check_ins = [_make_check_in(days_ago=d) for d in (0, 2, 1)]
        assert check_in_streak(check_ins, TODAY) == 3

    def test_same_day_duplicate_breaks_streak(self):
        check_ins = [_make_check_in(days_ago=d) for d in (2, 1, 0, 0)]
        assert check_in_streak(check_ins, TODAY) == 1

    def test_empty(self):
        assert check_in_streak([], TODAY) == 0


class TestAnalyzeHistory:

    def test_combines_both_read_models(self):
        history = History(
            check_ins=_make_check_ins([2, 4, 6]),
            sessions=_make_sessions([1, 1]),
        )
        trends = analyze_history(history, TODAY)
        assert trends.check_ins.progressive_worsening is True
        assert trends.sessions.total_sessions == 2
