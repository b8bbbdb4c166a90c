"""Tests for readiness and history schema validation."""

import datetime

import pytest
from pydantic import ValidationError

from app.schemas.history import Difficulty, ExerciseEntry, ExerciseSession
from app.schemas.readiness import (
    CalibrationProfile,
    ProblemZone,
    ProblemZoneStatus,
    ReadinessReport,
    toggle_sensation,
)


def _make_report(**overrides) -> ReadinessReport:
    defaults = {"confidence": 7, "resting_discomfort": 1}
    defaults.update(overrides)
    return ReadinessReport(**defaults)


# ======================================================================
# ReadinessReport
# ======================================================================


class TestReadinessReport:

    def test_defaults(self):
        report = _make_report()
        assert report.sensations == []
        assert report.movement_restrictions == []
        assert report.problem_zone_status == ProblemZoneStatus.SAME

    @pytest.mark.parametrize("field", ["confidence", "resting_discomfort"])
    @pytest.mark.parametrize("value", [-1, 11])
    def test_scale_bounds(self, field, value):
        with pytest.raises(ValidationError):
            _make_report(**{field: value})

    def test_positive_tags_dropped_when_mixed(self):
        report = _make_report(sensations=["good", "achy", "nothing"])
        assert report.sensations == ["achy"]

    def test_positive_tags_kept_alone(self):
        assert _make_report(sensations=["good"]).sensations == ["good"]

    def test_duplicates_collapse_in_order(self):
        report = _make_report(
            sensations=["stiff", "achy", "stiff"],
            movement_restrictions=["kneeling", "kneeling"],
        )
        assert report.sensations == ["stiff", "achy"]
        assert report.movement_restrictions == ["kneeling"]

    def test_unknown_activity_goal_rejected(self):
        with pytest.raises(ValidationError):
            _make_report(activity_goal="marathon")


class TestToggleSensation:

    def test_positive_replaces_selection(self):
        assert toggle_sensation(["achy", "stiff"], "good") == ["good"]

    def test_positive_toggles_off(self):
        assert toggle_sensation(["good"], "good") == []

    def test_negative_clears_positive(self):
        assert toggle_sensation(["nothing"], "achy") == ["achy"]

    def test_negative_toggles_off(self):
        assert toggle_sensation(["achy", "stiff"], "achy") == ["stiff"]


class TestCalibrationProfile:

    def test_no_zones(self):
        assert CalibrationProfile().primary_zone() is None

    def test_most_severe_wins(self):
        profile = CalibrationProfile(problem_zones=[
            ProblemZone(label="0-30°", severity=1),
            ProblemZone(label="60-90°", severity=3),
        ])
        assert profile.primary_zone().label == "60-90°"

    def test_first_wins_ties(self):
        profile = CalibrationProfile(problem_zones=[
            ProblemZone(label="30-60°", severity=2),
            ProblemZone(label="60-90°", severity=2),
        ])
        assert profile.primary_zone().label == "30-60°"


# ======================================================================
# ExerciseSession
# ======================================================================


class TestExerciseSession:

    def test_entry_needs_reps_or_duration(self):
        with pytest.raises(ValidationError, match="QUAD_SET"):
            ExerciseSession(
                date=datetime.date(2026, 1, 1),
                exercises=[ExerciseEntry(
                    exercise_id="QUAD_SET", sets=2,
                    difficulty=Difficulty.JUST_RIGHT, pain_during=1,
                )],
                overall_difficulty=Difficulty.JUST_RIGHT,
            )

    def test_skipped_entry_needs_nothing(self):
        session = ExerciseSession(
            date=datetime.date(2026, 1, 1),
            exercises=[ExerciseEntry(
                exercise_id="QUAD_SET", sets=0,
                difficulty=Difficulty.JUST_RIGHT, pain_during=0,
            )],
            overall_difficulty=Difficulty.JUST_RIGHT,
        )
        assert session.exercises[0].sets == 0

    def test_pain_bounds(self):
        with pytest.raises(ValidationError):
            ExerciseEntry(
                exercise_id="QUAD_SET", sets=1, reps=5,
                difficulty=Difficulty.JUST_RIGHT, pain_during=11,
            )
