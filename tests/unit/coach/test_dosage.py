"""
Unit tests for per-exercise dosage adaptation.
"""

import datetime

import pytest

from app.coach.dosage import (
    LABEL_ADVANCED,
    LABEL_EASED,
    LABEL_STANDARD,
    adapted_dosage_tier,
    select_dosage,
)
from app.regions.knee.plugin import KneePlugin
from app.schemas.coach import DosageTier
from app.schemas.history import Difficulty, ExerciseEntry, ExerciseSession
from app.schemas.region import Dosage, DosageType

TODAY = datetime.date(2026, 3, 10)
KNEE = KneePlugin()

E = Difficulty.TOO_EASY
J = Difficulty.JUST_RIGHT
H = Difficulty.TOO_HARD


def _make_session(days_ago: int, *entries: tuple[str, int, Difficulty]) -> ExerciseSession:
    return ExerciseSession(
        date=TODAY - datetime.timedelta(days=days_ago),
        exercises=[
            ExerciseEntry(exercise_id=ex, sets=2, reps=8, pain_during=pain, difficulty=diff)
            for ex, pain, diff in entries
        ],
        overall_difficulty=J,
    )


def _history(*feedback: tuple[int, Difficulty], exercise_id: str = "WALL_BOW"):
    """One session per feedback item, oldest first."""
    n = len(feedback)
    return [
        _make_session(n - i, (exercise_id, pain, diff))
        for i, (pain, diff) in enumerate(feedback)
    ]


# ======================================================================
# Tier resolution
# ======================================================================


class TestAdaptedTier:

    def test_no_feedback_is_default(self):
        assert adapted_dosage_tier("WALL_BOW", []) == DosageTier.DEFAULT

    def test_other_exercises_are_ignored(self):
        sessions = _history((9, H), exercise_id="QUAD_SET")
        assert adapted_dosage_tier("WALL_BOW", sessions) == DosageTier.DEFAULT

    def test_three_easy_painless_is_max(self):
        assert adapted_dosage_tier("WALL_BOW", _history((0, E), (0, E), (0, E))) == DosageTier.MAX

    def test_two_easy_is_not_enough(self):
        assert adapted_dosage_tier("WALL_BOW", _history((0, E), (0, E))) == DosageTier.DEFAULT

    def test_single_high_pain_is_min(self):
        assert adapted_dosage_tier("WALL_BOW", _history((0, E), (0, E), (5, E))) == DosageTier.MIN

    def test_pain_four_is_not_min(self):
        assert adapted_dosage_tier("WALL_BOW", _history((4, J))) == DosageTier.DEFAULT

    def test_too_hard_is_min(self):
        assert adapted_dosage_tier("WALL_BOW", _history((0, H))) == DosageTier.MIN

    def test_only_last_feedback_can_regress(self):
        sessions = _history((9, H), (0, E), (0, E), (0, E))
        assert adapted_dosage_tier("WALL_BOW", sessions) == DosageTier.MAX

    def test_pain_two_blocks_progression(self):
        sessions = _history((0, E), (2, E), (0, E))
        assert adapted_dosage_tier("WALL_BOW", sessions) == DosageTier.DEFAULT

    def test_newest_by_date_not_by_list_order(self):
        sessions = [
            _make_session(0, ("WALL_BOW", 8, H)),
            _make_session(3, ("WALL_BOW", 0, E)),
        ]
        assert adapted_dosage_tier("WALL_BOW", sessions) == DosageTier.MIN

    def test_later_session_on_same_date_is_newest(self):
        sessions = [
            _make_session(0, ("WALL_BOW", 0, J)),
            _make_session(0, ("WALL_BOW", 5, J)),
        ]
        assert adapted_dosage_tier("WALL_BOW", sessions) == DosageTier.MIN

    def test_same_date_easy_streak_after_painful_morning(self):
        sessions = [
            _make_session(1, ("WALL_BOW", 0, E)),
            _make_session(0, ("WALL_BOW", 6, H)),
            _make_session(0, ("WALL_BOW", 0, E)),
            _make_session(0, ("WALL_BOW", 1, E)),
        ]
        # newest first: 1/E, 0/E, 6/H -> the too-hard entry breaks the streak
        assert adapted_dosage_tier("WALL_BOW", sessions) == DosageTier.DEFAULT

    def test_repeats_within_one_session_count(self):
        sessions = [_make_session(0, ("WALL_BOW", 0, E), ("WALL_BOW", 0, E), ("WALL_BOW", 1, E))]
        assert adapted_dosage_tier("WALL_BOW", sessions) == DosageTier.MAX


# ======================================================================
# Dosage selection
# ======================================================================


class TestSelectDosage:

    DEFAULT = Dosage(type=DosageType.REPS, value=10, sets=2)
    MINIMUM = Dosage(type=DosageType.REPS, value=5, sets=2)
    MAXIMUM = Dosage(type=DosageType.REPS, value=15, sets=3)

    @pytest.mark.parametrize("tier,expected,label", [
        (DosageTier.MIN, "MINIMUM", LABEL_EASED),
        (DosageTier.DEFAULT, "DEFAULT", LABEL_STANDARD),
        (DosageTier.MAX, "MAXIMUM", LABEL_ADVANCED),
    ])
    def test_tier_payloads(self, tier, expected, label):
        sel = select_dosage(self.DEFAULT, self.MINIMUM, self.MAXIMUM, tier)
        assert sel.dosage == getattr(self, expected)
        assert sel.label == label

    @pytest.mark.parametrize("tier", [DosageTier.MIN, DosageTier.MAX])
    def test_missing_tier_falls_back(self, tier):
        sel = select_dosage(self.DEFAULT, None, None, tier)
        assert sel.dosage == self.DEFAULT
        assert sel.label == LABEL_STANDARD


class TestRegionDosage:

    def test_unknown_drill(self):
        assert KNEE.dosage_for("NOPE", []) is None

    def test_advanced_wall_bow(self):
        result = KNEE.dosage_for("WALL_BOW", _history((0, E), (1, E), (0, E)))
        assert result.tier == DosageTier.MAX
        assert result.label == LABEL_ADVANCED
        assert result.dosage.value == 60

    def test_eased_without_min_payload(self):
        # HAM_QUAD_COCONTRACT has no min dosage
        sessions = _history((6, H), exercise_id="HAM_QUAD_COCONTRACT")
        result = KNEE.dosage_for("HAM_QUAD_COCONTRACT", sessions)
        assert result.tier == DosageTier.MIN
        assert result.label == LABEL_STANDARD
        assert result.dosage == KNEE.get_drill("HAM_QUAD_COCONTRACT").default_dosage
