"""
Unit tests for the in-session regression controller.
"""

import pytest

from app.coach.plan import init_coach_state
from app.coach.session import REASON_REGRESSED, REASON_SWITCH_TO_RESET, adjust_plan_in_session
from app.regions.knee.plugin import KNEE_PLANS, KneePlugin
from app.regions.shoulder.plugin import ShoulderPlugin
from app.schemas.coach import CoachState, DrillFeedback
from app.schemas.readiness import Mode, ReadinessReport

KNEE = KneePlugin()


def _training_state() -> CoachState:
    return CoachState(
        mode=Mode.TRAINING,
        plan=list(KNEE_PLANS[Mode.TRAINING]),
        pain_stop=5,
        pain_regress=3,
        reasoning="Feeling solid. Full training protocol.",
    )


def _feedback(pain: int, stable: bool = True, exercise_id: str = "WALL_BOW") -> DrillFeedback:
    return DrillFeedback(exercise_id=exercise_id, pain=pain, felt_stable=stable)


class TestSwitchToReset:

    def test_high_pain_and_unstable(self):
        new = adjust_plan_in_session(KNEE, _training_state(), _feedback(9, stable=False))
        assert new.mode == Mode.RESET
        assert new.plan == KNEE_PLANS[Mode.RESET]
        assert new.pain_stop == 4
        assert new.pain_regress == 2
        assert new.reasoning == REASON_SWITCH_TO_RESET

    @pytest.mark.parametrize("pain", [5, 6, 10])
    def test_pain_at_stop(self, pain):
        assert adjust_plan_in_session(KNEE, _training_state(), _feedback(pain)).mode == Mode.RESET

    def test_unstable_without_pain(self):
        assert adjust_plan_in_session(KNEE, _training_state(), _feedback(0, stable=False)).mode == Mode.RESET

    def test_input_state_untouched(self):
        state = _training_state()
        before = state.model_dump()
        adjust_plan_in_session(KNEE, state, _feedback(9))
        assert state.model_dump() == before


class TestRegress:

    @pytest.mark.parametrize("pain", [3, 4])
    def test_removes_high_demand(self, pain):
        new = adjust_plan_in_session(KNEE, _training_state(), _feedback(pain))
        assert new.mode == Mode.TRAINING
        assert new.plan == ["FOOT_TRIPOD", "GLUTE_BRIDGE_HEEL_DRAG",
                            "HAM_QUAD_COCONTRACT", "WALL_BOW"]
        assert (new.pain_stop, new.pain_regress) == (5, 3)
        assert new.reasoning == REASON_REGRESSED

    def test_only_high_demand_left_becomes_reset_list(self):
        state = _training_state().model_copy(
            update={"plan": ["SPANISH_SQUAT_MICRO", "STEP_DOWN_SUPPORTED"]},
        )
        new = adjust_plan_in_session(KNEE, state, _feedback(3))
        assert new.plan == KNEE_PLANS[Mode.RESET]
        assert new.mode == Mode.TRAINING


class TestNoChange:

    @pytest.mark.parametrize("pain", [0, 1, 2])
    def test_low_pain_is_identity(self, pain):
        state = _training_state()
        assert adjust_plan_in_session(KNEE, state, _feedback(pain)) is state


class TestMonotonicity:
    """No sequence of feedback raises the mode or adds a drill."""

    def test_feedback_sequence_never_escalates(self):
        shoulder = ShoulderPlugin()
        report = ReadinessReport(confidence=8, resting_discomfort=0, sensations=["good"])
        state = init_coach_state(shoulder, report)
        order = [Mode.RESET, Mode.TRAINING, Mode.GAME]
        for pain, stable in [(0, True), (3, True), (1, True), (4, True), (2, False), (0, True)]:
            new = adjust_plan_in_session(shoulder, state, _feedback(pain, stable))
            assert order.index(new.mode) <= order.index(state.mode)
            if new.mode == state.mode:
                assert set(new.plan) <= set(state.plan)
            state = new
        assert state.mode == Mode.RESET
