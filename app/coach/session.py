"""
In-session regression controller.

After each drill the user reports pain and whether the region felt
stable.  The live session can only move down:

- pain at or above ``pain_stop``, or feeling unstable, switches to the
  RESET list with tighter thresholds;
- pain at or above ``pain_regress`` removes the region's high-demand
  drills from what is left;
- anything else leaves the session alone.

Nothing here raises the mode back up.  A new session starts from a new
check-in.
"""

from __future__ import annotations

import logging
from typing import Optional

from app.coach.thresholds import DEFAULT_THRESHOLDS, CoachThresholds
from app.regions.base import RegionPlugin
from app.schemas.coach import CoachState, DrillFeedback
from app.schemas.readiness import Mode

logger = logging.getLogger(__name__)

REASON_SWITCH_TO_RESET = "Pain or instability during drill. Switching to reset protocol."
REASON_REGRESSED = "Moderate pain reported. Removing higher-demand drills."


def adjust_plan_in_session(
    region: RegionPlugin,
    state: CoachState,
    feedback: DrillFeedback,
    thresholds: Optional[CoachThresholds] = None,
) -> CoachState:
    """Return the session state after one drill's feedback.

    *state* is not modified.
    """
    th = thresholds or DEFAULT_THRESHOLDS

    if feedback.pain >= state.pain_stop or not feedback.felt_stable:
        logger.info(
            "Session on %s switched to RESET after %s (pain=%d, stable=%s)",
            region.region_id, feedback.exercise_id, feedback.pain, feedback.felt_stable,
        )
        return CoachState(
            mode=Mode.RESET,
            plan=region.default_plan(Mode.RESET),
            pain_stop=th.reset_pain_stop,
            pain_regress=th.reset_pain_regress,
            reasoning=REASON_SWITCH_TO_RESET,
        )

    if feedback.pain >= state.pain_regress:
        high_demand = region.high_demand_drills
        remaining = [d for d in state.plan if d not in high_demand]
        if not remaining:
            remaining = region.default_plan(Mode.RESET)
        return state.model_copy(update={"plan": remaining, "reasoning": REASON_REGRESSED})

    return state
