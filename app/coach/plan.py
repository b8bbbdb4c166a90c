"""
Plan builder and coach-state reducer.

:func:`build_plan` turns a mode into an ordered drill list, dropping
drills that load a movement the user has flagged.  When filtering leaves
fewer than two drills the full RESET list is used instead, so a 0- or
1-drill plan is never shown.

:func:`init_coach_state` is the whole check-in pipeline as one pure
function: trends -> mode -> plan -> pain thresholds -> calibration note.
"""

from __future__ import annotations

import datetime
import logging
from typing import Iterable, Optional

from app.coach.mode import decide_mode
from app.coach.thresholds import DEFAULT_THRESHOLDS, CoachThresholds
from app.coach.trends import analyze_history
from app.regions.base import RegionPlugin
from app.schemas.coach import CoachState
from app.schemas.history import History
from app.schemas.readiness import CalibrationProfile, Mode, ReadinessReport

logger = logging.getLogger(__name__)


# ======================================================================
# Plan building
# ======================================================================


def filter_by_restrictions(
    region: RegionPlugin,
    plan: list[str],
    restrictions: Iterable[str],
) -> list[str]:
    """Drop drills tagged with any restricted movement; order is kept.

    Restriction tags the region does not know simply match nothing.
    """
    restricted = set(restrictions)
    if not restricted:
        return list(plan)
    return [d for d in plan if not restricted.intersection(region.movement_tags(d))]


def build_plan(
    region: RegionPlugin,
    mode: Mode,
    restrictions: Iterable[str] = (),
    thresholds: Optional[CoachThresholds] = None,
) -> list[str]:
    """Default plan for *mode*, filtered by *restrictions*."""
    th = thresholds or DEFAULT_THRESHOLDS
    plan = filter_by_restrictions(region, region.default_plan(mode), restrictions)
    if len(plan) < th.min_plan_size:
        logger.debug(
            "Plan for %s/%s filtered to %d drills, using RESET list",
            region.region_id, mode.value, len(plan),
        )
        return region.default_plan(Mode.RESET)
    return plan


# ======================================================================
# Pain thresholds and calibration
# ======================================================================


def pain_thresholds(mode: Mode, thresholds: Optional[CoachThresholds] = None) -> tuple[int, int]:
    """``(pain_stop, pain_regress)`` for a fresh session in *mode*."""
    th = thresholds or DEFAULT_THRESHOLDS
    stop = th.pain_stop_game if mode == Mode.GAME else th.pain_stop_training
    return stop, th.pain_regress


def annotate_with_calibration(
    reasoning: str,
    mode: Mode,
    calibration: Optional[CalibrationProfile],
) -> str:
    """Append the primary problem zone to *reasoning*.  Never changes mode."""
    if calibration is None:
        return reasoning
    zone = calibration.primary_zone()
    if zone is None:
        return reasoning
    if mode == Mode.TRAINING:
        return f"{reasoning} Working around your {zone.label} zone."
    if mode == Mode.RESET:
        return f"{reasoning} Protecting your {zone.label} range."
    return reasoning


# ======================================================================
# Reducer
# ======================================================================


def init_coach_state(
    region: RegionPlugin,
    report: ReadinessReport,
    history: Optional[History] = None,
    calibration: Optional[CalibrationProfile] = None,
    as_of: Optional[datetime.date] = None,
    thresholds: Optional[CoachThresholds] = None,
) -> CoachState:
    """Compute today's coach state.

    *history* of ``None`` means first use: no trend rules apply.  An
    empty :class:`History` is still history, and its neutral trends are
    passed through.  *as_of* defaults to today and only affects
    date-relative trend fields.
    """
    th = thresholds or DEFAULT_THRESHOLDS
    trends = None
    if history is not None:
        trends = analyze_history(history, as_of or datetime.date.today(), th)

    decision = decide_mode(region, report, trends, th)
    plan = build_plan(region, decision.mode, report.movement_restrictions, th)
    pain_stop, pain_regress = pain_thresholds(decision.mode, th)

    return CoachState(
        mode=decision.mode,
        plan=plan,
        pain_stop=pain_stop,
        pain_regress=pain_regress,
        reasoning=annotate_with_calibration(decision.reasoning, decision.mode, calibration),
    )
