"""
Mode decision: readiness + history trends -> RESET / TRAINING / GAME.

An ordered cascade, first match wins.  The order is the priority:

1. **Safety**.  Low confidence, high resting discomfort, any danger
   sensation, and (when history exists) three check-ins of rising pain,
   repeated pain spikes across recent sessions or a rising session pain
   trend all force RESET.
2. **Stated intent**.  A game-day goal gets GAME only when everything
   is green, TRAINING otherwise.  A rest goal gets RESET.
3. **Capacity building**.  TRAINING at full, moderate or cautious
   framing depending on confidence and warnings; RESET when confidence
   is below the moderate line.

Without trends (first use) the history rules and the difficulty note
are skipped, never defaulted.

The function is pure: the same report and trends always produce the
same decision.
"""

from __future__ import annotations

import logging
from typing import Optional

from app.coach.thresholds import DEFAULT_THRESHOLDS, CoachThresholds
from app.regions.base import RegionPlugin
from app.schemas.coach import ModeDecision
from app.schemas.readiness import ActivityGoal, Mode, ReadinessReport
from app.schemas.trends import HistoryTrends

logger = logging.getLogger(__name__)

# ======================================================================
# Reasoning strings
# ======================================================================

REASON_LOW_CONFIDENCE = "Low confidence. Focus on restoring trust."
REASON_HIGH_DISCOMFORT = "Significant resting discomfort. Let's calm things down."
REASON_DANGER = "Concerning sensations reported. Taking it easy today."
REASON_PROGRESSIVE = "Pain has risen three check-ins in a row. Protective day."
REASON_REGRESSIONS = "Several recent sessions hit high pain. Rebuilding tolerance first."
REASON_PAIN_TRENDING = "Session pain is trending up. Backing off before loading again."
REASON_GAME = "Game day prep. Quick activation, no deep loading."
REASON_NOT_GAME_READY = "Not quite ready for game intensity. Smart training instead."
REASON_REST = "Rest day selected. Light movement to maintain mobility."
REASON_SOLID = "Feeling solid. Full training protocol."
REASON_MODERATE = "Moderate confidence. Training with attention to feedback."
REASON_CAUTIOUS = "Some sensations to monitor. Modified training."
REASON_FOUNDATION = "Taking it easy today. Build the foundation."

NOTE_TOO_EASY = " Recent sessions felt easy, keep pushing."
NOTE_TOO_HARD = " Recent sessions felt hard, listen to your body."


# ======================================================================
# Cascade stages
# ======================================================================


def _safety_gate(
    region: RegionPlugin,
    report: ReadinessReport,
    trends: Optional[HistoryTrends],
    th: CoachThresholds,
) -> Optional[str]:
    """Reasoning for a forced RESET, or ``None`` when nothing trips."""
    if report.confidence < th.low_confidence:
        return REASON_LOW_CONFIDENCE
    if report.resting_discomfort > th.high_discomfort:
        return REASON_HIGH_DISCOMFORT
    if region.has_danger(report.sensations):
        return REASON_DANGER
    if trends is None:
        return None

    if trends.check_ins.progressive_worsening:
        return REASON_PROGRESSIVE
    sessions = trends.sessions
    if (
        sessions.recent_regressions >= th.regressions_threshold
        and sessions.total_sessions >= th.min_sessions_for_regressions
    ):
        return REASON_REGRESSIONS
    if (
        sessions.recent_avg_pain > sessions.previous_avg_pain + th.trend_hysteresis
        and sessions.recent_avg_pain > th.pain_trending_threshold
    ):
        return REASON_PAIN_TRENDING
    return None


def _all_green(
    region: RegionPlugin,
    report: ReadinessReport,
    th: CoachThresholds,
) -> bool:
    return (
        report.confidence >= th.high_confidence
        and not region.has_warning(report.sensations)
        and report.resting_discomfort <= th.low_discomfort
    )


def _difficulty_note(trends: Optional[HistoryTrends]) -> str:
    if trends is None:
        return ""
    trend = trends.sessions.recent_difficulty_trend
    if trend == "too_easy":
        return NOTE_TOO_EASY
    if trend == "too_hard":
        return NOTE_TOO_HARD
    return ""


def _cascade(
    region: RegionPlugin,
    report: ReadinessReport,
    trends: Optional[HistoryTrends],
    th: CoachThresholds,
) -> ModeDecision:
    reason = _safety_gate(region, report, trends, th)
    if reason is not None:
        return ModeDecision(mode=Mode.RESET, reasoning=reason)

    if report.activity_goal == ActivityGoal.GAME:
        if _all_green(region, report, th):
            return ModeDecision(mode=Mode.GAME, reasoning=REASON_GAME)
        return ModeDecision(mode=Mode.TRAINING, reasoning=REASON_NOT_GAME_READY)
    if report.activity_goal == ActivityGoal.REST:
        return ModeDecision(mode=Mode.RESET, reasoning=REASON_REST)

    if _all_green(region, report, th):
        return ModeDecision(
            mode=Mode.TRAINING, reasoning=REASON_SOLID + _difficulty_note(trends),
        )
    if report.confidence >= th.moderate_confidence:
        if region.has_warning(report.sensations):
            return ModeDecision(mode=Mode.TRAINING, reasoning=REASON_CAUTIOUS)
        return ModeDecision(mode=Mode.TRAINING, reasoning=REASON_MODERATE)
    return ModeDecision(mode=Mode.RESET, reasoning=REASON_FOUNDATION)


# ======================================================================
# Public API
# ======================================================================


def decide_mode(
    region: RegionPlugin,
    report: ReadinessReport,
    trends: Optional[HistoryTrends] = None,
    thresholds: Optional[CoachThresholds] = None,
) -> ModeDecision:
    """Choose today's mode for *region*.

    Parameters
    ----------
    region : RegionPlugin
        Supplies the sensation classifier.
    report : ReadinessReport
        Today's self-report.
    trends : HistoryTrends, optional
        Aggregated history.  ``None`` on first use.
    thresholds : CoachThresholds, optional
        Overrides for :data:`DEFAULT_THRESHOLDS`.
    """
    th = thresholds or DEFAULT_THRESHOLDS
    decision = _cascade(region, report, trends, th)
    logger.debug(
        "decide_mode region=%s confidence=%d discomfort=%d goal=%s -> %s",
        region.region_id,
        report.confidence,
        report.resting_discomfort,
        report.activity_goal.value,
        decision.mode.value,
    )
    return decision
