"""
Coach threshold table.

Every number the coach compares against lives here.  Engine functions
take an optional ``thresholds`` argument and fall back to
:data:`DEFAULT_THRESHOLDS`; a deployment can override individual values
through ``COACH_THRESHOLDS_JSON`` (see :func:`thresholds_from_settings`),
parsed once per process by :func:`configured_thresholds`.

Scales are the 0-10 self-report scales used throughout the check-in.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field

from app.core.config import settings

logger = logging.getLogger(__name__)


class CoachThresholds(BaseModel):
    """Named constants for the mode cascade, trends, dosage and session."""

    # Mode decision
    low_confidence: int = Field(default=4, ge=0, le=10)
    moderate_confidence: int = Field(default=5, ge=0, le=10)
    high_confidence: int = Field(default=7, ge=0, le=10)
    high_discomfort: int = Field(default=5, ge=0, le=10)
    low_discomfort: int = Field(default=2, ge=0, le=10)

    # Session-history safety gates
    trend_hysteresis: float = Field(default=0.5, ge=0.0)
    pain_trending_threshold: float = Field(default=4.0, ge=0.0, le=10.0)
    regressions_threshold: int = Field(default=2, ge=1)
    min_sessions_for_regressions: int = Field(default=3, ge=1)

    # Trend windows
    session_window: int = Field(default=5, ge=1)
    check_in_window: int = Field(default=7, ge=1)
    min_direction_entries: int = Field(default=3, ge=1)
    low_pain_session_mean: float = Field(default=2.0, ge=0.0)
    stable_pain_max: int = Field(default=2, ge=0, le=10)
    regression_pain: int = Field(default=6, ge=0, le=10)
    min_difficulty_votes: int = Field(default=3, ge=1)

    # In-session pain thresholds
    pain_stop_training: int = Field(default=5, ge=0, le=10)
    pain_stop_game: int = Field(default=4, ge=0, le=10)
    pain_regress: int = Field(default=3, ge=0, le=10)
    reset_pain_stop: int = Field(default=4, ge=0, le=10)
    reset_pain_regress: int = Field(default=2, ge=0, le=10)

    # Minimum plan size after restriction filtering
    min_plan_size: int = Field(default=2, ge=1)

    # Dosage adaptation
    dosage_regress_pain: int = Field(default=4, ge=0, le=10)
    dosage_progress_pain: int = Field(default=2, ge=0, le=10)
    dosage_progress_streak: int = Field(default=3, ge=1)


DEFAULT_THRESHOLDS = CoachThresholds()


def thresholds_from_settings(raw: Optional[str] = None) -> CoachThresholds:
    """Build the process-wide threshold table.

    *raw* defaults to ``settings.COACH_THRESHOLDS_JSON``: a JSON object
    whose keys override individual defaults.  An empty string means no
    override.  Unknown keys and out-of-range values raise ``ValueError``.
    """
    if raw is None:
        raw = settings.COACH_THRESHOLDS_JSON
    if not raw or not raw.strip():
        return DEFAULT_THRESHOLDS

    overrides = json.loads(raw)
    if not isinstance(overrides, dict):
        raise ValueError("COACH_THRESHOLDS_JSON must be a JSON object")
    unknown = set(overrides) - set(CoachThresholds.model_fields)
    if unknown:
        raise ValueError(f"Unknown coach thresholds: {sorted(unknown)}")

    merged = DEFAULT_THRESHOLDS.model_dump() | overrides
    logger.info("Coach thresholds overridden: %s", sorted(overrides))
    return CoachThresholds.model_validate(merged)


@lru_cache(maxsize=1)
def configured_thresholds() -> CoachThresholds:
    """Threshold table for this process, parsed from settings once."""
    return thresholds_from_settings()
