"""
Per-exercise dosage adaptation.

The tier for an exercise is read from that exercise's own feedback,
most recent first:

- no feedback yet            -> ``default``
- last pain > 4 or too hard  -> ``min``  (one data point is enough)
- last 3 all too easy with
  pain < 2                   -> ``max``  (three in a row required)
- anything else              -> ``default``

Regressing is fast and progressing is slow.  :func:`select_dosage` then
turns the tier into the drill's actual dosage, falling back to the
default payload when the drill has no such tier.
"""

from __future__ import annotations

from typing import Optional, Sequence

from app.coach.thresholds import DEFAULT_THRESHOLDS, CoachThresholds
from app.schemas.coach import DosageSelection, DosageTier
from app.schemas.history import Difficulty, ExerciseEntry, ExerciseSession
from app.schemas.region import Dosage

LABEL_EASED = "Eased"
LABEL_STANDARD = "Standard"
LABEL_ADVANCED = "Advanced"


def _feedback_for(
    exercise_id: str,
    sessions: Sequence[ExerciseSession],
) -> list[ExerciseEntry]:
    """Entries for *exercise_id*, newest session first.

    Of two sessions on the same date the one stored later counts as
    newer.  Entries within a session keep their in-session order.
    """
    newest_first = list(reversed(sorted(sessions, key=lambda s: s.date)))
    return [
        entry
        for session in newest_first
        for entry in session.exercises
        if entry.exercise_id == exercise_id
    ]


def adapted_dosage_tier(
    exercise_id: str,
    sessions: Sequence[ExerciseSession],
    thresholds: Optional[CoachThresholds] = None,
) -> DosageTier:
    """Resolve the dosage tier for one exercise from session history."""
    th = thresholds or DEFAULT_THRESHOLDS
    feedback = _feedback_for(exercise_id, sessions)
    if not feedback:
        return DosageTier.DEFAULT

    last = feedback[0]
    if last.pain_during > th.dosage_regress_pain or last.difficulty == Difficulty.TOO_HARD:
        return DosageTier.MIN

    streak = feedback[:th.dosage_progress_streak]
    if len(streak) >= th.dosage_progress_streak and all(
        f.difficulty == Difficulty.TOO_EASY and f.pain_during < th.dosage_progress_pain
        for f in streak
    ):
        return DosageTier.MAX

    return DosageTier.DEFAULT


def select_dosage(
    default: Dosage,
    minimum: Optional[Dosage],
    maximum: Optional[Dosage],
    tier: DosageTier,
) -> DosageSelection:
    """Pick the payload for *tier*; the label says whether it was swapped."""
    if tier == DosageTier.MIN and minimum is not None:
        return DosageSelection(dosage=minimum, label=LABEL_EASED)
    if tier == DosageTier.MAX and maximum is not None:
        return DosageSelection(dosage=maximum, label=LABEL_ADVANCED)
    return DosageSelection(dosage=default, label=LABEL_STANDARD)
