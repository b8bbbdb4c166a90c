"""
Abstract base class for body-region plugins.

Every region must implement this interface.  A region is a *capability
set*: the vocabulary and tables the coach needs, nothing more:

- A unique region identifier (slug) and display name
- A sensation catalog (tag -> label, category, severity)
- A movement-restriction vocabulary
- A drill table with dosage tiers and movement tags
- Default plans per mode, and the drills considered high-demand

The decision rules are written once in :mod:`app.coach` against this
interface.  The classifier methods below are concrete so every region
classifies the same way.
"""

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Sequence

from app.coach.dosage import adapted_dosage_tier, select_dosage
from app.coach.thresholds import CoachThresholds
from app.schemas.coach import DosageResponse
from app.schemas.history import ExerciseSession
from app.schemas.readiness import Mode
from app.schemas.region import (
    Drill,
    RegionDetail,
    RegionSummary,
    SensationClass,
    SensationInfo,
    Severity,
)

logger = logging.getLogger(__name__)

UNKNOWN_CATEGORY = "unknown"


class RegionPlugin(ABC):
    """Abstract base class that every region plugin must implement."""

    @property
    @abstractmethod
    def region_id(self) -> str:
        """Unique slug identifier, e.g. ``'knee'``."""
        ...

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable name, e.g. ``'Knee'``."""
        ...

    @property
    @abstractmethod
    def sensation_catalog(self) -> dict[str, SensationInfo]:
        """All sensation tags this region accepts."""
        ...

    @property
    @abstractmethod
    def movement_labels(self) -> dict[str, str]:
        """Movement-restriction tag -> label."""
        ...

    @property
    @abstractmethod
    def drills(self) -> dict[str, Drill]:
        """Drill table keyed by drill id."""
        ...

    @property
    @abstractmethod
    def default_plans(self) -> dict[Mode, list[str]]:
        """Ordered default drill ids for each mode."""
        ...

    # ------------------------------------------------------------------
    # Optional overrides with sensible defaults
    # ------------------------------------------------------------------

    @property
    def description(self) -> str:
        return ""

    @property
    def high_demand_drills(self) -> frozenset[str]:
        """Drills dropped from the remaining plan on moderate in-session
        pain.  Default: none."""
        return frozenset()

    # ------------------------------------------------------------------
    # Sensation classifier
    # ------------------------------------------------------------------

    def classify(self, tag: str) -> SensationClass:
        """Resolve *tag* to its category and severity.

        Unknown tags fail open: severity ``none``.
        """
        info = self.sensation_catalog.get(tag)
        if info is None:
            logger.warning(
                "Unknown sensation tag %r for region %s, treated as neutral",
                tag, self.region_id,
            )
            return SensationClass(category=UNKNOWN_CATEGORY, severity=Severity.NONE)
        return SensationClass(category=info.category, severity=info.severity)

    def _any_with_severity(self, tags: Iterable[str], severity: Severity) -> bool:
        return any(self.classify(t).severity == severity for t in tags)

    def has_danger(self, tags: Iterable[str]) -> bool:
        return self._any_with_severity(tags, Severity.DANGER)

    def has_warning(self, tags: Iterable[str]) -> bool:
        return self._any_with_severity(tags, Severity.WARNING)

    # ------------------------------------------------------------------
    # Drill / plan lookup
    # ------------------------------------------------------------------

    def default_plan(self, mode: Mode) -> list[str]:
        """Fresh copy of the default plan for *mode*."""
        return list(self.default_plans.get(mode, []))

    def get_drill(self, drill_id: str) -> Optional[Drill]:
        return self.drills.get(drill_id)

    def movement_tags(self, drill_id: str) -> list[str]:
        drill = self.drills.get(drill_id)
        return list(drill.movement_tags) if drill else []

    def dosage_for(
        self,
        exercise_id: str,
        sessions: Sequence[ExerciseSession],
        thresholds: Optional[CoachThresholds] = None,
    ) -> Optional[DosageResponse]:
        """Adapted dosage for one drill, or ``None`` for an unknown drill."""
        drill = self.drills.get(exercise_id)
        if drill is None:
            return None
        tier = adapted_dosage_tier(exercise_id, sessions, thresholds)
        selection = select_dosage(
            drill.default_dosage, drill.min_dosage, drill.max_dosage, tier,
        )
        return DosageResponse(
            exercise_id=exercise_id,
            tier=tier,
            dosage=selection.dosage,
            label=selection.label,
        )

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    def summary(self) -> RegionSummary:
        return RegionSummary(
            region_id=self.region_id,
            display_name=self.display_name,
            description=self.description,
        )

    def detail(self) -> RegionDetail:
        return RegionDetail(
            region_id=self.region_id,
            display_name=self.display_name,
            description=self.description,
            sensations=dict(self.sensation_catalog),
            movement_restrictions=dict(self.movement_labels),
            drills=dict(self.drills),
            default_plans={m.value: self.default_plan(m) for m in Mode},
            high_demand_drills=sorted(self.high_demand_drills),
        )
