"""
Region vocabulary schemas.

A region (knee, achilles, shoulder, foot) owns a sensation catalog, a
movement-restriction vocabulary and a drill table.  These schemas describe
that static data; the decision contract that consumes it lives in
:mod:`app.regions.base`.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Severity(str, Enum):
    """How much a sensation should weigh on the day's decision."""
    NONE = "none"
    WARNING = "warning"
    DANGER = "danger"


class SensationInfo(BaseModel):
    """Catalog entry for one sensation tag."""

    label: str
    category: str = Field(
        ...,
        description="One of: stiffness, pain, mechanical, pressure, "
                    "temperature, fatigue, nerve, positive",
    )
    severity: Severity = Severity.NONE


class SensationClass(BaseModel):
    """Result of classifying a single tag."""

    category: str
    severity: Severity


class DosageType(str, Enum):
    REPS = "reps"
    TIME = "time"


class Dosage(BaseModel):
    """Sets / reps / duration / hold parameters for one drill."""

    type: DosageType
    value: int = Field(..., ge=1, description="Reps per set or seconds per set")
    sets: int = Field(..., ge=1, le=20)
    hold_seconds: Optional[int] = Field(None, ge=1)
    rest_seconds: Optional[int] = Field(None, ge=0)


class Drill(BaseModel):
    """A drill the coach can put into a plan."""

    drill_id: str
    title: str
    intent: str = ""
    default_dosage: Dosage
    min_dosage: Optional[Dosage] = None
    max_dosage: Optional[Dosage] = None
    movement_tags: list[str] = Field(
        default_factory=list,
        description="Movement restrictions that exclude this drill from a plan",
    )


class RegionSummary(BaseModel):
    """Short description of a registered region."""

    region_id: str
    display_name: str
    description: str


class RegionDetail(RegionSummary):
    """Full region vocabulary, for form rendering."""

    sensations: dict[str, SensationInfo]
    movement_restrictions: dict[str, str]
    drills: dict[str, Drill]
    default_plans: dict[str, list[str]]
    high_demand_drills: list[str]
