"""
Achilles region plugin.

Achilles tendon and calf complex.  The tendon vocabulary differs from the
knee: crunchy or thickened tendon feel and morning stiffness are warnings.
There is no danger tag in this catalog; acute ruptures are handled by the
red-flag screen upstream.
"""

from app.regions.achilles.drills import ACHILLES_DRILLS
from app.regions.base import RegionPlugin
from app.schemas.readiness import Mode
from app.schemas.region import Drill, SensationInfo, Severity

W = Severity.WARNING

ACHILLES_SENSATIONS: dict[str, SensationInfo] = {
    "stiff": SensationInfo(label="Stiff", category="stiffness"),
    "tight": SensationInfo(label="Tight", category="stiffness"),
    "restricted": SensationInfo(label="Restricted ROM", category="stiffness"),
    "morning_stiffness": SensationInfo(label="Morning stiffness", category="stiffness", severity=W),
    "achy": SensationInfo(label="Achy", category="pain"),
    "sharp": SensationInfo(label="Sharp", category="pain", severity=W),
    "burning": SensationInfo(label="Burning", category="pain", severity=W),
    "throbbing": SensationInfo(label="Throbbing", category="pain", severity=W),
    "pinching": SensationInfo(label="Pinching", category="pain", severity=W),
    # Tendon-specific
    "creaky": SensationInfo(label="Creaky/crepitus", category="mechanical"),
    "crunchy": SensationInfo(label="Crunchy feeling", category="mechanical", severity=W),
    "nodule_feeling": SensationInfo(label="Nodule/bump feeling", category="mechanical", severity=W),
    "thickened": SensationInfo(label="Feels thickened", category="mechanical", severity=W),
    # Calf
    "calf_tightness": SensationInfo(label="Calf tightness", category="fatigue"),
    "calf_cramping": SensationInfo(label="Calf cramping", category="fatigue", severity=W),
    "calf_fatigue": SensationInfo(label="Calf fatigue", category="fatigue"),
    "nothing": SensationInfo(label="Nothing unusual", category="positive"),
    "good": SensationInfo(label="Feeling good", category="positive"),
}

ACHILLES_MOVEMENTS: dict[str, str] = {
    "walking": "Walking (flat)",
    "walking_uphill": "Walking uphill",
    "walking_downhill": "Walking downhill",
    "jogging": "Jogging",
    "running": "Running",
    "sprinting": "Sprinting",
    "jumping": "Jumping",
    "landing": "Landing",
    "hopping": "Hopping (single leg)",
    "bounding": "Bounding/plyos",
    "heel_raises": "Heel raises (both legs)",
    "single_leg_heel_raise": "Single leg heel raise",
    "eccentric_heel_drop": "Eccentric heel drops",
    "calf_stretch": "Calf stretching",
    "stairs_up": "Stairs up",
    "stairs_down": "Stairs down",
    "prolonged_standing": "Prolonged standing",
    "first_steps_morning": "First steps in morning",
    "after_sitting": "After sitting",
    "cutting": "Cutting/direction change",
    "pivoting": "Pivoting",
    "acceleration": "Acceleration",
    "deceleration": "Deceleration",
}

ACHILLES_PLANS: dict[Mode, list[str]] = {
    Mode.RESET: ["ANKLE_CIRCLES", "ISOMETRIC_HOLD", "SEATED_HEEL_RAISE", "CALF_STRETCH_BENT"],
    Mode.GAME: ["ANKLE_CIRCLES", "TOE_WALKS", "STANDING_HEEL_RAISE", "CALF_STRETCH_STRAIGHT"],
    Mode.TRAINING: [
        "ANKLE_CIRCLES",
        "STANDING_HEEL_RAISE",
        "SOLEUS_RAISE",
        "ECCENTRIC_HEEL_DROP",
        "SINGLE_LEG_HEEL_RAISE",
        "CALF_STRETCH_STRAIGHT",
        "CALF_STRETCH_BENT",
    ],
}


class AchillesPlugin(RegionPlugin):
    """Achilles tendon rehabilitation vocabulary and plans."""

    @property
    def region_id(self) -> str:
        return "achilles"

    @property
    def display_name(self) -> str:
        return "Achilles"

    @property
    def description(self) -> str:
        return "Achilles tendon and calf complex"

    @property
    def sensation_catalog(self) -> dict[str, SensationInfo]:
        return ACHILLES_SENSATIONS

    @property
    def movement_labels(self) -> dict[str, str]:
        return ACHILLES_MOVEMENTS

    @property
    def drills(self) -> dict[str, Drill]:
        return ACHILLES_DRILLS

    @property
    def default_plans(self) -> dict[Mode, list[str]]:
        return ACHILLES_PLANS

    @property
    def high_demand_drills(self) -> frozenset[str]:
        return frozenset({"ECCENTRIC_HEEL_DROP", "SINGLE_LEG_HEEL_RAISE", "TOE_WALKS"})
