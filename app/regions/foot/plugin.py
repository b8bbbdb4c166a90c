"""
Foot region plugin.

Plantar fascia, midfoot, forefoot and toes.  Stabbing pain, a tearing
feeling under the arch and numbness are danger signs.
"""

from app.regions.base import RegionPlugin
from app.regions.foot.drills import FOOT_DRILLS
from app.schemas.readiness import Mode
from app.schemas.region import Drill, SensationInfo, Severity

W = Severity.WARNING
D = Severity.DANGER

FOOT_SENSATIONS: dict[str, SensationInfo] = {
    "stiff": SensationInfo(label="Stiff", category="stiffness"),
    "tight": SensationInfo(label="Tight", category="stiffness"),
    "restricted": SensationInfo(label="Restricted", category="stiffness"),
    "morning_stiffness": SensationInfo(label="Morning stiffness", category="stiffness", severity=W),
    "achy": SensationInfo(label="Achy", category="pain"),
    "sharp": SensationInfo(label="Sharp", category="pain", severity=W),
    "burning": SensationInfo(label="Burning", category="pain", severity=W),
    "throbbing": SensationInfo(label="Throbbing", category="pain"),
    "stabbing": SensationInfo(label="Stabbing", category="pain", severity=D),
    "electric": SensationInfo(label="Electric/shooting", category="pain", severity=W),
    # Plantar
    "tearing_feeling": SensationInfo(label="Tearing feeling", category="pain", severity=D),
    "bruised_feeling": SensationInfo(label="Bruised feeling", category="pain"),
    "stone_bruise": SensationInfo(label="Stone bruise sensation", category="pain", severity=W),
    "tingling": SensationInfo(label="Tingling", category="nerve", severity=W),
    "numbness": SensationInfo(label="Numbness", category="nerve", severity=D),
    "pins_needles": SensationInfo(label="Pins and needles", category="nerve", severity=W),
    "radiating": SensationInfo(label="Radiating pain", category="nerve", severity=W),
    "clicking": SensationInfo(label="Clicking", category="mechanical"),
    "popping": SensationInfo(label="Popping", category="mechanical"),
    "grinding": SensationInfo(label="Grinding", category="mechanical", severity=W),
    "catching": SensationInfo(label="Catching", category="mechanical", severity=W),
    "swollen": SensationInfo(label="Swollen", category="pressure"),
    "hot": SensationInfo(label="Hot to touch", category="temperature", severity=W),
    "puffy": SensationInfo(label="Puffy", category="pressure"),
    "tired": SensationInfo(label="Tired/fatigued", category="fatigue"),
    "heavy": SensationInfo(label="Heavy feeling", category="fatigue"),
    "weak": SensationInfo(label="Weak", category="fatigue"),
    "cramping": SensationInfo(label="Cramping", category="fatigue", severity=W),
    "nothing": SensationInfo(label="Nothing unusual", category="positive"),
    "good": SensationInfo(label="Feeling good", category="positive"),
}

FOOT_MOVEMENTS: dict[str, str] = {
    "walking_flat": "Walking (flat ground)",
    "walking_uphill": "Walking uphill",
    "walking_downhill": "Walking downhill",
    "walking_uneven": "Walking on uneven surfaces",
    "jogging": "Jogging",
    "running": "Running",
    "sprinting": "Sprinting",
    "heel_strike": "Heel strike (initial contact)",
    "toe_off": "Toe-off (push phase)",
    "push_off": "Pushing off",
    "standing_still": "Standing still",
    "standing_long": "Standing for long periods",
    "single_leg_stand": "Single leg standing",
    "stairs_up": "Stairs up",
    "stairs_down": "Stairs down",
    "barefoot_walking": "Walking barefoot",
    "barefoot_standing": "Standing barefoot",
    "toe_raises": "Toe raises",
    "heel_raises": "Heel raises",
    "toe_curls": "Toe curls/gripping",
    "foot_doming": "Foot doming (short foot)",
    "jumping": "Jumping",
    "landing": "Landing",
    "hopping": "Hopping",
    "first_steps_morning": "First steps in morning",
    "after_sitting": "After sitting",
    "end_of_day": "End of day",
    "flat_shoes": "Wearing flat shoes",
    "heeled_shoes": "Wearing heeled shoes",
    "tight_shoes": "Wearing tight shoes",
}

FOOT_PLANS: dict[Mode, list[str]] = {
    Mode.RESET: ["ANKLE_CIRCLES", "PLANTAR_STRETCH", "BALL_ROLL", "TOE_SPREADS", "FOOT_DOMING"],
    Mode.GAME: ["ANKLE_CIRCLES", "PLANTAR_STRETCH", "TOE_WALKS", "HEEL_RAISES_BILATERAL"],
    Mode.TRAINING: [
        "ANKLE_CIRCLES",
        "PLANTAR_STRETCH",
        "CALF_STRETCH_WALL",
        "FOOT_DOMING",
        "TOE_YOGA",
        "TOWEL_SCRUNCHES",
        "ARCH_LIFTS",
        "HEEL_RAISES_BILATERAL",
        "HEEL_RAISES_SINGLE",
        "TOE_WALKS",
        "HEEL_WALKS",
    ],
}


class FootPlugin(RegionPlugin):
    """Foot and plantar fascia rehabilitation vocabulary and plans."""

    @property
    def region_id(self) -> str:
        return "foot"

    @property
    def display_name(self) -> str:
        return "Foot"

    @property
    def description(self) -> str:
        return "Plantar fascia, midfoot, forefoot, and toes"

    @property
    def sensation_catalog(self) -> dict[str, SensationInfo]:
        return FOOT_SENSATIONS

    @property
    def movement_labels(self) -> dict[str, str]:
        return FOOT_MOVEMENTS

    @property
    def drills(self) -> dict[str, Drill]:
        return FOOT_DRILLS

    @property
    def default_plans(self) -> dict[Mode, list[str]]:
        return FOOT_PLANS

    @property
    def high_demand_drills(self) -> frozenset[str]:
        return frozenset({"HEEL_RAISES_SINGLE", "TOE_WALKS", "HEEL_WALKS"})
