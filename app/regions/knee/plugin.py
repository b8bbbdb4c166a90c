"""
Knee region plugin.

Covers the knee joint, patella and surrounding structures.  Mechanical
events that suggest joint involvement (locking, giving way) and sharp
stabbing pain or numbness are danger signs; catching, grinding and hot
joints are warnings.
"""

from app.regions.base import RegionPlugin
from app.regions.knee.drills import KNEE_DRILLS
from app.schemas.readiness import Mode
from app.schemas.region import Drill, SensationInfo, Severity

W = Severity.WARNING
D = Severity.DANGER

KNEE_SENSATIONS: dict[str, SensationInfo] = {
    # Stiffness
    "stiff": SensationInfo(label="Stiff", category="stiffness"),
    "tight": SensationInfo(label="Tight", category="stiffness"),
    "restricted": SensationInfo(label="Restricted", category="stiffness"),
    # Pain
    "achy": SensationInfo(label="Achy", category="pain"),
    "dull": SensationInfo(label="Dull pain", category="pain"),
    "sharp": SensationInfo(label="Sharp", category="pain", severity=W),
    "stabbing": SensationInfo(label="Stabbing", category="pain", severity=D),
    "burning": SensationInfo(label="Burning", category="pain", severity=W),
    "throbbing": SensationInfo(label="Throbbing", category="pain"),
    "pinching": SensationInfo(label="Pinching", category="pain", severity=W),
    # Mechanical
    "grinding": SensationInfo(label="Grinding", category="mechanical", severity=W),
    "clicking": SensationInfo(label="Clicking", category="mechanical"),
    "popping": SensationInfo(label="Popping", category="mechanical"),
    "catching": SensationInfo(label="Catching", category="mechanical", severity=W),
    "locking": SensationInfo(label="Locking", category="mechanical", severity=D),
    "giving_way": SensationInfo(label="Giving way", category="mechanical", severity=D),
    # Pressure
    "pressure": SensationInfo(label="Pressure", category="pressure"),
    "fullness": SensationInfo(label="Fullness", category="pressure"),
    "feels_swollen": SensationInfo(label="Feels swollen", category="pressure"),
    # Temperature
    "warm": SensationInfo(label="Warm", category="temperature"),
    "hot": SensationInfo(label="Hot", category="temperature", severity=W),
    # Fatigue / stability
    "heavy": SensationInfo(label="Heavy", category="fatigue"),
    "weak": SensationInfo(label="Weak", category="fatigue"),
    "fatigued": SensationInfo(label="Fatigued", category="fatigue"),
    "unstable": SensationInfo(label="Unstable", category="fatigue", severity=W),
    # Nerve
    "tingling": SensationInfo(label="Tingling", category="nerve", severity=W),
    "numbness": SensationInfo(label="Numbness", category="nerve", severity=D),
    # Positive
    "nothing": SensationInfo(label="Nothing unusual", category="positive"),
    "good": SensationInfo(label="Feeling good", category="positive"),
}

KNEE_MOVEMENTS: dict[str, str] = {
    "deep_squat": "Deep squat",
    "partial_squat": "Partial squat (45-90°)",
    "reverse_direction": "Reversing mid-bend",
    "eccentric_loading": "Lowering under load (eccentric)",
    "kneeling": "Kneeling",
    "stairs_down": "Stairs down",
    "stairs_up": "Stairs up",
    "step_over": "Stepping over things",
    "deceleration": "Slowing down",
    "hard_stop": "Hard stop from speed",
    "direction_reversal": "Reversing direction dynamically",
    "reactive_cuts": "Reactive/unplanned cuts",
    "jumping": "Jumping",
    "landing": "Landing",
    "running": "Running",
    "sprinting": "Sprinting",
    "lateral_cuts": "Lateral cuts (planned)",
    "pivoting": "Pivoting/turning",
    "backpedaling": "Backpedaling",
    "single_leg_stance": "Single leg balance",
    "single_leg_loading": "Single leg under load",
    "lunging": "Lunging",
    "sit_to_stand": "Sit to stand",
    "prolonged_sitting": "Sitting too long",
    "prolonged_standing": "Standing too long",
    "prolonged_bent": "Staying bent (e.g., athletic stance)",
}

KNEE_PLANS: dict[Mode, list[str]] = {
    Mode.RESET: ["QUAD_SET", "HEEL_SLIDES", "FOOT_TRIPOD", "GLUTE_BRIDGE_HEEL_DRAG"],
    Mode.GAME: ["FOOT_TRIPOD", "GLUTE_BRIDGE_HEEL_DRAG", "HAM_QUAD_COCONTRACT", "WALL_BOW"],
    Mode.TRAINING: [
        "FOOT_TRIPOD",
        "GLUTE_BRIDGE_HEEL_DRAG",
        "HAM_QUAD_COCONTRACT",
        "WALL_BOW",
        "SPANISH_SQUAT_MICRO",
        "STEP_DOWN_SUPPORTED",
    ],
}


class KneePlugin(RegionPlugin):
    """Knee rehabilitation vocabulary and plans."""

    @property
    def region_id(self) -> str:
        return "knee"

    @property
    def display_name(self) -> str:
        return "Knee"

    @property
    def description(self) -> str:
        return "Knee joint, patella, and surrounding structures"

    @property
    def sensation_catalog(self) -> dict[str, SensationInfo]:
        return KNEE_SENSATIONS

    @property
    def movement_labels(self) -> dict[str, str]:
        return KNEE_MOVEMENTS

    @property
    def drills(self) -> dict[str, Drill]:
        return KNEE_DRILLS

    @property
    def default_plans(self) -> dict[Mode, list[str]]:
        return KNEE_PLANS

    @property
    def high_demand_drills(self) -> frozenset[str]:
        return frozenset({"SPANISH_SQUAT_MICRO", "STEP_DOWN_SUPPORTED"})
