"""
Shoulder region plugin.

Glenohumeral joint, rotator cuff and scapular stabilizers.  A slipping
sensation and nerve symptoms that radiate down the arm are danger signs.
"""

from app.regions.base import RegionPlugin
from app.regions.shoulder.drills import SHOULDER_DRILLS
from app.schemas.readiness import Mode
from app.schemas.region import Drill, SensationInfo, Severity

W = Severity.WARNING
D = Severity.DANGER

SHOULDER_SENSATIONS: dict[str, SensationInfo] = {
    "stiff": SensationInfo(label="Stiff", category="stiffness"),
    "tight": SensationInfo(label="Tight", category="stiffness"),
    "restricted": SensationInfo(label="Restricted ROM", category="stiffness"),
    "frozen_feeling": SensationInfo(label="Frozen feeling", category="stiffness", severity=W),
    "achy": SensationInfo(label="Achy", category="pain"),
    "sharp": SensationInfo(label="Sharp", category="pain", severity=W),
    "burning": SensationInfo(label="Burning", category="pain", severity=W),
    "throbbing": SensationInfo(label="Throbbing", category="pain"),
    "pinching": SensationInfo(label="Pinching", category="pain", severity=W),
    "catching_pain": SensationInfo(label="Catching pain", category="pain", severity=W),
    "clicking": SensationInfo(label="Clicking", category="mechanical"),
    "popping": SensationInfo(label="Popping", category="mechanical"),
    "grinding": SensationInfo(label="Grinding", category="mechanical", severity=W),
    "catching": SensationInfo(label="Catching (mechanical)", category="mechanical", severity=W),
    "clunking": SensationInfo(label="Clunking", category="mechanical", severity=W),
    # Instability is grouped with fatigue in the check-in form
    "loose": SensationInfo(label="Feels loose", category="fatigue", severity=W),
    "slipping": SensationInfo(label="Slipping sensation", category="fatigue", severity=D),
    "apprehension": SensationInfo(label="Apprehension/fear", category="fatigue", severity=W),
    "weak": SensationInfo(label="Weak", category="fatigue"),
    "fatigued": SensationInfo(label="Fatigued", category="fatigue"),
    "heavy": SensationInfo(label="Heavy arm", category="fatigue"),
    "tingling": SensationInfo(label="Tingling", category="nerve", severity=W),
    "numbness": SensationInfo(label="Numbness", category="nerve", severity=D),
    "radiating": SensationInfo(label="Radiating down arm", category="nerve", severity=D),
    "nothing": SensationInfo(label="Nothing unusual", category="positive"),
    "good": SensationInfo(label="Feeling good", category="positive"),
}

SHOULDER_MOVEMENTS: dict[str, str] = {
    "reaching_overhead": "Reaching overhead",
    "reaching_behind_back": "Reaching behind back",
    "reaching_across_body": "Reaching across body",
    "reaching_out_to_side": "Reaching out to side",
    "reaching_forward": "Reaching forward",
    "internal_rotation": "Internal rotation",
    "external_rotation": "External rotation",
    "throwing_motion": "Throwing motion",
    "pushing": "Pushing",
    "pulling": "Pulling",
    "pressing_overhead": "Pressing overhead",
    "bench_press": "Bench press motion",
    "rows": "Rowing motion",
    "putting_on_shirt": "Putting on shirt/jacket",
    "washing_hair": "Washing hair",
    "sleeping_on_side": "Sleeping on that side",
    "carrying": "Carrying things",
    "lifting": "Lifting objects",
    "throwing": "Throwing",
    "swimming": "Swimming",
    "serving": "Serving (tennis/volleyball)",
    "swinging": "Swinging (golf/bat)",
}

SHOULDER_PLANS: dict[Mode, list[str]] = {
    Mode.RESET: [
        "PENDULUMS",
        "PASSIVE_FLEXION",
        "PASSIVE_ER",
        "SCAPULAR_SQUEEZE",
        "CROSS_BODY_STRETCH",
    ],
    Mode.GAME: ["PENDULUMS", "WALL_SLIDES", "BAND_PULL_APART", "DOORWAY_STRETCH"],
    Mode.TRAINING: [
        "WALL_SLIDES",
        "SCAPULAR_SQUEEZE",
        "PRONE_Y",
        "PRONE_T",
        "PRONE_W",
        "SIDELYING_ER",
        "BAND_PULL_APART",
        "FACE_PULL",
        "SLEEPER_STRETCH",
        "CROSS_BODY_STRETCH",
    ],
}


class ShoulderPlugin(RegionPlugin):

    @property
    def region_id(self) -> str:
        return "shoulder"

    @property
    def display_name(self) -> str:
        return "Shoulder"

    @property
    def description(self) -> str:
        return "Glenohumeral joint, rotator cuff, and scapular stabilizers"

    @property
    def sensation_catalog(self) -> dict[str, SensationInfo]:
        return SHOULDER_SENSATIONS

    @property
    def movement_labels(self) -> dict[str, str]:
        return SHOULDER_MOVEMENTS

    @property
    def drills(self) -> dict[str, Drill]:
        return SHOULDER_DRILLS

    @property
    def default_plans(self) -> dict[Mode, list[str]]:
        return SHOULDER_PLANS

    @property
    def high_demand_drills(self) -> frozenset[str]:
        return frozenset({"PRONE_Y", "PRONE_T", "FACE_PULL"})
