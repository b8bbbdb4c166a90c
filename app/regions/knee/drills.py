"""
Drill table for the knee region.

Dosage tiers: ``default_dosage`` is the everyday prescription,
``min_dosage`` is used on sensitive days and ``max_dosage`` once a drill
has felt too easy for a while.  A drill without a tier falls back to its
default.
"""

from app.schemas.region import Dosage, DosageType, Drill

R = DosageType.REPS
T = DosageType.TIME

KNEE_DRILLS: dict[str, Drill] = {
    d.drill_id: d for d in [
        Drill(
            drill_id="QUAD_SET",
            title="Quad Set (20-30°)",
            intent="Wake VMO and reduce inhibition",
            default_dosage=Dosage(type=R, value=10, sets=2, hold_seconds=5),
            min_dosage=Dosage(type=R, value=5, sets=2, hold_seconds=3),
            max_dosage=Dosage(type=R, value=15, sets=4, hold_seconds=10),
        ),
        Drill(
            drill_id="HEEL_SLIDES",
            title="Heel Slides (Easy Range)",
            intent="Move fluid without provoking shear",
            default_dosage=Dosage(type=R, value=15, sets=1),
            min_dosage=Dosage(type=R, value=5, sets=1),
            max_dosage=Dosage(type=R, value=15, sets=3),
        ),
        Drill(
            drill_id="FOOT_TRIPOD",
            title="Foot Tripod",
            intent="Lock the arch and reduce tibial internal rotation",
            default_dosage=Dosage(type=T, value=60, sets=2),
            min_dosage=Dosage(type=T, value=30, sets=2),
            movement_tags=["single_leg_stance"],
        ),
        Drill(
            drill_id="GLUTE_BRIDGE_HEEL_DRAG",
            title="Glute Bridge + Heel Drag",
            intent="Hamstring/glute co-activation",
            default_dosage=Dosage(type=R, value=8, sets=2, hold_seconds=5),
            min_dosage=Dosage(type=R, value=5, sets=2, hold_seconds=3),
            max_dosage=Dosage(type=R, value=12, sets=3, hold_seconds=5),
        ),
        Drill(
            drill_id="HAM_QUAD_COCONTRACT",
            title="Ham-Quad Co-Contraction (35-45°)",
            intent="Stabilise the sensitive arc",
            default_dosage=Dosage(type=T, value=10, sets=5),
            max_dosage=Dosage(type=T, value=20, sets=5),
            movement_tags=["prolonged_bent"],
        ),
        Drill(
            drill_id="WALL_BOW",
            title="Wall Bow (Front Leg Heel Drag)",
            intent="Tibial control under closed-chain tension",
            default_dosage=Dosage(type=T, value=40, sets=3),
            min_dosage=Dosage(type=T, value=20, sets=2),
            max_dosage=Dosage(type=T, value=60, sets=3),
            movement_tags=["partial_squat"],
        ),
        Drill(
            drill_id="SPANISH_SQUAT_MICRO",
            title="Spanish Squat (Micro 35-45°)",
            intent="Load mid-arc without shear",
            default_dosage=Dosage(type=R, value=8, sets=3),
            min_dosage=Dosage(type=R, value=5, sets=2),
            max_dosage=Dosage(type=R, value=12, sets=3),
            movement_tags=["deep_squat", "partial_squat"],
        ),
        Drill(
            drill_id="STEP_DOWN_SUPPORTED",
            title="Supported Step-Down (Shallow)",
            intent="Eccentric control without collapse",
            default_dosage=Dosage(type=R, value=6, sets=2),
            min_dosage=Dosage(type=R, value=4, sets=2),
            max_dosage=Dosage(type=R, value=10, sets=3),
            movement_tags=["stairs_down", "landing", "single_leg_stance"],
        ),
    ]
}
