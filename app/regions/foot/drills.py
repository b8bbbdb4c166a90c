"""Drill table for the foot region."""

from app.schemas.region import Dosage, DosageType, Drill

R = DosageType.REPS
T = DosageType.TIME

FOOT_DRILLS: dict[str, Drill] = {
    d.drill_id: d for d in [
        Drill(
            drill_id="TOE_YOGA",
            title="Toe Yoga",
            intent="Improve toe independence and control",
            default_dosage=Dosage(type=R, value=10, sets=3),
            max_dosage=Dosage(type=R, value=15, sets=3),
        ),
        Drill(
            drill_id="FOOT_DOMING",
            title="Foot Doming (Short Foot)",
            intent="Activate intrinsic foot muscles",
            default_dosage=Dosage(type=R, value=10, sets=3, hold_seconds=5),
            min_dosage=Dosage(type=R, value=6, sets=2, hold_seconds=3),
            max_dosage=Dosage(type=R, value=12, sets=3, hold_seconds=8),
            movement_tags=["foot_doming"],
        ),
        Drill(
            drill_id="TOWEL_SCRUNCHES",
            title="Towel Scrunches",
            intent="Strengthen toe flexors",
            default_dosage=Dosage(type=R, value=15, sets=3),
            min_dosage=Dosage(type=R, value=10, sets=2),
            movement_tags=["toe_curls"],
        ),
        Drill(
            drill_id="MARBLE_PICKUPS",
            title="Marble Pickups",
            intent="Fine motor control and grip strength",
            default_dosage=Dosage(type=R, value=10, sets=2),
            movement_tags=["toe_curls"],
        ),
        Drill(
            drill_id="PLANTAR_STRETCH",
            title="Plantar Fascia Stretch",
            intent="Lengthen plantar fascia",
            default_dosage=Dosage(type=T, value=30, sets=3),
        ),
        Drill(
            drill_id="CALF_STRETCH_WALL",
            title="Calf Stretch (Wall)",
            intent="Lengthen gastrocnemius",
            default_dosage=Dosage(type=T, value=30, sets=3),
        ),
        Drill(
            drill_id="FROZEN_BOTTLE_ROLL",
            title="Frozen Bottle Roll",
            intent="Massage and reduce inflammation",
            default_dosage=Dosage(type=T, value=120, sets=1),
        ),
        Drill(
            drill_id="BALL_ROLL",
            title="Ball Roll (Lacrosse/Golf Ball)",
            intent="Release plantar fascia tension",
            default_dosage=Dosage(type=T, value=60, sets=2),
        ),
        Drill(
            drill_id="TOE_SPREADS",
            title="Toe Spreads",
            intent="Improve toe mobility and spacing",
            default_dosage=Dosage(type=R, value=10, sets=3, hold_seconds=5),
        ),
        Drill(
            drill_id="HEEL_RAISES_BILATERAL",
            title="Heel Raises (Both Feet)",
            intent="Calf and foot strength",
            default_dosage=Dosage(type=R, value=15, sets=3),
            min_dosage=Dosage(type=R, value=10, sets=2),
            max_dosage=Dosage(type=R, value=20, sets=3),
            movement_tags=["heel_raises", "toe_off"],
        ),
        Drill(
            drill_id="HEEL_RAISES_SINGLE",
            title="Single Leg Heel Raise",
            intent="Unilateral calf/foot strength",
            default_dosage=Dosage(type=R, value=12, sets=3),
            min_dosage=Dosage(type=R, value=6, sets=2),
            max_dosage=Dosage(type=R, value=15, sets=3),
            movement_tags=["heel_raises", "single_leg_stand", "toe_off"],
        ),
        Drill(
            drill_id="TOE_WALKS",
            title="Toe Walks",
            intent="Forefoot strength and balance",
            default_dosage=Dosage(type=T, value=30, sets=2),
            min_dosage=Dosage(type=T, value=15, sets=2),
            movement_tags=["walking_flat", "toe_off"],
        ),
        Drill(
            drill_id="HEEL_WALKS",
            title="Heel Walks",
            intent="Anterior tibialis activation",
            default_dosage=Dosage(type=T, value=30, sets=2),
            min_dosage=Dosage(type=T, value=15, sets=2),
            movement_tags=["walking_flat", "heel_strike"],
        ),
        Drill(
            drill_id="ARCH_LIFTS",
            title="Arch Lifts",
            intent="Strengthen arch muscles",
            default_dosage=Dosage(type=R, value=10, sets=3, hold_seconds=3),
            max_dosage=Dosage(type=R, value=15, sets=3, hold_seconds=3),
        ),
        Drill(
            drill_id="ANKLE_CIRCLES",
            title="Ankle Circles",
            intent="Mobility and blood flow",
            default_dosage=Dosage(type=R, value=10, sets=2),
        ),
    ]
}
