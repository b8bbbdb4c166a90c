"""Drill table for the achilles region."""

from app.schemas.region import Dosage, DosageType, Drill

R = DosageType.REPS
T = DosageType.TIME

ACHILLES_DRILLS: dict[str, Drill] = {
    d.drill_id: d for d in [
        Drill(
            drill_id="ISOMETRIC_HOLD",
            title="Isometric Calf Hold",
            intent="Tendon pain relief through sustained load",
            default_dosage=Dosage(type=T, value=45, sets=5),
            min_dosage=Dosage(type=T, value=30, sets=3),
            max_dosage=Dosage(type=T, value=45, sets=6),
        ),
        Drill(
            drill_id="SEATED_HEEL_RAISE",
            title="Seated Heel Raise",
            intent="Soleus loading with minimal tendon strain",
            default_dosage=Dosage(type=R, value=15, sets=3),
            min_dosage=Dosage(type=R, value=10, sets=2),
            max_dosage=Dosage(type=R, value=20, sets=3),
        ),
        Drill(
            drill_id="STANDING_HEEL_RAISE",
            title="Standing Heel Raise (Bilateral)",
            intent="Build calf capacity on both legs",
            default_dosage=Dosage(type=R, value=15, sets=3),
            min_dosage=Dosage(type=R, value=10, sets=2),
            max_dosage=Dosage(type=R, value=20, sets=4),
            movement_tags=["heel_raises"],
        ),
        Drill(
            drill_id="ECCENTRIC_HEEL_DROP",
            title="Eccentric Heel Drop",
            intent="Eccentric tendon loading",
            default_dosage=Dosage(type=R, value=15, sets=3),
            min_dosage=Dosage(type=R, value=8, sets=2),
            movement_tags=["eccentric_heel_drop", "stairs_down"],
        ),
        Drill(
            drill_id="SINGLE_LEG_HEEL_RAISE",
            title="Single Leg Heel Raise",
            intent="Unilateral capacity",
            default_dosage=Dosage(type=R, value=12, sets=3),
            min_dosage=Dosage(type=R, value=6, sets=2),
            max_dosage=Dosage(type=R, value=15, sets=4),
            movement_tags=["single_leg_heel_raise", "heel_raises"],
        ),
        Drill(
            drill_id="SOLEUS_RAISE",
            title="Bent Knee Heel Raise",
            intent="Soleus strength",
            default_dosage=Dosage(type=R, value=15, sets=3),
            max_dosage=Dosage(type=R, value=20, sets=4),
            movement_tags=["heel_raises"],
        ),
        Drill(
            drill_id="CALF_STRETCH_STRAIGHT",
            title="Gastrocnemius Stretch",
            default_dosage=Dosage(type=T, value=30, sets=3),
            movement_tags=["calf_stretch"],
        ),
        Drill(
            drill_id="CALF_STRETCH_BENT",
            title="Soleus Stretch",
            default_dosage=Dosage(type=T, value=30, sets=3),
            movement_tags=["calf_stretch"],
        ),
        Drill(
            drill_id="ANKLE_CIRCLES",
            title="Ankle Circles",
            intent="Gentle mobility",
            default_dosage=Dosage(type=R, value=10, sets=2),
        ),
        Drill(
            drill_id="TOE_WALKS",
            title="Toe Walks",
            intent="Dynamic calf activation",
            default_dosage=Dosage(type=T, value=30, sets=2),
            min_dosage=Dosage(type=T, value=15, sets=2),
            movement_tags=["walking"],
        ),
        Drill(
            drill_id="HEEL_WALKS",
            title="Heel Walks",
            intent="Anterior shin activation",
            default_dosage=Dosage(type=T, value=30, sets=2),
            movement_tags=["walking"],
        ),
    ]
}
