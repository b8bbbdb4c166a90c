"""Drill table for the shoulder region."""

from app.schemas.region import Dosage, DosageType, Drill

R = DosageType.REPS
T = DosageType.TIME

SHOULDER_DRILLS: dict[str, Drill] = {
    d.drill_id: d for d in [
        Drill(
            drill_id="PENDULUMS",
            title="Pendulum Swings",
            intent="Gentle joint mobilization",
            default_dosage=Dosage(type=T, value=60, sets=2),
            min_dosage=Dosage(type=T, value=30, sets=2),
        ),
        Drill(
            drill_id="PASSIVE_FLEXION",
            title="Passive Flexion (Supine)",
            intent="Restore overhead mobility",
            default_dosage=Dosage(type=R, value=10, sets=3, hold_seconds=5),
            min_dosage=Dosage(type=R, value=5, sets=2, hold_seconds=3),
            movement_tags=["reaching_overhead"],
        ),
        Drill(
            drill_id="PASSIVE_ER",
            title="Passive External Rotation",
            intent="Restore rotation mobility",
            default_dosage=Dosage(type=R, value=10, sets=3, hold_seconds=5),
            min_dosage=Dosage(type=R, value=5, sets=2, hold_seconds=3),
            movement_tags=["external_rotation"],
        ),
        Drill(
            drill_id="WALL_SLIDES",
            title="Wall Slides",
            intent="Controlled overhead movement",
            default_dosage=Dosage(type=R, value=10, sets=3),
            min_dosage=Dosage(type=R, value=6, sets=2),
            max_dosage=Dosage(type=R, value=15, sets=3),
            movement_tags=["reaching_overhead"],
        ),
        Drill(
            drill_id="SCAPULAR_SQUEEZE",
            title="Scapular Squeeze",
            intent="Scapular stability",
            default_dosage=Dosage(type=R, value=10, sets=3, hold_seconds=5),
            max_dosage=Dosage(type=R, value=15, sets=3, hold_seconds=5),
        ),
        Drill(
            drill_id="PRONE_Y",
            title="Prone Y Raise",
            intent="Lower trap activation",
            default_dosage=Dosage(type=R, value=10, sets=3, hold_seconds=3),
            min_dosage=Dosage(type=R, value=6, sets=2, hold_seconds=2),
            max_dosage=Dosage(type=R, value=12, sets=4, hold_seconds=3),
            movement_tags=["reaching_overhead"],
        ),
        Drill(
            drill_id="PRONE_T",
            title="Prone T Raise",
            intent="Mid trap activation",
            default_dosage=Dosage(type=R, value=10, sets=3, hold_seconds=3),
            min_dosage=Dosage(type=R, value=6, sets=2, hold_seconds=2),
            max_dosage=Dosage(type=R, value=12, sets=4, hold_seconds=3),
            movement_tags=["reaching_out_to_side"],
        ),
        Drill(
            drill_id="PRONE_W",
            title="Prone W Raise",
            intent="Rotator cuff activation",
            default_dosage=Dosage(type=R, value=10, sets=3, hold_seconds=3),
            movement_tags=["external_rotation"],
        ),
        Drill(
            drill_id="SIDELYING_ER",
            title="Sidelying External Rotation",
            intent="Rotator cuff strengthening",
            default_dosage=Dosage(type=R, value=15, sets=3),
            min_dosage=Dosage(type=R, value=10, sets=2),
            max_dosage=Dosage(type=R, value=20, sets=3),
            movement_tags=["external_rotation"],
        ),
        Drill(
            drill_id="BAND_PULL_APART",
            title="Band Pull Apart",
            intent="Posterior shoulder strength",
            default_dosage=Dosage(type=R, value=15, sets=3),
            max_dosage=Dosage(type=R, value=20, sets=3),
            movement_tags=["pulling"],
        ),
        Drill(
            drill_id="FACE_PULL",
            title="Face Pull",
            intent="External rotator and trap strength",
            default_dosage=Dosage(type=R, value=15, sets=3),
            min_dosage=Dosage(type=R, value=10, sets=2),
            max_dosage=Dosage(type=R, value=20, sets=3),
            movement_tags=["pulling", "external_rotation"],
        ),
        Drill(
            drill_id="WALL_ANGELS",
            title="Wall Angels",
            intent="Overhead mobility with control",
            default_dosage=Dosage(type=R, value=10, sets=3),
            movement_tags=["reaching_overhead"],
        ),
        Drill(
            drill_id="SLEEPER_STRETCH",
            title="Sleeper Stretch",
            intent="Internal rotation mobility",
            default_dosage=Dosage(type=T, value=30, sets=3),
            movement_tags=["internal_rotation", "sleeping_on_side"],
        ),
        Drill(
            drill_id="CROSS_BODY_STRETCH",
            title="Cross Body Stretch",
            intent="Posterior capsule stretch",
            default_dosage=Dosage(type=T, value=30, sets=3),
            movement_tags=["reaching_across_body"],
        ),
        Drill(
            drill_id="DOORWAY_STRETCH",
            title="Doorway Pec Stretch",
            intent="Anterior shoulder/pec flexibility",
            default_dosage=Dosage(type=T, value=30, sets=3),
        ),
    ]
}
