"""What would the coach say across a rough week on the knee?

Feeds a scripted sequence of check-ins and sessions through the engine
in memory (no database) and prints the decision for each day, the trend
alerts and the adapted dosage at the end.

Usage:
    python scripts/simulate_week.py
"""

import datetime
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import app.regions  # noqa: F401
from app.coach.alerts import trend_alerts
from app.coach.milestones import detect_new_milestones
from app.coach.plan import init_coach_state
from app.coach.trends import analyze_history
from app.regions.registry import RegionRegistry
from app.schemas.history import (
    CheckIn,
    Difficulty,
    ExerciseEntry,
    ExerciseSession,
    History,
)
from app.schemas.readiness import ActivityGoal, ReadinessReport

START = datetime.date(2026, 3, 2)

# (confidence, resting discomfort, sensations, goal, session pain or None)
WEEK = [
    (8, 1, ["good"], ActivityGoal.TRAINING, 1),
    (7, 2, ["stiff"], ActivityGoal.TRAINING, 2),
    (7, 3, ["achy"], ActivityGoal.TRAINING, 3),
    (6, 4, ["achy", "grinding"], ActivityGoal.TRAINING, 5),
    (8, 1, [], ActivityGoal.GAME, None),
    (5, 2, ["stiff"], ActivityGoal.LIGHT, 2),
    (3, 2, ["unstable"], ActivityGoal.TRAINING, None),
]


def main() -> None:
    knee = RegionRegistry.get_or_raise("knee")
    history = History()

    for offset, (confidence, discomfort, sensations, goal, pain) in enumerate(WEEK):
        today = START + datetime.timedelta(days=offset)
        report = ReadinessReport(
            confidence=confidence,
            resting_discomfort=discomfort,
            sensations=sensations,
            activity_goal=goal,
        )
        has_records = bool(history.check_ins or history.sessions)
        state = init_coach_state(knee, report, history if has_records else None, as_of=today)
        print(f"{today}  {state.mode.value:<8}  {state.reasoning}")
        print(f"{'':12}plan: {', '.join(state.plan)}")

        history.check_ins.append(CheckIn(
            date=today,
            pain_level=discomfort,
            function_level=confidence,
            confidence_level=confidence,
            sensations=report.sensations,
            mode_assigned=state.mode,
        ))
        if pain is not None:
            history.sessions.append(ExerciseSession(
                date=today,
                exercises=[
                    ExerciseEntry(
                        exercise_id=drill,
                        sets=2,
                        reps=8,
                        difficulty=Difficulty.JUST_RIGHT,
                        pain_during=pain,
                    )
                    for drill in state.plan
                ],
                total_duration=20,
                overall_difficulty=Difficulty.JUST_RIGHT,
            ))
        history.milestones.extend(detect_new_milestones(history, today))

    as_of = START + datetime.timedelta(days=len(WEEK) - 1)
    trends = analyze_history(history, as_of)
    print()
    print("Alerts:")
    for alert in trend_alerts(trends.check_ins):
        print(f"  - {alert.message}")
    print("Milestones:", [m.milestone_id for m in history.milestones])

    dosage = knee.dosage_for("GLUTE_BRIDGE_HEEL_DRAG", history.sessions)
    print(f"GLUTE_BRIDGE_HEEL_DRAG: {dosage.label} ({dosage.tier.value}) {dosage.dosage.model_dump()}")


if __name__ == "__main__":
    main()
