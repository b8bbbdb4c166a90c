"""
Unit tests for the history repository against an in-memory SQLite DB.
"""

import datetime

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine, select

import app.db.base  # noqa: F401  (registers the tables)
from app.db.repositories.history import HistoryRepository
from app.models import CheckInRecord, ExerciseSessionRecord
from app.schemas.history import (
    Baseline,
    CheckIn,
    Difficulty,
    ExerciseEntry,
    ExerciseSession,
    Feeling,
    Milestone,
    MilestoneType,
)
from app.schemas.readiness import Mode

TODAY = datetime.date(2026, 3, 10)


@pytest.fixture()
def repo():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield HistoryRepository(session)
    SQLModel.metadata.drop_all(engine)


def _check_in(days_ago: int, pain: int = 2, mode: Mode = Mode.TRAINING) -> CheckIn:
    return CheckIn(
        date=TODAY - datetime.timedelta(days=days_ago),
        pain_level=pain,
        function_level=6,
        confidence_level=6,
        sensations=["stiff", "clicking"],
        mode_assigned=mode,
    )


def _session(days_ago: int) -> ExerciseSession:
    return ExerciseSession(
        date=TODAY - datetime.timedelta(days=days_ago),
        exercises=[
            ExerciseEntry(exercise_id="QUAD_SET", sets=2, reps=10,
                          difficulty=Difficulty.TOO_EASY, pain_during=1),
            ExerciseEntry(exercise_id="WALL_BOW", sets=3, duration=40,
                          difficulty=Difficulty.JUST_RIGHT, pain_during=2),
        ],
        total_duration=20,
        overall_difficulty=Difficulty.JUST_RIGHT,
        pain_after=1,
        feeling_after=Feeling.BETTER,
    )


def _milestone(milestone_id: str) -> Milestone:
    return Milestone(
        milestone_id=milestone_id,
        type=MilestoneType.CONSISTENCY,
        title=milestone_id.title(),
        description="test",
        achieved_date=TODAY,
    )


# ======================================================================
# Append and read
# ======================================================================


class TestCheckIns:

    def test_round_trip(self, repo):
        stored = repo.append_check_in("u1", "knee", _check_in(0))
        assert stored == _check_in(0)
        assert repo.list_check_ins("u1", "knee") == [_check_in(0)]

    def test_oldest_first(self, repo):
        for days_ago in (0, 5, 2):
            repo.append_check_in("u1", "knee", _check_in(days_ago))
        dates = [c.date for c in repo.list_check_ins("u1", "knee")]
        assert dates == sorted(dates)

    def test_same_date_keeps_insert_order(self, repo):
        repo.append_check_in("u1", "knee", _check_in(0, pain=1))
        repo.append_check_in("u1", "knee", _check_in(0, pain=7))
        assert [c.pain_level for c in repo.list_check_ins("u1", "knee")] == [1, 7]

    def test_scoped_by_user_and_region(self, repo):
        repo.append_check_in("u1", "knee", _check_in(0))
        repo.append_check_in("u2", "knee", _check_in(0))
        repo.append_check_in("u1", "shoulder", _check_in(0))
        assert len(repo.list_check_ins("u1", "knee")) == 1
        assert repo.list_check_ins("u3", "knee") == []

    def test_created_at_is_timezone_aware(self):
        record = CheckInRecord(
            user_id="u1", region_id="knee", date=TODAY, pain_level=2,
            function_level=6, confidence_level=6, mode_assigned="TRAINING",
        )
        assert record.created_at.tzinfo is not None

    def test_created_at_is_stored(self, repo):
        repo.append_check_in("u1", "knee", _check_in(0))
        repo.append_session("u1", "knee", _session(0))
        check_in_row = repo.session.exec(select(CheckInRecord)).one()
        session_row = repo.session.exec(select(ExerciseSessionRecord)).one()
        assert check_in_row.created_at is not None
        assert session_row.created_at is not None


class TestSessions:

    def test_round_trip_keeps_entries(self, repo):
        stored = repo.append_session("u1", "knee", _session(1))
        assert stored == _session(1)
        read = repo.list_sessions("u1", "knee")[0]
        assert [e.exercise_id for e in read.exercises] == ["QUAD_SET", "WALL_BOW"]
        assert read.exercises[1].duration == 40
        assert read.exercises[0].difficulty == Difficulty.TOO_EASY

    def test_read_history(self, repo):
        repo.append_check_in("u1", "knee", _check_in(1))
        repo.append_session("u1", "knee", _session(1))
        history = repo.read_history("u1", "knee")
        assert len(history.check_ins) == 1
        assert len(history.sessions) == 1
        assert history.milestones == []


class TestMilestones:

    def test_added_once(self, repo):
        first = repo.add_milestones("u1", "knee", [_milestone("FIRST_CHECKIN")])
        again = repo.add_milestones("u1", "knee", [_milestone("FIRST_CHECKIN")])
        assert [m.milestone_id for m in first] == ["FIRST_CHECKIN"]
        assert again == []
        assert len(repo.list_milestones("u1", "knee")) == 1

    def test_duplicates_within_batch(self, repo):
        added = repo.add_milestones(
            "u1", "knee", [_milestone("WEEK_STREAK"), _milestone("WEEK_STREAK")],
        )
        assert len(added) == 1

    def test_same_id_for_other_region(self, repo):
        repo.add_milestones("u1", "knee", [_milestone("FIRST_CHECKIN")])
        added = repo.add_milestones("u1", "foot", [_milestone("FIRST_CHECKIN")])
        assert len(added) == 1


# ======================================================================
# Retention
# ======================================================================


class TestPrune:

    def test_deletes_before_cutoff_only(self, repo):
        for days_ago in (40, 20, 3):
            repo.append_check_in("u1", "knee", _check_in(days_ago))
            repo.append_session("u1", "knee", _session(days_ago))
        repo.add_milestones("u1", "knee", [_milestone("FIRST_CHECKIN")])

        cutoff = TODAY - datetime.timedelta(days=20)
        assert repo.prune_before("u1", "knee", cutoff) == (1, 1)

        history = repo.read_history("u1", "knee")
        assert [c.date for c in history.check_ins] == [
            TODAY - datetime.timedelta(days=20), TODAY - datetime.timedelta(days=3),
        ]
        assert len(history.sessions) == 2
        assert len(history.milestones) == 1

    def test_other_users_untouched(self, repo):
        repo.append_check_in("u1", "knee", _check_in(40))
        repo.append_check_in("u2", "knee", _check_in(40))
        repo.prune_before("u1", "knee", TODAY)
        assert len(repo.list_check_ins("u2", "knee")) == 1

    def test_baseline_survives_prune(self, repo):
        repo.save_baseline("u1", "knee", _baseline(8.0))
        repo.append_check_in("u1", "knee", _check_in(40))
        repo.prune_before("u1", "knee", TODAY)
        history = repo.read_history("u1", "knee")
        assert history.check_ins == []
        assert history.baseline == _baseline(8.0)


# ======================================================================
# Baseline
# ======================================================================


def _baseline(pain: float) -> Baseline:
    return Baseline(
        pain_level=pain, function_level=3.0, confidence_level=4.0, recorded_date=TODAY,
    )


class TestBaseline:

    def test_absent_by_default(self, repo):
        assert repo.get_baseline("u1", "knee") is None
        assert repo.read_history("u1", "knee").baseline is None

    def test_written_once(self, repo):
        first = repo.save_baseline("u1", "knee", _baseline(8.0))
        again = repo.save_baseline("u1", "knee", _baseline(2.0))
        assert first == _baseline(8.0)
        assert again == _baseline(8.0)
        assert repo.get_baseline("u1", "knee") == _baseline(8.0)

    def test_scoped_by_region(self, repo):
        repo.save_baseline("u1", "knee", _baseline(8.0))
        assert repo.get_baseline("u1", "foot") is None
