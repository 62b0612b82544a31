"""Tests for the SQLite repositories."""

import asyncio
from datetime import datetime

import pytest

from gym_coach.db import (
    AvailableWeightRepository,
    ExerciseHistoryRepository,
    ExerciseRepository,
    GymEquipmentRepository,
    HealthConditionRepository,
    PainLogRepository,
    TrainingPhaseRepository,
    UserProfileRepository,
    WorkoutProgramRepository,
    WorkoutSessionRepository,
    init_db,
    seed_exercises,
)
from gym_coach.models.equipment import AvailableWeight, GymEquipment, WeightType
from gym_coach.models.exercises import BodyZone, Equipment
from gym_coach.models.health import HealthCondition, PainContext, PainLog
from gym_coach.models.program import ProgramExercise, ProgramSession, SplitType, WorkoutProgram
from gym_coach.models.progress import (
    ExerciseHistoryEntry,
    NormalOutcome,
    PainInterrupted,
    TrainingPhase,
)


@pytest.fixture
def db_path(temp_db_path):
    """An initialized, seeded database."""
    asyncio.run(init_db(temp_db_path))
    asyncio.run(seed_exercises(temp_db_path))
    return temp_db_path


def _program(name="Full Body"):
    return WorkoutProgram(
        user_id=1,
        name=name,
        type=SplitType.FULL_BODY,
        sessions=[
            ProgramSession(
                name="Full Body A",
                order=1,
                exercises=[
                    ProgramExercise(exercise_id=1, order=1, sets=4, target_reps=6, rest_seconds=120)
                ],
            )
        ],
    )


class TestCatalog:
    """Tests for seeding and reading the exercise catalog."""

    def test_seed_is_idempotent(self, db_path):
        """Test seeding twice keeps one copy of each exercise."""
        assert asyncio.run(seed_exercises(db_path)) == 57
        assert asyncio.run(ExerciseRepository(db_path).count()) == 57

    def test_round_trip(self, db_path, catalog_by_id):
        """Test stored exercises read back with their vocabularies."""
        repo = ExerciseRepository(db_path)

        squat = asyncio.run(repo.get(1))
        assert squat == catalog_by_id[1]
        assert asyncio.run(repo.get(999)) is None

    def test_get_by_name_ignores_case(self, db_path):
        """Test name lookups are case-insensitive."""
        exercise = asyncio.run(ExerciseRepository(db_path).get_by_name("barbell bench press"))

        assert exercise.id == 16

    def test_list_all_in_id_order(self, db_path):
        """Test the catalog is listed by id."""
        ids = [ex.id for ex in asyncio.run(ExerciseRepository(db_path).list_all())]

        assert ids == list(range(1, 58))


class TestProfilesAndConditions:
    """Tests for profiles and health conditions."""

    def test_profile_create_update(self, db_path, sample_user_profile):
        """Test creating, reading and updating a profile."""
        repo = UserProfileRepository(db_path)
        profile_id = asyncio.run(repo.create(sample_user_profile))

        stored = asyncio.run(repo.get(profile_id))
        assert stored.name == "Test User"
        assert stored.goals == sample_user_profile.goals
        assert stored.created_at is not None

        stored.days_per_week = 3
        asyncio.run(repo.update(stored))
        assert asyncio.run(repo.get_latest()).days_per_week == 3

    def test_update_requires_id(self, db_path, sample_user_profile):
        """Test updating an unsaved profile fails."""
        with pytest.raises(ValueError):
            asyncio.run(UserProfileRepository(db_path).update(sample_user_profile))

    def test_conditions(self, db_path):
        """Test save_all creates and updates; deactivate hides a condition."""
        repo = HealthConditionRepository(db_path)
        knee = HealthCondition(user_id=1, body_zone=BodyZone.KNEE_LEFT, pain_level=4)
        knee.id = asyncio.run(repo.create(knee))

        knee.pain_level = 6
        back = HealthCondition(user_id=1, body_zone=BodyZone.LOWER_BACK, pain_level=3)
        asyncio.run(repo.save_all([knee, back]))

        conditions = asyncio.run(repo.list_for_user(1))
        assert sorted((c.body_zone, c.pain_level) for c in conditions) == [
            (BodyZone.KNEE_LEFT, 6),
            (BodyZone.LOWER_BACK, 3),
        ]

        asyncio.run(repo.deactivate(knee.id))
        active = asyncio.run(repo.list_for_user(1, active_only=True))
        assert [c.body_zone for c in active] == [BodyZone.LOWER_BACK]
        assert len(asyncio.run(repo.list_for_user(1))) == 2


class TestEquipmentAndWeights:
    """Tests for gym equipment and available weights."""

    def test_equipment_upsert_and_toggle(self, db_path):
        """Test equipment is unique per user and can be toggled."""
        repo = GymEquipmentRepository(db_path)
        asyncio.run(repo.upsert(GymEquipment(user_id=1, name=Equipment.BARBELL)))
        asyncio.run(repo.upsert(GymEquipment(user_id=1, name=Equipment.BARBELL, notes="20kg bar")))

        items = asyncio.run(repo.list_for_user(1))
        assert len(items) == 1
        assert items[0].notes == "20kg bar"

        assert asyncio.run(repo.set_available(1, Equipment.BARBELL, False))
        assert not asyncio.run(repo.list_for_user(1))[0].is_available
        assert not asyncio.run(repo.set_available(1, Equipment.LEG_PRESS, False))

    def test_replace_weights(self, db_path):
        """Test the weight list is replaced wholesale."""
        repo = AvailableWeightRepository(db_path)
        asyncio.run(repo.replace_all(1, [AvailableWeight(user_id=1, weight_kg=w) for w in (10, 5)]))
        asyncio.run(
            repo.replace_all(
                1,
                [
                    AvailableWeight(user_id=1, weight_kg=20, weight_type=WeightType.BARBELL_PLATE),
                    AvailableWeight(user_id=1, weight_kg=12.5),
                    AvailableWeight(user_id=1, weight_kg=12.5),
                    AvailableWeight(user_id=1, weight_kg=30, is_available=False),
                ],
            )
        )

        assert asyncio.run(repo.get_weights(1)) == [12.5, 20]
        assert len(asyncio.run(repo.list_for_user(1))) == 4


class TestProgramsAndSessions:
    """Tests for programs and completed sessions."""

    def test_replace_active(self, db_path):
        """Test only the newest program stays active."""
        repo = WorkoutProgramRepository(db_path)
        first_id = asyncio.run(repo.replace_active(1, _program("Old")))
        second_id = asyncio.run(repo.replace_active(1, _program("New")))

        active = asyncio.run(repo.get_active(1))
        assert active.id == second_id
        assert active.name == "New"
        assert active.sessions[0].exercises[0].target_reps == 6
        assert not asyncio.run(repo.get(first_id)).is_active
        assert len(asyncio.run(repo.list_for_user(1))) == 2

    def test_last_session_name(self, db_path):
        """Test the most recent session wins."""
        repo = WorkoutSessionRepository(db_path)
        assert asyncio.run(repo.get_last_session_name(1, 1)) is None

        asyncio.run(repo.record(1, 1, "Full Body A"))
        asyncio.run(repo.record(1, 1, "Full Body B"))

        assert asyncio.run(repo.get_last_session_name(1, 1)) == "Full Body B"
        assert asyncio.run(repo.get_last_session_name(1, 2)) is None

    def test_record_completed(self, db_path):
        """Test a finished workout is stored with ids assigned to new conditions."""
        entry = ExerciseHistoryEntry(
            exercise_id=1,
            last_weight_kg=40.0,
            last_reps=[8, 8, 8],
            outcome=NormalOutcome(),
            prescribed_sets=3,
            prescribed_reps=8,
        )
        log = PainLog(1, BodyZone.KNEE_LEFT, 4, PainContext.END_SESSION)
        condition = HealthCondition(user_id=1, body_zone=BodyZone.KNEE_LEFT, pain_level=4)

        asyncio.run(
            WorkoutSessionRepository(db_path).record_completed(
                1, 1, "Full Body A", [entry], [log], [condition]
            )
        )

        assert condition.id is not None
        history = asyncio.run(ExerciseHistoryRepository(db_path).get_for_user(1))
        assert history[1].last_reps == [8, 8, 8]
        assert len(asyncio.run(PainLogRepository(db_path).list_for_user(1))) == 1
        assert (
            asyncio.run(WorkoutSessionRepository(db_path).get_last_session_name(1, 1))
            == "Full Body A"
        )

    def test_record_completed_rolls_back(self, db_path):
        """Test an invalid history entry stores nothing."""
        good = ExerciseHistoryEntry(40.0, [8], NormalOutcome(), exercise_id=1)
        bad = ExerciseHistoryEntry(40.0, [8], NormalOutcome())
        repo = WorkoutSessionRepository(db_path)

        with pytest.raises(ValueError):
            asyncio.run(repo.record_completed(1, 1, "Full Body A", [good, bad], [], []))

        assert asyncio.run(ExerciseHistoryRepository(db_path).get_for_user(1)) == {}
        assert asyncio.run(repo.get_last_session_name(1, 1)) is None


class TestHistoryPainAndPhases:
    """Tests for exercise history, pain logs and training phases."""

    def test_history_upsert_overwrites(self, db_path):
        """Test only the latest entry per exercise is kept."""
        repo = ExerciseHistoryRepository(db_path)
        entry = ExerciseHistoryEntry(
            exercise_id=1, last_weight_kg=40.0, last_reps=[6, 6, 6, 6], outcome=NormalOutcome(2.0)
        )
        asyncio.run(repo.upsert(1, entry))
        entry.last_weight_kg = 42.5
        entry.outcome = PainInterrupted()
        asyncio.run(repo.upsert(1, entry))

        history = asyncio.run(repo.get_for_user(1))
        assert list(history) == [1]
        assert history[1].last_weight_kg == 42.5
        assert history[1].outcome == PainInterrupted()

    def test_history_requires_exercise_id(self, db_path):
        """Test entries without an exercise id are rejected."""
        entry = ExerciseHistoryEntry(last_weight_kg=0, last_reps=[], outcome=NormalOutcome(2.0))

        with pytest.raises(ValueError):
            asyncio.run(ExerciseHistoryRepository(db_path).upsert(1, entry))

    def test_pain_logs_newest_first(self, db_path):
        """Test pain logs come back newest first."""
        repo = PainLogRepository(db_path)
        asyncio.run(
            repo.create(
                PainLog(1, BodyZone.KNEE_LEFT, 4, PainContext.ONBOARDING, date=datetime(2026, 1, 1))
            )
        )
        asyncio.run(
            repo.create(
                PainLog(1, BodyZone.KNEE_LEFT, 2, PainContext.END_SESSION, date=datetime(2026, 2, 1))
            )
        )

        logs = asyncio.run(repo.list_for_user(1))
        assert [log.level for log in logs] == [2, 4]
        assert logs[0].date == datetime(2026, 2, 1)

    def test_phases(self, db_path):
        """Test starting a phase closes the previous one."""
        repo = TrainingPhaseRepository(db_path)
        assert asyncio.run(repo.get_current(1)) is None

        first_id = asyncio.run(repo.start_phase(1, TrainingPhase.HYPERTROPHY))
        asyncio.run(repo.set_week_count(first_id, 3))
        assert asyncio.run(repo.get_current(1)).week_count == 3

        asyncio.run(repo.start_phase(1, TrainingPhase.DELOAD))
        current = asyncio.run(repo.get_current(1))
        assert current.phase == TrainingPhase.DELOAD
        assert current.id != first_id
        assert current.ended_at is None

    def test_previous_phase_skips_deloads(self, db_path):
        """Test the phase before a deload is found past other deloads."""
        repo = TrainingPhaseRepository(db_path)
        assert asyncio.run(repo.get_previous(1)) is None

        asyncio.run(repo.start_phase(1, TrainingPhase.TRANSITION))
        asyncio.run(repo.start_phase(1, TrainingPhase.DELOAD))
        asyncio.run(repo.start_phase(1, TrainingPhase.DELOAD))

        assert asyncio.run(repo.get_previous(1)) == TrainingPhase.TRANSITION
