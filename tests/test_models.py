"""Tests for data models."""

import pytest

from gym_coach.errors import InvalidInput
from gym_coach.models.equipment import (
    default_weight_ladder,
    floor_weight,
    nearest_weight,
    next_weight_above,
    next_weight_below,
    round_to_half,
)
from gym_coach.models.exercises import (
    COMMON_EXERCISES,
    BodyZone,
    Equipment,
    Exercise,
    ExerciseCategory,
    ExerciseTag,
    MuscleGroup,
    load_exercise_catalog,
    mirror_zone,
)
from gym_coach.models.health import HealthCondition, PainContext, PainLog
from gym_coach.models.program import (
    ProgramExercise,
    ProgramSession,
    SessionIntensity,
    SplitType,
    WorkoutProgram,
)
from gym_coach.models.progress import (
    ExerciseHistoryEntry,
    NormalOutcome,
    PainInterrupted,
)
from gym_coach.models.rehab import REHAB_PROTOCOLS, Placement, RehabProtocol
from gym_coach.models.user_profile import Goal, Sex, UserProfile


class TestExercise:
    """Tests for Exercise model."""

    def test_exercise_to_dict(self):
        """Test exercise serialization."""
        exercise = Exercise(
            name="Barbell Bench Press",
            category=ExerciseCategory.COMPOUND,
            primary_muscles=[MuscleGroup.CHEST],
            equipment_needed=[Equipment.BARBELL, Equipment.BENCH],
            contraindications=[BodyZone.SHOULDER_LEFT],
            tags=[ExerciseTag.PUSH, ExerciseTag.HORIZONTAL],
            id=16,
        )
        data = exercise.to_dict()

        assert data["name"] == "Barbell Bench Press"
        assert data["category"] == "compound"
        assert data["equipment_needed"] == ["barbell", "bench"]
        assert data["contraindications"] == ["shoulder_left"]
        assert data["tags"] == ["push", "horizontal"]
        assert data["rehab_target"] is None

    def test_exercise_from_dict(self):
        """Test exercise deserialization."""
        data = {
            "name": "Goblet Squat",
            "category": "compound",
            "primary_muscles": ["quads", "glutes"],
            "equipment_needed": ["dumbbells"],
            "contraindications": ["knee_left", "knee_right"],
            "tags": ["legs", "quad"],
        }
        exercise = Exercise.from_dict(data, id=3)

        assert exercise.id == 3
        assert exercise.category == ExerciseCategory.COMPOUND
        assert MuscleGroup.QUADS in exercise.primary_muscles
        assert exercise.equipment_needed == [Equipment.DUMBBELLS]
        assert exercise.has_tags(ExerciseTag.LEGS, ExerciseTag.QUAD)
        assert not exercise.has_tags(ExerciseTag.HINGE)

    def test_unknown_tag_is_rejected(self):
        """Test that an unknown tag names the offending record."""
        data = {"name": "Mystery Lift", "category": "compound", "tags": ["sideways"]}

        with pytest.raises(InvalidInput, match="Mystery Lift"):
            Exercise.from_dict(data)

    def test_unknown_category_is_rejected(self):
        """Test that an unknown category is rejected."""
        with pytest.raises(InvalidInput):
            Exercise.from_dict({"name": "Odd", "category": "cardio_machine"})

    def test_missing_name_is_rejected(self):
        """Test that a record without a name is rejected."""
        with pytest.raises(InvalidInput):
            Exercise.from_dict({"category": "compound"})


class TestCatalog:
    """Tests for the built-in catalog and catalog loading."""

    def test_ids_are_unique_integers(self):
        """Test that every built-in exercise has a unique id."""
        ids = [ex.id for ex in COMMON_EXERCISES]
        assert all(isinstance(i, int) for i in ids)
        assert len(ids) == len(set(ids))

    def test_names_are_unique(self):
        """Test that no two exercises share a name."""
        names = [ex.name.lower() for ex in COMMON_EXERCISES]
        assert len(names) == len(set(names))

    def test_load_catalog_validates_records(self):
        """Test loading raw records into exercises."""
        records = [ex.to_dict() | {"id": ex.id} for ex in COMMON_EXERCISES[:5]]
        loaded = load_exercise_catalog(records)

        assert [ex.id for ex in loaded] == [1, 2, 3, 4, 5]
        assert loaded[0].name == COMMON_EXERCISES[0].name

    def test_load_catalog_rejects_duplicate_ids(self):
        """Test that duplicate ids are rejected."""
        record = COMMON_EXERCISES[0].to_dict() | {"id": 1}
        other = COMMON_EXERCISES[1].to_dict() | {"id": 1}

        with pytest.raises(InvalidInput, match="Duplicate"):
            load_exercise_catalog([record, other])

    def test_load_catalog_rejects_missing_id(self):
        """Test that records need an id."""
        with pytest.raises(InvalidInput):
            load_exercise_catalog([COMMON_EXERCISES[0].to_dict()])


class TestBodyZone:
    """Tests for zone helpers."""

    def test_mirror_bilateral_zone(self):
        """Test mirroring left and right zones."""
        assert mirror_zone(BodyZone.KNEE_LEFT) == BodyZone.KNEE_RIGHT
        assert mirror_zone(BodyZone.SHOULDER_RIGHT) == BodyZone.SHOULDER_LEFT

    def test_midline_zone_has_no_mirror(self):
        """Test that midline zones do not mirror."""
        assert mirror_zone(BodyZone.LOWER_BACK) is None
        assert mirror_zone(BodyZone.NECK) is None


class TestHealthCondition:
    """Tests for HealthCondition and PainLog."""

    def test_pain_level_out_of_range(self):
        """Test that pain above 10 is rejected."""
        with pytest.raises(InvalidInput):
            HealthCondition(user_id=1, body_zone=BodyZone.KNEE_LEFT, pain_level=11)

    def test_negative_pain_level(self):
        """Test that negative pain is rejected."""
        with pytest.raises(InvalidInput):
            PainLog(user_id=1, zone=BodyZone.NECK, level=-1, context=PainContext.REST_DAY)

    def test_condition_round_trip(self):
        """Test condition serialization keeps zone and state."""
        condition = HealthCondition(
            user_id=1,
            body_zone=BodyZone.ELBOW_RIGHT,
            pain_level=4,
            label="Tennis elbow",
            is_active=False,
        )
        restored = HealthCondition.from_dict(condition.to_dict(), id=9)

        assert restored.id == 9
        assert restored.body_zone == BodyZone.ELBOW_RIGHT
        assert restored.label == "Tennis elbow"
        assert restored.is_active is False

    def test_condition_with_unknown_zone(self):
        """Test that an unknown zone is rejected."""
        with pytest.raises(InvalidInput):
            HealthCondition.from_dict({"user_id": 1, "body_zone": "tail", "pain_level": 2})


class TestUserProfile:
    """Tests for UserProfile model."""

    def test_days_per_week_must_be_positive(self):
        """Test profile validation."""
        with pytest.raises(InvalidInput):
            UserProfile(name="Zero", days_per_week=0)

    def test_profile_round_trip(self, sample_user_profile):
        """Test profile serialization."""
        sample_user_profile.sex = Sex.FEMALE
        restored = UserProfile.from_dict(sample_user_profile.to_dict(), id=1)

        assert restored.goals == [Goal.MUSCLE_GAIN, Goal.REHAB]
        assert restored.sex == Sex.FEMALE
        assert restored.weight_kg == 80.0

    def test_profile_summary(self, sample_user_profile):
        """Test profile summary generation."""
        summary = sample_user_profile.get_summary()

        assert "Test User" in summary
        assert "4/week" in summary
        assert "muscle_gain" in summary


class TestWorkoutProgram:
    """Tests for program models."""

    def test_program_round_trip(self):
        """Test program serialization keeps sessions and intensities."""
        program = WorkoutProgram(
            user_id=1,
            name="Full Body",
            type=SplitType.FULL_BODY,
            sessions=[
                ProgramSession(
                    name="Full Body A",
                    order=1,
                    intensity=SessionIntensity.HEAVY,
                    exercises=[
                        ProgramExercise(exercise_id=1, order=1, sets=4, target_reps=6, rest_seconds=120),
                        ProgramExercise(
                            exercise_id=42, order=2, sets=3, target_reps=30, rest_seconds=60,
                            is_time_based=True,
                        ),
                    ],
                )
            ],
        )
        restored = WorkoutProgram.from_dict(program.to_dict(), id=3)

        assert restored.type == SplitType.FULL_BODY
        assert restored.sessions[0].intensity == SessionIntensity.HEAVY
        assert restored.sessions[0].exercise_ids == [1, 42]
        assert restored.sessions[0].exercises[1].is_time_based is True
        assert restored.sessions_per_week == 1


class TestExerciseHistoryEntry:
    """Tests for history entry parsing."""

    def _record(self, **overrides):
        record = {
            "exercise_id": 1,
            "last_weight_kg": 60,
            "last_reps": [8, 8, 7],
            "outcome": {"type": "normal", "avg_rir": 2},
        }
        record.update(overrides)
        return record

    def test_outcome_mapping(self):
        """Test the tagged outcome is restored."""
        entry = ExerciseHistoryEntry.from_dict(self._record())

        assert entry.outcome == NormalOutcome(avg_rir=2.0)
        assert entry.last_weight_kg == 60.0

    def test_legacy_pain_sentinel(self):
        """Test that a legacy average RIR of -1 means pain."""
        record = self._record(last_avg_rir=-1)
        del record["outcome"]

        entry = ExerciseHistoryEntry.from_dict(record)

        assert entry.outcome == PainInterrupted()

    def test_legacy_rir_value(self):
        """Test that a legacy non-negative RIR is a normal outcome."""
        record = self._record(last_avg_rir=1.5)
        del record["outcome"]

        assert ExerciseHistoryEntry.from_dict(record).outcome == NormalOutcome(1.5)

    def test_malformed_reps(self):
        """Test that non-integer reps are rejected."""
        with pytest.raises(InvalidInput):
            ExerciseHistoryEntry.from_dict(self._record(last_reps=["eight"]))

    def test_missing_weight(self):
        """Test that a missing weight is rejected."""
        record = self._record()
        del record["last_weight_kg"]

        with pytest.raises(InvalidInput):
            ExerciseHistoryEntry.from_dict(record)

    def test_missing_effort(self):
        """Test that an entry needs an outcome or a legacy RIR."""
        record = self._record()
        del record["outcome"]

        with pytest.raises(InvalidInput):
            ExerciseHistoryEntry.from_dict(record)


class TestWeights:
    """Tests for weight rounding helpers."""

    def test_nearest_weight_without_list(self):
        """Test rounding to the default 2.5 kg step, halves up."""
        assert nearest_weight(20.0) == 20.0
        assert nearest_weight(12.0) == 12.5
        assert nearest_weight(11.25) == 12.5
        assert nearest_weight(0) == 0.0

    def test_nearest_weight_prefers_lighter_on_tie(self):
        """Test ties go to the lighter weight."""
        assert nearest_weight(15.0, [10.0, 20.0]) == 10.0
        assert nearest_weight(16.0, [10.0, 20.0]) == 20.0

    def test_neighbours(self):
        """Test next weight above and below."""
        weights = [10.0, 12.5, 15.0]

        assert next_weight_above(12.5, weights) == 15.0
        assert next_weight_above(15.0, weights) is None
        assert next_weight_below(12.5, weights) == 10.0
        assert next_weight_below(10.0, weights) is None
        assert floor_weight(14.0, weights) == 12.5
        assert floor_weight(5.0, weights) is None

    def test_default_ladder(self):
        """Test the fallback ladder covers the current weight."""
        ladder = default_weight_ladder(400.0)

        assert ladder[0] == 0.0
        assert ladder[1] == 2.5
        assert ladder[-1] >= 420.0

    def test_round_to_half(self):
        """Test rounding to 0.5 kg."""
        assert round_to_half(33.6) == 33.5
        assert round_to_half(33.75) == 34.0


class TestRehabProtocols:
    """Tests for the built-in protocol catalog."""

    def test_protocol_round_trip(self):
        """Test protocol serialization."""
        protocol = REHAB_PROTOCOLS[0]
        restored = RehabProtocol.from_dict(protocol.to_dict())

        assert restored == protocol

    def test_every_protocol_has_session_work(self):
        """Test each protocol has at least one non rest-day exercise."""
        for protocol in REHAB_PROTOCOLS:
            assert any(ex.placement != Placement.REST_DAY for ex in protocol.exercises)
