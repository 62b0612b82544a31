"""Tests for program generation."""

from dataclasses import replace

import pytest

from gym_coach.engine.program_generator import (
    GeneratedProgram,
    ProgramGeneratorInput,
    eligible_exercises,
    generate_program,
    verify_program,
)
from gym_coach.errors import InvalidInput, ProgramGenerationError
from gym_coach.models.equipment import GymEquipment
from gym_coach.models.exercises import BodyZone, Equipment
from gym_coach.models.health import HealthCondition
from gym_coach.models.program import ProgramExercise, ProgramSession, SessionIntensity, SplitType


def _condition(zone, pain_level, **kwargs):
    return HealthCondition(user_id=1, body_zone=zone, pain_level=pain_level, **kwargs)


def _input(days=3, minutes=90, **kwargs):
    return ProgramGeneratorInput(user_id=1, days_per_week=days, minutes_per_session=minutes, **kwargs)


class TestGenerateProgram:
    """Tests for generate_program."""

    def test_full_body_three_days(self, catalog, full_gym):
        """Test a three day full body program with a complete gym."""
        program = generate_program(_input(equipment=full_gym), catalog)

        assert program.type == SplitType.FULL_BODY
        assert program.name == "Full Body"
        assert [s.name for s in program.sessions] == ["Full Body A", "Full Body B", "Full Body C"]
        assert [s.intensity for s in program.sessions] == [
            SessionIntensity.HEAVY,
            SessionIntensity.VOLUME,
            SessionIntensity.MODERATE,
        ]
        assert program.sessions[0].exercise_ids == [1, 16, 31, 27, 29, 42]
        assert program.sessions[1].exercise_ids == [9, 23, 36, 27, 29, 42]
        assert program.sessions[2].exercise_ids == [6, 20, 34, 27, 38, 42]

    def test_upper_lower(self, catalog, full_gym):
        """Test the four day split."""
        program = generate_program(_input(days=4, equipment=full_gym), catalog)

        assert program.type == SplitType.UPPER_LOWER
        assert program.sessions[0].exercise_ids == [1, 6, 9, 13, 14, 42]
        assert program.sessions[1].exercise_ids == [16, 23, 20, 27, 29, 41]

    def test_push_pull_legs(self, catalog, full_gym):
        """Test five days produce the six-session rotation."""
        program = generate_program(_input(days=5, equipment=full_gym), catalog)

        assert program.type == SplitType.PUSH_PULL_LEGS
        assert len(program.sessions) == 6
        assert [s.order for s in program.sessions] == [1, 2, 3, 4, 5, 6]

    def test_time_budget_applies(self, catalog, full_gym):
        """Test sessions are trimmed to the available minutes."""
        program = generate_program(_input(minutes=60, equipment=full_gym), catalog)

        assert program.sessions[0].exercise_ids == [1, 16, 31, 29]

    def test_home_gym(self, catalog):
        """Test a dumbbells and bench setup."""
        home = [
            GymEquipment(user_id=1, name=Equipment.DUMBBELLS),
            GymEquipment(user_id=1, name=Equipment.BENCH),
        ]
        program = generate_program(_input(equipment=home), catalog)

        # no cable or band, so the face pull slot stays empty
        assert program.sessions[0].exercise_ids == [3, 17, 35, 27, 42]

    def test_painful_knee_removes_quad_work(self, catalog, full_gym):
        """Test severe knee pain leaves the quad slot empty."""
        conditions = [_condition(BodyZone.KNEE_RIGHT, 8)]
        program = generate_program(_input(equipment=full_gym, conditions=conditions), catalog)

        first = program.sessions[0].exercise_ids
        assert first[0] == 16
        assert not {1, 2, 3, 4}.intersection(first)

    def test_refresh_swaps_exercises(self, catalog, full_gym):
        """Test refresh picks different exercises when enough remain."""
        excluded = {1, 16, 31, 27, 29, 42}
        program = generate_program(
            _input(equipment=full_gym, exclude_exercise_ids=excluded), catalog
        )

        assert program.sessions[0].exercise_ids == [2, 17, 32, 28, 30, 43]

    def test_never_selects_rehab_or_cardio(self, catalog, full_gym):
        """Test generated sessions only hold strength and core work."""
        program = generate_program(_input(days=5, equipment=full_gym), catalog)
        by_id = {ex.id: ex for ex in catalog}

        for session in program.sessions:
            for pe in session.exercises:
                assert not by_id[pe.exercise_id].is_rehab
                assert pe.exercise_id != 5

    @pytest.mark.parametrize("days,minutes", [(0, 60), (3, 0)])
    def test_rejects_bad_schedule(self, catalog, full_gym, days, minutes):
        """Test non-positive days or minutes are rejected."""
        with pytest.raises(InvalidInput):
            generate_program(_input(days=days, minutes=minutes, equipment=full_gym), catalog)

    def test_rejects_catalog_without_ids(self, catalog, full_gym):
        """Test every catalog exercise needs an id."""
        broken = list(catalog)
        broken[0] = replace(broken[0], id=None)

        with pytest.raises(InvalidInput):
            generate_program(_input(equipment=full_gym), broken)


class TestEligibleExercises:
    """Tests for the pre-resolution pool."""

    def test_drops_cardio(self, catalog, full_gym):
        """Test cardio never enters the pool."""
        pool = eligible_exercises(catalog, full_gym, [])

        assert 5 not in {ex.id for ex in pool}

    def test_ignores_refresh_when_pool_too_small(self, catalog):
        """Test exclusions are dropped when too little would remain."""
        bodyweight_only = eligible_exercises(catalog, [], [])
        excluded = {ex.id for ex in bodyweight_only}

        pool = eligible_exercises(catalog, [], [], exclude_ids=excluded)

        assert pool == bodyweight_only


class TestVerifyProgram:
    """Tests for verify_program."""

    def _session(self, name, ids, intensity=SessionIntensity.HEAVY):
        return ProgramSession(
            name=name,
            order=1,
            intensity=intensity,
            exercises=[
                ProgramExercise(exercise_id=i, order=n, sets=3, target_reps=10, rest_seconds=60)
                for n, i in enumerate(ids, start=1)
            ],
        )

    def test_duplicate_exercise(self, catalog):
        """Test a repeated exercise fails verification."""
        program = GeneratedProgram("Full Body", SplitType.FULL_BODY, [self._session("A", [1, 1])])

        with pytest.raises(ProgramGenerationError):
            verify_program(program, catalog)

    def test_unknown_exercise(self, catalog):
        """Test a dangling id fails verification."""
        program = GeneratedProgram("Full Body", SplitType.FULL_BODY, [self._session("A", [999])])

        with pytest.raises(ProgramGenerationError):
            verify_program(program, catalog)

    def test_split_needs_heavy_and_volume(self, catalog):
        """Test a four-session split with a single intensity fails."""
        sessions = [self._session(f"S{i}", [1]) for i in range(4)]
        program = GeneratedProgram("Upper / Lower", SplitType.UPPER_LOWER, sessions)

        with pytest.raises(ProgramGenerationError):
            verify_program(program, catalog)

    def test_valid_program_passes(self, catalog):
        """Test a well-formed program verifies."""
        program = GeneratedProgram(
            "Full Body", SplitType.FULL_BODY, [self._session("A", [1, 16, 31])]
        )

        verify_program(program, catalog)
