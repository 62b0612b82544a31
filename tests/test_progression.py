"""Tests for load progression, deloads and phase changes."""

import pytest

from gym_coach.engine.progression import (
    PhaseInput,
    ProgressionAction,
    ProgressionInput,
    calculate_progression,
    deload_weight,
    get_phase_recommendation,
    should_deload,
)
from gym_coach.errors import InvalidInput
from gym_coach.models.progress import NormalOutcome, PainInterrupted, TrainingPhase


def _input(**overrides):
    """A successful 3x8 at 40kg unless overridden."""
    values = dict(
        prescribed_weight_kg=40.0,
        prescribed_reps=8,
        prescribed_sets=3,
        actual_reps=[8, 8, 8],
        outcome=NormalOutcome(avg_rir=2.0),
        avg_rest_seconds=90,
        prescribed_rest_seconds=90,
        available_weights=[],
    )
    values.update(overrides)
    return ProgressionInput(**values)


class TestCalculateProgression:
    """Tests for calculate_progression."""

    def test_increase_on_default_ladder(self):
        """Test a clean session moves up one 2.5kg step."""
        result = calculate_progression(_input())

        assert result.action == ProgressionAction.INCREASE_WEIGHT
        assert result.next_weight_kg == 42.5
        assert result.next_reps == 8

    def test_increase_to_next_available_weight(self):
        """Test the increase snaps to the user's weights."""
        result = calculate_progression(_input(available_weights=[35, 40, 45]))

        assert result.next_weight_kg == 45

    def test_maintain_at_heaviest_weight(self):
        """Test there is nothing to increase to."""
        result = calculate_progression(_input(available_weights=[35, 40]))

        assert result.action == ProgressionAction.MAINTAIN
        assert result.next_weight_kg == 40

    def test_pain_blocks_progression(self):
        """Test pain during the exercise holds the weight."""
        result = calculate_progression(_input(outcome=PainInterrupted()))

        assert result.action == ProgressionAction.MAINTAIN
        assert result.next_weight_kg == 40

    def test_maximal_effort_blocks_progression(self):
        """Test grinding reps are consolidated."""
        result = calculate_progression(_input(outcome=NormalOutcome(avg_rir=0.5)))

        assert result.action == ProgressionAction.MAINTAIN

    def test_low_reserve_maintains(self):
        """Test one rep in reserve is not enough to go up."""
        result = calculate_progression(_input(outcome=NormalOutcome(avg_rir=1.0)))

        assert result.action == ProgressionAction.MAINTAIN

    def test_rest_inflation_boundary(self):
        """Test 1.5x the prescribed rest still allows an increase."""
        assert (
            calculate_progression(_input(avg_rest_seconds=135)).action
            == ProgressionAction.INCREASE_WEIGHT
        )
        assert calculate_progression(_input(avg_rest_seconds=136)).action == ProgressionAction.MAINTAIN

    def test_regression_lowers_weight(self):
        """Test missing more than a quarter of the reps lowers the weight."""
        result = calculate_progression(_input(actual_reps=[5, 5, 5]))

        assert result.action == ProgressionAction.DECREASE
        assert result.next_weight_kg == 37.5
        assert result.next_reps == 8

    def test_regression_boundary_maintains(self):
        """Test a deficit of exactly 25% is not a regression."""
        result = calculate_progression(_input(actual_reps=[6, 6, 6]))

        assert result.action == ProgressionAction.MAINTAIN
        assert result.next_weight_kg == 40

    def test_regression_without_lighter_weight(self):
        """Test the weight holds when nothing lighter is available."""
        result = calculate_progression(_input(actual_reps=[3, 3, 3], available_weights=[40]))

        assert result.next_weight_kg == 40

    def test_consecutive_increases_chain(self):
        """Test feeding an increase back in moves up another step."""
        first = calculate_progression(_input())
        second = calculate_progression(
            _input(prescribed_weight_kg=first.next_weight_kg, prescribed_reps=first.next_reps)
        )

        assert first.next_weight_kg == 42.5
        assert second.action == ProgressionAction.INCREASE_WEIGHT
        assert second.next_weight_kg == 45.0

    def test_chain_on_user_weights(self):
        """Test a two-step chain follows the user's weight list."""
        weights = [40, 42.5, 45, 50]
        first = calculate_progression(_input(available_weights=weights))
        second = calculate_progression(
            _input(prescribed_weight_kg=first.next_weight_kg, available_weights=weights)
        )

        assert (first.next_weight_kg, second.next_weight_kg) == (42.5, 45)

    def test_missed_reps_do_not_increase(self):
        """Test one short set is enough to hold the weight."""
        result = calculate_progression(_input(actual_reps=[8, 8, 7]))

        assert result.action == ProgressionAction.MAINTAIN

    def test_no_logged_sets(self):
        """Test an empty session keeps the weight."""
        result = calculate_progression(_input(actual_reps=[]))

        assert result.action == ProgressionAction.MAINTAIN
        assert result.next_weight_kg == 40

    def test_deload_phase(self):
        """Test deload overrides everything else."""
        result = calculate_progression(
            _input(prescribed_weight_kg=100.0, outcome=PainInterrupted(), phase=TrainingPhase.DELOAD)
        )

        assert result.action == ProgressionAction.DECREASE
        assert result.next_weight_kg == 60

    @pytest.mark.parametrize(
        "overrides",
        [
            {"prescribed_reps": 0},
            {"prescribed_sets": 0},
            {"prescribed_weight_kg": -5.0},
            {"actual_reps": [8, -1, 8]},
        ],
    )
    def test_rejects_malformed_input(self, overrides):
        """Test invalid prescriptions raise InvalidInput."""
        with pytest.raises(InvalidInput):
            calculate_progression(_input(**overrides))


class TestDeload:
    """Tests for deload helpers."""

    def test_deload_weight_snaps_down(self):
        """Test 60% is snapped to an available weight at or below it."""
        assert deload_weight(70.0, [20, 30, 40, 50]) == 40

    def test_deload_weight_without_lighter_option(self):
        """Test the lightest available weight is used when nothing is light enough."""
        assert deload_weight(50.0, [40, 50]) == 40

    def test_deload_weight_without_weights(self):
        """Test the rounded target is used when there is no weight list."""
        assert deload_weight(50.0, []) == 30

    def test_should_deload(self):
        """Test the deload cadence."""
        assert should_deload(5)
        assert should_deload(8)
        assert not should_deload(4)


class TestPhaseRecommendation:
    """Tests for get_phase_recommendation."""

    def _phase(self, phase, weeks, pain=1.0, consistency=0.8):
        return PhaseInput(
            current_phase=phase,
            weeks_in_phase=weeks,
            avg_pain_level=pain,
            progression_consistency=consistency,
        )

    def test_hypertrophy_to_transition(self):
        """Test moving on after six consistent, low-pain weeks."""
        assert (
            get_phase_recommendation(self._phase(TrainingPhase.HYPERTROPHY, 6))
            == TrainingPhase.TRANSITION
        )

    def test_hypertrophy_stays_too_early(self):
        """Test five weeks is not enough."""
        assert (
            get_phase_recommendation(self._phase(TrainingPhase.HYPERTROPHY, 5))
            == TrainingPhase.HYPERTROPHY
        )

    def test_pain_holds_phase(self):
        """Test average pain above 2 blocks the change."""
        assert (
            get_phase_recommendation(self._phase(TrainingPhase.HYPERTROPHY, 8, pain=2.5))
            == TrainingPhase.HYPERTROPHY
        )

    def test_inconsistency_holds_phase(self):
        """Test progression consistency below 0.7 blocks the change."""
        assert (
            get_phase_recommendation(self._phase(TrainingPhase.HYPERTROPHY, 8, consistency=0.6))
            == TrainingPhase.HYPERTROPHY
        )

    def test_transition_to_strength(self):
        """Test the transition block lasts four weeks."""
        assert (
            get_phase_recommendation(self._phase(TrainingPhase.TRANSITION, 4))
            == TrainingPhase.STRENGTH
        )

    def test_strength_is_terminal(self):
        """Test strength never moves on."""
        assert (
            get_phase_recommendation(self._phase(TrainingPhase.STRENGTH, 20))
            == TrainingPhase.STRENGTH
        )

    def test_deload_returns_to_interrupted_phase(self):
        """Test a deload hands back to the phase before it."""
        phase = self._phase(TrainingPhase.DELOAD, 1)
        phase.previous_phase = TrainingPhase.TRANSITION

        assert get_phase_recommendation(phase) == TrainingPhase.TRANSITION

    def test_deload_without_previous_phase(self):
        """Test a deload with nothing before it starts hypertrophy."""
        assert (
            get_phase_recommendation(self._phase(TrainingPhase.DELOAD, 3))
            == TrainingPhase.HYPERTROPHY
        )
