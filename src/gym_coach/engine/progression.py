"""Load progression, deload and training phase decisions."""

import logging
from dataclasses import dataclass
from enum import Enum

from ..config import (
    DELOAD_AFTER_WEEKS,
    DELOAD_FACTOR,
    GOOD_RIR,
    HYPERTROPHY_MIN_WEEKS,
    PAIN_RIR,
    PHASE_MAX_AVG_PAIN,
    PHASE_MIN_CONSISTENCY,
    REGRESSION_DEFICIT,
    REST_INFLATION_RATIO,
    TRANSITION_MIN_WEEKS,
)
from ..errors import InvalidInput
from ..models.equipment import (
    default_weight_ladder,
    floor_weight,
    next_weight_above,
    next_weight_below,
    round_half_up,
)
from ..models.progress import NormalOutcome, PainInterrupted, PerformanceOutcome, TrainingPhase

logger = logging.getLogger(__name__)


class ProgressionAction(str, Enum):
    """What to do with the load next session."""

    INCREASE_WEIGHT = "increase_weight"
    MAINTAIN = "maintain"
    DECREASE = "decrease"


@dataclass
class ProgressionInput:
    """Last session's performance of one exercise."""

    prescribed_weight_kg: float
    prescribed_reps: int
    prescribed_sets: int
    actual_reps: list[int]
    outcome: PerformanceOutcome
    avg_rest_seconds: float
    prescribed_rest_seconds: float
    available_weights: list[float]
    phase: TrainingPhase = TrainingPhase.HYPERTROPHY


@dataclass
class ProgressionResult:
    """Next-session prescription."""

    action: ProgressionAction
    next_weight_kg: float
    next_reps: int
    reason: str


def _validate(input: ProgressionInput) -> None:
    if input.prescribed_reps < 1 or input.prescribed_sets < 1:
        raise InvalidInput(
            f"Prescribed sets and reps must be positive, got "
            f"{input.prescribed_sets}x{input.prescribed_reps}"
        )
    if input.prescribed_weight_kg < 0:
        raise InvalidInput(f"Negative weight: {input.prescribed_weight_kg}")
    if any(r < 0 for r in input.actual_reps):
        raise InvalidInput(f"Negative reps in {input.actual_reps}")


def deload_weight(last_weight_kg: float, available_weights: list[float]) -> float:
    """60% of the last weight, snapped down to an available weight.

    When nothing available is light enough the lightest weight is used, so
    the result is always one of the available weights.
    """
    target = round_half_up(last_weight_kg * DELOAD_FACTOR)
    if not available_weights:
        return target
    snapped = floor_weight(target, available_weights)
    return snapped if snapped is not None else min(available_weights)


def calculate_progression(input: ProgressionInput) -> ProgressionResult:
    """Decide next session's weight from last session's performance.

    Rules, first match wins: deload phase, pain, missing data, rest
    inflation, regression, good performance, otherwise maintain. Reps always
    return to the prescribed target.

    Raises:
        InvalidInput: If the prescription or reps are malformed.
    """
    _validate(input)
    weight = input.prescribed_weight_kg
    reps = input.prescribed_reps
    weights = input.available_weights or default_weight_ladder(weight)

    def result(action, next_weight, reason):
        logger.debug("Progression %s: %.2f -> %.2f (%s)", action.value, weight, next_weight, reason)
        return ProgressionResult(action=action, next_weight_kg=next_weight, next_reps=reps, reason=reason)

    if input.phase == TrainingPhase.DELOAD:
        target = deload_weight(weight, weights)
        action = ProgressionAction.DECREASE if target < weight else ProgressionAction.MAINTAIN
        return result(action, target, "Deload week: 60% of last weight")

    if isinstance(input.outcome, PainInterrupted):
        return result(ProgressionAction.MAINTAIN, weight, "Pain during exercise: no progression")
    if isinstance(input.outcome, NormalOutcome) and input.outcome.avg_rir < PAIN_RIR:
        return result(ProgressionAction.MAINTAIN, weight, "Maximal effort: consolidate this weight")

    if not input.actual_reps:
        return result(ProgressionAction.MAINTAIN, weight, "No sets logged last session")

    if input.avg_rest_seconds > input.prescribed_rest_seconds * REST_INFLATION_RATIO:
        return result(ProgressionAction.MAINTAIN, weight, "Rest ran long: hold the weight")

    expected = input.prescribed_sets * reps
    deficit = 1 - sum(input.actual_reps) / expected
    if deficit > REGRESSION_DEFICIT:
        lower = next_weight_below(weight, weights)
        return result(
            ProgressionAction.DECREASE,
            lower if lower is not None else weight,
            f"Missed {deficit:.0%} of target reps: lower the weight",
        )

    all_sets_hit = len(input.actual_reps) >= input.prescribed_sets and all(
        r >= reps for r in input.actual_reps
    )
    if all_sets_hit and input.outcome.avg_rir >= GOOD_RIR:
        higher = next_weight_above(weight, weights)
        if higher is None:
            return result(ProgressionAction.MAINTAIN, weight, "No heavier weight available")
        return result(ProgressionAction.INCREASE_WEIGHT, higher, f"All sets done with reserve: {higher}kg")

    return result(ProgressionAction.MAINTAIN, weight, "Keep building at this weight")


def should_deload(weeks_in_current_phase: int) -> bool:
    """True once enough weeks have passed without a deload."""
    return weeks_in_current_phase >= DELOAD_AFTER_WEEKS


@dataclass
class PhaseInput:
    """Signals for the phase state machine."""

    current_phase: TrainingPhase
    weeks_in_phase: int
    avg_pain_level: float
    progression_consistency: float  # share of sessions that progressed, 0-1
    previous_phase: TrainingPhase | None = None


_NEXT_PHASE = {
    TrainingPhase.HYPERTROPHY: (TrainingPhase.TRANSITION, HYPERTROPHY_MIN_WEEKS),
    TrainingPhase.TRANSITION: (TrainingPhase.STRENGTH, TRANSITION_MIN_WEEKS),
}


def get_phase_recommendation(input: PhaseInput) -> TrainingPhase:
    """Recommend the phase for next week.

    hypertrophy -> transition -> strength, strength being terminal. Moving on
    needs enough weeks, consistent progression and low pain. A deload hands
    back to the phase it interrupted.
    """
    if input.current_phase == TrainingPhase.DELOAD:
        return input.previous_phase or TrainingPhase.HYPERTROPHY
    if input.current_phase not in _NEXT_PHASE:
        return input.current_phase

    next_phase, min_weeks = _NEXT_PHASE[input.current_phase]
    if (
        input.weeks_in_phase >= min_weeks
        and input.progression_consistency >= PHASE_MIN_CONSISTENCY
        and input.avg_pain_level <= PHASE_MAX_AVG_PAIN
    ):
        return next_phase
    return input.current_phase
