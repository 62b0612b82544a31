"""Runtime state of a workout in progress."""

import logging

from ..config import (
    HIGH_REP_BODYWEIGHT_RATIO,
    LOW_REP_BODYWEIGHT_RATIO,
    LOW_REP_THRESHOLD,
)
from ..errors import InvalidInput
from ..models.equipment import default_weight_ladder, nearest_weight, round_to_half
from ..models.exercises import Exercise
from ..models.program import ProgramExercise, ProgramSession, SessionIntensity
from ..models.progress import (
    ExerciseHistoryEntry,
    ExerciseStatus,
    NormalOutcome,
    PainInterrupted,
    SessionExercise,
    SessionSet,
    SkipReason,
    TrainingPhase,
)
from .pain_feedback import PainAction, PainAdjustment
from .progression import (
    ProgressionInput,
    ProgressionResult,
    calculate_progression,
)

logger = logging.getLogger(__name__)


class SessionEngine:
    """Walks a program session exercise by exercise.

    Each exercise moves pending -> in_progress -> completed, or to skipped.
    The session is complete once the pointer passes the last exercise. One
    engine belongs to one workout; it is not safe to share.
    """

    def __init__(
        self,
        session: ProgramSession,
        history: dict[int, ExerciseHistoryEntry],
        catalog: dict[int, Exercise] | None = None,
        available_weights: list[float] | None = None,
        phase: TrainingPhase = TrainingPhase.HYPERTROPHY,
        body_weight_kg: float | None = None,
    ):
        """Prescribe every exercise of the session.

        Args:
            session: The program session to run
            history: Latest history entry per exercise id
            catalog: Exercises by id, for names and bodyweight detection
            available_weights: Selectable weights; a 2.5 kg ladder when empty
            phase: Current training phase (deload overrides progression)
            body_weight_kg: Used to estimate a first weight without history

        Raises:
            InvalidInput: If the session references an exercise missing
                from a supplied catalog.
        """
        self.session = session
        self.history = history
        self.catalog = catalog or {}
        self.available_weights = available_weights or []
        self.phase = phase
        self.body_weight_kg = body_weight_kg
        self.intensity: SessionIntensity | None = session.intensity
        self.current_index = 0
        self.occupied = False
        self._progression: dict[int, ProgressionResult] = {}

        if catalog is not None:
            unknown = [pe.exercise_id for pe in session.exercises if pe.exercise_id not in catalog]
            if unknown:
                raise InvalidInput(f"Session '{session.name}' references unknown exercises {unknown}")

        self.exercises: list[SessionExercise] = [self._prescribe(pe) for pe in session.exercises]

    # Prescription

    def _weights_for(self, reference_kg: float) -> list[float]:
        return self.available_weights or default_weight_ladder(reference_kg)

    def _is_bodyweight(self, pe: ProgramExercise) -> bool:
        exercise = self.catalog.get(pe.exercise_id)
        return pe.is_time_based or (exercise is not None and not exercise.equipment_needed)

    def _estimate_first_weight(self, pe: ProgramExercise) -> float:
        if self.body_weight_kg is None or self._is_bodyweight(pe):
            return 0.0
        ratio = LOW_REP_BODYWEIGHT_RATIO if pe.target_reps <= LOW_REP_THRESHOLD else HIGH_REP_BODYWEIGHT_RATIO
        return nearest_weight(self.body_weight_kg * ratio, self.available_weights)

    def _run_progression(self, pe: ProgramExercise, entry: ExerciseHistoryEntry) -> ProgressionResult:
        # Last performance is judged against what was prescribed then, which
        # differs from this slot when an exercise appears on heavy and volume days.
        cached = self._progression.get(pe.exercise_id)
        if cached is not None:
            return cached

        result = calculate_progression(
            ProgressionInput(
                prescribed_weight_kg=entry.last_weight_kg,
                prescribed_reps=entry.prescribed_reps or pe.target_reps,
                prescribed_sets=entry.prescribed_sets or pe.sets,
                actual_reps=entry.last_reps,
                outcome=entry.outcome,
                avg_rest_seconds=(
                    entry.last_avg_rest_seconds
                    if entry.last_avg_rest_seconds is not None
                    else pe.rest_seconds
                ),
                prescribed_rest_seconds=entry.prescribed_rest_seconds or pe.rest_seconds,
                available_weights=self._weights_for(entry.last_weight_kg),
                phase=self.phase,
            )
        )
        self._progression[pe.exercise_id] = result
        return result

    def _prescribe(self, pe: ProgramExercise) -> SessionExercise:
        entry = self.history.get(pe.exercise_id)
        if entry is None:
            weight = self._estimate_first_weight(pe)
        else:
            weight = self._run_progression(pe, entry).next_weight_kg

        exercise = self.catalog.get(pe.exercise_id)
        return SessionExercise(
            exercise_id=pe.exercise_id,
            exercise_name=exercise.name if exercise else "",
            order=pe.order,
            prescribed_sets=pe.sets,
            prescribed_reps=pe.target_reps,
            prescribed_weight_kg=weight,
            rest_seconds=pe.rest_seconds,
            is_time_based=pe.is_time_based,
        )

    def progression_result(self, exercise_id: int) -> ProgressionResult | None:
        """The progression decision behind an exercise's prescription."""
        return self._progression.get(exercise_id)

    def apply_pain_adjustments(self, adjustments: list[PainAdjustment]) -> None:
        """Apply pain adjustments before the workout starts.

        reduce_weight scales the reference (or prescribed) weight; no_progression
        returns to last session's weight; skip removes the exercise.

        Raises:
            InvalidInput: If the workout has already started.
        """
        if self.current_index > 0 or any(ex.sets for ex in self.exercises):
            raise InvalidInput("Pain adjustments must be applied before the workout starts")

        by_id = {ex.exercise_id: ex for ex in self.exercises}
        skipped: set[int] = set()
        for adjustment in adjustments:
            exercise = by_id.get(adjustment.exercise_id)
            if exercise is None:
                continue

            if adjustment.action == PainAction.REDUCE_WEIGHT and adjustment.weight_multiplier:
                base = adjustment.reference_weight_kg
                if base is None:
                    base = exercise.prescribed_weight_kg
                exercise.prescribed_weight_kg = round_to_half(base * adjustment.weight_multiplier)
            elif adjustment.action == PainAction.NO_PROGRESSION:
                entry = self.history.get(exercise.exercise_id)
                if entry is not None:
                    exercise.prescribed_weight_kg = entry.last_weight_kg
            elif adjustment.action == PainAction.SKIP:
                skipped.add(exercise.exercise_id)

        if skipped:
            logger.info("Skipping %d exercises because of pain", len(skipped))
            self.exercises = [ex for ex in self.exercises if ex.exercise_id not in skipped]

    # Runtime state

    def current_exercise(self) -> SessionExercise | None:
        """The exercise at the pointer, or None once the session is complete."""
        if self.is_session_complete():
            return None
        return self.exercises[self.current_index]

    def current_set_number(self) -> int:
        """1-based number of the next set to log."""
        current = self.current_exercise()
        return len(current.sets) + 1 if current else 0

    def _require_current(self) -> SessionExercise:
        current = self.current_exercise()
        if current is None:
            raise InvalidInput("Session is already complete")
        return current

    def log_set(self, session_set: SessionSet) -> None:
        """Record a set on the current exercise."""
        current = self._require_current()
        current.sets.append(session_set)
        current.status = ExerciseStatus.IN_PROGRESS

    def is_current_exercise_complete(self) -> bool:
        """True once the current exercise has all its prescribed sets."""
        current = self.current_exercise()
        return current is not None and len(current.sets) >= current.prescribed_sets

    def complete_exercise(self) -> None:
        """Mark the current exercise completed and move on."""
        self._require_current().status = ExerciseStatus.COMPLETED
        self.current_index += 1
        self.occupied = False

    def skip_exercise(self, reason: SkipReason) -> None:
        """Skip the current exercise and move on."""
        current = self._require_current()
        current.status = ExerciseStatus.SKIPPED
        current.skipped_reason = reason
        self.current_index += 1
        self.occupied = False

    def mark_occupied(self) -> None:
        self.occupied = True

    def mark_machine_free(self) -> None:
        self.occupied = False

    def is_waiting_for_machine(self) -> bool:
        return self.occupied

    def is_session_complete(self) -> bool:
        return self.current_index >= len(self.exercises)

    # History

    def build_history(self) -> dict[int, ExerciseHistoryEntry]:
        """Summarize completed exercises into new history entries.

        Any set flagged with pain marks the exercise as pain-interrupted.
        """
        history: dict[int, ExerciseHistoryEntry] = {}
        for exercise in self.exercises:
            if exercise.status != ExerciseStatus.COMPLETED or not exercise.sets:
                continue

            sets = exercise.sets
            first = sets[0]
            if any(s.pain_reported for s in sets):
                outcome = PainInterrupted()
            else:
                rirs = [s.reps_in_reserve for s in sets if s.reps_in_reserve is not None]
                outcome = NormalOutcome(avg_rir=sum(rirs) / len(rirs) if rirs else 0.0)

            rests = [
                s.rest_actual_seconds if s.rest_actual_seconds is not None else s.rest_prescribed_seconds
                for s in sets
            ]
            history[exercise.exercise_id] = ExerciseHistoryEntry(
                exercise_id=exercise.exercise_id,
                exercise_name=exercise.exercise_name,
                last_weight_kg=(
                    first.actual_weight_kg
                    if first.actual_weight_kg is not None
                    else first.prescribed_weight_kg
                ),
                last_reps=[
                    s.actual_reps if s.actual_reps is not None else s.prescribed_reps for s in sets
                ],
                outcome=outcome,
                last_avg_rest_seconds=sum(rests) / len(rests),
                prescribed_rest_seconds=exercise.rest_seconds,
                prescribed_sets=exercise.prescribed_sets,
                prescribed_reps=exercise.prescribed_reps,
            )
        return history
