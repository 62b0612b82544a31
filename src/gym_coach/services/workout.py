"""Workout orchestration: pick the next session, prescribe it, store the results."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from ..db.repositories import (
    AvailableWeightRepository,
    ExerciseHistoryRepository,
    ExerciseRepository,
    HealthConditionRepository,
    PainLogRepository,
    TrainingPhaseRepository,
    UserProfileRepository,
    WorkoutProgramRepository,
    WorkoutSessionRepository,
)
from ..engine.cooldown import select_cooldown_exercises, session_muscles
from ..engine.pain_feedback import (
    PainAdjustment,
    PainFeedbackEntry,
    apply_pain_to_conditions,
    calculate_pain_adjustments,
)
from ..engine.progression import (
    PhaseInput,
    ProgressionAction,
    ProgressionInput,
    calculate_progression,
    get_phase_recommendation,
    should_deload,
)
from ..engine.rehab_integrator import IntegratedSession, integrate_rehab
from ..engine.session_engine import SessionEngine
from ..engine.warmup import WarmupSet, generate_warmup_sets
from ..errors import InvalidInput
from ..models.exercises import Exercise, ExerciseCategory
from ..models.health import HealthCondition, PainContext, PainLog
from ..models.program import WorkoutProgram
from ..models.progress import (
    ExerciseHistoryEntry,
    NormalOutcome,
    PhaseRecord,
    TrainingPhase,
)

logger = logging.getLogger(__name__)


@dataclass
class SessionPreview:
    """Everything needed to run the next workout."""

    program: WorkoutProgram
    engine: SessionEngine
    integrated: IntegratedSession
    phase: TrainingPhase
    warmup_sets: list[WarmupSet] = field(default_factory=list)
    cooldown: list[Exercise] = field(default_factory=list)
    adjustments: list[PainAdjustment] = field(default_factory=list)
    deload_due: bool = False

    @property
    def session(self):
        return self.engine.session


def next_session_index(program: WorkoutProgram, last_session_name: str | None) -> int:
    """Index of the session after the last completed one, wrapping around.

    Starts at the first session when nothing was completed yet or the last
    session no longer exists in the program.
    """
    if not program.sessions:
        raise InvalidInput(f"Program '{program.name}' has no sessions")
    names = [s.name for s in program.sessions]
    if last_session_name not in names:
        return 0
    return (names.index(last_session_name) + 1) % len(names)


def weeks_since(started_at: datetime, now: datetime | None = None) -> int:
    """Whole weeks elapsed since a phase started."""
    now = now or datetime.now()
    return max((now - started_at).days // 7, 0)


def condition_feedback(conditions: list[HealthCondition]) -> list[PainFeedbackEntry]:
    """Treat each active condition's current pain as a zone report."""
    worst: dict = {}
    for condition in conditions:
        if condition.is_active:
            worst[condition.body_zone] = max(
                worst.get(condition.body_zone, 0), condition.pain_level
            )
    return [PainFeedbackEntry(zone=zone, max_pain_level=level) for zone, level in worst.items()]


def pain_free_weights(history: dict[int, ExerciseHistoryEntry]) -> dict[int, float]:
    """Last weight per exercise, only where the session ended without pain."""
    return {
        exercise_id: entry.last_weight_kg
        for exercise_id, entry in history.items()
        if isinstance(entry.outcome, NormalOutcome)
    }


async def preview_next_session(
    user_id: int,
    db_path: Path | None = None,
    phase: TrainingPhase | None = None,
) -> SessionPreview:
    """Prescribe the next session of the user's active program.

    Args:
        user_id: Profile id
        db_path: Database path, defaults to the configured one
        phase: Force a phase (e.g. deload) instead of the stored one

    Raises:
        InvalidInput: If the profile or an active program is missing
    """
    profile = await UserProfileRepository(db_path).get(user_id)
    if profile is None:
        raise InvalidInput(f"No profile with id {user_id}")

    program = await WorkoutProgramRepository(db_path).get_active(user_id)
    if program is None:
        raise InvalidInput("No active program. Run 'gym-coach program generate' first.")

    last_name = await WorkoutSessionRepository(db_path).get_last_session_name(
        user_id, program.id
    )
    session = program.sessions[next_session_index(program, last_name)]

    catalog = {ex.id: ex for ex in await ExerciseRepository(db_path).list_all()}
    history = await ExerciseHistoryRepository(db_path).get_for_user(user_id)
    conditions = await HealthConditionRepository(db_path).list_for_user(user_id, active_only=True)
    weights = await AvailableWeightRepository(db_path).get_weights(user_id)

    record = await TrainingPhaseRepository(db_path).get_current(user_id)
    deload_due = record is not None and should_deload(weeks_since(record.started_at))
    if phase is None:
        phase = record.phase if record else TrainingPhase.HYPERTROPHY
        if phase == TrainingPhase.DELOAD:
            phase = await recommend_phase(user_id, db_path)

    engine = SessionEngine(
        session,
        history,
        catalog=catalog,
        available_weights=weights,
        phase=phase,
        body_weight_kg=profile.weight_kg,
    )

    session_exercises = [catalog[pe.exercise_id] for pe in session.exercises]
    adjustments = calculate_pain_adjustments(
        condition_feedback(conditions), session_exercises, pain_free_weights(history)
    )
    engine.apply_pain_adjustments(adjustments)

    warmup_sets: list[WarmupSet] = []
    first_compound = next(
        (
            ex
            for ex in engine.exercises
            if catalog[ex.exercise_id].category == ExerciseCategory.COMPOUND
            and ex.prescribed_weight_kg > 0
        ),
        None,
    )
    if first_compound is not None:
        warmup_sets = generate_warmup_sets(first_compound.prescribed_weight_kg, weights)

    cooldown = select_cooldown_exercises(
        session_muscles([ex.exercise_id for ex in engine.exercises], catalog),
        list(catalog.values()),
    )

    logger.debug(
        "Previewing '%s' for user %s in %s phase", session.name, user_id, phase.value
    )
    return SessionPreview(
        program=program,
        engine=engine,
        integrated=integrate_rehab(session, conditions),
        phase=phase,
        warmup_sets=warmup_sets,
        cooldown=cooldown,
        adjustments=adjustments,
        deload_due=deload_due,
    )


async def finish_session(
    user_id: int,
    preview: SessionPreview,
    pain_feedback: list[PainFeedbackEntry] | None = None,
    db_path: Path | None = None,
) -> list[HealthCondition]:
    """Store history, pain reports and condition changes after a workout.

    The workout's writes are committed in one transaction, so a failure
    leaves neither a half-recorded session nor advanced rotation.

    Returns:
        The conditions that were created or updated
    """
    engine = preview.engine
    pain_feedback = pain_feedback or []

    pain_logs = [
        PainLog(
            user_id=user_id,
            zone=entry.zone,
            level=entry.max_pain_level,
            context=PainContext.END_SESSION,
            exercise_name=", ".join(entry.during_exercises) or None,
            date=datetime.now(),
        )
        for entry in pain_feedback
    ]
    active = await HealthConditionRepository(db_path).list_for_user(user_id, active_only=True)
    changed = apply_pain_to_conditions(pain_feedback, active, user_id)

    await WorkoutSessionRepository(db_path).record_completed(
        user_id,
        preview.program.id,
        engine.session.name,
        history=list(engine.build_history().values()),
        pain_logs=pain_logs,
        conditions=changed,
    )

    phase_repo = TrainingPhaseRepository(db_path)
    record = await phase_repo.get_current(user_id)
    if record is None:
        # A deload is a one-off override; the first stored phase is a macrocycle phase.
        first = preview.phase if preview.phase != TrainingPhase.DELOAD else TrainingPhase.HYPERTROPHY
        await phase_repo.start_phase(user_id, first)
    else:
        await phase_repo.set_week_count(record.id, weeks_since(record.started_at))

    logger.info(
        "Finished '%s' for user %s: %d conditions changed",
        engine.session.name,
        user_id,
        len(changed),
    )
    return changed


async def current_phase(user_id: int, db_path: Path | None = None) -> PhaseRecord | None:
    """The open training phase, with its week count brought up to date."""
    record = await TrainingPhaseRepository(db_path).get_current(user_id)
    if record is not None:
        record.week_count = weeks_since(record.started_at)
    return record


def progression_consistency(history: dict[int, ExerciseHistoryEntry]) -> float:
    """Share of exercises whose last performance earned a weight increase."""
    results = [
        calculate_progression(
            ProgressionInput(
                prescribed_weight_kg=entry.last_weight_kg,
                prescribed_reps=entry.prescribed_reps,
                prescribed_sets=entry.prescribed_sets,
                actual_reps=entry.last_reps,
                outcome=entry.outcome,
                avg_rest_seconds=entry.last_avg_rest_seconds or entry.prescribed_rest_seconds or 0,
                prescribed_rest_seconds=entry.prescribed_rest_seconds or 0,
                available_weights=[],
            )
        )
        for entry in history.values()
        if entry.prescribed_reps and entry.prescribed_sets
    ]
    if not results:
        return 0.0
    increased = sum(1 for r in results if r.action == ProgressionAction.INCREASE_WEIGHT)
    return increased / len(results)


async def recommend_phase(user_id: int, db_path: Path | None = None) -> TrainingPhase:
    """Next week's phase from time in phase, progression and recent pain."""
    record = await current_phase(user_id, db_path)
    if record is None:
        return TrainingPhase.HYPERTROPHY

    logs = await PainLogRepository(db_path).list_for_user(user_id)
    in_phase = [log.level for log in logs if log.date is None or log.date >= record.started_at]
    history = await ExerciseHistoryRepository(db_path).get_for_user(user_id)
    previous = None
    if record.phase == TrainingPhase.DELOAD:
        previous = await TrainingPhaseRepository(db_path).get_previous(user_id)

    return get_phase_recommendation(
        PhaseInput(
            current_phase=record.phase,
            previous_phase=previous,
            weeks_in_phase=record.week_count,
            avg_pain_level=sum(in_phase) / len(in_phase) if in_phase else 0.0,
            progression_consistency=progression_consistency(history),
        )
    )
