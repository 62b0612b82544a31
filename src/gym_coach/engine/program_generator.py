"""Rules-based program generation.

Pipeline: equipment and contraindication filters -> split selection ->
slot resolution with intensity variants -> time-budget trimming ->
verification. Nothing is persisted; callers store the result.
"""

import logging
from dataclasses import dataclass, field

from ..config import REFRESH_MIN_POOL
from ..errors import InvalidInput, ProgramGenerationError
from ..models.equipment import GymEquipment
from ..models.exercises import Exercise, ExerciseTag
from ..models.health import HealthCondition
from ..models.program import ProgramSession, SessionIntensity, SplitType, WorkoutProgram
from ..models.user_profile import Goal
from .filters import filter_by_contraindications, filter_by_equipment
from .slots import resolve_slots, session_templates
from .splits import determine_split
from .time_budget import estimate_session_minutes, trim_to_time_budget

logger = logging.getLogger(__name__)

SPLIT_NAMES = {
    SplitType.FULL_BODY: "Full Body",
    SplitType.UPPER_LOWER: "Upper / Lower",
    SplitType.PUSH_PULL_LEGS: "Push Pull Legs",
}


@dataclass
class ProgramGeneratorInput:
    """Everything the generator needs to know about the user."""

    user_id: int
    days_per_week: int
    minutes_per_session: int
    goals: list[Goal] = field(default_factory=list)
    conditions: list[HealthCondition] = field(default_factory=list)
    equipment: list[GymEquipment] = field(default_factory=list)
    available_weights: list[float] = field(default_factory=list)
    exclude_exercise_ids: set[int] = field(default_factory=set)  # refresh


@dataclass
class GeneratedProgram:
    """A generated, not yet persisted, program."""

    name: str
    type: SplitType
    sessions: list[ProgramSession]

    def to_workout_program(self, user_id: int) -> WorkoutProgram:
        """Wrap as an active WorkoutProgram for storage."""
        return WorkoutProgram(
            user_id=user_id, name=self.name, type=self.type, sessions=self.sessions
        )


def eligible_exercises(
    catalog: list[Exercise],
    equipment: list[GymEquipment],
    conditions: list[HealthCondition],
    exclude_ids: set[int] | None = None,
) -> list[Exercise]:
    """Apply the catalog filters that precede slot resolution.

    Cardio exercises are removed. Refresh exclusions are ignored when they
    would leave fewer than REFRESH_MIN_POOL non-rehab exercises.
    """
    pool = filter_by_equipment(catalog, equipment)
    pool = [ex for ex in pool if ExerciseTag.CARDIO not in ex.tags]
    pool = filter_by_contraindications(pool, conditions)

    if exclude_ids:
        refreshed = [ex for ex in pool if ex.id not in exclude_ids]
        if sum(1 for ex in refreshed if not ex.is_rehab) >= REFRESH_MIN_POOL:
            pool = refreshed
        else:
            logger.warning(
                "Ignoring %d excluded exercises: only %d would remain",
                len(exclude_ids),
                len(refreshed),
            )
    return pool


def verify_program(program: GeneratedProgram, catalog: list[Exercise]) -> None:
    """Check the invariants every generated program must hold.

    Raises:
        ProgramGenerationError: On a duplicate exercise within a session, an
            exercise id missing from the catalog, or a split without both a
            heavy and a volume session.
    """
    known_ids = {ex.id for ex in catalog}

    for session in program.sessions:
        ids = session.exercise_ids
        if len(ids) != len(set(ids)):
            raise ProgramGenerationError(f"Session '{session.name}' repeats an exercise")
        dangling = [i for i in ids if i not in known_ids]
        if dangling:
            raise ProgramGenerationError(
                f"Session '{session.name}' references unknown exercises {dangling}"
            )

    if program.type in (SplitType.UPPER_LOWER, SplitType.PUSH_PULL_LEGS) and len(
        program.sessions
    ) >= 4:
        intensities = {s.intensity for s in program.sessions}
        if not {SessionIntensity.HEAVY, SessionIntensity.VOLUME} <= intensities:
            raise ProgramGenerationError(
                f"{program.name} needs at least one heavy and one volume session"
            )


def generate_program(
    input: ProgramGeneratorInput, exercise_catalog: list[Exercise]
) -> GeneratedProgram:
    """Generate a weekly program for a user.

    Args:
        input: Profile, conditions, equipment and schedule
        exercise_catalog: Validated exercises; every one must carry an id

    Returns:
        The generated program

    Raises:
        InvalidInput: If days_per_week or minutes_per_session is not positive,
            or a catalog exercise has no id
        ProgramGenerationError: If the result fails verification
    """
    split = determine_split(input.days_per_week)
    if input.minutes_per_session < 1:
        raise InvalidInput(
            f"minutes_per_session must be positive, got {input.minutes_per_session}"
        )
    missing = [ex.name for ex in exercise_catalog if ex.id is None]
    if missing:
        raise InvalidInput(f"Catalog exercises without an id: {missing}")

    pool = eligible_exercises(
        exercise_catalog, input.equipment, input.conditions, input.exclude_exercise_ids
    )

    sessions: list[ProgramSession] = []
    for order, template in enumerate(session_templates(split, input.days_per_week), start=1):
        resolved = resolve_slots(template, pool)
        resolved = trim_to_time_budget(resolved, input.minutes_per_session)
        sessions.append(
            ProgramSession(
                name=template.name,
                order=order,
                intensity=template.intensity,
                exercises=[r.prescription for r in resolved],
            )
        )

    program = GeneratedProgram(name=SPLIT_NAMES[split], type=split, sessions=sessions)
    verify_program(program, exercise_catalog)

    logger.info(
        "Generated %s program for user %s: %d sessions, %s",
        split.value,
        input.user_id,
        len(sessions),
        ", ".join(
            f"{s.name}={len(s.exercises)}ex/{estimate_session_minutes(s.exercises)}min"
            for s in sessions
        ),
    )
    return program
