"""Program regeneration service."""

import logging
from pathlib import Path

from ..db.repositories import (
    AvailableWeightRepository,
    ExerciseRepository,
    GymEquipmentRepository,
    HealthConditionRepository,
    UserProfileRepository,
    WorkoutProgramRepository,
)
from ..engine.program_generator import ProgramGeneratorInput, generate_program
from ..errors import InvalidInput
from ..models.program import WorkoutProgram

logger = logging.getLogger(__name__)


async def regenerate_program(
    user_id: int, db_path: Path | None = None, refresh: bool = False
) -> WorkoutProgram:
    """Generate a new program for a user and make it the active one.

    Args:
        user_id: Profile id
        db_path: Database path, defaults to the configured one
        refresh: Avoid the exercises of the current program where possible

    Returns:
        The stored program, with its new id

    Raises:
        InvalidInput: If the profile does not exist or the catalog is empty
        ProgramGenerationError: If the generated program fails verification
    """
    profile = await UserProfileRepository(db_path).get(user_id)
    if profile is None:
        raise InvalidInput(f"No profile with id {user_id}")

    catalog = await ExerciseRepository(db_path).list_all()
    if not catalog:
        raise InvalidInput("Exercise catalog is empty. Run 'gym-coach init' first.")

    program_repo = WorkoutProgramRepository(db_path)
    exclude: set[int] = set()
    if refresh:
        current = await program_repo.get_active(user_id)
        if current is not None:
            exclude = {i for session in current.sessions for i in session.exercise_ids}

    generator_input = ProgramGeneratorInput(
        user_id=user_id,
        days_per_week=profile.days_per_week,
        minutes_per_session=profile.minutes_per_session,
        goals=profile.goals,
        conditions=await HealthConditionRepository(db_path).list_for_user(
            user_id, active_only=True
        ),
        equipment=await GymEquipmentRepository(db_path).list_for_user(user_id),
        available_weights=await AvailableWeightRepository(db_path).get_weights(user_id),
        exclude_exercise_ids=exclude,
    )

    generated = generate_program(generator_input, catalog)
    program = generated.to_workout_program(user_id)
    program.id = await program_repo.replace_active(user_id, program)

    logger.info("Stored program %s as active for user %s", program.id, user_id)
    return program
