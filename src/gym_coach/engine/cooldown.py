"""Cooldown stretch selection."""

from ..config import MAX_COOLDOWN_MOBILITY
from ..models.exercises import Exercise, ExerciseCategory, ExerciseTag, MuscleGroup


def session_muscles(exercise_ids: list[int], catalog: dict[int, Exercise]) -> set[MuscleGroup]:
    """Primary muscles trained by a list of exercises."""
    muscles: set[MuscleGroup] = set()
    for exercise_id in exercise_ids:
        exercise = catalog.get(exercise_id)
        if exercise is not None:
            muscles.update(exercise.primary_muscles)
    return muscles


def select_cooldown_exercises(
    muscles: set[MuscleGroup],
    catalog: list[Exercise],
    max_count: int = MAX_COOLDOWN_MOBILITY,
) -> list[Exercise]:
    """Stretches for the muscles just trained, topped up with general mobility."""
    if not muscles:
        return []

    targeted = [
        ex
        for ex in catalog
        if (ex.category == ExerciseCategory.MOBILITY or ExerciseTag.COOLDOWN in ex.tags)
        and any(m in muscles for m in ex.primary_muscles)
    ]
    if len(targeted) < max_count:
        targeted += [
            ex
            for ex in catalog
            if ex.category == ExerciseCategory.MOBILITY and ex not in targeted
        ]
    return targeted[:max_count]
