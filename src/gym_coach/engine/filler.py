"""Filler work to do while the next piece of equipment is occupied.

Fillers come from the session's active-wait rehab pool first, then from the
catalog's mobility work. A filler never loads the body region the next main
exercise is about to train, unless nothing else is left.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from ..config import (
    FILLER_REST_SECONDS,
    FILLER_SECONDS_PER_SET,
    MAX_CATALOG_FILLERS,
    MOBILITY_FILLER_MINUTES,
)
from ..models.equipment import round_half_up
from ..models.exercises import (
    LOWER_ZONES,
    UPPER_ZONES,
    BodyZone,
    Exercise,
    ExerciseCategory,
    ExerciseTag,
    MuscleGroup,
)
from ..models.rehab import RehabExerciseInfo


class BodyRegion(str, Enum):
    """Coarse region used to keep fillers off the next exercise's muscles."""

    UPPER = "upper"
    LOWER = "lower"
    CORE = "core"


UPPER_MUSCLES = frozenset(
    {
        MuscleGroup.CHEST,
        MuscleGroup.BACK,
        MuscleGroup.SHOULDERS,
        MuscleGroup.BICEPS,
        MuscleGroup.TRICEPS,
        MuscleGroup.FOREARMS,
        MuscleGroup.TRAPS,
        MuscleGroup.LATS,
    }
)

LOWER_MUSCLES = frozenset(
    {MuscleGroup.QUADS, MuscleGroup.HAMSTRINGS, MuscleGroup.GLUTES, MuscleGroup.CALVES}
)

# Midline spine zones are treated as core work
_SPINE_ZONES = frozenset({BodyZone.NECK, BodyZone.LOWER_BACK})

_TIMED = re.compile(r"(\d+)\s*s")


@dataclass
class FillerSuggestion:
    """One filler exercise with a rough time cost."""

    name: str
    sets: int
    reps: str
    minutes: int
    notes: str = ""
    is_rehab: bool = False


def muscle_region(muscles: Iterable[MuscleGroup]) -> BodyRegion:
    """Classify a muscle list. Core only when nothing upper or lower is involved."""
    upper = lower = 0
    for muscle in muscles:
        if muscle in UPPER_MUSCLES:
            upper += 1
        elif muscle in LOWER_MUSCLES:
            lower += 1
    if upper == 0 and lower == 0:
        return BodyRegion.CORE
    return BodyRegion.UPPER if upper >= lower else BodyRegion.LOWER


def zone_region(zone: BodyZone | None) -> BodyRegion:
    """Region a rehab exercise works, from the zone its protocol targets."""
    if zone is None or zone in _SPINE_ZONES:
        return BodyRegion.CORE
    if zone in UPPER_ZONES:
        return BodyRegion.UPPER
    if zone in LOWER_ZONES:
        return BodyRegion.LOWER
    return BodyRegion.CORE


def conflicts(region: BodyRegion, next_region: BodyRegion | None) -> bool:
    """Whether a filler in a region would tire the next exercise."""
    return region != BodyRegion.CORE and region == next_region


def estimate_filler_minutes(sets: int, reps: str) -> int:
    """Whole minutes for a rehab filler, never below one.

    Timed reps such as "45 sec" use the hold time per set; anything else is
    counted at a fixed time per set. Sets are separated by a short rest.
    """
    match = _TIMED.search(reps)
    per_set = int(match.group(1)) if match else FILLER_SECONDS_PER_SET
    total = sets * per_set + max(sets - 1, 0) * FILLER_REST_SECONDS
    return max(1, int(round_half_up(total / 60)))


def from_rehab(info: RehabExerciseInfo) -> FillerSuggestion:
    return FillerSuggestion(
        name=info.name,
        sets=info.sets,
        reps=info.reps,
        minutes=estimate_filler_minutes(info.sets, info.reps),
        notes=info.notes,
        is_rehab=True,
    )


def from_mobility(exercise: Exercise) -> FillerSuggestion:
    return FillerSuggestion(
        name=exercise.name,
        sets=1,
        reps="30 sec",
        minutes=MOBILITY_FILLER_MINUTES,
        notes=exercise.instructions,
    )


def _is_mobility(exercise: Exercise) -> bool:
    return exercise.category == ExerciseCategory.MOBILITY or ExerciseTag.COOLDOWN in exercise.tags


def suggest_filler(
    active_wait_pool: list[RehabExerciseInfo],
    next_muscles: Iterable[MuscleGroup],
    completed: Iterable[str] = (),
    catalog: list[Exercise] | None = None,
) -> FillerSuggestion | None:
    """Suggest one exercise to do while waiting for equipment.

    Order of preference:
        1. A pool exercise not done yet that avoids the next exercise's region
        2. Catalog mobility work not done yet that avoids that region
        3. A pool exercise done already that avoids the region
        4. The first pool exercise, conflict or not

    Args:
        active_wait_pool: Rehab exercises placed for active wait
        next_muscles: Primary muscles of the next main exercise
        completed: Names of fillers already done this session
        catalog: Exercise catalog for the mobility fallback

    Returns:
        The suggestion, or None when there is nothing at all to offer
    """
    next_muscles = list(next_muscles)
    next_region = muscle_region(next_muscles) if next_muscles else None
    done = set(completed)

    clear = [
        info
        for info in active_wait_pool
        if not conflicts(zone_region(info.target_zone), next_region)
    ]
    for info in clear:
        if info.name not in done:
            return from_rehab(info)

    for exercise in catalog or []:
        if (
            _is_mobility(exercise)
            and exercise.name not in done
            and not conflicts(muscle_region(exercise.primary_muscles), next_region)
        ):
            return from_mobility(exercise)

    if clear:
        return from_rehab(clear[0])
    if active_wait_pool:
        return from_rehab(active_wait_pool[0])
    return None


def suggest_fillers_from_catalog(
    session_muscles: Iterable[MuscleGroup],
    completed: Iterable[str],
    catalog: list[Exercise],
    count: int = MAX_CATALOG_FILLERS,
) -> list[FillerSuggestion]:
    """Mobility fillers from the catalog that stay off the session's region."""
    session_muscles = list(session_muscles)
    region = muscle_region(session_muscles) if session_muscles else None
    done = set(completed)
    candidates = [
        ex
        for ex in catalog
        if _is_mobility(ex)
        and ex.name not in done
        and not conflicts(muscle_region(ex.primary_muscles), region)
    ]
    return [from_mobility(ex) for ex in candidates[:count]]
