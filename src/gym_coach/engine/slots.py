"""Session templates and slot resolution.

A session template is an ordered list of slots. Each slot describes the
kind of exercise it wants (category and tags), its default prescription and
an explicit priority used when a session has to be shortened. Resolution
walks the slots in order and gives each one the first eligible exercise not
already used in the session.
"""

import logging
from dataclasses import dataclass

from ..config import (
    ACCESSORY_MIN_REPS,
    ACCESSORY_REST_CAP,
    HEAVY_MAX_REPS,
    HEAVY_MIN_SETS,
    HEAVY_REST_CAP,
    ISOMETRIC_REST,
    ISOMETRIC_SECONDS,
    ISOMETRIC_SETS,
    MODERATE_REST_CAP,
    VOLUME_MIN_REPS,
    VOLUME_REST_CAP,
)
from ..models.exercises import Exercise, ExerciseCategory, ExerciseTag
from ..models.program import ProgramExercise, SessionIntensity, SplitType

logger = logging.getLogger(__name__)

_T = ExerciseTag
_COMPOUND = (ExerciseCategory.COMPOUND,)
_ACCESSORY = (ExerciseCategory.ISOLATION,)
_ANY_STRENGTH = (ExerciseCategory.COMPOUND, ExerciseCategory.ISOLATION)


@dataclass(frozen=True)
class ExerciseSlot:
    """A typed placeholder in a session template.

    Priority 1 is the most important slot; larger numbers are trimmed first.
    """

    label: str
    categories: tuple[ExerciseCategory, ...]
    required_tags: tuple[ExerciseTag, ...]
    sets: int
    reps: int
    rest_seconds: int
    priority: int
    excluded_tags: tuple[ExerciseTag, ...] = ()
    preferred_name: str | None = None

    def matches(self, exercise: Exercise) -> bool:
        """Check whether an exercise can fill this slot."""
        if exercise.is_rehab or _T.CARDIO in exercise.tags:
            return False
        if exercise.category not in self.categories:
            return False
        if not exercise.has_tags(*self.required_tags):
            return False
        return not any(tag in exercise.tags for tag in self.excluded_tags)


@dataclass(frozen=True)
class SessionTemplate:
    """A named session made of ordered slots."""

    name: str
    intensity: SessionIntensity
    slots: tuple[ExerciseSlot, ...]


@dataclass
class ResolvedSlot:
    """A slot bound to a concrete exercise and its final prescription."""

    slot: ExerciseSlot
    exercise: Exercise
    prescription: ProgramExercise

    @property
    def priority(self) -> int:
        return self.slot.priority


# Slot builders


def _quad_compound(priority, sets=4, reps=8, rest=150):
    return ExerciseSlot("Quad compound", _COMPOUND, (_T.QUAD,), sets, reps, rest, priority)


def _hip_hinge(priority, sets=4, reps=10, rest=120):
    return ExerciseSlot("Hip hinge", _COMPOUND, (_T.HINGE,), sets, reps, rest, priority)


def _hip_thrust(priority):
    return ExerciseSlot("Hip thrust", _ANY_STRENGTH, (_T.HIP_THRUST,), 3, 12, 90, priority)


def _unilateral_legs(priority, sets=3, reps=10, rest=90):
    return ExerciseSlot(
        "Unilateral legs", _COMPOUND, (_T.LOWER_BODY, _T.UNILATERAL), sets, reps, rest, priority
    )


def _horizontal_push(priority, sets=4, reps=8, rest=150):
    return ExerciseSlot(
        "Horizontal push", _COMPOUND, (_T.PUSH, _T.HORIZONTAL), sets, reps, rest, priority
    )


def _vertical_push(priority, sets=3, reps=10, rest=120):
    return ExerciseSlot(
        "Vertical push", _COMPOUND, (_T.PUSH, _T.VERTICAL), sets, reps, rest, priority
    )


def _incline_push(priority):
    return ExerciseSlot(
        "Incline or chest accessory",
        _ANY_STRENGTH,
        (_T.PUSH, _T.CHEST),
        3,
        10,
        90,
        priority,
        excluded_tags=(_T.HORIZONTAL,),
        preferred_name="Incline Dumbbell Press",
    )


def _horizontal_pull(priority, sets=4, reps=8, rest=150):
    return ExerciseSlot(
        "Horizontal pull",
        _COMPOUND,
        (_T.PULL, _T.HORIZONTAL),
        sets,
        reps,
        rest,
        priority,
        excluded_tags=(_T.UNILATERAL,),
    )


def _vertical_pull(priority, sets=3, reps=10, rest=120):
    return ExerciseSlot(
        "Vertical pull", _COMPOUND, (_T.PULL, _T.VERTICAL), sets, reps, rest, priority
    )


def _unilateral_pull(priority):
    return ExerciseSlot(
        "Unilateral pull", _COMPOUND, (_T.PULL, _T.UNILATERAL), 3, 10, 90, priority
    )


def _lateral_raise(priority):
    return ExerciseSlot("Lateral raise", _ACCESSORY, (_T.LATERAL_RAISE,), 3, 15, 60, priority)


def _face_pull(priority):
    return ExerciseSlot("Face pull", _ACCESSORY, (_T.FACE_PULL,), 3, 15, 60, priority)


def _biceps(priority):
    return ExerciseSlot("Biceps", _ACCESSORY, (_T.BICEPS,), 3, 12, 60, priority)


def _triceps(priority):
    return ExerciseSlot("Triceps", _ACCESSORY, (_T.TRICEPS,), 3, 12, 60, priority)


def _leg_curl(priority):
    return ExerciseSlot("Leg curl", _ACCESSORY, (_T.LEG_CURL,), 3, 12, 60, priority)


def _calves(priority):
    return ExerciseSlot("Calves", _ACCESSORY, (_T.CALVES,), 3, 15, 60, priority)


def _core(priority):
    return ExerciseSlot("Core", (ExerciseCategory.CORE,), (), 3, 12, 60, priority)


_HEAVY = SessionIntensity.HEAVY
_MODERATE = SessionIntensity.MODERATE
_VOLUME = SessionIntensity.VOLUME

FULL_BODY_TEMPLATES: tuple[SessionTemplate, ...] = (
    SessionTemplate(
        "Full Body A",
        _HEAVY,
        (
            _quad_compound(1),
            _horizontal_push(2),
            _horizontal_pull(3),
            _lateral_raise(5),
            _face_pull(4),
            _core(6),
        ),
    ),
    SessionTemplate(
        "Full Body B",
        _VOLUME,
        (
            _hip_hinge(1),
            _vertical_push(2),
            _vertical_pull(3),
            _lateral_raise(5),
            _face_pull(4),
            _core(6),
        ),
    ),
    SessionTemplate(
        "Full Body C",
        _MODERATE,
        (
            _unilateral_legs(1),
            _incline_push(2),
            _unilateral_pull(3),
            _lateral_raise(5),
            _biceps(4),
            _core(6),
        ),
    ),
)

UPPER_LOWER_TEMPLATES: tuple[SessionTemplate, ...] = (
    SessionTemplate(
        "Lower A (Quad focus)",
        _HEAVY,
        (
            _quad_compound(1),
            _unilateral_legs(2),
            _hip_hinge(3, sets=3),
            _leg_curl(4),
            _calves(5),
            _core(6),
        ),
    ),
    SessionTemplate(
        "Upper A (Push focus)",
        _HEAVY,
        (
            _horizontal_push(1),
            _vertical_push(2),
            _incline_push(3),
            _lateral_raise(5),
            _face_pull(4),
            _triceps(6),
        ),
    ),
    SessionTemplate(
        "Lower B (Hamstring focus)",
        _VOLUME,
        (
            _hip_hinge(1),
            _hip_thrust(2),
            _quad_compound(3, sets=3, reps=12, rest=90),
            _leg_curl(4),
            _calves(5),
            _core(6),
        ),
    ),
    SessionTemplate(
        "Upper B (Pull focus)",
        _VOLUME,
        (
            _horizontal_pull(1),
            _vertical_pull(2),
            _unilateral_pull(3),
            _face_pull(4),
            _biceps(5),
        ),
    ),
)

PUSH_PULL_LEGS_TEMPLATES: tuple[SessionTemplate, ...] = (
    SessionTemplate(
        "Push A",
        _HEAVY,
        (
            _horizontal_push(1),
            _vertical_push(2),
            _incline_push(3),
            _lateral_raise(4),
            _triceps(5),
        ),
    ),
    SessionTemplate(
        "Pull A",
        _HEAVY,
        (
            _vertical_pull(1),
            _horizontal_pull(2),
            _unilateral_pull(3),
            _face_pull(4),
            _biceps(5),
        ),
    ),
    SessionTemplate(
        "Legs A",
        _HEAVY,
        (
            _quad_compound(1),
            _hip_hinge(2),
            _unilateral_legs(3),
            _leg_curl(4),
            _calves(5),
            _core(6),
        ),
    ),
    SessionTemplate(
        "Push B",
        _VOLUME,
        (
            _vertical_push(1),
            _horizontal_push(2, sets=3, reps=10, rest=120),
            _incline_push(3),
            _lateral_raise(4),
            _triceps(5),
        ),
    ),
    SessionTemplate(
        "Pull B",
        _VOLUME,
        (
            _horizontal_pull(1, sets=3, reps=10, rest=120),
            _vertical_pull(2),
            _unilateral_pull(3),
            _face_pull(4),
            _biceps(5),
        ),
    ),
    SessionTemplate(
        "Legs B",
        _VOLUME,
        (
            _hip_hinge(1),
            _hip_thrust(2),
            _quad_compound(3, sets=3, reps=12, rest=90),
            _leg_curl(4),
            _calves(5),
            _core(6),
        ),
    ),
)


def session_templates(split: SplitType, days_per_week: int) -> tuple[SessionTemplate, ...]:
    """Templates for a split. Full body uses one template per training day."""
    if split == SplitType.FULL_BODY:
        return FULL_BODY_TEMPLATES[: min(days_per_week, len(FULL_BODY_TEMPLATES))]
    if split == SplitType.UPPER_LOWER:
        return UPPER_LOWER_TEMPLATES
    return PUSH_PULL_LEGS_TEMPLATES


def slot_candidates(
    slot: ExerciseSlot, catalog: list[Exercise], used_ids: set[int]
) -> list[Exercise]:
    """Eligible, unused exercises for a slot in selection order.

    The slot's preferred exercise comes first, then catalog order.
    """
    candidates = [ex for ex in catalog if ex.id not in used_ids and slot.matches(ex)]
    if slot.preferred_name:
        preferred = slot.preferred_name.lower()
        candidates.sort(key=lambda ex: ex.name.lower() != preferred)
    return candidates


def apply_intensity(
    slot: ExerciseSlot, exercise: Exercise, intensity: SessionIntensity, order: int
) -> ProgramExercise:
    """Build the prescription for an exercise under a session intensity."""
    if _T.ISOMETRIC in exercise.tags:
        return ProgramExercise(
            exercise_id=exercise.id,
            order=order,
            sets=ISOMETRIC_SETS,
            target_reps=ISOMETRIC_SECONDS,
            rest_seconds=ISOMETRIC_REST,
            is_rehab=exercise.is_rehab,
            is_time_based=True,
        )

    sets, reps, rest = slot.sets, slot.reps, slot.rest_seconds
    if exercise.category == ExerciseCategory.COMPOUND:
        if intensity == SessionIntensity.HEAVY:
            reps = min(reps, HEAVY_MAX_REPS)
            sets = max(sets, HEAVY_MIN_SETS)
            rest = min(rest, HEAVY_REST_CAP)
        elif intensity == SessionIntensity.MODERATE:
            rest = min(rest, MODERATE_REST_CAP)
        else:
            reps = max(reps, VOLUME_MIN_REPS)
            rest = min(rest, VOLUME_REST_CAP)
    else:
        reps = max(reps, ACCESSORY_MIN_REPS)
        rest = min(rest, ACCESSORY_REST_CAP)

    return ProgramExercise(
        exercise_id=exercise.id,
        order=order,
        sets=sets,
        target_reps=reps,
        rest_seconds=rest,
        is_rehab=exercise.is_rehab,
    )


def resolve_slots(template: SessionTemplate, catalog: list[Exercise]) -> list[ResolvedSlot]:
    """Greedily bind each slot of a template to an exercise.

    Slots with no eligible exercise are dropped silently.
    """
    used_ids: set[int] = set()
    resolved: list[ResolvedSlot] = []

    for slot in template.slots:
        candidates = slot_candidates(slot, catalog, used_ids)
        if not candidates:
            logger.debug("%s: no candidate for slot '%s'", template.name, slot.label)
            continue

        exercise = candidates[0]
        used_ids.add(exercise.id)
        prescription = apply_intensity(slot, exercise, template.intensity, len(resolved) + 1)
        resolved.append(ResolvedSlot(slot=slot, exercise=exercise, prescription=prescription))
        logger.debug("%s: slot '%s' -> %s", template.name, slot.label, exercise.name)

    return resolved
