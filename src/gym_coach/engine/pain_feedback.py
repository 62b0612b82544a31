"""Turn end-of-session pain reports into exercise adjustments and conditions."""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum

from ..config import (
    PAIN_NO_PROGRESSION,
    PAIN_REDUCE_WEIGHT,
    PAIN_SKIP,
    PAIN_WEIGHT_MULTIPLIER,
)
from ..models.exercises import BodyZone, Exercise
from ..models.health import HealthCondition, validate_pain_level

logger = logging.getLogger(__name__)


class PainAction(str, Enum):
    """Adjustment applied to an exercise because of pain."""

    NO_PROGRESSION = "no_progression"
    REDUCE_WEIGHT = "reduce_weight"
    SKIP = "skip"


# Higher wins when several rules hit the same exercise
SEVERITY = {
    PainAction.NO_PROGRESSION: 1,
    PainAction.REDUCE_WEIGHT: 2,
    PainAction.SKIP: 3,
}


@dataclass
class PainFeedbackEntry:
    """Worst pain reported for one zone, and the exercises it showed up in."""

    zone: BodyZone
    max_pain_level: int
    during_exercises: list[str] = field(default_factory=list)

    def __post_init__(self):
        validate_pain_level(self.max_pain_level)


@dataclass
class PainAdjustment:
    """How one exercise changes next session."""

    exercise_id: int
    exercise_name: str
    action: PainAction
    reason: str
    weight_multiplier: float | None = None
    reference_weight_kg: float | None = None


def pain_tier(level: int) -> PainAction | None:
    """Map a 0-10 pain score to its adjustment tier."""
    if level >= PAIN_SKIP:
        return PainAction.SKIP
    if level >= PAIN_REDUCE_WEIGHT:
        return PainAction.REDUCE_WEIGHT
    if level >= PAIN_NO_PROGRESSION:
        return PainAction.NO_PROGRESSION
    return None


def calculate_pain_adjustments(
    feedback: list[PainFeedbackEntry],
    exercises: list[Exercise],
    reference_weights: dict[int, float] | None = None,
) -> list[PainAdjustment]:
    """Compute per-exercise adjustments from pain reports.

    Zone pain applies its tier to every exercise contraindicated for that
    zone. Pain during a named exercise gives it at least no_progression.
    When several rules hit one exercise the most severe wins. Unaffected
    exercises get no entry.

    Args:
        feedback: One entry per painful zone
        exercises: The exercises of the session
        reference_weights: Last pain-free weight per exercise id, used as the
            base for reduce_weight

    Returns:
        Adjustments in the order exercises were first affected
    """
    reference_weights = reference_weights or {}
    adjustments: dict[int, PainAdjustment] = {}

    def propose(adjustment: PainAdjustment) -> None:
        current = adjustments.get(adjustment.exercise_id)
        if current is None or SEVERITY[adjustment.action] > SEVERITY[current.action]:
            adjustments[adjustment.exercise_id] = adjustment

    for entry in feedback:
        tier = pain_tier(entry.max_pain_level)
        if tier is not None:
            for exercise in exercises:
                if entry.zone not in exercise.contraindications:
                    continue
                reduce = tier == PainAction.REDUCE_WEIGHT
                propose(
                    PainAdjustment(
                        exercise_id=exercise.id,
                        exercise_name=exercise.name,
                        action=tier,
                        reason=f"Pain {entry.max_pain_level}/10 on {entry.zone.value}",
                        weight_multiplier=PAIN_WEIGHT_MULTIPLIER if reduce else None,
                        reference_weight_kg=reference_weights.get(exercise.id) if reduce else None,
                    )
                )

        for name in entry.during_exercises:
            for exercise in exercises:
                if exercise.name == name:
                    propose(
                        PainAdjustment(
                            exercise_id=exercise.id,
                            exercise_name=exercise.name,
                            action=PainAction.NO_PROGRESSION,
                            reason="Pain reported during this exercise",
                        )
                    )
                    break

    if adjustments:
        logger.debug(
            "Pain adjustments: %s",
            ", ".join(f"{a.exercise_name}={a.action.value}" for a in adjustments.values()),
        )
    return list(adjustments.values())


def zone_label(zone: BodyZone) -> str:
    """Human label for a condition created from a pain report."""
    return f"{zone.value.replace('_', ' ').capitalize()} pain"


def apply_pain_to_conditions(
    feedback: list[PainFeedbackEntry],
    conditions: list[HealthCondition],
    user_id: int,
) -> list[HealthCondition]:
    """Conditions to save after an end-of-session pain check.

    Pain at or above the no-progression tier updates the active condition
    on that zone, or creates a new one. Lower pain changes nothing. The
    input conditions are not mutated; changed copies keep their ids and new
    conditions have no id yet.
    """
    changed: list[HealthCondition] = []
    for entry in feedback:
        if entry.max_pain_level < PAIN_NO_PROGRESSION:
            continue

        existing = next(
            (c for c in conditions if c.is_active and c.body_zone == entry.zone), None
        )
        if existing is None:
            logger.info("New condition from pain report on %s", entry.zone.value)
            changed.append(
                HealthCondition(
                    user_id=user_id,
                    body_zone=entry.zone,
                    pain_level=entry.max_pain_level,
                    label=zone_label(entry.zone),
                    notes="Detected from end-of-session pain check",
                )
            )
        elif existing.pain_level != entry.max_pain_level:
            changed.append(replace(existing, pain_level=entry.max_pain_level))
    return changed
