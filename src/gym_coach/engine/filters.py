"""Catalog filters applied before slot resolution."""

import logging

from ..config import CONTRAINDICATION_PAIN_THRESHOLD
from ..models.equipment import GymEquipment
from ..models.exercises import BodyZone, Exercise
from ..models.health import HealthCondition

logger = logging.getLogger(__name__)


def painful_zones(
    conditions: list[HealthCondition],
    threshold: int = CONTRAINDICATION_PAIN_THRESHOLD,
) -> set[BodyZone]:
    """Zones with an active condition at or above the pain threshold."""
    return {c.body_zone for c in conditions if c.is_active and c.pain_level >= threshold}


def filter_by_contraindications(
    exercises: list[Exercise],
    conditions: list[HealthCondition],
    threshold: int = CONTRAINDICATION_PAIN_THRESHOLD,
) -> list[Exercise]:
    """Drop exercises contraindicated for a painful zone.

    Order is preserved. Inactive conditions are ignored.
    """
    blocked = painful_zones(conditions, threshold)
    if not blocked:
        return list(exercises)

    kept = [ex for ex in exercises if not any(z in blocked for z in ex.contraindications)]
    logger.debug(
        "Contraindication filter removed %d exercises for zones %s",
        len(exercises) - len(kept),
        sorted(z.value for z in blocked),
    )
    return kept


def filter_by_equipment(
    exercises: list[Exercise], equipment: list[GymEquipment]
) -> list[Exercise]:
    """Keep exercises whose every required piece of equipment is available.

    Bodyweight exercises (no equipment) always pass.
    """
    available = {eq.name for eq in equipment if eq.is_available}
    return [
        ex
        for ex in exercises
        if all(required in available for required in ex.equipment_needed)
    ]
