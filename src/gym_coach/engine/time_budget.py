"""Session duration estimation and time-budget trimming.

Estimation and trimming share one formula:

    minutes = round(sum(sets * (execution + rest) + transition) / 60) + warmup/cooldown
"""

import logging
import math

from ..config import (
    MIN_EXERCISES_PER_SESSION,
    SET_EXECUTION_SECONDS,
    TRANSITION_SECONDS,
    WARMUP_COOLDOWN_MINUTES,
)
from ..models.program import ProgramExercise
from .slots import ResolvedSlot

logger = logging.getLogger(__name__)


def estimate_session_minutes(exercises: list[ProgramExercise]) -> int:
    """Estimate the wall-clock length of a session in minutes."""
    seconds = sum(
        ex.sets * (SET_EXECUTION_SECONDS + ex.rest_seconds) + TRANSITION_SECONDS
        for ex in exercises
    )
    return math.floor(seconds / 60 + 0.5) + WARMUP_COOLDOWN_MINUTES


def trim_to_time_budget(
    resolved: list[ResolvedSlot],
    minutes_per_session: int,
    min_exercises: int = MIN_EXERCISES_PER_SESSION,
) -> list[ResolvedSlot]:
    """Remove lowest-priority slots until the session fits the budget.

    The slot with the largest priority number goes first; ties remove the
    later slot. Never trims below ``min_exercises``. Orders are renumbered
    from 1 afterwards.

    Must run on final prescriptions, after intensity adjustments.
    """
    kept = list(resolved)

    while (
        len(kept) > min_exercises
        and estimate_session_minutes([r.prescription for r in kept]) > minutes_per_session
    ):
        # max() keeps the first maximum, so scan reversed to prefer the later slot
        victim = max(reversed(kept), key=lambda r: r.priority)
        kept = [r for r in kept if r is not victim]
        logger.debug(
            "Trimmed '%s' (%s, priority %d) to fit %d min",
            victim.slot.label,
            victim.exercise.name,
            victim.priority,
            minutes_per_session,
        )

    for order, item in enumerate(kept, start=1):
        item.prescription.order = order
    return kept
