"""Rest-day rehab routine."""

import re
from dataclasses import dataclass, field
from enum import Enum

from ..config import MAX_REST_DAY_REHAB
from ..models.equipment import round_half_up
from ..models.exercises import LOWER_ZONES, UPPER_ZONES, BodyZone
from ..models.health import HealthCondition
from ..models.rehab import REHAB_PROTOCOLS, RehabProtocol
from .rehab_integrator import protocols_for_condition

_NUMBER = re.compile(r"(\d+)")


class RestDayVariant(str, Enum):
    """Which body half a rest-day routine covers."""

    UPPER = "upper"
    LOWER = "lower"
    ALL = "all"


@dataclass
class RestDayExercise:
    """One exercise of a rest-day routine."""

    name: str
    sets: int
    reps: str
    duration: str
    protocol_name: str
    target_zone: BodyZone
    notes: str = ""


@dataclass
class RestDayRoutine:
    """The routine and its estimated length."""

    variant: RestDayVariant
    exercises: list[RestDayExercise] = field(default_factory=list)
    total_minutes: int = 0


def estimate_duration(reps: int | str) -> str:
    """Per-set duration: timed holds keep their time, everything else is a minute."""
    if isinstance(reps, str) and ("sec" in reps or "min" in reps):
        return reps
    return "1 min"


def parse_duration_minutes(duration: str) -> float:
    """Minutes in a duration string such as "30 sec" or "10-15 min"."""
    match = _NUMBER.search(duration)
    if "min" in duration:
        return int(match.group(1)) if match else 2
    if "s" in duration:
        return int(match.group(1)) / 60 if match else 0.5
    return int(match.group(1)) if match else 1


def _in_variant(zone: BodyZone, variant: RestDayVariant) -> bool:
    if variant == RestDayVariant.UPPER:
        return zone in UPPER_ZONES
    if variant == RestDayVariant.LOWER:
        return zone in LOWER_ZONES
    return True


def generate_rest_day_routine(
    conditions: list[HealthCondition],
    variant: RestDayVariant = RestDayVariant.ALL,
    accent_zones: list[BodyZone] | None = None,
    protocols: list[RehabProtocol] | None = None,
) -> RestDayRoutine:
    """Build a short rehab routine for a rest day.

    Every placement is eligible, rest_day included. Exercises for accent
    zones (recent pain) come first; the routine is capped.
    """
    if protocols is None:
        protocols = REHAB_PROTOCOLS
    accent = set(accent_zones or [])

    collected: list[RestDayExercise] = []
    seen: set[str] = set()
    for condition in conditions:
        if not condition.is_active or not _in_variant(condition.body_zone, variant):
            continue
        matched = sorted(protocols_for_condition(condition, protocols), key=lambda p: p.priority)
        for protocol in matched:
            for exercise in protocol.exercises:
                key = exercise.name.casefold()
                if key in seen:
                    continue
                seen.add(key)
                collected.append(
                    RestDayExercise(
                        name=exercise.name,
                        sets=exercise.sets,
                        reps=str(exercise.reps),
                        duration=estimate_duration(exercise.reps),
                        protocol_name=protocol.condition_name,
                        # attribute to the user's side, not the protocol's
                        target_zone=condition.body_zone,
                        notes=exercise.notes,
                    )
                )

    if accent:
        collected.sort(key=lambda ex: ex.target_zone not in accent)
    selected = collected[:MAX_REST_DAY_REHAB]

    total = sum(parse_duration_minutes(ex.duration) * ex.sets for ex in selected)
    return RestDayRoutine(
        variant=variant, exercises=selected, total_minutes=int(round_half_up(total))
    )
