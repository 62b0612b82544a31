"""Attach corrective exercises to a built session.

Rehab work is advisory: it is returned alongside the session, never merged
into the session's exercise list.
"""

import logging
from dataclasses import dataclass, field

from ..config import MAX_COOLDOWN_REHAB, MAX_WARMUP_REHAB
from ..models.exercises import mirror_zone
from ..models.health import HealthCondition
from ..models.program import ProgramSession
from ..models.rehab import (
    REHAB_PROTOCOLS,
    Placement,
    RehabExercise,
    RehabExerciseInfo,
    RehabProtocol,
)

logger = logging.getLogger(__name__)


@dataclass
class IntegratedSession:
    """A session with its rehab buckets."""

    session: ProgramSession
    warmup_rehab: list[RehabExerciseInfo] = field(default_factory=list)
    active_wait_pool: list[RehabExerciseInfo] = field(default_factory=list)
    cooldown_rehab: list[RehabExerciseInfo] = field(default_factory=list)


def protocols_for_condition(
    condition: HealthCondition, protocols: list[RehabProtocol]
) -> list[RehabProtocol]:
    """Protocols for a condition's zone, falling back to the mirrored side.

    An exact zone match always wins over a mirrored one. Midline zones have
    no mirror and simply match nothing when no exact protocol exists.
    """
    exact = [p for p in protocols if p.target_zone == condition.body_zone]
    if exact:
        return exact

    mirrored = mirror_zone(condition.body_zone)
    if mirrored is None:
        return []
    matched = [p for p in protocols if p.target_zone == mirrored]
    if matched:
        logger.debug(
            "No protocol for %s, using %s protocols",
            condition.body_zone.value,
            mirrored.value,
        )
    return matched


def match_protocols(
    conditions: list[HealthCondition], protocols: list[RehabProtocol]
) -> list[RehabProtocol]:
    """Distinct protocols for all active conditions, sorted by priority.

    The sort is stable, so equal priorities keep the order in which their
    conditions were listed.
    """
    matched: list[RehabProtocol] = []
    for condition in conditions:
        if not condition.is_active:
            continue
        for protocol in protocols_for_condition(condition, protocols):
            if not any(protocol is m for m in matched):
                matched.append(protocol)
    return sorted(matched, key=lambda p: p.priority)


def to_info(exercise: RehabExercise, protocol: RehabProtocol) -> RehabExerciseInfo:
    """Describe a protocol exercise for display next to a session."""
    return RehabExerciseInfo(
        name=exercise.name,
        sets=exercise.sets,
        reps=str(exercise.reps),
        intensity=exercise.intensity,
        protocol_name=protocol.condition_name,
        priority=protocol.priority,
        notes=exercise.notes,
        target_zone=protocol.target_zone,
    )


def integrate_rehab(
    session: ProgramSession,
    conditions: list[HealthCondition],
    protocols: list[RehabProtocol] | None = None,
) -> IntegratedSession:
    """Bucket rehab exercises for a session's active conditions.

    Exercise names are deduplicated across all matched protocols, keeping
    the one from the higher-priority protocol. Rest-day exercises are left
    out. Warmup and cooldown buckets are capped; the active-wait pool is not.

    Args:
        session: The built session, returned unchanged
        conditions: The user's health conditions (inactive ones are ignored)
        protocols: Protocol catalog, defaults to REHAB_PROTOCOLS

    Returns:
        The session with warmup, active-wait and cooldown rehab lists
    """
    if protocols is None:
        protocols = REHAB_PROTOCOLS

    buckets: dict[Placement, list[RehabExerciseInfo]] = {
        Placement.WARMUP: [],
        Placement.ACTIVE_WAIT: [],
        Placement.COOLDOWN: [],
    }
    seen_names: set[str] = set()

    for protocol in match_protocols(conditions, protocols):
        for exercise in protocol.exercises:
            if exercise.placement == Placement.REST_DAY:
                continue
            key = exercise.name.casefold()
            if key in seen_names:
                continue
            seen_names.add(key)
            buckets[exercise.placement].append(to_info(exercise, protocol))

    for bucket in buckets.values():
        bucket.sort(key=lambda info: info.priority)

    return IntegratedSession(
        session=session,
        warmup_rehab=buckets[Placement.WARMUP][:MAX_WARMUP_REHAB],
        active_wait_pool=buckets[Placement.ACTIVE_WAIT],
        cooldown_rehab=buckets[Placement.COOLDOWN][:MAX_COOLDOWN_REHAB],
    )
