"""Workout logging, exercise history and training phase models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from ..errors import InvalidInput
from .exercises import BodyZone


class TrainingPhase(str, Enum):
    """Macrocycle phase."""

    HYPERTROPHY = "hypertrophy"
    TRANSITION = "transition"
    STRENGTH = "strength"
    DELOAD = "deload"


@dataclass
class PhaseRecord:
    """A period spent in one training phase."""

    user_id: int
    phase: TrainingPhase
    started_at: datetime
    ended_at: datetime | None = None
    week_count: int = 0
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "user_id": self.user_id,
            "phase": self.phase.value,
            "started_at": self.started_at.isoformat(),
            "ended_at": self.ended_at.isoformat() if self.ended_at else None,
            "week_count": self.week_count,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "PhaseRecord":
        """Create from dictionary."""
        ended_at = None
        if data.get("ended_at"):
            ended_at = datetime.fromisoformat(data["ended_at"])
        return cls(
            id=id,
            user_id=data["user_id"],
            phase=TrainingPhase(data["phase"]),
            started_at=datetime.fromisoformat(data["started_at"]),
            ended_at=ended_at,
            week_count=data.get("week_count", 0),
        )


@dataclass(frozen=True)
class NormalOutcome:
    """The exercise was completed; effort is the average reps in reserve."""

    avg_rir: float


@dataclass(frozen=True)
class PainInterrupted:
    """Pain was reported during the exercise."""


PerformanceOutcome = NormalOutcome | PainInterrupted

# Legacy stores encode pain as a negative average RIR.
_LEGACY_PAIN_RIR = -1


def outcome_to_dict(outcome: PerformanceOutcome) -> dict:
    """Serialize a performance outcome."""
    if isinstance(outcome, PainInterrupted):
        return {"type": "pain_interrupted"}
    return {"type": "normal", "avg_rir": outcome.avg_rir}


def outcome_from_dict(data: dict) -> PerformanceOutcome:
    """Deserialize a performance outcome."""
    kind = data.get("type")
    if kind == "pain_interrupted":
        return PainInterrupted()
    if kind == "normal" and isinstance(data.get("avg_rir"), (int, float)):
        return NormalOutcome(avg_rir=float(data["avg_rir"]))
    raise InvalidInput(f"Malformed performance outcome: {data!r}")


@dataclass
class ExerciseHistoryEntry:
    """Most recent performance of one exercise for one user.

    Overwritten after every session; only the latest entry drives
    progression.
    """

    last_weight_kg: float
    last_reps: list[int]
    outcome: PerformanceOutcome
    last_avg_rest_seconds: float | None = None
    prescribed_rest_seconds: int | None = None
    prescribed_sets: int | None = None
    prescribed_reps: int | None = None
    exercise_id: int | None = None
    exercise_name: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "exercise_id": self.exercise_id,
            "exercise_name": self.exercise_name,
            "last_weight_kg": self.last_weight_kg,
            "last_reps": self.last_reps,
            "outcome": outcome_to_dict(self.outcome),
            "last_avg_rest_seconds": self.last_avg_rest_seconds,
            "prescribed_rest_seconds": self.prescribed_rest_seconds,
            "prescribed_sets": self.prescribed_sets,
            "prescribed_reps": self.prescribed_reps,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseHistoryEntry":
        """Create from dictionary.

        Accepts either an ``outcome`` mapping or the legacy ``last_avg_rir``
        number, where -1 means pain occurred.

        Raises:
            InvalidInput: If weight, reps or effort fields are missing or malformed.
        """
        weight = data.get("last_weight_kg")
        if isinstance(weight, bool) or not isinstance(weight, (int, float)) or weight < 0:
            raise InvalidInput(f"Malformed history entry weight: {weight!r}")

        reps = data.get("last_reps")
        if not isinstance(reps, list) or not all(
            isinstance(r, int) and not isinstance(r, bool) and r >= 0 for r in reps
        ):
            raise InvalidInput(f"Malformed history entry reps: {reps!r}")

        if "outcome" in data:
            outcome = outcome_from_dict(data["outcome"])
        elif isinstance(data.get("last_avg_rir"), (int, float)):
            rir = data["last_avg_rir"]
            outcome = PainInterrupted() if rir == _LEGACY_PAIN_RIR else NormalOutcome(float(rir))
        else:
            raise InvalidInput("History entry has neither outcome nor last_avg_rir")

        return cls(
            exercise_id=data.get("exercise_id"),
            exercise_name=data.get("exercise_name", ""),
            last_weight_kg=float(weight),
            last_reps=reps,
            outcome=outcome,
            last_avg_rest_seconds=data.get("last_avg_rest_seconds"),
            prescribed_rest_seconds=data.get("prescribed_rest_seconds"),
            prescribed_sets=data.get("prescribed_sets"),
            prescribed_reps=data.get("prescribed_reps"),
        )


class ExerciseStatus(str, Enum):
    """Runtime state of an exercise within a workout."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    SKIPPED = "skipped"


class SkipReason(str, Enum):
    """Why an exercise was skipped."""

    OCCUPIED = "occupied"
    PAIN = "pain"
    NO_WEIGHT = "no_weight"
    TIME = "time"


@dataclass
class SessionSet:
    """One logged working set."""

    set_number: int
    prescribed_reps: int
    prescribed_weight_kg: float
    rest_prescribed_seconds: int
    actual_reps: int | None = None
    actual_weight_kg: float | None = None
    reps_in_reserve: int | None = None
    pain_reported: bool = False
    pain_zone: BodyZone | None = None
    pain_level: int | None = None
    rest_actual_seconds: int | None = None
    completed_at: datetime | None = None


@dataclass
class SessionExercise:
    """An exercise being performed in a live workout."""

    exercise_id: int
    exercise_name: str
    order: int
    prescribed_sets: int
    prescribed_reps: int
    prescribed_weight_kg: float
    rest_seconds: int = 90
    sets: list[SessionSet] = field(default_factory=list)
    status: ExerciseStatus = ExerciseStatus.PENDING
    skipped_reason: SkipReason | None = None
    is_time_based: bool = False
