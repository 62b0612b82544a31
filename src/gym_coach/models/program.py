"""Training program data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class SplitType(str, Enum):
    """Weekly split archetypes."""

    FULL_BODY = "full_body"
    UPPER_LOWER = "upper_lower"
    PUSH_PULL_LEGS = "push_pull_legs"


class SessionIntensity(str, Enum):
    """Daily undulating periodization intensity of a session."""

    HEAVY = "heavy"
    MODERATE = "moderate"
    VOLUME = "volume"


@dataclass
class ProgramExercise:
    """A prescription for one exercise within a session."""

    exercise_id: int
    order: int
    sets: int
    target_reps: int  # seconds when is_time_based
    rest_seconds: int
    is_rehab: bool = False
    is_time_based: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "exercise_id": self.exercise_id,
            "order": self.order,
            "sets": self.sets,
            "target_reps": self.target_reps,
            "rest_seconds": self.rest_seconds,
            "is_rehab": self.is_rehab,
            "is_time_based": self.is_time_based,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProgramExercise":
        """Create from dictionary."""
        return cls(
            exercise_id=data["exercise_id"],
            order=data["order"],
            sets=data["sets"],
            target_reps=data["target_reps"],
            rest_seconds=data["rest_seconds"],
            is_rehab=data.get("is_rehab", False),
            is_time_based=data.get("is_time_based", False),
        )


@dataclass
class ProgramSession:
    """A named, ordered list of exercise prescriptions."""

    name: str
    order: int
    exercises: list[ProgramExercise] = field(default_factory=list)
    intensity: SessionIntensity | None = None

    @property
    def exercise_ids(self) -> list[int]:
        """Exercise ids in prescription order."""
        return [ex.exercise_id for ex in self.exercises]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "order": self.order,
            "intensity": self.intensity.value if self.intensity else None,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ProgramSession":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            order=data["order"],
            intensity=SessionIntensity(data["intensity"]) if data.get("intensity") else None,
            exercises=[ProgramExercise.from_dict(ex) for ex in data.get("exercises", [])],
        )


@dataclass
class WorkoutProgram:
    """A complete generated program, persisted per user."""

    user_id: int
    name: str
    type: SplitType
    sessions: list[ProgramSession]
    is_active: bool = True
    id: int | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "user_id": self.user_id,
            "name": self.name,
            "type": self.type.value,
            "sessions": [s.to_dict() for s in self.sessions],
            "is_active": self.is_active,
        }

    @classmethod
    def from_dict(
        cls, data: dict, id: int | None = None, created_at: datetime | None = None
    ) -> "WorkoutProgram":
        """Create from dictionary."""
        return cls(
            id=id,
            user_id=data["user_id"],
            name=data["name"],
            type=SplitType(data["type"]),
            sessions=[ProgramSession.from_dict(s) for s in data["sessions"]],
            is_active=bool(data.get("is_active", True)),
            created_at=created_at,
        )

    @property
    def sessions_per_week(self) -> int:
        """Get the number of distinct sessions in the rotation."""
        return len(self.sessions)

    def get_summary(self) -> str:
        """Get a brief summary of the program."""
        lines = [f"{self.name} ({self.type.value})"]
        for session in self.sessions:
            intensity = f" [{session.intensity.value}]" if session.intensity else ""
            lines.append(f"  {session.order}. {session.name}{intensity}: {len(session.exercises)} exercises")
        return "\n".join(lines)
