"""Health condition and pain log models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from ..errors import InvalidInput
from .exercises import BodyZone


def validate_pain_level(level: int) -> int:
    """Ensure a pain score is an integer on the 0-10 scale."""
    if isinstance(level, bool) or not isinstance(level, int) or not 0 <= level <= 10:
        raise InvalidInput(f"Pain level must be an integer from 0 to 10, got {level!r}")
    return level


@dataclass
class HealthCondition:
    """An injury or pain condition on a body zone.

    Conditions are deactivated rather than deleted. Only active
    conditions are seen by the filters and the rehab integrator.
    """

    user_id: int
    body_zone: BodyZone
    pain_level: int
    label: str = ""
    diagnosis: str = ""
    since: str = ""
    notes: str = ""
    is_active: bool = True
    id: int | None = None
    created_at: datetime | None = None

    def __post_init__(self):
        validate_pain_level(self.pain_level)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "user_id": self.user_id,
            "body_zone": self.body_zone.value,
            "pain_level": self.pain_level,
            "label": self.label,
            "diagnosis": self.diagnosis,
            "since": self.since,
            "notes": self.notes,
            "is_active": self.is_active,
        }

    @classmethod
    def from_dict(
        cls, data: dict, id: int | None = None, created_at: datetime | None = None
    ) -> "HealthCondition":
        """Create from dictionary."""
        try:
            zone = BodyZone(data["body_zone"])
        except (KeyError, ValueError) as e:
            raise InvalidInput(f"Invalid body zone in condition: {e}") from e
        return cls(
            id=id,
            user_id=data["user_id"],
            body_zone=zone,
            pain_level=data["pain_level"],
            label=data.get("label", ""),
            diagnosis=data.get("diagnosis", ""),
            since=data.get("since", ""),
            notes=data.get("notes", ""),
            is_active=bool(data.get("is_active", True)),
            created_at=created_at,
        )


class PainContext(str, Enum):
    """When a pain report was made."""

    DURING_SET = "during_set"
    END_SESSION = "end_session"
    REST_DAY = "rest_day"
    ONBOARDING = "onboarding"


@dataclass
class PainLog:
    """A single pain report, kept as history."""

    user_id: int
    zone: BodyZone
    level: int
    context: PainContext
    exercise_name: str | None = None
    date: datetime | None = None
    id: int | None = None

    def __post_init__(self):
        validate_pain_level(self.level)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "user_id": self.user_id,
            "zone": self.zone.value,
            "level": self.level,
            "context": self.context.value,
            "exercise_name": self.exercise_name,
            "date": self.date.isoformat() if self.date else None,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "PainLog":
        """Create from dictionary."""
        date = None
        if data.get("date"):
            date = datetime.fromisoformat(data["date"])
        return cls(
            id=id,
            user_id=data["user_id"],
            zone=BodyZone(data["zone"]),
            level=data["level"],
            context=PainContext(data["context"]),
            exercise_name=data.get("exercise_name"),
            date=date,
        )
