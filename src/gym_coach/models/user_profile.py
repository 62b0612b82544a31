"""User profile data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from ..errors import InvalidInput


class Goal(str, Enum):
    """Training goals picked during onboarding."""

    WEIGHT_LOSS = "weight_loss"
    MUSCLE_GAIN = "muscle_gain"
    REHAB = "rehab"
    POSTURE = "posture"
    MOBILITY = "mobility"


class Sex(str, Enum):
    """Biological sex, used for load estimates."""

    MALE = "male"
    FEMALE = "female"


@dataclass
class UserProfile:
    """Complete user profile."""

    name: str
    days_per_week: int
    minutes_per_session: int = 60
    goals: list[Goal] = field(default_factory=list)
    height_cm: float | None = None
    weight_kg: float | None = None  # body weight
    age: int | None = None
    sex: Sex | None = None
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self):
        if self.days_per_week < 1:
            raise InvalidInput(f"days_per_week must be positive, got {self.days_per_week}")
        if self.minutes_per_session < 1:
            raise InvalidInput(
                f"minutes_per_session must be positive, got {self.minutes_per_session}"
            )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "name": self.name,
            "days_per_week": self.days_per_week,
            "minutes_per_session": self.minutes_per_session,
            "goals": [g.value for g in self.goals],
            "height_cm": self.height_cm,
            "weight_kg": self.weight_kg,
            "age": self.age,
            "sex": self.sex.value if self.sex else None,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: int | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "UserProfile":
        """Create from dictionary."""
        return cls(
            id=id,
            name=data["name"],
            days_per_week=data["days_per_week"],
            minutes_per_session=data.get("minutes_per_session", 60),
            goals=[Goal(g) for g in data.get("goals", [])],
            height_cm=data.get("height_cm"),
            weight_kg=data.get("weight_kg"),
            age=data.get("age"),
            sex=Sex(data["sex"]) if data.get("sex") else None,
            created_at=created_at,
            updated_at=updated_at,
        )

    def get_summary(self) -> str:
        """Generate a short human-readable summary."""
        summary = f"User: {self.name}\n"
        if self.goals:
            summary += f"Goals: {', '.join(g.value for g in self.goals)}\n"
        summary += f"Training days: {self.days_per_week}/week, {self.minutes_per_session} min/session\n"
        if self.weight_kg:
            summary += f"Body weight: {self.weight_kg}kg\n"
        if self.height_cm:
            summary += f"Height: {self.height_cm}cm\n"
        if self.age:
            summary += f"Age: {self.age}\n"
        return summary
