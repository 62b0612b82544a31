"""Gym equipment and available-weight models."""

import math
from dataclasses import dataclass
from enum import Enum

from ..config import DEFAULT_WEIGHT_CEILING_KG, DEFAULT_WEIGHT_INCREMENT_KG
from .exercises import Equipment


class WeightType(str, Enum):
    """Where an available weight comes from."""

    DUMBBELL = "dumbbell"
    BARBELL_PLATE = "barbell_plate"
    MACHINE_STACK = "machine_stack"
    CABLE_STACK = "cable_stack"


@dataclass
class GymEquipment:
    """A piece of equipment in the user's gym.

    Matched against Exercise.equipment_needed by identifier.
    """

    user_id: int
    name: Equipment
    is_available: bool = True
    notes: str = ""
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "user_id": self.user_id,
            "name": self.name.value,
            "is_available": self.is_available,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "GymEquipment":
        """Create from dictionary."""
        return cls(
            id=id,
            user_id=data["user_id"],
            name=Equipment(data["name"]),
            is_available=bool(data.get("is_available", True)),
            notes=data.get("notes", ""),
        )


@dataclass
class AvailableWeight:
    """A load the user can actually select at the gym."""

    user_id: int
    weight_kg: float
    weight_type: WeightType = WeightType.DUMBBELL
    is_available: bool = True
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "user_id": self.user_id,
            "weight_kg": self.weight_kg,
            "weight_type": self.weight_type.value,
            "is_available": self.is_available,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "AvailableWeight":
        """Create from dictionary."""
        return cls(
            id=id,
            user_id=data["user_id"],
            weight_kg=float(data["weight_kg"]),
            weight_type=WeightType(data.get("weight_type", "dumbbell")),
            is_available=bool(data.get("is_available", True)),
        )


def default_weight_ladder(current_kg: float = 0.0) -> list[float]:
    """Build a 2.5 kg ladder from 0 up to at least the default ceiling.

    Used when the user has not recorded any available weights.
    """
    ceiling = max(current_kg + 20, DEFAULT_WEIGHT_CEILING_KG)
    steps = int(ceiling // DEFAULT_WEIGHT_INCREMENT_KG)
    return [round(i * DEFAULT_WEIGHT_INCREMENT_KG, 2) for i in range(steps + 1)]


def next_weight_above(current: float, weights: list[float]) -> float | None:
    """Smallest available weight strictly above current."""
    higher = [w for w in weights if w > current]
    return min(higher) if higher else None


def next_weight_below(current: float, weights: list[float]) -> float | None:
    """Largest available weight strictly below current."""
    lower = [w for w in weights if w < current]
    return max(lower) if lower else None


def floor_weight(target: float, weights: list[float]) -> float | None:
    """Largest available weight at or below target."""
    candidates = [w for w in weights if w <= target]
    return max(candidates) if candidates else None


def nearest_weight(target: float, weights: list[float] | None = None) -> float:
    """Round a target to the closest achievable weight.

    With no weight list, rounds to the nearest default increment. Ties
    resolve to the lighter weight.
    """
    if target <= 0:
        return 0.0
    if not weights:
        return round_half_up(target / DEFAULT_WEIGHT_INCREMENT_KG) * DEFAULT_WEIGHT_INCREMENT_KG
    return min(sorted(weights), key=lambda w: abs(target - w))


def round_half_up(value: float) -> float:
    """Round to the nearest integer, halves away from zero for positives."""
    return float(math.floor(value + 0.5))


def round_to_half(value: float) -> float:
    """Round to the nearest 0.5 kg."""
    return round_half_up(value * 2) / 2
