"""Database layer for gym-coach."""

from .engine import get_db_path, init_db, seed_exercises
from .repositories import (
    AvailableWeightRepository,
    ExerciseHistoryRepository,
    ExerciseRepository,
    GymEquipmentRepository,
    HealthConditionRepository,
    PainLogRepository,
    TrainingPhaseRepository,
    UserProfileRepository,
    WorkoutProgramRepository,
    WorkoutSessionRepository,
)

__all__ = [
    "AvailableWeightRepository",
    "ExerciseHistoryRepository",
    "ExerciseRepository",
    "get_db_path",
    "GymEquipmentRepository",
    "HealthConditionRepository",
    "init_db",
    "PainLogRepository",
    "seed_exercises",
    "TrainingPhaseRepository",
    "UserProfileRepository",
    "WorkoutProgramRepository",
    "WorkoutSessionRepository",
]
