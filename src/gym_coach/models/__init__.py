"""Data models for gym-coach."""

from .equipment import AvailableWeight, GymEquipment, WeightType
from .exercises import (
    COMMON_EXERCISES,
    BodyZone,
    Equipment,
    Exercise,
    ExerciseCategory,
    ExerciseTag,
    MuscleGroup,
    load_exercise_catalog,
    mirror_zone,
)
from .health import HealthCondition, PainContext, PainLog
from .program import ProgramExercise, ProgramSession, SessionIntensity, SplitType, WorkoutProgram
from .progress import (
    ExerciseHistoryEntry,
    ExerciseStatus,
    NormalOutcome,
    PainInterrupted,
    PerformanceOutcome,
    PhaseRecord,
    SessionExercise,
    SessionSet,
    TrainingPhase,
)
from .rehab import REHAB_PROTOCOLS, Placement, RehabExercise, RehabExerciseInfo, RehabProtocol
from .user_profile import Goal, Sex, UserProfile

__all__ = [
    "AvailableWeight",
    "BodyZone",
    "COMMON_EXERCISES",
    "Equipment",
    "Exercise",
    "ExerciseCategory",
    "ExerciseHistoryEntry",
    "ExerciseStatus",
    "ExerciseTag",
    "Goal",
    "GymEquipment",
    "HealthCondition",
    "MuscleGroup",
    "NormalOutcome",
    "PainContext",
    "PainInterrupted",
    "PainLog",
    "PerformanceOutcome",
    "PhaseRecord",
    "Placement",
    "ProgramExercise",
    "ProgramSession",
    "REHAB_PROTOCOLS",
    "RehabExercise",
    "RehabExerciseInfo",
    "RehabProtocol",
    "SessionExercise",
    "SessionIntensity",
    "SessionSet",
    "Sex",
    "SplitType",
    "TrainingPhase",
    "UserProfile",
    "WeightType",
    "WorkoutProgram",
    "load_exercise_catalog",
    "mirror_zone",
]
