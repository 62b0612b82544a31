"""Exercise definitions and metadata."""

from dataclasses import dataclass, field
from enum import Enum

from ..errors import InvalidInput


class BodyZone(str, Enum):
    """Body zones used for pain reports, conditions and contraindications."""

    NECK = "neck"
    SHOULDER_LEFT = "shoulder_left"
    SHOULDER_RIGHT = "shoulder_right"
    ELBOW_LEFT = "elbow_left"
    ELBOW_RIGHT = "elbow_right"
    WRIST_LEFT = "wrist_left"
    WRIST_RIGHT = "wrist_right"
    UPPER_BACK = "upper_back"
    LOWER_BACK = "lower_back"
    HIP_LEFT = "hip_left"
    HIP_RIGHT = "hip_right"
    KNEE_LEFT = "knee_left"
    KNEE_RIGHT = "knee_right"
    ANKLE_LEFT = "ankle_left"
    ANKLE_RIGHT = "ankle_right"
    FOOT_LEFT = "foot_left"
    FOOT_RIGHT = "foot_right"
    OTHER = "other"


UPPER_ZONES = frozenset(
    {
        BodyZone.NECK,
        BodyZone.SHOULDER_LEFT,
        BodyZone.SHOULDER_RIGHT,
        BodyZone.ELBOW_LEFT,
        BodyZone.ELBOW_RIGHT,
        BodyZone.WRIST_LEFT,
        BodyZone.WRIST_RIGHT,
        BodyZone.UPPER_BACK,
    }
)

LOWER_ZONES = frozenset(
    {
        BodyZone.LOWER_BACK,
        BodyZone.HIP_LEFT,
        BodyZone.HIP_RIGHT,
        BodyZone.KNEE_LEFT,
        BodyZone.KNEE_RIGHT,
        BodyZone.ANKLE_LEFT,
        BodyZone.ANKLE_RIGHT,
        BodyZone.FOOT_LEFT,
        BodyZone.FOOT_RIGHT,
    }
)


def mirror_zone(zone: BodyZone) -> BodyZone | None:
    """Return the opposite side of a bilateral zone, or None for midline zones."""
    if zone.value.endswith("_left"):
        return BodyZone(zone.value[: -len("_left")] + "_right")
    if zone.value.endswith("_right"):
        return BodyZone(zone.value[: -len("_right")] + "_left")
    return None


class MuscleGroup(str, Enum):
    """Major muscle groups."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    FOREARMS = "forearms"
    QUADS = "quads"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CALVES = "calves"
    ABS = "abs"
    OBLIQUES = "obliques"
    LOWER_BACK = "lower_back"
    TRAPS = "traps"
    LATS = "lats"


class ExerciseCategory(str, Enum):
    """Exercise categories."""

    COMPOUND = "compound"
    ISOLATION = "isolation"
    REHAB = "rehab"
    MOBILITY = "mobility"
    CORE = "core"


class Equipment(str, Enum):
    """Gym equipment identifiers, matched against GymEquipment.name."""

    BARBELL = "barbell"
    BENCH = "bench"
    SQUAT_RACK = "squat_rack"
    DUMBBELLS = "dumbbells"
    KETTLEBELL = "kettlebell"
    CABLE_STATION = "cable_station"
    LEG_PRESS = "leg_press"
    LEG_CURL_MACHINE = "leg_curl_machine"
    LEG_EXTENSION_MACHINE = "leg_extension_machine"
    CALF_MACHINE = "calf_machine"
    LAT_PULLDOWN = "lat_pulldown"
    PULL_UP_BAR = "pull_up_bar"
    CHEST_PRESS_MACHINE = "chest_press_machine"
    SHOULDER_PRESS_MACHINE = "shoulder_press_machine"
    ROW_MACHINE = "row_machine"
    PEC_DECK = "pec_deck"
    RESISTANCE_BAND = "resistance_band"
    STATIONARY_BIKE = "stationary_bike"


class ExerciseTag(str, Enum):
    """Tags used by session slots to select candidates."""

    PUSH = "push"
    PULL = "pull"
    UPPER_BODY = "upper_body"
    LOWER_BODY = "lower_body"
    LEGS = "legs"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    CHEST = "chest"
    SHOULDERS = "shoulders"
    BACK = "back"
    QUAD = "quad"
    HINGE = "hinge"
    HIP_THRUST = "hip_thrust"
    UNILATERAL = "unilateral"
    LATERAL_RAISE = "lateral_raise"
    FACE_PULL = "face_pull"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    CALVES = "calves"
    LEG_CURL = "leg_curl"
    CORE = "core"
    ISOMETRIC = "isometric"
    CARDIO = "cardio"
    COOLDOWN = "cooldown"


def _enum_list(enum_cls: type[Enum], values: list, record_name: str) -> list:
    """Convert raw values to enum members, naming the record on failure."""
    try:
        return [enum_cls(v) for v in values]
    except ValueError as e:
        raise InvalidInput(f"Exercise '{record_name}': {e}") from e


@dataclass
class Exercise:
    """Represents an exercise with metadata."""

    name: str
    category: ExerciseCategory
    primary_muscles: list[MuscleGroup]
    secondary_muscles: list[MuscleGroup] = field(default_factory=list)
    equipment_needed: list[Equipment] = field(default_factory=list)  # empty = bodyweight
    contraindications: list[BodyZone] = field(default_factory=list)
    alternatives: list[str] = field(default_factory=list)
    instructions: str = ""
    is_rehab: bool = False
    rehab_target: BodyZone | None = None
    tags: list[ExerciseTag] = field(default_factory=list)
    id: int | None = None

    def has_tags(self, *tags: ExerciseTag) -> bool:
        """Check that every given tag is present."""
        return all(tag in self.tags for tag in tags)

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "name": self.name,
            "category": self.category.value,
            "primary_muscles": [m.value for m in self.primary_muscles],
            "secondary_muscles": [m.value for m in self.secondary_muscles],
            "equipment_needed": [eq.value for eq in self.equipment_needed],
            "contraindications": [z.value for z in self.contraindications],
            "alternatives": self.alternatives,
            "instructions": self.instructions,
            "is_rehab": self.is_rehab,
            "rehab_target": self.rehab_target.value if self.rehab_target else None,
            "tags": [t.value for t in self.tags],
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "Exercise":
        """Create from dictionary, validating every vocabulary field.

        Raises:
            InvalidInput: If the record is missing a name or uses an unknown
                category, muscle, equipment, zone or tag.
        """
        name = data.get("name")
        if not name:
            raise InvalidInput("Exercise record is missing a name")

        try:
            category = ExerciseCategory(data["category"])
            rehab_target = BodyZone(data["rehab_target"]) if data.get("rehab_target") else None
        except (KeyError, ValueError) as e:
            raise InvalidInput(f"Exercise '{name}': {e}") from e

        return cls(
            id=id if id is not None else data.get("id"),
            name=name,
            category=category,
            primary_muscles=_enum_list(MuscleGroup, data.get("primary_muscles", []), name),
            secondary_muscles=_enum_list(MuscleGroup, data.get("secondary_muscles", []), name),
            equipment_needed=_enum_list(Equipment, data.get("equipment_needed", []), name),
            contraindications=_enum_list(BodyZone, data.get("contraindications", []), name),
            alternatives=data.get("alternatives", []),
            instructions=data.get("instructions", ""),
            is_rehab=data.get("is_rehab", False),
            rehab_target=rehab_target,
            tags=_enum_list(ExerciseTag, data.get("tags", []), name),
        )


def load_exercise_catalog(records: list[dict]) -> list[Exercise]:
    """Validate raw catalog records into Exercise objects.

    Every record must carry a unique integer id.

    Raises:
        InvalidInput: On unknown vocabulary, missing ids, or duplicate ids.
    """
    catalog: list[Exercise] = []
    seen_ids: set[int] = set()
    for record in records:
        exercise = Exercise.from_dict(record)
        if not isinstance(exercise.id, int):
            raise InvalidInput(f"Exercise '{exercise.name}' has no integer id")
        if exercise.id in seen_ids:
            raise InvalidInput(f"Duplicate exercise id {exercise.id} ('{exercise.name}')")
        seen_ids.add(exercise.id)
        catalog.append(exercise)
    return catalog


_Z = BodyZone
_M = MuscleGroup
_E = Equipment
_T = ExerciseTag
_C = ExerciseCategory

_KNEES = [_Z.KNEE_LEFT, _Z.KNEE_RIGHT]
_SHOULDERS = [_Z.SHOULDER_LEFT, _Z.SHOULDER_RIGHT]
_ELBOWS = [_Z.ELBOW_LEFT, _Z.ELBOW_RIGHT]
_WRISTS = [_Z.WRIST_LEFT, _Z.WRIST_RIGHT]
_HIPS = [_Z.HIP_LEFT, _Z.HIP_RIGHT]
_ANKLES = [_Z.ANKLE_LEFT, _Z.ANKLE_RIGHT]


# Built-in exercise library. Ids are stable and never reused.
# Within a slot, earlier entries win unless the slot prefers a name.
COMMON_EXERCISES: list[Exercise] = [
    # Legs - Quad dominant
    Exercise(
        id=1,
        name="Barbell Back Squat",
        category=_C.COMPOUND,
        primary_muscles=[_M.QUADS, _M.GLUTES],
        secondary_muscles=[_M.HAMSTRINGS, _M.LOWER_BACK],
        equipment_needed=[_E.BARBELL, _E.SQUAT_RACK],
        contraindications=_KNEES + [_Z.LOWER_BACK],
        alternatives=["Leg Press", "Goblet Squat"],
        tags=[_T.LEGS, _T.LOWER_BODY, _T.QUAD],
    ),
    Exercise(
        id=2,
        name="Leg Press",
        category=_C.COMPOUND,
        primary_muscles=[_M.QUADS, _M.GLUTES],
        secondary_muscles=[_M.HAMSTRINGS],
        equipment_needed=[_E.LEG_PRESS],
        contraindications=_KNEES,
        alternatives=["Barbell Back Squat", "Goblet Squat"],
        tags=[_T.LEGS, _T.LOWER_BODY, _T.QUAD],
    ),
    Exercise(
        id=3,
        name="Goblet Squat",
        category=_C.COMPOUND,
        primary_muscles=[_M.QUADS, _M.GLUTES],
        secondary_muscles=[_M.ABS],
        equipment_needed=[_E.DUMBBELLS],
        contraindications=_KNEES,
        alternatives=["Leg Press"],
        tags=[_T.LEGS, _T.LOWER_BODY, _T.QUAD],
    ),
    Exercise(
        id=4,
        name="Bodyweight Squat",
        category=_C.COMPOUND,
        primary_muscles=[_M.QUADS, _M.GLUTES],
        contraindications=_KNEES,
        tags=[_T.LEGS, _T.LOWER_BODY, _T.QUAD],
    ),
    Exercise(
        id=5,
        name="Stationary Bike",
        category=_C.COMPOUND,
        primary_muscles=[_M.QUADS],
        secondary_muscles=[_M.CALVES],
        equipment_needed=[_E.STATIONARY_BIKE],
        tags=[_T.LEGS, _T.LOWER_BODY, _T.QUAD, _T.CARDIO],
    ),
    # Legs - Unilateral
    Exercise(
        id=6,
        name="Dumbbell Walking Lunge",
        category=_C.COMPOUND,
        primary_muscles=[_M.QUADS, _M.GLUTES],
        secondary_muscles=[_M.HAMSTRINGS],
        equipment_needed=[_E.DUMBBELLS],
        contraindications=_KNEES,
        alternatives=["Bulgarian Split Squat"],
        tags=[_T.LEGS, _T.LOWER_BODY, _T.UNILATERAL],
    ),
    Exercise(
        id=7,
        name="Bulgarian Split Squat",
        category=_C.COMPOUND,
        primary_muscles=[_M.QUADS, _M.GLUTES],
        equipment_needed=[_E.DUMBBELLS, _E.BENCH],
        contraindications=_KNEES + _HIPS,
        alternatives=["Dumbbell Walking Lunge"],
        tags=[_T.LEGS, _T.LOWER_BODY, _T.UNILATERAL],
    ),
    Exercise(
        id=8,
        name="Bodyweight Reverse Lunge",
        category=_C.COMPOUND,
        primary_muscles=[_M.QUADS, _M.GLUTES],
        contraindications=_KNEES,
        tags=[_T.LEGS, _T.LOWER_BODY, _T.UNILATERAL],
    ),
    # Legs - Hinge
    Exercise(
        id=9,
        name="Romanian Deadlift",
        category=_C.COMPOUND,
        primary_muscles=[_M.HAMSTRINGS, _M.GLUTES],
        secondary_muscles=[_M.LOWER_BACK],
        equipment_needed=[_E.BARBELL],
        contraindications=[_Z.LOWER_BACK],
        alternatives=["Dumbbell Romanian Deadlift"],
        instructions="Hinge at the hips with soft knees, bar close to the legs.",
        tags=[_T.LEGS, _T.LOWER_BODY, _T.HINGE],
    ),
    Exercise(
        id=10,
        name="Dumbbell Romanian Deadlift",
        category=_C.COMPOUND,
        primary_muscles=[_M.HAMSTRINGS, _M.GLUTES],
        secondary_muscles=[_M.LOWER_BACK],
        equipment_needed=[_E.DUMBBELLS],
        contraindications=[_Z.LOWER_BACK],
        tags=[_T.LEGS, _T.LOWER_BODY, _T.HINGE],
    ),
    Exercise(
        id=11,
        name="Barbell Hip Thrust",
        category=_C.COMPOUND,
        primary_muscles=[_M.GLUTES],
        secondary_muscles=[_M.HAMSTRINGS],
        equipment_needed=[_E.BARBELL, _E.BENCH],
        contraindications=_HIPS,
        tags=[_T.LEGS, _T.LOWER_BODY, _T.HIP_THRUST],
    ),
    Exercise(
        id=12,
        name="Glute Bridge",
        category=_C.COMPOUND,
        primary_muscles=[_M.GLUTES],
        secondary_muscles=[_M.HAMSTRINGS],
        tags=[_T.LEGS, _T.LOWER_BODY, _T.HIP_THRUST],
    ),
    # Legs - Accessories
    Exercise(
        id=13,
        name="Lying Leg Curl",
        category=_C.ISOLATION,
        primary_muscles=[_M.HAMSTRINGS],
        equipment_needed=[_E.LEG_CURL_MACHINE],
        tags=[_T.LEGS, _T.LOWER_BODY, _T.LEG_CURL],
    ),
    Exercise(
        id=14,
        name="Standing Calf Raise",
        category=_C.ISOLATION,
        primary_muscles=[_M.CALVES],
        equipment_needed=[_E.CALF_MACHINE],
        contraindications=_ANKLES,
        tags=[_T.LEGS, _T.LOWER_BODY, _T.CALVES],
    ),
    Exercise(
        id=15,
        name="Bodyweight Calf Raise",
        category=_C.ISOLATION,
        primary_muscles=[_M.CALVES],
        contraindications=_ANKLES,
        tags=[_T.LEGS, _T.LOWER_BODY, _T.CALVES],
    ),
    # Chest - Horizontal push
    Exercise(
        id=16,
        name="Barbell Bench Press",
        category=_C.COMPOUND,
        primary_muscles=[_M.CHEST],
        secondary_muscles=[_M.TRICEPS, _M.SHOULDERS],
        equipment_needed=[_E.BARBELL, _E.BENCH],
        contraindications=_SHOULDERS,
        alternatives=["Dumbbell Bench Press", "Machine Chest Press"],
        tags=[_T.PUSH, _T.UPPER_BODY, _T.HORIZONTAL, _T.CHEST],
    ),
    Exercise(
        id=17,
        name="Dumbbell Bench Press",
        category=_C.COMPOUND,
        primary_muscles=[_M.CHEST],
        secondary_muscles=[_M.TRICEPS, _M.SHOULDERS],
        equipment_needed=[_E.DUMBBELLS, _E.BENCH],
        contraindications=_SHOULDERS,
        tags=[_T.PUSH, _T.UPPER_BODY, _T.HORIZONTAL, _T.CHEST],
    ),
    Exercise(
        id=18,
        name="Machine Chest Press",
        category=_C.COMPOUND,
        primary_muscles=[_M.CHEST],
        secondary_muscles=[_M.TRICEPS],
        equipment_needed=[_E.CHEST_PRESS_MACHINE],
        contraindications=_SHOULDERS,
        tags=[_T.PUSH, _T.UPPER_BODY, _T.HORIZONTAL, _T.CHEST],
    ),
    Exercise(
        id=19,
        name="Push-Up",
        category=_C.COMPOUND,
        primary_muscles=[_M.CHEST],
        secondary_muscles=[_M.TRICEPS, _M.SHOULDERS],
        contraindications=_WRISTS,
        tags=[_T.PUSH, _T.UPPER_BODY, _T.HORIZONTAL, _T.CHEST],
    ),
    Exercise(
        id=20,
        name="Incline Dumbbell Press",
        category=_C.COMPOUND,
        primary_muscles=[_M.CHEST, _M.SHOULDERS],
        secondary_muscles=[_M.TRICEPS],
        equipment_needed=[_E.DUMBBELLS, _E.BENCH],
        contraindications=_SHOULDERS,
        tags=[_T.PUSH, _T.UPPER_BODY, _T.CHEST],
    ),
    Exercise(
        id=21,
        name="Cable Chest Fly",
        category=_C.ISOLATION,
        primary_muscles=[_M.CHEST],
        equipment_needed=[_E.CABLE_STATION],
        contraindications=_SHOULDERS,
        tags=[_T.PUSH, _T.UPPER_BODY, _T.CHEST],
    ),
    Exercise(
        id=22,
        name="Pec Deck",
        category=_C.ISOLATION,
        primary_muscles=[_M.CHEST],
        equipment_needed=[_E.PEC_DECK],
        contraindications=_SHOULDERS,
        tags=[_T.PUSH, _T.UPPER_BODY, _T.CHEST],
    ),
    # Shoulders - Vertical push
    Exercise(
        id=23,
        name="Barbell Overhead Press",
        category=_C.COMPOUND,
        primary_muscles=[_M.SHOULDERS],
        secondary_muscles=[_M.TRICEPS],
        equipment_needed=[_E.BARBELL],
        contraindications=_SHOULDERS + [_Z.LOWER_BACK],
        alternatives=["Seated Dumbbell Shoulder Press"],
        tags=[_T.PUSH, _T.UPPER_BODY, _T.VERTICAL, _T.SHOULDERS],
    ),
    Exercise(
        id=24,
        name="Seated Dumbbell Shoulder Press",
        category=_C.COMPOUND,
        primary_muscles=[_M.SHOULDERS],
        secondary_muscles=[_M.TRICEPS],
        equipment_needed=[_E.DUMBBELLS, _E.BENCH],
        contraindications=_SHOULDERS,
        tags=[_T.PUSH, _T.UPPER_BODY, _T.VERTICAL, _T.SHOULDERS],
    ),
    Exercise(
        id=25,
        name="Machine Shoulder Press",
        category=_C.COMPOUND,
        primary_muscles=[_M.SHOULDERS],
        secondary_muscles=[_M.TRICEPS],
        equipment_needed=[_E.SHOULDER_PRESS_MACHINE],
        contraindications=_SHOULDERS,
        tags=[_T.PUSH, _T.UPPER_BODY, _T.VERTICAL, _T.SHOULDERS],
    ),
    Exercise(
        id=26,
        name="Pike Push-Up",
        category=_C.COMPOUND,
        primary_muscles=[_M.SHOULDERS],
        secondary_muscles=[_M.TRICEPS],
        contraindications=_SHOULDERS + _WRISTS,
        tags=[_T.PUSH, _T.UPPER_BODY, _T.VERTICAL, _T.SHOULDERS],
    ),
    Exercise(
        id=27,
        name="Dumbbell Lateral Raise",
        category=_C.ISOLATION,
        primary_muscles=[_M.SHOULDERS],
        equipment_needed=[_E.DUMBBELLS],
        contraindications=_SHOULDERS,
        tags=[_T.UPPER_BODY, _T.SHOULDERS, _T.LATERAL_RAISE],
    ),
    Exercise(
        id=28,
        name="Cable Lateral Raise",
        category=_C.ISOLATION,
        primary_muscles=[_M.SHOULDERS],
        equipment_needed=[_E.CABLE_STATION],
        contraindications=_SHOULDERS,
        tags=[_T.UPPER_BODY, _T.SHOULDERS, _T.LATERAL_RAISE],
    ),
    Exercise(
        id=29,
        name="Cable Face Pull",
        category=_C.ISOLATION,
        primary_muscles=[_M.SHOULDERS, _M.TRAPS],
        equipment_needed=[_E.CABLE_STATION],
        tags=[_T.PULL, _T.UPPER_BODY, _T.FACE_PULL],
    ),
    Exercise(
        id=30,
        name="Band Face Pull",
        category=_C.ISOLATION,
        primary_muscles=[_M.SHOULDERS, _M.TRAPS],
        equipment_needed=[_E.RESISTANCE_BAND],
        tags=[_T.PULL, _T.UPPER_BODY, _T.FACE_PULL],
    ),
    # Back - Horizontal pull
    Exercise(
        id=31,
        name="Barbell Bent-Over Row",
        category=_C.COMPOUND,
        primary_muscles=[_M.BACK, _M.LATS],
        secondary_muscles=[_M.BICEPS],
        equipment_needed=[_E.BARBELL],
        contraindications=[_Z.LOWER_BACK],
        alternatives=["Seated Cable Row", "Chest-Supported Machine Row"],
        tags=[_T.PULL, _T.UPPER_BODY, _T.HORIZONTAL, _T.BACK],
    ),
    Exercise(
        id=32,
        name="Seated Cable Row",
        category=_C.COMPOUND,
        primary_muscles=[_M.BACK, _M.LATS],
        secondary_muscles=[_M.BICEPS],
        equipment_needed=[_E.CABLE_STATION],
        tags=[_T.PULL, _T.UPPER_BODY, _T.HORIZONTAL, _T.BACK],
    ),
    Exercise(
        id=33,
        name="Chest-Supported Machine Row",
        category=_C.COMPOUND,
        primary_muscles=[_M.BACK, _M.LATS],
        secondary_muscles=[_M.BICEPS],
        equipment_needed=[_E.ROW_MACHINE],
        tags=[_T.PULL, _T.UPPER_BODY, _T.HORIZONTAL, _T.BACK],
    ),
    Exercise(
        id=34,
        name="One-Arm Dumbbell Row",
        category=_C.COMPOUND,
        primary_muscles=[_M.BACK, _M.LATS],
        secondary_muscles=[_M.BICEPS],
        equipment_needed=[_E.DUMBBELLS, _E.BENCH],
        tags=[_T.PULL, _T.UPPER_BODY, _T.HORIZONTAL, _T.BACK, _T.UNILATERAL],
    ),
    Exercise(
        id=35,
        name="Inverted Row",
        category=_C.COMPOUND,
        primary_muscles=[_M.BACK, _M.LATS],
        secondary_muscles=[_M.BICEPS],
        tags=[_T.PULL, _T.UPPER_BODY, _T.HORIZONTAL, _T.BACK],
    ),
    # Back - Vertical pull
    Exercise(
        id=36,
        name="Lat Pulldown",
        category=_C.COMPOUND,
        primary_muscles=[_M.LATS, _M.BACK],
        secondary_muscles=[_M.BICEPS],
        equipment_needed=[_E.LAT_PULLDOWN],
        tags=[_T.PULL, _T.UPPER_BODY, _T.VERTICAL, _T.BACK],
    ),
    Exercise(
        id=37,
        name="Pull-Up",
        category=_C.COMPOUND,
        primary_muscles=[_M.LATS, _M.BACK],
        secondary_muscles=[_M.BICEPS],
        equipment_needed=[_E.PULL_UP_BAR],
        contraindications=_SHOULDERS + _ELBOWS,
        tags=[_T.PULL, _T.UPPER_BODY, _T.VERTICAL, _T.BACK],
    ),
    # Arms
    Exercise(
        id=38,
        name="Dumbbell Biceps Curl",
        category=_C.ISOLATION,
        primary_muscles=[_M.BICEPS],
        secondary_muscles=[_M.FOREARMS],
        equipment_needed=[_E.DUMBBELLS],
        contraindications=_ELBOWS,
        tags=[_T.PULL, _T.UPPER_BODY, _T.BICEPS],
    ),
    Exercise(
        id=39,
        name="Hammer Curl",
        category=_C.ISOLATION,
        primary_muscles=[_M.BICEPS, _M.FOREARMS],
        equipment_needed=[_E.DUMBBELLS],
        contraindications=_ELBOWS,
        tags=[_T.PULL, _T.UPPER_BODY, _T.BICEPS],
    ),
    Exercise(
        id=40,
        name="Cable Biceps Curl",
        category=_C.ISOLATION,
        primary_muscles=[_M.BICEPS],
        equipment_needed=[_E.CABLE_STATION],
        contraindications=_ELBOWS,
        tags=[_T.PULL, _T.UPPER_BODY, _T.BICEPS],
    ),
    Exercise(
        id=41,
        name="Cable Triceps Pushdown",
        category=_C.ISOLATION,
        primary_muscles=[_M.TRICEPS],
        equipment_needed=[_E.CABLE_STATION],
        contraindications=_ELBOWS,
        tags=[_T.PUSH, _T.UPPER_BODY, _T.TRICEPS],
    ),
    # Core
    Exercise(
        id=42,
        name="Plank",
        category=_C.CORE,
        primary_muscles=[_M.ABS],
        secondary_muscles=[_M.OBLIQUES],
        tags=[_T.CORE, _T.ISOMETRIC],
    ),
    Exercise(
        id=43,
        name="Dead Bug",
        category=_C.CORE,
        primary_muscles=[_M.ABS],
        tags=[_T.CORE],
    ),
    Exercise(
        id=44,
        name="Side Plank",
        category=_C.CORE,
        primary_muscles=[_M.OBLIQUES],
        secondary_muscles=[_M.ABS],
        contraindications=_SHOULDERS,
        tags=[_T.CORE, _T.ISOMETRIC],
    ),
    Exercise(
        id=45,
        name="Pallof Press",
        category=_C.CORE,
        primary_muscles=[_M.OBLIQUES, _M.ABS],
        equipment_needed=[_E.CABLE_STATION],
        tags=[_T.CORE],
    ),
    Exercise(
        id=46,
        name="Bird Dog",
        category=_C.CORE,
        primary_muscles=[_M.LOWER_BACK, _M.ABS],
        tags=[_T.CORE],
    ),
    Exercise(
        id=47,
        name="Hanging Knee Raise",
        category=_C.CORE,
        primary_muscles=[_M.ABS],
        equipment_needed=[_E.PULL_UP_BAR],
        contraindications=_SHOULDERS,
        tags=[_T.CORE],
    ),
    # Mobility / cooldown
    Exercise(
        id=48,
        name="Standing Hamstring Stretch",
        category=_C.MOBILITY,
        primary_muscles=[_M.HAMSTRINGS],
        tags=[_T.COOLDOWN],
    ),
    Exercise(
        id=49,
        name="Standing Quad Stretch",
        category=_C.MOBILITY,
        primary_muscles=[_M.QUADS],
        tags=[_T.COOLDOWN],
    ),
    Exercise(
        id=50,
        name="Doorway Chest Stretch",
        category=_C.MOBILITY,
        primary_muscles=[_M.CHEST],
        secondary_muscles=[_M.SHOULDERS],
        tags=[_T.COOLDOWN],
    ),
    Exercise(
        id=51,
        name="Cross-Body Shoulder Stretch",
        category=_C.MOBILITY,
        primary_muscles=[_M.SHOULDERS],
        tags=[_T.COOLDOWN],
    ),
    Exercise(
        id=52,
        name="Child's Pose",
        category=_C.MOBILITY,
        primary_muscles=[_M.LOWER_BACK, _M.LATS],
        tags=[_T.COOLDOWN],
    ),
    Exercise(
        id=53,
        name="Cat-Cow",
        category=_C.MOBILITY,
        primary_muscles=[_M.LOWER_BACK],
    ),
    Exercise(
        id=54,
        name="Kneeling Hip Flexor Stretch",
        category=_C.MOBILITY,
        primary_muscles=[_M.GLUTES, _M.QUADS],
        tags=[_T.COOLDOWN],
    ),
    # Rehab
    Exercise(
        id=55,
        name="Spanish Squat Isometric",
        category=_C.REHAB,
        primary_muscles=[_M.QUADS],
        equipment_needed=[_E.RESISTANCE_BAND],
        is_rehab=True,
        rehab_target=_Z.KNEE_RIGHT,
        instructions="Hold 45 seconds, shins vertical against the band.",
        tags=[_T.LEGS, _T.LOWER_BODY, _T.QUAD, _T.ISOMETRIC],
    ),
    Exercise(
        id=56,
        name="Cable External Rotation",
        category=_C.REHAB,
        primary_muscles=[_M.SHOULDERS],
        equipment_needed=[_E.CABLE_STATION],
        is_rehab=True,
        rehab_target=_Z.SHOULDER_RIGHT,
        tags=[_T.PULL, _T.UPPER_BODY],
    ),
    Exercise(
        id=57,
        name="Eccentric Wrist Extension",
        category=_C.REHAB,
        primary_muscles=[_M.FOREARMS],
        equipment_needed=[_E.DUMBBELLS],
        is_rehab=True,
        rehab_target=_Z.ELBOW_RIGHT,
        tags=[_T.UPPER_BODY],
    ),
]
