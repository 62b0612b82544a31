"""Rehab protocol models and the built-in protocol catalog."""

from dataclasses import dataclass, field
from enum import Enum

from .exercises import BodyZone


class Placement(str, Enum):
    """Where a rehab exercise is performed."""

    WARMUP = "warmup"
    ACTIVE_WAIT = "active_wait"  # while a machine is occupied or between sets
    COOLDOWN = "cooldown"
    REST_DAY = "rest_day"


class RehabIntensity(str, Enum):
    """Effort level of a rehab exercise."""

    VERY_LIGHT = "very_light"
    LIGHT = "light"
    MODERATE = "moderate"


class Frequency(str, Enum):
    """How often a protocol should be done."""

    EVERY_SESSION = "every_session"
    DAILY = "daily"
    THREE_PER_WEEK = "3x_week"


@dataclass
class RehabExercise:
    """A corrective exercise within a protocol."""

    name: str
    sets: int
    reps: int | str  # "30 sec", "8-12", "10/leg"
    placement: Placement
    intensity: RehabIntensity = RehabIntensity.LIGHT
    notes: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "sets": self.sets,
            "reps": self.reps,
            "placement": self.placement.value,
            "intensity": self.intensity.value,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RehabExercise":
        """Create from dictionary."""
        return cls(
            name=data["name"],
            sets=data["sets"],
            reps=data["reps"],
            placement=Placement(data["placement"]),
            intensity=RehabIntensity(data.get("intensity", "light")),
            notes=data.get("notes", ""),
        )


@dataclass
class RehabProtocol:
    """Corrective exercises for a specific condition on a body zone.

    Lower priority numbers are more important.
    """

    target_zone: BodyZone
    condition_name: str
    exercises: list[RehabExercise]
    priority: int
    frequency: Frequency = Frequency.EVERY_SESSION
    progression_criteria: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "target_zone": self.target_zone.value,
            "condition_name": self.condition_name,
            "exercises": [ex.to_dict() for ex in self.exercises],
            "priority": self.priority,
            "frequency": self.frequency.value,
            "progression_criteria": self.progression_criteria,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "RehabProtocol":
        """Create from dictionary."""
        return cls(
            target_zone=BodyZone(data["target_zone"]),
            condition_name=data["condition_name"],
            exercises=[RehabExercise.from_dict(ex) for ex in data["exercises"]],
            priority=data["priority"],
            frequency=Frequency(data.get("frequency", "every_session")),
            progression_criteria=data.get("progression_criteria", ""),
        )


@dataclass
class RehabExerciseInfo:
    """A rehab exercise attached to a session, tagged with its protocol."""

    name: str
    sets: int
    reps: str
    intensity: RehabIntensity
    protocol_name: str
    priority: int
    notes: str = ""
    target_zone: BodyZone | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "sets": self.sets,
            "reps": self.reps,
            "intensity": self.intensity.value,
            "protocol_name": self.protocol_name,
            "priority": self.priority,
            "notes": self.notes,
            "target_zone": self.target_zone.value if self.target_zone else None,
        }


_P = Placement
_I = RehabIntensity

REHAB_PROTOCOLS: list[RehabProtocol] = [
    RehabProtocol(
        target_zone=BodyZone.ELBOW_RIGHT,
        condition_name="Medial epicondylitis (golfer's elbow)",
        priority=1,
        frequency=Frequency.DAILY,
        progression_criteria="Increase resistance once 3x15 is pain-free for two consecutive weeks.",
        exercises=[
            RehabExercise("Reverse Tyler Twist", 3, 15, _P.WARMUP, _I.LIGHT,
                          "4-5 second eccentric with a flex bar."),
            RehabExercise("Eccentric Wrist Curl", 3, 15, _P.WARMUP, _I.VERY_LIGHT,
                          "5 second lowering, start with 1-2 kg."),
            RehabExercise("Wrist Flexor Stretch", 3, "30 sec", _P.WARMUP, _I.VERY_LIGHT),
        ],
    ),
    RehabProtocol(
        target_zone=BodyZone.ELBOW_RIGHT,
        condition_name="Lateral epicondylitis (tennis elbow)",
        priority=1,
        frequency=Frequency.DAILY,
        progression_criteria="Add 0.5 kg when 3x15 eccentrics are pain-free.",
        exercises=[
            RehabExercise("Eccentric Wrist Extension", 3, 15, _P.WARMUP, _I.VERY_LIGHT),
            RehabExercise("Hammer Supination/Pronation", 3, 15, _P.WARMUP, _I.LIGHT),
            RehabExercise("Wrist Extensor Stretch", 3, "30 sec", _P.COOLDOWN, _I.VERY_LIGHT),
        ],
    ),
    RehabProtocol(
        target_zone=BodyZone.KNEE_RIGHT,
        condition_name="Patellar tendinopathy",
        priority=2,
        progression_criteria="Move to isotonic work once isometric pain stays under 3/10 for two weeks.",
        exercises=[
            RehabExercise("Spanish Squat Isometric", 5, "45 sec", _P.WARMUP, _I.MODERATE,
                          "Hold at 70-90 degrees of knee flexion, 2 minutes rest."),
            RehabExercise("Slow Tempo Leg Extension", 4, "8-15", _P.ACTIVE_WAIT, _I.MODERATE,
                          "3-2-4 tempo, pain must stay at or under 4/10."),
        ],
    ),
    RehabProtocol(
        target_zone=BodyZone.KNEE_RIGHT,
        condition_name="Patellofemoral pain",
        priority=2,
        exercises=[
            RehabExercise("Eccentric Step-Down", 3, "10/leg", _P.WARMUP, _I.LIGHT),
            RehabExercise("Clamshell", 3, 15, _P.WARMUP, _I.LIGHT),
            RehabExercise("Cable Terminal Knee Extension", 3, 15, _P.ACTIVE_WAIT, _I.LIGHT),
            RehabExercise("Quad Foam Roll", 2, "60 sec", _P.WARMUP, _I.VERY_LIGHT),
        ],
    ),
    RehabProtocol(
        target_zone=BodyZone.FOOT_LEFT,
        condition_name="Flat feet and midfoot arthritis",
        priority=3,
        frequency=Frequency.DAILY,
        exercises=[
            RehabExercise("Short Foot", 3, "10-15", _P.WARMUP, _I.LIGHT,
                          "Hold each contraction 5-8 seconds."),
            RehabExercise("Towel Curl", 3, "15-20", _P.REST_DAY, _I.LIGHT),
            RehabExercise("Ankle Circles and Dorsiflexion", 3, 15, _P.WARMUP, _I.VERY_LIGHT),
        ],
    ),
    RehabProtocol(
        target_zone=BodyZone.UPPER_BACK,
        condition_name="Forward head and rounded shoulders",
        priority=2,
        exercises=[
            RehabExercise("Chin Tuck", 3, "10-15", _P.WARMUP, _I.VERY_LIGHT),
            RehabExercise("Wall Angel", 3, "10-12", _P.WARMUP, _I.LIGHT),
            RehabExercise("Face Pull", 3, "15-20", _P.ACTIVE_WAIT, _I.LIGHT),
            RehabExercise("Band Pull-Apart", 3, "15-20", _P.ACTIVE_WAIT, _I.LIGHT),
            RehabExercise("Doorway Pec Stretch", 3, "30-45 sec", _P.COOLDOWN, _I.VERY_LIGHT),
        ],
    ),
    RehabProtocol(
        target_zone=BodyZone.LOWER_BACK,
        condition_name="Weak core and low back pain",
        priority=1,
        exercises=[
            RehabExercise("Dead Bug", 3, "8-12", _P.WARMUP, _I.LIGHT),
            RehabExercise("Bird Dog", 3, "8-12", _P.WARMUP, _I.LIGHT),
            RehabExercise("Pallof Press", 3, "10-12", _P.ACTIVE_WAIT, _I.LIGHT),
            RehabExercise("Glute Bridge", 3, "12-15", _P.WARMUP, _I.LIGHT),
        ],
    ),
    RehabProtocol(
        target_zone=BodyZone.LOWER_BACK,
        condition_name="Disc bulge",
        priority=1,
        frequency=Frequency.DAILY,
        exercises=[
            RehabExercise("McKenzie Press-Up", 3, 10, _P.WARMUP, _I.VERY_LIGHT),
            RehabExercise("Bird Dog", 3, 10, _P.WARMUP, _I.LIGHT),
            RehabExercise("Decompression Walk", 1, "10-15 min", _P.REST_DAY, _I.VERY_LIGHT),
        ],
    ),
    RehabProtocol(
        target_zone=BodyZone.HIP_RIGHT,
        condition_name="Sciatica",
        priority=2,
        frequency=Frequency.DAILY,
        exercises=[
            RehabExercise("Sciatic Nerve Floss", 2, "5-10", _P.WARMUP, _I.VERY_LIGHT),
            RehabExercise("Piriformis Stretch", 3, "30-45 sec", _P.COOLDOWN, _I.VERY_LIGHT),
            RehabExercise("Cat-Cow", 1, "10-15", _P.WARMUP, _I.VERY_LIGHT),
            RehabExercise("Glute Bridge", 3, "12-15", _P.ACTIVE_WAIT, _I.LIGHT),
            RehabExercise("Child's Pose", 3, "30-60 sec", _P.COOLDOWN, _I.VERY_LIGHT),
        ],
    ),
    RehabProtocol(
        target_zone=BodyZone.SHOULDER_RIGHT,
        condition_name="Rotator cuff tendinopathy",
        priority=2,
        exercises=[
            RehabExercise("Side-Lying Dumbbell External Rotation", 3, 15, _P.WARMUP, _I.LIGHT),
            RehabExercise("Cable External Rotation", 3, "12-15", _P.ACTIVE_WAIT, _I.LIGHT),
            RehabExercise("Scaption Raise", 3, "12-15", _P.WARMUP, _I.LIGHT),
            RehabExercise("Sleeper Stretch", 3, "30 sec", _P.COOLDOWN, _I.VERY_LIGHT),
        ],
    ),
    RehabProtocol(
        target_zone=BodyZone.ANKLE_RIGHT,
        condition_name="Achilles tendinopathy",
        priority=2,
        frequency=Frequency.DAILY,
        exercises=[
            RehabExercise("Alfredson Heel Drop", 3, 15, _P.WARMUP, _I.MODERATE),
            RehabExercise("Bent-Knee Heel Drop", 3, 15, _P.WARMUP, _I.MODERATE),
            RehabExercise("Wall Calf Stretch", 3, "30 sec", _P.COOLDOWN, _I.VERY_LIGHT),
        ],
    ),
    RehabProtocol(
        target_zone=BodyZone.WRIST_RIGHT,
        condition_name="Carpal tunnel and wrist pain",
        priority=3,
        frequency=Frequency.DAILY,
        exercises=[
            RehabExercise("Median Nerve Glide", 2, 10, _P.WARMUP, _I.VERY_LIGHT),
            RehabExercise("Wrist Flexor Stretch", 3, "30 sec", _P.COOLDOWN, _I.VERY_LIGHT),
            RehabExercise("Wrist Extensor Stretch", 3, "30 sec", _P.COOLDOWN, _I.VERY_LIGHT),
            RehabExercise("Grip Strengthening", 3, "10-15", _P.REST_DAY, _I.LIGHT),
        ],
    ),
]
