"""Data access layer for gym-coach."""

import json
from datetime import datetime
from pathlib import Path

import aiosqlite

from ..models.equipment import AvailableWeight, GymEquipment
from ..models.exercises import Equipment, Exercise
from ..models.health import HealthCondition, PainLog
from ..models.program import WorkoutProgram
from ..models.progress import ExerciseHistoryEntry, PhaseRecord, TrainingPhase
from ..models.user_profile import UserProfile
from .engine import get_db_path


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


class UserProfileRepository:
    """Repository for user profiles."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, profile: UserProfile) -> int:
        """Create a new user profile."""
        data = profile.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO user_profiles
                (name, days_per_week, minutes_per_session, goals, height_cm, weight_kg, age, sex)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    data["name"],
                    data["days_per_week"],
                    data["minutes_per_session"],
                    json.dumps(data["goals"]),
                    data["height_cm"],
                    data["weight_kg"],
                    data["age"],
                    data["sex"],
                ),
            )
            await db.commit()
            return cursor.lastrowid

    async def get(self, profile_id: int) -> UserProfile | None:
        """Get a user profile by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM user_profiles WHERE id = ?", (profile_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_profile(row)

    async def get_latest(self) -> UserProfile | None:
        """Get the most recently created/updated profile."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM user_profiles ORDER BY updated_at DESC, id DESC LIMIT 1"
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_profile(row)

    async def update(self, profile: UserProfile) -> None:
        """Update an existing profile."""
        if profile.id is None:
            raise ValueError("Profile must have an ID to update")

        data = profile.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                UPDATE user_profiles SET
                    name = ?, days_per_week = ?, minutes_per_session = ?, goals = ?,
                    height_cm = ?, weight_kg = ?, age = ?, sex = ?,
                    updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (
                    data["name"],
                    data["days_per_week"],
                    data["minutes_per_session"],
                    json.dumps(data["goals"]),
                    data["height_cm"],
                    data["weight_kg"],
                    data["age"],
                    data["sex"],
                    profile.id,
                ),
            )
            await db.commit()

    def _row_to_profile(self, row: aiosqlite.Row) -> UserProfile:
        """Convert a database row to a UserProfile."""
        data = {
            "name": row["name"],
            "days_per_week": row["days_per_week"],
            "minutes_per_session": row["minutes_per_session"],
            "goals": json.loads(row["goals"]),
            "height_cm": row["height_cm"],
            "weight_kg": row["weight_kg"],
            "age": row["age"],
            "sex": row["sex"],
        }
        return UserProfile.from_dict(
            data,
            id=row["id"],
            created_at=_parse_timestamp(row["created_at"]),
            updated_at=_parse_timestamp(row["updated_at"]),
        )


class HealthConditionRepository:
    """Repository for health conditions. Conditions are never deleted."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    @staticmethod
    async def _insert(db: aiosqlite.Connection, condition: HealthCondition) -> int:
        data = condition.to_dict()
        cursor = await db.execute(
            """
            INSERT INTO health_conditions
            (user_id, body_zone, pain_level, label, diagnosis, since, notes, is_active)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                data["user_id"],
                data["body_zone"],
                data["pain_level"],
                data["label"],
                data["diagnosis"],
                data["since"],
                data["notes"],
                int(data["is_active"]),
            ),
        )
        return cursor.lastrowid

    @staticmethod
    async def _update(db: aiosqlite.Connection, condition: HealthCondition) -> None:
        if condition.id is None:
            raise ValueError("Condition must have an ID to update")

        data = condition.to_dict()
        await db.execute(
            """
            UPDATE health_conditions SET
                body_zone = ?, pain_level = ?, label = ?, diagnosis = ?,
                since = ?, notes = ?, is_active = ?
            WHERE id = ?
            """,
            (
                data["body_zone"],
                data["pain_level"],
                data["label"],
                data["diagnosis"],
                data["since"],
                data["notes"],
                int(data["is_active"]),
                condition.id,
            ),
        )

    @classmethod
    async def _save(cls, db: aiosqlite.Connection, condition: HealthCondition) -> None:
        if condition.id is None:
            condition.id = await cls._insert(db, condition)
        else:
            await cls._update(db, condition)

    async def create(self, condition: HealthCondition) -> int:
        """Store a new condition."""
        async with aiosqlite.connect(self.db_path) as db:
            condition_id = await self._insert(db, condition)
            await db.commit()
            return condition_id

    async def update(self, condition: HealthCondition) -> None:
        """Update pain level, labels and active flag."""
        async with aiosqlite.connect(self.db_path) as db:
            await self._update(db, condition)
            await db.commit()

    async def save_all(self, conditions: list[HealthCondition]) -> None:
        """Create conditions without an id, update the others, in one transaction."""
        async with aiosqlite.connect(self.db_path) as db:
            try:
                for condition in conditions:
                    await self._save(db, condition)
                await db.commit()
            except aiosqlite.Error:
                await db.rollback()
                raise

    async def deactivate(self, condition_id: int) -> None:
        """Mark a condition inactive."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                "UPDATE health_conditions SET is_active = 0 WHERE id = ?", (condition_id,)
            )
            await db.commit()

    async def list_for_user(
        self, user_id: int, active_only: bool = False
    ) -> list[HealthCondition]:
        """List a user's conditions, optionally only active ones."""
        query = "SELECT * FROM health_conditions WHERE user_id = ?"
        if active_only:
            query += " AND is_active = 1"
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(query + " ORDER BY id", (user_id,))
            rows = await cursor.fetchall()
            return [self._row_to_condition(row) for row in rows]

    def _row_to_condition(self, row: aiosqlite.Row) -> HealthCondition:
        """Convert a database row to a HealthCondition."""
        data = {
            "user_id": row["user_id"],
            "body_zone": row["body_zone"],
            "pain_level": row["pain_level"],
            "label": row["label"],
            "diagnosis": row["diagnosis"],
            "since": row["since"],
            "notes": row["notes"],
            "is_active": bool(row["is_active"]),
        }
        return HealthCondition.from_dict(
            data, id=row["id"], created_at=_parse_timestamp(row["created_at"])
        )


class GymEquipmentRepository:
    """Repository for the user's gym equipment."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def upsert(self, equipment: GymEquipment) -> None:
        """Add equipment or update its availability."""
        data = equipment.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO gym_equipment (user_id, name, is_available, notes)
                VALUES (?, ?, ?, ?)
                ON CONFLICT (user_id, name) DO UPDATE SET
                    is_available = excluded.is_available,
                    notes = excluded.notes
                """,
                (data["user_id"], data["name"], int(data["is_available"]), data["notes"]),
            )
            await db.commit()

    async def set_available(self, user_id: int, name: Equipment, available: bool) -> bool:
        """Toggle availability. Returns False if the user has no such equipment."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "UPDATE gym_equipment SET is_available = ? WHERE user_id = ? AND name = ?",
                (int(available), user_id, name.value),
            )
            await db.commit()
            return cursor.rowcount > 0

    async def list_for_user(self, user_id: int) -> list[GymEquipment]:
        """List all equipment for a user."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM gym_equipment WHERE user_id = ? ORDER BY name", (user_id,)
            )
            rows = await cursor.fetchall()
            return [
                GymEquipment.from_dict(
                    {
                        "user_id": row["user_id"],
                        "name": row["name"],
                        "is_available": bool(row["is_available"]),
                        "notes": row["notes"],
                    },
                    id=row["id"],
                )
                for row in rows
            ]


class AvailableWeightRepository:
    """Repository for selectable weights."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def replace_all(self, user_id: int, weights: list[AvailableWeight]) -> None:
        """Replace a user's weight list in one transaction."""
        async with aiosqlite.connect(self.db_path) as db:
            try:
                await db.execute("DELETE FROM available_weights WHERE user_id = ?", (user_id,))
                await db.executemany(
                    """
                    INSERT INTO available_weights (user_id, weight_kg, weight_type, is_available)
                    VALUES (?, ?, ?, ?)
                    """,
                    [
                        (user_id, w.weight_kg, w.weight_type.value, int(w.is_available))
                        for w in weights
                    ],
                )
                await db.commit()
            except aiosqlite.Error:
                await db.rollback()
                raise

    async def list_for_user(self, user_id: int) -> list[AvailableWeight]:
        """List weight records for a user."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM available_weights WHERE user_id = ? ORDER BY weight_kg",
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [
                AvailableWeight.from_dict(
                    {
                        "user_id": row["user_id"],
                        "weight_kg": row["weight_kg"],
                        "weight_type": row["weight_type"],
                        "is_available": bool(row["is_available"]),
                    },
                    id=row["id"],
                )
                for row in rows
            ]

    async def get_weights(self, user_id: int) -> list[float]:
        """Distinct available weights in kg, ascending."""
        records = await self.list_for_user(user_id)
        return sorted({w.weight_kg for w in records if w.is_available})


class ExerciseRepository:
    """Repository for the exercise catalog."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, exercise_id: int) -> Exercise | None:
        """Get an exercise by id."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM exercises WHERE id = ?", (exercise_id,))
            row = await cursor.fetchone()
            return self._row_to_exercise(row) if row else None

    async def get_by_name(self, name: str) -> Exercise | None:
        """Get an exercise by exact name (case-insensitive)."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE name = ? COLLATE NOCASE", (name,)
            )
            row = await cursor.fetchone()
            return self._row_to_exercise(row) if row else None

    async def list_all(self) -> list[Exercise]:
        """List the whole catalog in id order."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM exercises ORDER BY id")
            rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    async def count(self) -> int:
        """Number of exercises in the catalog."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT COUNT(*) FROM exercises")
            (count,) = await cursor.fetchone()
            return count

    def _row_to_exercise(self, row: aiosqlite.Row) -> Exercise:
        """Convert a database row to an Exercise, validating vocabularies."""
        data = {
            "name": row["name"],
            "category": row["category"],
            "primary_muscles": json.loads(row["primary_muscles"]),
            "secondary_muscles": json.loads(row["secondary_muscles"]),
            "equipment_needed": json.loads(row["equipment_needed"]),
            "contraindications": json.loads(row["contraindications"]),
            "alternatives": json.loads(row["alternatives"]),
            "instructions": row["instructions"],
            "is_rehab": bool(row["is_rehab"]),
            "rehab_target": row["rehab_target"],
            "tags": json.loads(row["tags"]),
        }
        return Exercise.from_dict(data, id=row["id"])


class WorkoutProgramRepository:
    """Repository for generated programs."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def replace_active(self, user_id: int, program: WorkoutProgram) -> int:
        """Deactivate the user's programs and store a new active one atomically."""
        data = program.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            try:
                await db.execute(
                    "UPDATE workout_programs SET is_active = 0 WHERE user_id = ? AND is_active = 1",
                    (user_id,),
                )
                cursor = await db.execute(
                    """
                    INSERT INTO workout_programs (user_id, name, type, sessions, is_active)
                    VALUES (?, ?, ?, ?, 1)
                    """,
                    (user_id, data["name"], data["type"], json.dumps(data["sessions"])),
                )
                await db.commit()
            except aiosqlite.Error:
                await db.rollback()
                raise
            return cursor.lastrowid

    async def get(self, program_id: int) -> WorkoutProgram | None:
        """Get a program by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM workout_programs WHERE id = ?", (program_id,)
            )
            row = await cursor.fetchone()
            return self._row_to_program(row) if row else None

    async def get_active(self, user_id: int) -> WorkoutProgram | None:
        """Get the user's active program."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM workout_programs
                WHERE user_id = ? AND is_active = 1
                ORDER BY id DESC LIMIT 1
                """,
                (user_id,),
            )
            row = await cursor.fetchone()
            return self._row_to_program(row) if row else None

    async def list_for_user(self, user_id: int) -> list[WorkoutProgram]:
        """List all programs for a user, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM workout_programs WHERE user_id = ? ORDER BY id DESC",
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_program(row) for row in rows]

    def _row_to_program(self, row: aiosqlite.Row) -> WorkoutProgram:
        """Convert a database row to a WorkoutProgram."""
        data = {
            "user_id": row["user_id"],
            "name": row["name"],
            "type": row["type"],
            "sessions": json.loads(row["sessions"]),
            "is_active": bool(row["is_active"]),
        }
        return WorkoutProgram.from_dict(
            data, id=row["id"], created_at=_parse_timestamp(row["created_at"])
        )


class WorkoutSessionRepository:
    """Repository for completed workouts."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    @staticmethod
    async def _insert(
        db: aiosqlite.Connection, user_id: int, program_id: int, session_name: str
    ) -> int:
        cursor = await db.execute(
            """
            INSERT INTO workout_sessions (user_id, program_id, session_name)
            VALUES (?, ?, ?)
            """,
            (user_id, program_id, session_name),
        )
        return cursor.lastrowid

    async def record(self, user_id: int, program_id: int, session_name: str) -> int:
        """Record a completed session."""
        async with aiosqlite.connect(self.db_path) as db:
            session_id = await self._insert(db, user_id, program_id, session_name)
            await db.commit()
            return session_id

    async def record_completed(
        self,
        user_id: int,
        program_id: int,
        session_name: str,
        history: list[ExerciseHistoryEntry],
        pain_logs: list[PainLog],
        conditions: list[HealthCondition],
    ) -> int:
        """Store everything a finished workout produces in one transaction.

        History entries, the session record, pain reports and condition
        changes are committed together or not at all. New conditions get
        their ids assigned.

        Raises:
            ValueError: If a history entry has no exercise id
        """
        async with aiosqlite.connect(self.db_path) as db:
            try:
                for entry in history:
                    await ExerciseHistoryRepository._upsert(db, user_id, entry)
                session_id = await self._insert(db, user_id, program_id, session_name)
                for log in pain_logs:
                    await PainLogRepository._insert(db, log)
                for condition in conditions:
                    await HealthConditionRepository._save(db, condition)
                await db.commit()
            except (aiosqlite.Error, ValueError):
                await db.rollback()
                raise
            return session_id

    async def get_last_session_name(self, user_id: int, program_id: int) -> str | None:
        """Name of the most recently completed session of a program."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                SELECT session_name FROM workout_sessions
                WHERE user_id = ? AND program_id = ?
                ORDER BY completed_at DESC, id DESC LIMIT 1
                """,
                (user_id, program_id),
            )
            row = await cursor.fetchone()
            return row[0] if row else None


class ExerciseHistoryRepository:
    """Repository for the latest performance per exercise."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    @staticmethod
    async def _upsert(
        db: aiosqlite.Connection, user_id: int, entry: ExerciseHistoryEntry
    ) -> None:
        if entry.exercise_id is None:
            raise ValueError("History entry must have an exercise ID")

        data = entry.to_dict()
        await db.execute(
            """
            INSERT INTO exercise_history
            (user_id, exercise_id, exercise_name, last_weight_kg, last_reps, outcome,
             last_avg_rest_seconds, prescribed_rest_seconds, prescribed_sets,
             prescribed_reps, date)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, CURRENT_TIMESTAMP)
            ON CONFLICT (user_id, exercise_id) DO UPDATE SET
                exercise_name = excluded.exercise_name,
                last_weight_kg = excluded.last_weight_kg,
                last_reps = excluded.last_reps,
                outcome = excluded.outcome,
                last_avg_rest_seconds = excluded.last_avg_rest_seconds,
                prescribed_rest_seconds = excluded.prescribed_rest_seconds,
                prescribed_sets = excluded.prescribed_sets,
                prescribed_reps = excluded.prescribed_reps,
                date = excluded.date
            """,
            (
                user_id,
                data["exercise_id"],
                data["exercise_name"],
                data["last_weight_kg"],
                json.dumps(data["last_reps"]),
                json.dumps(data["outcome"]),
                data["last_avg_rest_seconds"],
                data["prescribed_rest_seconds"],
                data["prescribed_sets"],
                data["prescribed_reps"],
            ),
        )

    async def upsert(self, user_id: int, entry: ExerciseHistoryEntry) -> None:
        """Store an entry, overwriting any previous one for the same exercise."""
        async with aiosqlite.connect(self.db_path) as db:
            await self._upsert(db, user_id, entry)
            await db.commit()

    async def get_for_user(self, user_id: int) -> dict[int, ExerciseHistoryEntry]:
        """All history entries for a user, keyed by exercise id."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM exercise_history WHERE user_id = ?", (user_id,)
            )
            rows = await cursor.fetchall()
            return {row["exercise_id"]: self._row_to_entry(row) for row in rows}

    def _row_to_entry(self, row: aiosqlite.Row) -> ExerciseHistoryEntry:
        """Convert a database row to an ExerciseHistoryEntry."""
        return ExerciseHistoryEntry.from_dict(
            {
                "exercise_id": row["exercise_id"],
                "exercise_name": row["exercise_name"],
                "last_weight_kg": row["last_weight_kg"],
                "last_reps": json.loads(row["last_reps"]),
                "outcome": json.loads(row["outcome"]),
                "last_avg_rest_seconds": row["last_avg_rest_seconds"],
                "prescribed_rest_seconds": row["prescribed_rest_seconds"],
                "prescribed_sets": row["prescribed_sets"],
                "prescribed_reps": row["prescribed_reps"],
            }
        )


class PainLogRepository:
    """Repository for pain reports."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    @staticmethod
    async def _insert(db: aiosqlite.Connection, log: PainLog) -> int:
        data = log.to_dict()
        cursor = await db.execute(
            """
            INSERT INTO pain_logs (user_id, zone, level, context, exercise_name, date)
            VALUES (?, ?, ?, ?, ?, COALESCE(?, CURRENT_TIMESTAMP))
            """,
            (
                data["user_id"],
                data["zone"],
                data["level"],
                data["context"],
                data["exercise_name"],
                data["date"],
            ),
        )
        return cursor.lastrowid

    async def create(self, log: PainLog) -> int:
        """Store a pain report."""
        async with aiosqlite.connect(self.db_path) as db:
            log_id = await self._insert(db, log)
            await db.commit()
            return log_id

    async def list_for_user(self, user_id: int) -> list[PainLog]:
        """List a user's pain reports, newest first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM pain_logs WHERE user_id = ? ORDER BY date DESC, id DESC",
                (user_id,),
            )
            rows = await cursor.fetchall()
            return [
                PainLog.from_dict(
                    {
                        "user_id": row["user_id"],
                        "zone": row["zone"],
                        "level": row["level"],
                        "context": row["context"],
                        "exercise_name": row["exercise_name"],
                        "date": row["date"],
                    },
                    id=row["id"],
                )
                for row in rows
            ]


class TrainingPhaseRepository:
    """Repository for training phase periods."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get_current(self, user_id: int) -> PhaseRecord | None:
        """The open phase for a user, if any."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM training_phases
                WHERE user_id = ? AND ended_at IS NULL
                ORDER BY id DESC LIMIT 1
                """,
                (user_id,),
            )
            row = await cursor.fetchone()
            return self._row_to_phase(row) if row else None

    async def get_previous(self, user_id: int) -> TrainingPhase | None:
        """The most recent closed phase that was not a deload."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                SELECT phase FROM training_phases
                WHERE user_id = ? AND ended_at IS NOT NULL AND phase != ?
                ORDER BY id DESC LIMIT 1
                """,
                (user_id, TrainingPhase.DELOAD.value),
            )
            row = await cursor.fetchone()
            return TrainingPhase(row[0]) if row else None

    async def start_phase(self, user_id: int, phase: TrainingPhase) -> int:
        """Close the open phase and start a new one."""
        now = datetime.now().isoformat()
        async with aiosqlite.connect(self.db_path) as db:
            try:
                await db.execute(
                    "UPDATE training_phases SET ended_at = ? WHERE user_id = ? AND ended_at IS NULL",
                    (now, user_id),
                )
                cursor = await db.execute(
                    """
                    INSERT INTO training_phases (user_id, phase, started_at, week_count)
                    VALUES (?, ?, ?, 0)
                    """,
                    (user_id, phase.value, now),
                )
                await db.commit()
            except aiosqlite.Error:
                await db.rollback()
                raise
            return cursor.lastrowid

    async def set_week_count(self, phase_id: int, week_count: int) -> None:
        """Update how many weeks a phase has lasted."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                "UPDATE training_phases SET week_count = ? WHERE id = ?",
                (week_count, phase_id),
            )
            await db.commit()

    def _row_to_phase(self, row: aiosqlite.Row) -> PhaseRecord:
        """Convert a database row to a PhaseRecord."""
        return PhaseRecord.from_dict(
            {
                "user_id": row["user_id"],
                "phase": row["phase"],
                "started_at": row["started_at"],
                "ended_at": row["ended_at"],
                "week_count": row["week_count"],
            },
            id=row["id"],
        )
