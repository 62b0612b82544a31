"""Database engine setup and initialization."""

import json
import logging
from pathlib import Path

import aiosqlite

from ..config import DB_FILENAME, get_data_dir
from ..models.exercises import Exercise

logger = logging.getLogger(__name__)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_FILENAME


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        await db.execute("""
            CREATE TABLE IF NOT EXISTS user_profiles (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                days_per_week INTEGER NOT NULL,
                minutes_per_session INTEGER DEFAULT 60,
                goals TEXT DEFAULT '[]',
                height_cm REAL,
                weight_kg REAL,
                age INTEGER,
                sex TEXT,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS health_conditions (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                body_zone TEXT NOT NULL,
                pain_level INTEGER NOT NULL,
                label TEXT DEFAULT '',
                diagnosis TEXT DEFAULT '',
                since TEXT DEFAULT '',
                notes TEXT DEFAULT '',
                is_active INTEGER DEFAULT 1,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                FOREIGN KEY (user_id) REFERENCES user_profiles(id)
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS gym_equipment (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                name TEXT NOT NULL,
                is_available INTEGER DEFAULT 1,
                notes TEXT DEFAULT '',
                UNIQUE (user_id, name),
                FOREIGN KEY (user_id) REFERENCES user_profiles(id)
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS available_weights (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                weight_kg REAL NOT NULL,
                weight_type TEXT DEFAULT 'dumbbell',
                is_available INTEGER DEFAULT 1,
                FOREIGN KEY (user_id) REFERENCES user_profiles(id)
            )
        """)

        # Catalog ids are stable, so the primary key is not autoincrement
        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercises (
                id INTEGER PRIMARY KEY,
                name TEXT UNIQUE NOT NULL,
                category TEXT NOT NULL,
                primary_muscles TEXT NOT NULL,
                secondary_muscles TEXT DEFAULT '[]',
                equipment_needed TEXT DEFAULT '[]',
                contraindications TEXT DEFAULT '[]',
                alternatives TEXT DEFAULT '[]',
                instructions TEXT DEFAULT '',
                is_rehab INTEGER DEFAULT 0,
                rehab_target TEXT,
                tags TEXT DEFAULT '[]'
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_programs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                name TEXT NOT NULL,
                type TEXT NOT NULL,
                sessions TEXT NOT NULL,
                is_active INTEGER DEFAULT 1,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                FOREIGN KEY (user_id) REFERENCES user_profiles(id)
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS workout_sessions (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                program_id INTEGER NOT NULL,
                session_name TEXT NOT NULL,
                completed_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                FOREIGN KEY (user_id) REFERENCES user_profiles(id),
                FOREIGN KEY (program_id) REFERENCES workout_programs(id)
            )
        """)

        # Latest performance only: one row per user and exercise
        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercise_history (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                exercise_id INTEGER NOT NULL,
                exercise_name TEXT DEFAULT '',
                last_weight_kg REAL NOT NULL,
                last_reps TEXT NOT NULL,
                outcome TEXT NOT NULL,
                last_avg_rest_seconds REAL,
                prescribed_rest_seconds INTEGER,
                prescribed_sets INTEGER,
                prescribed_reps INTEGER,
                date TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                UNIQUE (user_id, exercise_id),
                FOREIGN KEY (user_id) REFERENCES user_profiles(id),
                FOREIGN KEY (exercise_id) REFERENCES exercises(id)
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS pain_logs (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                zone TEXT NOT NULL,
                level INTEGER NOT NULL,
                context TEXT NOT NULL,
                exercise_name TEXT,
                date TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                FOREIGN KEY (user_id) REFERENCES user_profiles(id)
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS training_phases (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                user_id INTEGER NOT NULL,
                phase TEXT NOT NULL,
                started_at TIMESTAMP NOT NULL,
                ended_at TIMESTAMP,
                week_count INTEGER DEFAULT 0,
                FOREIGN KEY (user_id) REFERENCES user_profiles(id)
            )
        """)

        # Create indexes for common queries
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_health_conditions_user
            ON health_conditions(user_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_available_weights_user
            ON available_weights(user_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_programs_user
            ON workout_programs(user_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_workout_sessions_user_date
            ON workout_sessions(user_id, completed_at)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_exercise_history_user_exercise
            ON exercise_history(user_id, exercise_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_pain_logs_user_date
            ON pain_logs(user_id, date)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_training_phases_user
            ON training_phases(user_id)
        """)

        await db.commit()


async def seed_exercises(
    db_path: Path | None = None, exercises: list[Exercise] | None = None
) -> int:
    """Seed the exercise catalog.

    Idempotent: existing ids are left untouched. Returns the number of
    exercises in the table afterwards.
    """
    if exercises is None:
        from ..models.exercises import COMMON_EXERCISES

        exercises = COMMON_EXERCISES
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        for exercise in exercises:
            data = exercise.to_dict()
            await db.execute(
                """
                INSERT OR IGNORE INTO exercises
                (id, name, category, primary_muscles, secondary_muscles, equipment_needed,
                 contraindications, alternatives, instructions, is_rehab, rehab_target, tags)
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    exercise.id,
                    data["name"],
                    data["category"],
                    json.dumps(data["primary_muscles"]),
                    json.dumps(data["secondary_muscles"]),
                    json.dumps(data["equipment_needed"]),
                    json.dumps(data["contraindications"]),
                    json.dumps(data["alternatives"]),
                    data["instructions"],
                    int(data["is_rehab"]),
                    data["rehab_target"],
                    json.dumps(data["tags"]),
                ),
            )
        await db.commit()

        cursor = await db.execute("SELECT COUNT(*) FROM exercises")
        (count,) = await cursor.fetchone()

    logger.info("Exercise catalog holds %d exercises", count)
    return count
